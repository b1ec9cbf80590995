"""Per-message decoders.

Importing this package registers every decoder with ``nmea0183.dispatch``.
"""

from nmea0183.messages import dtm, gbs, gga, gll, gns, grs, gsa, gst, gsv, polls, rmc, txt, vlw, vtg, zda

__all__ = ["dtm", "gbs", "gga", "gll", "gns", "grs", "gsa", "gst", "gsv", "polls", "rmc", "txt", "vlw", "vtg", "zda"]
