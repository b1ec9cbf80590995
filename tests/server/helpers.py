"""Helper factories for server tests."""

from nmea0183 import Sentence, decode

GGA = "$GPGGA,092725.00,4717.11399,N,00833.91590,E,1,08,1.01,499.6,M,48.0,M,,*5B\r\n"
GSV = "$GPGSV,3,3,11,22,42,067,42,24,14,311,43,27,05,244,00*4D\r\n"
RMC = "$GPRMC,083559.00,A,4717.11437,N,00833.91522,E,0.004,77.52,091202,,,A,V*2D\r\n"
GBQ = "!GPGBQ,RMC*33\r\n"


def make_sentence(line: str = GGA) -> Sentence:
    return decode(line)
