"""NMEAReader: gpsd client streaming decoded NMEA sentences.

Connects to a local gpsd instance over TCP (localhost:2947) instead of
opening the serial port directly. This allows the reader to coexist with
gpsd, which may also feed the receiver to Chrony for time synchronization.

Reading strategy:
    The WATCH command enables gpsd's raw NMEA mode, in which gpsd passes the
    receiver's sentences through line by line. gpsd still opens the stream
    with a few JSON status objects (VERSION, DEVICES, WATCH); lines starting
    with '{' are skipped.

    Each sentence is decoded independently. A sentence that fails to decode
    is logged at WARNING level and skipped, so one corrupt line never ends
    the stream. ``decode_lines`` applies the same policy to any iterable of
    lines, such as an NMEA log file.
"""

import contextlib
import logging
import socket
from collections.abc import Iterable, Iterator
from types import TracebackType
from typing import IO, Any

from nmea0183.config import DecodeOptions
from nmea0183.errors import NMEAError
from nmea0183.sentence import Sentence, decode

__all__ = ["NMEAReader", "decode_lines"]

logger = logging.getLogger(__name__)

# --- gpsd connection defaults -------------------------------------------------

_HOST = "localhost"
_PORT = 2947
_TIMEOUT = 2.0  # socket read timeout; determines maximum cancel() latency

_WATCH_CMD = b'?WATCH={"enable":true,"nmea":true}\n'

# readline() and str.splitlines() consume the CR LF terminator.
_LINE_OPTIONS = DecodeOptions(require_terminator=False)

_JSON_PREFIX = "{"


# --- helpers ------------------------------------------------------------------


def _decode_or_log(line: str, options: DecodeOptions) -> Sentence | None:
    """Decode one stripped line; log and return ``None`` if it is rejected."""
    try:
        return decode(line, options)
    except NMEAError as error:
        logger.warning("Skipping sentence (%s stage): %s: %r", error.stage, error, line)
        return None


def decode_lines(
    lines: Iterable[str],
    options: DecodeOptions = _LINE_OPTIONS,
) -> Iterator[Sentence]:
    """Decode NMEA lines, skipping blank lines and sentences that fail.

    Surrounding whitespace, including the line terminator, is stripped
    before decoding. Rejected sentences are logged at WARNING level.

    Args:
        lines: Any iterable of text lines, e.g. an open log file.
        options: Decoding policy; by default the terminator is not required.

    Yields:
        Each successfully decoded ``Sentence``, in input order.

    Example::

        with open("drive.nmea") as log:
            for sentence in decode_lines(log):
                process(sentence)
    """
    for raw in lines:
        line = raw.strip()
        if not line:
            continue
        sentence = _decode_or_log(line, options)
        if sentence is not None:
            yield sentence


# --- public API ---------------------------------------------------------------


class NMEAReader:
    """Context manager for reading decoded sentences from gpsd.

    Two consumption patterns are supported:

    Continuous iteration (recommended for server backends)::

        with NMEAReader() as reader:
            for sentence in reader:
                process(sentence)

    Single read (useful for one-shot or polling scenarios)::

        with NMEAReader() as reader:
            sentence = reader.read()

    Args:
        host: gpsd host (default: ``"localhost"``).
        port: gpsd TCP port (default: ``2947``).
        options: Decoding policy applied to every line.
    """

    def __init__(
        self,
        host: str = _HOST,
        port: int = _PORT,
        options: DecodeOptions = _LINE_OPTIONS,
    ) -> None:
        """Store connection parameters; the socket is opened in ``__enter__``."""
        self._host = host
        self._port = port
        self._options = options
        self._sock: socket.socket | None = None
        self._stream: IO[Any] | None = None
        self._cancelled: bool = False

    def __enter__(self) -> "NMEAReader":
        """Open the gpsd connection and enable raw NMEA output."""
        self._sock = socket.create_connection((self._host, self._port))
        try:
            self._sock.settimeout(_TIMEOUT)
            self._sock.sendall(_WATCH_CMD)
            self._stream = self._sock.makefile("rb")
        except OSError:
            self._sock.close()
            self._sock = None
            raise
        self._cancelled = False
        logger.info("Connected to gpsd at %s:%d", self._host, self._port)
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        """Close the gpsd connection."""
        if self._stream is not None:
            self._stream.close()
            self._stream = None
        if self._sock is not None:
            self._sock.close()
            self._sock = None

    def cancel(self) -> None:
        """Cancel pending blocking reads gracefully.

        Sets the cancellation flag and shuts down the socket so that any
        in-progress ``readline()`` unblocks immediately and raises
        ``EOFError``, allowing background threads to exit without waiting
        for the next timeout cycle.
        """
        self._cancelled = True
        if self._sock is not None:
            with contextlib.suppress(OSError):
                self._sock.shutdown(socket.SHUT_RDWR)

    def _recv_raw(self, stream: IO[Any]) -> bytes | None:
        """Read one raw line from gpsd; returns ``None`` on timeout retry.

        Raises:
            EOFError: If the stream ended or the connection was closed.
        """
        try:
            raw: bytes = stream.readline()
            if not raw:
                raise EOFError("gpsd stream ended.")
            return raw
        except TimeoutError:
            return None
        except OSError as e:
            raise EOFError("gpsd connection closed.") from e

    def _read_line(self) -> str | None:
        """Read and decode one text line; returns ``None`` on timeout retry.

        Raises:
            RuntimeError: If called outside a ``with`` block.
            EOFError: If cancelled, or the stream ended or was closed.
        """
        if self._stream is None:
            raise RuntimeError("NMEAReader must be used as a context manager.")
        raw = self._recv_raw(self._stream)
        if raw is None and self._cancelled:
            raise EOFError("gpsd read cancelled.")
        if raw is None:
            return None
        # Non-ASCII bytes cannot belong to a sentence; the checksum rejects them.
        return raw.decode("ascii", errors="replace").strip()

    def _dispatch(self, line: str) -> Sentence | None:
        """Decode one line; ``None`` for gpsd JSON, blank or rejected lines."""
        if not line:
            return None
        if line.startswith(_JSON_PREFIX):
            logger.debug("Ignoring gpsd status line: %s", line)
            return None
        return _decode_or_log(line, self._options)

    def read(self) -> Sentence:
        """Block until the next decodable sentence and return it.

        Raises:
            RuntimeError: If called outside a ``with`` block.
            EOFError: If the read is cancelled or the stream ends.
        """
        if self._sock is None:
            raise RuntimeError("NMEAReader must be used as a context manager.")
        while True:
            line = self._read_line()
            if line is None:
                continue
            sentence = self._dispatch(line)
            if sentence is not None:
                return sentence

    def __iter__(self) -> Iterator[Sentence]:
        """Yield decoded sentences indefinitely.

        Iteration continues until the caller breaks the loop or an exception
        propagates out (e.g. ``EOFError`` on cancellation). ``StopIteration``
        is never raised.

        Yields:
            ``Sentence`` for each line that decodes.
        """
        while True:
            yield self.read()
