"""Line sources that feed raw NMEA sentences into the decoder.

Two kinds of source are supported:

* Files and other iterables of text lines, through ``read_lines`` and
  ``decode_lines``.
* A local gpsd instance, through ``NMEAReader``. gpsd is put into raw NMEA
  watch mode, in which it relays every sentence the receiver emits over its
  TCP client socket (localhost:2947). gpsd interleaves its own JSON status
  objects (VERSION, DEVICES, WATCH) with the sentences; those are skipped.

Every line that fails to decode is logged and skipped. A bad sentence never
ends the stream.
"""

import contextlib
import logging
import socket
from collections.abc import Iterable, Iterator
from pathlib import Path
from types import TracebackType
from typing import IO, Any

from gpsnmea.nmea import ParseError, Sample, parse

__all__ = ["NMEAReader", "decode_line", "decode_lines", "read_lines"]

logger = logging.getLogger(__name__)

# --- gpsd connection defaults -------------------------------------------------

_HOST = "localhost"
_PORT = 2947
_TIMEOUT = 2.0  # socket read timeout; determines maximum cancel() latency

_WATCH_CMD = b'?WATCH={"enable":true,"nmea":true}\n'


# --- line helpers -------------------------------------------------------------


def read_lines(path: str | Path) -> Iterator[str]:
    """Yield the stripped, non-blank lines of a text file.

    Raises:
        OSError: If the file cannot be opened.
    """
    with open(path, encoding="ascii", errors="replace") as stream:
        for line in stream:
            line = line.strip()
            if line:
                yield line


def decode_line(line: str) -> Sample | None:
    """Decode one line, logging and returning None if it is rejected."""
    result = parse(line)
    if isinstance(result, ParseError):
        logger.warning("Skipping sentence (%s): %s", result.name, line)
        return None
    return result


def decode_lines(lines: Iterable[str]) -> Iterator[Sample]:
    """Decode a stream of lines, skipping the ones that are rejected.

    Line terminators are stripped and blank lines are ignored.

    Example:
        >>> list(decode_lines(["$GPZDA,201530.00,04,07,2002,00,00*60", "junk"]))
        [ZDAData(type='GPZDA', utc_time='201530.00', ...)]
    """
    for line in lines:
        line = line.strip()
        if not line:
            continue
        sample = decode_line(line)
        if sample is not None:
            yield sample


# --- public API ---------------------------------------------------------------


class NMEAReader:
    """Context manager for reading decoded NMEA sentences from gpsd.

    Two consumption patterns are supported:

    Continuous iteration (recommended for server backends)::

        with NMEAReader() as gnss:
            for sample in gnss:
                process(sample)

    Single read (useful for one-shot or polling scenarios)::

        with NMEAReader() as gnss:
            sample = gnss.read()

    Args:
        host: gpsd host (default: ``"localhost"``).
        port: gpsd TCP port (default: ``2947``).
    """

    def __init__(
        self,
        host: str = _HOST,
        port: int = _PORT,
    ) -> None:
        """Store connection parameters; the socket is opened in ``__enter__``."""
        self._host = host
        self._port = port
        self._sock: socket.socket | None = None
        self._stream: IO[Any] | None = None
        self._cancelled: bool = False

    def __enter__(self) -> "NMEAReader":
        """Open the gpsd connection and enable raw NMEA watch mode."""
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
            logger.info("Disconnected from gpsd at %s:%d", self._host, self._port)

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
        return raw.decode("ascii", errors="replace").strip()

    def _dispatch(self, line: str) -> Sample | None:
        """Decode one line from gpsd, skipping its JSON status objects."""
        if not line:
            return None
        if line.startswith("{"):
            logger.debug("Ignoring gpsd message: %s", line)
            return None
        return decode_line(line)

    def read(self) -> Sample:
        """Block until the next sentence decodes and return it.

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
            sample = self._dispatch(line)
            if sample is not None:
                return sample

    def __iter__(self) -> Iterator[Sample]:
        """Yield decoded samples indefinitely, one per accepted sentence.

        Iteration continues until the caller breaks the loop or an exception
        propagates out (e.g. ``EOFError`` on cancellation). ``StopIteration``
        is never raised.
        """
        while True:
            yield self.read()
