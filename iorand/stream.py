"""
Source adapter over a binary stream.

ByteStreamSource needs no seeding and can read from any object with a
read(n) method, e.g. an open file on /dev/urandom. The adapter does not
buffer, so wrapping unbuffered streams in io.BufferedReader is recommended.

Reading can fail. uint64() never raises: on error it returns 0 and stores
the exception in the err attribute, which callers should check after use.
"""

import logging

from generators.base import Source


logger = logging.getLogger(__name__)

BYTE_ORDERS = ("little", "big")


class ByteStreamSource(Source):
    """Source reading 8 bytes per value from a binary stream."""

    name = "iorand"

    def __init__(self, stream, byteorder="little"):
        if byteorder not in BYTE_ORDERS:
            raise ValueError(f"byteorder must be one of {BYTE_ORDERS}, got {byteorder!r}")
        self.stream = stream
        self.byteorder = byteorder
        self.err = None  # latest stream error

    def seed(self, seed):
        """No-op: the stream provides its own entropy."""

    def seed_from_slice(self, words):
        """No-op: the stream provides its own entropy."""

    def _read_full(self, n):
        buf = b''
        while len(buf) < n:
            chunk = self.stream.read(n - len(buf))
            if not chunk:
                break
            buf += chunk
        return buf

    def uint64(self):
        """Return the next 8 bytes as an integer, or 0 and latch err on failure."""
        try:
            data = self._read_full(8)
        except (OSError, ValueError, TypeError) as e:
            self.err = e
            logger.warning("%s: stream read failed: %s", self.name, e)
            return 0
        if len(data) < 8:
            self.err = EOFError(f"short read: got {len(data)} of 8 bytes")
            logger.warning("%s: %s", self.name, self.err)
            return 0
        return int.from_bytes(data, self.byteorder)

    def getstate(self):
        raise TypeError(f"{self.name} reads from a stream and has no state to save")

    def setstate(self, state):
        raise TypeError(f"{self.name} reads from a stream and has no state to restore")
