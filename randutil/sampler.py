"""
Derived random values on top of any 64-bit source.
"""

from generators.base import Source, MASK64, MASK32


class Rand64(Source):
    """
    Unbiased bounded integers, floats, permutations and bulk output.

    Rand64 holds a reference to a source it does not own; all state lives
    in that source. Since Rand64 is itself a Source it can be used anywhere
    the wrapped generator could.
    """

    def __init__(self, source):
        self.source = source

    @property
    def name(self):
        return self.source.name

    def seed(self, seed):
        self.source.seed(seed)

    def seed_from_slice(self, words):
        self.source.seed_from_slice(words)

    def uint64(self):
        return self.source.uint64()

    def getstate(self):
        return self.source.getstate()

    def setstate(self, state):
        self.source.setstate(state)

    def uint64n(self, n):
        """
        Return an integer in [0, n).

        Powers of two are masked. Other ranges use rejection sampling so that
        the result carries no modulo bias. n must be in [1, 2**64).
        """
        if n <= 0 or n > MASK64:
            raise ValueError(f"n must be in [1, 2**64), got {n}")
        if n & (n - 1) == 0:  # power of two, can mask
            return self.uint64() & (n - 1)
        limit = MASK64 - (1 << 64) % n
        v = self.uint64()
        while v > limit:
            v = self.uint64()
        return v % n

    def uint32n(self, n):
        """Return an integer in [0, n) drawn from 32-bit values. n must be in [1, 2**32)."""
        if n <= 0 or n > MASK32:
            raise ValueError(f"n must be in [1, 2**32), got {n}")
        if n & (n - 1) == 0:
            return self.uint32() & (n - 1)
        limit = MASK32 - (1 << 32) % n
        v = self.uint32()
        while v > limit:
            v = self.uint32()
        return v % n

    def uintn(self, n):
        """Return an integer in [0, n), using 32-bit draws when n allows it."""
        if n <= MASK32:
            return self.uint32n(n)
        return self.uint64n(n)

    def float64(self):
        """Return a float in [0.0, 1.0) with 53 bits of precision."""
        # 2**53 is the largest power of two n for which (n - 1) / n != 1.0
        return self.uint64n(1 << 53) / (1 << 53)

    def float32(self):
        """Return a float in [0.0, 1.0) with 24 bits of precision."""
        return self.uint64n(1 << 24) / (1 << 24)

    def uperm(self, n):
        """Return a uniformly random permutation of range(n) as a list."""
        if n < 0:
            raise ValueError(f"permutation length must be non-negative, got {n}")
        m = [0] * n
        for i in range(n):
            j = self.uintn(i + 1)
            m[i] = m[j]
            m[j] = i
        return m

    def bulk_uint64(self, n):
        """Return a list of n successive 64-bit values."""
        return [self.uint64() for _ in range(n)]

    def fill(self, buf):
        """Overwrite every item of a mutable sequence with a 64-bit value."""
        for i in range(len(buf)):
            buf[i] = self.uint64()
        return buf

    def readinto(self, buf):
        """
        Fill a writable bytes-like object with random bytes.

        Each 64-bit value is split little-endian; a trailing partial word
        still consumes a full value. Returns the number of bytes written.
        """
        view = memoryview(buf).cast('B')
        n = len(view)
        for pos in range(0, n, 8):
            chunk = self.uint64().to_bytes(8, 'little')
            end = min(pos + 8, n)
            view[pos:end] = chunk[:end - pos]
        return n

    def read(self, nbytes):
        """Return nbytes random bytes."""
        buf = bytearray(nbytes)
        self.readinto(buf)
        return bytes(buf)
