"""
Seed material from the operating system's entropy source.
"""

import io
import os

from iorand import ByteStreamSource


class _URandomStream(io.RawIOBase):
    """Unbuffered binary stream over os.urandom()."""

    def readable(self):
        return True

    def readinto(self, b):
        data = os.urandom(len(b))
        b[:len(data)] = data
        return len(data)


def generate_seed(n):
    """
    Return a list of n 64-bit words read from the OS entropy source.

    The result is suitable for seed_from_slice(). Raises the latched stream
    error if the entropy source could not deliver every word.
    """
    stream = io.BufferedReader(_URandomStream(), buffer_size=max(8 * n, 8))
    src = ByteStreamSource(stream, 'little')
    words = [src.uint64() for _ in range(n)]
    if src.err is not None:
        raise OSError("entropy source failed while generating seed") from src.err
    return words
