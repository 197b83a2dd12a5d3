"""
random.Random adapter for 64-bit sources.

SourceRandom plugs any Source into the standard library's random API, so
randrange(), shuffle(), choice(), gauss() and friends run on the wrapped
generator:

    rng = SourceRandom(Xoshiro256StarStar(), seed=42)
    rng.shuffle(deck)
"""

import hashlib
import random

from generators.base import MASK64
from generators.registry import new_source
from .seed import generate_seed


RECIP_BPF = 2 ** -53


def _int_to_words(n):
    """Split a non-negative int into little-endian 64-bit words."""
    words = []
    while n:
        words.append(n & MASK64)
        n >>= 64
    return words or [0]


class SourceRandom(random.Random):
    """random.Random whose randomness comes from a Source."""

    def __init__(self, source=None, *, seed=None):
        self.source = source if source is not None else new_source()
        self.gauss_next = None
        if seed is not None:
            self.seed(seed)

    def seed(self, a=None, version=2):
        """
        Seed the wrapped source.

        Ints in [0, 2**64) go straight to source.seed(). Larger or negative
        ints, str, bytes and bytearray are turned into a word sequence for
        source.seed_from_slice(). None seeds from the OS entropy source.
        """
        if a is None:
            words = generate_seed(4)
        elif isinstance(a, int):
            if 0 <= a <= MASK64:
                self.source.seed(a)
                self.gauss_next = None
                return
            words = _int_to_words(abs(a))
        elif isinstance(a, (str, bytes, bytearray)):
            if isinstance(a, str):
                a = a.encode('utf-8')
            words = _int_to_words(int.from_bytes(hashlib.sha512(a).digest(), 'big'))
        else:
            raise TypeError(
                'The only supported seed types are: None,\n'
                'int, str, bytes, and bytearray.'
            )

        seed_from_slice = getattr(self.source, 'seed_from_slice', None)
        if seed_from_slice is not None:
            seed_from_slice(words)
        else:
            self.source.seed(words[0])
        self.gauss_next = None

    def random(self):
        """Return a float in [0.0, 1.0) from the 53 high bits of one draw."""
        return (self.source.uint64() >> 11) * RECIP_BPF

    def getrandbits(self, k):
        """Return a non-negative int with k random bits."""
        if k < 0:
            raise ValueError('number of bits must be non-negative')
        full, rem = divmod(k, 64)
        x = 0
        for _ in range(full):
            x = (x << 64) | self.source.uint64()
        if rem:
            x = (x << rem) | (self.source.uint64() >> (64 - rem))
        return x

    def int63(self):
        return self.source.int63()

    def getstate(self):
        return (self.source.getstate(), self.gauss_next)

    def __reduce__(self):
        # the source travels by value so unpickling keeps its algorithm
        return self.__class__, (self.source,), self.getstate()

    def setstate(self, state):
        source_state, self.gauss_next = state
        self.source.setstate(source_state)
