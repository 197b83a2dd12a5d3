"""
Scrambled xorshift generators by George Marsaglia and Sebastiano Vigna.

xorshift64*
    Period: 2^64-1. State size: 64 bits. A good generator when memory is
    tight; otherwise prefer xorshift128+ or xorshift1024*.

xorshift128+
    Period: 2^128-1. State size: 128 bits. Fastest of the series and
    passes BigCrush without systematic errors, but the short period only
    suits mild parallelism. Superseded by xoroshiro128+. The lowest bit is
    an LFSR; use a sign test to extract booleans.

xorshift1024*
    Period: 2^1024-1. State size: 1024 bits (16 words). Fast, top-quality.
    The three lowest bits are LFSRs.

None of these may run from an all-zero state, so a zero scalar seed is
replaced with DEFAULT_XORSHIFT_SEED.
"""

import logging

from .base import StateSource, MASK64
from .seeding import seed_slice, seed_from_slice


logger = logging.getLogger(__name__)

DEFAULT_XORSHIFT_SEED = 89482311


def _nonzero_seed(seed, name):
    seed &= MASK64
    if seed == 0:
        logger.debug("%s: zero seed remapped to %d", name, DEFAULT_XORSHIFT_SEED)
        return DEFAULT_XORSHIFT_SEED
    return seed


class XorShift64Star(StateSource, state_words=1):
    """xorshift64* generator. The state word is the seed itself."""

    name = "xorshift64*"

    def seed(self, seed):
        self.state[0] = _nonzero_seed(seed, self.name)

    def seed_from_slice(self, words):
        words = list(words)
        self.seed(words[0] if words else 0)

    def uint64(self):
        x = self.state[0]
        x ^= x >> 12  # a
        x ^= (x << 25) & MASK64  # b
        x ^= x >> 27  # c
        self.state[0] = x
        return (x * 2685821657736338717) & MASK64


class XorShift128Plus(StateSource, state_words=2):
    """
    xorshift128+ generator.

    Uses the 23/18/5 shift triple of the later reference revision. The
    earlier 23/17/26 variant is not bit-compatible with it.
    """

    name = "xorshift128+"

    def seed(self, seed):
        seed_slice(self.state, _nonzero_seed(seed, self.name))

    def seed_from_slice(self, words):
        seed_from_slice(self.state, words)
        if not any(self.state):
            self.seed(DEFAULT_XORSHIFT_SEED)

    def uint64(self):
        s = self.state
        s1 = s[0]
        s0 = s[1]
        result = (s0 + s1) & MASK64
        s[0] = s0
        s1 ^= (s1 << 23) & MASK64  # a
        s[1] = s1 ^ s0 ^ (s1 >> 18) ^ (s0 >> 5)  # b, c
        return result


class XorShift1024Star(StateSource, state_words=16):
    """xorshift1024* generator over a 16-word ring buffer."""

    name = "xorshift1024*"

    def __init__(self, seed=0):
        self.p = 0
        super().__init__(seed)

    def seed(self, seed):
        seed_slice(self.state, _nonzero_seed(seed, self.name))
        self.p = 0

    def seed_from_slice(self, words):
        seed_from_slice(self.state, words)
        if not any(self.state):
            self.seed(DEFAULT_XORSHIFT_SEED)
        self.p = 0

    def uint64(self):
        s = self.state
        s0 = s[self.p]
        self.p = (self.p + 1) & 15
        s1 = s[self.p]
        s1 ^= (s1 << 31) & MASK64  # a
        s[self.p] = s1 ^ s0 ^ (s1 >> 11) ^ (s0 >> 30)  # b, c
        return (s[self.p] * 1181783497276652981) & MASK64

    def getstate(self):
        return (tuple(self.state), self.p)

    def setstate(self, state):
        words, p = state
        super().setstate(words)
        self.p = p & 15
