"""
xoroshiro128+ and xoroshiro128** by David Blackman and Sebastiano Vigna.

Period: 2^128-1. State size: 128 bits.

xoroshiro128** is the all-purpose small-state generator. xoroshiro128+ is
slightly faster and meant for floating-point output: its four lowest bits
may fail linearity tests, so use the upper bits and a sign test for
booleans.
"""

from .base import StateSource, MASK64, rotl64
from .seeding import seed_from_slice
from .splitmix64 import SplitMix64
from .xorshift import DEFAULT_XORSHIFT_SEED


class Xoroshiro128(StateSource, state_words=2):
    """Shared state handling for the two xoroshiro128 scramblers."""

    def seed(self, seed):
        sm = SplitMix64(seed)
        self.state[0] = sm.uint64()
        self.state[1] = sm.uint64()

    def seed_from_slice(self, words):
        seed_from_slice(self.state, words)
        if not any(self.state):
            self.seed(DEFAULT_XORSHIFT_SEED)

    def _advance(self):
        s0, s1 = self.state
        s1 ^= s0
        self.state[0] = rotl64(s0, 24) ^ s1 ^ ((s1 << 16) & MASK64)
        self.state[1] = rotl64(s1, 37)


class Xoroshiro128Plus(Xoroshiro128):
    """xoroshiro128+ generator."""

    name = "xoroshiro128+"

    def uint64(self):
        result = (self.state[0] + self.state[1]) & MASK64
        self._advance()
        return result


class Xoroshiro128StarStar(Xoroshiro128):
    """xoroshiro128** generator."""

    name = "xoroshiro128**"

    def uint64(self):
        result = (rotl64((self.state[0] * 5) & MASK64, 7) * 9) & MASK64
        self._advance()
        return result
