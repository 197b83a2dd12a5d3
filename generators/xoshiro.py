"""
xoshiro256+ and xoshiro256** by David Blackman and Sebastiano Vigna.

Period: 2^256-1. State size: 256 bits.

xoshiro256** is the all-purpose generator with a state large enough for
any parallel application. xoshiro256+ is the faster choice for
floating-point numbers; its three lowest bits may fail linearity tests.
"""

from .base import StateSource, MASK64, rotl64
from .seeding import seed_from_slice
from .splitmix64 import SplitMix64
from .xorshift import DEFAULT_XORSHIFT_SEED


class Xoshiro256(StateSource, state_words=4):
    """Shared state handling for the two xoshiro256 scramblers."""

    def seed(self, seed):
        sm = SplitMix64(seed)
        for i in range(4):
            self.state[i] = sm.uint64()

    def seed_from_slice(self, words):
        seed_from_slice(self.state, words)
        if not any(self.state):
            self.seed(DEFAULT_XORSHIFT_SEED)

    def _advance(self):
        s = self.state
        t = (s[1] << 17) & MASK64

        s[2] ^= s[0]
        s[3] ^= s[1]
        s[1] ^= s[2]
        s[0] ^= s[3]

        s[2] ^= t

        s[3] = rotl64(s[3], 45)


class Xoshiro256Plus(Xoshiro256):
    """xoshiro256+ generator."""

    name = "xoshiro256+"

    def uint64(self):
        result = (self.state[0] + self.state[3]) & MASK64
        self._advance()
        return result


class Xoshiro256StarStar(Xoshiro256):
    """xoshiro256** generator."""

    name = "xoshiro256**"

    def uint64(self):
        result = (rotl64((self.state[1] * 5) & MASK64, 7) * 9) & MASK64
        self._advance()
        return result
