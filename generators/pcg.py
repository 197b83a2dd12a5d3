"""
PCG XSL RR 128/64 (LCG), a permuted congruential generator.

See "PCG: A Family of Simple Fast Space-Efficient Statistically Good
Algorithms for Random Number Generation", Melissa E. O'Neill, Harvey Mudd
College, https://www.cs.hmc.edu/tr/hmc-cs-2014-0905.pdf

Period: 2^128. State size: 128 bits.
"""

from .base import StateSource, MASK64, rotr64
from .seeding import seed_from_slice
from .splitmix64 import SplitMix64


MUL_HI = 2549297995355413924
MUL_LO = 4865540595714422341
INC_HI = 6364136223846793005
INC_LO = 1442695040888963407

MULTIPLIER = (MUL_HI << 64) | MUL_LO
INCREMENT = (INC_HI << 64) | INC_LO
MASK128 = (1 << 128) - 1


class PCG64(StateSource, state_words=2):
    """PCG XSL RR 128/64 generator. state holds the [LO, HI] halves."""

    name = "pcg-xsl-rr-128/64"

    @property
    def lo(self):
        """Low 64 bits of the 128-bit state."""
        return self.state[0]

    @property
    def hi(self):
        """High 64 bits of the 128-bit state."""
        return self.state[1]

    def seed(self, seed):
        sm = SplitMix64(seed)
        self.state[0] = sm.uint64()
        self.state[1] = sm.uint64()

    def seed_from_slice(self, words):
        seed_from_slice(self.state, words)

    def uint64(self):
        s = (self.hi << 64) | self.lo
        s = (s * MULTIPLIER + INCREMENT) & MASK128
        lo = s & MASK64
        hi = s >> 64
        self.state[0] = lo
        self.state[1] = hi

        # hi ^ lo rotated right by the 6 high bits of the new state
        return rotr64(hi ^ lo, hi >> 58)
