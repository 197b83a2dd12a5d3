"""
SplitMix64, the fixed-increment version of Java 8's SplittableRandom.

Period: 2^64. State size: 64 bits.

Very fast and passes BigCrush. Every multi-word generator in this package
uses it to expand a scalar seed into a full state.
"""

from .base import Source, MASK64


GOLDEN_GAMMA = 0x9E3779B97F4A7C15


class SplitMix64(Source):
    """SplitMix64 generator over a single 64-bit word."""

    name = "splitmix64"

    def __init__(self, seed=0):
        self.state = 0
        self.seed(seed)

    def seed(self, seed):
        self.state = seed & MASK64

    def seed_from_slice(self, words):
        """Use the first word as the seed, or 0 for an empty sequence."""
        words = list(words)
        self.seed(words[0] if words else 0)

    def uint64(self):
        self.state = (self.state + GOLDEN_GAMMA) & MASK64
        z = self.state
        z = ((z ^ (z >> 30)) * 0xBF58476D1CE4E5B9) & MASK64
        z = ((z ^ (z >> 27)) * 0x94D049BB133111EB) & MASK64
        return z ^ (z >> 31)

    def getstate(self):
        return (self.state,)

    def setstate(self, state):
        (self.state,) = state
        self.state &= MASK64
