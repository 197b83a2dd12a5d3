"""
Base classes for 64-bit pseudo-random number generators.
"""

from abc import ABC, abstractmethod


MASK64 = (1 << 64) - 1
MASK32 = (1 << 32) - 1


def rotl64(x, k):
    """Rotate a 64-bit word left by k bits."""
    k &= 63
    return ((x << k) & MASK64) | (x >> (64 - k))


def rotr64(x, k):
    """Rotate a 64-bit word right by k bits."""
    return rotl64(x, 64 - (k & 63))


class Source(ABC):
    """
    Abstract source of uniformly distributed 64-bit values.

    Any generator implementing seed() and uint64() can be used wherever a
    Source is expected: wrapped in a randutil.Rand64, plugged into
    randutil.SourceRandom, or used on its own.
    """

    name = None

    @abstractmethod
    def seed(self, seed):
        """Initialize the generator to a deterministic state."""
        raise NotImplementedError

    @abstractmethod
    def uint64(self):
        """Return a pseudo-random integer in [0, 2**64)."""
        raise NotImplementedError

    def int63(self):
        """Return a non-negative pseudo-random 63-bit integer."""
        return self.uint64() >> 1

    def uint32(self):
        """Return the high 32 bits of the next 64-bit value."""
        return self.uint64() >> 32

    def __repr__(self):
        return f"<{type(self).__name__} {self.name}>"


class StateSource(Source):
    """
    Source backed by a fixed-size list of 64-bit words.

    Subclasses declare their state size with a class keyword:

        class Xoshiro256Plus(StateSource, state_words=4): ...
    """

    state_words = None

    def __init_subclass__(cls, state_words=None, **kwargs):
        """Record the state size of a concrete generator."""
        super().__init_subclass__(**kwargs)
        if state_words is not None:
            cls.state_words = state_words

    def __init__(self, seed=0):
        self.state = [0] * self.state_words
        self.seed(seed)

    @abstractmethod
    def seed_from_slice(self, words):
        """Initialize the state from an arbitrary-length sequence of words."""
        raise NotImplementedError

    def getstate(self):
        """Return a snapshot of the generator state."""
        return tuple(self.state)

    def setstate(self, state):
        """Restore a snapshot returned by getstate()."""
        if len(state) != self.state_words:
            raise ValueError(
                f"{self.name} expects {self.state_words} state words, got {len(state)}"
            )
        self.state = [w & MASK64 for w in state]
