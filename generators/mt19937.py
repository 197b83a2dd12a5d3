"""
64-bit Mersenne Twister (MT19937-64).

Pure Python port of mt19937-64.c by Makoto Matsumoto and Takuji Nishimura.
The state is 312 words. See
http://www.math.sci.hiroshima-u.ac.jp/~m-mat/MT/emt.html

Period: 2^19937-1.
"""

import logging

from .base import StateSource, MASK64


logger = logging.getLogger(__name__)

NN = 312
MM = 156
MATRIX_A = 0xB5026F5AA96619E9
UM = 0xFFFFFFFF80000000  # most significant 33 bits
LM = 0x7FFFFFFF  # least significant 31 bits

MAG01 = (0, MATRIX_A)

DEFAULT_SEED = 5489
INIT_BY_ARRAY_SEED = 19650218


class MT19937_64(StateSource, state_words=NN):
    """
    Mersenne Twister 64-bit generator.

    index is NN + 1 while unseeded (the first draw seeds with DEFAULT_SEED),
    NN once the buffer is exhausted (the next draw twists), and otherwise
    the position of the next word to temper.
    """

    name = "mt19937-64"

    def __init__(self, seed=None):
        self.state = [0] * NN
        self.index = NN + 1
        if seed is not None:
            self.seed(seed)

    def seed(self, seed):
        """
        Linear congruential fill of the state (init_genrand64).

        A zero seed is replaced with DEFAULT_SEED, as in the reference code.
        """
        mt = self.state
        seed &= MASK64
        if seed == 0:
            seed = DEFAULT_SEED

        mt[0] = seed
        for i in range(1, NN):
            mt[i] = (6364136223846793005 * (mt[i - 1] ^ (mt[i - 1] >> 62)) + i) & MASK64
        self.index = NN

    def seed_from_slice(self, words):
        """Seed from a key sequence exactly like init_by_array64."""
        key = [w & MASK64 for w in words] or [0]
        mt = self.state

        self.seed(INIT_BY_ARRAY_SEED)

        i, j = 1, 0
        for _ in range(max(NN, len(key))):
            mt[i] = ((mt[i] ^ (((mt[i - 1] ^ (mt[i - 1] >> 62)) * 3935559000370003845) & MASK64))
                     + key[j] + j) & MASK64  # non linear
            i += 1
            j += 1
            if i >= NN:
                mt[0] = mt[NN - 1]
                i = 1
            if j >= len(key):
                j = 0
        for _ in range(NN - 1):
            mt[i] = ((mt[i] ^ (((mt[i - 1] ^ (mt[i - 1] >> 62)) * 2862933555777941757) & MASK64))
                     - i) & MASK64  # non linear
            i += 1
            if i >= NN:
                mt[0] = mt[NN - 1]
                i = 1

        mt[0] = 1 << 63  # MSB is 1, assuring a non-zero initial array

    def _twist(self):
        """Generate NN words at once."""
        mt = self.state
        for i in range(NN):
            x = (mt[i] & UM) | (mt[(i + 1) % NN] & LM)
            mt[i] = mt[(i + MM) % NN] ^ (x >> 1) ^ MAG01[x & 1]
        self.index = 0

    def uint64(self):
        if self.index >= NN:
            if self.index == NN + 1:
                logger.debug("%s used before seeding, seeding with %d", self.name, DEFAULT_SEED)
                self.seed(DEFAULT_SEED)
            self._twist()

        x = self.state[self.index]
        self.index += 1

        x ^= (x >> 29) & 0x5555555555555555
        x ^= (x << 17) & 0x71D67FFFEDA60000
        x ^= (x << 37) & 0xFFF7EEE000000000
        x ^= x >> 43

        return x

    def getstate(self):
        return (tuple(self.state), self.index)

    def setstate(self, state):
        words, index = state
        super().setstate(words)
        if not 0 <= index <= NN + 1:
            raise ValueError(f"invalid {self.name} index {index}")
        self.index = index
