"""
Generators subpackage: the 64-bit source contract and its algorithms.
"""

from .base import Source, StateSource, MASK64, MASK32, rotl64, rotr64
from .seeding import seed_slice, seed_from_slice
from .splitmix64 import SplitMix64
from .xorshift import XorShift64Star, XorShift128Plus, XorShift1024Star, DEFAULT_XORSHIFT_SEED
from .xoroshiro import Xoroshiro128Plus, Xoroshiro128StarStar
from .xoshiro import Xoshiro256Plus, Xoshiro256StarStar
from .mt19937 import MT19937_64
from .pcg import PCG64
from .registry import GENERATORS, DEFAULT_GENERATOR, new_source

__all__ = [
    'Source', 'StateSource', 'MASK64', 'MASK32', 'rotl64', 'rotr64',
    'seed_slice', 'seed_from_slice',
    'SplitMix64',
    'XorShift64Star', 'XorShift128Plus', 'XorShift1024Star', 'DEFAULT_XORSHIFT_SEED',
    'Xoroshiro128Plus', 'Xoroshiro128StarStar',
    'Xoshiro256Plus', 'Xoshiro256StarStar',
    'MT19937_64',
    'PCG64',
    'GENERATORS', 'DEFAULT_GENERATOR', 'new_source'
]
