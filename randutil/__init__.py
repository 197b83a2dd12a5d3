"""
Utilities built on top of 64-bit sources.
"""

from .sampler import Rand64
from .seed import generate_seed
from .compat import SourceRandom

__all__ = [
    'Rand64',
    'generate_seed',
    'SourceRandom'
]
