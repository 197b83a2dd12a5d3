"""
Seed expansion shared by the multi-word generators.

Both helpers fill a destination list in place and are fully deterministic:
the same input always yields the same state, and the destination length
alone decides how many words are produced.
"""

from .base import MASK64
from .splitmix64 import SplitMix64


def seed_slice(dst, seed):
    """Fill dst with successive SplitMix64 outputs seeded with seed."""
    sm = SplitMix64(seed)
    for i in range(len(dst)):
        dst[i] = sm.uint64()
    return dst


def seed_from_slice(dst, src):
    """
    Copy src into dst, completing a short src deterministically.

    The first min(len(src), len(dst)) words are copied verbatim. Any
    remaining words are filled by seed_slice() seeded from the last copied
    word, or from 0 when src is empty.
    """
    src = list(src)
    n = min(len(src), len(dst))
    for i in range(n):
        dst[i] = src[i] & MASK64
    if n < len(dst):
        tail = [0] * (len(dst) - n)
        seed_slice(tail, dst[n - 1] if n else 0)
        dst[n:] = tail
    return dst
