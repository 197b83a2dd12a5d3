"""
Named generator registry.
"""

import logging
import os

from .splitmix64 import SplitMix64
from .xorshift import XorShift64Star, XorShift128Plus, XorShift1024Star
from .xoroshiro import Xoroshiro128Plus, Xoroshiro128StarStar
from .xoshiro import Xoshiro256Plus, Xoshiro256StarStar
from .mt19937 import MT19937_64
from .pcg import PCG64


logger = logging.getLogger(__name__)

DEFAULT_GENERATOR = "xoshiro256**"
GENERATOR_ENV_VAR = "RAND64_GENERATOR"


# Define generators by canonical name
GENERATORS = {
    cls.name: cls
    for cls in (
        SplitMix64,
        XorShift64Star,
        XorShift128Plus,
        XorShift1024Star,
        Xoroshiro128Plus,
        Xoroshiro128StarStar,
        Xoshiro256Plus,
        Xoshiro256StarStar,
        MT19937_64,
        PCG64,
    )
}


def new_source(name=None, seed=None):
    """
    Create a generator by name and seed it.

    name defaults to $RAND64_GENERATOR, then DEFAULT_GENERATOR. seed may be
    an int, a sequence of words (passed to seed_from_slice), or None to keep
    the generator's own default seeding.
    """
    if name is None:
        name = os.environ.get(GENERATOR_ENV_VAR) or DEFAULT_GENERATOR
    try:
        cls = GENERATORS[name]
    except KeyError:
        raise KeyError(
            f"unknown generator {name!r}, expected one of {sorted(GENERATORS)}"
        ) from None
    logger.debug("creating %s source", name)

    source = cls()
    if isinstance(seed, int):
        source.seed(seed)
    elif seed is not None:
        source.seed_from_slice(seed)
    return source
