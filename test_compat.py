#!/usr/bin/env python3
"""
Tests for the random.Random adapter and the generator registry.
"""

import io
import pickle
import random
import sys
import os
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

import pytest

from generators import (
    GENERATORS, DEFAULT_GENERATOR, new_source, MT19937_64, Xoshiro256StarStar,
    XorShift1024Star, SplitMix64, PCG64
)
from generators.registry import GENERATOR_ENV_VAR
from iorand import ByteStreamSource
from randutil import Rand64, SourceRandom


def test_is_a_random_instance():
    rng = SourceRandom(Xoshiro256StarStar(), seed=42)
    assert isinstance(rng, random.Random)


def test_int_seed_goes_to_source():
    rng = SourceRandom(Xoshiro256StarStar(), seed=42)
    ref = Xoshiro256StarStar(42)
    assert rng.getrandbits(64) == ref.uint64()
    assert rng.int63() == ref.uint64() >> 1


def test_getrandbits_uses_high_bits():
    rng = SourceRandom(SplitMix64(), seed=7)
    ref = SplitMix64(7)
    assert rng.getrandbits(10) == ref.uint64() >> 54
    assert rng.getrandbits(0) == 0

    a, b = ref.uint64(), ref.uint64()
    assert rng.getrandbits(100) == (a << 36) | (b >> 28)


def test_getrandbits_negative():
    with pytest.raises(ValueError):
        SourceRandom(SplitMix64()).getrandbits(-1)


def test_random_in_unit_interval():
    rng = SourceRandom(MT19937_64(), seed=1)
    for _ in range(1000):
        assert 0.0 <= rng.random() < 1.0


def test_inherited_methods_are_deterministic():
    def sample(rng):
        deck = list(range(20))
        rng.shuffle(deck)
        return deck, rng.randrange(1000), rng.choice("abcdef"), rng.gauss(0.0, 1.0)

    assert sample(SourceRandom(XorShift1024Star(), seed=9)) == \
        sample(SourceRandom(XorShift1024Star(), seed=9))


def test_str_and_large_int_seeds():
    a = SourceRandom(Xoshiro256StarStar(), seed="hello")
    b = SourceRandom(Xoshiro256StarStar(), seed="hello")
    assert a.random() == b.random()

    c = SourceRandom(Xoshiro256StarStar(), seed=1 << 100)
    d = SourceRandom(Xoshiro256StarStar(), seed=-(1 << 100))
    assert c.random() == d.random()


def test_unsupported_seed_type():
    with pytest.raises(TypeError):
        SourceRandom(Xoshiro256StarStar(), seed=3.5)


def test_none_seed_uses_entropy():
    rng = SourceRandom(Xoshiro256StarStar())
    rng.seed()
    assert 0 <= rng.getrandbits(64) < 1 << 64


def test_state_round_trip():
    rng = SourceRandom(MT19937_64(), seed=5)
    rng.random()
    state = rng.getstate()
    expected = [rng.random() for _ in range(5)]
    rng.setstate(state)
    assert [rng.random() for _ in range(5)] == expected


def test_pickle_round_trip():
    rng = SourceRandom(new_source(DEFAULT_GENERATOR, 11))
    rng.random()
    clone = pickle.loads(pickle.dumps(rng))
    assert clone.random() == rng.random()


def test_registry_names_match_classes():
    for name, cls in GENERATORS.items():
        assert cls.name == name
    assert len(GENERATORS) == 10


def test_new_source_seeding():
    assert new_source("xoshiro256**", 3).uint64() == Xoshiro256StarStar(3).uint64()

    words = [1, 2, 3]
    mt = MT19937_64()
    mt.seed_from_slice(words)
    assert new_source("mt19937-64", words).uint64() == mt.uint64()


def test_new_source_unknown_name():
    with pytest.raises(KeyError):
        new_source("rand48")


def test_new_source_default_from_environment(monkeypatch):
    monkeypatch.delenv(GENERATOR_ENV_VAR, raising=False)
    assert new_source().name == DEFAULT_GENERATOR

    monkeypatch.setenv(GENERATOR_ENV_VAR, "pcg-xsl-rr-128/64")
    assert new_source().name == "pcg-xsl-rr-128/64"


@pytest.mark.parametrize("name", sorted(GENERATORS))
def test_pickle_keeps_generator(name):
    rng = SourceRandom(GENERATORS[name](), seed=5)
    rng.random()
    clone = pickle.loads(pickle.dumps(rng))
    assert type(clone.source) is type(rng.source)
    assert [clone.getrandbits(64) for _ in range(5)] == [rng.getrandbits(64) for _ in range(5)]


def test_pickle_ignores_environment_default(monkeypatch):
    rng = SourceRandom(MT19937_64(), seed=5)
    data = pickle.dumps(rng)
    monkeypatch.setenv(GENERATOR_ENV_VAR, "xoshiro256+")
    clone = pickle.loads(data)
    assert isinstance(clone.source, MT19937_64)
    assert clone.random() == rng.random()


def test_state_through_rand64_wrapper():
    rng = SourceRandom(Rand64(PCG64(1)))
    state = rng.getstate()
    expected = [rng.random() for _ in range(3)]
    rng.setstate(state)
    assert [rng.random() for _ in range(3)] == expected

    clone = pickle.loads(pickle.dumps(rng))
    assert clone.random() == rng.random()


def test_stream_source_has_no_state():
    rng = SourceRandom(ByteStreamSource(io.BytesIO(bytes(64))))
    assert rng.random() == 0.0
    with pytest.raises(TypeError):
        rng.getstate()
    with pytest.raises(TypeError):
        rng.setstate(((), None))
