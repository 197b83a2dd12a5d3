#!/usr/bin/env python3
"""
Tests for seed expansion.
"""

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from generators import seed_slice, seed_from_slice, XorShift1024Star, MT19937_64, SplitMix64
from test_generators import SEED1, SPLITMIX64_VALUES


def test_seed_slice():
    dst = seed_slice([0] * 10, SEED1)
    assert dst == SPLITMIX64_VALUES


def test_seed_from_slice_completes_short_source():
    dst = seed_from_slice([0] * 10, [1, SEED1])
    assert dst[0] == 1
    assert dst[1] == SEED1
    assert dst[2:] == SPLITMIX64_VALUES[:8]


def test_seed_from_slice_truncates_long_source():
    src = list(range(1, 21))
    dst = seed_from_slice([0] * 16, src)
    assert dst == src[:16]


def test_seed_from_slice_empty_source_seeds_from_zero():
    dst = seed_from_slice([0] * 4, [])
    assert dst[0] == SplitMix64(0).uint64()
    assert dst == seed_slice([0] * 4, 0)
    assert any(dst)


def test_seed_from_slice_masks_words():
    dst = seed_from_slice([0] * 2, [-1, 1 << 64])
    assert dst == [(1 << 64) - 1, 0]


def test_destination_length_decides_output_length():
    for n in (1, 2, 4, 16, 312):
        assert len(seed_slice([0] * n, SEED1)) == n


def test_reproducible():
    assert seed_slice([0] * 16, 42) == seed_slice([0] * 16, 42)
    assert seed_from_slice([0] * 16, [3, 4]) == seed_from_slice([0] * 16, [3, 4])


def test_generator_state_keeps_slice_prefix():
    words = [(i * 0x9E3779B97F4A7C15) & ((1 << 64) - 1) for i in range(1, 20)]
    rng = XorShift1024Star()
    rng.seed_from_slice(words)
    assert rng.state == words[:16]


def test_mt19937_empty_slice_matches_zero_key():
    a, b = MT19937_64(), MT19937_64()
    a.seed_from_slice([])
    b.seed_from_slice([0])
    assert [a.uint64() for _ in range(5)] == [b.uint64() for _ in range(5)]
