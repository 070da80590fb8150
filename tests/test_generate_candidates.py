"""Tests for candidate proposals and the size range."""

from __future__ import annotations

import numpy as np
import pytest

from scoring.shapes import ShapeKind
from utils.generate_candidates import CandidateGenerator, SizeRange, boundary_intercept
from utils.palette import build_palette


def _generator(target, rng, biased=False, shapes=(ShapeKind.LINE, ShapeKind.RECTANGLE), size=None):
    return CandidateGenerator(
        target.shape[:2], build_palette(target), shapes,
        size or SizeRange(1, 20), rng, biased=biased,
    )


class TestSizeRange:
    def test_offset_low(self):
        assert SizeRange(1, 20).offset_low == pytest.approx(0.05)

    def test_clamps_on_construction(self):
        assert SizeRange(5, 5).max == 6

    def test_shrink_truncates_and_clamps(self):
        size = SizeRange(1, 20)
        assert size.shrink(0.9) == 18
        for _ in range(50):
            size.shrink(0.9)
        assert size.max == 2


class TestBoundaryIntercept:
    def test_crosses_x_axis_first(self):
        assert boundary_intercept(2, 2, -2.0, 6.0) == (0, 4)

    def test_falls_back_to_y_axis(self):
        assert boundary_intercept(4, 1, -4.0, -3.0) == (2, 0)

    def test_zero_denominators(self):
        assert boundary_intercept(0, 5, 0.0, 9.0) == (0, 0)
        assert boundary_intercept(0, 0, 0.0, 0.0) == (0, 0)


class TestCandidateGenerator:
    def test_anchors_and_colours(self, noisy_target, rng):
        gen = _generator(noisy_target, rng)
        colours = {tuple(c) for c in build_palette(noisy_target).tolist()}
        for i in range(500):
            c = gen.propose(i)
            assert 0 <= c.x0 < 24 and 0 <= c.y0 < 16
            assert c.x1 >= 0 and c.y1 >= 0
            assert c.color in colours
            assert c.kind in (ShapeKind.LINE, ShapeKind.RECTANGLE)

    def test_unbiased_alternates_direction(self, noisy_target, rng):
        gen = _generator(noisy_target, rng)
        for i in range(500):
            c = gen.propose(i)
            if i % 2 == 0:
                assert c.x1 <= c.x0
            else:
                assert c.x1 >= c.x0 + 1
            assert c.y1 >= c.y0

    def test_biased_always_forward(self, noisy_target, rng):
        gen = _generator(noisy_target, rng, biased=True)
        for i in range(500):
            c = gen.propose(i)
            assert 1 <= c.x1 - c.x0 < 20
            assert 1 <= c.y1 - c.y0 < 20

    def test_only_enabled_shapes(self, noisy_target, rng):
        gen = _generator(noisy_target, rng, shapes=(ShapeKind.RECTANGLE,))
        assert all(gen.propose(i).kind is ShapeKind.RECTANGLE for i in range(100))

    def test_follows_size_range(self, noisy_target, rng):
        size = SizeRange(1, 20)
        gen = _generator(noisy_target, rng, biased=True, size=size)
        size.shrink(0.1)
        assert size.max == 2
        for i in range(100):
            c = gen.propose(i)
            assert c.x1 - c.x0 == 1 and c.y1 - c.y0 == 1

    def test_same_seed_same_proposals(self, noisy_target):
        a = _generator(noisy_target, np.random.default_rng(5))
        b = _generator(noisy_target, np.random.default_rng(5))
        assert [a.propose(i) for i in range(50)] == [b.propose(i) for i in range(50)]
