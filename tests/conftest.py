"""Shared test fixtures."""

from __future__ import annotations

import numpy as np
import pytest

RED = (255, 0, 0)


@pytest.fixture
def red_2x2():
    img = np.zeros((2, 2, 3), np.uint8)
    img[...] = RED
    return img


@pytest.fixture
def noisy_target():
    """Small colourful target, fixed so runs are comparable."""
    rng = np.random.default_rng(7)
    return rng.integers(0, 256, size=(16, 24, 3), dtype=np.uint8)


@pytest.fixture
def rng():
    return np.random.default_rng(1234)
