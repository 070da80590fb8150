# utils/generate_candidates.py
from dataclasses import dataclass
from typing import Sequence, Tuple

import numpy as np

from scoring.shapes import ShapeKind


@dataclass
class SizeRange:
    """Span of a primitive; max decays in adaptive mode but always stays > min."""
    min: int
    max: int

    def __post_init__(self):
        self.min = int(self.min)
        self.max = int(self.max)
        if self.max <= self.min:
            self.max = self.min + 1

    @property
    def offset_low(self) -> float:
        return self.min / self.max

    def shrink(self, coeff: float) -> int:
        self.max = int(self.max * coeff)
        if self.max <= self.min:
            self.max = self.min + 1
        return self.max


@dataclass(frozen=True)
class Candidate:
    kind: ShapeKind
    x0: int
    y0: int
    x1: int
    y1: int
    color: Tuple[int, int, int]


def boundary_intercept(x0: int, y0: int, x: float, y: float) -> Tuple[int, int]:
    '''
    Where the ray (x0,y0) -> (x,y) leaves the raster through x=0 or y=0.

    Tries the x=0 crossing first and falls back to y=0 when that intercept is
    negative. An axis whose denominator is zero is skipped.
    '''
    if x != x0:
        y_int = y0 - x0 * (y - y0) / (x - x0)
        if y_int >= 0:
            return 0, int(y_int)
    if y != y0:
        x_int = x0 - y0 * (x - x0) / (y - y0)
        return max(0, int(x_int)), 0
    # both denominators zero: the ray is a point
    return max(0, int(x)), max(0, int(y))


class CandidateGenerator:
    def __init__(self, shape_hw, palette: np.ndarray, shapes: Sequence[ShapeKind],
                 size: SizeRange, rng: np.random.Generator, biased: bool = False):
        self.H, self.W = int(shape_hw[0]), int(shape_hw[1])
        self.palette = palette
        self.shapes = tuple(shapes)
        self.size = size
        self.rng = rng
        self.biased = bool(biased)

    def _offset(self) -> float:
        return float(self.rng.uniform(self.size.offset_low, 1.0))

    def second_anchor(self, iteration: int, x0: int, y0: int) -> Tuple[int, int]:
        mx = float(self.size.max)
        y = y0 + mx * self._offset()
        if self.biased:
            return int(x0 + mx * self._offset()), int(y)

        sign = -1.0 if iteration % 2 == 0 else 1.0
        x = x0 + sign * mx * self._offset()
        if x < 0:
            return boundary_intercept(x0, y0, x, y)
        return int(x), int(y)

    def propose(self, iteration: int) -> Candidate:
        x0 = int(self.rng.integers(0, self.W))
        y0 = int(self.rng.integers(0, self.H))
        r, g, b = (int(c) for c in self.palette[self.rng.integers(0, len(self.palette))])
        x1, y1 = self.second_anchor(iteration, x0, y0)
        kind = self.shapes[int(self.rng.integers(0, len(self.shapes)))]
        return Candidate(kind, x0, y0, x1, y1, (r, g, b))
