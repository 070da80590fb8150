# scoring/color_error.py
from dataclasses import dataclass
from typing import Sequence, Tuple

import numpy as np

from scoring.shapes import Footprint


@dataclass(frozen=True)
class Score:
    error_current: int
    error_candidate: int

    @property
    def accepted(self) -> bool:
        return accepts(self.error_current, self.error_candidate)


def in_bounds(footprint: Footprint, shape_hw) -> Footprint:
    """Drop footprint cells that fall outside an (H, W) raster."""
    h, w = int(shape_hw[0]), int(shape_hw[1])
    ys, xs = footprint
    keep = (ys >= 0) & (ys < h) & (xs >= 0) & (xs < w)
    return ys[keep], xs[keep]


def footprint_errors(target: np.ndarray, canvas: np.ndarray, footprint: Footprint,
                     color: Sequence[int]) -> Tuple[int, int]:
    '''
    L1 colour error of the canvas and of a flat candidate colour, summed over
    the in-bounds cells of a footprint.

    Args:
        target, canvas: uint8 rasters of shape (H, W, 3).
        footprint: (ys, xs) arrays, may hold out-of-bounds cells.
        color: RGB triple.

    Returns:
        (error_current, error_candidate) as python ints.
    '''
    ys, xs = in_bounds(footprint, target.shape[:2])
    if ys.size == 0:
        return 0, 0
    t = target[ys, xs].astype(np.int64)
    c = canvas[ys, xs].astype(np.int64)
    col = np.asarray(color, np.int64).reshape(1, 3)
    error_current = int(np.abs(t - c).sum())
    error_candidate = int(np.abs(t - col).sum())
    return error_current, error_candidate


def accepts(error_current: int, error_candidate: int) -> bool:
    return error_candidate < error_current


def commit(canvas: np.ndarray, footprint: Footprint, color: Sequence[int]) -> None:
    """Paint ``color`` into ``canvas`` in place at every in-bounds cell."""
    ys, xs = in_bounds(footprint, canvas.shape[:2])
    canvas[ys, xs] = np.asarray(color, np.uint8)

