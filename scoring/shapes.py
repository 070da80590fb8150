# scoring/shapes.py
from enum import Enum
from typing import Tuple

import numpy as np

Footprint = Tuple[np.ndarray, np.ndarray]  # ys, xs


class ShapeKind(str, Enum):
    LINE = "line"
    RECTANGLE = "rectangle"

    @classmethod
    def parse(cls, name: str) -> "ShapeKind":
        """Accept singular or plural names (``lines``, ``rectangle``...)."""
        key = name.strip().lower()
        if key.endswith("s"):
            key = key[:-1]
        for kind in cls:
            if kind.value == key:
                return kind
        raise ValueError(f"`{name}` is not a valid shape")


def _empty() -> Footprint:
    return np.zeros(0, np.int64), np.zeros(0, np.int64)


def line_pixels(x0: int, y0: int, x1: int, y1: int) -> Footprint:
    '''
    Bresenham walk from (x0,y0) to (x1,y1), both ends included.

    Returns:
        (ys, xs) int64 arrays, 8-connected, first point is the start anchor and
        last point is the end anchor. A zero-length line is a single point.
    '''
    x, y = int(x0), int(y0)
    x1, y1 = int(x1), int(y1)
    dx = abs(x1 - x)
    dy = abs(y1 - y)
    sx = 1 if x < x1 else -1
    sy = 1 if y < y1 else -1

    # halve toward zero
    err = dx // 2 if dx > dy else -(dy // 2)

    xs = [x]; ys = [y]
    while x != x1 or y != y1:
        e2 = 2 * err
        if e2 > -dx:
            err -= dy
            x += sx
        if e2 < dy:
            err += dx
            y += sy
        xs.append(x); ys.append(y)
    return np.asarray(ys, np.int64), np.asarray(xs, np.int64)


def rect_pixels(x0: int, y0: int, x1: int, y1: int) -> Footprint:
    '''
    Axis-aligned [x0,x1) x [y0,y1). Reversed ranges are empty, never swapped.
    '''
    x0, y0, x1, y1 = int(x0), int(y0), int(x1), int(y1)
    if x1 <= x0 or y1 <= y0:
        return _empty()
    xx, yy = np.meshgrid(np.arange(x0, x1, dtype=np.int64),
                         np.arange(y0, y1, dtype=np.int64), indexing="ij")
    return yy.ravel(), xx.ravel()


def rasterize(kind: ShapeKind, x0: int, y0: int, x1: int, y1: int) -> Footprint:
    if kind is ShapeKind.LINE:
        return line_pixels(x0, y0, x1, y1)
    if kind is ShapeKind.RECTANGLE:
        return rect_pixels(x0, y0, x1, y1)
    raise TypeError(f"unhandled shape kind: {kind!r}")
