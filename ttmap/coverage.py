# coverage.py
# Rectangle union/xor replay into a boolean occupancy grid.

from __future__ import annotations
from typing import Iterable

import numpy as np

from .commands import BooleanOp, GridSpec, ShapeOp
from .errors import RangeError


class OccupancyGrid:
    """
    H x W boolean mask, True = filled cell, indexed mask[y, x].
    Only mutated through apply(); callers hand `mask` on to the tracer.
    """

    def __init__(self, width: int, height: int):
        if width <= 0 or height <= 0:
            raise RangeError(f"grid {width},{height}", "width and height must be positive")
        self.width = width
        self.height = height
        self.mask = np.zeros((height, width), dtype=bool)

    @classmethod
    def for_grid(cls, grid: GridSpec) -> "OccupancyGrid":
        return cls(grid.width, grid.height)

    def check(self, shape: ShapeOp) -> None:
        r = shape.rect
        if r.w <= 0 or r.h <= 0:
            raise RangeError(shape.describe(), "width and height must be positive", shape.line, shape.col)
        if r.x + r.w > self.width or r.y + r.h > self.height:
            raise RangeError(
                shape.describe(),
                f"extends past the {self.width}x{self.height} grid",
                shape.line,
                shape.col,
            )

    def apply(self, shape: ShapeOp) -> None:
        self.check(shape)
        r = shape.rect
        window = self.mask[r.y:r.y + r.h, r.x:r.x + r.w]
        if shape.op is BooleanOp.XOR:
            np.logical_not(window, out=window)
        else:
            window[...] = True

    def filled(self) -> int:
        return int(self.mask.sum())


def replay(grid: GridSpec, shapes: Iterable[ShapeOp]) -> OccupancyGrid:
    """Apply shape ops strictly in source order (OR and XOR do not commute)."""
    occ = OccupancyGrid.for_grid(grid)
    for shape in shapes:
        occ.apply(shape)
    return occ
