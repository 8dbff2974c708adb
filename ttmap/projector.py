# projector.py
# Grid units -> pixel space. Origin stays at (0, 0); y is not flipped.

from __future__ import annotations
from typing import Iterable

from .commands import CircleWithinCell, GridSpec, LineSegment, SquareWithinCell
from .config import D
from .errors import RangeError
from .model import BoundaryLoop, Circle, DisplayModel, Segment, Square


def project_line(seg: LineSegment, k: float) -> Segment:
    (x0, y0), (x1, y1) = seg.endpoints()
    return Segment((x0 * k, y0 * k), (x1 * k, y1 * k))


def project_circle(circle, k: float) -> Circle:
    if isinstance(circle, CircleWithinCell):
        # inscribed in its cell
        return Circle(((circle.x + 0.5) * k, (circle.y + 0.5) * k), 0.5 * k)
    return Circle((circle.x * k, circle.y * k), circle.radius * k)


def project_square(square: SquareWithinCell, k: float, fraction: float = D.SQUARE_FRACTION) -> Square:
    side = fraction * k
    inset = (k - side) / 2.0
    return Square((square.x * k + inset, square.y * k + inset), side)


def project(
    grid: GridSpec,
    loops: Iterable[BoundaryLoop],
    lines: Iterable[LineSegment],
    circles: Iterable,
    squares: Iterable[SquareWithinCell] = (),
    cell_px: float = D.CELL_PX,
    square_fraction: float = D.SQUARE_FRACTION,
) -> DisplayModel:
    """Multiply every grid-unit coordinate by `cell_px` and bundle the DisplayModel."""
    if cell_px is None or cell_px <= 0:
        raise RangeError(f"cell size {cell_px}", "must be a positive number of pixels")
    k = cell_px
    return DisplayModel(
        cell_px=k,
        grid_width=grid.width,
        grid_height=grid.height,
        loops=tuple(lp.scaled(k) for lp in loops),
        lines=tuple(project_line(s, k) for s in lines),
        circles=tuple(project_circle(c, k) for c in circles),
        squares=tuple(project_square(s, k, square_fraction) for s in squares),
    )
