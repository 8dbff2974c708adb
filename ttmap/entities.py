# entities.py
# Validation and collection of lines, circles and squares (no boolean algebra).

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Iterable, List

from .commands import (
    CircleAtPoint,
    CircleEntity,
    CircleWithinCell,
    GridSpec,
    LineSegment,
    SquareWithinCell,
)
from .errors import RangeError


@dataclass
class Collected:
    lines: List[LineSegment] = field(default_factory=list)
    circles: List[CircleEntity] = field(default_factory=list)
    squares: List[SquareWithinCell] = field(default_factory=list)

    def add(self, grid: GridSpec, cmd) -> None:
        """Check one command against `grid` and keep it; anything else is ignored."""
        if isinstance(cmd, LineSegment):
            check_line(grid, cmd)
            self.lines.append(cmd)
        elif isinstance(cmd, CircleWithinCell):
            check_cell_entity(grid, cmd)
            self.circles.append(cmd)
        elif isinstance(cmd, CircleAtPoint):
            check_point_circle(grid, cmd)
            self.circles.append(cmd)
        elif isinstance(cmd, SquareWithinCell):
            check_cell_entity(grid, cmd)
            self.squares.append(cmd)


def _on_lattice(grid: GridSpec, x: int, y: int) -> bool:
    return 0 <= x <= grid.width and 0 <= y <= grid.height


def _in_grid(grid: GridSpec, x: int, y: int) -> bool:
    return 0 <= x < grid.width and 0 <= y < grid.height


def check_line(grid: GridSpec, seg: LineSegment) -> None:
    if seg.length <= 0:
        raise RangeError(seg.describe(), "length must be positive", seg.line, seg.col)
    start, end = seg.endpoints()
    if not _on_lattice(grid, *start):
        raise RangeError(seg.describe(), "start lies outside the grid", seg.line, seg.col)
    if not _on_lattice(grid, *end):
        raise RangeError(seg.describe(), "runs past the edge of the grid", seg.line, seg.col)


def check_cell_entity(grid: GridSpec, ent) -> None:
    if not _in_grid(grid, ent.x, ent.y):
        raise RangeError(
            ent.describe(),
            f"cell lies outside the {grid.width}x{grid.height} grid",
            ent.line,
            ent.col,
        )


def check_point_circle(grid: GridSpec, circle: CircleAtPoint) -> None:
    if not _on_lattice(grid, circle.x, circle.y):
        raise RangeError(circle.describe(), "centre lies outside the grid", circle.line, circle.col)
    if circle.radius <= 0:
        raise RangeError(circle.describe(), "radius must be positive", circle.line, circle.col)
    # radius may reach past the map edge


def collect(grid: GridSpec, commands: Iterable) -> Collected:
    """Validate and keep line/entity commands in source order; shape ops are skipped."""
    out = Collected()
    for cmd in commands:
        out.add(grid, cmd)
    return out
