# commands.py
# Parsed command model: one frozen dataclass per statement kind.

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Tuple, Union


class BooleanOp(Enum):
    UNION = "union"
    XOR = "xor"


class Side(Enum):
    TOP = "top"
    BOTTOM = "bottom"
    LEFT = "left"
    RIGHT = "right"


@dataclass(frozen=True)
class GridSpec:
    width: int
    height: int
    line: int = 1
    col: int = 1


@dataclass(frozen=True)
class CellRect:
    x: int
    y: int
    w: int
    h: int


@dataclass(frozen=True)
class ShapeOp:
    op: BooleanOp
    rect: CellRect
    line: int = 0
    col: int = 0

    def describe(self) -> str:
        r = self.rect
        kw = "xor rect" if self.op is BooleanOp.XOR else "rect"
        return f"{kw} at {r.x},{r.y} width {r.w} height {r.h}"


@dataclass(frozen=True)
class LineSegment:
    side: Side
    x: int
    y: int
    length: int
    line: int = 0
    col: int = 0

    def endpoints(self) -> Tuple[Tuple[int, int], Tuple[int, int]]:
        """Lattice endpoints; (x, y) names the cell whose side anchors the line."""
        if self.side is Side.LEFT:
            return (self.x, self.y), (self.x, self.y + self.length)
        if self.side is Side.RIGHT:
            return (self.x + 1, self.y), (self.x + 1, self.y + self.length)
        if self.side is Side.TOP:
            return (self.x, self.y), (self.x + self.length, self.y)
        return (self.x, self.y + 1), (self.x + self.length, self.y + 1)

    def describe(self) -> str:
        return f"line along {self.side.value} from {self.x},{self.y} length {self.length}"


@dataclass(frozen=True)
class CircleWithinCell:
    x: int
    y: int
    line: int = 0
    col: int = 0

    def describe(self) -> str:
        return f"entity circle within {self.x},{self.y}"


@dataclass(frozen=True)
class CircleAtPoint:
    x: int
    y: int
    radius: float
    line: int = 0
    col: int = 0

    def describe(self) -> str:
        return f"entity circle at {self.x},{self.y} radius {self.radius:g}"


@dataclass(frozen=True)
class SquareWithinCell:
    x: int
    y: int
    line: int = 0
    col: int = 0

    def describe(self) -> str:
        return f"entity square within {self.x},{self.y}"


CircleEntity = Union[CircleWithinCell, CircleAtPoint]
Command = Union[ShapeOp, LineSegment, CircleWithinCell, CircleAtPoint, SquareWithinCell]


@dataclass(frozen=True)
class MapDocument:
    """Grid declaration plus every later command, in document order."""
    grid: GridSpec
    commands: Tuple[Command, ...] = ()

    @property
    def shape_ops(self) -> Tuple[ShapeOp, ...]:
        return tuple(c for c in self.commands if isinstance(c, ShapeOp))
