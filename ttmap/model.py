# model.py
# Geometry value types shared by the tracer, projector and front-end.

from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Tuple

Point = Tuple[float, float]


@dataclass(frozen=True)
class BoundaryLoop:
    """Closed loop of corner vertices; the closing edge back to points[0] is implicit."""
    points: Tuple[Point, ...]

    def signed_area(self) -> float:
        """Shoelace area in y-down coordinates: > 0 for outer loops, < 0 for holes."""
        pts = self.points
        total = 0.0
        for i in range(len(pts)):
            x0, y0 = pts[i]
            x1, y1 = pts[(i + 1) % len(pts)]
            total += x0 * y1 - x1 * y0
        return total / 2.0

    @property
    def is_hole(self) -> bool:
        return self.signed_area() < 0

    def scaled(self, k: float) -> "BoundaryLoop":
        return BoundaryLoop(tuple((x * k, y * k) for x, y in self.points))


@dataclass(frozen=True)
class Segment:
    start: Point
    end: Point


@dataclass(frozen=True)
class Circle:
    center: Point
    radius: float


@dataclass(frozen=True)
class Square:
    origin: Point   # top-left corner
    side: float


@dataclass(frozen=True)
class DisplayModel:
    """Pixel-space output of a compile; the only thing the front-end sees."""
    cell_px: float
    grid_width: int
    grid_height: int
    loops: Tuple[BoundaryLoop, ...] = ()
    lines: Tuple[Segment, ...] = ()
    circles: Tuple[Circle, ...] = ()
    squares: Tuple[Square, ...] = ()

    @property
    def width_px(self) -> float:
        return self.grid_width * self.cell_px

    @property
    def height_px(self) -> float:
        return self.grid_height * self.cell_px

    def to_dict(self) -> Dict:
        return {
            "cell_px": self.cell_px,
            "grid": {"width": self.grid_width, "height": self.grid_height},
            "size_px": [self.width_px, self.height_px],
            "loops": [
                {"points": [list(p) for p in lp.points], "hole": lp.is_hole}
                for lp in self.loops
            ],
            "lines": [{"start": list(s.start), "end": list(s.end)} for s in self.lines],
            "circles": [{"center": list(c.center), "radius": c.radius} for c in self.circles],
            "squares": [{"origin": list(s.origin), "side": s.side} for s in self.squares],
        }
