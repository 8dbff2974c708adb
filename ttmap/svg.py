# svg.py
# SVG writer for a DisplayModel: grid cells, non-zero compound path, lines, entities.

from __future__ import annotations
from typing import Iterable, List

from .config import D
from .model import DisplayModel, Point

SVG_XMLNS = "http://www.w3.org/2000/svg"


def _n(v: float) -> str:
    return f"{v:g}"


def path_d(points: Iterable[Point]) -> str:
    points = list(points)
    if not points: return ""
    d = f"M {_n(points[0][0])} {_n(points[0][1])}"
    for x, y in points[1:]: d += f" L {_n(x)} {_n(y)}"
    return d + " Z"


def _grid_cells(model: DisplayModel) -> List[str]:
    k = _n(model.cell_px)
    parts = []
    for j in range(model.grid_height):
        for i in range(model.grid_width):
            parts.append(
                f'<rect x="{_n(i * model.cell_px)}" y="{_n(j * model.cell_px)}" width="{k}" height="{k}" '
                f'fill="none" stroke="{D.GRID_STROKE}"/>'
            )
    return parts


def render_svg(model: DisplayModel, grid: bool = True) -> str:
    w, h = _n(model.width_px), _n(model.height_px)
    parts = [f'<svg version="1.1" xmlns="{SVG_XMLNS}" width="{w}" height="{h}" viewBox="0 0 {w} {h}">']
    if grid:
        parts += _grid_cells(model)
    if model.loops:
        d = " ".join(path_d(lp.points) for lp in model.loops)
        parts.append(
            f'<path d="{d}" fill="{D.FILL}" fill-rule="nonzero" stroke="{D.STROKE}" stroke-width="{D.LINE_WIDTH}"/>'
        )
    for seg in model.lines:
        (x0, y0), (x1, y1) = seg.start, seg.end
        parts.append(f'<path d="M {_n(x0)} {_n(y0)} L {_n(x1)} {_n(y1)}" stroke="{D.STROKE}" stroke-width="{D.LINE_WIDTH}"/>')
    for c in model.circles:
        cx, cy = c.center
        parts.append(f'<circle cx="{_n(cx)}" cy="{_n(cy)}" r="{_n(c.radius)}" fill="none" stroke="{D.STROKE}"/>')
    for s in model.squares:
        x, y = s.origin
        parts.append(f'<rect x="{_n(x)}" y="{_n(y)}" width="{_n(s.side)}" height="{_n(s.side)}" fill="{D.STROKE}"/>')
    parts.append("</svg>")
    return "\n".join(parts)


def write_svg(model: DisplayModel, out_path: str, grid: bool = True) -> str:
    with open(out_path, "w") as f:
        f.write(render_svg(model, grid=grid))
    return out_path
