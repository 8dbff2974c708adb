# raster.py
# PNG preview of a DisplayModel (Pillow).

from __future__ import annotations
from typing import Tuple

from PIL import Image, ImageDraw

from .config import D
from .model import DisplayModel


def render_image(model: DisplayModel, grid: bool = True) -> Image.Image:
    """
    Paint the model onto an RGB image.
    Loops are filled largest first, holes in the background colour; a nested
    loop is always smaller than its container, so this matches non-zero fill.
    """
    size: Tuple[int, int] = (max(1, int(round(model.width_px))), max(1, int(round(model.height_px))))
    img = Image.new("RGB", size, D.PNG_BACKGROUND)
    draw = ImageDraw.Draw(img)

    if grid:
        k = model.cell_px
        for j in range(model.grid_height):
            for i in range(model.grid_width):
                draw.rectangle([i * k, j * k, (i + 1) * k, (j + 1) * k], outline=D.PNG_GRID)

    for lp in sorted(model.loops, key=lambda lp: -abs(lp.signed_area())):
        colour = D.PNG_BACKGROUND if lp.is_hole else D.PNG_FILL
        draw.polygon(list(lp.points), fill=colour, outline=D.STROKE)

    for seg in model.lines:
        draw.line([seg.start, seg.end], fill=D.STROKE, width=D.LINE_WIDTH)
    for c in model.circles:
        (cx, cy), r = c.center, c.radius
        draw.ellipse([cx - r, cy - r, cx + r, cy + r], outline=D.STROKE)
    for s in model.squares:
        (x, y), side = s.origin, s.side
        draw.rectangle([x, y, x + side, y + side], fill=D.STROKE)
    return img


def render_png(model: DisplayModel, out_path: str, grid: bool = True) -> str:
    render_image(model, grid=grid).save(out_path, format="PNG")
    return out_path
