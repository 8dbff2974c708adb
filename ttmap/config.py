# config.py
# Tunable defaults (one place) for the compiler and the front-end.

from __future__ import annotations
from dataclasses import dataclass


@dataclass
class Defaults:
    # Scale
    CELL_PX: int = 10

    # Entities
    SQUARE_FRACTION: float = 0.6   # square side relative to the cell side

    # SVG / PNG styling
    STROKE: str = "black"
    GRID_STROKE: str = "rgb(200, 200, 200)"
    FILL: str = "none"
    LINE_WIDTH: int = 1
    PNG_BACKGROUND: str = "white"
    PNG_FILL: str = "#444444"
    PNG_GRID: str = "#c8c8c8"

D = Defaults()
