# ttmap/__init__.py

# Entry points
from .compiler import compile_map, compile_document
from .parser import parse

# Errors
from .errors import (
    CompileError,
    MapSyntaxError,
    MissingGridError,
    DuplicateGridError,
    RangeError,
)

# Command model
from .commands import (
    BooleanOp,
    Side,
    GridSpec,
    CellRect,
    ShapeOp,
    LineSegment,
    CircleWithinCell,
    CircleAtPoint,
    SquareWithinCell,
    MapDocument,
)

# Core stages
from .coverage import OccupancyGrid, replay
from .trace import trace_boundaries
from .entities import collect
from .projector import project

# Output model & front-end
from .model import BoundaryLoop, Segment, Circle, Square, DisplayModel
from .svg import render_svg, write_svg
from .raster import render_png
from .io_save_load import load_source, save_display_model
