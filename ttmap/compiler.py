# compiler.py
# Orchestration: parse -> {coverage -> trace} + {collect} -> project.

from __future__ import annotations
import logging

from .commands import MapDocument, ShapeOp
from .config import D
from .coverage import OccupancyGrid
from .entities import Collected
from .model import DisplayModel
from .parser import parse
from .projector import project
from .topology import count_holes, count_regions
from .trace import trace_boundaries

log = logging.getLogger(__name__)


def compile_document(doc: MapDocument, cell_px: float = D.CELL_PX) -> DisplayModel:
    """Compile an already-parsed document. Raises CompileError subclasses."""
    occ = OccupancyGrid.for_grid(doc.grid)
    collected = Collected()
    # document order; the first bad command raises
    for cmd in doc.commands:
        if isinstance(cmd, ShapeOp):
            occ.apply(cmd)
        else:
            collected.add(doc.grid, cmd)
    loops = trace_boundaries(occ.mask)
    if log.isEnabledFor(logging.DEBUG):
        outer = sum(1 for lp in loops if not lp.is_hole)
        log.debug(
            "%d/%d cells filled; %d outer loops (%d regions), %d hole loops (%d holes)",
            occ.filled(), occ.width * occ.height,
            outer, count_regions(occ.mask),
            len(loops) - outer, count_holes(occ.mask),
        )
    # occupancy grid is dropped here; only loops carry on
    return project(
        doc.grid,
        loops,
        collected.lines,
        collected.circles,
        collected.squares,
        cell_px=cell_px,
    )


def compile_map(source: str, cell_px: float = D.CELL_PX) -> DisplayModel:
    """
    Compile map DSL source into a pixel-space DisplayModel.
    Args:
        source: DSL text, one statement per line.
        cell_px: pixels per grid cell (> 0).
    Raises:
        MapSyntaxError, MissingGridError, DuplicateGridError, RangeError
        (all CompileError); nothing partial is returned.
    """
    doc = parse(source)
    model = compile_document(doc, cell_px)
    log.debug(
        "compiled %d loops, %d lines, %d circles, %d squares at %gpx/cell",
        len(model.loops), len(model.lines), len(model.circles), len(model.squares), cell_px,
    )
    return model
