# trace.py
# Occupancy mask -> closed, hole-aware boundary loops (directed-edge chaining).
#
# Every boundary edge is directed so its filled cell lies on the right of travel
# (y down). Outer loops therefore run clockwise on screen and holes run
# counter-clockwise.

from __future__ import annotations
import logging
from collections import defaultdict
from typing import Dict, Iterable, List, Optional, Tuple

import numpy as np

from .model import BoundaryLoop

log = logging.getLogger(__name__)

Vertex = Tuple[int, int]
Edge = Tuple[int, int, int]      # (x, y, direction) starting at lattice point (x, y)

EAST, SOUTH, WEST, NORTH = 0, 1, 2, 3
STEP = {EAST: (1, 0), SOUTH: (0, 1), WEST: (-1, 0), NORTH: (0, -1)}

# right, straight, left; turning right keeps corner-touching cells apart
_TURN_PREFERENCE = (1, 0, 3)


def _step(v: Vertex, d: int) -> Vertex:
    dx, dy = STEP[d]
    return (v[0] + dx, v[1] + dy)


# --- edge extraction ---------------------------------------------------------

def boundary_edges(mask: np.ndarray) -> List[Edge]:
    """Directed unit edges between filled cells and unfilled/outside neighbours, row-major."""
    p = np.pad(np.asarray(mask, dtype=bool), 1, constant_values=False)
    edges: List[Edge] = []
    ys, xs = np.nonzero(mask)
    for y, x in zip(ys.tolist(), xs.tolist()):
        py, px = y + 1, x + 1
        if not p[py - 1, px]:
            edges.append((x, y, EAST))            # top
        if not p[py, px + 1]:
            edges.append((x + 1, y, SOUTH))       # right
        if not p[py + 1, px]:
            edges.append((x + 1, y + 1, WEST))    # bottom
        if not p[py, px - 1]:
            edges.append((x, y + 1, NORTH))       # left
    return edges


def unit_edges(loop: BoundaryLoop) -> List[Tuple[Vertex, Vertex]]:
    """Expand a loop of corner vertices back into directed unit edges."""
    out: List[Tuple[Vertex, Vertex]] = []
    pts = [(int(x), int(y)) for x, y in loop.points]
    for i, (x0, y0) in enumerate(pts):
        x1, y1 = pts[(i + 1) % len(pts)]
        dx = (x1 > x0) - (x1 < x0)
        dy = (y1 > y0) - (y1 < y0)
        x, y = x0, y0
        while (x, y) != (x1, y1):
            out.append(((x, y), (x + dx, y + dy)))
            x, y = x + dx, y + dy
    return out


# --- chaining ----------------------------------------------------------------

def _pick(heading: int, options: Iterable[int]) -> Optional[int]:
    options = set(options)
    for turn in _TURN_PREFERENCE:
        d = (heading + turn) % 4
        if d in options:
            return d
    return None


def _merge_collinear(vertices: List[Vertex], dirs: List[int]) -> List[Vertex]:
    """Keep only corners: vertices where the incoming and outgoing directions differ."""
    corners = [v for i, v in enumerate(vertices) if dirs[i - 1] != dirs[i]]
    k = min(range(len(corners)), key=lambda i: (corners[i][1], corners[i][0]))
    return corners[k:] + corners[:k]


def chain_loops(edges: List[Edge]) -> List[BoundaryLoop]:
    """
    Partition directed edges into closed loops.
    Uses a start-vertex -> unused-outgoing-directions map; entries are removed as
    edges are consumed, so each edge lands in exactly one loop.
    """
    outgoing: Dict[Vertex, List[int]] = defaultdict(list)
    for x, y, d in edges:
        outgoing[(x, y)].append(d)

    loops: List[BoundaryLoop] = []
    for x, y, first in edges:
        start = (x, y)
        if first not in outgoing.get(start, ()):
            continue  # already consumed
        outgoing[start].remove(first)
        vertices: List[Vertex] = [start]
        dirs: List[int] = [first]
        cur, heading = _step(start, first), first
        while True:
            candidates = outgoing.get(cur, [])
            closing = cur == start
            choice = _pick(heading, candidates + [first] if closing else candidates)
            if choice is None:
                raise RuntimeError(f"boundary is not closed at vertex {cur}")
            if closing and choice == first:
                break
            candidates.remove(choice)
            vertices.append(cur)
            dirs.append(choice)
            cur, heading = _step(cur, choice), choice
        loops.append(BoundaryLoop(tuple(_merge_collinear(vertices, dirs))))
    return loops


# --- public API --------------------------------------------------------------

def trace_boundaries(mask: np.ndarray) -> List[BoundaryLoop]:
    """
    Trace every filled region of `mask` (H,W bool, True = filled) into loops.
    Args:
        mask: occupancy mask indexed [y, x].
    Returns:
        Loops of integer lattice corners; outer loops have positive signed area,
        holes negative. An empty mask gives [].
    """
    edges = boundary_edges(mask)
    loops = chain_loops(edges)
    log.debug("traced %d boundary edges into %d loops", len(edges), len(loops))
    return loops
