# topology.py
# Region / hole counting and winding-rule rasterisation of loops.

from __future__ import annotations
from typing import Iterable

import numpy as np
from skimage.measure import label as sklabel

from .model import BoundaryLoop


def count_regions(mask: np.ndarray) -> int:
    """Filled regions, 4-connected (cells touching only at a corner are separate)."""
    if not mask.any():
        return 0
    return int(sklabel(mask, connectivity=1).max())


def count_holes(mask: np.ndarray) -> int:
    """Unfilled regions enclosed by filled cells (8-connected background, border excluded)."""
    bg = ~np.pad(np.asarray(mask, dtype=bool), 1, constant_values=False)
    labels = sklabel(bg, connectivity=2)
    border = set(np.unique(np.r_[labels[0, :], labels[-1, :], labels[:, 0], labels[:, -1]]))
    border.discard(0)
    all_ids = set(np.unique(labels)); all_ids.discard(0)
    return len([i for i in all_ids if i not in border])


def winding_grid(loops: Iterable[BoundaryLoop], width: int, height: int) -> np.ndarray:
    """
    Winding number of every cell centre (H,W int array).
    Each vertical edge at x=ex adds +1 (downward) or -1 (upward) to the cells
    of its rows lying left of it.
    """
    wn = np.zeros((height, width), dtype=np.int32)
    for loop in loops:
        pts = loop.points
        for i in range(len(pts)):
            x0, y0 = pts[i]
            x1, y1 = pts[(i + 1) % len(pts)]
            if x0 != x1 or y0 == y1:
                continue
            ex = int(x0)
            top, bottom = int(min(y0, y1)), int(max(y0, y1))
            wn[top:bottom, :ex] += 1 if y1 > y0 else -1
    return wn


def rasterize_loops(loops: Iterable[BoundaryLoop], width: int, height: int) -> np.ndarray:
    """Cells whose centre is inside the loops under the non-zero winding rule."""
    return winding_grid(loops, width, height) != 0
