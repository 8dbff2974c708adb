# tests/helpers.py
# Small builders shared by the test modules.

from ttmap.commands import BooleanOp, CellRect, GridSpec, ShapeOp
from ttmap.coverage import replay


def union(x, y, w, h):
    return ShapeOp(BooleanOp.UNION, CellRect(x, y, w, h))


def xor(x, y, w, h):
    return ShapeOp(BooleanOp.XOR, CellRect(x, y, w, h))


def mask_of(width, height, *ops):
    return replay(GridSpec(width, height), ops).mask


def random_union_mask(rng, width, height, n_rects):
    ops = []
    for _ in range(n_rects):
        x = int(rng.integers(0, width)); y = int(rng.integers(0, height))
        w = int(rng.integers(1, width - x + 1)); h = int(rng.integers(1, height - y + 1))
        ops.append(union(x, y, w, h))
    return mask_of(width, height, *ops)
