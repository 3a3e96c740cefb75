from __future__ import annotations

from typing import List, Sequence

import numpy as np

from common.types import Point, U32_MAX


def points_to_array(points: Sequence[Point], *, with_index: bool = False) -> np.ndarray:
    """
    Stack points into an integer array of shape (N,2) [x, y], or (N,3)
    [x, y, n] when `with_index` is set. Empty input gives shape (0,2)/(0,3).
    """
    cols = 3 if with_index else 2
    if not points:
        return np.zeros((0, cols), dtype=np.int64)
    rows = [(p.x, p.y, p.n) if with_index else (p.x, p.y) for p in points]
    return np.asarray(rows, dtype=np.int64)


def points_from_array(arr, *, start: int = 0) -> List[Point]:
    """
    Build points from an (N,2) or (N,3) array-like of non-negative integers.
    For (N,2) input the ordinal `n` is the row index offset by `start`.
    """
    a = np.asarray(arr)
    if a.size == 0:
        return []
    if a.ndim != 2 or a.shape[1] not in (2, 3):
        raise ValueError("Expected an (N,2) or (N,3) array")
    if not np.issubdtype(a.dtype, np.integer):
        if not np.all(np.equal(np.mod(a, 1), 0)):
            raise ValueError("Point coordinates must be integral")
        a = a.astype(np.int64)
    if (a < 0).any() or (a[:, :2] > U32_MAX).any():
        raise ValueError("Point coordinates out of u32 range")
    out: List[Point] = []
    for i, row in enumerate(a.tolist()):
        n = row[2] if len(row) == 3 else start + i
        out.append(Point(x=int(row[0]), y=int(row[1]), n=int(n)))
    return out
