"""Indexed mesh access and small dense matrix products."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TypeVar

import numpy as np

T = TypeVar("T")


def get_triangle(values: Sequence[T], indices: Sequence[int], triangle_index: int) -> tuple[T, T, T]:
    """Return the three values referenced by triangle ``triangle_index`` of an index buffer."""
    start = triangle_index * 3
    a, b, c = indices[start:start + 3]
    return values[a], values[b], values[c]


def matrix_multiply(a, b) -> np.ndarray:
    """Multiply two matrices given as rows; the inner dimensions must agree."""
    lhs = np.atleast_2d(np.asarray(a, dtype=float))
    rhs = np.atleast_2d(np.asarray(b, dtype=float))
    if lhs.ndim != 2 or rhs.ndim != 2:
        raise ValueError("matrix_multiply expects two-dimensional matrices")
    if lhs.shape[1] != rhs.shape[0]:
        raise ValueError(
            f"cannot multiply a {lhs.shape[0]}x{lhs.shape[1]} matrix "
            f"by a {rhs.shape[0]}x{rhs.shape[1]} matrix"
        )
    return lhs @ rhs