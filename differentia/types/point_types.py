from __future__ import annotations
from collections.abc import Mapping
from typing import NamedTuple, Sequence, Tuple, TypeAlias, Union
import numpy as np

Scalar = int | float


class Point(NamedTuple):
    """A single (x, y) sample. Immutable by construction."""
    x: float
    y: float


PointSet: TypeAlias = Tuple[Point, ...]
PointLike = Union[Point, Tuple[Scalar, Scalar], Mapping]
PointsInput = Union[Sequence[PointLike], np.ndarray]


def as_point(item: PointLike) -> Point:
    """
    Coerce a point-like value to a Point.

    Accepts a Point, an (x, y) pair, or a mapping with ``x`` and ``y`` keys.
    """
    if isinstance(item, Point):
        return Point(float(item.x), float(item.y))
    if isinstance(item, Mapping):
        return Point(float(item["x"]), float(item["y"]))
    x, y = item
    return Point(float(x), float(y))


def as_points(points: PointsInput) -> PointSet:
    """
    Coerce any supported input to a tuple of Points, preserving order.

    Args:
        points: Sequence of point-like values or an (n, 2) array

    Returns:
        Tuple of Point
    """
    if isinstance(points, np.ndarray):
        arr = np.asarray(points, dtype=np.float64)
        if arr.ndim != 2 or arr.shape[-1] != 2:
            raise ValueError(f"Point arrays must have shape (n, 2), got {arr.shape}")
        return tuple(Point(float(x), float(y)) for x, y in arr)
    return tuple(as_point(p) for p in points)


def x_values(points: Sequence[Point]) -> np.ndarray:
    return np.array([p.x for p in points], dtype=np.float64)


def y_values(points: Sequence[Point]) -> np.ndarray:
    return np.array([p.y for p in points], dtype=np.float64)
