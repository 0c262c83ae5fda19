from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence, Tuple
import math

from ..config import InterpolationConfig, resolve_config
from ..errors import (
    DuplicateAbscissaError,
    InsufficientDataError,
    NonFiniteValueError,
    UnequalSpacingError,
)
from ..types.point_types import Point, PointSet, PointsInput, as_points


@dataclass(frozen=True)
class PreprocessingResult:
    sorted_points: PointSet
    equally_spaced: bool
    step_size: Optional[float]

    @property
    def x_values(self) -> Tuple[float, ...]:
        return tuple(p.x for p in self.sorted_points)

    @property
    def y_values(self) -> Tuple[float, ...]:
        return tuple(p.y for p in self.sorted_points)

    def __len__(self) -> int:
        return len(self.sorted_points)


def validate_points(
    points: PointsInput,
    config: Optional[InterpolationConfig] = None,
) -> PreprocessingResult:
    """
    Validate raw samples and sort them by x.

    Args:
        points: Raw samples in any supported point form
        config: Optional config, only ``spacing_tolerance`` is used

    Returns:
        PreprocessingResult with sorted points and the spacing check

    Raises:
        InsufficientDataError: fewer than 2 points
        DuplicateAbscissaError: two x values are exactly equal
        NonFiniteValueError: any x or y is NaN or infinite
    """
    config = resolve_config(config)
    pts = as_points(points)

    if len(pts) < 2:
        raise InsufficientDataError(required=2, received=len(pts))

    seen = set()
    for p in pts:
        if p.x in seen and not math.isnan(p.x):
            raise DuplicateAbscissaError(p.x)
        seen.add(p.x)

    for i, p in enumerate(pts):
        if not (math.isfinite(p.x) and math.isfinite(p.y)):
            raise NonFiniteValueError(i)

    # sorted() is stable; ties were rejected above anyway
    sorted_points = tuple(sorted(pts, key=lambda p: p.x))
    equally_spaced, step_size = check_equal_spacing(sorted_points, config.spacing_tolerance)

    return PreprocessingResult(
        sorted_points=sorted_points,
        equally_spaced=equally_spaced,
        step_size=step_size,
    )


def check_equal_spacing(
    sorted_points: Sequence[Point],
    tolerance: float = 1e-4,
) -> Tuple[bool, Optional[float]]:
    """Compare every consecutive gap with the first one, within an absolute tolerance."""
    if len(sorted_points) < 2:
        return False, None

    first_step = sorted_points[1].x - sorted_points[0].x
    for i in range(1, len(sorted_points) - 1):
        step = sorted_points[i + 1].x - sorted_points[i].x
        if abs(step - first_step) > tolerance:
            return False, None

    return True, first_step


def require_equal_spacing(
    points: PointsInput,
    config: Optional[InterpolationConfig] = None,
) -> PreprocessingResult:
    """
    Validate like validate_points, then refuse unequally spaced data.

    This is the guard to run before handing points to any evaluator.
    """
    result = validate_points(points, config)
    if not result.equally_spaced:
        raise UnequalSpacingError()
    return result


class RangePosition(str, Enum):
    START = "start"
    CENTER = "center"
    END = "end"
    OUTSIDE = "outside"


@dataclass(frozen=True)
class RangeCheck:
    is_interpolation: bool
    position: RangePosition


def check_interpolation_range(query_x: float, points: PointsInput) -> RangeCheck:
    """
    Locate the query relative to the data range.

    Inside the range, the relative position picks start (< 0.33), end (> 0.67)
    or center.
    """
    xs = [p.x for p in as_points(points)]
    min_x, max_x = min(xs), max(xs)

    if query_x < min_x or query_x > max_x:
        return RangeCheck(False, RangePosition.OUTSIDE)

    relative = (query_x - min_x) / (max_x - min_x)
    if relative < 0.33:
        return RangeCheck(True, RangePosition.START)
    if relative > 0.67:
        return RangeCheck(True, RangePosition.END)
    return RangeCheck(True, RangePosition.CENTER)
