"""
Smoothing comparison across the interpolation formulas.

Each formula is evaluated at every sample abscissa and along an evenly
spaced curve over the data range. The spread of the fitted node values
against the raw ordinates shows how much a formula smooths (or amplifies)
the data.
"""
from __future__ import annotations
from typing import Iterable, List, Optional, Tuple, Union
import numpy as np

from ..config import InterpolationConfig, resolve_config
from ..errors import InsufficientDataError
from ..formulas.registry import evaluate_many
from ..preprocessing.validator import require_equal_spacing
from ..types.method_types import MethodType, as_method
from ..types.point_types import PointsInput
from ..types.result_types import SmoothingLevel, SmoothingMetrics

SMOOTHING_LEVELS = {
    MethodType.FORWARD: SmoothingLevel.LOW,
    MethodType.BACKWARD: SmoothingLevel.LOW,
    MethodType.STIRLING: SmoothingLevel.MODERATE,
    MethodType.BESSEL: SmoothingLevel.MODERATE,
    MethodType.EVERETT: SmoothingLevel.HIGH,
    MethodType.GAUSSIAN_FORWARD: SmoothingLevel.MODERATE,
    MethodType.GAUSSIAN_BACKWARD: SmoothingLevel.MODERATE,
}

DEFAULT_CURVE_POINTS = 50


def _values_at(
    methods: List[MethodType],
    points,
    xs: Iterable[float],
    config: InterpolationConfig,
) -> np.ndarray:
    """Matrix of interpolated values, one row per abscissa, one column per method."""
    return np.array(
        [
            [r.value for r in evaluate_many(methods, points, x, record_steps=False, config=config)]
            for x in xs
        ],
        dtype=np.float64,
    )


def analyze_smoothing(
    points: PointsInput,
    methods: Optional[Iterable[Union[MethodType, str]]] = None,
    *,
    curve_points: int = DEFAULT_CURVE_POINTS,
    config: Optional[InterpolationConfig] = None,
) -> Tuple[SmoothingMetrics, ...]:
    """
    Variance reduction and node deviations for each formula.

    Args:
        points: Raw sample points (at least 3, equally spaced)
        methods: Methods to analyse, in order; None analyses all seven
        curve_points: Number of evenly spaced curve abscissas, including both ends
        config: Optional configuration; advisory warnings are never issued here

    Returns:
        One SmoothingMetrics per method whose node values are all finite

    Raises:
        InsufficientDataError: fewer than 3 points
        UnequalSpacingError: the points are not equally spaced
    """
    if curve_points < 2:
        raise ValueError("curve_points must be at least 2")
    quiet = resolve_config(config).with_options(emit_warnings=False)
    requested = list(MethodType) if methods is None else [as_method(m) for m in methods]

    prepared = require_equal_spacing(points, quiet)
    n = len(prepared)
    if n < 3:
        raise InsufficientDataError(required=3, received=n)

    pts = prepared.sorted_points
    y = np.array(prepared.y_values, dtype=np.float64)
    # population variance, divide by count
    original_variance = float(np.mean((y - np.mean(y)) ** 2))

    curve_x = np.linspace(pts[0].x, pts[-1].x, curve_points)
    at_nodes = _values_at(requested, pts, prepared.x_values, quiet)
    on_curve = _values_at(requested, pts, curve_x, quiet)

    metrics: List[SmoothingMetrics] = []
    for column, method in enumerate(requested):
        fitted = at_nodes[:, column]
        if not np.all(np.isfinite(fitted)):
            continue

        fitted_variance = float(np.mean((fitted - np.mean(fitted)) ** 2))
        if original_variance > 0:
            reduction = (original_variance - fitted_variance) / original_variance * 100.0
        else:
            reduction = 0.0
        deviations = np.abs(y - fitted)

        curve_y = on_curve[:, column]
        finite = np.isfinite(curve_y)
        metrics.append(
            SmoothingMetrics(
                method=method,
                smoothing_level=SMOOTHING_LEVELS[method],
                variance_reduction_percent=reduction,
                max_deviation=float(np.max(deviations)),
                avg_deviation=float(np.mean(deviations)),
                node_values=tuple(float(v) for v in fitted),
                curve=tuple(
                    (float(cx), float(cy)) for cx, cy in zip(curve_x[finite], curve_y[finite])
                ),
            )
        )
    return tuple(metrics)
