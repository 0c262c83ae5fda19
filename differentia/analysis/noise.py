"""
Noise characterisation over the forward difference table.

Each extra differencing step amplifies measurement noise, so the spread of a
difference order relative to the spread of the raw data says how far up the
table a formula can usefully go.
"""
from __future__ import annotations
from typing import List, Optional
import numpy as np

from ..config import InterpolationConfig, resolve_config
from ..errors import InsufficientDataError
from ..tables.difference_table import raw_forward
from ..types.point_types import PointsInput, as_points
from ..types.result_types import NoiseLevel, NoiseOrderStatistic, NoiseReport, Usability
from ..utils.formatting import ordinal, power_label

RECOMMENDATIONS = {
    NoiseLevel.LOW: "All interpolation methods should work well. You can use up to 4th-5th order differences.",
    NoiseLevel.MODERATE: "Use Stirling or Bessel formulas. Limit to 2nd-3rd order differences for best results.",
    NoiseLevel.HIGH: "Prefer Everett formula for smoothing. Use only 2nd order differences or lower.",
    NoiseLevel.VERY_HIGH: (
        "Data is very noisy. Consider linear interpolation only (1st order) "
        "or data smoothing preprocessing."
    ),
}


def order_label(order: int) -> str:
    if order == 0:
        return "Original (y)"
    return f"{ordinal(order)} Order ({power_label('Δ', order)}y)"


def _statistic(
    order: int,
    values: np.ndarray,
    base_range: float,
    config: InterpolationConfig,
) -> NoiseOrderStatistic:
    mean = float(np.mean(values))
    # population variance, divide by count
    variance = float(np.mean((values - mean) ** 2))
    std = float(np.sqrt(variance))
    value_range = float(np.max(values) - np.min(values))

    if order == 0:
        ratio = 0.0
        usability = Usability.EXCELLENT
    else:
        ratio = std / base_range * 100.0 if base_range > 0 else 0.0
        usability = config.thresholds_for(order).classify(ratio)

    return NoiseOrderStatistic(
        order=order,
        label=order_label(order),
        mean=mean,
        variance=variance,
        standard_deviation=std,
        range=value_range,
        noise_ratio_percent=ratio,
        usability=usability,
        values=tuple(float(v) for v in values),
    )


def characterize_noise(
    points: PointsInput,
    config: Optional[InterpolationConfig] = None,
) -> NoiseReport:
    """
    Per-order noise statistics of the forward differences.

    Args:
        points: Validated, sorted sample points (at least 3)
        config: Optional config supplying thresholds and the highest order analysed

    Returns:
        NoiseReport

    Raises:
        InsufficientDataError: fewer than 3 points
    """
    config = resolve_config(config)
    pts = as_points(points)
    n = len(pts)
    if n < 3:
        raise InsufficientDataError(required=3, received=n)

    table = raw_forward(pts)
    base = table.column(0)
    base_range = float(np.max(base) - np.min(base))

    stats: List[NoiseOrderStatistic] = [_statistic(0, base, base_range, config)]
    for order in range(1, min(n - 1, config.max_noise_order) + 1):
        stats.append(_statistic(order, table.column(order), base_range, config))

    first = stats[1].noise_ratio_percent
    second = stats[2].noise_ratio_percent if len(stats) > 2 else 0.0
    overall = config.noise_level_cutoffs.classify(first, second)

    max_order = max(
        (s.order for s in stats if s.order > 0 and s.usability.is_usable),
        default=1,
    )

    return NoiseReport(
        order_statistics=tuple(stats),
        overall_level=overall,
        max_recommended_order=max_order,
        data_points=n,
        recommendation=RECOMMENDATIONS[overall],
    )
