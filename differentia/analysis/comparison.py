from __future__ import annotations
from dataclasses import dataclass
from typing import Sequence
import numpy as np

from ..types.method_types import MethodType
from ..types.result_types import InterpolationResult


@dataclass(frozen=True)
class ComparisonSummary:
    count: int
    mean: float
    minimum: float
    maximum: float
    standard_deviation: float
    closest_to_mean: MethodType
    fastest: MethodType

    @property
    def spread(self) -> float:
        return self.maximum - self.minimum


def compare_results(results: Sequence[InterpolationResult]) -> ComparisonSummary:
    """
    Agreement statistics across several formulas evaluated at the same point.

    Ties for closest-to-mean and fastest go to the earliest result.
    """
    if not results:
        raise ValueError("compare_results needs at least one result")

    values = np.array([r.value for r in results], dtype=np.float64)
    mean = float(np.mean(values))
    deviations = np.abs(values - mean)
    times = np.array([r.computation_time_ms for r in results], dtype=np.float64)

    return ComparisonSummary(
        count=len(results),
        mean=mean,
        minimum=float(np.min(values)),
        maximum=float(np.max(values)),
        standard_deviation=float(np.std(values)),
        closest_to_mean=results[int(np.argmin(deviations))].method,
        fastest=results[int(np.argmin(times))].method,
    )
