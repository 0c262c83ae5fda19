from __future__ import annotations
from dataclasses import dataclass, field, replace
from typing import Optional, Tuple

from .types.result_types import NoiseLevel, Usability


@dataclass(frozen=True)
class UsabilityThresholds:
    """
    Ordered noise-ratio cutoffs for one difference order.

    ``levels`` has one more entry than ``cutoffs``; a ratio below ``cutoffs[i]``
    maps to ``levels[i]``, anything else to ``levels[-1]``.
    """
    cutoffs: Tuple[float, ...]
    levels: Tuple[Usability, ...]

    def __post_init__(self):
        if len(self.levels) != len(self.cutoffs) + 1:
            raise ValueError("levels must have exactly one more entry than cutoffs")
        if list(self.cutoffs) != sorted(self.cutoffs):
            raise ValueError("cutoffs must be sorted in increasing order")

    def classify(self, noise_ratio: float) -> Usability:
        for cutoff, level in zip(self.cutoffs, self.levels):
            if noise_ratio < cutoff:
                return level
        return self.levels[-1]


_U = Usability

# Empirical calibration constants, index 0 is order 1, the last entry covers every higher order.
DEFAULT_USABILITY = (
    UsabilityThresholds((50.0, 100.0), (_U.EXCELLENT, _U.GOOD, _U.MARGINAL)),
    UsabilityThresholds((30.0, 80.0), (_U.GOOD, _U.MARGINAL, _U.UNRELIABLE)),
    UsabilityThresholds((20.0, 60.0), (_U.MARGINAL, _U.UNRELIABLE, _U.UNUSABLE)),
    UsabilityThresholds((10.0,), (_U.UNRELIABLE, _U.UNUSABLE)),
)


@dataclass(frozen=True)
class NoiseLevelCutoffs:
    """(order-1 ratio, order-2 ratio) bounds for low and moderate, order-1 bound for high."""
    low: Tuple[float, float] = (20.0, 40.0)
    moderate: Tuple[float, float] = (50.0, 80.0)
    high: float = 100.0

    def classify(self, first_order: float, second_order: float) -> NoiseLevel:
        if first_order < self.low[0] and second_order < self.low[1]:
            return NoiseLevel.LOW
        if first_order < self.moderate[0] and second_order < self.moderate[1]:
            return NoiseLevel.MODERATE
        if first_order < self.high:
            return NoiseLevel.HIGH
        return NoiseLevel.VERY_HIGH


@dataclass(frozen=True)
class InterpolationConfig:
    spacing_tolerance: float = 1e-4
    max_noise_order: int = 4
    usability_thresholds: Tuple[UsabilityThresholds, ...] = DEFAULT_USABILITY
    noise_level_cutoffs: NoiseLevelCutoffs = field(default_factory=NoiseLevelCutoffs)
    emit_warnings: bool = False
    display_precision: int = 6
    abscissa_precision: int = 4

    def __post_init__(self):
        if self.spacing_tolerance < 0:
            raise ValueError("spacing_tolerance must be non-negative")
        if self.max_noise_order < 1:
            raise ValueError("max_noise_order must be >= 1")
        if not self.usability_thresholds:
            raise ValueError("usability_thresholds must contain at least one entry")

    def thresholds_for(self, order: int) -> UsabilityThresholds:
        index = min(order, len(self.usability_thresholds)) - 1
        return self.usability_thresholds[index]

    def with_options(self, **changes) -> "InterpolationConfig":
        return replace(self, **changes)


DEFAULT_CONFIG = InterpolationConfig()


def resolve_config(config: Optional[InterpolationConfig]) -> InterpolationConfig:
    """Return the config if it is not None, otherwise the module default."""
    return config if config is not None else DEFAULT_CONFIG
