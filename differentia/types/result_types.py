from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple, TypeAlias

from .method_types import MethodType, METHOD_INFO

# Header row first, then one row per point. Absent cells are empty strings.
AnnotatedTable: TypeAlias = Tuple[Tuple[str, ...], ...]
TableEntry: TypeAlias = Tuple[int, int]  # (order, position)


@dataclass(frozen=True)
class InterpolationStep:
    """One stage of a derivation, for display only."""
    description: str
    formula: Optional[str] = None
    table: Optional[AnnotatedTable] = None
    value: Optional[float] = None
    entries: Tuple[TableEntry, ...] = ()


@dataclass(frozen=True)
class InterpolationResult:
    method: MethodType
    value: float
    steps: Tuple[InterpolationStep, ...]
    computation_time_ms: float
    warning: Optional[str] = None
    parameter: Optional[float] = None
    reference_index: Optional[int] = None
    terms_used: Tuple[int, ...] = ()

    @property
    def method_name(self) -> str:
        return METHOD_INFO[self.method].name

    @property
    def highest_order(self) -> int:
        """Highest difference order that contributed a term (0 if none)."""
        return max(self.terms_used, default=0)

    def referenced_entries(self) -> Tuple[TableEntry, ...]:
        """All (order, position) table entries read by the term steps."""
        return tuple(entry for step in self.steps for entry in step.entries)


class Usability(str, Enum):
    EXCELLENT = "excellent"
    GOOD = "good"
    MARGINAL = "marginal"
    UNRELIABLE = "unreliable"
    UNUSABLE = "unusable"

    @property
    def is_usable(self) -> bool:
        return self in (Usability.EXCELLENT, Usability.GOOD, Usability.MARGINAL)


class NoiseLevel(str, Enum):
    LOW = "low"
    MODERATE = "moderate"
    HIGH = "high"
    VERY_HIGH = "very-high"


@dataclass(frozen=True)
class NoiseOrderStatistic:
    order: int
    label: str
    mean: float
    variance: float
    standard_deviation: float
    range: float
    noise_ratio_percent: float
    usability: Usability
    values: Tuple[float, ...] = field(default=(), repr=False)


@dataclass(frozen=True)
class NoiseReport:
    order_statistics: Tuple[NoiseOrderStatistic, ...]
    overall_level: NoiseLevel
    max_recommended_order: int
    data_points: int
    recommendation: str

    def statistic(self, order: int) -> Optional[NoiseOrderStatistic]:
        for stat in self.order_statistics:
            if stat.order == order:
                return stat
        return None


class SmoothingLevel(str, Enum):
    LOW = "low"
    MODERATE = "moderate"
    HIGH = "high"


@dataclass(frozen=True)
class SmoothingMetrics:
    """How far one formula's fitted curve departs from the raw samples."""
    method: MethodType
    smoothing_level: SmoothingLevel
    variance_reduction_percent: float
    max_deviation: float
    avg_deviation: float
    node_values: Tuple[float, ...] = field(default=(), repr=False)
    curve: Tuple[Tuple[float, float], ...] = field(default=(), repr=False)

    @property
    def method_name(self) -> str:
        return METHOD_INFO[self.method].name
