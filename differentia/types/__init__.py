from .point_types import Point, PointSet, PointLike, PointsInput, as_point, as_points, x_values, y_values
from .method_types import MethodType, DifferenceKind, MethodInfo, METHOD_INFO, as_method
from .result_types import (
    AnnotatedTable,
    TableEntry,
    InterpolationStep,
    InterpolationResult,
    Usability,
    NoiseLevel,
    NoiseOrderStatistic,
    NoiseReport,
    SmoothingLevel,
    SmoothingMetrics,
)

__all__ = [
    "Point",
    "PointSet",
    "PointLike",
    "PointsInput",
    "as_point",
    "as_points",
    "x_values",
    "y_values",
    "MethodType",
    "DifferenceKind",
    "MethodInfo",
    "METHOD_INFO",
    "as_method",
    "AnnotatedTable",
    "TableEntry",
    "InterpolationStep",
    "InterpolationResult",
    "Usability",
    "NoiseLevel",
    "NoiseOrderStatistic",
    "NoiseReport",
    "SmoothingLevel",
    "SmoothingMetrics",
]
