from .validator import (
    PreprocessingResult,
    validate_points,
    check_equal_spacing,
    require_equal_spacing,
    RangePosition,
    RangeCheck,
    check_interpolation_range,
)

__all__ = [
    "PreprocessingResult",
    "validate_points",
    "check_equal_spacing",
    "require_equal_spacing",
    "RangePosition",
    "RangeCheck",
    "check_interpolation_range",
]
