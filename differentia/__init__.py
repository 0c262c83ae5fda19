"""
Differentia: finite-difference interpolation with step-by-step derivations.
==========================================================================

Builds forward, backward and central difference tables from equally spaced
samples and evaluates seven classical interpolation formulas (Newton Forward,
Newton Backward, Stirling, Bessel, Everett, Gaussian Forward, Gaussian
Backward). Every evaluation returns the value together with the ordered
arithmetic steps that produced it.

Quick Start
-----------
>>> from differentia import evaluate_many, MethodType
>>> points = [(0, 0), (1, 1), (2, 4), (3, 9), (4, 16)]
>>> results = evaluate_many([MethodType.FORWARD, "stirling"], points, 2.5)
>>> round(results[0].value, 9)
6.25

Modules
-------
- preprocessing: validation, sorting and the equal-spacing check
- tables: raw and annotated difference tables
- formulas: the seven evaluators and the method registry
- analysis: noise characterisation, smoothing comparison and result comparison
"""

from .types import (
    Point,
    as_points,
    MethodType,
    DifferenceKind,
    MethodInfo,
    METHOD_INFO,
    InterpolationStep,
    InterpolationResult,
    Usability,
    NoiseLevel,
    NoiseOrderStatistic,
    NoiseReport,
    SmoothingLevel,
    SmoothingMetrics,
)
from .config import InterpolationConfig, UsabilityThresholds, NoiseLevelCutoffs, DEFAULT_CONFIG
from .errors import (
    InterpolationInputError,
    InsufficientDataError,
    DuplicateAbscissaError,
    NonFiniteValueError,
    UnequalSpacingError,
    InterpolationWarning,
    ExtrapolationWarning,
    OffCenterWarning,
)
from .preprocessing import (
    PreprocessingResult,
    validate_points,
    require_equal_spacing,
    check_interpolation_range,
    RangePosition,
)
from .tables import (
    DifferenceTable,
    raw_forward,
    raw_backward,
    raw_central,
    build_forward,
    build_backward,
    build_central,
)
from .formulas import (
    FormulaEvaluator,
    NewtonForward,
    NewtonBackward,
    Stirling,
    Bessel,
    Everett,
    GaussianForward,
    GaussianBackward,
    get_evaluator,
    evaluate,
    evaluate_many,
)
from .analysis import characterize_noise, compare_results, ComparisonSummary, analyze_smoothing

__version__ = "1.0.0"

__all__ = [
    # data model
    "Point",
    "as_points",
    "MethodType",
    "DifferenceKind",
    "MethodInfo",
    "METHOD_INFO",
    "InterpolationStep",
    "InterpolationResult",
    "Usability",
    "NoiseLevel",
    "NoiseOrderStatistic",
    "NoiseReport",
    "SmoothingLevel",
    "SmoothingMetrics",
    # configuration
    "InterpolationConfig",
    "UsabilityThresholds",
    "NoiseLevelCutoffs",
    "DEFAULT_CONFIG",
    # errors and warnings
    "InterpolationInputError",
    "InsufficientDataError",
    "DuplicateAbscissaError",
    "NonFiniteValueError",
    "UnequalSpacingError",
    "InterpolationWarning",
    "ExtrapolationWarning",
    "OffCenterWarning",
    # preprocessing
    "PreprocessingResult",
    "validate_points",
    "require_equal_spacing",
    "check_interpolation_range",
    "RangePosition",
    # tables
    "DifferenceTable",
    "raw_forward",
    "raw_backward",
    "raw_central",
    "build_forward",
    "build_backward",
    "build_central",
    # formulas
    "FormulaEvaluator",
    "NewtonForward",
    "NewtonBackward",
    "Stirling",
    "Bessel",
    "Everett",
    "GaussianForward",
    "GaussianBackward",
    "get_evaluator",
    "evaluate",
    "evaluate_many",
    # analysis
    "characterize_noise",
    "compare_results",
    "ComparisonSummary",
    "analyze_smoothing",
    "__version__",
]
