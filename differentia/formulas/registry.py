from __future__ import annotations
from types import MappingProxyType
from typing import Iterable, Mapping, Optional, Tuple, Union

from ..config import InterpolationConfig
from ..preprocessing.validator import require_equal_spacing
from ..types.method_types import MethodType, as_method
from ..types.point_types import PointsInput
from ..types.result_types import InterpolationResult
from .base import FormulaEvaluator
from .central import Bessel, Everett, Stirling
from .gaussian import GaussianBackward, GaussianForward
from .newton import NewtonBackward, NewtonForward

MethodLike = Union[MethodType, str]

# Evaluators hold no state, so one shared instance per method is enough.
EVALUATORS: Mapping[MethodType, FormulaEvaluator] = MappingProxyType({
    evaluator.method: evaluator
    for evaluator in (
        NewtonForward(),
        NewtonBackward(),
        Stirling(),
        Bessel(),
        Everett(),
        GaussianForward(),
        GaussianBackward(),
    )
})


def get_evaluator(method: MethodLike) -> FormulaEvaluator:
    return EVALUATORS[as_method(method)]


def evaluate(
    method: MethodLike,
    points: PointsInput,
    query_x: float,
    *,
    record_steps: bool = True,
    config: Optional[InterpolationConfig] = None,
) -> InterpolationResult:
    """
    Validate ``points`` and evaluate a single formula.

    Raises the preprocessing errors (including UnequalSpacingError) before the
    evaluator runs.
    """
    prepared = require_equal_spacing(points, config)
    return get_evaluator(method).evaluate(
        prepared.sorted_points, query_x, record_steps=record_steps, config=config
    )


def evaluate_many(
    methods: Optional[Iterable[MethodLike]],
    points: PointsInput,
    query_x: float,
    *,
    record_steps: bool = True,
    config: Optional[InterpolationConfig] = None,
) -> Tuple[InterpolationResult, ...]:
    """
    Validate once, then run every requested formula independently.

    Args:
        methods: Methods to run, in order; None runs all seven
        points: Raw sample points
        query_x: Abscissa to interpolate at
        record_steps: Build step traces
        config: Optional configuration

    Returns:
        One result per method, in request order
    """
    evaluators = [get_evaluator(m) for m in (MethodType if methods is None else methods)]
    prepared = require_equal_spacing(points, config)
    return tuple(
        evaluator.evaluate(prepared.sorted_points, query_x, record_steps=record_steps, config=config)
        for evaluator in evaluators
    )
