"""Behaviour every formula shares, checked across all seven methods."""
import math

import pytest

from differentia.formulas.registry import EVALUATORS, get_evaluator
from differentia.types.method_types import MethodType
from differentia.utils.num_utils import MAX_FACTORIAL_ORDER

ALL_METHODS = list(MethodType)


def cubic(x):
    return x ** 3 - 2 * x + 1


@pytest.mark.parametrize("method", ALL_METHODS)
def test_cubic_is_reproduced_exactly(method):
    points = [(x, cubic(x)) for x in range(7)]
    result = get_evaluator(method).evaluate(points, 2.7)
    assert result.value == pytest.approx(cubic(2.7), abs=1e-9)


@pytest.mark.parametrize("method", ALL_METHODS)
def test_square_at_midpoint(method, square_points):
    assert get_evaluator(method).evaluate(square_points, 2.5).value == pytest.approx(6.25)


@pytest.mark.parametrize("method", ALL_METHODS)
def test_reference_node_is_reproduced(method):
    points = [(0.0, 1.7), (0.5, -0.3), (1.0, 2.2), (1.5, 0.9), (2.0, 4.1), (2.5, 3.3)]
    evaluator = get_evaluator(method)
    reference = evaluator.reference_index(len(points))
    x, y = points[reference]
    assert evaluator.evaluate(points, x).value == pytest.approx(y)


@pytest.mark.parametrize("method", ALL_METHODS)
def test_value_does_not_depend_on_step_recording(method, zigzag_points):
    evaluator = get_evaluator(method)
    traced = evaluator.evaluate(zigzag_points, 1.3)
    silent = evaluator.evaluate(zigzag_points, 1.3, record_steps=False)
    assert silent.value == traced.value
    assert silent.terms_used == traced.terms_used
    assert silent.warning == traced.warning
    assert silent.steps == ()
    assert len(traced.steps) > 0


@pytest.mark.parametrize("method", ALL_METHODS)
def test_result_shape(method, zigzag_points):
    result = get_evaluator(method).evaluate(zigzag_points, 1.3)
    assert result.method == method
    assert result.computation_time_ms >= 0
    assert result.steps[0].description.startswith("Step 1: Compute step size h")
    assert result.steps[-1].description.startswith("Final Answer: y(1.3000) = ")
    assert result.steps[-1].value == result.value
    assert sum(1 for step in result.steps if step.table is not None) == 1


@pytest.mark.parametrize("method", ALL_METHODS)
def test_extrapolation_is_flagged(method, square_points):
    result = get_evaluator(method).evaluate(square_points, -1)
    assert result.warning.startswith("Warning: Extrapolation detected")


@pytest.mark.parametrize("method", ALL_METHODS)
def test_non_unit_spacing(method):
    points = [(1.0 + 0.25 * i, (1.0 + 0.25 * i) ** 2) for i in range(5)]
    assert get_evaluator(method).evaluate(points, 1.6).value == pytest.approx(2.56)


def test_one_evaluator_per_method():
    assert set(EVALUATORS) == set(MethodType)
    for method, evaluator in EVALUATORS.items():
        assert evaluator.method == method


@pytest.mark.parametrize("method", ALL_METHODS)
def test_long_tables_stop_before_factorial_overflow(method):
    points = [(x, x) for x in range(180)]
    result = get_evaluator(method).evaluate(points, 10.5, record_steps=False)
    assert math.isfinite(result.value)
    assert result.value == pytest.approx(10.5)
    assert result.highest_order <= MAX_FACTORIAL_ORDER


def test_newton_forward_uses_every_representable_order():
    points = [(x, x) for x in range(180)]
    result = get_evaluator(MethodType.FORWARD).evaluate(points, 10.5, record_steps=False)
    assert result.terms_used == tuple(range(1, MAX_FACTORIAL_ORDER + 1))
