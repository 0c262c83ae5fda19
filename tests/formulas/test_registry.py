import pytest

from differentia.config import InterpolationConfig
from differentia.errors import DuplicateAbscissaError, UnequalSpacingError
from differentia.formulas.central import Stirling
from differentia.formulas.registry import EVALUATORS, evaluate, evaluate_many, get_evaluator
from differentia.types.method_types import MethodType


def test_get_evaluator_accepts_strings():
    assert isinstance(get_evaluator("stirling"), Stirling)
    assert get_evaluator("Gaussian-Forward") is EVALUATORS[MethodType.GAUSSIAN_FORWARD]
    assert get_evaluator(MethodType.BESSEL).name == "Bessel's Formula"


def test_unknown_method():
    with pytest.raises(ValueError, match="Unknown interpolation method"):
        get_evaluator("lagrange")


def test_registry_is_read_only():
    with pytest.raises(TypeError):
        EVALUATORS[MethodType.FORWARD] = None


def test_evaluate_sorts_input(square_points):
    result = evaluate("forward", list(reversed(square_points)), 2.5)
    assert result.value == pytest.approx(6.25)


def test_evaluate_rejects_unequal_spacing():
    with pytest.raises(UnequalSpacingError):
        evaluate("forward", [(0, 1), (1, 2), (3, 4)], 1.5)


def test_evaluate_rejects_duplicates():
    with pytest.raises(DuplicateAbscissaError):
        evaluate(MethodType.BACKWARD, [(0, 1), (0, 2), (1, 3)], 0.5)


def test_evaluate_many_runs_all_methods_by_default(square_points):
    results = evaluate_many(None, square_points, 2.5)
    assert [r.method for r in results] == list(MethodType)
    assert all(r.value == pytest.approx(6.25) for r in results)


def test_evaluate_many_keeps_request_order(zigzag_points):
    results = evaluate_many(["everett", MethodType.FORWARD], zigzag_points, 2.5, record_steps=False)
    assert [r.method for r in results] == [MethodType.EVERETT, MethodType.FORWARD]
    assert all(r.steps == () for r in results)


def test_evaluate_many_resolves_methods_before_validating():
    with pytest.raises(ValueError, match="Unknown interpolation method"):
        evaluate_many(["forward", "bogus"], [(0, 1)], 0.5)


def test_evaluate_many_rejects_unequal_spacing():
    with pytest.raises(UnequalSpacingError):
        evaluate_many(None, [(0, 1), (1, 2), (3, 4)], 1.5)


def test_evaluate_many_honours_spacing_tolerance():
    points = [(0, 0), (1, 1), (2.001, 4)]
    with pytest.raises(UnequalSpacingError):
        evaluate_many(None, points, 1.5)
    loose = InterpolationConfig(spacing_tolerance=0.01)
    assert len(evaluate_many(None, points, 1.5, config=loose)) == 7
