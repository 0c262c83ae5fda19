import warnings

import pytest

from differentia.analysis.smoothing import SMOOTHING_LEVELS, analyze_smoothing
from differentia.config import InterpolationConfig
from differentia.errors import InsufficientDataError, UnequalSpacingError
from differentia.types.method_types import MethodType
from differentia.types.result_types import SmoothingLevel

ALTERNATING = [(0, 0), (1, 10), (2, 0), (3, 10), (4, 0)]


def test_levels_per_method():
    assert SMOOTHING_LEVELS[MethodType.FORWARD] == SmoothingLevel.LOW
    assert SMOOTHING_LEVELS[MethodType.BACKWARD] == SmoothingLevel.LOW
    assert SMOOTHING_LEVELS[MethodType.EVERETT] == SmoothingLevel.HIGH
    for method in (MethodType.STIRLING, MethodType.BESSEL,
                   MethodType.GAUSSIAN_FORWARD, MethodType.GAUSSIAN_BACKWARD):
        assert SMOOTHING_LEVELS[method] == SmoothingLevel.MODERATE


def test_polynomial_data_is_not_smoothed(square_points):
    metrics = analyze_smoothing(square_points)
    assert [m.method for m in metrics] == list(MethodType)
    for m in metrics:
        assert m.max_deviation == pytest.approx(0.0, abs=1e-9)
        assert m.avg_deviation == pytest.approx(0.0, abs=1e-9)
        assert m.variance_reduction_percent == pytest.approx(0.0, abs=1e-6)
        assert m.smoothing_level == SMOOTHING_LEVELS[m.method]


class TestAlternatingData:
    def test_newton_reproduces_every_node(self):
        (forward,) = analyze_smoothing(ALTERNATING, ["forward"])
        assert forward.node_values == pytest.approx([0.0, 10.0, 0.0, 10.0, 0.0])
        assert forward.max_deviation == pytest.approx(0.0, abs=1e-9)
        assert forward.variance_reduction_percent == pytest.approx(0.0, abs=1e-9)

    def test_everett_misses_the_first_node(self):
        # the cubic through x = 1..4 extrapolates to 80 at x = 0
        (everett,) = analyze_smoothing(ALTERNATING, [MethodType.EVERETT])
        assert everett.method_name == "Everett's Formula"
        assert everett.node_values == pytest.approx([80.0, 10.0, 0.0, 10.0, 0.0])
        assert everett.max_deviation == pytest.approx(80.0)
        assert everett.avg_deviation == pytest.approx(16.0)
        assert everett.variance_reduction_percent == pytest.approx((24.0 - 920.0) / 24.0 * 100.0)


def test_curve_spans_the_data_range(square_points):
    (forward,) = analyze_smoothing(square_points, ["forward"])
    assert len(forward.curve) == 50
    assert forward.curve[0] == pytest.approx((0.0, 0.0))
    assert forward.curve[-1] == pytest.approx((4.0, 16.0))

    (coarse,) = analyze_smoothing(square_points, ["forward"], curve_points=5)
    assert [x for x, _ in coarse.curve] == pytest.approx([0.0, 1.0, 2.0, 3.0, 4.0])


def test_constant_data_has_no_variance_reduction():
    metrics = analyze_smoothing([(x, 2.0) for x in range(4)])
    assert all(m.variance_reduction_percent == 0.0 for m in metrics)


def test_keeps_request_order(zigzag_points):
    metrics = analyze_smoothing(zigzag_points, ["everett", "stirling"])
    assert [m.method for m in metrics] == [MethodType.EVERETT, MethodType.STIRLING]


def test_never_issues_warnings(square_points):
    loud = InterpolationConfig(emit_warnings=True)
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        analyze_smoothing(square_points, config=loud)


def test_input_errors():
    with pytest.raises(InsufficientDataError, match="At least 3 data points"):
        analyze_smoothing([(0, 1), (1, 2)])
    with pytest.raises(UnequalSpacingError):
        analyze_smoothing([(0, 1), (1, 2), (3, 4)])
    with pytest.raises(ValueError, match="curve_points"):
        analyze_smoothing([(0, 1), (1, 2), (2, 4)], curve_points=1)
    with pytest.raises(ValueError, match="Unknown interpolation method"):
        analyze_smoothing([(0, 1), (1, 2), (2, 4)], ["spline"])
