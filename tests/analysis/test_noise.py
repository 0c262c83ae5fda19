import math

import pytest

from differentia.analysis.noise import RECOMMENDATIONS, characterize_noise, order_label
from differentia.config import InterpolationConfig
from differentia.errors import InsufficientDataError
from differentia.types.result_types import NoiseLevel, Usability


def report_orders(report):
    return [s.order for s in report.order_statistics]


def test_order_labels():
    assert order_label(0) == "Original (y)"
    assert order_label(1) == "1st Order (Δy)"
    assert order_label(3) == "3rd Order (Δ³y)"


def test_smooth_quadratic(square_points):
    report = characterize_noise(square_points)
    assert report.data_points == 5
    assert [s.order for s in report.order_statistics] == [0, 1, 2, 3, 4]

    base = report.statistic(0)
    assert base.mean == pytest.approx(6.0)
    assert base.variance == pytest.approx(34.8)
    assert base.noise_ratio_percent == 0.0
    assert base.usability == Usability.EXCELLENT

    first = report.statistic(1)
    assert first.values == (1.0, 3.0, 5.0, 7.0)
    assert first.variance == pytest.approx(5.0)
    assert first.standard_deviation == pytest.approx(math.sqrt(5.0))
    assert first.range == pytest.approx(6.0)
    assert first.noise_ratio_percent == pytest.approx(math.sqrt(5.0) / 16 * 100)
    assert first.usability == Usability.EXCELLENT

    assert report.statistic(2).usability == Usability.GOOD
    assert report.statistic(3).usability == Usability.MARGINAL
    assert report.statistic(4).usability == Usability.UNRELIABLE
    assert report.overall_level == NoiseLevel.LOW
    assert report.max_recommended_order == 3
    assert report.recommendation == RECOMMENDATIONS[NoiseLevel.LOW]


def test_constant_data_has_zero_ratios():
    report = characterize_noise([(x, 5.0) for x in range(4)])
    assert report.statistic(0).range == 0.0
    assert all(s.noise_ratio_percent == 0.0 for s in report.order_statistics)
    assert report.overall_level == NoiseLevel.LOW
    assert report.max_recommended_order == 3


def test_alternating_data_is_very_noisy():
    report = characterize_noise([(0, 0), (1, 10), (2, 0), (3, 10), (4, 0)])
    assert report.statistic(1).noise_ratio_percent == pytest.approx(100.0)
    assert report.statistic(1).usability == Usability.MARGINAL
    assert report.statistic(2).usability == Usability.UNRELIABLE
    assert report.statistic(3).usability == Usability.UNUSABLE
    assert report.overall_level == NoiseLevel.VERY_HIGH
    assert report.max_recommended_order == 1
    assert "very noisy" in report.recommendation


def test_orders_are_capped_by_config():
    points = [(x, x ** 3) for x in range(10)]
    assert report_orders(characterize_noise(points)) == [0, 1, 2, 3, 4]
    assert report_orders(characterize_noise(points, InterpolationConfig(max_noise_order=2))) == [0, 1, 2]


def test_three_points_analyse_two_orders():
    report = characterize_noise([(0, 1), (1, 2), (2, 5)])
    assert report_orders(report) == [0, 1, 2]
    assert report.statistic(3) is None


def test_needs_three_points():
    with pytest.raises(InsufficientDataError, match="At least 3 data points"):
        characterize_noise([(0, 1), (1, 2)])
