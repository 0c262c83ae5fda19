import pytest

from differentia.utils.formatting import (
    difference_label,
    difference_latex,
    format_display,
    format_number,
    ordinal,
    power_label,
    to_subscript,
    to_superscript,
)


class TestFormatNumber:
    def test_fixed_notation(self):
        assert format_number(0.5) == "0.500000"
        assert format_number(-2.0, 2) == "-2.00"

    def test_tiny_values_print_as_zero(self):
        assert format_number(0.0) == "0"
        assert format_number(1e-12) == "0"
        assert format_number(-1e-11) == "0"

    def test_exponential_for_large_and_small(self):
        assert format_number(1234567.0) == "1.234567e+06"
        assert format_number(0.0005, 3) == "5.000e-04"


def test_format_display():
    assert format_display(3.0) == "3"
    assert format_display(2.123456) == "2.123"
    assert format_display(0.0) == "0"


def test_super_and_subscripts():
    assert to_superscript(2) == "²"
    assert to_superscript(10) == "¹⁰"
    assert to_subscript(0) == "₀"
    assert to_subscript(-1) == "₋₁"


@pytest.mark.parametrize("n,expected", [
    (1, "1st"), (2, "2nd"), (3, "3rd"), (4, "4th"),
    (11, "11th"), (12, "12th"), (13, "13th"),
    (21, "21st"), (22, "22nd"), (111, "111th"),
])
def test_ordinal(n, expected):
    assert ordinal(n) == expected


def test_power_label():
    assert power_label("Δ", 1) == "Δ"
    assert power_label("∇", 3) == "∇³"


def test_difference_labels():
    assert difference_label("Δ", 2, "₋₁") == "Δ²y₋₁"
    assert difference_label("Δ", 1, "₀") == "Δy₀"
    assert difference_latex(r"\Delta", 2, "-1") == r"\Delta^{2} y_{-1}"
    assert difference_latex(r"\nabla", 1, "n") == r"\nabla y_{n}"
