"""
Number and symbol formatting for step traces and annotated tables.

Everything here returns plain strings; rendering (LaTeX, HTML) belongs to the caller.
"""
from __future__ import annotations

from .num_utils import is_close_to_int

_SUPERSCRIPTS = str.maketrans("0123456789-", "⁰¹²³⁴⁵⁶⁷⁸⁹⁻")
_SUBSCRIPTS = str.maketrans("0123456789-", "₀₁₂₃₄₅₆₇₈₉₋")


def format_number(num: float, precision: int = 6) -> str:
    """
    Format a number for step descriptions.

    Values below 1e-10 in magnitude print as ``0``; very large or very small
    magnitudes switch to exponential notation.

    Args:
        num: Value to format
        precision: Digits after the decimal point

    Returns:
        Formatted string
    """
    if abs(num) < 1e-10:
        return "0"
    if abs(num) >= 1e6 or (abs(num) < 1e-3 and num != 0):
        return f"{num:.{precision}e}"
    return f"{num:.{precision}f}"


def format_display(num: float, sig_figs: int = 4) -> str:
    """Format with ``sig_figs`` significant figures and no trailing zeros."""
    if abs(num) < 1e-10:
        return "0"
    if is_close_to_int(num, 1e-12) and abs(num) < 10 ** sig_figs:
        return str(int(round(num)))
    return f"{num:.{sig_figs}g}"


def to_superscript(n: int) -> str:
    return str(n).translate(_SUPERSCRIPTS)


def to_subscript(n: int) -> str:
    return str(n).translate(_SUBSCRIPTS)


def ordinal(n: int) -> str:
    """1 -> '1st', 2 -> '2nd', 11 -> '11th'."""
    if 10 <= n % 100 <= 20:
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(n % 10, "th")
    return f"{n}{suffix}"


def power_label(symbol: str, order: int) -> str:
    """'Δ' for order 1, 'Δ²' for order 2, ..."""
    return symbol if order == 1 else f"{symbol}{to_superscript(order)}"


def difference_label(operator: str, order: int, subscript: str) -> str:
    """Plain-text label of a single difference, e.g. ``Δ²y₋₁``."""
    return f"{power_label(operator, order)}y{subscript}"


def difference_latex(operator: str, order: int, subscript: str) -> str:
    """LaTeX label of a single difference, e.g. ``\\Delta^{2} y_{-1}``."""
    power = "" if order == 1 else f"^{{{order}}}"
    return f"{operator}{power} y_{{{subscript}}}"
