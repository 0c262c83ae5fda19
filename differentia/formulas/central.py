"""
Central difference formulas: Stirling, Bessel and Everett.

All three read the forward-recurrence table around a mid index. Offsets in
the term descriptions are relative to that index, so Δ²y₋₁ is the second
difference one row above the reference.
"""
from __future__ import annotations
from typing import Optional

from ..types.method_types import MethodType
from ..types.point_types import PointSet
from ..utils.num_utils import central_product, gauss_shifts, product_of
from .base import FormulaEvaluator, TermComponent, central_latex, product_latex
from .trace import NumberFormat, StepTrace


class Stirling(FormulaEvaluator):
    """
    Mean of the two Gauss formulas around the middle point.

    Odd orders average two adjacent differences, even orders use one::

        y = y₀ + p·(Δy₋₁ + Δy₀)/2 + p²/2!·Δ²y₋₁
              + p(p²-1)/3!·(Δ³y₋₂ + Δ³y₋₁)/2 + p²(p²-1)/4!·Δ⁴y₋₂ + ...
    """

    __slots__ = ()

    method = MethodType.STIRLING
    formula_text = "y = y₀ + p(Δy₀ + Δy₋₁)/2 + p²/2!·Δ²y₋₁ + p(p²-1)/3!·(Δ³y₋₁ + Δ³y₋₂)/2 + ..."
    formula_latex = (
        r"y = y_0 + p\frac{\Delta y_0 + \Delta y_{-1}}{2} + \frac{p^2}{2!}\Delta^2 y_{-1}"
        r" + \frac{p(p^2-1)}{3!}\frac{\Delta^3 y_{-1} + \Delta^3 y_{-2}}{2} + \cdots"
    )

    def reference_index(self, n: int) -> int:
        return n // 2

    def describe_reference(self, trace: StepTrace, points: PointSet, reference: int, fmt: NumberFormat) -> None:
        x0, y0 = points[reference]
        trace.add_numbered(
            f"Central point is x₀ = {fmt.x(x0)}, y₀ = {fmt.y(y0)} (index {reference})",
            value=y0,
            formula=f"x_0 = {fmt.x(x0)}, \\quad y_0 = {fmt.y(y0)}",
        )

    def term_components(self, order, parameter, reference):
        p = parameter
        k = (order + 1) // 2
        if order % 2:
            coefficient = central_product(p, k - 1, lead=p)
            positions = (reference - k, reference - k + 1)
            latex = central_latex("p", k - 1, "p")
        else:
            coefficient = central_product(p, k - 1, lead=p * p)
            positions = (reference - k,)
            latex = central_latex("p", k - 1, "p^2")
        return (
            TermComponent(
                coefficient=coefficient,
                factorial_order=order,
                positions=positions,
                coefficient_latex=latex,
            ),
        )

    def off_center_message(self, parameter: float) -> Optional[str]:
        if abs(parameter) > 0.5:
            return (
                "Tip: Stirling's formula is most accurate for points very close to the center. "
                "For points far from center, consider Forward or Backward formulas."
            )
        return None


class _StraddlingFormula(FormulaEvaluator):
    """Formulas anchored on the gap between the reference point and the next one."""

    __slots__ = ()

    def reference_index(self, n: int) -> int:
        return (n - 1) // 2

    def describe_reference(self, trace: StepTrace, points: PointSet, reference: int, fmt: NumberFormat) -> None:
        x0, y0 = points[reference]
        y1 = points[reference + 1].y
        trace.add_numbered(
            f"Using points around center: x₀ = {fmt.x(x0)}, y₀ = {fmt.y(y0)}, y₁ = {fmt.y(y1)}",
            value=y0,
            formula=f"x_0 = {fmt.x(x0)}, \\quad y_0 = {fmt.y(y0)}, \\quad y_1 = {fmt.y(y1)}",
        )


class Bessel(_StraddlingFormula):
    """
    Bessel's formula, centred on the midpoint between y₀ and y₁::

        y = (y₀ + y₁)/2 + (p - ½)Δy₀ + p(p-1)/2!·(Δ²y₋₁ + Δ²y₀)/2
              + p(p-1)(p-½)/3!·Δ³y₋₁ + ...

    Even orders average two differences and use the Gauss forward product;
    odd orders multiply that product by (p - ½) and use a single difference.
    """

    __slots__ = ()

    method = MethodType.BESSEL
    formula_text = "y = (y₀ + y₁)/2 + (p - ½)Δy₀ + p(p-1)/2!·(Δ²y₋₁ + Δ²y₀)/2 + p(p-1)(p-½)/3!·Δ³y₋₁ + ..."
    formula_latex = (
        r"y = \frac{y_0 + y_1}{2} + \left(p - \frac{1}{2}\right)\Delta y_0"
        r" + \frac{p(p-1)}{2!}\frac{\Delta^2 y_{-1} + \Delta^2 y_0}{2}"
        r" + \frac{p(p-1)(p-\frac{1}{2})}{3!}\Delta^3 y_{-1} + \cdots"
    )

    def initial_value(self, points, reference, parameter, fmt):
        y0 = points[reference].y
        y1 = points[reference + 1].y
        value = (y0 + y1) / 2
        return (
            value,
            f"Start with (y₀ + y₁)/2 = {fmt.y(value)}",
            f"\\frac{{y_0 + y_1}}{{2}} = \\frac{{{fmt.y(y0)} + {fmt.y(y1)}}}{{2}} = {fmt.y(value)}",
        )

    def term_components(self, order, parameter, reference):
        p = parameter
        k = order // 2
        shifts = gauss_shifts(2 * k, forward=True)
        factors = [p + shift for shift in shifts]
        if order % 2:
            coefficient = product_of(factors + [p - 0.5])
            positions = (reference - k,)
            latex = product_latex("p", shifts + [-0.5])
        else:
            coefficient = product_of(factors)
            positions = (reference - k, reference - k + 1)
            latex = product_latex("p", shifts)
        return (
            TermComponent(
                coefficient=coefficient,
                factorial_order=order,
                positions=positions,
                coefficient_latex=latex,
            ),
        )

    def off_center_message(self, parameter: float) -> Optional[str]:
        if abs(parameter - 0.5) > 0.5:
            return "Tip: Bessel's formula is most accurate for points between the two central values (p ≈ 0.5)."
        return None


class Everett(_StraddlingFormula):
    """
    Everett's formula, even-order differences only::

        y = qy₀ + py₁ + q(q²-1)/3!·Δ²y₋₁ + p(p²-1)/3!·Δ²y₀
              + q(q²-1)(q²-4)/5!·Δ⁴y₋₂ + p(p²-1)(p²-4)/5!·Δ⁴y₀

    with q = 1 - p. Stops after the fourth-order pair.
    """

    __slots__ = ()

    method = MethodType.EVERETT
    max_order = 4
    table_note = " (note: Everett uses only even-order differences)"
    formula_text = "y = qy₀ + py₁ + q(q²-1)/3!·Δ²y₋₁ + p(p²-1)/3!·Δ²y₀ + ... (only even differences)"
    formula_latex = (
        r"y = qy_0 + py_1 + \frac{q(q^2-1)}{3!}\Delta^2 y_{-1}"
        r" + \frac{p(p^2-1)}{3!}\Delta^2 y_0 + \cdots"
    )

    # order -> (q-side offset, p-side offset) from the reference row
    _OFFSETS = {2: (-1, 0), 4: (-2, 0)}

    def describe_parameter(self, trace, query_x, x_ref, h, parameter, fmt):
        q = 1 - parameter
        trace.add_numbered(
            f"Compute p = (x - x₀)/h = {fmt.y(parameter)}, and q = 1 - p = {fmt.y(q)}",
            value=parameter,
            formula=f"p = {fmt.y(parameter)}, \\quad q = 1 - p = {fmt.y(q)}",
        )

    def initial_value(self, points, reference, parameter, fmt):
        p = parameter
        q = 1 - p
        y0 = points[reference].y
        y1 = points[reference + 1].y
        value = q * y0 + p * y1
        return (
            value,
            f"Start with qy₀ + py₁ = {fmt.y(value)}",
            f"qy_0 + py_1 = {fmt.y(q)} \\times {fmt.y(y0)} + {fmt.y(p)} \\times {fmt.y(y1)} = {fmt.y(value)}",
        )

    def term_components(self, order, parameter, reference):
        if order not in self._OFFSETS:
            return None
        p = parameter
        q = 1 - p
        k = order // 2
        q_offset, p_offset = self._OFFSETS[order]
        return (
            TermComponent(
                coefficient=central_product(q, k, lead=q),
                factorial_order=order + 1,
                positions=(reference + q_offset,),
                coefficient_latex=central_latex("q", k, "q"),
                label="with q",
            ),
            TermComponent(
                coefficient=central_product(p, k, lead=p),
                factorial_order=order + 1,
                positions=(reference + p_offset,),
                coefficient_latex=central_latex("p", k, "p"),
                label="with p",
            ),
        )
