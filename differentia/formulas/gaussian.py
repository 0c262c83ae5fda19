"""
Gauss forward and backward formulas.

Both use the product p(p∓1)(p±1)(p∓2)... and walk the difference table in a
zig-zag around the reference row: the forward variant reads Δⁱy at offset
-⌊i/2⌋, the backward variant at offset -⌈i/2⌉.
"""
from __future__ import annotations
from typing import Optional

from ..types.method_types import MethodType
from ..utils.num_utils import gauss_product, gauss_shifts
from .base import FormulaEvaluator, TermComponent, product_latex


class _GaussFormula(FormulaEvaluator):
    __slots__ = ()

    forward: bool = True

    def describe_reference(self, trace, points, reference, fmt):
        x0, y0 = points[reference]
        trace.add_numbered(
            f"Reference point (near center): x₀ = {fmt.x(x0)}, y₀ = {fmt.y(y0)} (index {reference})",
            value=y0,
            formula=f"x_0 = {fmt.x(x0)}, \\quad y_0 = {fmt.y(y0)}",
        )

    def row_offset(self, order: int) -> int:
        return -(order // 2) if self.forward else -((order + 1) // 2)

    def term_components(self, order, parameter, reference):
        return (
            TermComponent(
                coefficient=gauss_product(parameter, order, forward=self.forward),
                factorial_order=order,
                positions=(reference + self.row_offset(order),),
                coefficient_latex=product_latex("p", gauss_shifts(order, forward=self.forward)),
            ),
        )


class GaussianForward(_GaussFormula):
    """y = y₀ + pΔy₀ + p(p-1)/2!·Δ²y₋₁ + p(p-1)(p+1)/3!·Δ³y₋₁ + p(p-1)(p+1)(p-2)/4!·Δ⁴y₋₂ + ..."""

    __slots__ = ()

    method = MethodType.GAUSSIAN_FORWARD
    forward = True
    formula_text = "y = y₀ + pΔy₀ + p(p-1)/2!·Δ²y₋₁ + p(p-1)(p+1)/3!·Δ³y₋₁ + ..."
    formula_latex = (
        r"y = y_0 + p\Delta y_0 + \frac{p(p-1)}{2!}\Delta^2 y_{-1}"
        r" + \frac{p(p-1)(p+1)}{3!}\Delta^3 y_{-1} + \cdots"
    )

    def reference_index(self, n: int) -> int:
        return n // 2

    def off_center_message(self, parameter: float) -> Optional[str]:
        if parameter > 0.5:
            return "Tip: For points after the center (p > 0.5), consider using Gaussian Backward for better accuracy."
        return None


class GaussianBackward(_GaussFormula):
    """y = y₀ + pΔy₋₁ + p(p+1)/2!·Δ²y₋₁ + p(p+1)(p-1)/3!·Δ³y₋₂ + p(p+1)(p-1)(p+2)/4!·Δ⁴y₋₂ + ..."""

    __slots__ = ()

    method = MethodType.GAUSSIAN_BACKWARD
    forward = False
    formula_text = "y = y₀ + pΔy₋₁ + p(p+1)/2!·Δ²y₋₁ + p(p+1)(p-1)/3!·Δ³y₋₂ + ..."
    formula_latex = (
        r"y = y_0 + p\Delta y_{-1} + \frac{p(p+1)}{2!}\Delta^2 y_{-1}"
        r" + \frac{p(p+1)(p-1)}{3!}\Delta^3 y_{-2} + \cdots"
    )

    def reference_index(self, n: int) -> int:
        # ceil(n / 2), kept inside the data
        return min((n + 1) // 2, n - 1)

    def off_center_message(self, parameter: float) -> Optional[str]:
        if parameter < -0.5:
            return "Tip: For points before the center (p < -0.5), consider using Gaussian Forward for better accuracy."
        return None
