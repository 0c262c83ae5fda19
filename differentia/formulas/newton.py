"""Newton forward and backward difference formulas, anchored at the ends of the data."""
from __future__ import annotations
from typing import Optional, Tuple

from ..types.method_types import DifferenceKind, MethodType
from ..types.point_types import PointSet
from ..utils.num_utils import falling_product, rising_product
from .base import FormulaEvaluator, TermComponent, product_latex
from .trace import NumberFormat


class NewtonForward(FormulaEvaluator):
    """
    y = y₀ + uΔy₀ + u(u-1)/2!·Δ²y₀ + u(u-1)(u-2)/3!·Δ³y₀ + ...

    with u = (x - x₀)/h measured from the first point.
    """

    __slots__ = ()

    method = MethodType.FORWARD
    kind = DifferenceKind.FORWARD
    parameter_symbol = "u"
    formula_text = "y = y₀ + uΔy₀ + u(u-1)/2!·Δ²y₀ + ..."
    formula_latex = (
        r"y = y_0 + u\Delta y_0 + \frac{u(u-1)}{2!}\Delta^2 y_0"
        r" + \frac{u(u-1)(u-2)}{3!}\Delta^3 y_0 + \cdots"
    )

    def reference_index(self, n: int) -> int:
        return 0

    def term_components(self, order, parameter, reference):
        return (
            TermComponent(
                coefficient=falling_product(parameter, order),
                factorial_order=order,
                positions=(reference,),
                coefficient_latex=product_latex("u", [-j for j in range(order)]),
            ),
        )

    def off_center_message(self, parameter: float) -> Optional[str]:
        if parameter > 0.5:
            return (
                "Tip: For x values in the middle or end of the data range, consider using "
                "Backward or Central formulas for potentially better accuracy."
            )
        return None


class NewtonBackward(FormulaEvaluator):
    """
    y = yₙ + u∇yₙ + u(u+1)/2!·∇²yₙ + u(u+1)(u+2)/3!·∇³yₙ + ...

    with u = (x - xₙ)/h measured from the last point.
    """

    __slots__ = ()

    method = MethodType.BACKWARD
    kind = DifferenceKind.BACKWARD
    parameter_symbol = "u"
    anchor_label = "xₙ"
    operator_symbol = "∇"
    operator_latex = r"\nabla"
    formula_text = "y = yₙ + u∇yₙ + u(u+1)/2!·∇²yₙ + ..."
    formula_latex = (
        r"y = y_n + u\nabla y_n + \frac{u(u+1)}{2!}\nabla^2 y_n"
        r" + \frac{u(u+1)(u+2)}{3!}\nabla^3 y_n + \cdots"
    )

    def reference_index(self, n: int) -> int:
        return n - 1

    def initial_value(
        self, points: PointSet, reference: int, parameter: float, fmt: NumberFormat
    ) -> Tuple[float, str, str]:
        yn = points[reference].y
        return yn, f"Start with yₙ = {fmt.y(yn)}", f"y_n = {fmt.y(yn)}"

    def subscript(self, offset: int) -> Tuple[str, str]:
        if offset == 0:
            return "ₙ", "n"
        plain, latex = super().subscript(offset)
        return f"ₙ{plain}", f"n{latex}"

    def term_components(self, order, parameter, reference):
        return (
            TermComponent(
                coefficient=rising_product(parameter, order),
                factorial_order=order,
                positions=(reference,),
                coefficient_latex=product_latex("u", range(order)),
            ),
        )

    def off_center_message(self, parameter: float) -> Optional[str]:
        if parameter < -0.5:
            return (
                "Tip: For x values in the beginning or middle of the data range, consider using "
                "Forward or Central formulas for potentially better accuracy."
            )
        return None
