"""
Shared evaluation loop for the finite-difference interpolation formulas.

Every formula follows the same shape: pick a reference index, derive a
dimensionless parameter, start an accumulator, then add one correction term
per difference order until the table runs out of the entries that order needs.
Subclasses only describe the reference, the starting value and the terms.
"""
from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import ClassVar, Iterable, Optional, Sequence, Tuple, Type
import math
import time
import warnings

from ..config import InterpolationConfig, resolve_config
from ..errors import ExtrapolationWarning, InsufficientDataError, InterpolationWarning, OffCenterWarning
from ..tables.annotated import annotate
from ..tables.difference_table import DifferenceTable, build_raw
from ..types.method_types import DifferenceKind, MethodType, METHOD_INFO
from ..types.point_types import PointSet, PointsInput, as_points
from ..types.result_types import InterpolationResult
from ..utils.formatting import difference_label, difference_latex, ordinal, to_subscript
from ..utils.num_utils import MAX_FACTORIAL_ORDER, factorial
from .trace import NumberFormat, StepTrace

EXTRAPOLATION_MESSAGE = (
    "Warning: Extrapolation detected. Results may be less accurate outside the data range."
)


@dataclass(frozen=True)
class TermComponent:
    """
    One product-times-difference piece of a correction term.

    The term value is ``(coefficient / factorial(factorial_order)) * entry`` for a
    single position and ``(coefficient / factorial(factorial_order)) * (a + b) / 2``
    for two, evaluated left to right.
    """
    coefficient: float
    factorial_order: int
    positions: Tuple[int, ...]
    coefficient_latex: str
    label: str = ""


def factor_latex(symbol: str, shift: float) -> str:
    """'p' for shift 0, '(p-1)' for -1, '(p+\\frac{1}{2})' for 0.5 ..."""
    if shift == 0:
        return symbol
    magnitude = abs(shift)
    text = r"\frac{1}{2}" if magnitude == 0.5 else f"{magnitude:g}"
    sign = "+" if shift > 0 else "-"
    return f"({symbol}{sign}{text})"


def product_latex(symbol: str, shifts: Iterable[float]) -> str:
    return "".join(factor_latex(symbol, shift) for shift in shifts)


def central_latex(symbol: str, k: int, lead: str) -> str:
    """lead(p^2-1)(p^2-4)...(p^2-k^2)."""
    return lead + "".join(f"({symbol}^2-{j * j})" for j in range(1, k + 1))


class FormulaEvaluator(ABC):
    """Base class for the seven interpolation strategies."""

    __slots__ = ()

    method: ClassVar[MethodType]
    kind: ClassVar[DifferenceKind] = DifferenceKind.CENTRAL
    parameter_symbol: ClassVar[str] = "p"
    anchor_label: ClassVar[str] = "x₀"
    operator_symbol: ClassVar[str] = "Δ"
    operator_latex: ClassVar[str] = r"\Delta"
    formula_text: ClassVar[str] = ""
    formula_latex: ClassVar[str] = ""
    table_note: ClassVar[str] = ""
    max_order: ClassVar[Optional[int]] = None

    @property
    def name(self) -> str:
        return METHOD_INFO[self.method].name

    # ------------------ STRATEGY HOOKS ------------------
    @abstractmethod
    def reference_index(self, n: int) -> int:
        """Index of the point the correction terms are measured from."""

    @abstractmethod
    def term_components(
        self, order: int, parameter: float, reference: int
    ) -> Optional[Tuple[TermComponent, ...]]:
        """
        Components of the correction term for ``order``.

        Returns None when the formula has no term of this order at all (the
        loop moves on); components whose positions are absent from the table
        end the series instead.
        """

    def initial_value(
        self, points: PointSet, reference: int, parameter: float, fmt: NumberFormat
    ) -> Tuple[float, str, str]:
        """(value, description, latex) for the accumulator start. Defaults to y at the reference."""
        y0 = points[reference].y
        return y0, f"Start with y₀ = {fmt.y(y0)}", f"y_0 = {fmt.y(y0)}"

    def off_center_message(self, parameter: float) -> Optional[str]:
        """Advisory text when the parameter sits outside the formula's comfortable range."""
        return None

    def subscript(self, offset: int) -> Tuple[str, str]:
        """(plain, latex) subscript for a table entry ``offset`` rows from the reference."""
        return to_subscript(offset), str(offset)

    def describe_reference(
        self, trace: StepTrace, points: PointSet, reference: int, fmt: NumberFormat
    ) -> None:
        """Central formulas name their reference point; edge formulas skip this step."""

    def describe_parameter(
        self, trace: StepTrace, query_x: float, x_ref: float, h: float,
        parameter: float, fmt: NumberFormat,
    ) -> None:
        s = self.parameter_symbol
        anchor = self.anchor_label
        trace.add_numbered(
            f"Compute {s} = (x - {anchor})/h = ({fmt.x(query_x)} - {fmt.x(x_ref)})/{fmt.x(h)} = {fmt.y(parameter)}",
            value=parameter,
            formula=(
                f"{s} = \\frac{{{fmt.x(query_x)} - {fmt.x(x_ref)}}}{{{fmt.x(h)}}} = {fmt.y(parameter)}"
            ),
        )

    # ------------------ SHARED LOOP ------------------
    def orders(self, n: int) -> range:
        top = n if self.max_order is None else min(n, self.max_order + 1)
        return range(1, top)

    def compute_parameter(self, query_x: float, x_ref: float, h: float) -> float:
        return (query_x - x_ref) / h

    @staticmethod
    def difference(table: DifferenceTable, order: int, positions: Sequence[int]) -> float:
        """Displayed difference: the entry, or the mean of the entries."""
        if len(positions) == 1:
            return table[order, positions[0]]
        return sum(table[order, pos] for pos in positions) / len(positions)

    @staticmethod
    def term_value(table: DifferenceTable, order: int, component: TermComponent) -> float:
        scale = component.coefficient / factorial(component.factorial_order)
        entries = [table[order, pos] for pos in component.positions]
        if len(entries) == 1:
            return scale * entries[0]
        return scale * sum(entries) / len(entries)

    def evaluate(
        self,
        points: PointsInput,
        query_x: float,
        *,
        record_steps: bool = True,
        config: Optional[InterpolationConfig] = None,
    ) -> InterpolationResult:
        """
        Interpolate at ``query_x``.

        Points are assumed validated, sorted and equally spaced. Missing
        higher-order entries, factorials too large for a float and
        non-finite terms shorten the series; nothing here raises on
        well-formed input.

        Args:
            points: Validated sample points
            query_x: Abscissa to interpolate at
            record_steps: Build the step trace; the value is identical either way
            config: Optional configuration

        Returns:
            InterpolationResult
        """
        started = time.perf_counter()
        config = resolve_config(config)
        fmt = NumberFormat(config)
        pts = as_points(points)
        n = len(pts)
        if n < 2:
            raise InsufficientDataError(required=2, received=n)
        query_x = float(query_x)
        trace = StepTrace(record_steps)

        h = pts[1].x - pts[0].x
        trace.add_numbered(
            f"Compute step size h = x₁ - x₀ = {fmt.x(pts[1].x)} - {fmt.x(pts[0].x)} = {fmt.x(h)}",
            value=h,
            formula=f"h = {fmt.x(h)}",
        )

        reference = self.reference_index(n)
        self.describe_reference(trace, pts, reference, fmt)

        x_ref = pts[reference].x
        parameter = self.compute_parameter(query_x, x_ref, h)
        self.describe_parameter(trace, query_x, x_ref, h, parameter, fmt)

        table = build_raw(pts, self.kind)
        if trace.enabled:
            trace.add_numbered(
                f"Build {self.kind.value} difference table{self.table_note}:",
                table=annotate(table, pts, config),
            )
        trace.add_numbered(f"Apply {self.name}: {self.formula_text}", formula=self.formula_latex)

        value, start_description, start_latex = self.initial_value(pts, reference, parameter, fmt)
        trace.add(start_description, value=value, formula=start_latex)

        terms_used = []
        for order in self.orders(n):
            components = self.term_components(order, parameter, reference)
            if components is None:
                continue
            if not all(table.has(order, pos) for c in components for pos in c.positions):
                break
            # n! stops being a float past MAX_FACTORIAL_ORDER
            if any(c.factorial_order > MAX_FACTORIAL_ORDER for c in components):
                break
            terms = [self.term_value(table, order, component) for component in components]
            if not all(math.isfinite(term) for term in terms):
                break
            for component, term in zip(components, terms):
                value += term
                if trace.enabled:
                    diff = self.difference(table, order, component.positions)
                    self._record_term(trace, order, component, diff, term, value, reference, fmt)
            terms_used.append(order)

        trace.add(
            f"Final Answer: y({fmt.x(query_x)}) = {fmt.y(value)}",
            value=value,
            formula=f"y({fmt.x(query_x)}) = {fmt.y(value)}",
        )

        warning, category = self._advisory(query_x, pts, parameter)
        if warning is not None and config.emit_warnings:
            warnings.warn(warning, category, stacklevel=2)

        return InterpolationResult(
            method=self.method,
            value=value,
            steps=trace.freeze(),
            computation_time_ms=(time.perf_counter() - started) * 1000.0,
            warning=warning,
            parameter=parameter,
            reference_index=reference,
            terms_used=tuple(terms_used),
        )

    def _record_term(
        self, trace: StepTrace, order: int, component: TermComponent,
        diff: float, term: float, running: float, reference: int, fmt: NumberFormat,
    ) -> None:
        labels = []
        latex_labels = []
        for pos in component.positions:
            plain_sub, latex_sub = self.subscript(pos - reference)
            labels.append(difference_label(self.operator_symbol, order, plain_sub))
            latex_labels.append(difference_latex(self.operator_latex, order, latex_sub))

        if len(latex_labels) == 1:
            diff_latex = latex_labels[0]
            diff_text = labels[0]
        else:
            diff_latex = f"\\frac{{{' + '.join(latex_labels)}}}{{2}}"
            diff_text = f"({' + '.join(labels)})/2"

        coefficient = component.coefficient_latex
        if component.factorial_order > 1:
            coefficient = f"\\frac{{{coefficient}}}{{{component.factorial_order}!}}"

        label = f" {component.label}" if component.label else ""
        trace.add(
            f"Add {ordinal(order)} order term{label} [{diff_text}]: {fmt.y(term)} (current sum: {fmt.y(running)})",
            value=running,
            formula=(
                f"+ {coefficient}{diff_latex} = "
                f"\\frac{{{fmt.y(component.coefficient)}}}{{{factorial(component.factorial_order)}}}"
                f" \\times {fmt.y(diff)} = {fmt.y(term)}"
            ),
            entries=tuple((order, pos) for pos in component.positions),
        )

    def _advisory(
        self, query_x: float, points: PointSet, parameter: float
    ) -> Tuple[Optional[str], Type[InterpolationWarning]]:
        xs = [p.x for p in points]
        if query_x < min(xs) or query_x > max(xs):
            return EXTRAPOLATION_MESSAGE, ExtrapolationWarning
        return self.off_center_message(parameter), OffCenterWarning

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"
