from __future__ import annotations
from typing import List, Optional

from ..config import InterpolationConfig, resolve_config
from ..types.method_types import DifferenceKind
from ..types.point_types import PointsInput, as_points
from ..types.result_types import AnnotatedTable
from ..utils.formatting import format_number, power_label
from .difference_table import DifferenceTable, build_raw

OPERATOR_SYMBOLS = {
    DifferenceKind.FORWARD: "Δ",
    DifferenceKind.BACKWARD: "∇",
    DifferenceKind.CENTRAL: "δ",
}


def header_row(kind: DifferenceKind, n: int) -> tuple:
    """``x, y, Δy, Δ²y, ...`` with the operator matching the table kind."""
    symbol = OPERATOR_SYMBOLS[DifferenceKind(kind)]
    return ("x", "y") + tuple(f"{power_label(symbol, order)}y" for order in range(1, n))


def annotate(
    table: DifferenceTable,
    points: PointsInput,
    config: Optional[InterpolationConfig] = None,
) -> AnnotatedTable:
    """
    Render a raw table as rows of strings.

    Row ``i`` holds x_i, y_i and the difference of every order stored at
    position ``i``; absent cells are empty strings.
    """
    config = resolve_config(config)
    pts = as_points(points)
    n = len(pts)
    if n != table.size:
        raise ValueError(f"Table was built from {table.size} points, got {n}")

    rows: List[tuple] = [header_row(table.kind, n)]
    for row in range(n):
        cells = [
            format_number(pts[row].x, config.abscissa_precision),
            format_number(table[0, row], config.display_precision),
        ]
        for order in range(1, n):
            value = table.get(order, row)
            cells.append("" if value is None else format_number(value, config.display_precision))
        rows.append(tuple(cells))
    return tuple(rows)


def build_annotated(
    points: PointsInput,
    kind: DifferenceKind,
    config: Optional[InterpolationConfig] = None,
) -> AnnotatedTable:
    pts = as_points(points)
    return annotate(build_raw(pts, kind), pts, config)


def build_forward(points: PointsInput, config: Optional[InterpolationConfig] = None) -> AnnotatedTable:
    return build_annotated(points, DifferenceKind.FORWARD, config)


def build_backward(points: PointsInput, config: Optional[InterpolationConfig] = None) -> AnnotatedTable:
    return build_annotated(points, DifferenceKind.BACKWARD, config)


def build_central(points: PointsInput, config: Optional[InterpolationConfig] = None) -> AnnotatedTable:
    return build_annotated(points, DifferenceKind.CENTRAL, config)
