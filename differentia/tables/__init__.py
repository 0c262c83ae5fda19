from .difference_table import (
    DifferenceTable,
    raw_forward,
    raw_backward,
    raw_central,
    build_raw,
)
from .annotated import (
    OPERATOR_SYMBOLS,
    header_row,
    annotate,
    build_annotated,
    build_forward,
    build_backward,
    build_central,
)

__all__ = [
    "DifferenceTable",
    "raw_forward",
    "raw_backward",
    "raw_central",
    "build_raw",
    "OPERATOR_SYMBOLS",
    "header_row",
    "annotate",
    "build_annotated",
    "build_forward",
    "build_backward",
    "build_central",
]
