from .num_utils import (
    MAX_FACTORIAL_ORDER,
    is_close_to_int,
    factorial,
    binomial_coefficient,
    product_of,
    falling_product,
    rising_product,
    gauss_shifts,
    gauss_product,
    central_product,
    round_to,
)
from .formatting import (
    format_number,
    format_display,
    to_superscript,
    to_subscript,
    ordinal,
    power_label,
    difference_label,
    difference_latex,
)

__all__ = [
    "MAX_FACTORIAL_ORDER",
    "is_close_to_int",
    "factorial",
    "binomial_coefficient",
    "product_of",
    "falling_product",
    "rising_product",
    "gauss_shifts",
    "gauss_product",
    "central_product",
    "round_to",
    "format_number",
    "format_display",
    "to_superscript",
    "to_subscript",
    "ordinal",
    "power_label",
    "difference_label",
    "difference_latex",
]
