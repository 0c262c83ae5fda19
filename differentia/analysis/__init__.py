from .noise import characterize_noise, order_label, RECOMMENDATIONS
from .comparison import ComparisonSummary, compare_results
from .smoothing import analyze_smoothing, SMOOTHING_LEVELS, DEFAULT_CURVE_POINTS

__all__ = [
    "characterize_noise",
    "order_label",
    "RECOMMENDATIONS",
    "ComparisonSummary",
    "compare_results",
    "analyze_smoothing",
    "SMOOTHING_LEVELS",
    "DEFAULT_CURVE_POINTS",
]
