from .base import FormulaEvaluator, TermComponent, EXTRAPOLATION_MESSAGE
from .trace import StepTrace, NumberFormat
from .newton import NewtonForward, NewtonBackward
from .central import Stirling, Bessel, Everett
from .gaussian import GaussianForward, GaussianBackward
from .registry import EVALUATORS, get_evaluator, evaluate, evaluate_many

__all__ = [
    "FormulaEvaluator",
    "TermComponent",
    "EXTRAPOLATION_MESSAGE",
    "StepTrace",
    "NumberFormat",
    "NewtonForward",
    "NewtonBackward",
    "Stirling",
    "Bessel",
    "Everett",
    "GaussianForward",
    "GaussianBackward",
    "EVALUATORS",
    "get_evaluator",
    "evaluate",
    "evaluate_many",
]
