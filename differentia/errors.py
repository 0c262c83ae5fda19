"""
Exceptions and warning categories.

Input errors subclass ValueError so callers that only catch ValueError keep working.
Advisory conditions are UserWarning subclasses; they are attached to results as
strings and only issued through ``warnings.warn`` when the config asks for it.
"""
from typing import Optional


class InterpolationInputError(ValueError):
    """Base class for caller-correctable input problems."""


class InsufficientDataError(InterpolationInputError):
    def __init__(self, required: int = 2, received: int = 0):
        self.required = required
        self.received = received
        super().__init__(
            f"At least {required} data points are required (received {received})."
        )


class DuplicateAbscissaError(InterpolationInputError):
    def __init__(self, x: float):
        self.x = x
        super().__init__(f"Duplicate x-values detected ({x!r}). Each x must be unique.")


class NonFiniteValueError(InterpolationInputError):
    def __init__(self, index: int):
        self.index = index
        super().__init__(
            f"Invalid data: point {index} contains NaN or Infinity values."
        )


class UnequalSpacingError(InterpolationInputError):
    def __init__(self, message: Optional[str] = None):
        super().__init__(
            message
            or "Data points must be equally spaced for Forward, Backward, Stirling, "
               "Bessel, Everett, and Gaussian formulas."
        )


class InterpolationWarning(UserWarning):
    """Base category for advisory, non-fatal conditions."""


class ExtrapolationWarning(InterpolationWarning):
    pass


class OffCenterWarning(InterpolationWarning):
    pass
