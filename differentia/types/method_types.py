# No dependencies
from dataclasses import dataclass
from enum import Enum


class MethodType(str, Enum):
    FORWARD = "forward"
    BACKWARD = "backward"
    STIRLING = "stirling"
    BESSEL = "bessel"
    EVERETT = "everett"
    GAUSSIAN_FORWARD = "gaussian-forward"
    GAUSSIAN_BACKWARD = "gaussian-backward"


class DifferenceKind(str, Enum):
    FORWARD = "forward"
    BACKWARD = "backward"
    CENTRAL = "central"


@dataclass(frozen=True)
class MethodInfo:
    method: MethodType
    name: str
    description: str
    best_for: str
    requires_equal_spacing: bool = True


METHOD_INFO = {
    MethodType.FORWARD: MethodInfo(
        MethodType.FORWARD,
        "Forward Formula",
        "Newton Forward Difference Formula",
        "Points near the beginning of data set",
    ),
    MethodType.BACKWARD: MethodInfo(
        MethodType.BACKWARD,
        "Backward Formula",
        "Newton Backward Difference Formula",
        "Points near the end of data set",
    ),
    MethodType.STIRLING: MethodInfo(
        MethodType.STIRLING,
        "Stirling's Formula",
        "Central difference formula for odd number of points",
        "Central interpolation with odd number of points",
    ),
    MethodType.BESSEL: MethodInfo(
        MethodType.BESSEL,
        "Bessel's Formula",
        "Central difference formula for even number of points",
        "Central interpolation with even number of points",
    ),
    MethodType.EVERETT: MethodInfo(
        MethodType.EVERETT,
        "Everett's Formula",
        "Uses only even-order differences",
        "Central interpolation with simplified computation",
    ),
    MethodType.GAUSSIAN_FORWARD: MethodInfo(
        MethodType.GAUSSIAN_FORWARD,
        "Gaussian Forward",
        "Gaussian forward interpolation formula",
        "Points slightly before center",
    ),
    MethodType.GAUSSIAN_BACKWARD: MethodInfo(
        MethodType.GAUSSIAN_BACKWARD,
        "Gaussian Backward",
        "Gaussian backward interpolation formula",
        "Points slightly after center",
    ),
}


def as_method(method) -> MethodType:
    """Coerce a string or MethodType to MethodType."""
    if isinstance(method, MethodType):
        return method
    try:
        return MethodType(str(method).lower())
    except ValueError:
        valid = ", ".join(m.value for m in MethodType)
        raise ValueError(f"Unknown interpolation method: {method!r} (expected one of {valid})") from None
