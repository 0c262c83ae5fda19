from typing import Iterable


def is_close_to_int(value: float, tol: float = 1e-9) -> bool:
    """Check if a float is close to an integer within a tolerance."""
    return abs(value - round(value)) <= tol


# Largest n whose factorial converts to a float (171! overflows).
MAX_FACTORIAL_ORDER = 170


def factorial(n: int) -> int:
    """Iterative factorial. Negative input yields 0."""
    if n < 0:
        return 0
    result = 1
    for i in range(2, n + 1):
        result *= i
    return result


def binomial_coefficient(n: int, k: int) -> float:
    """
    Compute C(n, k) with the multiplicative recurrence.

    Uses C(n, k) = C(n, k-1) * (n - k + 1) / k so intermediate values stay small.

    Args:
        n: Size of the set
        k: Size of the subset

    Returns:
        The binomial coefficient, 0 when k is outside [0, n]
    """
    if k < 0 or k > n:
        return 0
    if k == 0 or k == n:
        return 1
    result = 1
    for i in range(1, k + 1):
        result = result * (n - i + 1) / i
    return result


def product_of(factors: Iterable[float]) -> float:
    """Multiply factors left to right, starting from the first one."""
    product = None
    for factor in factors:
        product = factor if product is None else product * factor
    return 1.0 if product is None else product


def falling_product(u: float, count: int) -> float:
    """u(u-1)(u-2)...(u-count+1); 1 for count == 0."""
    return product_of(u - i for i in range(count))


def rising_product(u: float, count: int) -> float:
    """u(u+1)(u+2)...(u+count-1); 1 for count == 0."""
    return product_of(u + i for i in range(count))


def gauss_shifts(count: int, forward: bool = True) -> list:
    """
    Offsets used by the Gauss family of products.

    Forward order is 0, -1, +1, -2, +2, ...  giving p(p-1)(p+1)(p-2)...
    Backward order is 0, +1, -1, +2, -2, ... giving p(p+1)(p-1)(p+2)...
    """
    sign = -1 if forward else 1
    shifts = []
    for i in range(count):
        k = (i + 1) // 2
        shifts.append(0 if i == 0 else (sign * k if i % 2 else -sign * k))
    return shifts


def gauss_product(p: float, count: int, forward: bool = True) -> float:
    """Product of (p + shift) over the first ``count`` Gauss shifts."""
    return product_of(p + shift for shift in gauss_shifts(count, forward))


def central_product(p: float, k: int, lead: float) -> float:
    """lead(p^2 - 1)(p^2 - 4)...(p^2 - k^2), multiplied left to right."""
    return product_of([lead] + [p * p - j * j for j in range(1, k + 1)])


def round_to(value: float, decimals: int) -> float:
    """Round half away from zero to ``decimals`` places, for display only."""
    multiplier = 10 ** decimals
    scaled = value * multiplier
    rounded = int(abs(scaled) + 0.5)
    return (rounded if scaled >= 0 else -rounded) / multiplier
