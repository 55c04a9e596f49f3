from typing import Any

from ._polynomial import Polynomial


def polynomial_add_constant(p: Polynomial, c: Any) -> Polynomial:
    """Add scalar to the constant term of polynomial.

    Parameters
    ----------
    p : Polynomial
        Input polynomial.
    c : scalar
        Value added to coeffs[0].

    Returns
    -------
    Polynomial
        Polynomial p + c. Adding to the zero polynomial gives the constant
        polynomial c.
    """
    if not p.coeffs:
        return Polynomial(coeffs=[c])

    coeffs = list(p.coeffs)
    coeffs[0] = coeffs[0] + c

    return Polynomial(coeffs=coeffs)
