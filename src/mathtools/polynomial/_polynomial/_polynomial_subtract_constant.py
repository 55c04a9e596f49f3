from typing import Any

from ._polynomial import Polynomial


def polynomial_subtract_constant(p: Polynomial, c: Any) -> Polynomial:
    """Subtract scalar from the constant term of polynomial.

    Parameters
    ----------
    p : Polynomial
        Input polynomial.
    c : scalar
        Value subtracted from coeffs[0].

    Returns
    -------
    Polynomial
        Polynomial p - c. Subtracting the only coefficient of a constant
        polynomial gives the zero polynomial.
    """
    if c == 0:
        return Polynomial(coeffs=list(p.coeffs))

    if not p.coeffs:
        return Polynomial(coeffs=[-c])

    coeffs = list(p.coeffs)
    coeffs[0] = coeffs[0] - c

    return Polynomial(coeffs=coeffs)
