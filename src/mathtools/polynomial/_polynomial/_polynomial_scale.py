from typing import Any

from ._polynomial import Polynomial


def polynomial_scale(p: Polynomial, c: Any) -> Polynomial:
    """Multiply polynomial by scalar.

    Parameters
    ----------
    p : Polynomial
        Polynomial to scale.
    c : scalar
        Scale factor.

    Returns
    -------
    Polynomial
        Scaled polynomial c * p. Scaling by zero gives the zero polynomial.
    """
    return Polynomial(coeffs=[a * c for a in p.coeffs])
