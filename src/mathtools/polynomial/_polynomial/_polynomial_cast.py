from typing import Any, Callable

from ._polynomial import Polynomial


def polynomial_cast(p: Polynomial, dtype: Callable[[Any], Any]) -> Polynomial:
    """Convert coefficients element-wise to another numeric type.

    Parameters
    ----------
    p : Polynomial
        Input polynomial.
    dtype : callable
        Conversion applied to every coefficient, e.g. ``float``, ``int``,
        ``fractions.Fraction`` or ``decimal.Decimal``.

    Returns
    -------
    Polynomial
        Polynomial with converted coefficients. Coefficients that become
        zero through the conversion are trimmed.

    Examples
    --------
    >>> polynomial_cast(polynomial([1, 2]), Fraction).coeffs
    [Fraction(1, 1), Fraction(2, 1)]
    """
    return Polynomial(coeffs=[dtype(c) for c in p.coeffs])
