from ._polynomial import Polynomial
from ._polynomial_divmod import polynomial_divmod


def polynomial_div(p: Polynomial, q: Polynomial) -> Polynomial:
    """Return quotient of polynomial division.

    Convenience wrapper around polynomial_divmod that returns only the quotient.

    Parameters
    ----------
    p : Polynomial
        Dividend polynomial.
    q : Polynomial
        Divisor polynomial.

    Returns
    -------
    Polynomial
        Quotient of p / q.

    Examples
    --------
    >>> p = polynomial([-1, 0, 0, 1])  # x^3 - 1
    >>> q = polynomial([-1, 1])  # x - 1
    >>> polynomial_div(p, q).coeffs
    [1.0, 1.0, 1.0]
    """
    quotient, _ = polynomial_divmod(p, q)
    return quotient
