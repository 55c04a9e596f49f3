from typing import NamedTuple

from mathtools.polynomial._division_by_zero_error import DivisionByZeroError

from ._polynomial import Polynomial


class PolynomialDivmodResult(NamedTuple):
    """Result of polynomial division.

    Parameters
    ----------
    quotient : Polynomial
        Quotient of the division.
    remainder : Polynomial
        Remainder of the division. Either the zero polynomial or of degree
        strictly less than the divisor.
    """

    quotient: Polynomial
    remainder: Polynomial


def _unchecked_synthetic_division(
    p: Polynomial, q: Polynomial
) -> PolynomialDivmodResult:
    # Callers guarantee p != 0, q != 0 and deg(q) <= deg(p).
    assert q.coeffs, "divisor must not be the zero polynomial"
    assert p.coeffs, "dividend must not be the zero polynomial"
    assert len(q.coeffs) <= len(p.coeffs), "deg(divisor) > deg(dividend)"

    deg_p = len(p.coeffs) - 1
    deg_q = len(q.coeffs) - 1

    scratch = list(p.coeffs)

    # Constant divisor: reserve a remainder slot so the split is uniform
    if deg_q == 0:
        scratch.insert(0, 0)

    normalizer = q.coeffs[-1]

    top = len(scratch) - 1
    for i in range(top, top - (deg_p - deg_q + 1), -1):
        if scratch[i] == 0:
            continue

        coefficient = scratch[i] / normalizer
        scratch[i] = coefficient

        for j in range(1, deg_q + 1):
            scratch[i - j] = scratch[i - j] - q.coeffs[deg_q - j] * coefficient

    split = max(deg_q, 1)

    return PolynomialDivmodResult(
        Polynomial(coeffs=scratch[split:]),
        Polynomial(coeffs=scratch[:split]),
    )


def polynomial_divmod(p: Polynomial, q: Polynomial) -> PolynomialDivmodResult:
    """Divide polynomial p by q, returning quotient and remainder.

    Computes quotient and remainder such that p = q * quotient + remainder,
    where remainder is zero or deg(remainder) < deg(q), by synthetic
    division. Both come out of the same pass.

    Parameters
    ----------
    p : Polynomial
        Dividend polynomial.
    q : Polynomial
        Divisor polynomial.

    Returns
    -------
    PolynomialDivmodResult
        Named tuple ``(quotient, remainder)``.

    Raises
    ------
    DivisionByZeroError
        If q is the zero polynomial.

    Notes
    -----
    Coefficients are combined with true division, so integer coefficients
    give float quotients. Use ``fractions.Fraction`` coefficients for exact
    arithmetic.

    If p is the zero polynomial or deg(p) < deg(q), the quotient is the zero
    polynomial and the remainder is a copy of p.

    Examples
    --------
    >>> p = polynomial([-6, 11, -6, 1])  # x^3 - 6x^2 + 11x - 6
    >>> q = polynomial([-2, 1])  # x - 2
    >>> quot, rem = polynomial_divmod(p, q)
    >>> quot.coeffs  # x^2 - 4x + 3
    [3.0, -4.0, 1.0]
    >>> rem.coeffs
    []
    """
    if not q.coeffs:
        raise DivisionByZeroError("Cannot divide by zero polynomial")

    if len(p.coeffs) < len(q.coeffs):
        return PolynomialDivmodResult(Polynomial(), p.copy())

    return _unchecked_synthetic_division(p, q)


quotient_remainder = polynomial_divmod
