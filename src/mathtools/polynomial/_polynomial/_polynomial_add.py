from ._polynomial import Polynomial


def polynomial_add(p: Polynomial, q: Polynomial) -> Polynomial:
    """Add two polynomials.

    Adds coefficients over the common prefix and keeps the remaining terms
    of the longer operand. Trailing zeros produced by cancellation are
    trimmed.

    Parameters
    ----------
    p, q : Polynomial
        Polynomials to add.

    Returns
    -------
    Polynomial
        Sum p + q.

    Examples
    --------
    >>> polynomial_add(polynomial([1, 2, 3]), polynomial([1, 1])).coeffs
    [2, 3, 3]
    """
    if not q.coeffs:
        return Polynomial(coeffs=list(p.coeffs))

    n = min(len(p.coeffs), len(q.coeffs))

    coeffs = [p.coeffs[i] + q.coeffs[i] for i in range(n)]
    coeffs.extend(p.coeffs[n:])
    coeffs.extend(q.coeffs[n:])

    return Polynomial(coeffs=coeffs)
