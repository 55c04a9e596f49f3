from itertools import zip_longest

from ._polynomial import Polynomial


def polynomial_equal(
    p: Polynomial,
    q: Polynomial,
    tol: float = 0.0,
) -> bool:
    """Check polynomial equality within tolerance.

    Parameters
    ----------
    p, q : Polynomial
        Polynomials to compare.
    tol : float
        Absolute tolerance for coefficient comparison. With the default of
        zero, coefficients must compare exactly equal.

    Returns
    -------
    bool
        True if every coefficient of p is within tol of the corresponding
        coefficient of q (missing coefficients count as zero).
    """
    pairs = zip_longest(p.coeffs, q.coeffs, fillvalue=0)

    if tol == 0:
        return all(a == b for a, b in pairs)

    return all(abs(a - b) <= tol for a, b in pairs)
