from mathtools.polynomial._domain_error import DomainError

from ._polynomial import Polynomial


def polynomial_degree(p: Polynomial) -> int:
    """Return degree of polynomial.

    Parameters
    ----------
    p : Polynomial
        Input polynomial.

    Returns
    -------
    int
        Number of coefficients minus 1. Trailing zeros are always trimmed,
        so this is the true degree.

    Raises
    ------
    DomainError
        If p is the zero polynomial, whose degree is undefined.
    """
    if len(p.coeffs) == 0:
        raise DomainError("Degree of the zero polynomial is undefined")

    return len(p.coeffs) - 1
