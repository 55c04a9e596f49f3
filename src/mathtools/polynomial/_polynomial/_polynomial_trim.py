from typing import Any, List

from ._polynomial import Polynomial


def _trim_trailing_zeros(coeffs: List[Any]) -> List[Any]:
    while coeffs and coeffs[-1] == 0:
        coeffs.pop()

    return coeffs


def polynomial_trim(p: Polynomial, tol: float = 0.0) -> Polynomial:
    """Remove trailing near-zero coefficients.

    Every ``Polynomial`` already has its exactly-zero trailing coefficients
    removed. With a positive tolerance this additionally drops trailing
    coefficients whose magnitude is at most ``tol``, which is useful after
    floating-point arithmetic.

    Parameters
    ----------
    p : Polynomial
        Input polynomial.
    tol : float
        Tolerance for considering coefficient as zero.

    Returns
    -------
    Polynomial
        Trimmed polynomial. The zero polynomial has no coefficients.

    Examples
    --------
    >>> polynomial_trim(polynomial([1.0, 2.0, 1e-17]), tol=1e-12).coeffs
    [1.0, 2.0]
    """
    coeffs = list(p.coeffs)

    if tol > 0:
        while coeffs and abs(coeffs[-1]) <= tol:
            coeffs.pop()

    return Polynomial(coeffs=coeffs)
