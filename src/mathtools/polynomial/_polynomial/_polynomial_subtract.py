from ._polynomial import Polynomial


def polynomial_subtract(p: Polynomial, q: Polynomial) -> Polynomial:
    """Subtract two polynomials.

    Parameters
    ----------
    p, q : Polynomial
        Polynomials to subtract.

    Returns
    -------
    Polynomial
        Difference p - q, with trailing zeros trimmed.
    """
    if not q.coeffs:
        return Polynomial(coeffs=list(p.coeffs))

    n = min(len(p.coeffs), len(q.coeffs))

    coeffs = [p.coeffs[i] - q.coeffs[i] for i in range(n)]
    coeffs.extend(p.coeffs[n:])
    coeffs.extend(-c for c in q.coeffs[n:])

    return Polynomial(coeffs=coeffs)
