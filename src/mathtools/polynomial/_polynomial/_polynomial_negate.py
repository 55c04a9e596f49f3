from ._polynomial import Polynomial


def polynomial_negate(p: Polynomial) -> Polynomial:
    """Negate polynomial.

    Parameters
    ----------
    p : Polynomial
        Input polynomial.

    Returns
    -------
    Polynomial
        Negated polynomial -p.
    """
    return Polynomial(coeffs=[-c for c in p.coeffs])
