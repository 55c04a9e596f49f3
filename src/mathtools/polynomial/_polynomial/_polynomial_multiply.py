from ._polynomial import Polynomial


def polynomial_multiply(p: Polynomial, q: Polynomial) -> Polynomial:
    """Multiply two polynomials.

    Computes the convolution of coefficients directly, using
    len(p) * len(q) coefficient multiplications. Result degree is
    deg(p) + deg(q).

    Parameters
    ----------
    p, q : Polynomial
        Polynomials to multiply.

    Returns
    -------
    Polynomial
        Product p * q. If either operand is the zero polynomial the product
        is the zero polynomial.

    Examples
    --------
    >>> polynomial_multiply(polynomial([1, 2]), polynomial([3, 4])).coeffs
    [3, 10, 8]
    """
    # Handle zero polynomials
    if not p.coeffs or not q.coeffs:
        return Polynomial()

    coeffs = [a * q.coeffs[0] for a in p.coeffs]

    for i in range(1, len(q.coeffs)):
        b = q.coeffs[i]

        for j, a in enumerate(p.coeffs):
            if i + j < len(coeffs):
                coeffs[i + j] = coeffs[i + j] + a * b
            else:
                coeffs.append(a * b)

    return Polynomial(coeffs=coeffs)
