from torch import Tensor

from ._polynomial import Polynomial


def polynomial_evaluate(p: Polynomial, z):
    """Evaluate polynomial at points using Horner's method.

    Parameters
    ----------
    p : Polynomial
        Polynomial to evaluate.
    z : scalar or Tensor
        Evaluation point(s). Any type that supports ``*`` and ``+`` with the
        coefficients.

    Returns
    -------
    scalar or Tensor
        Value p(z). For tensor z the result has the shape of z.

    Examples
    --------
    >>> p = polynomial([1, 2, 3])  # 1 + 2x + 3x^2
    >>> polynomial_evaluate(p, 2)
    17
    >>> polynomial_evaluate(p, torch.tensor([0.0, 1.0, 2.0]))
    tensor([ 1.,  6., 17.])
    """
    coeffs = p.coeffs

    if not coeffs:
        return z * 0

    result = coeffs[-1]

    # Broadcast constant polynomials to the shape of z
    if isinstance(z, Tensor):
        result = z * 0 + result

    for c in reversed(coeffs[:-1]):
        result = result * z + c

    return result
