import numbers
import warnings
from typing import Any, Sequence, Union

from torch import Tensor

from mathtools.polynomial._polynomial_error import PolynomialError

CHEBYSHEV_POLYNOMIAL_T_DOMAIN = (-1.0, 1.0)


def _outside_domain(x) -> bool:
    lower, upper = CHEBYSHEV_POLYNOMIAL_T_DOMAIN

    # Complex points are not checked
    if isinstance(x, Tensor):
        if x.is_complex():
            return False
        return bool(((x < lower) | (x > upper)).any())

    if isinstance(x, numbers.Real):
        return x < lower or x > upper

    return False


def chebyshev_polynomial_t_evaluate(
    c: Union[Sequence[Any], Tensor],
    x,
):
    """Evaluate Chebyshev series at points using Clenshaw's algorithm.

    Parameters
    ----------
    c : sequence or Tensor
        Chebyshev coefficients in ascending order, as returned by
        polynomial_to_chebyshev_polynomial_t.
    x : scalar or Tensor
        Evaluation point(s).

    Returns
    -------
    scalar or Tensor
        Value of the series at x. For tensor x the result has the shape of
        x.

    Raises
    ------
    PolynomialError
        If c has no coefficients.

    Warnings
    --------
    UserWarning
        If any real evaluation point is outside the natural domain [-1, 1].

    Notes
    -----
    The zeroth coefficient is halved:

        f(x) = c_0/2 + sum_{k=1}^{n} c_k * T_k(x)

    Clenshaw's recurrence runs from the highest coefficient down to c_1:

        y_k = 2*x*y_{k+1} - y_{k+2} + c_k
        f(x) = c_0/2 + x*y_1 - y_2

    Examples
    --------
    >>> chebyshev_polynomial_t_evaluate([2.0, 0.0, 3.0], 0.0)  # 1 + 3*T_2
    -2.0
    """
    coeffs = c.tolist() if isinstance(c, Tensor) else list(c)

    if not coeffs:
        raise PolynomialError(
            "Chebyshev series must have at least one coefficient"
        )

    if _outside_domain(x):
        lower, upper = CHEBYSHEV_POLYNOMIAL_T_DOMAIN

        warnings.warn(
            f"Evaluating Chebyshev series outside natural domain "
            f"[{lower}, {upper}]. Results may be numerically unstable.",
            stacklevel=2,
        )

    y_k2 = 0
    y_k1 = 0
    y_k = 0

    for i in range(len(coeffs) - 1, 0, -1):
        y_k2 = y_k1
        y_k1 = y_k
        y_k = 2 * x * y_k1 - y_k2 + coeffs[i]

    return coeffs[0] / 2 + y_k * x - y_k1


evaluate_chebyshev = chebyshev_polynomial_t_evaluate
