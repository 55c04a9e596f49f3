from typing import Any, List, Sequence, Union

from torch import Tensor

from mathtools.polynomial._polynomial import Polynomial

from ._chebyshev_coefficient import chebyshev_coefficient


def polynomial_to_chebyshev_polynomial_t(
    p: Union[Polynomial, Sequence[Any], Tensor],
) -> List[Any]:
    """Convert power-basis coefficients to Chebyshev series coefficients.

    Parameters
    ----------
    p : Polynomial, sequence or Tensor
        Power-basis coefficients in ascending order, length n + 1.

    Returns
    -------
    list
        Chebyshev coefficients a of the same length, such that

            p(x) = a[0]/2 + sum_{k=1}^{n} a[k] * T_k(x)

        which is the form evaluated by chebyshev_polynomial_t_evaluate.

    Notes
    -----
    Even and odd Chebyshev polynomials never share a power of x, so the
    even-degree and odd-degree coefficients are solved independently by
    back-substitution from the highest degree of each parity:

        a_i = (c_i - sum_{k>i} a_k * [x^i] T_k) / [x^i] T_i

    Coefficients are combined with true division; integer input gives
    float output, ``Fraction`` input stays exact.

    Examples
    --------
    >>> polynomial_to_chebyshev_polynomial_t([0, 0, 1])  # x^2 = (T_0 + T_2)/2
    [1.0, 0.0, 0.5]
    """
    if isinstance(p, Polynomial):
        coeffs = list(p.coeffs)
    elif isinstance(p, Tensor):
        coeffs = p.tolist()
    else:
        coeffs = list(p)

    result = list(coeffs)

    order = len(coeffs) - 1

    if order < 0:
        return result

    even_order = order - 1 if order & 1 else order
    odd_order = order if order & 1 else order - 1

    for i in range(even_order, -1, -2):
        value = coeffs[i]

        for k in range(even_order, i, -2):
            value = value - result[k] * chebyshev_coefficient(k, i)

        result[i] = value / chebyshev_coefficient(i, i)

    result[0] = result[0] * 2

    for i in range(odd_order, -1, -2):
        value = coeffs[i]

        for k in range(odd_order, i, -2):
            value = value - result[k] * chebyshev_coefficient(k, i)

        result[i] = value / chebyshev_coefficient(i, i)

    return result


polynomial_to_chebyshev = polynomial_to_chebyshev_polynomial_t
