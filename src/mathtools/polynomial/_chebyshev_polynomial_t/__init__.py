"""Chebyshev polynomials of the first kind."""

from ._chebyshev_coefficient import chebyshev_coefficient
from ._chebyshev_polynomial_t_evaluate import (
    CHEBYSHEV_POLYNOMIAL_T_DOMAIN,
    chebyshev_polynomial_t_evaluate,
    evaluate_chebyshev,
)
from ._polynomial_to_chebyshev_polynomial_t import (
    polynomial_to_chebyshev,
    polynomial_to_chebyshev_polynomial_t,
)

__all__ = [
    "CHEBYSHEV_POLYNOMIAL_T_DOMAIN",
    "chebyshev_coefficient",
    "chebyshev_polynomial_t_evaluate",
    "evaluate_chebyshev",
    "polynomial_to_chebyshev",
    "polynomial_to_chebyshev_polynomial_t",
]
