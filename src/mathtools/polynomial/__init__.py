"""Polynomials with generic coefficients.

Power-basis polynomials with arithmetic based on synthetic division,
conversion to Chebyshev series and Clenshaw evaluation.
"""

from ._chebyshev_polynomial_t import (
    CHEBYSHEV_POLYNOMIAL_T_DOMAIN,
    chebyshev_coefficient,
    chebyshev_polynomial_t_evaluate,
    evaluate_chebyshev,
    polynomial_to_chebyshev,
    polynomial_to_chebyshev_polynomial_t,
)
from ._division_by_zero_error import DivisionByZeroError
from ._domain_error import DomainError
from ._polynomial import (
    Polynomial,
    PolynomialDivmodResult,
    polynomial,
    polynomial_add,
    polynomial_add_constant,
    polynomial_cast,
    polynomial_degree,
    polynomial_div,
    polynomial_divmod,
    polynomial_equal,
    polynomial_evaluate,
    polynomial_format,
    polynomial_mod,
    polynomial_multiply,
    polynomial_negate,
    polynomial_scale,
    polynomial_subtract,
    polynomial_subtract_constant,
    polynomial_to_tensor,
    polynomial_trim,
    quotient_remainder,
)
from ._polynomial_error import PolynomialError

__all__ = [
    # Exceptions
    "DivisionByZeroError",
    "DomainError",
    "PolynomialError",
    # Power basis
    "Polynomial",
    "PolynomialDivmodResult",
    "polynomial",
    "polynomial_add",
    "polynomial_add_constant",
    "polynomial_cast",
    "polynomial_degree",
    "polynomial_div",
    "polynomial_divmod",
    "polynomial_equal",
    "polynomial_evaluate",
    "polynomial_format",
    "polynomial_mod",
    "polynomial_multiply",
    "polynomial_negate",
    "polynomial_scale",
    "polynomial_subtract",
    "polynomial_subtract_constant",
    "polynomial_to_tensor",
    "polynomial_trim",
    "quotient_remainder",
    # Chebyshev polynomials of the first kind
    "CHEBYSHEV_POLYNOMIAL_T_DOMAIN",
    "chebyshev_coefficient",
    "chebyshev_polynomial_t_evaluate",
    "evaluate_chebyshev",
    "polynomial_to_chebyshev",
    "polynomial_to_chebyshev_polynomial_t",
]
