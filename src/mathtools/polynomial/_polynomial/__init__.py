from ._polynomial import Polynomial, polynomial
from ._polynomial_add import polynomial_add
from ._polynomial_add_constant import polynomial_add_constant
from ._polynomial_cast import polynomial_cast
from ._polynomial_degree import polynomial_degree
from ._polynomial_div import polynomial_div
from ._polynomial_divmod import (
    PolynomialDivmodResult,
    polynomial_divmod,
    quotient_remainder,
)
from ._polynomial_equal import polynomial_equal
from ._polynomial_evaluate import polynomial_evaluate
from ._polynomial_format import polynomial_format
from ._polynomial_mod import polynomial_mod
from ._polynomial_multiply import polynomial_multiply
from ._polynomial_negate import polynomial_negate
from ._polynomial_scale import polynomial_scale
from ._polynomial_subtract import polynomial_subtract
from ._polynomial_subtract_constant import polynomial_subtract_constant
from ._polynomial_to_tensor import polynomial_to_tensor
from ._polynomial_trim import polynomial_trim

__all__ = [
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
]
