"""Hypothesis strategies for polynomial testing."""

from ._chebyshev_domain import chebyshev_domain
from ._coefficients import coefficients
from ._fraction_coefficients import fraction_coefficients
from ._polynomials import polynomials
from ._rationals import rationals

__all__ = [
    # Numeric strategies
    "chebyshev_domain",
    "rationals",
    # Coefficient strategies
    "coefficients",
    "fraction_coefficients",
    "polynomials",
]
