from ._polynomial_error import PolynomialError


class DivisionByZeroError(PolynomialError, ZeroDivisionError):
    """Division or remainder by the zero polynomial.

    Also a ``ZeroDivisionError`` so that callers treating polynomials like
    ordinary numbers can catch the builtin exception.
    """

    pass
