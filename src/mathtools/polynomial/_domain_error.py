from ._polynomial_error import PolynomialError


class DomainError(PolynomialError):
    """Operation outside valid domain.

    Raised when a quantity is requested that is undefined for the given
    polynomial (e.g., the degree of the zero polynomial).
    """

    pass
