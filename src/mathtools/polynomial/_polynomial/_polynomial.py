from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any, Callable, List, Optional

from torch import Tensor

from mathtools.polynomial._polynomial_error import PolynomialError


def _is_scalar(value: Any) -> bool:
    if isinstance(value, Tensor):
        return value.dim() == 0
    return not isinstance(value, (Polynomial, Iterable))


def _coefficient_list(coeffs: Any) -> List[Any]:
    if coeffs is None:
        return []
    if isinstance(coeffs, Polynomial):
        return list(coeffs.coeffs)
    if isinstance(coeffs, Tensor):
        if coeffs.dim() > 1:
            raise PolynomialError(
                f"Polynomial coefficients must be 1-D, got shape "
                f"{tuple(coeffs.shape)}"
            )
        coeffs = coeffs.tolist()
    if isinstance(coeffs, (str, bytes)):
        raise PolynomialError(
            f"Polynomial coefficients must be numeric, got {coeffs!r}"
        )
    if isinstance(coeffs, Iterable):
        return list(coeffs)
    return [coeffs]


@dataclass(eq=False)
class Polynomial:
    """Polynomial in power basis with ascending coefficients.

    Represents p(x) = coeffs[0] + coeffs[1]*x + coeffs[2]*x^2 + ...

    The coefficient type is generic: ``int``, ``fractions.Fraction``,
    ``float``, ``complex``, ``decimal.Decimal`` or any other type with
    ``+``, ``-``, ``*``, ``/`` and ``==`` and a zero that compares equal
    to ``0``. Mixed coefficient types follow Python's numeric promotion;
    use :func:`polynomial_cast` for explicit conversion.

    Attributes
    ----------
    coeffs : list
        Coefficients in ascending order. coeffs[i] is the coefficient of
        x^i. Trailing zero coefficients are always trimmed, so the zero
        polynomial has ``coeffs == []``.

    Examples
    --------
    Polynomial 1 + 2x + 3x^2:
        Polynomial(coeffs=[1, 2, 3])

    Operator overloading:
        p + q    # polynomial_add(p, q)
        p - q    # polynomial_subtract(p, q)
        p * q    # polynomial_multiply(p, q)
        p * 2    # polynomial_scale(p, 2)
        p + 2    # polynomial_add_constant(p, 2)
        p // q   # polynomial_div(p, q)
        p % q    # polynomial_mod(p, q)
        -p       # polynomial_negate(p)
        p(x)     # polynomial_evaluate(p, x)

    Compound operators (``+=``, ``-=``, ``*=``, ``//=``, ``/=``, ``%=``)
    update the instance in place.

    NumPy scalars on the left defer to the reflected operators, so
    ``np.float64(2) + p`` is ``p + 2`` and not an array.
    """

    # Not array-like: numpy must return NotImplemented from its operators
    __array_ufunc__ = None

    coeffs: List[Any] = field(default_factory=list)

    def __post_init__(self):
        from ._polynomial_trim import _trim_trailing_zeros

        self.coeffs = _coefficient_list(self.coeffs)

        _trim_trailing_zeros(self.coeffs)

    # access

    def size(self) -> int:
        return len(self.coeffs)

    def degree(self) -> int:
        from ._polynomial_degree import polynomial_degree

        return polynomial_degree(self)

    def data(self) -> List[Any]:
        """Return a copy of the coefficient list."""
        return list(self.coeffs)

    def copy(self) -> "Polynomial":
        return Polynomial(coeffs=list(self.coeffs))

    def to(self, dtype: Callable[[Any], Any]) -> "Polynomial":
        from ._polynomial_cast import polynomial_cast

        return polynomial_cast(self, dtype)

    def evaluate(self, z):
        from ._polynomial_evaluate import polynomial_evaluate

        return polynomial_evaluate(self, z)

    def chebyshev(self) -> List[Any]:
        """Return the coefficients of this polynomial in Chebyshev basis."""
        from mathtools.polynomial._chebyshev_polynomial_t import (
            polynomial_to_chebyshev_polynomial_t,
        )

        return polynomial_to_chebyshev_polynomial_t(self.coeffs)

    def __len__(self) -> int:
        return len(self.coeffs)

    def __iter__(self):
        return iter(self.coeffs)

    def __getitem__(self, i):
        return self.coeffs[i]

    def __setitem__(self, i, value):
        from ._polynomial_trim import _trim_trailing_zeros

        self.coeffs[i] = value

        _trim_trailing_zeros(self.coeffs)

    def __call__(self, z):
        return self.evaluate(z)

    # in-place arithmetic

    def __iadd__(self, other):
        from ._polynomial_add import polynomial_add
        from ._polynomial_add_constant import polynomial_add_constant

        if isinstance(other, Polynomial):
            self.coeffs = polynomial_add(self, other).coeffs
        elif _is_scalar(other):
            self.coeffs = polynomial_add_constant(self, other).coeffs
        else:
            return NotImplemented
        return self

    def __isub__(self, other):
        from ._polynomial_subtract import polynomial_subtract
        from ._polynomial_subtract_constant import (
            polynomial_subtract_constant,
        )

        if isinstance(other, Polynomial):
            self.coeffs = polynomial_subtract(self, other).coeffs
        elif _is_scalar(other):
            self.coeffs = polynomial_subtract_constant(self, other).coeffs
        else:
            return NotImplemented
        return self

    def __imul__(self, other):
        from ._polynomial_multiply import polynomial_multiply
        from ._polynomial_scale import polynomial_scale

        if isinstance(other, Polynomial):
            self.coeffs = polynomial_multiply(self, other).coeffs
        elif _is_scalar(other):
            self.coeffs = polynomial_scale(self, other).coeffs
        else:
            return NotImplemented
        return self

    def __ifloordiv__(self, other):
        from ._polynomial_div import polynomial_div

        other = _as_polynomial(other)
        if other is None:
            return NotImplemented
        self.coeffs = polynomial_div(self, other).coeffs
        return self

    __itruediv__ = __ifloordiv__

    def __imod__(self, other):
        from ._polynomial_mod import polynomial_mod

        other = _as_polynomial(other)
        if other is None:
            return NotImplemented
        self.coeffs = polynomial_mod(self, other).coeffs
        return self

    # binary arithmetic

    def __add__(self, other):
        result = self.copy()
        return result.__iadd__(other)

    def __radd__(self, other):
        return self.__add__(other)

    def __sub__(self, other):
        result = self.copy()
        return result.__isub__(other)

    def __rsub__(self, other):
        result = _as_polynomial(other)
        if result is None:
            return NotImplemented
        return result.__isub__(self)

    def __mul__(self, other):
        result = self.copy()
        return result.__imul__(other)

    def __rmul__(self, other):
        return self.__mul__(other)

    def __floordiv__(self, other):
        result = self.copy()
        return result.__ifloordiv__(other)

    def __rfloordiv__(self, other):
        result = _as_polynomial(other)
        if result is None:
            return NotImplemented
        return result.__ifloordiv__(self)

    __truediv__ = __floordiv__
    __rtruediv__ = __rfloordiv__

    def __mod__(self, other):
        result = self.copy()
        return result.__imod__(other)

    def __rmod__(self, other):
        result = _as_polynomial(other)
        if result is None:
            return NotImplemented
        return result.__imod__(self)

    def __divmod__(self, other):
        from ._polynomial_divmod import polynomial_divmod

        other = _as_polynomial(other)
        if other is None:
            return NotImplemented
        return polynomial_divmod(self, other)

    def __rdivmod__(self, other):
        from ._polynomial_divmod import polynomial_divmod

        other = _as_polynomial(other)
        if other is None:
            return NotImplemented
        return polynomial_divmod(other, self)

    def __neg__(self) -> "Polynomial":
        from ._polynomial_negate import polynomial_negate

        return polynomial_negate(self)

    def __pos__(self) -> "Polynomial":
        return self.copy()

    # comparison and formatting

    def __eq__(self, other):
        other = _as_polynomial(other)
        if other is None:
            return NotImplemented
        return self.coeffs == other.coeffs

    def __str__(self) -> str:
        from ._polynomial_format import polynomial_format

        return polynomial_format(self)


def _as_polynomial(value: Any) -> Optional[Polynomial]:
    if isinstance(value, Polynomial):
        return value
    if _is_scalar(value):
        return Polynomial(coeffs=[value])
    return None


def polynomial(coeffs: Any = None, order: Optional[int] = None) -> Polynomial:
    """Create polynomial from coefficients.

    Parameters
    ----------
    coeffs : sequence, iterable, Tensor, Polynomial or scalar, optional
        Coefficients in ascending order. A 1-D tensor is converted with
        ``Tensor.tolist()``. A scalar gives a constant polynomial, or the
        zero polynomial if the scalar is zero. A polynomial is copied.
        Omitted, the zero polynomial is returned.
    order : int, optional
        If given, only ``coeffs[: order + 1]`` are used.

    Returns
    -------
    Polynomial
        Polynomial instance with trailing zeros trimmed.

    Raises
    ------
    PolynomialError
        If ``order`` is negative or exceeds the number of coefficients.

    Examples
    --------
    >>> polynomial([1, 2, 3]).coeffs  # 1 + 2x + 3x^2
    [1, 2, 3]
    >>> polynomial([1, 2, 3, 4], order=1).coeffs
    [1, 2]
    >>> polynomial(0).coeffs
    []
    """
    if order is None:
        return Polynomial(coeffs=coeffs)

    data = _coefficient_list(coeffs)

    if order < 0 or order + 1 > len(data):
        raise PolynomialError(
            f"order must be in [0, {len(data) - 1}], got {order}"
        )

    return Polynomial(coeffs=data[: order + 1])
