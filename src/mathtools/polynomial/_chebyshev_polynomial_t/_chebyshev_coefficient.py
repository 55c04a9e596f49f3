import math
from fractions import Fraction


def chebyshev_coefficient(n: int, m: int) -> int:
    """Coefficient of x^m in the Chebyshev polynomial T_n.

    Parameters
    ----------
    n : int
        Degree of the Chebyshev polynomial, n >= 0.
    m : int
        Power of x, m >= 0.

    Returns
    -------
    int
        Exact integer coefficient. Zero when m > n or when n and m have
        different parity.

    Raises
    ------
    ValueError
        If n or m is negative.

    Notes
    -----
    With r = (n - m) / 2,

        [x^m] T_n(x) = (-1)^r * n / (2 * (n - r)) * C(n - r, r) * 2^m

    The formula is singular for terms of mismatched parity, which vanish
    identically and are returned before it is applied.

    Examples
    --------
    >>> [chebyshev_coefficient(3, m) for m in range(4)]  # T_3 = 4x^3 - 3x
    [0, -3, 0, 4]
    """
    if n < 0 or m < 0:
        raise ValueError(f"n and m must be non-negative, got n={n}, m={m}")

    if m > n:
        return 0

    if (n & 1) != (m & 1):
        return 0

    if n == 0:
        return 1

    r = (n - m) // 2

    result = Fraction(n, 2 * (n - r)) * math.comb(n - r, r) * 2**m

    if r & 1:
        result = -result

    assert result.denominator == 1

    return result.numerator
