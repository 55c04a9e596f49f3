"""Tests for chebyshev_coefficient."""

import pytest
from numpy.polynomial import chebyshev as np_cheb

from mathtools.polynomial import chebyshev_coefficient


class TestChebyshevCoefficient:
    """Tests for the power-basis coefficients of T_n."""

    @pytest.mark.parametrize(
        "n, m, expected",
        [
            (0, 0, 1),
            (1, 1, 1),
            (2, 0, -1),
            (2, 2, 2),
            (3, 1, -3),
            (3, 3, 4),
            (4, 0, 1),
            (4, 2, -8),
            (4, 4, 8),
            (5, 1, 5),
            (5, 3, -20),
            (5, 5, 16),
        ],
    )
    def test_pinned_values(self, n, m, expected):
        assert chebyshev_coefficient(n, m) == expected

    def test_m_greater_than_n(self):
        assert chebyshev_coefficient(2, 3) == 0
        assert chebyshev_coefficient(0, 1) == 0

    def test_parity_mismatch(self):
        """Terms of different parity vanish."""
        assert chebyshev_coefficient(3, 0) == 0
        assert chebyshev_coefficient(3, 2) == 0
        assert chebyshev_coefficient(4, 1) == 0

    def test_returns_int(self):
        assert isinstance(chebyshev_coefficient(6, 2), int)

    def test_leading_coefficient(self):
        """Leading coefficient of T_n is 2^(n-1)."""
        for n in range(1, 12):
            assert chebyshev_coefficient(n, n) == 2 ** (n - 1)

    def test_values_at_one(self):
        """T_n(1) = 1, so the coefficients of T_n sum to one."""
        for n in range(12):
            assert sum(chebyshev_coefficient(n, m) for m in range(n + 1)) == 1

    @pytest.mark.parametrize("n", range(10))
    def test_vs_numpy(self, n):
        """Compare with numpy.polynomial.chebyshev.cheb2poly."""
        basis = [0] * n + [1]
        expected = np_cheb.cheb2poly(basis)
        result = [chebyshev_coefficient(n, m) for m in range(n + 1)]
        assert result == [round(c) for c in expected]

    def test_negative_raises(self):
        with pytest.raises(ValueError):
            chebyshev_coefficient(-1, 0)
        with pytest.raises(ValueError):
            chebyshev_coefficient(2, -2)
