"""Property-based tests for polynomial arithmetic."""

from fractions import Fraction

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from mathtools.polynomial import (
    chebyshev_polynomial_t_evaluate,
    polynomial,
    polynomial_evaluate,
    polynomial_to_chebyshev_polynomial_t,
)
from mathtools.testing.strategies import (
    chebyshev_domain,
    coefficients,
    polynomials,
    rationals,
)


def _reference(coeffs, z):
    return sum(c * z**i for i, c in enumerate(coeffs))


class TestRingProperties:
    """Ring axioms over exact rational coefficients."""

    @given(polynomials(), polynomials(), polynomials())
    def test_add_associative(self, a, b, c):
        assert (a + b) + c == a + (b + c)

    @given(polynomials(), polynomials())
    def test_add_commutative(self, a, b):
        assert a + b == b + a

    @given(polynomials(max_degree=3), polynomials(max_degree=3), polynomials(max_degree=3))
    def test_multiply_associative(self, a, b, c):
        assert (a * b) * c == a * (b * c)

    @given(polynomials(), polynomials())
    def test_multiply_commutative(self, a, b):
        assert a * b == b * a

    @given(polynomials(), polynomials(), polynomials())
    def test_distributive(self, a, b, c):
        assert a * (b + c) == a * b + a * c

    @given(polynomials())
    def test_additive_inverse(self, a):
        assert (a - a).coeffs == []
        assert a + (-a) == polynomial()

    @given(polynomials(), rationals())
    def test_scalar_commutative(self, a, c):
        assert a * c == c * a
        assert a + c == c + a

    @given(polynomials(), rationals())
    def test_scalar_subtract_ordering(self, a, c):
        assert c - a == -(a - c)


class TestDivisionProperties:
    """Euclidean division identities."""

    @given(polynomials(), polynomials(min_degree=0))
    def test_division_identity(self, a, d):
        quotient, remainder = divmod(a, d)
        assert quotient * d + remainder == a

    @given(polynomials(), polynomials(min_degree=0))
    def test_remainder_degree(self, a, d):
        remainder = a % d
        assert len(remainder) == 0 or remainder.degree() < d.degree()

    @given(polynomials(), polynomials(min_degree=0))
    def test_operators_agree_with_divmod(self, a, d):
        quotient, remainder = divmod(a, d)
        assert a // d == quotient
        assert a / d == quotient
        assert a % d == remainder

    @given(polynomials(min_degree=0), polynomials(min_degree=0))
    def test_exact_division(self, a, b):
        quotient, remainder = divmod(a * b, b)
        assert quotient == a
        assert remainder == polynomial()


class TestTrimmingInvariant:
    """Stored length is degree + 1, or zero for the zero polynomial."""

    @given(
        st.lists(
            st.tuples(st.sampled_from(["+", "-"]), coefficients()),
            max_size=8,
        )
    )
    def test_add_subtract_sequence(self, operations):
        p = polynomial()
        for op, coeffs in operations:
            if op == "+":
                p += polynomial(coeffs)
            else:
                p -= polynomial(coeffs)

            assert len(p) == 0 or p[len(p) - 1] != 0

    @given(coefficients(), st.integers(min_value=-3, max_value=3))
    def test_scalar_operations(self, coeffs, c):
        p = polynomial(coeffs)
        for q in (p + c, p - c, p * c):
            assert len(q) == 0 or q[len(q) - 1] != 0

    @given(coefficients())
    def test_construction(self, coeffs):
        p = polynomial(coeffs)
        assert len(p) == 0 or p[len(p) - 1] != 0
        assert p == polynomial(coeffs + [0, 0])


class TestEvaluationProperties:
    """Horner and Clenshaw evaluation."""

    @given(coefficients(), rationals())
    def test_horner_matches_reference(self, coeffs, z):
        assert polynomial_evaluate(polynomial(coeffs), z) == _reference(
            polynomial(coeffs).coeffs, z
        )

    @given(polynomials(), polynomials(), rationals())
    def test_evaluate_homomorphism(self, a, b, z):
        assert (a * b)(z) == a(z) * b(z)
        assert (a + b)(z) == a(z) + b(z)

    @given(
        polynomials(min_degree=0),
        chebyshev_domain(include_endpoints=True, exact=True),
    )
    def test_chebyshev_round_trip_exact(self, p, x):
        series = polynomial_to_chebyshev_polynomial_t(p)
        assert chebyshev_polynomial_t_evaluate(series, x) == p(x)

    @settings(deadline=None)
    @given(
        st.lists(
            st.floats(min_value=-10, max_value=10, allow_nan=False),
            min_size=1,
            max_size=8,
        ),
        chebyshev_domain(include_endpoints=True),
    )
    def test_chebyshev_round_trip_float(self, coeffs, x):
        p = polynomial(coeffs)
        if not p:
            return
        series = polynomial_to_chebyshev_polynomial_t(p)
        assert chebyshev_polynomial_t_evaluate(series, x) == pytest.approx(
            polynomial_evaluate(p, x), rel=1e-9, abs=1e-9
        )


@pytest.mark.parametrize(
    "z", [0, 1, -1, Fraction(3, 7), Fraction(-5, 2)]
)
def test_evaluate_sample_points(z):
    coeffs = [Fraction(1, 2), -3, 0, 2, Fraction(-4, 3)]
    assert polynomial(coeffs)(z) == _reference(coeffs, z)
