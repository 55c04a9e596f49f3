"""Testing utilities for mathtools.

Hypothesis strategies for generating coefficient sequences, polynomials
and evaluation points:

    from hypothesis import given

    from mathtools.testing.strategies import polynomials

    @given(polynomials())
    def test_something(p):
        ...
"""

from . import strategies

__all__ = [
    "strategies",
]
