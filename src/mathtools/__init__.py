"""mathtools: generic polynomial arithmetic and Chebyshev series."""

from . import polynomial

__all__ = [
    "polynomial",
]

__version__ = "0.1.0"
