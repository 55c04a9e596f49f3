"""Benchmark polynomial multiplication and synthetic division.

Times direct (O(n*m)) multiplication and synthetic division across
polynomial degrees, for float and exact rational coefficients.
"""

import time
from fractions import Fraction

import torch

from mathtools.polynomial import (
    polynomial,
    polynomial_cast,
    polynomial_divmod,
    polynomial_multiply,
)


def benchmark_arithmetic(
    degree: int,
    n_iterations: int = 20,
    method: str = "multiply",
    exact: bool = False,
) -> float:
    """Benchmark arithmetic at given degree.

    Parameters
    ----------
    degree : int
        Degree of polynomials to multiply, or of the dividend.
    n_iterations : int
        Number of iterations for timing.
    method : str
        'multiply' or 'divmod'.
    exact : bool
        Use ``Fraction`` coefficients instead of floats.

    Returns
    -------
    float
        Average time per operation in milliseconds.
    """
    a = polynomial(torch.randn(degree + 1, dtype=torch.float64))
    b = polynomial(torch.randn(degree // 2 + 1, dtype=torch.float64))

    if exact:
        a = polynomial_cast(a, Fraction)
        b = polynomial_cast(b, Fraction)

    if method == "multiply":
        fn = polynomial_multiply
    elif method == "divmod":
        fn = polynomial_divmod
    else:
        raise ValueError(f"Unknown method: {method}")

    # Warmup
    for _ in range(2):
        _ = fn(a, b)

    start = time.perf_counter()
    for _ in range(n_iterations):
        _ = fn(a, b)

    elapsed = time.perf_counter() - start
    return elapsed / n_iterations * 1000  # ms


def main():
    """Run arithmetic benchmarks across degrees."""
    degrees = [8, 16, 32, 64, 128, 256]

    print("Polynomial Arithmetic Benchmark")
    print("=" * 70)
    print(
        f"{'Degree':>8} {'Mul (ms)':>14} {'Divmod (ms)':>14} "
        f"{'Mul Q (ms)':>14} {'Divmod Q (ms)':>14}"
    )
    print("-" * 70)

    for degree in degrees:
        ms_mul = benchmark_arithmetic(degree, method="multiply")
        ms_div = benchmark_arithmetic(degree, method="divmod")
        ms_mul_q = benchmark_arithmetic(degree, method="multiply", exact=True)
        ms_div_q = benchmark_arithmetic(degree, method="divmod", exact=True)

        print(
            f"{degree:>8} {ms_mul:>14.4f} {ms_div:>14.4f} "
            f"{ms_mul_q:>14.4f} {ms_div_q:>14.4f}"
        )

    print()
    print("Notes:")
    print("- Multiplication is a direct convolution")
    print("- Divmod is synthetic division by a divisor of half the degree")
    print("- Q columns use fractions.Fraction coefficients")


if __name__ == "__main__":
    main()
