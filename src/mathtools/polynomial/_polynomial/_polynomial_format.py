from ._polynomial import Polynomial


def polynomial_format(p: Polynomial) -> str:
    """Render coefficients as ``{ c0, c1, ..., cn }``.

    Intended for diagnostics; not a stable serialization format.
    """
    return "{ " + ", ".join(str(c) for c in p.coeffs) + " }"
