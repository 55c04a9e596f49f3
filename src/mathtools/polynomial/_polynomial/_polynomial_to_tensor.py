from typing import Optional

import torch
from torch import Tensor

from ._polynomial import Polynomial


def polynomial_to_tensor(
    p: Polynomial,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> Tensor:
    """Return coefficients as a 1-D tensor.

    Parameters
    ----------
    p : Polynomial
        Input polynomial.
    dtype : torch.dtype, optional
        Output dtype. Inferred from the coefficients if omitted.
    device : torch.device, optional
        Output device.

    Returns
    -------
    Tensor
        Coefficients in ascending order, shape (N,). The zero polynomial
        gives an empty tensor. Coefficients that torch cannot represent
        directly (``Fraction``, ``Decimal``) are converted to float.
    """
    if not p.coeffs:
        return torch.zeros(0, dtype=dtype, device=device)

    values = []
    for c in p.coeffs:
        if isinstance(c, Tensor):
            c = c.item()
        if not isinstance(c, (bool, int, float, complex)):
            c = float(c)
        values.append(c)

    return torch.tensor(values, dtype=dtype, device=device)
