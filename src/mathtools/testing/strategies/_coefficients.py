from typing import List

import hypothesis.strategies


def coefficients(
    min_size: int = 0,
    max_size: int = 6,
    min_value: int = -20,
    max_value: int = 20,
) -> hypothesis.strategies.SearchStrategy[List[int]]:
    """Strategy for integer coefficient lists in ascending order.

    Lists may end in zeros, so they exercise trimming.
    """
    return hypothesis.strategies.lists(
        hypothesis.strategies.integers(
            min_value=min_value, max_value=max_value
        ),
        min_size=min_size,
        max_size=max_size,
    )
