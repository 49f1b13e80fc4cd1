import logging
from typing import List, Sequence, Union

import numpy as np

logger = logging.getLogger(__name__)


def compute_weights(x_values: Union[np.ndarray, Sequence[float]]) -> np.ndarray:
    """
    Weights from the spacing of the x-values: ``w[i] = x[i] - x[i-1]`` for i >= 1.
    The first weight is copied from the second, a single value gets weight 1.
    """
    x = np.asarray(x_values, dtype=np.float64)
    if x.size == 0:
        return np.empty(0)
    if x.size == 1:
        return np.ones(1)
    weights = np.empty_like(x)
    weights[1:] = np.diff(x)
    weights[0] = weights[1]
    return weights


def isotonic_regression(x_values: Union[np.ndarray, Sequence[float]],
                        y_values: Union[np.ndarray, Sequence[float]],
                        increasing: bool = True) -> np.ndarray:
    """
    Weighted least-squares monotonic fit using the Pool Adjacent Violators Algorithm.

    Blocks are scanned left to right. Whenever the newest block violates the ordering
    against its left neighbour, the two are pooled into one block holding their weighted
    mean, and the check is repeated against the new left neighbour. Every sample takes
    part in at most one merge as the right block, so the scan is amortised O(n).

    Args:
        x_values: Sample positions in increasing order, used for the weights
        y_values: Values to fit
        increasing: True for a non-decreasing fit, False for a non-increasing one
    Returns:
        np.ndarray: Fitted values, same length as ``y_values``
    """
    y = np.asarray(y_values, dtype=np.float64)
    n = y.size
    if n != len(x_values):
        raise ValueError(f"Array length mismatch: x({len(x_values)}) != y({n})")
    if n <= 1:
        return y.copy()
    weights = compute_weights(x_values)
    # Each block is [value, weight, lo, hi]
    blocks: List[list] = []
    for i in range(n):
        blocks.append([y[i], weights[i], i, i])
        while len(blocks) > 1:
            left, right = blocks[-2], blocks[-1]
            violation = left[0] > right[0] if increasing else left[0] < right[0]
            if not violation:
                break
            w_sum = left[1] + right[1]
            if w_sum == 0:
                value = 0.5 * (left[0] + right[0])
            else:
                value = (left[1] * left[0] + right[1] * right[0]) / w_sum
            blocks[-2:] = [[value, w_sum, left[2], right[3]]]
    result = np.empty(n)
    for value, _, lo, hi in blocks:
        result[lo:hi + 1] = value
    logger.debug("Isotonic regression (%s): %d values pooled into %d blocks",
                 "increasing" if increasing else "decreasing", n, len(blocks))
    return result
