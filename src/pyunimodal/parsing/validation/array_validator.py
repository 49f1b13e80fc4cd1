"""General data validation utilities."""

import logging
import numpy as np
from pyunimodal.data.constants import ProcessingConstants

logger = logging.getLogger(__name__)

VALID_MODES = ("strictly_increasing", "non_decreasing", "strictly_decreasing", "non_increasing")


def is_monotonic(arr: np.ndarray, name: str = "Array",
                 mode: str = "strictly_increasing",
                 threshold: float = ProcessingConstants.MONOTONICITY_THRESHOLD,
                 raise_error: bool = True) -> bool:
    """Universal monotonicity checker supporting multiple modes."""
    if mode not in VALID_MODES:
        raise ValueError(f"Unknown monotonicity mode '{mode}'. Must be one of: {', '.join(VALID_MODES)}")
    arr = np.asarray(arr, dtype=np.float64)
    diffs = np.diff(arr)
    if mode == "strictly_increasing":
        violations = diffs <= threshold
    elif mode == "non_decreasing":
        violations = diffs < -threshold
    elif mode == "strictly_decreasing":
        violations = diffs >= -threshold
    else:
        violations = diffs > threshold
    if not np.any(violations):
        logger.debug("%s is %s", name, mode.replace('_', ' '))
        return True
    i = int(np.argmax(violations)) + 1
    start_idx = max(0, i - 2)
    end_idx = min(len(arr), i + 3)
    context = "\nSurrounding values:\n"
    for j in range(start_idx, end_idx):
        context += f"Index {j}: {arr[j]:.10e}\n"
    error_msg = (
        f"{name} is not {mode.replace('_', ' ')} at index {i}:\n"
        f"Previous value ({i-1}): {arr[i-1]:.10e}\n"
        f"Current value ({i}): {arr[i]:.10e}\n"
        f"Difference: {diffs[i-1]:.10e}\n"
        f"{context}"
    )
    if raise_error:
        raise ValueError(error_msg)
    logger.warning("Warning: %s", error_msg)
    return False
