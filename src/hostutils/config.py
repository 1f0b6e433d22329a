"""Configuration utilities for hostutils.

This module centralizes small helpers and constants related to runtime configuration.
"""

import math
import os

from hostutils.errors import InvalidTraceThresholdError

TRACE_THRESHOLD_ENV = "HOSTUTILS_TRACE_THRESHOLD"  # pragma: no mutate
DEFAULT_TRACE_THRESHOLD = 1.0  # seconds


def get_trace_threshold() -> float:
    """Get the slow-call threshold used by the tracer.

    Returns:
        The value of `HOSTUTILS_TRACE_THRESHOLD` in seconds, or
        `DEFAULT_TRACE_THRESHOLD` when the variable is unset or empty.

    Raises:
        InvalidTraceThresholdError: If the value is not a finite, non-negative number.
    """
    if not (raw := os.environ.get(TRACE_THRESHOLD_ENV, "").strip()):
        return DEFAULT_TRACE_THRESHOLD
    try:
        threshold = float(raw)
    except ValueError as e:
        raise InvalidTraceThresholdError(raw) from e
    if not math.isfinite(threshold) or threshold < 0:
        raise InvalidTraceThresholdError(raw)
    return threshold
