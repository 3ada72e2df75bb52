"""Utilities for comparing obtained values with expected ones."""
from __future__ import annotations

from typing import Any

import numpy as np

from .models import Tolerance


def values_equal(actual: Any, expected: Any) -> bool:
    """Value equality that also understands numpy arrays.

    Arrays compare equal when shapes match and every element is equal; other
    values use ``==`` and the result is coerced to ``bool``.
    """

    if isinstance(actual, np.ndarray) or isinstance(expected, np.ndarray):
        act = np.asarray(actual)
        exp = np.asarray(expected)
        if act.shape != exp.shape:
            return False
        return bool(np.array_equal(act, exp))
    return bool(actual == expected)


def approx_equal(actual: Any, expected: Any, tolerance: Tolerance) -> bool:
    """Elementwise closeness of numbers, sequences or arrays."""

    act = np.asarray(actual, dtype=np.float64)
    exp = np.asarray(expected, dtype=np.float64)
    if act.shape != exp.shape:
        return False
    return bool(np.allclose(act, exp, atol=tolerance.absolute, rtol=tolerance.relative))
