"""Validation utilities for ExtremaKit."""

from __future__ import annotations

import math
from collections.abc import Callable
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

__all__ = [
    "is_finite_and_differentiable",
    "validate_interval",
    "validate_samples",
    "validate_tabulated_xy",
]


def is_finite_and_differentiable(
    function: Callable[[float], Any],
    x: float,
    delta: float = 1e-5,
) -> bool:
    """Check that ``function`` is finite at ``x`` and ``x + delta``.

    Evaluates without exceptions and returns finite values at both points.

    Args:
      function: Callable ``f(x)`` returning a scalar.
      x: Probe point.
      delta: Small forward step.

    Returns:
      True if finite at both points; otherwise False.
    """
    f0 = np.asarray(function(x))
    f1 = np.asarray(function(x + delta))
    return bool(np.isfinite(f0).all() and np.isfinite(f1).all())


def validate_interval(x0: float, x1: float) -> tuple[float, float]:
    """Validates the bounds of a search interval.

    Args:
        x0: Lower bound.
        x1: Upper bound.

    Returns:
        The bounds as floats.

    Raises:
        ValueError: If a bound is not finite or ``x0 >= x1``.
    """
    x0 = float(x0)
    x1 = float(x1)
    if not (math.isfinite(x0) and math.isfinite(x1)):
        raise ValueError(f"Interval bounds must be finite; got [{x0}, {x1}].")
    if x0 >= x1:
        raise ValueError(f"x0 must be smaller than x1; got x0={x0}, x1={x1}.")
    return x0, x1


def validate_samples(samples: ArrayLike) -> NDArray[np.floating]:
    """Validates uniformly spaced y-samples.

    Args:
        samples: 1D array-like of sample values.

    Returns:
        The samples as a 1D float array.

    Raises:
        ValueError: If the samples are not 1D, have fewer than two entries,
            or contain non-finite values.
    """
    ys = np.asarray(samples, dtype=float)
    if ys.ndim != 1:
        raise ValueError(f"samples must be 1D; got ndim={ys.ndim}.")
    if ys.size < 2:
        raise ValueError(f"At least two samples are required; got {ys.size}.")
    if not np.all(np.isfinite(ys)):
        raise ValueError("samples contain non-finite values.")
    return ys


def validate_tabulated_xy(
    x: ArrayLike,
    y: ArrayLike,
) -> tuple[NDArray[np.floating], NDArray[np.floating]]:
    """Validates and converts tabulated ``x`` and ``y`` arrays into NumPy arrays.

    Requirements:
      - ``x`` and ``y`` are 1D with the same length of at least two.
      - ``x`` is strictly increasing.

    Args:
        x: 1D array-like of x values (must be strictly increasing).
        y: 1D array-like of y values with ``len(y) == len(x)``.

    Returns:
        Tuple of (x_array, y_array) as NumPy arrays.

    Raises:
        ValueError: If input arrays do not meet the required conditions.
    """
    x_arr = np.asarray(x, dtype=float)
    y_arr = np.asarray(y, dtype=float)

    if x_arr.ndim != 1:
        raise ValueError("x must be 1D.")
    if y_arr.ndim != 1:
        raise ValueError("y must be 1D.")
    if x_arr.shape[0] != y_arr.shape[0]:
        raise ValueError("x and y must have the same length.")
    if x_arr.shape[0] < 2:
        raise ValueError("At least two tabulated points are required.")
    if not np.all(np.diff(x_arr) > 0):
        raise ValueError("x must be strictly increasing.")

    return x_arr, y_arr
