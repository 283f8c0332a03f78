"""Scanning for sub-intervals that bracket a sign change."""

from __future__ import annotations

from collections.abc import Callable, Iterator

import numpy as np

__all__ = ["zero_crossing_intervals"]


def zero_crossing_intervals(
    function: Callable[[float], float],
    lower: float,
    upper: float,
    subdivision: int,
) -> Iterator[tuple[float, float]]:
    """Yields the sub-intervals of ``[lower, upper]`` over which ``function`` changes sign.

    The interval is split into ``subdivision`` equal parts and each part whose
    end points have strictly opposite signs is yielded, from left to right.
    End points where the function is ``nan`` never bracket a crossing.

    Args:
        function: Scalar function of one float.
        lower: Lower bound of the scanned interval.
        upper: Upper bound of the scanned interval.
        subdivision: Number of equal parts to scan.

    Yields:
        ``(a, b)`` tuples with ``function(a) * function(b) < 0``.
    """
    if subdivision < 1:
        raise ValueError("subdivision must be at least 1.")

    edges = np.linspace(lower, upper, subdivision + 1)
    a = float(edges[0])
    fa = function(a)
    for edge in edges[1:]:
        b = float(edge)
        fb = function(b)
        if np.sign(fa) * np.sign(fb) < 0:
            yield a, b
        a, fa = b, fb
