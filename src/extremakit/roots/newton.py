"""Robust Newton-Raphson root finding.

Provides a bracketed Newton-Raphson method that hands the bracket over to
SciPy's ``brentq`` whenever a Newton step is unusable, and that scans the
bracket for sign changes when its end points do not bracket a root.
"""

from __future__ import annotations

import math
from collections.abc import Callable
from dataclasses import dataclass

from scipy.optimize import root_scalar

from extremakit.roots.bracketing import zero_crossing_intervals

__all__ = ["RootResult", "robust_newton_raphson"]


@dataclass(frozen=True)
class RootResult:
    """Result of root finding.

    Attributes:
        root: The located root, or the last iterate when not converged.
        converged: Whether a root was found within the tolerance.
        iterations: Number of iterations used.
    """

    root: float
    converged: bool
    iterations: int


def _sign(value: float) -> int:
    if value > 0:
        return 1
    if value < 0:
        return -1
    return 0


def robust_newton_raphson(
    f: Callable[[float], float],
    df: Callable[[float], float],
    lower: float,
    upper: float,
    accuracy: float = 1e-8,
    max_iterations: int = 100,
    subdivision: int = 20,
) -> RootResult:
    """Finds a root of ``f`` in ``[lower, upper]`` with a safeguarded Newton-Raphson method.

    Newton steps are taken from the middle of the bracket. A step is rejected
    when the derivative vanishes, the step leaves the bracket, or the step
    does not at least halve the previous one. If the bracket then holds a
    sign change, the remaining iteration budget is spent on SciPy's
    ``brentq``. If ``f`` has the same sign at both end points, the bracket is
    split into ``subdivision`` parts and every part with a sign change is
    searched recursively.

    Failing to find a root is not an error: the result then has
    ``converged=False``.

    Args:
        f: Function whose root is sought.
        df: Derivative of ``f``.
        lower: Lower bound of the bracket.
        upper: Upper bound of the bracket.
        accuracy: Tolerance on both ``|f(root)|`` and the last Newton step.
            ``brentq`` runs with its own, tighter default tolerance.
            Default is ``1e-8``.
        max_iterations: Maximum number of iterations. Default is 100.
        subdivision: Number of parts scanned for sign changes when the
            end points do not bracket a root. Default is 20.

    Returns:
        A :class:`RootResult`.

    Raises:
        ValueError: If ``accuracy``, ``max_iterations`` or ``subdivision``
            is not positive.
    """
    if not accuracy > 0:
        raise ValueError("accuracy must be positive.")
    if max_iterations < 1:
        raise ValueError("max_iterations must be at least 1.")
    if subdivision < 1:
        raise ValueError("subdivision must be at least 1.")
    if lower > upper:
        lower, upper = upper, lower

    fmin = f(lower)
    fmax = f(upper)

    if abs(fmin) < accuracy:
        return RootResult(lower, True, 0)
    if abs(fmax) < accuracy:
        return RootResult(upper, True, 0)

    root = 0.5 * (lower + upper)
    fx = f(root)
    last_step = abs(upper - lower)

    for i in range(max_iterations):
        dfx = df(root)
        step = fx / dfx if dfx != 0 else math.nan
        candidate = root - step

        if abs(step) < accuracy and abs(fx) < accuracy:
            return RootResult(candidate, True, i + 1)

        if (
            not math.isfinite(candidate)
            or candidate > upper
            or candidate < lower
            or abs(2 * fx) > abs(last_step * dfx)
        ):
            remaining = max_iterations - i - 1
            if remaining < 1:
                break
            if fmin * fmax < 0:
                return _brentq(f, lower, upper, remaining, i + 1)
            if _sign(fmin) == _sign(fmax):
                scanned = _scan_for_crossings(f, df, lower, upper, accuracy, remaining, subdivision)
                return RootResult(scanned.root, scanned.converged, i + 1 + scanned.iterations)
            break

        root = candidate
        fx = f(root)
        last_step = step

        if fx == 0:
            return RootResult(root, True, i + 1)
        if _sign(fx) != _sign(fmin):
            upper, fmax = root, fx
        elif _sign(fx) != _sign(fmax):
            lower, fmin = root, fx

    return RootResult(root, False, max_iterations)


def _brentq(
    f: Callable[[float], float],
    lower: float,
    upper: float,
    max_iterations: int,
    used: int,
) -> RootResult:
    sol = root_scalar(f, method="brentq", bracket=(lower, upper), maxiter=max_iterations)
    return RootResult(float(sol.root), bool(sol.converged), used + sol.iterations)


def _scan_for_crossings(
    f: Callable[[float], float],
    df: Callable[[float], float],
    lower: float,
    upper: float,
    accuracy: float,
    max_iterations: int,
    subdivision: int,
) -> RootResult:
    used = 0
    for a, b in zero_crossing_intervals(f, lower, upper, subdivision):
        result = robust_newton_raphson(f, df, a, b, accuracy, max_iterations, subdivision)
        used += result.iterations
        if result.converged:
            return RootResult(result.root, True, used)
    return RootResult(math.nan, False, used)
