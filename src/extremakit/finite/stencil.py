"""Stencil definitions and utilities for finite-difference derivative calculations."""

from __future__ import annotations

import math
from functools import lru_cache

import numpy as np
from numpy.typing import NDArray

__all__ = [
    "stencil_offsets",
    "finite_difference_coeffs",
    "validate_stencil",
    "MAX_POINTS",
]


#: The largest supported stencil. Larger stencils gain little accuracy in
#: double precision while the moment system becomes ill-conditioned.
MAX_POINTS = 11


def validate_stencil(
    num_points: int,
    center: int | None,
    order: int | None = None,
) -> None:
    """Validates a stencil layout and, optionally, a derivative order for it.

    Args:
        num_points: Number of points in the stencil.
        center: Index of the evaluation point within the stencil, or ``None``
            for a central stencil (``num_points`` must then be odd).
        order: Derivative order to check against the stencil, if given.

    Raises:
        ValueError: If the layout is unsupported or the stencil has too few
            points for the requested order.
    """
    if not isinstance(num_points, int) or num_points < 2 or num_points > MAX_POINTS:
        raise ValueError(
            f"[FiniteDifference] num_points must be an integer in [2, {MAX_POINTS}]; "
            f"got {num_points}."
        )
    if center is None:
        if num_points % 2 == 0:
            raise ValueError(
                "[FiniteDifference] A central stencil needs an odd number of points; "
                f"got {num_points}. Pass an explicit center instead."
            )
    elif not 0 <= center < num_points:
        raise ValueError(
            f"[FiniteDifference] center must lie in [0, {num_points - 1}]; got {center}."
        )
    if order is not None and not 1 <= order < num_points:
        raise ValueError(
            f"[FiniteDifference] A {num_points}-point stencil supports derivative "
            f"orders 1 to {num_points - 1}; got {order}."
        )


def stencil_offsets(
    num_points: int,
    center: int | None = None,
) -> NDArray[np.float64]:
    """Creates the integer offsets of a stencil, in units of the step size.

    Args:
        num_points: Number of points in the stencil.
        center: Index of the evaluation point. ``None`` centers the stencil.

    Returns:
        The offsets ``-center, ..., num_points - 1 - center`` as floats.
    """
    if center is None:
        center = num_points // 2
    return np.arange(-center, num_points - center, dtype=np.float64)


@lru_cache(maxsize=64)
def _unit_coeffs(
    num_points: int,
    center: int | None,
    deriv_order: int,
) -> tuple[float, ...]:
    offsets = stencil_offsets(num_points, center)
    n = offsets.size

    matrix = np.zeros((n, n), dtype=float)
    b = np.zeros(n, dtype=float)

    # Match Taylor expansion up to degree n-1
    for k in range(n):
        matrix[k, :] = offsets**k / math.factorial(k)
    b[deriv_order] = 1.0  # enforce correct derivative of order m

    return tuple(np.linalg.solve(matrix, b))


def finite_difference_coeffs(
    num_points: int,
    center: int | None,
    deriv_order: int,
    stepsize: float,
) -> NDArray[np.float64]:
    """Computes finite difference coefficients for a stencil and derivative order.

    The coefficients solve the linear system that matches the Taylor
    expansion of the function around the evaluation point, so that
    ``sum(c_i * f(x + k_i * h))`` approximates the derivative of the
    requested order.

    Args:
        num_points: Number of points in the stencil.
        center: Index of the evaluation point, or ``None`` for central.
        deriv_order: The order of the derivative to approximate.
        stepsize: The step size ``h``.

    Returns:
        An array of finite difference coefficients, one per offset.
    """
    validate_stencil(num_points, center, deriv_order)
    if stepsize <= 0:
        raise ValueError("stepsize must be positive.")
    unit = np.asarray(_unit_coeffs(num_points, center, deriv_order), dtype=float)
    return unit / stepsize**deriv_order

