"""Provides the NumericalDerivative class.

A :class:`NumericalDerivative` approximates derivatives of an arbitrary
scalar function with a fixed finite-difference stencil. It is the default
derivative provider of the extrema finder whenever no analytic derivative is
available.

Examples:
--------
Second derivative with the default three-point central stencil:

>>> from extremakit.finite.numerical_derivative import NumericalDerivative
>>> d = NumericalDerivative()
>>> round(d.evaluate(lambda x: x**3, 2.0, order=2), 6)
12.0

Forward-biased six-point stencil, returned as a reusable callable:

>>> import math
>>> d = NumericalDerivative(num_points=6, center=3)
>>> dcos = d.derivative_function(math.sin, order=1)
>>> abs(dcos(0.7) - math.cos(0.7)) < 1e-8
True
"""

from __future__ import annotations

from collections.abc import Callable

import numpy as np

from extremakit.finite.stencil import (
    finite_difference_coeffs,
    stencil_offsets,
    validate_stencil,
)

__all__ = ["NumericalDerivative"]


class NumericalDerivative:
    """Computes numerical derivatives of scalar functions with a finite-difference stencil.

    The stencil evaluates the function at ``x + k * h`` for the integer
    offsets ``k = -center, ..., num_points - 1 - center``. The step ``h`` is
    either fixed (``stepsize``) or relative to the evaluation point
    (``relative_step * max(1, |x|)``).

    Attributes:
        num_points: Number of points in the stencil.
        center: Index of the evaluation point in the stencil, or ``None``
            for a central stencil.
        stepsize: Fixed step size, or ``None`` to use a relative step.
        relative_step: Relative step used when ``stepsize`` is ``None``.
    """

    def __init__(
        self,
        num_points: int = 3,
        center: int | None = None,
        stepsize: float | None = None,
        relative_step: float = 1e-4,
    ) -> None:
        """Initialises the stencil.

        Args:
            num_points: Number of points in the stencil. Derivative orders
                ``1`` to ``num_points - 1`` are supported. Default is 3.
            center: Index of the evaluation point. ``None`` (default) centers
                the stencil, which requires an odd ``num_points``.
            stepsize: Fixed step size. Default is ``None`` (relative step).
            relative_step: Relative step size. Default is ``1e-4``.

        Raises:
            ValueError: If the stencil layout or a step size is invalid.
        """
        validate_stencil(num_points, center)
        if stepsize is not None and not stepsize > 0:
            raise ValueError("stepsize must be positive.")
        if not relative_step > 0:
            raise ValueError("relative_step must be positive.")

        self.num_points = num_points
        self.center = center
        self.stepsize = stepsize
        self.relative_step = relative_step
        self._offsets = stencil_offsets(num_points, center)

    def step(self, x: float) -> float:
        """Returns the step size used at ``x``."""
        if self.stepsize is not None:
            return self.stepsize
        return self.relative_step * max(1.0, abs(float(x)))

    def evaluate(
        self,
        function: Callable[[float], float],
        x: float,
        order: int = 1,
    ) -> float:
        """Estimates the ``order``-th derivative of ``function`` at ``x``.

        Args:
            function: Scalar function of one float.
            x: The point at which the derivative is evaluated.
            order: The derivative order. Default is 1.

        Returns:
            The estimated derivative.

        Raises:
            ValueError: If the stencil has too few points for ``order``.
        """
        x = float(x)
        h = self.step(x)
        coeffs = finite_difference_coeffs(self.num_points, self.center, order, h)
        values = np.array([function(x + k * h) for k in self._offsets], dtype=float)
        return float(np.dot(coeffs, values))

    def derivative_function(
        self,
        function: Callable[[float], float],
        order: int = 1,
    ) -> Callable[[float], float]:
        """Returns a callable approximating the ``order``-th derivative of ``function``.

        Raises:
            ValueError: If the stencil has too few points for ``order``.
        """
        validate_stencil(self.num_points, self.center, order)

        def derivative(x: float) -> float:
            return self.evaluate(function, x, order)

        return derivative

    def __repr__(self) -> str:
        return (
            f"NumericalDerivative(num_points={self.num_points}, center={self.center}, "
            f"stepsize={self.stepsize}, relative_step={self.relative_step})"
        )
