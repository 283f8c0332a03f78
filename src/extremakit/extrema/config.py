"""Configuration for the extrema finder.

This config controls how :class:`~extremakit.extrema.finder.ExtremaFinder`
partitions the search interval, how precisely critical points are located,
and where the derivatives come from when no analytic derivative exists.
"""

from __future__ import annotations

import numbers

from extremakit.finite.numerical_derivative import NumericalDerivative

__all__ = ["ExtremaConfig"]


class ExtremaConfig:
    """Configuration for the extrema finder."""

    def __init__(
        self,
        interval_count: int = 20,
        delta: float = 1e-8,
        derivative: NumericalDerivative | None = None,
        max_iterations: int = 50,
        subdivision: int = 5,
    ):
        """Initialize configuration.

        Args:
            interval_count:
                Number of equal-width sub-intervals in which the search
                interval is scanned for roots of the first derivative.
                Two extrema closer together than one sub-interval may be
                merged or missed.

            delta:
                Root-finder tolerance. After a root is located the scan
                resumes at ``root + delta``, which is also where the
                extremum is classified and reported.

            derivative:
                Numerical derivative provider. If ``None``, analytic first
                derivatives are used for
                :class:`~extremakit.functions.DifferentiableFunction`
                sources and a default :class:`NumericalDerivative` supplies
                everything else. If given, it supplies both the first and
                the second derivative for every source.

            max_iterations:
                Iteration budget of the root finder per sub-interval.

            subdivision:
                Number of parts the root finder scans for sign changes when
                a sub-interval does not bracket a root.

        Raises:
            ValueError: If any numeric setting is out of range.
            TypeError: If ``derivative`` is not a :class:`NumericalDerivative`.
        """
        if not isinstance(interval_count, numbers.Integral) or interval_count < 1:
            raise ValueError(f"interval_count must be a positive integer; got {interval_count}.")
        if not delta > 0:
            raise ValueError(f"delta must be positive; got {delta}.")
        if derivative is not None and not isinstance(derivative, NumericalDerivative):
            raise TypeError(
                "derivative must be a NumericalDerivative or None; "
                f"got {type(derivative).__name__}."
            )
        if not isinstance(max_iterations, numbers.Integral) or max_iterations < 1:
            raise ValueError(f"max_iterations must be a positive integer; got {max_iterations}.")
        if not isinstance(subdivision, numbers.Integral) or subdivision < 1:
            raise ValueError(f"subdivision must be a positive integer; got {subdivision}.")

        self.interval_count = int(interval_count)
        self.delta = float(delta)
        self.derivative = derivative
        self.max_iterations = int(max_iterations)
        self.subdivision = int(subdivision)

    def __repr__(self) -> str:
        return (
            f"ExtremaConfig(interval_count={self.interval_count}, delta={self.delta}, "
            f"derivative={self.derivative!r}, max_iterations={self.max_iterations}, "
            f"subdivision={self.subdivision})"
        )
