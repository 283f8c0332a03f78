"""Locates local minima and maxima of a 1D function on an interval.

The search interval ``[x0, x1)`` is scanned in ``interval_count`` equal
sub-intervals. In each one a robust Newton-Raphson search looks for a root
of the first derivative; a located root is classified by the sign of the
second derivative just past it. The results are produced lazily.

Examples:
--------
>>> import numpy as np
>>> from extremakit.extrema.finder import find_all
>>> samples = np.sin(np.linspace(0.0, 2 * np.pi, 200, endpoint=False))
>>> [e.kind.value for e in find_all(samples, 0.0, 2 * np.pi)]
['maximum', 'minimum']
"""

from __future__ import annotations

import math
from collections.abc import Callable, Iterator, Sequence

import numpy as np

from extremakit.extrema.config import ExtremaConfig
from extremakit.extrema.extremum import Extremum, ExtremumKind
from extremakit.finite.numerical_derivative import NumericalDerivative
from extremakit.functions.base import DifferentiableFunction
from extremakit.logger import extremakit_logger
from extremakit.roots.newton import robust_newton_raphson
from extremakit.tabulated_model.one_d import linear_spline_from_samples
from extremakit.utils.validate import is_finite_and_differentiable, validate_interval

__all__ = ["ExtremaFinder", "find_all", "find_minima", "find_maxima", "resolve_derivatives"]

ScalarFunction = Callable[[float], float]


def resolve_derivatives(
    source,
    x0: float,
    x1: float,
    derivative: NumericalDerivative | None = None,
) -> tuple[ScalarFunction, ScalarFunction, ScalarFunction]:
    """Returns the function, first and second derivative used to search ``source``.

    Args:
        source: A :class:`DifferentiableFunction`, any scalar callable, or a
            1D sequence of y-samples uniformly spaced on ``[x0, x1)``.
        x0: Lower bound of the sampled interval.
        x1: Upper bound of the sampled interval.
        derivative: Numerical derivative provider. If given it supplies both
            derivatives; otherwise a :class:`DifferentiableFunction` keeps its
            analytic first derivative and a default provider is used for the rest.

    Returns:
        A tuple ``(f, df, ddf)`` of scalar callables.

    Raises:
        TypeError: If ``source`` is of an unsupported type.
    """
    if isinstance(source, DifferentiableFunction):
        if derivative is None:
            ddf = NumericalDerivative().derivative_function(source.derivative, order=1)
            return source.value, source.derivative, ddf
        f = source.value
    elif callable(source):
        f = source
    elif isinstance(source, (Sequence, np.ndarray)) and not isinstance(source, (str, bytes)):
        f = linear_spline_from_samples(source, x0, x1)
    else:
        raise TypeError(
            "source must be a DifferentiableFunction, a callable or a sequence of samples; "
            f"got {type(source).__name__}."
        )

    provider = derivative if derivative is not None else NumericalDerivative()
    return f, provider.derivative_function(f, order=1), provider.derivative_function(f, order=2)


class ExtremaFinder:
    """Iterator over the extrema of a function on ``[x0, x1)``, in increasing ``x``.

    Each call to :func:`next` resumes the scan where the previous one stopped
    and runs until one extremum is found or the interval is exhausted. The
    scan cursor only moves forward, so a finder cannot be restarted; build a
    new one (or call :func:`find_all` again) to repeat a search.

    A located root is reported at ``root + delta`` together with the value
    of the function there. Roots whose second derivative is exactly zero
    (or not a number) are inflection candidates and are skipped, as are roots
    at which ``root + delta`` falls outside the interval.

    Attributes:
        x0: Lower bound of the search interval.
        x1: Upper bound of the search interval.
        config: The :class:`ExtremaConfig` in use.
    """

    def __init__(
        self,
        source,
        x0: float = 0.0,
        x1: float = 1.0,
        config: ExtremaConfig | None = None,
    ) -> None:
        """Initializes the scan.

        Args:
            source: A :class:`DifferentiableFunction`, a scalar callable or a
                1D sequence of samples uniformly spaced on ``[x0, x1)``.
            x0: Lower bound of the search interval. Default is 0.
            x1: Upper bound of the search interval. Default is 1.
            config: Search configuration. Default is ``ExtremaConfig()``.

        Raises:
            ValueError: If the interval or the samples are invalid.
            TypeError: If ``source`` is of an unsupported type.
        """
        self.x0, self.x1 = validate_interval(x0, x1)
        self.config = config if config is not None else ExtremaConfig()
        self._f, self._df, self._ddf = resolve_derivatives(
            source, self.x0, self.x1, self.config.derivative
        )

        if not is_finite_and_differentiable(self._df, self.x0, self.config.delta):
            extremakit_logger.warning(
                "First derivative is not finite at the start of the interval x0=%g; "
                "sub-intervals where it is undefined will report no extrema.",
                self.x0,
            )

        self._width = (self.x1 - self.x0) / self.config.interval_count
        self._x = self.x0
        self._last_root = -math.inf

    @property
    def position(self) -> float:
        """Current position of the scan cursor."""
        return self._x

    def __iter__(self) -> Iterator[Extremum]:
        return self

    def __next__(self) -> Extremum:
        while self._x < self.x1:
            extremum = self._advance()
            if extremum is not None:
                return extremum
        raise StopIteration

    def _advance(self) -> Extremum | None:
        """Searches the sub-interval at the cursor and moves the cursor forward."""
        delta = self.config.delta
        lower = self._x
        upper = min(lower + self._width, self.x1)

        result = robust_newton_raphson(
            self._df,
            self._ddf,
            lower,
            upper,
            accuracy=delta,
            max_iterations=self.config.max_iterations,
            subdivision=self.config.subdivision,
        )

        if not result.converged:
            self._x = lower + self._width
            return None

        if result.root - self._last_root <= 2 * delta:
            # The lower bound was accepted as the previous root again.
            self._x = self._step_past(lower, upper)
            extremakit_logger.debug(
                "Root at x=%.12g re-detected; resuming at x=%.12g.", result.root, self._x
            )
            return None

        self._last_root = result.root
        self._x = result.root + delta
        extremakit_logger.debug(
            "Critical point at x=%.12g after %d iterations.", result.root, result.iterations
        )

        if self._x >= self.x1:
            return None

        curvature = self._ddf(self._x)
        if curvature > 0:
            kind = ExtremumKind.MINIMUM
        elif curvature < 0:
            kind = ExtremumKind.MAXIMUM
        else:
            extremakit_logger.debug("Unclassifiable critical point at x=%.12g.", self._x)
            return None

        return Extremum(self._x, float(self._f(self._x)), kind)

    def _step_past(self, lower: float, upper: float) -> float:
        """Returns the first point past ``lower`` where ``|f'|`` reaches the tolerance.

        The offset from ``lower`` starts at ``2 * delta`` and doubles until
        ``|f'| >= delta`` or ``upper`` is reached.
        """
        delta = self.config.delta
        offset = 2 * delta
        x = lower + offset
        while x < upper and not abs(self._df(x)) >= delta:
            offset *= 2
            x = lower + offset
        return min(x, upper)


def find_all(
    source,
    x0: float = 0.0,
    x1: float = 1.0,
    interval_count: int = 20,
    delta: float = 1e-8,
    derivative: NumericalDerivative | None = None,
    *,
    config: ExtremaConfig | None = None,
) -> ExtremaFinder:
    """Lazily finds the local extrema of ``source`` on ``[x0, x1)``.

    Args:
        source: A :class:`DifferentiableFunction`, a scalar callable or a 1D
            sequence of y-samples uniformly spaced on ``[x0, x1)``.
        x0: Lower bound of the search interval. Default is 0.
        x1: Upper bound of the search interval. Default is 1.
        interval_count: Number of scanned sub-intervals. Default is 20.
        delta: Root tolerance and post-root offset. Default is ``1e-8``.
        derivative: Optional numerical derivative provider supplying both
            derivatives.
        config: Full search configuration, including the root-finder
            budget. If given, it is used as is and ``interval_count``,
            ``delta`` and ``derivative`` must be left at their defaults.

    Returns:
        An iterator of :class:`Extremum` in increasing ``x``.

    Raises:
        ValueError: If ``config`` is combined with non-default search arguments.
    """
    if config is None:
        config = ExtremaConfig(interval_count=interval_count, delta=delta, derivative=derivative)
    elif (interval_count, delta, derivative) != (20, 1e-8, None):
        raise ValueError("Pass either config or interval_count/delta/derivative, not both.")
    return ExtremaFinder(source, x0, x1, config)


def find_minima(source, x0: float = 0.0, x1: float = 1.0, **kwargs) -> Iterator[Extremum]:
    """Lazily finds the local minima of ``source``; see :func:`find_all`."""
    return (e for e in find_all(source, x0, x1, **kwargs) if e.is_minimum)


def find_maxima(source, x0: float = 0.0, x1: float = 1.0, **kwargs) -> Iterator[Extremum]:
    """Lazily finds the local maxima of ``source``; see :func:`find_all`."""
    return (e for e in find_all(source, x0, x1, **kwargs) if e.is_maximum)
