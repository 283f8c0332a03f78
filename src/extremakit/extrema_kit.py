"""Provides the ExtremaKit class.

A light wrapper around the extrema finder that fixes the function, the
search interval and the configuration once, and exposes a simple API for
the located extrema.

Typical usage examples:

>>> import numpy as np
>>> from extremakit.extrema_kit import ExtremaKit
>>> from extremakit.functions import sin
>>>
>>> kit = ExtremaKit(sin, x0=0.1, x1=7.0)
>>> [round(e.x, 6) for e in kit.maxima()]
[1.570796]
>>> samples = np.cos(np.linspace(0.0, 2 * np.pi, 100, endpoint=False))
>>> len(ExtremaKit(samples, 0.0, 2 * np.pi).find_all())
1
"""

from __future__ import annotations

from extremakit.extrema.config import ExtremaConfig
from extremakit.extrema.extremum import Extremum
from extremakit.extrema.finder import ExtremaFinder, resolve_derivatives
from extremakit.utils.validate import validate_interval


class ExtremaKit:
    """Provides access to the extrema of a function on an interval."""

    def __init__(
        self,
        source,
        x0: float = 0.0,
        x1: float = 1.0,
        config: ExtremaConfig | None = None,
    ):
        """Initialise with function, interval and configuration.

        Args:
            source: A :class:`~extremakit.functions.DifferentiableFunction`,
                a scalar callable, or a 1D sequence of y-samples uniformly
                spaced on ``[x0, x1)``.
            x0: Lower bound of the search interval.
            x1: Upper bound of the search interval.
            config: Search configuration. Default is ``ExtremaConfig()``.
        """
        self.x0, self.x1 = validate_interval(x0, x1)
        self.config = config if config is not None else ExtremaConfig()
        # fail early on unsupported sources or bad samples
        resolve_derivatives(source, self.x0, self.x1, self.config.derivative)
        self.source = source

    def iter_extrema(self) -> ExtremaFinder:
        """Returns a fresh lazy iterator over the extrema."""
        return ExtremaFinder(self.source, self.x0, self.x1, self.config)

    def find_all(self) -> list[Extremum]:
        """Returns all extrema in increasing ``x``."""
        return list(self.iter_extrema())

    def minima(self) -> list[Extremum]:
        """Returns the local minima in increasing ``x``."""
        return [e for e in self.iter_extrema() if e.is_minimum]

    def maxima(self) -> list[Extremum]:
        """Returns the local maxima in increasing ``x``."""
        return [e for e in self.iter_extrema() if e.is_maximum]
