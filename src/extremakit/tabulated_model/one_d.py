"""Linear interpolation of 1D tabulated functions.

Provides :class:`LinearSpline`, a thin wrapper around ``numpy.interp`` that
extends the first and last segments linearly beyond the tabulated range, and
helpers that build a spline from uniformly spaced samples.

The two common entry points are:

* Direct construction with ``(x, y)`` arrays of shape ``(N,)``.
* :func:`linear_spline_from_samples` for samples taken at
  ``x0 + i * (x1 - x0) / N``.
"""


from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike, NDArray

from extremakit.utils.validate import validate_samples, validate_tabulated_xy

__all__ = ["LinearSpline", "uniform_grid", "linear_spline_from_samples"]


class LinearSpline:
    """Piecewise linear interpolant of tabulated data.

    Inside ``[x[0], x[-1]]`` values are interpolated with ``numpy.interp``;
    outside that range the first or last segment is extended linearly, so
    the spline is defined on the whole real line and ``spline(x[i]) == y[i]``.

    Attributes:
        x: Tabulated x grid, strictly increasing.
        y: Tabulated y values.

    Example:
        >>> import numpy as np
        >>> from extremakit.tabulated_model import LinearSpline
        >>>
        >>> spline = LinearSpline([0.0, 1.0, 2.0], [0.0, 10.0, 0.0])
        >>> spline(0.25)
        2.5
        >>> spline(np.array([-1.0, 3.0]))
        array([-10., -10.])
    """

    def __init__(self, x: ArrayLike, y: ArrayLike) -> None:
        """Initializes a linear spline.

        Args:
            x: Strictly increasing tabulated x values with shape ``(N,)``, ``N >= 2``.
            y: Tabulated y values with shape ``(N,)``.
        """
        self.x, self.y = validate_tabulated_xy(x, y)
        self._slope_lo = (self.y[1] - self.y[0]) / (self.x[1] - self.x[0])
        self._slope_hi = (self.y[-1] - self.y[-2]) / (self.x[-1] - self.x[-2])

    def __call__(self, x_new: ArrayLike) -> float | NDArray[np.floating]:
        """Evaluates the spline at the given x values.

        Args:
            x_new: Scalar or array of points.

        Returns:
            A float for scalar input, otherwise an array with the shape of ``x_new``.
        """
        x_arr = np.asarray(x_new, dtype=float)
        y_new = np.interp(x_arr, self.x, self.y)

        below = x_arr < self.x[0]
        above = x_arr > self.x[-1]
        y_new = np.where(below, self.y[0] + self._slope_lo * (x_arr - self.x[0]), y_new)
        y_new = np.where(above, self.y[-1] + self._slope_hi * (x_arr - self.x[-1]), y_new)

        if y_new.ndim == 0:
            return float(y_new)
        return y_new


def uniform_grid(n: int, x0: float, x1: float) -> NDArray[np.floating]:
    """Returns ``x0 + i * (x1 - x0) / n`` for ``i = 0, ..., n - 1``.

    The grid covers the half-open interval ``[x0, x1)``.
    """
    if n < 1:
        raise ValueError("n must be at least 1.")
    return x0 + np.arange(n, dtype=float) * ((x1 - x0) / n)


def linear_spline_from_samples(
    samples: ArrayLike,
    x0: float = 0.0,
    x1: float = 1.0,
) -> LinearSpline:
    """Creates a :class:`LinearSpline` from uniformly spaced samples on ``[x0, x1)``.

    Args:
        samples: 1D array-like of at least two y-samples.
        x0: Position of the first sample. Default is 0.
        x1: Upper bound of the sampled interval. Default is 1.

    Returns:
        The interpolating spline.
    """
    ys = validate_samples(samples)
    return LinearSpline(uniform_grid(ys.size, x0, x1), ys)
