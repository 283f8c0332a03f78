"""Interpolation of tabulated 1D data."""

from extremakit.tabulated_model.one_d import (
    LinearSpline,
    linear_spline_from_samples,
    uniform_grid,
)

__all__ = ["LinearSpline", "linear_spline_from_samples", "uniform_grid"]
