"""Unit tests for extremakit.tabulated_model.one_d.LinearSpline."""

import numpy as np
import pytest

from extremakit.tabulated_model.one_d import (
    LinearSpline,
    linear_spline_from_samples,
    uniform_grid,
)


def test_scalar_interpolation_basic():
    """Tests that basic scalar interpolation works as expected."""
    x = np.array([0.0, 1.0, 2.0])
    y = np.array([0.0, 10.0, 20.0])

    spline = LinearSpline(x, y)

    x_new = np.array([0.5, 1.5])
    y_new = spline(x_new)

    assert y_new.shape == x_new.shape
    np.testing.assert_allclose(y_new, [5.0, 15.0])


def test_spline_passes_through_knots():
    """Tests that spline(x[i]) == y[i]."""
    x = np.array([0.0, 0.3, 1.1, 2.0])
    y = np.array([1.0, -2.0, 0.5, 4.0])
    spline = LinearSpline(x, y)
    for xi, yi in zip(x, y):
        assert spline(xi) == yi


def test_scalar_input_scalar_output():
    """Tests that scalar input yields a Python float."""
    spline = LinearSpline([0.0, 1.0], [0.0, 2.0])
    out = spline(0.25)
    assert isinstance(out, float)
    assert out == 0.5


def test_linear_extrapolation_uses_end_segments():
    """Tests that values outside the table follow the first and last segment."""
    spline = LinearSpline([0.0, 1.0, 2.0], [0.0, 1.0, 3.0])
    assert spline(-1.0) == pytest.approx(-1.0)
    assert spline(3.0) == pytest.approx(5.0)
    np.testing.assert_allclose(spline(np.array([-0.5, 2.5])), [-0.5, 4.0])


def test_uniform_grid_is_half_open():
    """Tests that the grid covers [x0, x1) without the upper bound."""
    grid = uniform_grid(4, 1.0, 3.0)
    np.testing.assert_allclose(grid, [1.0, 1.5, 2.0, 2.5])


def test_spline_from_samples():
    """Tests building a spline from uniformly spaced samples."""
    spline = linear_spline_from_samples([0.0, 1.0, 0.0, -1.0], x0=0.0, x1=4.0)
    np.testing.assert_allclose(spline.x, [0.0, 1.0, 2.0, 3.0])
    assert spline(0.5) == pytest.approx(0.5)
    assert spline(3.5) == pytest.approx(-1.5)


@pytest.mark.parametrize(
    ("x", "y"),
    [
        ([0.0, 1.0, 1.0], [0.0, 1.0, 2.0]),
        ([0.0, 1.0], [0.0, 1.0, 2.0]),
        ([0.0], [1.0]),
        ([[0.0, 1.0]], [[0.0, 1.0]]),
    ],
)
def test_invalid_tables_raise(x, y):
    """Tests that invalid tables raise ValueError."""
    with pytest.raises(ValueError):
        LinearSpline(x, y)


def test_invalid_samples_raise():
    """Tests that too few or non-finite samples raise ValueError."""
    with pytest.raises(ValueError):
        linear_spline_from_samples([1.0])
    with pytest.raises(ValueError):
        linear_spline_from_samples([1.0, np.nan, 2.0])
