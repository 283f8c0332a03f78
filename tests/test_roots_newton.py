"""Tests for the robust Newton-Raphson root finder."""

import math

import pytest
from scipy.optimize import root_scalar

from extremakit.roots import RootResult, robust_newton_raphson, zero_crossing_intervals


def test_finds_root_of_bracketed_cubic():
    """Tests a simple bracketed root."""
    result = robust_newton_raphson(lambda t: t**3 - 2.0, lambda t: 3 * t**2, 0.0, 2.0, 1e-12)
    assert result.converged
    assert result.root == pytest.approx(2.0 ** (1 / 3), abs=1e-10)


def test_root_of_cosine_on_unit_bracket():
    """Tests the root of cos inside [1, 2]."""
    result = robust_newton_raphson(math.cos, lambda t: -math.sin(t), 1.0, 2.0, 1e-10)
    assert result.converged
    assert result.root == pytest.approx(math.pi / 2, abs=1e-9)


def test_zero_derivative_falls_back_to_brentq():
    """Tests a function whose derivative vanishes at the bracket midpoint."""
    # f'(1) == 0 at the first Newton iterate
    result = robust_newton_raphson(
        lambda t: (t - 1.0) ** 3 - 0.001, lambda t: 3 * (t - 1.0) ** 2, 0.0, 2.0, 1e-10
    )
    assert result.converged
    assert result.root == pytest.approx(1.1, abs=1e-6)


def test_piecewise_linear_function_with_zero_slope_derivative():
    """Tests a kinked function for which Newton steps are useless far from the root."""

    def f(t):
        return 1.0 if t < 0.3 else (-1.0 if t > 0.3 + 1e-3 else 1.0 - 2.0 * (t - 0.3) / 1e-3)

    def df(t):
        return -2.0 / 1e-3 if 0.3 <= t <= 0.3 + 1e-3 else 0.0

    result = robust_newton_raphson(f, df, 0.0, 1.0, 1e-8)
    assert result.converged
    assert result.root == pytest.approx(0.3005, abs=1e-7)


def test_same_sign_end_points_are_scanned():
    """Tests that an unbracketed interval is subdivided to find a crossing."""
    f = lambda t: (t - 0.4) * (t - 0.45)  # noqa: E731
    df = lambda t: 2 * t - 0.85  # noqa: E731
    result = robust_newton_raphson(f, df, 0.0, 1.0, 1e-10, max_iterations=100, subdivision=20)
    assert result.converged
    assert min(abs(result.root - 0.4), abs(result.root - 0.45)) < 1e-8


def test_no_root_is_not_an_error():
    """Tests that a root-free interval returns converged=False."""
    result = robust_newton_raphson(lambda t: t**2 + 1.0, lambda t: 2 * t, -1.0, 2.0, 1e-8, 30, 5)
    assert isinstance(result, RootResult)
    assert not result.converged
    assert result.iterations <= 30


def test_end_point_within_tolerance_is_accepted():
    """Tests that a root at a bracket end point is returned immediately."""
    result = robust_newton_raphson(lambda t: t - 1.0, lambda t: 1.0, 0.0, 1.0, 1e-8)
    assert result.converged
    assert result.root == 1.0
    assert result.iterations == 0


def test_reversed_bounds_are_accepted():
    """Tests that lower > upper is tolerated."""
    result = robust_newton_raphson(math.sin, math.cos, 4.0, 2.0, 1e-10)
    assert result.root == pytest.approx(math.pi, abs=1e-9)


def test_nan_function_does_not_raise():
    """Tests that NaN values end in a miss rather than an exception."""
    result = robust_newton_raphson(lambda t: math.nan, lambda t: math.nan, 0.0, 1.0, 1e-8, 20, 3)
    assert not result.converged


@pytest.mark.parametrize(
    "kwargs",
    [{"accuracy": 0.0}, {"max_iterations": 0}, {"subdivision": 0}],
)
def test_invalid_arguments_raise(kwargs):
    """Tests argument validation."""
    params = {"accuracy": 1e-8, "max_iterations": 10, "subdivision": 3}
    params.update(kwargs)
    with pytest.raises(ValueError):
        robust_newton_raphson(math.sin, math.cos, 1.0, 4.0, **params)


def test_zero_crossing_intervals():
    """Tests that sign changes are reported from left to right."""
    intervals = list(zero_crossing_intervals(math.sin, 0.5, 7.5, 7))
    assert len(intervals) == 2
    (a1, b1), (a2, b2) = intervals
    assert a1 < math.pi < b1
    assert a2 < 2 * math.pi < b2


def test_zero_crossing_intervals_rejects_bad_subdivision():
    """Tests that subdivision must be positive."""
    with pytest.raises(ValueError):
        list(zero_crossing_intervals(math.sin, 0.0, 1.0, 0))


def test_rejected_newton_step_hands_bracket_to_brentq(monkeypatch):
    """Tests that an unusable Newton step continues with brentq on the current bracket."""
    from extremakit.roots import newton

    calls = []

    def recording_root_scalar(f, **kwargs):
        calls.append(kwargs)
        return root_scalar(f, **kwargs)

    monkeypatch.setattr(newton, "root_scalar", recording_root_scalar)
    # f'(0.5) == 0, so the very first Newton step is rejected
    result = robust_newton_raphson(
        lambda t: (t - 0.5) ** 3 + 0.001, lambda t: 3 * (t - 0.5) ** 2, 0.0, 1.0, 1e-10, 40, 5
    )
    assert result.converged
    assert result.root == pytest.approx(0.4, abs=1e-9)
    assert len(calls) == 1
    assert calls[0]["method"] == "brentq"
    assert calls[0]["bracket"] == (0.0, 1.0)
    assert calls[0]["maxiter"] == 39


def test_exhausted_budget_is_not_converged():
    """Tests that a one-iteration budget cannot reach brentq."""
    result = robust_newton_raphson(
        lambda t: (t - 0.5) ** 3 + 0.001, lambda t: 3 * (t - 0.5) ** 2, 0.0, 1.0, 1e-10, 1, 5
    )
    assert not result.converged
    assert result.iterations == 1
