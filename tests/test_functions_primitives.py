"""Tests for extremakit.functions.primitives."""

import math

import pytest

from extremakit.functions.primitives import (
    Constant,
    Cos,
    Exp,
    FunctionPair,
    Identity,
    Log,
    Sin,
    cos,
    exp,
    log,
    sin,
    x,
)


@pytest.mark.parametrize(
    ("function", "value", "derivative"),
    [
        (Sin(), math.sin, math.cos),
        (Cos(), math.cos, lambda t: -math.sin(t)),
        (Exp(), math.exp, math.exp),
        (Identity(), lambda t: t, lambda t: 1.0),
    ],
)
def test_primitive_value_and_derivative(function, value, derivative):
    """Tests closed-form values and derivatives of the primitives."""
    for t in (-1.3, 0.0, 0.4, 2.2):
        assert function.value(t) == pytest.approx(value(t), rel=1e-15, abs=1e-15)
        assert function.derivative(t) == pytest.approx(derivative(t), rel=1e-15, abs=1e-15)


def test_constant_has_zero_derivative():
    """Tests that a constant has zero derivative everywhere."""
    c = Constant(4.5)
    assert c.value(-10.0) == 4.5
    assert c.derivative(3.0) == 0.0


def test_log_is_nan_outside_domain():
    """Tests that log and its derivative are NaN for x <= 0."""
    assert log.value(math.e) == pytest.approx(1.0)
    assert log.derivative(4.0) == 0.25
    for t in (0.0, -1.0):
        assert math.isnan(log.value(t))
        assert math.isnan(log.derivative(t))


def test_exp_overflow_does_not_raise():
    """Tests that exp overflows to inf instead of raising."""
    assert exp.value(1000.0) == math.inf


def test_call_is_value():
    """Tests that calling a function returns its value."""
    assert sin(0.5) == sin.value(0.5)
    assert x(3.0) == 3.0


def test_module_level_instances():
    """Tests the shared primitive instances."""
    assert isinstance(sin, Sin)
    assert isinstance(cos, Cos)
    assert isinstance(x, Identity)


def test_function_pair_requires_callables():
    """Tests that FunctionPair rejects non-callables."""
    with pytest.raises(TypeError):
        FunctionPair(1.0, math.cos)


def test_constant_is_immutable():
    """Tests that a constant cannot be modified."""
    c = Constant(1.0)
    with pytest.raises(AttributeError):
        c.c = 2.0
