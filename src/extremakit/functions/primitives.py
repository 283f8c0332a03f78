"""Primitive differentiable functions.

Primitives evaluate their value and derivative from closed-form formulas.
Module-level instances (:data:`x`, :data:`sin`, :data:`cos`, :data:`exp`,
:data:`log`) are provided for building expressions:

>>> from extremakit.functions.primitives import cos, sin
>>> f = sin / cos
>>> round(f.value(0.1), 12)
0.100334672085
"""

from __future__ import annotations

import math
from collections.abc import Callable

import numpy as np

from extremakit.functions.base import DifferentiableFunction

__all__ = [
    "Identity",
    "Constant",
    "Sin",
    "Cos",
    "Exp",
    "Log",
    "FunctionPair",
    "x",
    "sin",
    "cos",
    "exp",
    "log",
]


def _apply(ufunc, x: float) -> float:
    with np.errstate(invalid="ignore", over="ignore", divide="ignore"):
        return float(ufunc(float(x)))


class Identity(DifferentiableFunction):
    """The identity function ``x``."""

    __slots__ = ()

    def value(self, x: float) -> float:
        return float(x)

    def derivative(self, x: float) -> float:
        return 1.0


class Constant(DifferentiableFunction):
    """A constant function ``c``.

    Attributes:
        c: The constant value.
    """

    __slots__ = ("c",)

    def __init__(self, c: float):
        self._freeze(c=float(c))

    def value(self, x: float) -> float:
        return self.c

    def derivative(self, x: float) -> float:
        return 0.0


class Sin(DifferentiableFunction):
    """The sine function."""

    __slots__ = ()

    def value(self, x: float) -> float:
        return _apply(np.sin, x)

    def derivative(self, x: float) -> float:
        return _apply(np.cos, x)


class Cos(DifferentiableFunction):
    """The cosine function."""

    __slots__ = ()

    def value(self, x: float) -> float:
        return _apply(np.cos, x)

    def derivative(self, x: float) -> float:
        return -_apply(np.sin, x)


class Exp(DifferentiableFunction):
    """The exponential function."""

    __slots__ = ()

    def value(self, x: float) -> float:
        return _apply(np.exp, x)

    def derivative(self, x: float) -> float:
        return _apply(np.exp, x)


class Log(DifferentiableFunction):
    """The natural logarithm; ``nan`` for ``x <= 0``."""

    __slots__ = ()

    def value(self, x: float) -> float:
        if x <= 0:
            return math.nan
        return _apply(np.log, x)

    def derivative(self, x: float) -> float:
        if x <= 0:
            return math.nan
        return 1.0 / float(x)


class FunctionPair(DifferentiableFunction):
    """Wraps a user-supplied function and its known derivative.

    Both callables must be pure and accept a single float.

    Example:
        >>> from extremakit.functions.primitives import FunctionPair
        >>> cube = FunctionPair(lambda t: t**3, lambda t: 3 * t**2)
        >>> cube.derivative(2.0)
        12.0
    """

    __slots__ = ("_value", "_derivative")

    def __init__(self, value: Callable[[float], float], derivative: Callable[[float], float]):
        if not callable(value) or not callable(derivative):
            raise TypeError("FunctionPair expects two callables.")
        self._freeze(_value=value, _derivative=derivative)

    def value(self, x: float) -> float:
        return float(self._value(x))

    def derivative(self, x: float) -> float:
        return float(self._derivative(x))


x = Identity()
sin = Sin()
cos = Cos()
exp = Exp()
log = Log()
