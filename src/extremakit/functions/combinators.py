"""Combinator nodes of the differentiable function algebra.

Each combinator wraps one or two :class:`DifferentiableFunction` operands and
evaluates its value and derivative from the operands' values and derivatives
with the corresponding calculus rule:

* :class:`ScalarMultiple`: ``(a f)' = a f'``
* :class:`Sum` and :class:`Difference`: ``(f ± g)' = f' ± g'``
* :class:`Product`: ``(f g)' = f' g + f g'``
* :class:`Quotient`: ``(f / g)' = (f' g - f g') / g**2``
* :class:`Composition`: ``f(g(x))' = f'(g(x)) g'(x)``
* :class:`ConstantPower`: ``r f**(r - 1)``, optionally times ``f'``
* :class:`FunctionPower`: ``(f**g)' = f**g (f' g / f + g' ln f)``

Domain violations (division by zero, logarithm of a non-positive base,
negative base under a fractional exponent) evaluate to ``nan`` instead of
raising, so that deeply nested expressions degrade gracefully.

The builder functions (:func:`add`, :func:`multiply`, ...) are the explicit
counterparts of the operators defined on :class:`DifferentiableFunction`.
"""

from __future__ import annotations

import math
import numbers

import numpy as np

from extremakit.functions.base import DifferentiableFunction, as_function

__all__ = [
    "ScalarMultiple",
    "Sum",
    "Difference",
    "Product",
    "Quotient",
    "Composition",
    "ConstantPower",
    "FunctionPower",
    "scale",
    "negate",
    "add",
    "subtract",
    "multiply",
    "divide",
    "compose",
    "power",
]


def _pow(base: float, exponent: float) -> float:
    """Returns ``base**exponent`` with IEEE semantics instead of exceptions."""
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        return float(np.power(float(base), float(exponent)))


class ScalarMultiple(DifferentiableFunction):
    """The function ``a * f(x)`` for a real constant ``a``."""

    __slots__ = ("_f", "_a")

    def __init__(self, f: DifferentiableFunction, a: float):
        self._freeze(_f=f, _a=float(a))

    def value(self, x: float) -> float:
        return self._a * self._f.value(x)

    def derivative(self, x: float) -> float:
        return self._a * self._f.derivative(x)


class Sum(DifferentiableFunction):
    """The function ``f(x) + g(x)``."""

    __slots__ = ("_f", "_g")

    def __init__(self, f: DifferentiableFunction, g: DifferentiableFunction):
        self._freeze(_f=f, _g=g)

    def value(self, x: float) -> float:
        return self._f.value(x) + self._g.value(x)

    def derivative(self, x: float) -> float:
        return self._f.derivative(x) + self._g.derivative(x)


class Difference(DifferentiableFunction):
    """The function ``f(x) - g(x)``."""

    __slots__ = ("_f", "_g")

    def __init__(self, f: DifferentiableFunction, g: DifferentiableFunction):
        self._freeze(_f=f, _g=g)

    def value(self, x: float) -> float:
        return self._f.value(x) - self._g.value(x)

    def derivative(self, x: float) -> float:
        return self._f.derivative(x) - self._g.derivative(x)


class Product(DifferentiableFunction):
    """The function ``f(x) * g(x)``, differentiated with the product rule."""

    __slots__ = ("_f", "_g")

    def __init__(self, f: DifferentiableFunction, g: DifferentiableFunction):
        self._freeze(_f=f, _g=g)

    def value(self, x: float) -> float:
        return self._f.value(x) * self._g.value(x)

    def derivative(self, x: float) -> float:
        return self._f.derivative(x) * self._g.value(x) + self._f.value(x) * self._g.derivative(x)


class Quotient(DifferentiableFunction):
    """The function ``f(x) / g(x)``, differentiated with the quotient rule.

    Both the value and the derivative are ``nan`` wherever ``g(x)`` (for the
    derivative, ``g(x)**2``) is zero.
    """

    __slots__ = ("_f", "_g")

    def __init__(self, f: DifferentiableFunction, g: DifferentiableFunction):
        self._freeze(_f=f, _g=g)

    def value(self, x: float) -> float:
        denominator = self._g.value(x)
        if denominator == 0:
            return math.nan
        return self._f.value(x) / denominator

    def derivative(self, x: float) -> float:
        g = self._g.value(x)
        # g**2 can underflow to zero even when g does not
        denominator = g * g
        if denominator == 0:
            return math.nan
        return (self._f.derivative(x) * g - self._f.value(x) * self._g.derivative(x)) / denominator


class Composition(DifferentiableFunction):
    """The function ``f(g(x))``, differentiated with the chain rule."""

    __slots__ = ("_f", "_g")

    def __init__(self, f: DifferentiableFunction, g: DifferentiableFunction):
        self._freeze(_f=f, _g=g)

    def value(self, x: float) -> float:
        return self._f.value(self._g.value(x))

    def derivative(self, x: float) -> float:
        return self._f.derivative(self._g.value(x)) * self._g.derivative(x)


class ConstantPower(DifferentiableFunction):
    """The function ``f(x)**r`` for a real constant exponent ``r``.

    By default the derivative is ``r * f(x)**(r - 1)``, i.e. the power rule
    with ``f(x)`` itself taken as the independent variable. This equals the
    true derivative only when ``f`` is the identity. With ``chain=True`` the
    result is multiplied by ``f'(x)``, which gives the derivative of
    ``f(x)**r`` with respect to ``x`` for any ``f``.

    Attributes:
        exponent: The constant exponent ``r``.
        chain: Whether the chain rule is applied to the derivative.
    """

    __slots__ = ("_f", "exponent", "chain")

    def __init__(self, f: DifferentiableFunction, r: float, *, chain: bool = False):
        self._freeze(_f=f, exponent=float(r), chain=bool(chain))

    def value(self, x: float) -> float:
        return _pow(self._f.value(x), self.exponent)

    def derivative(self, x: float) -> float:
        outer = self.exponent * _pow(self._f.value(x), self.exponent - 1.0)
        if self.chain:
            return outer * self._f.derivative(x)
        return outer


class FunctionPower(DifferentiableFunction):
    """The function ``f(x)**g(x)``, differentiated logarithmically.

    The derivative is only defined for a positive base; it is ``nan``
    wherever ``f(x) <= 0``.
    """

    __slots__ = ("_f", "_g")

    def __init__(self, f: DifferentiableFunction, g: DifferentiableFunction):
        self._freeze(_f=f, _g=g)

    def value(self, x: float) -> float:
        return _pow(self._f.value(x), self._g.value(x))

    def derivative(self, x: float) -> float:
        f = self._f.value(x)
        if f <= 0:
            return math.nan
        g = self._g.value(x)
        return _pow(f, g) * (self._f.derivative(x) * g / f + self._g.derivative(x) * math.log(f))


def scale(f: DifferentiableFunction, a: float) -> DifferentiableFunction:
    """Returns the scalar multiple ``a * f``.

    Raises:
        TypeError: If ``a`` is not a real number.
    """
    if not isinstance(a, numbers.Real):
        raise TypeError(f"scale() expects a real factor; got {type(a).__name__}.")
    return ScalarMultiple(as_function(f), a)


def negate(f: DifferentiableFunction) -> DifferentiableFunction:
    """Returns ``-f``, built as the scalar multiple ``-1 * f``."""
    return scale(f, -1)


def add(f, g) -> DifferentiableFunction:
    """Returns ``f + g``. Real numbers are promoted to constants."""
    return Sum(as_function(f), as_function(g))


def subtract(f, g) -> DifferentiableFunction:
    """Returns ``f - g``. Real numbers are promoted to constants."""
    return Difference(as_function(f), as_function(g))


def multiply(f, g) -> DifferentiableFunction:
    """Returns the pointwise product ``f * g``. Real numbers are promoted to constants."""
    return Product(as_function(f), as_function(g))


def divide(f, g) -> DifferentiableFunction:
    """Returns the pointwise quotient ``f / g``. Real numbers are promoted to constants."""
    return Quotient(as_function(f), as_function(g))


def compose(f, g) -> DifferentiableFunction:
    """Returns the composition ``f(g(x))``."""
    return Composition(as_function(f), as_function(g))


def power(f, exponent, *, chain: bool = False) -> DifferentiableFunction:
    """Returns ``f`` raised to ``exponent``.

    Args:
        f: The base function (or a real number, promoted to a constant).
        exponent: A real number for a :class:`ConstantPower`, or a
            differentiable function for a :class:`FunctionPower`.
        chain: Only used with a real exponent. If False (default), the
            derivative is ``r * f(x)**(r - 1)``; if True it is additionally
            multiplied by ``f'(x)``.

    Returns:
        The power node.

    Raises:
        ValueError: If ``chain`` is requested with a function exponent,
            which is always differentiated with the full rule.
    """
    base = as_function(f)
    if isinstance(exponent, numbers.Real):
        return ConstantPower(base, exponent, chain=chain)
    if chain:
        raise ValueError("chain=True only applies to a constant exponent.")
    return FunctionPower(base, as_function(exponent))
