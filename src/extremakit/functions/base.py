"""Provides the DifferentiableFunction base class.

A :class:`DifferentiableFunction` is an immutable node of an expression tree
that can evaluate both its value and its first derivative at a point.
Primitive functions implement both directly; compound functions are built
from primitives with the usual Python operators, and the derivative of the
result follows from the calculus rule attached to each operator.

Examples:
--------
>>> import math
>>> from extremakit.functions import cos, sin, x
>>> f = sin * cos + 2 * x
>>> round(f.value(0.1), 12) == round(math.sin(0.1) * math.cos(0.1) + 0.2, 12)
True
>>> g = sin[cos]  # composition: sin(cos(x))
>>> round(g.derivative(0.3), 12)
-0.170613876135
"""

from __future__ import annotations

import numbers
from abc import ABC, abstractmethod

__all__ = [
    "DifferentiableFunction",
    "as_function",
]


class DifferentiableFunction(ABC):
    """Continuously differentiable scalar function of one real variable.

    Subclasses implement :meth:`value` and :meth:`derivative`. Instances are
    immutable once constructed: operands are stored with :meth:`_freeze`
    and any later attribute assignment raises ``AttributeError``.

    Supported operators (``f`` and ``g`` are functions, ``a`` and ``r`` are
    real numbers):

    * ``a * f``, ``f * a``: scalar multiple.
    * ``-f``: negation.
    * ``f + g``, ``f - g``, ``f * g``, ``f / g``: pointwise arithmetic.
      Plain numbers are promoted to constants.
    * ``f[g]``: composition ``f(g(x))``.
    * ``f ** r``: power with a constant exponent.
    * ``f ** g``: power with a function exponent.
    * ``f(x)``: shorthand for ``f.value(x)``.
    """

    __slots__ = ()

    # numpy scalars defer to the reflected operators below
    __array_ufunc__ = None

    @abstractmethod
    def value(self, x: float) -> float:
        """Returns the value of the function at ``x``."""

    @abstractmethod
    def derivative(self, x: float) -> float:
        """Returns the first derivative of the function at ``x``."""

    def __call__(self, x: float) -> float:
        return self.value(x)

    def _freeze(self, **attributes) -> None:
        for name, attribute in attributes.items():
            object.__setattr__(self, name, attribute)

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable.")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} is immutable.")

    def __neg__(self) -> DifferentiableFunction:
        from extremakit.functions.combinators import negate

        return negate(self)

    def __add__(self, other):
        from extremakit.functions.combinators import add

        if not _is_operand(other):
            return NotImplemented
        return add(self, other)

    def __radd__(self, other):
        from extremakit.functions.combinators import add

        if not _is_operand(other):
            return NotImplemented
        return add(other, self)

    def __sub__(self, other):
        from extremakit.functions.combinators import subtract

        if not _is_operand(other):
            return NotImplemented
        return subtract(self, other)

    def __rsub__(self, other):
        from extremakit.functions.combinators import subtract

        if not _is_operand(other):
            return NotImplemented
        return subtract(other, self)

    def __mul__(self, other):
        from extremakit.functions.combinators import multiply, scale

        if isinstance(other, numbers.Real):
            return scale(self, other)
        if isinstance(other, DifferentiableFunction):
            return multiply(self, other)
        return NotImplemented

    def __rmul__(self, other):
        from extremakit.functions.combinators import scale

        if isinstance(other, numbers.Real):
            return scale(self, other)
        return NotImplemented

    def __truediv__(self, other):
        from extremakit.functions.combinators import divide

        if not _is_operand(other):
            return NotImplemented
        return divide(self, other)

    def __rtruediv__(self, other):
        from extremakit.functions.combinators import divide

        if not _is_operand(other):
            return NotImplemented
        return divide(other, self)

    def __pow__(self, other):
        from extremakit.functions.combinators import power

        if not _is_operand(other):
            return NotImplemented
        return power(self, other)

    def __rpow__(self, other):
        from extremakit.functions.combinators import power

        if not isinstance(other, numbers.Real):
            return NotImplemented
        return power(as_function(other), self)

    def __getitem__(self, inner: DifferentiableFunction) -> DifferentiableFunction:
        from extremakit.functions.combinators import compose

        return compose(self, inner)


def _is_operand(obj) -> bool:
    return isinstance(obj, (DifferentiableFunction, numbers.Real))


def as_function(obj) -> DifferentiableFunction:
    """Returns ``obj`` as a :class:`DifferentiableFunction`.

    Real numbers are promoted to :class:`~extremakit.functions.primitives.Constant`.

    Args:
        obj: A differentiable function or a real number.

    Returns:
        The function itself, or a constant function.

    Raises:
        TypeError: If ``obj`` is neither a function nor a real number.
    """
    from extremakit.functions.primitives import Constant

    if isinstance(obj, DifferentiableFunction):
        return obj
    if isinstance(obj, numbers.Real):
        return Constant(obj)
    raise TypeError(
        "Expected a DifferentiableFunction or a real number; "
        f"got {type(obj).__name__}."
    )
