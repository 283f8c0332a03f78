"""Algebra of continuously differentiable scalar functions."""

from extremakit.functions.base import DifferentiableFunction, as_function
from extremakit.functions.combinators import (
    add,
    compose,
    divide,
    multiply,
    negate,
    power,
    scale,
    subtract,
)
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

__all__ = [
    "DifferentiableFunction",
    "as_function",
    "add",
    "compose",
    "divide",
    "multiply",
    "negate",
    "power",
    "scale",
    "subtract",
    "Constant",
    "Cos",
    "Exp",
    "FunctionPair",
    "Identity",
    "Log",
    "Sin",
    "cos",
    "exp",
    "log",
    "sin",
    "x",
]
