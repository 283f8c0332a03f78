"""Finite-difference derivative estimation."""

from extremakit.finite.numerical_derivative import NumericalDerivative

__all__ = ["NumericalDerivative"]
