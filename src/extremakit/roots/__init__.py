"""Root finding used to locate critical points."""

from extremakit.roots.bracketing import zero_crossing_intervals
from extremakit.roots.newton import RootResult, robust_newton_raphson

__all__ = ["RootResult", "robust_newton_raphson", "zero_crossing_intervals"]
