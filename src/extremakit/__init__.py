"""Provides all extremakit methods."""

from importlib.metadata import PackageNotFoundError, version

from extremakit.extrema.config import ExtremaConfig
from extremakit.extrema.extremum import Extremum, ExtremumKind
from extremakit.extrema.finder import ExtremaFinder, find_all, find_maxima, find_minima
from extremakit.extrema_kit import ExtremaKit
from extremakit.finite.numerical_derivative import NumericalDerivative
from extremakit.functions.base import DifferentiableFunction

try:
    __version__ = version("extremakit")
except PackageNotFoundError:
    pass

ExtremaKit.__module__ = "extremakit"

__all__ = [
    "DifferentiableFunction",
    "ExtremaConfig",
    "ExtremaFinder",
    "ExtremaKit",
    "Extremum",
    "ExtremumKind",
    "NumericalDerivative",
    "find_all",
    "find_maxima",
    "find_minima",
]
