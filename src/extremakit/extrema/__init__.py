"""Extrema search on a 1D interval."""

from extremakit.extrema.config import ExtremaConfig
from extremakit.extrema.extremum import Extremum, ExtremumKind
from extremakit.extrema.finder import ExtremaFinder, find_all, find_maxima, find_minima

__all__ = [
    "ExtremaConfig",
    "ExtremaFinder",
    "Extremum",
    "ExtremumKind",
    "find_all",
    "find_maxima",
    "find_minima",
]
