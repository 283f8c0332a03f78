"""Utility functions for ExtremaKit package."""

from .validate import (
    is_finite_and_differentiable,
    validate_interval,
    validate_samples,
    validate_tabulated_xy,
)

__all__ = [
    "is_finite_and_differentiable",
    "validate_interval",
    "validate_samples",
    "validate_tabulated_xy",
]
