"""Pytest configuration file with shared sample fixtures."""

import numpy as np
import pytest

__all__ = ["sampled_sine"]


@pytest.fixture(scope="session")
def sampled_sine():
    """Return a callable building uniformly sampled ``sin(x + phase)`` over one period.

    The returned function has signature ``build(n, phase=0.0) -> (samples, x0, x1)``
    where the samples are taken at ``x0 + i * (x1 - x0) / n``.
    """
    def _build(n: int, phase: float = 0.0):
        x0, x1 = 0.0, 2 * np.pi
        xs = x0 + np.arange(n) * ((x1 - x0) / n)
        return np.sin(xs + phase), x0, x1
    return _build
