"""Shared test fixtures for iconfield."""

import matplotlib

matplotlib.use("Agg")

import numpy as np
import pytest


@pytest.fixture
def rng():
    """Return a seeded random generator so layouts are reproducible."""
    return np.random.default_rng(1234)
