"""Shared fixtures for the curves3d tests."""
import matplotlib

matplotlib.use("Agg")

import pytest

from curves3d.model.curves import Circle, Ellipse, Helix


@pytest.fixture
def mixed_curves():
    """Circles of radius 3, 1, 2 interleaved with other kinds."""
    return [Circle(3.0), Ellipse(1.0, 2.0), Circle(1.0), Helix(2.0, 1.0), Circle(2.0)]


@pytest.fixture
def no_circles():
    return [Ellipse(1.0, 2.0), Helix(2.0, 1.0), Ellipse(5.0, 0.5)]
