from __future__ import annotations

from typing import TYPE_CHECKING

from math import pi
import numpy as np

if TYPE_CHECKING:
    from numpy import typing as npt

TWO_PI = 2.0 * pi

def parameter_grid(
    t_start: float,
    t_end: float,
    n_points: int
) -> npt.NDArray[np.float64]:
    """
    Evenly spaced curve parameters, both ends included.

    Args:
        t_start: First parameter value (radians).
        t_end: Last parameter value (radians).
        n_points: Number of parameters, at least 2.

    Returns:
        An array of shape (n_points,).
    """
    if n_points < 2:
        raise ValueError(f"n_points must be at least 2, got {n_points}")
    return np.linspace(t_start, t_end, n_points)

def ellipse_to_polyline(
    radius_x: float,
    radius_y: float,
    t: npt.NDArray[np.float64],
    z: float | npt.NDArray[np.float64] = 0.0
) -> npt.NDArray[np.float64]:
    """
    Points of an axis-aligned ellipse centred at the origin.

    A circle is the case radius_x == radius_y, and a helix adds a
    parameter-dependent `z`.

    Args:
        radius_x: Semi-axis along X.
        radius_y: Semi-axis along Y.
        t: Curve parameters (radians).
        z: Height of each point, scalar or one value per parameter.

    Returns:
        An array of shape (n, 3) containing the (x, y, z) coordinates.
    """
    x = radius_x * np.cos(t)
    y = radius_y * np.sin(t)
    return np.c_[x, y, np.broadcast_to(z, x.shape)]
