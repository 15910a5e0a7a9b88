"""
Parametric 3D Curves
====================
Closed-form curves evaluated at a real parameter `t` (radians).

Classes:
    Curve: Abstract base class with the evaluation contract.
    Circle, Ellipse, Helix: The concrete curve kinds.

Radii are normalized at construction: a non-positive radius is silently
replaced by DEFAULT_RADIUS. This is permissive by intent and never raises.
The helix pitch is taken as given, so zero or negative pitch is allowed.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from enum import StrEnum
import logging
import math
from typing import TYPE_CHECKING

import numpy as np

from curves3d.config import DEFAULT_RADIUS
from curves3d.model.geometry_primitives import Vector3
from curves3d.model.geometry_utils import TWO_PI, parameter_grid, ellipse_to_polyline

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)


class CurveKind(StrEnum):
    """Tag identifying the concrete curve class."""
    CIRCLE = "circle"
    ELLIPSE = "ellipse"
    HELIX = "helix"


def normalize_radius(value: float, name: str = "radius") -> float:
    """
    Return `value` as a float, or DEFAULT_RADIUS if it is not positive.

    Args:
        value: The requested radius.
        name: Attribute name, used only for the log message.
    """
    value = float(value)
    if value > 0.0:
        return value
    logger.debug(f"Non-positive {name} {value} replaced with {DEFAULT_RADIUS}")
    return DEFAULT_RADIUS


class Curve(ABC):
    """
    Abstract base class for parametric 3D curves.
    """
    NAME: str = "Curve"
    kind: CurveKind

    @abstractmethod
    def position(self, t: float) -> Vector3:
        """
        Get the point on the curve.

        Args:
            t: Curve parameter in radians.

        Returns:
            The point at t.
        """
        pass

    @abstractmethod
    def tangent(self, t: float) -> Vector3:
        """
        Get the first derivative of the position with respect to t.

        Args:
            t: Curve parameter in radians.

        Returns:
            The derivative at t.
        """
        pass

    @abstractmethod
    def sample(self, t_start: float, t_end: float, n_points: int) -> npt.NDArray[np.float64]:
        """
        Positions at `n_points` evenly spaced parameters.

        Returns:
            An array of shape (n_points, 3).
        """
        pass

    def plot(self, t_start: float = 0.0, t_end: float = 2 * TWO_PI, n_points: int = 500) -> None:
        """
        Plot the curve in 3D.
        """
        import matplotlib.pyplot as plt

        points = self.sample(t_start, t_end, n_points)

        plt.rcParams["figure.constrained_layout.use"] = True
        fig = plt.figure(figsize=(7, 5))
        ax = fig.add_subplot(projection="3d")

        ax.plot(points[:, 0], points[:, 1], points[:, 2], 'r', lw=2)

        ax.set_title(f"{self.NAME}, t from {t_start:.3g} to {t_end:.3g}")
        ax.set_xlabel("x")
        ax.set_ylabel("y")
        ax.set_zlabel("z")
        plt.show()


class Circle(Curve):
    """
    Circle of a given radius in the XY plane, centred at the origin.
    """
    NAME = "Circle"
    kind = CurveKind.CIRCLE

    def __init__(self, radius: float) -> None:
        self._radius = normalize_radius(radius)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(radius={self._radius})"

    @property
    def radius(self) -> float:
        return self._radius

    def position(self, t: float) -> Vector3:
        r = self._radius
        return Vector3(r * math.cos(t), r * math.sin(t), 0.0)

    def tangent(self, t: float) -> Vector3:
        r = self._radius
        return Vector3(-r * math.sin(t), r * math.cos(t), 0.0)

    def sample(self, t_start: float, t_end: float, n_points: int) -> npt.NDArray[np.float64]:
        t = parameter_grid(t_start, t_end, n_points)
        return ellipse_to_polyline(self._radius, self._radius, t)


class Ellipse(Curve):
    """
    Axis-aligned ellipse in the XY plane, centred at the origin.
    Each semi-axis is normalized independently.
    """
    NAME = "Ellipse"
    kind = CurveKind.ELLIPSE

    def __init__(self, radius_x: float, radius_y: float) -> None:
        self._radius_x = normalize_radius(radius_x, "radius_x")
        self._radius_y = normalize_radius(radius_y, "radius_y")

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(radius_x={self._radius_x}, radius_y={self._radius_y})"

    @property
    def radius_x(self) -> float:
        return self._radius_x

    @property
    def radius_y(self) -> float:
        return self._radius_y

    def position(self, t: float) -> Vector3:
        return Vector3(self._radius_x * math.cos(t), self._radius_y * math.sin(t), 0.0)

    def tangent(self, t: float) -> Vector3:
        return Vector3(-self._radius_x * math.sin(t), self._radius_y * math.cos(t), 0.0)

    def sample(self, t_start: float, t_end: float, n_points: int) -> npt.NDArray[np.float64]:
        t = parameter_grid(t_start, t_end, n_points)
        return ellipse_to_polyline(self._radius_x, self._radius_y, t)


class Helix(Curve):
    """
    Circular helix around the Z axis.

    One full turn (t -> t + 2*pi) rises by `pitch`.
    """
    NAME = "Helix"
    kind = CurveKind.HELIX

    def __init__(self, radius: float, pitch: float) -> None:
        self._radius = normalize_radius(radius)
        self._pitch = float(pitch)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(radius={self._radius}, pitch={self._pitch})"

    @property
    def radius(self) -> float:
        return self._radius

    @property
    def pitch(self) -> float:
        return self._pitch

    def position(self, t: float) -> Vector3:
        r = self._radius
        return Vector3(r * math.cos(t), r * math.sin(t), self._pitch * t / TWO_PI)

    def tangent(self, t: float) -> Vector3:
        r = self._radius
        return Vector3(-r * math.sin(t), r * math.cos(t), self._pitch / TWO_PI)

    def sample(self, t_start: float, t_end: float, n_points: int) -> npt.NDArray[np.float64]:
        t = parameter_grid(t_start, t_end, n_points)
        return ellipse_to_polyline(self._radius, self._radius, t, z=self._pitch * t / TWO_PI)


if __name__ == "__main__":
    curves = [
        Circle(3.0),
        Ellipse(4.0, 2.0),
        Helix(2.0, 1.5),
    ]

    for curve in curves:
        curve.plot()
