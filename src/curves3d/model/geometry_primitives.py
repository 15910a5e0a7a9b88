"""
Geometric Primitives for curve evaluation.
"""
from __future__ import annotations
from dataclasses import dataclass


@dataclass(frozen=True)
class Vector3:
    """
    An immutable vector in 3D space.
    Used both for points on a curve and for their derivatives.
    """
    x: float
    y: float
    z: float = 0.0

    def __str__(self) -> str:
        return f"({self.x}, {self.y}, {self.z})"
