"""Parametric 3D curves and queries over mixed curve collections."""
from curves3d.model.geometry_primitives import Vector3
from curves3d.model.curves import Curve, CurveKind, Circle, Ellipse, Helix

__all__ = [
    'Vector3',
    'Curve',
    'CurveKind',
    'Circle',
    'Ellipse',
    'Helix',
]
