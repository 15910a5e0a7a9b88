"""
Curve Collection Pipeline
=========================
Builds a mixed collection of curves and queries it.

Steps (in the order the demo runs them):
1. populate: random curves of every kind, insertion order kept.
2. evaluate: position and tangent of each curve at one parameter.
3. filter_circles: the circles of the collection, order kept.
4. sort_by_radius: in-place, stable ascending sort.
5. total_radius: sum of the radii.

The filtered list holds references to the same curve objects as the mixed
collection. Nothing is copied and curves are never mutated.
"""
from __future__ import annotations

from dataclasses import dataclass
import logging
import math
from typing import Optional, Sequence, cast

import numpy as np

from curves3d.model.curves import Curve, CurveKind, Circle, Ellipse, Helix
from curves3d.model.geometry_primitives import Vector3

logger = logging.getLogger(__name__)

# Kinds drawn by populate(), each with the same probability
CURVE_KINDS: tuple[CurveKind, ...] = tuple(CurveKind)


@dataclass(frozen=True)
class CurveSample:
    """A curve evaluated at one parameter."""
    curve: Curve
    t: float
    position: Vector3
    tangent: Vector3


@dataclass
class PipelineResult:
    curves: list[Curve]
    samples: list[CurveSample]
    circles: list[Circle]
    radius_sum: float


def make_rng(seed: Optional[int] = None) -> np.random.Generator:
    """Random source for populate(); `None` seeds from OS entropy."""
    return np.random.default_rng(seed)


def random_curve(rng: np.random.Generator, low: float, high: float) -> Curve:
    """
    Draw one curve of a uniformly chosen kind.

    Every attribute (radius, semi-axis or pitch) is an independent uniform
    draw from [low, high).
    """
    kind = CURVE_KINDS[int(rng.integers(len(CURVE_KINDS)))]
    if kind is CurveKind.CIRCLE:
        return Circle(float(rng.uniform(low, high)))
    if kind is CurveKind.ELLIPSE:
        return Ellipse(float(rng.uniform(low, high)), float(rng.uniform(low, high)))
    return Helix(float(rng.uniform(low, high)), float(rng.uniform(low, high)))


def populate(
    n: int,
    rng: np.random.Generator,
    low: float = 1.0,
    high: float = 10.0
) -> list[Curve]:
    """
    Build `n` random curves.

    Args:
        n: Number of curves.
        rng: Random source.
        low: Inclusive lower bound of the attribute range.
        high: Exclusive upper bound of the attribute range.

    Returns:
        The curves in the order they were drawn.

    Raises:
        ValueError: If `n` is negative or the range is not a positive interval.
    """
    if n < 0:
        raise ValueError(f"Number of curves must be non-negative, got {n}")
    # also rejects NaN and infinite bounds
    if not (0.0 < low < high < math.inf):
        raise ValueError(f"Attribute range must satisfy 0 < low < high, got [{low}, {high})")

    curves = [random_curve(rng, low, high) for _ in range(n)]
    logger.info(f"Generated {len(curves)} curves.")
    logger.debug(f"Curves: {curves}")
    return curves


def evaluate(curves: Sequence[Curve], t: float) -> list[CurveSample]:
    """Position and tangent of every curve at `t`, in collection order."""
    return [CurveSample(curve, t, curve.position(t), curve.tangent(t)) for curve in curves]


def filter_by_kind(curves: Sequence[Curve], kind: CurveKind) -> list[Curve]:
    """
    References to the curves tagged with `kind`.

    Relative order of the input is preserved.
    """
    return [curve for curve in curves if curve.kind is kind]


def filter_circles(curves: Sequence[Curve]) -> list[Circle]:
    return cast(list[Circle], filter_by_kind(curves, CurveKind.CIRCLE))


def sort_by_radius(circles: list[Circle]) -> list[Circle]:
    """
    Sort circles in place by ascending radius.

    The sort is stable, so circles with equal radii keep their order.
    Returns the same list for chaining.
    """
    circles.sort(key=lambda circle: circle.radius)
    return circles


def total_radius(circles: Sequence[Circle]) -> float:
    # fsum is exactly rounded, so the result does not depend on order
    return math.fsum(circle.radius for circle in circles)


def run_pipeline(
    n: int,
    t: float,
    rng: np.random.Generator,
    low: float = 1.0,
    high: float = 10.0
) -> PipelineResult:
    """
    Run every step on a fresh random collection.

    Args:
        n: Number of curves to generate.
        t: Parameter at which the curves are evaluated.
        rng: Random source.
        low: Inclusive lower bound of the attribute range.
        high: Exclusive upper bound of the attribute range.
    """
    curves = populate(n, rng, low, high)
    samples = evaluate(curves, t)
    circles = sort_by_radius(filter_circles(curves))
    radius_sum = total_radius(circles)
    logger.info(f"{len(circles)} of {len(curves)} curves are circles, radius sum {radius_sum}.")
    return PipelineResult(curves=curves, samples=samples, circles=circles, radius_sum=radius_sum)
