"""
Report Formatting
Turns pipeline results into the text lines written by the entry point.
"""
from __future__ import annotations

from typing import Iterator, Sequence

from curves3d.model.curves import Circle
from curves3d.pipeline import CurveSample, PipelineResult


def format_sample(sample: CurveSample) -> str:
    return f"Point: {sample.position} | Derivative: {sample.tangent}"


def format_radius(circle: Circle) -> str:
    return f"Radius: {circle.radius}"


def report_lines(
    samples: Sequence[CurveSample],
    circles: Sequence[Circle],
    radius_sum: float,
    parameter_label: str
) -> Iterator[str]:
    """
    Yield the report: every evaluated curve, the sorted circles and the radius sum.

    Args:
        samples: Evaluated curves, in collection order.
        circles: Circles, already sorted.
        radius_sum: Sum of the circle radii.
        parameter_label: How the evaluation parameter is shown in the header.
    """
    yield f"Curves at t = {parameter_label}:"
    for sample in samples:
        yield format_sample(sample)

    yield ""
    yield "Sorted circles by radius:"
    for circle in circles:
        yield format_radius(circle)

    yield ""
    yield f"Total sum of radii: {radius_sum}"


def format_report(result: PipelineResult, parameter_label: str) -> str:
    return "\n".join(report_lines(result.samples, result.circles, result.radius_sum, parameter_label))
