"""
Blob Geometry Builder
=====================
Builds the undeformed blob: N anchor points evenly spaced on a circle and one
cubic Bezier curve between every neighbouring pair.

Why is this file needed?
------------------------
The control points of a circle approximated by cubic curves sit on the
tangent of their anchor, at a fixed fraction (kappa) of the radius. This
module is the only place that knows how kappa and the tangent angles are
computed; everything else re-derives positions through
`ControlPoint.place()`.

Functions:
    roundness_constant: kappa scaled for the number of anchors.
    build_geometry: Anchors, control point arena and curves.
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Optional

import numpy as np

from bezierblob.config import InvalidConfigurationError, check_point_count
from bezierblob.model.geometry_primitives import AnchorPoint, ControlPoint, Curve

logger = logging.getLogger(__name__)

# Kappa for four curves: distance of the control points from their anchor
# as a fraction of the radius.
KAPPA_QUARTER: float = 4.0 * (math.sqrt(2.0) - 1.0) / 3.0

# Start at the top and populate clockwise (y grows downwards on screen).
START_ANGLE: float = -math.pi / 2


def roundness_constant(point_count: int) -> float:
    """
    Kappa for `point_count` curves.

    Doubling the number of anchors halves the angular spacing and,
    approximately, the needed control point distance.
    """
    point_count = check_point_count(point_count)
    return KAPPA_QUARTER * 4.0 / point_count


@dataclass
class BlobGeometry:
    """Everything the builder produces, in construction order."""
    anchors: list[AnchorPoint]
    control_points: list[ControlPoint]
    curves: list[Curve]
    base_radius: float
    roundness: float

    @property
    def handle_length(self) -> float:
        return self.base_radius * self.roundness


def build_geometry(
    point_count: int,
    base_radius: float,
    roundness: Optional[float] = None
) -> BlobGeometry:
    """
    Construct anchors, control points and curves of the undeformed blob.

    Curve `i` joins anchor `i` to anchor `(i + 1) % N`. Its first control
    point belongs to anchor `i` and points along that anchor's clockwise
    tangent; its second control point belongs to anchor `i + 1` and points
    back along that anchor's tangent.

    Args:
        point_count: Number of anchors (and curves), at least 3.
        base_radius: Radius of the base circle, positive.
        roundness: Override for kappa. Defaults to `roundness_constant()`.

    Returns:
        A fully populated `BlobGeometry`. Control point `2*i` is the first
        and `2*i + 1` the second control point of curve `i`.

    Raises:
        InvalidConfigurationError: If any of the inputs is invalid. Nothing
            is constructed in that case.
    """
    point_count = check_point_count(point_count)
    k = roundness_constant(point_count) if roundness is None else roundness
    if not math.isfinite(base_radius) or base_radius <= 0.0:
        raise InvalidConfigurationError(f"base_radius must be > 0, got {base_radius}")
    if not math.isfinite(k) or k <= 0.0:
        raise InvalidConfigurationError(f"roundness must be > 0, got {k}")

    increment = 2.0 * math.pi / point_count
    offsets = np.arange(point_count) * increment
    angles = START_ANGLE + offsets

    anchors = [
        AnchorPoint(x=float(base_radius * np.cos(a)), y=float(base_radius * np.sin(a)), angle=float(a))
        for a in angles
    ]

    handle_length = base_radius * k
    control_points: list[ControlPoint] = []
    curves: list[Curve] = []
    for i in range(point_count):
        next_i = (i + 1) % point_count

        # The tangent of anchor i is its offset from the top; the second
        # handle points back along the tangent of the next anchor.
        first_angle = float(offsets[i])
        second_angle = float(offsets[next_i]) - math.pi

        first = ControlPoint(x=0.0, y=0.0, base_angle=first_angle, current_angle=first_angle, owner=i)
        second = ControlPoint(x=0.0, y=0.0, base_angle=second_angle, current_angle=second_angle, owner=next_i)
        first.place(anchors[i], handle_length)
        second.place(anchors[next_i], handle_length)

        first_index = len(control_points)
        control_points.extend([first, second])
        curves.append(Curve(start=i, first=first_index, second=first_index + 1, end=next_i))

    logger.info(
        "Built blob geometry: %d anchors, radius %.1f, kappa %.4f",
        point_count, base_radius, k
    )
    return BlobGeometry(
        anchors=anchors,
        control_points=control_points,
        curves=curves,
        base_radius=float(base_radius),
        roundness=k,
    )
