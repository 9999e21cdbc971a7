"""
Control point pairing and the per-tick oscillation rule.

Every anchor drives the two control points adjacent to it. Moving both by the
same angle keeps them on one line through the anchor, so the joint between
two curves stays smooth while the blob wobbles.
"""
from __future__ import annotations

import logging
from typing import Sequence

import numpy as np

from bezierblob.model.geometry_primitives import AnchorPoint, ControlPoint, Curve
from bezierblob.model.math_utils import clamp, random_range

logger = logging.getLogger(__name__)

CLOCKWISE = 1
COUNTER_CLOCKWISE = -1


def pair_control_points(
    anchors: Sequence[AnchorPoint],
    curves: Sequence[Curve],
    rng: np.random.Generator
) -> None:
    """
    Cache the adjacent control points on every anchor.

    Anchor `i` gets the second control point of curve `i - 1` (wrapping)
    as `incoming` and the first control point of curve `i` as `outgoing`.
    Each starts sweeping clockwise at a random speed in [0, 1).

    Raises:
        ValueError: If anchors and curves differ in number or an anchor was
            already paired.
    """
    if len(anchors) != len(curves):
        raise ValueError("Every anchor needs exactly one outgoing curve.")

    n = len(anchors)
    for i, anchor in enumerate(anchors):
        if anchor.incoming is not None or anchor.outgoing is not None:
            raise ValueError(f"Anchor {i} is already paired.")
        prev_curve = curves[(i - 1) % n]
        next_curve = curves[i]
        anchor.incoming = prev_curve.second
        anchor.outgoing = next_curve.first
        anchor.direction = CLOCKWISE
        anchor.speed = random_range(rng, 0.0, 1.0)


def oscillate(
    anchors: Sequence[AnchorPoint],
    control_points: Sequence[ControlPoint],
    handle_length: float,
    *,
    max_sweep: float,
    step: float,
    rng: np.random.Generator
) -> int:
    """
    Advance every anchor's paired control points by one animation tick.

    Both control points of an anchor move by ``speed * step * direction``.
    Once either reaches ``base_angle + max_sweep`` the anchor turns back with
    a fresh random speed, and symmetrically at ``base_angle - max_sweep``.
    The angle is clamped to the bound it crossed, then both positions are
    re-derived from the anchor.

    Args:
        anchors: Paired anchor points.
        control_points: The control point arena.
        handle_length: Base radius times kappa.
        max_sweep: Half-width of the arc in radians. Values <= 0 freeze
            the motion.
        step: Angle scale per tick.
        rng: Source of the new speeds.

    Returns:
        The number of anchors whose direction flipped during this tick.
    """
    if max_sweep <= 0.0:
        return 0

    flips = 0
    for i, anchor in enumerate(anchors):
        pair = [control_points[j] for j in anchor.paired]

        delta = anchor.speed * step * anchor.direction
        for cp in pair:
            cp.current_angle += delta

        if any(cp.current_angle >= cp.base_angle + max_sweep for cp in pair):
            anchor.direction = COUNTER_CLOCKWISE
            anchor.speed = random_range(rng, 0.0, 1.0)
            for cp in pair:
                cp.current_angle = clamp(cp.current_angle, cp.base_angle - max_sweep, cp.base_angle + max_sweep)
            flips += 1
            logger.debug("Anchor %d reached +sweep, reversing", i)
        elif any(cp.current_angle <= cp.base_angle - max_sweep for cp in pair):
            anchor.direction = CLOCKWISE
            anchor.speed = random_range(rng, 0.0, 1.0)
            for cp in pair:
                cp.current_angle = clamp(cp.current_angle, cp.base_angle - max_sweep, cp.base_angle + max_sweep)
            flips += 1
            logger.debug("Anchor %d reached -sweep, reversing", i)

        for cp in pair:
            cp.place(anchor, handle_length)

    return flips
