"""
Blob Shape (Data Model)
=======================
The single source of truth for the outline: anchors, the control point arena
and the curves that reference both by index.

Why is this file needed?
------------------------
1. Rendering reads the ordered curves from here.
2. The oscillator and drag edits write into the same control point objects,
   so a change through a curve is visible through its anchor and vice versa.
3. The cardinality (N anchors, 2N control points, N curves) is fixed at
   construction; nothing is added or removed at runtime.

Classes:
    BlobShape: Aggregate of anchors, control points and curves.
"""
from __future__ import annotations

import logging
import math
from typing import Optional, TYPE_CHECKING

import numpy as np

from bezierblob.model.geometry import BlobGeometry, build_geometry
from bezierblob.model.geometry_primitives import AnchorPoint, ControlPoint, Curve
from bezierblob.model.math_utils import circle_point_collision, cubic_bezier, polygon_area
from bezierblob.model.oscillator import oscillate, pair_control_points

if TYPE_CHECKING:
    import numpy.typing as npt
    from bezierblob.config import BlobConfig

logger = logging.getLogger(__name__)

Point2 = tuple[float, float]
PathSegment = tuple[Point2, Point2, Point2]  # control 1, control 2, end


class BlobShape:
    """
    The closed outline of N cubic curves.

    Pass an instance to the session and the renderer; both only ever mutate
    control point angles and positions, never the structure.
    """

    def __init__(self, geometry: BlobGeometry, rng: np.random.Generator) -> None:
        self._geometry = geometry
        pair_control_points(geometry.anchors, geometry.curves, rng)

    @classmethod
    def from_config(cls, config: BlobConfig, rng: np.random.Generator) -> BlobShape:
        geometry = build_geometry(config.point_count, config.base_radius)
        return cls(geometry, rng)

    # ---- structure ----

    @property
    def anchors(self) -> tuple[AnchorPoint, ...]:
        return tuple(self._geometry.anchors)

    @property
    def control_points(self) -> tuple[ControlPoint, ...]:
        return tuple(self._geometry.control_points)

    @property
    def curves(self) -> tuple[Curve, ...]:
        return tuple(self._geometry.curves)

    @property
    def point_count(self) -> int:
        return len(self._geometry.anchors)

    @property
    def base_radius(self) -> float:
        return self._geometry.base_radius

    @property
    def roundness(self) -> float:
        return self._geometry.roundness

    @property
    def handle_length(self) -> float:
        return self._geometry.handle_length

    def anchor(self, index: int) -> AnchorPoint:
        return self._geometry.anchors[index]

    def control_point(self, index: int) -> ControlPoint:
        return self._geometry.control_points[index]

    def paired_control_points(self, anchor_index: int) -> tuple[ControlPoint, ControlPoint]:
        incoming, outgoing = self.anchor(anchor_index).paired
        return self.control_point(incoming), self.control_point(outgoing)

    # ---- mutation ----

    def move_control_point(self, index: int, x: float, y: float) -> None:
        """
        Put a control point at (x, y) directly, bypassing its angle.

        The point stays detached from the derivation rule until the next
        oscillation tick re-derives it from its stored angle.
        """
        self.control_point(index).move_to(x, y)

    def oscillate(self, *, max_sweep: float, step: float, rng: np.random.Generator) -> int:
        """Apply one oscillation tick. Returns the number of direction flips."""
        return oscillate(
            self._geometry.anchors,
            self._geometry.control_points,
            self.handle_length,
            max_sweep=max_sweep,
            step=step,
            rng=rng,
        )

    # ---- queries ----

    def derived_position(self, index: int) -> Point2:
        """Where control point `index` belongs according to its current angle."""
        cp = self.control_point(index)
        owner = self.anchor(cp.owner)
        return (
            owner.x + math.cos(cp.current_angle) * self.handle_length,
            owner.y + math.sin(cp.current_angle) * self.handle_length,
        )

    def is_consistent(self, atol: float = 1e-9) -> bool:
        """True if every control point not moved by a drag sits on its derived position."""
        for i, cp in enumerate(self._geometry.control_points):
            if cp.detached:
                continue
            x, y = self.derived_position(i)
            if abs(cp.x - x) > atol or abs(cp.y - y) > atol:
                return False
        return True

    def hit_test(self, x: float, y: float, pick_radius: float) -> Optional[int]:
        """
        Find the control point under the pointer.

        Scans the curves in order and, per curve, the first then the second
        control point.

        Args:
            x: Pointer X in shape coordinates (origin at the blob centre).
            y: Pointer Y in shape coordinates.
            pick_radius: Maximum accepted distance (inclusive).

        Returns:
            Arena index of the first control point within reach, or None.
        """
        for curve in self._geometry.curves:
            for index in curve.control_slots:
                cp = self.control_point(index)
                if circle_point_collision(x, y, cp.x, cp.y, pick_radius):
                    return index
        return None

    def anchor_positions(self) -> npt.NDArray[np.float64]:
        return np.array([(a.x, a.y) for a in self._geometry.anchors], dtype=np.float64)

    def control_positions(self) -> npt.NDArray[np.float64]:
        return np.array([(c.x, c.y) for c in self._geometry.control_points], dtype=np.float64)

    def path_segments(self) -> tuple[Point2, list[PathSegment]]:
        """
        Drawing commands of the closed outline.

        Returns:
            The start point (anchor of curve 0) and one
            (control 1, control 2, end) triple per curve, in curve order.
        """
        first = self.anchor(self._geometry.curves[0].start)
        segments: list[PathSegment] = []
        for curve in self._geometry.curves:
            c1 = self.control_point(curve.first)
            c2 = self.control_point(curve.second)
            end = self.anchor(curve.end)
            segments.append(((c1.x, c1.y), (c2.x, c2.y), (end.x, end.y)))
        return (first.x, first.y), segments

    def connector_lines(self) -> list[tuple[Point2, Point2]]:
        """Straight lines from every curve's anchors to their adjacent control points."""
        lines: list[tuple[Point2, Point2]] = []
        for curve in self._geometry.curves:
            start, c1 = self.anchor(curve.start), self.control_point(curve.first)
            end, c2 = self.anchor(curve.end), self.control_point(curve.second)
            lines.append(((start.x, start.y), (c1.x, c1.y)))
            lines.append(((end.x, end.y), (c2.x, c2.y)))
        return lines

    def sample_outline(self, samples_per_curve: int = 16) -> npt.NDArray[np.float64]:
        """
        Discretize the closed outline into an (N * samples_per_curve, 2) ring.

        The end point of each curve is omitted because it is the start of
        the next one.
        """
        if samples_per_curve < 1:
            raise ValueError("samples_per_curve must be >= 1")
        t = np.linspace(0.0, 1.0, samples_per_curve, endpoint=False)
        parts = []
        for curve in self._geometry.curves:
            p0, c1, c2, p3 = (
                self.anchor(curve.start), self.control_point(curve.first),
                self.control_point(curve.second), self.anchor(curve.end),
            )
            parts.append(cubic_bezier((p0.x, p0.y), (c1.x, c1.y), (c2.x, c2.y), (p3.x, p3.y), t))
        return np.vstack(parts)

    def outline_area(self, samples_per_curve: int = 32) -> float:
        return polygon_area(self.sample_outline(samples_per_curve))
