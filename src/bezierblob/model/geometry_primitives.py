"""
Geometric Primitives of the blob outline.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional


@dataclass
class AnchorPoint:
    """
    A point lying on the base circle that the outline passes through.

    `incoming` and `outgoing` are arena indices of the paired control points:
    the second control point of the curve ending here and the first control
    point of the curve starting here. They are assigned once by
    `pair_control_points` and never change afterwards.
    """
    x: float
    y: float
    angle: float  # placement angle on the base circle
    incoming: Optional[int] = None
    outgoing: Optional[int] = None
    direction: int = 1  # +1 clockwise, -1 counter-clockwise
    speed: float = 0.0

    @property
    def paired(self) -> tuple[int, int]:
        if self.incoming is None or self.outgoing is None:
            raise RuntimeError("Anchor point has not been paired yet.")
        return self.incoming, self.outgoing


@dataclass
class ControlPoint:
    """
    An off-curve point that bends a cubic curve.

    Its position follows from the owning anchor:
    ``owner + handle_length * (cos(current_angle), sin(current_angle))``.
    A drag writes the position directly and marks the point `detached`
    until the oscillator derives it again.
    """
    x: float
    y: float
    base_angle: float
    current_angle: float
    owner: int  # index of the owning anchor point
    detached: bool = False

    @property
    def offset(self) -> float:
        """Current angular deviation from the undeformed circle."""
        return self.current_angle - self.base_angle

    def place(self, anchor: AnchorPoint, handle_length: float) -> None:
        """Re-derive the position from the owning anchor and the current angle."""
        self.x = anchor.x + math.cos(self.current_angle) * handle_length
        self.y = anchor.y + math.sin(self.current_angle) * handle_length
        self.detached = False

    def move_to(self, x: float, y: float) -> None:
        self.x = x
        self.y = y
        self.detached = True


@dataclass(frozen=True)
class Curve:
    """
    One cubic Bezier segment of the closed outline.

    Holds indices only: `start` and `end` into the anchor list,
    `first` and `second` into the control point arena.
    """
    start: int
    first: int
    second: int
    end: int

    @property
    def control_slots(self) -> tuple[int, int]:
        return self.first, self.second
