"""
Session State (Data Model)
==========================
This module defines the central data structure for the running application.

Why is this file needed?
------------------------
1. State Management: It holds the shape, the display toggles, the rotation
   and the captured drag target in one place (one session per window).
2. Frame Loop: `tick()` is the single update step the host calls once per
   frame; input handlers call the `pointer_*` and `apply()` methods between
   ticks on the same thread.
3. Decoupling: Views read from this object; they never touch the model
   structures directly.

Classes:
    Action: Named toggle actions produced by the keyboard.
    BlobSession: The main container class.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

import numpy as np

from bezierblob.config import BlobConfig
from bezierblob.model.math_utils import rotate_to
from bezierblob.model.shape import BlobShape

logger = logging.getLogger(__name__)


class Action(Enum):
    """Toggles the user can trigger."""
    TOGGLE_OVERLAYS = "overlays"
    TOGGLE_ANIMATION = "animation"
    TOGGLE_FILL = "fill"
    TOGGLE_ROTATION = "rotation"


@dataclass
class BlobSession:
    """
    Everything that changes while the blob is on screen.

    Create it with `BlobSession.create(config)`; the constructor expects an
    already built shape and generator.
    """
    config: BlobConfig
    shape: BlobShape
    rng: np.random.Generator

    animating: bool = False
    rotating: bool = False
    fill: bool = False
    draw_markers: bool = True
    draw_connections: bool = True

    rotation: float = 0.0
    rotation_direction: int = 1
    captured: Optional[int] = None

    frame: int = field(default=0, init=False)

    @classmethod
    def create(cls, config: Optional[BlobConfig] = None) -> BlobSession:
        """
        Validate the configuration and build a fresh session.

        Raises:
            InvalidConfigurationError: Before anything is constructed.
        """
        config = (config or BlobConfig()).validate()
        rng = np.random.default_rng(config.seed)
        shape = BlobShape.from_config(config, rng)
        logger.info("Session created (seed=%s).", config.seed)
        return cls(config=config, shape=shape, rng=rng)

    def reset(self) -> None:
        """Rebuild the undeformed shape and restore the default toggles."""
        self.rng = np.random.default_rng(self.config.seed)
        self.shape = BlobShape.from_config(self.config, self.rng)
        self.animating = False
        self.rotating = False
        self.fill = False
        self.draw_markers = True
        self.draw_connections = True
        self.rotation = 0.0
        self.rotation_direction = 1
        self.captured = None
        self.frame = 0
        logger.info("Session has been reset.")

    # ---- frame loop ----

    def tick(self) -> None:
        """
        Advance one animation frame: rotation first, then oscillation.

        While animating, a dragged control point is pulled back onto its
        stored angle here and moved again by the next pointer move.
        """
        self.frame += 1

        if self.rotating:
            self.rotation += self.config.rotation_step * self.rotation_direction
            # randomly reverse rotation direction sometimes
            if self.rng.random() < self.config.rotation_reverse_probability:
                logger.info("reversing rotation")
                self.rotation_direction *= -1

        if self.animating:
            self.shape.oscillate(
                max_sweep=self.config.max_sweep,
                step=self.config.oscillation_step,
                rng=self.rng,
            )

    # ---- keyboard ----

    def apply(self, action: Action) -> None:
        """Flip the boolean(s) behind a toggle action."""
        if action is Action.TOGGLE_OVERLAYS:
            self.draw_markers = not self.draw_markers
            self.draw_connections = not self.draw_connections
        elif action is Action.TOGGLE_ANIMATION:
            self.animating = not self.animating
        elif action is Action.TOGGLE_FILL:
            self.fill = not self.fill
        elif action is Action.TOGGLE_ROTATION:
            self.rotating = not self.rotating
        else:
            raise KeyError(f"Unknown action {action!r}")
        logger.debug("Applied %s", action.name)

    def toggles(self) -> dict[str, bool]:
        return {
            "animating": self.animating,
            "rotating": self.rotating,
            "fill": self.fill,
            "draw_markers": self.draw_markers,
            "draw_connections": self.draw_connections,
        }

    # ---- pointer ----

    def surface_to_shape(self, x: float, y: float, width: float, height: float) -> tuple[float, float]:
        """
        Convert surface coordinates into shape coordinates.

        The blob is drawn centred and rotated by `rotation`, so the pointer
        is moved to the centre and rotated back.
        """
        return rotate_to(x - width / 2.0, y - height / 2.0, -self.rotation)

    def pointer_down(self, x: float, y: float) -> Optional[int]:
        """
        Capture the control point under (x, y), given in shape coordinates.

        Returns:
            The captured arena index, or None when nothing is within reach.
        """
        index = self.shape.hit_test(x, y, self.config.pick_radius)
        self.captured = index
        if index is not None:
            logger.debug("Captured control point %d", index)
        return index

    def pointer_move(self, x: float, y: float) -> bool:
        """
        Drag the captured control point to (x, y) in shape coordinates.

        Both axes follow the pointer. Returns False if nothing is captured.
        """
        if self.captured is None:
            return False
        self.shape.move_control_point(self.captured, x, y)
        return True

    def pointer_up(self) -> None:
        if self.captured is not None:
            logger.debug("Released control point %d", self.captured)
        self.captured = None
