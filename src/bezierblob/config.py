"""
Configuration & Global Constants
================================
This module serves as the central registry for the blob's tunable constants.

Why is this file needed?
------------------------
1. Abstraction: It prevents magic numbers (radius, sweep arc, step sizes)
   scattered throughout the model and the view.
2. Validation: Geometry has to be valid before any shape is built. Invalid
   values fail fast with `InvalidConfigurationError`.

Exports:
    BlobConfig: Frozen dataclass with every construction-time constant.
    InvalidConfigurationError: Raised by `BlobConfig.validate()`.
    check_point_count: Shared guard for the number of anchors.
"""
from __future__ import annotations

import math
import numbers
from dataclasses import dataclass
from typing import Optional

VISIBLE_APP_NAME = "Bezier Blob"

# Global Constants
DEFAULT_POINT_COUNT: int = 5
DEFAULT_BASE_RADIUS: float = 250.0
DEFAULT_MAX_SWEEP: float = math.pi / 6  # 30 degrees
DEFAULT_OSCILLATION_STEP: float = 0.02
DEFAULT_ROTATION_STEP: float = 0.0025
DEFAULT_ROTATION_REVERSE_PROBABILITY: float = 0.001
DEFAULT_PICK_RADIUS: float = 10.0
DEFAULT_MARKER_RADIUS: float = 10.0
DEFAULT_FRAME_INTERVAL_MS: int = 16  # ~60 FPS

MIN_POINT_COUNT: int = 3


class InvalidConfigurationError(ValueError):
    """Raised when the blob cannot be constructed from the given values."""


def check_point_count(point_count: int) -> int:
    """
    Reject anything that is not a whole number of at least `MIN_POINT_COUNT`.

    Bools and floats (even `4.0`) are refused; numpy integers are fine.
    """
    if isinstance(point_count, bool) or not isinstance(point_count, numbers.Integral):
        raise InvalidConfigurationError(
            f"point_count must be an integer, got {point_count!r}"
        )
    if point_count < MIN_POINT_COUNT:
        raise InvalidConfigurationError(
            f"point_count must be >= {MIN_POINT_COUNT}, got {point_count}"
        )
    return int(point_count)


@dataclass(frozen=True)
class BlobConfig:
    """
    Construction-time constants of one blob session.

    Nothing here changes while the application runs; build a new session
    to use different values.
    """
    point_count: int = DEFAULT_POINT_COUNT
    base_radius: float = DEFAULT_BASE_RADIUS
    max_sweep: float = DEFAULT_MAX_SWEEP
    oscillation_step: float = DEFAULT_OSCILLATION_STEP
    rotation_step: float = DEFAULT_ROTATION_STEP
    rotation_reverse_probability: float = DEFAULT_ROTATION_REVERSE_PROBABILITY
    pick_radius: float = DEFAULT_PICK_RADIUS
    marker_radius: float = DEFAULT_MARKER_RADIUS
    frame_interval_ms: int = DEFAULT_FRAME_INTERVAL_MS
    seed: Optional[int] = None

    def validate(self) -> BlobConfig:
        """
        Check every value that would make construction or the frame loop
        meaningless.

        A non-positive `max_sweep` is accepted: it simply freezes the
        oscillation.

        Returns:
            self, so the call can be chained.

        Raises:
            InvalidConfigurationError: On the first invalid value.
        """
        check_point_count(self.point_count)
        if not math.isfinite(self.base_radius) or self.base_radius <= 0.0:
            raise InvalidConfigurationError(f"base_radius must be > 0, got {self.base_radius}")
        if not math.isfinite(self.max_sweep):
            raise InvalidConfigurationError("max_sweep must be finite")
        if not math.isfinite(self.oscillation_step) or self.oscillation_step < 0.0:
            raise InvalidConfigurationError(
                f"oscillation_step must be >= 0, got {self.oscillation_step}"
            )
        if not math.isfinite(self.rotation_step):
            raise InvalidConfigurationError("rotation_step must be finite")
        if not 0.0 <= self.rotation_reverse_probability <= 1.0:
            raise InvalidConfigurationError(
                "rotation_reverse_probability must lie in [0, 1], "
                f"got {self.rotation_reverse_probability}"
            )
        if not math.isfinite(self.pick_radius) or self.pick_radius < 0.0:
            raise InvalidConfigurationError(f"pick_radius must be >= 0, got {self.pick_radius}")
        if not math.isfinite(self.marker_radius) or self.marker_radius <= 0.0:
            raise InvalidConfigurationError(f"marker_radius must be > 0, got {self.marker_radius}")
        if self.frame_interval_ms <= 0:
            raise InvalidConfigurationError(
                f"frame_interval_ms must be > 0, got {self.frame_interval_ms}"
            )
        return self
