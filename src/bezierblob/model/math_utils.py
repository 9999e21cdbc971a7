from __future__ import annotations

from math import cos, sin, sqrt, pi
from typing import Union

import numpy as np
from numpy import typing as npt

ArrayLike2 = Union[tuple[float, float], npt.NDArray[np.float64]]


def norm(value: float, minimum: float, maximum: float) -> float:
    """
    Fraction (0..1 inside the range) that `value` represents between
    `minimum` and `maximum`. Works when `maximum < minimum` and for values
    outside the range.
    """
    return (value - minimum) / (maximum - minimum)


def lerp(t: float, minimum: float, maximum: float) -> float:
    """Linear interpolation of the normalized `t` into [minimum, maximum]."""
    return (maximum - minimum) * t + minimum


def map_range(
    value: float,
    source_min: float,
    source_max: float,
    dest_min: float,
    dest_max: float
) -> float:
    """Convert `value` from the source range into the destination range."""
    return lerp(norm(value, source_min, source_max), dest_min, dest_max)


def clamp(value: float, minimum: float, maximum: float) -> float:
    """Force `value` into the range; the bounds may be given in either order."""
    return min(max(value, min(minimum, maximum)), max(minimum, maximum))


def in_range(value: float, minimum: float, maximum: float) -> bool:
    """Inclusive range test; the bounds may be given in either order."""
    return min(minimum, maximum) <= value <= max(minimum, maximum)


def distance(x0: float, y0: float, x1: float, y1: float) -> float:
    """Euclidean distance between two points."""
    dx = x1 - x0
    dy = y1 - y0
    return sqrt(dx * dx + dy * dy)


def circle_point_collision(x: float, y: float, cx: float, cy: float, radius: float) -> bool:
    """True if (x, y) lies inside or on the circle centred at (cx, cy)."""
    return distance(cx, cy, x, y) <= radius


def random_range(rng: np.random.Generator, minimum: float, maximum: float) -> float:
    """Uniform random number in [minimum, maximum)."""
    return minimum + float(rng.random()) * (maximum - minimum)


def degrees_to_radians(degrees: float) -> float:
    return degrees / 180.0 * pi


def radians_to_degrees(radians: float) -> float:
    return radians * 180.0 / pi


def rotate_to(x: float, y: float, angle: float) -> tuple[float, float]:
    """
    Rotate the point (x, y) by `angle` radians around the origin.

    Args:
        x: X coordinate.
        y: Y coordinate.
        angle: Rotation angle in radians. In a y-down surface a positive
            angle turns clockwise on screen.

    Returns:
        The rotated (x, y).
    """
    c = cos(angle)
    s = sin(angle)
    return x * c - y * s, y * c + x * s


def quadratic_bezier(
    p0: ArrayLike2,
    p1: ArrayLike2,
    p2: ArrayLike2,
    t: Union[float, npt.ArrayLike]
) -> npt.NDArray[np.float64]:
    """
    Evaluate a quadratic Bezier curve.

    Args:
        p0: Start point.
        p1: Control point.
        p2: End point.
        t: Scalar or 1-D array of curve parameters in [0, 1].

    Returns:
        Array of shape (2,) for a scalar `t`, otherwise (len(t), 2).
    """
    P = np.array([p0, p1, p2], dtype=np.float64)
    tt = np.asarray(t, dtype=np.float64)
    u = 1.0 - tt
    w = np.stack([u * u, 2.0 * u * tt, tt * tt], axis=-1)
    return w @ P


def cubic_bezier(
    p0: ArrayLike2,
    p1: ArrayLike2,
    p2: ArrayLike2,
    p3: ArrayLike2,
    t: Union[float, npt.ArrayLike]
) -> npt.NDArray[np.float64]:
    """
    Evaluate a cubic Bezier curve with two end points and two control points.

    Args:
        p0: Start point.
        p1: First control point.
        p2: Second control point.
        p3: End point.
        t: Scalar or 1-D array of curve parameters in [0, 1].

    Returns:
        Array of shape (2,) for a scalar `t`, otherwise (len(t), 2).
    """
    P = np.array([p0, p1, p2, p3], dtype=np.float64)
    tt = np.asarray(t, dtype=np.float64)
    u = 1.0 - tt
    w = np.stack([u ** 3, 3.0 * u * u * tt, 3.0 * u * tt * tt, tt ** 3], axis=-1)
    return w @ P


def polygon_area(points: npt.NDArray[np.float64]) -> float:
    """
    Absolute area of a closed polygon given as an (N, 2) array (shoelace formula).

    The ring does not have to repeat its first vertex.
    """
    P = np.asarray(points, dtype=np.float64)
    if P.ndim != 2 or P.shape[1] != 2:
        raise ValueError("points must have shape (N,2)")
    if P.shape[0] < 3:
        return 0.0
    x = P[:, 0]
    y = P[:, 1]
    return 0.5 * abs(float(np.dot(x, np.roll(y, -1)) - np.dot(y, np.roll(x, -1))))
