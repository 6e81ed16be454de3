"""
Wheel Geometry

Angles are degrees in screen space: 0° points along +x and positive angles
turn clockwise (y grows downward), the same frame Pillow's pieslice uses.
"""

import math
from typing import Tuple, Union

from .errors import InvalidInputError
from .models import Point

FULL_TURN = 360.0

PointLike = Union[Point, Tuple[float, float]]


def normalize_angle(angle: float) -> float:
    """Map any degree value into [0, 360)."""
    result = math.fmod(angle, FULL_TURN)
    if result < 0:
        result += FULL_TURN
    # -1e-15 + 360 rounds back up to 360.0
    if result >= FULL_TURN:
        result = 0.0
    return result


def wedge_size(item_count: int) -> float:
    if item_count <= 0:
        raise InvalidInputError(f"Wheel needs at least one note, got {item_count}")
    return FULL_TURN / item_count


def as_point(value: PointLike) -> Point:
    if isinstance(value, Point):
        return value
    x, y = value
    return Point(float(x), float(y))


def polar_to_cartesian(center: PointLike, radius: float, angle_deg: float) -> Point:
    c = as_point(center)
    rad = math.radians(angle_deg)
    return Point(c.x + radius * math.cos(rad), c.y + radius * math.sin(rad))


def rotate_point(point: PointLike, center: PointLike, angle_deg: float) -> Point:
    p = as_point(point)
    c = as_point(center)
    rad = math.radians(angle_deg)
    dx = p.x - c.x
    dy = p.y - c.y
    return Point(
        c.x + dx * math.cos(rad) - dy * math.sin(rad),
        c.y + dx * math.sin(rad) + dy * math.cos(rad),
    )


def wedge_start(index: int, item_count: int) -> float:
    """Lower edge of wedge ``index``; the one boundary expression shared by
    layout and winner resolution."""
    return index * wedge_size(item_count)
