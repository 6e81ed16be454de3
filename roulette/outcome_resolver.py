"""
Outcome Resolver
"""

import math

from .geometry import normalize_angle, wedge_size, wedge_start


def effective_angle(final_rotation: float, pointer_angle: float) -> float:
    """Angle in the wheel's own frame that sits under the pointer.

    The wheel turns and the pointer stays put, so the wheel's rotation is
    inverted before the pointer offset is applied.
    """
    return normalize_angle(normalize_angle(-final_rotation) + pointer_angle)


def resolve_winner(final_rotation: float, pointer_angle: float, item_count: int) -> int:
    """Index of the wedge under the pointer once the wheel has stopped.

    Boundaries belong to the wedge that starts there (half-open wedges).
    """
    size = wedge_size(item_count)
    angle = effective_angle(final_rotation, pointer_angle)
    index = min(int(math.floor(angle / size)), item_count - 1)

    # the division can land one ulp off the edges the layout draws
    while index + 1 < item_count and angle >= wedge_start(index + 1, item_count):
        index += 1
    while index > 0 and angle < wedge_start(index, item_count):
        index -= 1
    return index
