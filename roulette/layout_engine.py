"""
Layout Engine
"""

import logging
from typing import Sequence, Tuple

from .geometry import normalize_angle, polar_to_cartesian, wedge_size, wedge_start, PointLike
from .models import Note, Wedge

logger = logging.getLogger(__name__)

DEFAULT_LABEL_RADIUS_FRACTION = 0.65


def label_rotation_for(mid_angle: float) -> float:
    """Rotation that keeps a label upright for someone reading the wheel.

    Labels whose midpoint falls in (90, 270] would render upside-down, so they
    get an extra half turn. Purely cosmetic: winner resolution never looks at it.
    """
    rotation = mid_angle
    if 90.0 < mid_angle <= 270.0:
        rotation += 180.0
    return normalize_angle(rotation)


def layout_key(notes: Sequence[Note]) -> Tuple[Tuple[str, str, str], ...]:
    """Everything a wedge shows; the layout is rebuilt when this changes."""
    return tuple((note.id, note.label, note.detail) for note in notes)


def compute_layout(notes: Sequence[Note],
                   center: PointLike = (0.0, 0.0),
                   radius: float = 1.0,
                   label_radius_fraction: float = DEFAULT_LABEL_RADIUS_FRACTION) -> Tuple[Wedge, ...]:
    """Split the wheel into one equal wedge per note, in sequence order.

    Wedge ``i`` covers ``[i * 360/N, (i + 1) * 360/N)`` in the wheel's own
    (un-rotated) frame. Raises InvalidInputError for an empty sequence.
    """
    size = wedge_size(len(notes))
    label_radius = radius * label_radius_fraction

    wedges = []
    for index, note in enumerate(notes):
        start = wedge_start(index, len(notes))
        # last wedge closes the circle exactly
        end = 360.0 if index == len(notes) - 1 else wedge_start(index + 1, len(notes))
        mid = start + size / 2
        wedges.append(Wedge(
            index=index,
            note=note,
            start_angle=start,
            end_angle=end,
            mid_angle=mid,
            label_anchor=polar_to_cartesian(center, label_radius, mid),
            label_rotation=label_rotation_for(mid),
        ))

    logger.debug(f"Computed layout for {len(wedges)} notes ({size:.2f}° per wedge)")
    return tuple(wedges)
