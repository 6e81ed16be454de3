import math

import pytest

from roulette.errors import InvalidInputError
from roulette.layout_engine import compute_layout, label_rotation_for, layout_key
from roulette.models import Note
from tests.conftest import make_notes


@pytest.mark.parametrize("count", [1, 2, 3, 4, 5, 7, 8, 12, 17])
def test_wedges_partition_the_circle(count):
    layout = compute_layout(make_notes(count))

    assert len(layout) == count
    assert layout[0].start_angle == 0
    assert layout[-1].end_angle == 360
    for prev, nxt in zip(layout, layout[1:]):
        # no gap, no overlap
        assert prev.end_angle == nxt.start_angle
    for wedge in layout:
        assert math.isclose(wedge.size, 360 / count)


def test_wedges_follow_sequence_order(notes):
    layout = compute_layout(notes)
    assert [w.note.id for w in layout] == [n.id for n in notes]
    assert [w.index for w in layout] == [0, 1, 2, 3]


def test_label_anchor_sits_at_wedge_midpoint():
    layout = compute_layout(make_notes(4), center=(100, 100), radius=50)
    first = layout[0]
    assert first.mid_angle == 45
    # 0.65 of the radius along 45°
    expected = 50 * 0.65 / math.sqrt(2)
    assert math.isclose(first.label_anchor.x, 100 + expected)
    assert math.isclose(first.label_anchor.y, 100 + expected)


def test_label_radius_fraction_is_configurable():
    layout = compute_layout(make_notes(1), radius=10, label_radius_fraction=0.5)
    anchor = layout[0].label_anchor
    # single wedge midpoint is 180°
    assert math.isclose(anchor.x, -5.0)
    assert math.isclose(anchor.y, 0.0, abs_tol=1e-9)


def test_labels_on_lower_left_half_are_flipped():
    layout = compute_layout(make_notes(4))
    assert [w.label_rotation for w in layout] == [45, 315, 45, 315]


def test_label_rotation_flip_range_is_half_open():
    assert label_rotation_for(90) == 90
    assert label_rotation_for(90.5) == 270.5
    assert label_rotation_for(270) == 90
    assert label_rotation_for(271) == 271


def test_empty_sequence_is_rejected():
    with pytest.raises(InvalidInputError):
        compute_layout([])


def test_layout_key_tracks_order(notes):
    assert [entry[0] for entry in layout_key(notes)] == ["n0", "n1", "n2", "n3"]
    assert layout_key(list(reversed(notes))) != layout_key(notes)


def test_layout_key_tracks_shown_text(notes):
    relabelled = [Note(id=note.id, label=note.label.lower(), detail=note.detail) for note in notes]
    redetailed = [Note(id=note.id, label=note.label, detail="") for note in notes]
    assert layout_key(relabelled) != layout_key(notes)
    assert layout_key(redetailed) != layout_key(notes)
