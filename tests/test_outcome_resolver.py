import pytest

from roulette.errors import InvalidInputError
from roulette.layout_engine import compute_layout
from roulette.outcome_resolver import effective_angle, resolve_winner
from tests.conftest import make_notes


def test_four_notes_with_pointer_on_top():
    assert resolve_winner(0, 270, 4) == 3
    assert resolve_winner(90, 270, 4) == 2


def test_boundary_belongs_to_higher_wedge():
    # rotation 180 puts effective angle exactly on 90°
    assert effective_angle(180, 270) == 90
    assert resolve_winner(180, 270, 4) == 1


def test_zero_notes_are_rejected():
    with pytest.raises(InvalidInputError):
        resolve_winner(123.0, 270, 0)


@pytest.mark.parametrize("count", [1, 2, 3, 6, 9])
def test_index_always_in_range(count):
    for step in range(-720, 1440, 7):
        rotation = step * 1.37
        index = resolve_winner(rotation, 270, count)
        assert 0 <= index < count


@pytest.mark.parametrize("pointer", [0, 90, 270, 333.3])
def test_full_turn_does_not_change_winner(pointer):
    for rotation in (0, 12.5, 97, 181, 359.9, 4321.0):
        assert resolve_winner(rotation, pointer, 7) == resolve_winner(rotation + 360, pointer, 7)
        assert resolve_winner(rotation, pointer, 7) == resolve_winner(rotation - 720, pointer, 7)


def test_agrees_with_layout_boundaries():
    layout = compute_layout(make_notes(5))
    pointer = 270
    for wedge in layout:
        # rotate the wheel so the pointer sits over this wedge's midpoint
        rotation = pointer - wedge.mid_angle
        assert resolve_winner(rotation, pointer, len(layout)) == wedge.index


def test_single_note_always_wins():
    for rotation in (0, 45, 359, 1000):
        assert resolve_winner(rotation, 270, 1) == 0


@pytest.mark.parametrize("count", range(1, 51))
def test_every_drawn_wedge_edge_resolves_to_its_wedge(count):
    # pointer at 0 and rotation -start puts the pointer exactly on the lower edge
    for wedge in compute_layout(make_notes(count)):
        assert resolve_winner(-wedge.start_angle, 0, count) == wedge.index
