import pytest

from roulette.config_loader import WheelSettings
from roulette.models import Note


def make_notes(count: int):
    return [Note(id=f"n{i}", label=chr(ord("A") + i % 26), detail=f"detail {i}") for i in range(count)]


@pytest.fixture
def notes():
    return make_notes(4)


@pytest.fixture
def fast_settings():
    # millisecond timings so async tests finish quickly
    return WheelSettings(animation_ms=40, reveal_delay_ms=20)


class FixedRandom:
    """Stand-in for random.Random that replays a list of values."""

    def __init__(self, *values):
        self.values = list(values)
        self.calls = 0

    def random(self):
        value = self.values[self.calls % len(self.values)]
        self.calls += 1
        return value
