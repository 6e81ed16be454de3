"""
Roulette Models
"""

import enum
from dataclasses import dataclass, field
from typing import Optional, Tuple


@dataclass(frozen=True)
class Note:
    id: str
    label: str
    detail: str = ""


@dataclass(frozen=True)
class Point:
    x: float
    y: float


@dataclass(frozen=True)
class Wedge:
    index: int
    note: Note
    start_angle: float
    end_angle: float
    mid_angle: float
    label_anchor: Point
    label_rotation: float

    @property
    def size(self) -> float:
        return self.end_angle - self.start_angle


class SpinPhase(enum.Enum):
    IDLE = "idle"
    SPINNING = "spinning"


@dataclass
class WheelState:
    cumulative_rotation: float = 0.0
    phase: SpinPhase = SpinPhase.IDLE
    winner: Optional[Note] = None

    @property
    def is_spinning(self) -> bool:
        return self.phase is SpinPhase.SPINNING


@dataclass(frozen=True)
class SpinResult:
    index: int
    note: Note
    start_rotation: float
    cumulative_rotation: float
    item_count: int
    reveal_at: Optional[float] = None

    @property
    def delta(self) -> float:
        return self.cumulative_rotation - self.start_rotation


@dataclass(frozen=True)
class WheelSnapshot:
    """Everything a display surface needs for one render."""

    layout: Tuple[Wedge, ...] = field(default_factory=tuple)
    cumulative_rotation: float = 0.0
    is_spinning: bool = False
    winner: Optional[Note] = None

    @property
    def has_notes(self) -> bool:
        return bool(self.layout)
