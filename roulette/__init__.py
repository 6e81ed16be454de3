# roulette/__init__.py

from .errors import RouletteError, InvalidInputError
from .models import Note, Point, Wedge, WheelState, SpinPhase, SpinResult, WheelSnapshot
from .geometry import normalize_angle, polar_to_cartesian, rotate_point, wedge_size, wedge_start
from .layout_engine import compute_layout, layout_key
from .outcome_resolver import resolve_winner, effective_angle
from .config_loader import WheelSettings, WheelConfigLoader
from .spin_controller import SpinController
from .note_source import NoteSource
from .wheel_renderer import WheelRenderer, truncate_label

__all__ = [
    'RouletteError',
    'InvalidInputError',
    'Note',
    'Point',
    'Wedge',
    'WheelState',
    'SpinPhase',
    'SpinResult',
    'WheelSnapshot',
    'normalize_angle',
    'polar_to_cartesian',
    'rotate_point',
    'wedge_size',
    'wedge_start',
    'compute_layout',
    'layout_key',
    'resolve_winner',
    'effective_angle',
    'WheelSettings',
    'WheelConfigLoader',
    'SpinController',
    'NoteSource',
    'WheelRenderer',
    'truncate_label',
]
