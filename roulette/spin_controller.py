"""
Spin Controller

Owns the wheel's session state. A spin picks its winner the moment it starts;
the reveal is only a scheduled timer on the running asyncio loop, so the
animation shown to users is purely cosmetic.
"""

import asyncio
import inspect
import logging
import random
from dataclasses import replace
from typing import Callable, Iterable, Optional, Set, Tuple

from .config_loader import WheelSettings
from .layout_engine import compute_layout, layout_key
from .models import Note, SpinPhase, SpinResult, WheelSnapshot, WheelState, Wedge
from .outcome_resolver import resolve_winner

logger = logging.getLogger(__name__)

RevealCallback = Callable[[SpinResult], object]


class SpinController:

    def __init__(self, settings: WheelSettings = None, notes: Iterable[Note] = (),
                 rng: random.Random = None, on_reveal: Optional[RevealCallback] = None,
                 loop: asyncio.AbstractEventLoop = None):
        self.settings = settings or WheelSettings()
        self.state = WheelState()
        self.on_reveal = on_reveal

        self._rng = rng or random.Random()
        self._loop = loop
        self._notes: Tuple[Note, ...] = ()
        self._layout: Tuple[Wedge, ...] = ()
        self._layout_key: Tuple = ()
        self._pending_notes: Optional[Tuple[Note, ...]] = None
        self._reveal_handle: Optional[asyncio.TimerHandle] = None
        self._current_spin: Optional[SpinResult] = None
        self._callback_tasks: Set[asyncio.Future] = set()
        self._closed = False

        self.load_notes(notes)

    @property
    def notes(self) -> Tuple[Note, ...]:
        return self._notes

    @property
    def layout(self) -> Tuple[Wedge, ...]:
        return self._layout

    @property
    def is_spinning(self) -> bool:
        return self.state.is_spinning

    @property
    def current_spin(self) -> Optional[SpinResult]:
        return self._current_spin

    @property
    def reveal_at(self) -> Optional[float]:
        if self._reveal_handle is None:
            return None
        return self._reveal_handle.when()

    @property
    def is_closed(self) -> bool:
        return self._closed

    def load_notes(self, notes: Iterable[Note]) -> bool:
        """Supply (or replace) the note sequence.

        Returns True when the layout was recomputed. Notes handed over while a
        spin is running are held back until its reveal.
        """
        notes = tuple(notes)

        if self.state.is_spinning:
            logger.info(f"⏳ Spin in progress, deferring {len(notes)} notes until reveal")
            self._pending_notes = notes
            return False

        self._notes = notes
        key = layout_key(notes)
        if key == self._layout_key and (self._layout or not notes):
            return False

        self._layout_key = key
        if notes:
            self._layout = compute_layout(notes, label_radius_fraction=self.settings.label_radius_fraction)
        else:
            self._layout = ()
        logger.info(f"🎡 Wheel layout updated: {len(self._layout)} wedges")
        return True

    def generate_delta(self) -> float:
        spins = self.settings.min_spins + self._rng.random() * self.settings.max_extra_spins
        extra_degrees = self._rng.random() * 360
        return spins * 360 + extra_degrees

    def request_spin(self, arm_reveal: bool = True) -> Optional[SpinResult]:
        """Start a spin, or do nothing.

        Returns None without raising when there are no notes, when a spin is
        already running, or after close(). The winner is fixed here; with
        ``arm_reveal=False`` the reveal timer waits for ``arm_reveal()`` so a
        caller can publish the animation first.
        """
        if self._closed:
            logger.debug("Spin requested on closed controller, ignoring")
            return None
        if not self._notes:
            logger.debug("Spin requested without notes, ignoring")
            return None
        if self.state.is_spinning:
            logger.debug("Spin already running, ignoring request")
            return None

        # snapshot the sequence; the winner must come from what was on the wheel
        spin_notes = self._notes
        item_count = len(spin_notes)

        start_rotation = self.state.cumulative_rotation
        new_rotation = start_rotation + self.generate_delta()
        index = resolve_winner(new_rotation, self.settings.pointer_angle, item_count)

        self.state.cumulative_rotation = new_rotation
        self.state.phase = SpinPhase.SPINNING
        self._current_spin = SpinResult(
            index=index,
            note=spin_notes[index],
            start_rotation=start_rotation,
            cumulative_rotation=new_rotation,
            item_count=item_count,
        )

        logger.info(
            f"🎲 Spin started: {start_rotation:.1f}° -> {new_rotation:.1f}°, "
            f"winner index {index} of {item_count} ({spin_notes[index].label})"
        )

        if arm_reveal:
            self.arm_reveal()
        return self._current_spin

    def arm_reveal(self) -> Optional[float]:
        """Schedule the reveal of the running spin, counted from now.

        Only the first call per spin schedules anything; returns the loop time
        of the reveal, or None when there is nothing to reveal.
        """
        if self._closed or not self.state.is_spinning:
            return None
        if self._reveal_handle is not None:
            return self._reveal_handle.when()

        loop = self._loop or asyncio.get_running_loop()
        self._reveal_handle = loop.call_later(self.settings.reveal_delay_seconds, self._reveal)
        self._current_spin = replace(self._current_spin, reveal_at=self._reveal_handle.when())
        return self._reveal_handle.when()

    def _reveal(self):
        self._reveal_handle = None
        result = self._current_spin
        if self._closed or result is None:
            return

        self.state.winner = result.note
        self.state.phase = SpinPhase.IDLE
        logger.info(f"🏆 Winner revealed: {result.note.label}")

        if self._pending_notes is not None:
            pending, self._pending_notes = self._pending_notes, None
            self.load_notes(pending)

        if self.on_reveal is not None:
            self._run_callback(result)

    def _run_callback(self, result: SpinResult):
        try:
            outcome = self.on_reveal(result)
        except Exception as e:
            logger.error(f"Error in reveal callback: {e}")
            return

        if inspect.isawaitable(outcome):
            task = asyncio.ensure_future(outcome)
            self._callback_tasks.add(task)
            task.add_done_callback(self._callback_done)

    def _callback_done(self, task: asyncio.Future):
        self._callback_tasks.discard(task)
        if task.cancelled():
            return
        error = task.exception()
        if error is not None:
            logger.error(f"Error in reveal callback: {error}")

    def close(self):
        """Tear down: cancel any pending reveal so no state changes afterwards."""
        self._closed = True
        if self._reveal_handle is not None:
            self._reveal_handle.cancel()
            self._reveal_handle = None
            logger.info("🛑 Pending reveal cancelled")
        for task in list(self._callback_tasks):
            task.cancel()

    def snapshot(self) -> WheelSnapshot:
        return WheelSnapshot(
            layout=self._layout,
            cumulative_rotation=self.state.cumulative_rotation,
            is_spinning=self.state.is_spinning,
            winner=self.state.winner,
        )
