"""
Wheel Config Loader
"""

import logging
import math
from dataclasses import dataclass, fields, replace
from typing import Any, Dict, Optional

from .geometry import normalize_angle

logger = logging.getLogger(__name__)

DEFAULT_NOTES_URL = "https://sticky-notes-week-1.onrender.com/api/notes"


@dataclass(frozen=True)
class WheelSettings:
    min_spins: float = 5.0
    max_extra_spins: float = 3.0
    animation_ms: int = 4000
    # revealed slightly before the animation visually ends
    reveal_delay_ms: int = 3800
    pointer_angle: float = 270.0
    label_radius_fraction: float = 0.65
    label_max_chars: int = 15
    notes_url: str = DEFAULT_NOTES_URL
    default_language: str = "es"

    @property
    def animation_seconds(self) -> float:
        return self.animation_ms / 1000

    @property
    def reveal_delay_seconds(self) -> float:
        return self.reveal_delay_ms / 1000


class WheelConfigLoader:

    _NUMERIC_LIMITS = {
        'min_spins': (1, None),
        'max_extra_spins': (0, None),
        'animation_ms': (0, None),
        'reveal_delay_ms': (0, None),
        'label_radius_fraction': (0, 1),
        'label_max_chars': (1, None),
    }

    @staticmethod
    def load_settings(config: Optional[Dict[str, Any]] = None) -> WheelSettings:
        defaults = WheelSettings()

        wheel_config = (config or {}).get('wheel', {})
        if not isinstance(wheel_config, dict):
            logger.warning("Invalid 'wheel' section in config.json, using defaults")
            return defaults
        if not wheel_config:
            logger.info("No 'wheel' section in config.json, using defaults")
            return defaults

        values = {}
        known = {f.name: f for f in fields(WheelSettings)}
        for key, raw in wheel_config.items():
            if key not in known:
                logger.warning(f"Unknown wheel setting '{key}' ignored")
                continue
            value = WheelConfigLoader._coerce(key, raw, getattr(defaults, key))
            if value is not None:
                values[key] = value

        settings = replace(defaults, **values)

        if settings.reveal_delay_ms > settings.animation_ms:
            logger.warning(
                f"reveal_delay_ms ({settings.reveal_delay_ms}) exceeds animation_ms "
                f"({settings.animation_ms}), clamping to animation length"
            )
            settings = replace(settings, reveal_delay_ms=settings.animation_ms)

        settings = replace(settings, pointer_angle=normalize_angle(settings.pointer_angle))

        logger.info(
            f"Loaded wheel settings: pointer={settings.pointer_angle}°, "
            f"spins={settings.min_spins}+{settings.max_extra_spins}, "
            f"animation={settings.animation_ms}ms, reveal={settings.reveal_delay_ms}ms"
        )
        return settings

    @staticmethod
    def _coerce(key: str, raw: Any, default: Any):
        if isinstance(default, str):
            if isinstance(raw, str) and raw.strip():
                return raw.strip()
            logger.warning(f"Invalid value for {key}: {raw!r}, using default {default!r}")
            return None

        try:
            if isinstance(raw, bool):
                raise TypeError("booleans are not numbers here")
            value = type(default)(raw)
        except (TypeError, ValueError, OverflowError) as e:
            logger.warning(f"Invalid value for {key}: {raw!r} ({e}), using default {default!r}")
            return None

        if not math.isfinite(value):
            logger.warning(f"Value for {key} is not finite: {raw!r}, using default {default!r}")
            return None

        low, high = WheelConfigLoader._NUMERIC_LIMITS.get(key, (None, None))
        if (low is not None and value < low) or (high is not None and value > high):
            logger.warning(f"Value for {key} out of range: {value!r}, using default {default!r}")
            return None
        return value
