#!/usr/bin/env python3
"""
Configuration Management
========================
Generation defaults from app.yaml and named drift profiles.

The drift coefficient (alpha) places the generator on the axis between the
"present" anchor (alpha=0) and the "past" anchor (alpha=1). Callers pass it
explicitly; nothing here is global mutable state.
"""

import logging
import math
from dataclasses import dataclass
from typing import Optional, Tuple, Union

from .settings import get_setting

logger = logging.getLogger(__name__)


# =============================================================================
# Drift Profiles
# =============================================================================
# Named positions on the drift axis. Users can use these or pass a number.

DRIFT_PROFILES = {
    "present": {
        "drift": 0.0,
        "description": "Pure anchor A (present-day transitions)",
    },
    "recent": {
        "drift": 0.25,
        "description": "Mostly present, light drift toward the past",
    },
    "midway": {
        "drift": 0.5,
        "description": "Geometric midpoint between both anchors",
    },
    "archaic": {
        "drift": 0.75,
        "description": "Mostly past, some present-day transitions remain",
    },
    "past": {
        "drift": 1.0,
        "description": "Pure anchor B (past transitions)",
    },
}


def clamp_drift(alpha: float) -> float:
    """
    Clamp a drift coefficient to [0, 1].

    The blender assumes its alpha is already in range, so every public entry
    point that accepts a drift from a caller passes it through here first.
    """
    alpha = float(alpha)
    if math.isnan(alpha):
        raise ValueError("Drift must be a number, got NaN")
    if alpha < 0.0 or alpha > 1.0:
        clamped = min(1.0, max(0.0, alpha))
        logger.warning("Drift %.4f outside [0, 1], clamped to %.1f", alpha, clamped)
        return clamped
    return alpha


def get_drift(profile_or_value: Union[str, float, int, None]) -> float:
    """
    Resolve a drift coefficient from a profile name or a number.

    Args:
        profile_or_value: Either:
            - str: Profile name (e.g., "midway") or a numeric string ("0.3")
            - float/int: Drift value (clamped to [0, 1])
            - None: The configured default drift

    Returns:
        Drift coefficient in [0, 1]

    Raises:
        ValueError: If a profile name is not found
    """
    if profile_or_value is None:
        return clamp_drift(get_setting("generation.default_drift", 0.0))

    if isinstance(profile_or_value, str):
        profile = DRIFT_PROFILES.get(profile_or_value.strip().lower())
        if profile is not None:
            return profile["drift"]
        try:
            value = float(profile_or_value)
        except ValueError:
            available = ', '.join(DRIFT_PROFILES.keys())
            raise ValueError(
                f"Unknown drift profile '{profile_or_value}'. "
                f"Available profiles: {available}"
            ) from None
        return clamp_drift(value)

    if isinstance(profile_or_value, bool):
        raise ValueError(f"Invalid drift: {profile_or_value}")

    if isinstance(profile_or_value, (int, float)):
        return clamp_drift(profile_or_value)

    raise ValueError(f"Invalid drift: {profile_or_value}")


def list_profiles() -> dict:
    """List all drift profiles with descriptions."""
    return {
        name: {
            "drift": p["drift"],
            "description": p["description"],
        }
        for name, p in DRIFT_PROFILES.items()
    }


# =============================================================================
# Generation Configuration
# =============================================================================

def validate_syllable_range(min_syllables: int, max_syllables: int) -> Tuple[int, int]:
    """Check a per-word syllable budget range."""
    if min_syllables < 0:
        raise ValueError(f"min_syllables must be >= 0, got {min_syllables}")
    if max_syllables < min_syllables:
        raise ValueError(
            f"max_syllables ({max_syllables}) must be >= min_syllables ({min_syllables})"
        )
    return int(min_syllables), int(max_syllables)


@dataclass
class GenerationConfig:
    """Generation defaults; unset fields are read from app.yaml."""
    drift: Optional[float] = None
    word_count: Optional[int] = None
    min_syllables: Optional[int] = None
    max_syllables: Optional[int] = None
    seed: Optional[int] = None
    workers: Optional[int] = None

    def __post_init__(self):
        if self.drift is None:
            self.drift = get_setting("generation.default_drift")
        if self.word_count is None:
            self.word_count = get_setting("generation.word_count")
        if self.min_syllables is None:
            self.min_syllables = get_setting("generation.min_syllables")
        if self.max_syllables is None:
            self.max_syllables = get_setting("generation.max_syllables")
        if self.seed is None:
            self.seed = get_setting("generation.seed")
        if self.workers is None:
            self.workers = get_setting("parallel.workers")

        missing = [
            name for name, value in (
                ("generation.default_drift", self.drift),
                ("generation.word_count", self.word_count),
                ("generation.min_syllables", self.min_syllables),
                ("generation.max_syllables", self.max_syllables),
                ("parallel.workers", self.workers),
            )
            if value is None
        ]
        if missing:
            raise ValueError(f"settings missing in app.yaml: {', '.join(missing)}")

        self.drift = clamp_drift(self.drift)
        if self.word_count < 0:
            raise ValueError(f"word_count must be >= 0, got {self.word_count}")
        if self.workers < 1:
            raise ValueError(f"workers must be >= 1, got {self.workers}")
        validate_syllable_range(self.min_syllables, self.max_syllables)

    @property
    def syllable_range(self) -> Tuple[int, int]:
        return self.min_syllables, self.max_syllables
