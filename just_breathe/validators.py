"""Checks shared by BreatheConfig and BreathingCycle."""
from __future__ import annotations

import math
from typing import Mapping

from just_breathe.easing import EASINGS
from just_breathe.phases import Phase
from just_breathe.types import ConfigError

PHASE_SECONDS = 4.0


def default_durations() -> dict[Phase, float]:
    return {phase: PHASE_SECONDS for phase in Phase}


def validate_durations(durations: Mapping[Phase, float]) -> dict[Phase, float]:
    """Return a copy of ``durations`` with every phase present, finite and positive.

    Raises ConfigError otherwise.
    """
    checked: dict[Phase, float] = {}
    for phase in Phase:
        if phase not in durations:
            raise ConfigError(f"Missing duration for phase {phase.name}")
        seconds = float(durations[phase])
        if not math.isfinite(seconds) or seconds <= 0:
            raise ConfigError(
                f"Duration for phase {phase.name} must be positive, got {seconds!r}"
            )
        checked[phase] = seconds
    return checked


def validate_easing(name: str) -> str:
    if name not in EASINGS:
        known = ", ".join(sorted(EASINGS))
        raise ConfigError(f"Unknown easing {name!r} (expected one of: {known})")
    return name
