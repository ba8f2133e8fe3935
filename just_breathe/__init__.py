"""just-breathe - A box-breathing visual aid."""
from __future__ import annotations

from just_breathe.config import BreatheConfig
from just_breathe.cycle import BreathingCycle
from just_breathe.easing import EASINGS
from just_breathe.phases import NEXT_PHASE, Phase, next_phase
from just_breathe.types import ConfigError

__all__ = [
    "BreathingCycle",
    "BreatheConfig",
    "ConfigError",
    "EASINGS",
    "NEXT_PHASE",
    "Phase",
    "next_phase",
]
