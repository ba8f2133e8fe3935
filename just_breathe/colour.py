"""Phase-dependent circle colour.

The circle is blue while breathing in, red while breathing out, and the hue
drifts between the two during each hold.
"""
from __future__ import annotations

from typing import TYPE_CHECKING

import pygame

from just_breathe.easing import ease_in_out_cubic, lerp
from just_breathe.phases import Phase

if TYPE_CHECKING:
    from just_breathe.cycle import BreathingCycle

BLUE_HUE = 260.0
RED_HUE = 330.0
SATURATION = 50.0
LIGHTNESS = 50.0


def phase_hue(phase: Phase, progress: float) -> float:
    """Hue in degrees for a point ``progress`` (0..1) through ``phase``."""
    if phase is Phase.INHALE:
        return BLUE_HUE
    if phase is Phase.EXHALE:
        return RED_HUE
    t = ease_in_out_cubic(progress)
    if phase is Phase.HOLD_FULL:
        return lerp(t, BLUE_HUE, RED_HUE)
    return lerp(t, RED_HUE, BLUE_HUE)


def phase_colour(phase: Phase, progress: float) -> pygame.Color:
    colour = pygame.Color(0, 0, 0)
    colour.hsla = (phase_hue(phase, progress), SATURATION, LIGHTNESS, 100)
    return colour


def cycle_colour(cycle: BreathingCycle) -> pygame.Color:
    return phase_colour(cycle.phase, cycle.progress)
