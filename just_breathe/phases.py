"""Breathing phases and their cyclic transition table."""
from __future__ import annotations

from enum import Enum


class Phase(Enum):
    INHALE = "inhale"
    HOLD_FULL = "hold_full"
    EXHALE = "exhale"
    HOLD_EMPTY = "hold_empty"


NEXT_PHASE: dict[Phase, Phase] = {
    Phase.INHALE: Phase.HOLD_FULL,
    Phase.HOLD_FULL: Phase.EXHALE,
    Phase.EXHALE: Phase.HOLD_EMPTY,
    Phase.HOLD_EMPTY: Phase.INHALE,
}


def next_phase(phase: Phase) -> Phase:
    """Return the phase that follows ``phase`` in the box-breathing order."""
    return NEXT_PHASE[phase]
