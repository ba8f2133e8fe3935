"""BreathingCycle - timed box-breathing state machine."""
from __future__ import annotations

import logging
import math
from typing import Callable, Mapping

from just_breathe.easing import EASINGS, lerp
from just_breathe.phases import Phase, next_phase
from just_breathe.validators import default_durations, validate_durations, validate_easing

logger = logging.getLogger(__name__)


class BreathingCycle:
    """Tracks the current phase and how far into it we are.

    Starts in INHALE with zero elapsed time. ``advance`` carries any time past
    a phase boundary over into the following phase(s), so the elapsed time in
    the current phase is always strictly less than its duration.
    """

    def __init__(
        self,
        durations: Mapping[Phase, float] | None = None,
        easing: str = "linear",
        on_transition: Callable[[Phase, Phase], None] | None = None,
    ) -> None:
        if durations is None:
            durations = default_durations()
        self._durations = validate_durations(durations)
        self._easing = validate_easing(easing)
        self._ease = EASINGS[easing]
        self._on_transition = on_transition
        self._phase = Phase.INHALE
        self._elapsed = 0.0
        self._total_elapsed = 0.0
        self._cycles = 0

    @property
    def phase(self) -> Phase:
        return self._phase

    @property
    def elapsed(self) -> float:
        return self._elapsed

    @property
    def duration(self) -> float:
        return self._durations[self._phase]

    @property
    def progress(self) -> float:
        """Fraction of the current phase completed, in [0, 1)."""
        return self._elapsed / self._durations[self._phase]

    @property
    def total_elapsed(self) -> float:
        return self._total_elapsed

    @property
    def cycles(self) -> int:
        """Number of completed INHALE..HOLD_EMPTY rounds."""
        return self._cycles

    @property
    def easing(self) -> str:
        return self._easing

    def advance(self, delta_time: float) -> None:
        if not math.isfinite(delta_time) or delta_time < 0:
            raise ValueError(
                f"delta_time must be finite and not negative, got {delta_time!r}"
            )
        self._elapsed += delta_time
        self._total_elapsed += delta_time
        # One delta may span several phases, e.g. after a suspend.
        while self._elapsed >= self._durations[self._phase]:
            self._elapsed -= self._durations[self._phase]
            old = self._phase
            self._phase = next_phase(old)
            if self._phase is Phase.INHALE:
                self._cycles += 1
            logger.debug("phase %s -> %s", old.name, self._phase.name)
            if self._on_transition is not None:
                self._on_transition(old, self._phase)

    def current_radius(self, min_radius: float, max_radius: float) -> float:
        phase = self._phase
        if phase is Phase.HOLD_FULL:
            return max_radius
        if phase is Phase.HOLD_EMPTY:
            return min_radius
        t = self._ease(self.progress)
        if phase is Phase.INHALE:
            return lerp(t, min_radius, max_radius)
        return lerp(t, max_radius, min_radius)
