"""Breathing configuration dataclass."""
from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Callable, Mapping

from just_breathe.cycle import BreathingCycle
from just_breathe.phases import Phase
from just_breathe.types import ConfigError
from just_breathe.validators import (
    default_durations,
    validate_durations,
    validate_easing,
)

# Quarter of, and the full, half-width of a 512px window.
MIN_RADIUS = 64.0
MAX_RADIUS = 256.0


@dataclass(frozen=True)
class BreatheConfig:
    """Immutable breathing constants, validated on construction.

    Attributes:
        durations: Seconds spent in each phase (read-only mapping).
        min_radius: Circle radius at the end of an exhale.
        max_radius: Circle radius at the end of an inhale.
        easing: Name of the curve used to grow and shrink the circle.
    """

    # Left out of the hash; equal configs still hash equal.
    durations: Mapping[Phase, float] = field(default_factory=default_durations, hash=False)
    min_radius: float = MIN_RADIUS
    max_radius: float = MAX_RADIUS
    easing: str = "linear"

    def __post_init__(self) -> None:
        checked = validate_durations(self.durations)
        object.__setattr__(self, "durations", MappingProxyType(checked))
        validate_easing(self.easing)
        if self.min_radius < 0:
            raise ConfigError(f"min_radius must not be negative, got {self.min_radius!r}")
        if self.min_radius >= self.max_radius:
            raise ConfigError(
                f"min_radius ({self.min_radius!r}) must be less than "
                f"max_radius ({self.max_radius!r})"
            )

    @property
    def cycle_seconds(self) -> float:
        return sum(self.durations.values())

    def make_cycle(
        self, on_transition: Callable[[Phase, Phase], None] | None = None,
    ) -> BreathingCycle:
        """Build a fresh cycle (INHALE, zero elapsed) from these constants."""
        return BreathingCycle(
            durations=self.durations, easing=self.easing, on_transition=on_transition,
        )
