"""Pygame rendering for the breathing circle."""
from __future__ import annotations

from just_breathe.ui.orb import draw_breath

__all__ = ["draw_breath"]
