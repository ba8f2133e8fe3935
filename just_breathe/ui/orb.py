"""Breathing circle renderer."""
from __future__ import annotations

import pygame

from just_breathe.ui.constants import BG_COLOR, OUTLINE_LIFT


def draw_breath(
    surface: pygame.Surface,
    radius: float,
    colour: pygame.Color | tuple[int, int, int],
) -> None:
    """Clear ``surface`` and draw a filled circle of ``radius`` at its centre."""
    surface.fill(BG_COLOR)
    r = round(radius)
    if r <= 0:
        return
    center = surface.get_rect().center
    fill = pygame.Color(colour)
    pygame.draw.circle(surface, fill, center, r)
    # Thin outline
    outline = tuple(min(c + OUTLINE_LIFT, 255) for c in (fill.r, fill.g, fill.b))
    pygame.draw.circle(surface, outline, center, r, 1)
