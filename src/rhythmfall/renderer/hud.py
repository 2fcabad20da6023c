"""Heads-up display — the score at the top of the playfield."""

from __future__ import annotations

import pygame

from rhythmfall.config import SCORE_TOP
from rhythmfall.renderer.colors import TEXT
from rhythmfall.renderer.fonts import get_font


def render_score(surface: pygame.Surface, score: int, baseline: int = SCORE_TOP) -> None:
    font = get_font(35)
    text = font.render(str(score), True, TEXT)
    surface.blit(text, (surface.get_width() // 2 - text.get_width() // 2, baseline - font.get_ascent()))
