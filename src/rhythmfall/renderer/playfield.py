"""Falling symbols, feedback texts and the perfect-line markers."""

from __future__ import annotations

import pygame

from rhythmfall.judge import PlayfieldLayout
from rhythmfall.models import FallingSymbol, FeedbackText
from rhythmfall.renderer.colors import MARKER, TEXT
from rhythmfall.renderer.fonts import get_font

FEEDBACK_FONT_SIZE = 30


def render_symbols(surface: pygame.Surface, symbols: tuple[FallingSymbol, ...]) -> None:
    for symbol in symbols:
        _draw_symbol(surface, symbol)


def _draw_symbol(surface: pygame.Surface, symbol: FallingSymbol) -> None:
    size = symbol.size
    # Circle goes through an alpha surface so the palette's alpha blends.
    disc = pygame.Surface((size, size), pygame.SRCALPHA)
    pygame.draw.ellipse(disc, symbol.color, disc.get_rect())
    surface.blit(disc, (symbol.position.x, symbol.position.y))

    glyph = get_font(size).render(symbol.character, True, TEXT)
    rect = glyph.get_rect(center=(symbol.position.x + size // 2, symbol.position.y + size // 2))
    surface.blit(glyph, rect)


def render_feedback(surface: pygame.Surface, texts: tuple[FeedbackText, ...]) -> None:
    font = get_font(FEEDBACK_FONT_SIZE)
    for text in texts:
        rendered = font.render(text.message, True, text.color[:3])
        rendered.set_alpha(text.alpha)
        surface.blit(rendered, (text.position.x, text.position.y))


def render_target_markers(surface: pygame.Surface, layout: PlayfieldLayout) -> None:
    """Row of outlined circles marking where a press scores PERFECT."""
    size = layout.symbol_size
    for x in range(size, layout.width - size, size):
        pygame.draw.ellipse(surface, MARKER, pygame.Rect(x, layout.perfect_line, size, size), width=1)
