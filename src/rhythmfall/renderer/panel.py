"""Message overlay panel."""

from __future__ import annotations

import pygame

from rhythmfall.overlay import MessageOverlay
from rhythmfall.renderer.colors import OVERLAY_PANEL, TEXT
from rhythmfall.renderer.fonts import get_font

LINE_OFFSETS = (30, 60)


def render_overlay(surface: pygame.Surface, overlay: MessageOverlay, lines: tuple[str, str]) -> None:
    """Translucent panel with both lines centred on it."""
    panel = pygame.Surface((overlay.width, overlay.height), pygame.SRCALPHA)
    panel.fill(OVERLAY_PANEL)
    surface.blit(panel, (overlay.position.x, overlay.position.y))

    font = get_font(30)
    center_x = overlay.position.x + overlay.width // 2
    for line, offset in zip(lines, LINE_OFFSETS):
        if not line:
            continue
        text = font.render(line, True, TEXT)
        baseline = overlay.position.y + offset
        surface.blit(text, (center_x - text.get_width() // 2, baseline - font.get_ascent()))
