"""Shared font lookup."""

from __future__ import annotations

from functools import lru_cache

import pygame


@lru_cache(maxsize=None)
def get_font(size: int, bold: bool = True) -> pygame.font.Font:
    return pygame.font.SysFont("arial", size, bold=bold)
