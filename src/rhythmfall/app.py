"""Top-level application: initializes pygame and runs the frame loop."""

from __future__ import annotations

import logging

import pygame

from rhythmfall.config import FPS, WINDOW_HEIGHT, WINDOW_TITLE, WINDOW_WIDTH
from rhythmfall.settings import GameSettings
from rhythmfall.views.base import ViewContext, ViewManager
from rhythmfall.views.rhythm_view import RhythmView

logger = logging.getLogger(__name__)


class App:
    def __init__(self, settings: GameSettings | None = None) -> None:
        pygame.init()
        self.screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
        pygame.display.set_caption(WINDOW_TITLE)
        self.clock = pygame.time.Clock()

        context = ViewContext(
            screen_size=(WINDOW_WIDTH, WINDOW_HEIGHT),
            settings=settings or GameSettings(),
        )
        self.views = ViewManager(context)
        self.views.register(RhythmView)
        self.views.push(RhythmView.name)

    def run(self) -> None:
        running = True
        while running:
            dt_ms = self.clock.tick(FPS)
            for event in pygame.event.get():
                if event.type == pygame.QUIT or not self.views.handle_event(event):
                    running = False
                    break
            if running and not self.views.update(dt_ms):
                running = False
            self.views.draw(self.screen)
            pygame.display.flip()

        logger.info("Shutting down")
        self.views.pop()
        pygame.quit()
