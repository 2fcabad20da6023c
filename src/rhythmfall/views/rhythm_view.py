"""The rhythm game view: feeds pygame input and frame time to the game loop."""

from __future__ import annotations

import pygame

from rhythmfall.clock import FixedTimer
from rhythmfall.game import GameLoopController
from rhythmfall.judge import PlayfieldLayout
from rhythmfall.models import GameState
from rhythmfall.renderer import colors as colors_mod
from rhythmfall.renderer.hud import render_score
from rhythmfall.renderer.panel import render_overlay
from rhythmfall.renderer.playfield import render_feedback, render_symbols, render_target_markers
from rhythmfall.views.base import ViewAction, ViewContext


class RhythmView:
    name = "rhythm"

    def __init__(self) -> None:
        self._game: GameLoopController | None = None
        self._timer: FixedTimer | None = None
        self._dirty = True
        self._quit_requested = False

    def on_enter(self, context: ViewContext) -> None:
        width, height = context.screen_size
        self._timer = FixedTimer(context.settings.tick_interval_ms, self._tick)
        self._game = GameLoopController(
            context.settings,
            tick_source=self._timer,
            layout=PlayfieldLayout(width=width, height=height),
            on_redraw=self._request_redraw,
            on_quit=self._request_quit,
        )
        self._dirty = True
        self._quit_requested = False

    def on_exit(self) -> None:
        if self._timer:
            self._timer.stop()

    @property
    def game(self) -> GameLoopController | None:
        return self._game

    def _tick(self) -> None:
        if self._game:
            self._game.update()

    def _request_redraw(self) -> None:
        self._dirty = True

    def _request_quit(self) -> None:
        self._quit_requested = True

    def handle_event(self, event: pygame.event.Event) -> ViewAction | None:
        if event.type != pygame.KEYDOWN or self._game is None:
            return None
        self._game.handle_input(pygame.key.name(event.key))
        if self._quit_requested:
            return ViewAction(kind="quit")
        return None

    def update(self, dt_ms: float) -> ViewAction | None:
        if self._timer:
            self._timer.advance(dt_ms)
        return None

    def draw(self, surface: pygame.Surface) -> None:
        if self._game is None or not self._dirty:
            return
        self._dirty = False
        frame = self._game.snapshot()

        surface.fill(colors_mod.BG)
        if frame.state == GameState.PLAYING:
            render_symbols(surface, frame.symbols)
            render_feedback(surface, frame.feedback)
        else:
            render_overlay(surface, self._game.overlay, frame.overlay_lines)
        render_target_markers(surface, frame.layout)
        render_score(surface, frame.score)
