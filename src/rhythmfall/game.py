"""Game loop controller — spawning, motion, judging and the Ready/Playing/GameEnded cycle."""

from __future__ import annotations

import logging
import random
import sys
from collections.abc import Callable
from dataclasses import dataclass, replace

from rhythmfall.clock import FixedTimer, TickSource
from rhythmfall.config import QUIT_KEY, START_KEY
from rhythmfall.judge import PlayfieldLayout, judge_press, select_target
from rhythmfall.models import (
    FallingSymbol,
    FeedbackText,
    GameState,
    ScoreState,
    Verdict,
)
from rhythmfall.overlay import MessageOverlay
from rhythmfall.renderer import colors
from rhythmfall.settings import GameSettings
from rhythmfall.symbols import SymbolSet, build_palette

logger = logging.getLogger(__name__)

VERDICT_COLORS = {
    Verdict.TOO_SOON: colors.FEEDBACK_TOO_SOON,
    Verdict.INCORRECT: colors.FEEDBACK_INCORRECT,
    Verdict.PERFECT: colors.FEEDBACK_PERFECT,
    Verdict.NICE: colors.FEEDBACK_NICE,
}


def normalize_key(key: str) -> str:
    """Single characters compare upper-case, named keys lower-case."""
    if len(key) == 1:
        return key.upper()
    return key.lower()


@dataclass(frozen=True)
class Frame:
    """Read-only copy of everything the renderer draws."""

    state: GameState
    symbols: tuple[FallingSymbol, ...]
    feedback: tuple[FeedbackText, ...]
    score: int
    combo: int
    overlay_lines: tuple[str, str]
    layout: PlayfieldLayout


class GameLoopController:
    """Owns every symbol, feedback text and counter of a game."""

    def __init__(
        self,
        settings: GameSettings | None = None,
        *,
        tick_source: TickSource | None = None,
        overlay: MessageOverlay | None = None,
        layout: PlayfieldLayout | None = None,
        rng: random.Random | None = None,
        on_redraw: Callable[[], None] | None = None,
        on_quit: Callable[[], None] | None = None,
    ) -> None:
        self.settings = (settings or GameSettings()).validate()
        self.layout = layout or PlayfieldLayout()
        self.symbol_set = SymbolSet(
            build_palette(self.settings.alphabet),
            only_valid_keys=self.settings.only_valid_keys,
            size=self.layout.symbol_size,
        )
        self.tick_source: TickSource = tick_source or FixedTimer(
            self.settings.tick_interval_ms, self.update
        )
        self.overlay = overlay or MessageOverlay(width=self.layout.width)
        self.rng = rng or random.Random(self.settings.seed)
        self._on_redraw = on_redraw
        self._on_quit = on_quit or (lambda: sys.exit(0))

        self.state = GameState.READY
        self.scores = ScoreState(spawns_remaining=self.settings.total_spawns)
        self.symbols: list[FallingSymbol] = []
        self.feedback: list[FeedbackText] = []
        self._spawn_timer = 0
        self.overlay.show_start()

    # -- tick -------------------------------------------------------------

    def update(self) -> None:
        """Advance the game by one tick. Only a redraw request happens unless playing."""
        if self.state == GameState.PLAYING:
            self._update_spawn_timer()
            self._update_symbols()
            self._update_feedback()
            if self.scores.spawns_remaining == 0 and not self.symbols:
                self._end_game()
        self._request_redraw()

    def _update_spawn_timer(self) -> None:
        self._spawn_timer += self.settings.tick_interval_ms
        if self._spawn_timer >= self.settings.spawn_interval_ms:
            self._spawn_symbol()
            self._spawn_timer = 0

    def _spawn_symbol(self) -> None:
        if not self.scores.take_spawn():
            return
        symbol = self.symbol_set.spawn(self.rng, self.layout.width)
        self.symbols.append(symbol)
        logger.debug(
            "Spawned %s at x=%d (%d left)",
            symbol.character, symbol.position.x, self.scores.spawns_remaining,
        )

    def _update_symbols(self) -> None:
        dy = self.settings.fall_per_tick
        remaining: list[FallingSymbol] = []
        for symbol in self.symbols:
            symbol.advance(dy)
            if symbol.position.y > self.layout.height:
                self.scores.record_miss()
            else:
                remaining.append(symbol)
        self.symbols = remaining

    def _update_feedback(self) -> None:
        for text in self.feedback:
            text.decay(self.settings.tick_interval_ms)
        self.feedback = [text for text in self.feedback if not text.is_expired()]

    # -- input ------------------------------------------------------------

    def handle_input(self, key: str) -> None:
        key = normalize_key(key)
        if key == QUIT_KEY:
            logger.info("Quit requested")
            self._on_quit()
        elif self.state == GameState.PLAYING and self.symbol_set.is_valid_key(key):
            if self.symbols:
                self._judge(key)
        elif self.state == GameState.READY and key == START_KEY:
            self._start_game()
        elif self.state == GameState.GAME_ENDED and key == START_KEY:
            self._reset()
            self._request_redraw()

    def _judge(self, key: str) -> None:
        index = select_target(self.symbols, self.layout)
        if index is None:
            return

        target = self.symbols.pop(index)
        judgement = judge_press(target, key, self.scores.combo, self.layout)
        self.scores.apply(judgement)
        self.feedback.append(FeedbackText(
            message=judgement.message,
            position=target.position.copy(),
            color=VERDICT_COLORS[judgement.verdict],
        ))
        logger.debug(
            "%s on %s at y=%d: score=%d combo=%d",
            judgement.verdict.name, target.character, target.position.y,
            self.scores.score, self.scores.combo,
        )

    # -- state transitions ------------------------------------------------

    def _start_game(self) -> None:
        self.state = GameState.PLAYING
        self._spawn_timer = 0
        self.tick_source.start()
        logger.info("Game started with %d spawns", self.scores.spawns_remaining)

    def _end_game(self) -> None:
        self.state = GameState.GAME_ENDED
        self.tick_source.stop()
        self.feedback.clear()
        self.overlay.show_game_over(self.scores.score)
        counts = self.scores.verdict_counts
        logger.info(
            "Game over: score=%d max_combo=%d perfect=%d nice=%d "
            "incorrect=%d too_soon=%d missed=%d",
            self.scores.score, self.scores.max_combo,
            counts[Verdict.PERFECT], counts[Verdict.NICE],
            counts[Verdict.INCORRECT], counts[Verdict.TOO_SOON],
            self.scores.missed,
        )

    def _reset(self) -> None:
        self.state = GameState.READY
        self.scores.reset(self.settings.total_spawns)
        self.symbols.clear()
        self.feedback.clear()
        self._spawn_timer = 0
        self.overlay.show_start()
        logger.info("Ready for a new game")

    # -- rendering --------------------------------------------------------

    def _request_redraw(self) -> None:
        if self._on_redraw is not None:
            self._on_redraw()

    def snapshot(self) -> Frame:
        return Frame(
            state=self.state,
            symbols=tuple(replace(s, position=s.position.copy()) for s in self.symbols),
            feedback=tuple(replace(t, position=t.position.copy()) for t in self.feedback),
            score=self.scores.score,
            combo=self.scores.combo,
            overlay_lines=self.overlay.lines,
            layout=self.layout,
        )
