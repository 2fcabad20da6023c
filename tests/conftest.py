"""Shared fixtures for game loop tests."""

from __future__ import annotations

import os

import pytest

from rhythmfall.game import GameLoopController
from rhythmfall.models import FallingSymbol, Position
from rhythmfall.renderer.colors import SYMBOL_PALETTE
from rhythmfall.settings import GameSettings

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")


class FakeTicker:
    """Stands in for the periodic timer; tests call update() by hand."""

    def __init__(self) -> None:
        self.running = False
        self.starts = 0
        self.stops = 0

    def start(self) -> None:
        self.running = True
        self.starts += 1

    def stop(self) -> None:
        self.running = False
        self.stops += 1


class Recorder:
    def __init__(self) -> None:
        self.calls = 0

    def __call__(self) -> None:
        self.calls += 1


def make_symbol(y: int, character: str = "W", x: int = 100) -> FallingSymbol:
    return FallingSymbol(Position(x, y), character, SYMBOL_PALETTE[character])


def make_game(**overrides) -> tuple[GameLoopController, FakeTicker, Recorder, Recorder]:
    """A game whose symbols fall 10 pixels per 30 ms tick."""
    values = dict(
        total_spawns=1,
        spawn_interval_ms=30,
        tick_interval_ms=30,
        speed_factor=3,
        seed=7,
    )
    values.update(overrides)
    ticker = FakeTicker()
    redraws = Recorder()
    quits = Recorder()
    game = GameLoopController(
        GameSettings(**values),
        tick_source=ticker,
        on_redraw=redraws,
        on_quit=quits,
    )
    return game, ticker, redraws, quits


@pytest.fixture
def idle_game():
    """A started game that never spawns on its own and cannot end."""
    game, ticker, redraws, quits = make_game(spawn_interval_ms=1_000_000)
    game.handle_input("space")
    return game
