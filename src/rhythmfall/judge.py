"""Hit judging — compare a key press against the symbol closest to the target line."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from rhythmfall.config import (
    BASE_POINTS,
    JUDGE_MARGIN,
    PERFECT_LINE_HEIGHT,
    PERFECT_MULTIPLIER,
    SYMBOL_SIZE,
    WINDOW_HEIGHT,
    WINDOW_WIDTH,
)
from rhythmfall.models import FallingSymbol, Judgement, Verdict


@dataclass(frozen=True)
class PlayfieldLayout:
    """Playfield geometry that the judging thresholds derive from."""

    width: int = WINDOW_WIDTH
    height: int = WINDOW_HEIGHT
    symbol_size: int = SYMBOL_SIZE
    perfect_line: int = PERFECT_LINE_HEIGHT
    judge_margin: int = JUDGE_MARGIN

    @property
    def midpoint(self) -> int:
        return self.height // 2

    @property
    def perfect_threshold(self) -> int:
        # Symbols strictly below this y are inside the perfect band.
        return self.perfect_line - self.symbol_size // 2

    @property
    def judge_cutoff(self) -> int:
        return self.height - self.judge_margin


def select_target(symbols: Sequence[FallingSymbol], layout: PlayfieldLayout) -> int | None:
    """Index of the oldest symbol that has not yet fallen past the judging zone."""
    for index, symbol in enumerate(symbols):
        if symbol.position.y < layout.judge_cutoff:
            return index
    return None


def judge_press(
    target: FallingSymbol,
    key: str,
    combo: int,
    layout: PlayfieldLayout,
) -> Judgement:
    """Grade a key press against *target*.

    The checks run in order: a symbol still in the upper half is TOO_SOON
    whatever the key, then a wrong key is INCORRECT, then the position decides
    between PERFECT (double points) and NICE.
    """
    y = target.position.y
    if y < layout.midpoint:
        return Judgement(Verdict.TOO_SOON)
    if not target.matches(key):
        return Judgement(Verdict.INCORRECT)

    points = BASE_POINTS + combo
    if y > layout.perfect_threshold:
        return Judgement(Verdict.PERFECT, points * PERFECT_MULTIPLIER)
    return Judgement(Verdict.NICE, points)
