"""Core data models shared across the engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from rhythmfall.config import FEEDBACK_LIFETIME_MS, SYMBOL_SIZE

Color = tuple[int, ...]


class GameState(Enum):
    READY = "ready"
    PLAYING = "playing"
    GAME_ENDED = "game_ended"


class Verdict(Enum):
    TOO_SOON = "TOO SOON!"
    INCORRECT = "INCORRECT!"
    PERFECT = "PERFECT!"
    NICE = "NICE!"

    @property
    def label(self) -> str:
        return self.value

    @property
    def is_hit(self) -> bool:
        return self in (Verdict.PERFECT, Verdict.NICE)


@dataclass
class Position:
    x: int
    y: int

    def copy(self) -> Position:
        return Position(self.x, self.y)


@dataclass
class FallingSymbol:
    """A single falling target the player has to strike."""

    position: Position
    character: str
    color: Color
    size: int = SYMBOL_SIZE

    def advance(self, dy: int) -> None:
        self.position.y += dy

    def matches(self, key: str) -> bool:
        return self.character == key


@dataclass
class FeedbackText:
    """Short-lived message drawn where a symbol was judged."""

    message: str
    position: Position
    color: Color
    lifetime_ms: int = FEEDBACK_LIFETIME_MS
    duration_ms: int = FEEDBACK_LIFETIME_MS

    def decay(self, dt: int) -> None:
        self.lifetime_ms -= dt

    def is_expired(self) -> bool:
        return self.lifetime_ms <= 0

    @property
    def alpha(self) -> int:
        if self.duration_ms <= 0:
            return 0
        remaining = max(0, min(self.lifetime_ms, self.duration_ms))
        return int(255 * remaining / self.duration_ms)


@dataclass(frozen=True)
class Judgement:
    verdict: Verdict
    score_delta: int = 0

    @property
    def message(self) -> str:
        if self.score_delta > 0:
            return f"{self.verdict.label} +{self.score_delta}"
        return self.verdict.label


@dataclass
class ScoreState:
    """Score, combo and spawn budget for one game."""

    spawns_remaining: int
    score: int = 0
    combo: int = 0
    max_combo: int = 0
    missed: int = 0
    verdict_counts: dict[Verdict, int] = field(
        default_factory=lambda: {v: 0 for v in Verdict}
    )

    def reset(self, total_spawns: int) -> None:
        self.spawns_remaining = total_spawns
        self.score = 0
        self.combo = 0
        self.max_combo = 0
        self.missed = 0
        self.verdict_counts = {v: 0 for v in Verdict}

    def take_spawn(self) -> bool:
        """Consume one spawn from the budget. Returns False when it is exhausted."""
        if self.spawns_remaining <= 0:
            return False
        self.spawns_remaining -= 1
        return True

    def apply(self, judgement: Judgement) -> None:
        self.verdict_counts[judgement.verdict] += 1
        if judgement.verdict.is_hit:
            self.score += judgement.score_delta
            self.combo += 1
            self.max_combo = max(self.max_combo, self.combo)
        else:
            self.combo = 0

    def record_miss(self) -> None:
        self.missed += 1
        self.combo = 0
