"""Two-line message panel shown while the game is not running."""

from __future__ import annotations

from rhythmfall.config import OVERLAY_HEIGHT, OVERLAY_TOP, WINDOW_WIDTH
from rhythmfall.models import Position

START_LINES = ("Press SPACE to start!", "Press the right keys to get score!")
RESTART_PROMPT = "Press SPACE to start a new game!"


class MessageOverlay:
    def __init__(
        self,
        position: Position | None = None,
        width: int = WINDOW_WIDTH,
        height: int = OVERLAY_HEIGHT,
    ) -> None:
        self.position = position or Position(0, OVERLAY_TOP)
        self.width = width
        self.height = height
        self.line1 = ""
        self.line2 = ""

    @property
    def lines(self) -> tuple[str, str]:
        return self.line1, self.line2

    def show_start(self) -> None:
        self.line1, self.line2 = START_LINES

    def show_game_over(self, score: int) -> None:
        self.line1 = f"You scored: {score}"
        self.line2 = RESTART_PROMPT

    def set_line1(self, message: str) -> None:
        self.line1 = message

    def set_line2(self, message: str) -> None:
        self.line2 = message
