"""Symbol alphabet and spawning of falling symbols."""

from __future__ import annotations

import random

from rhythmfall.config import SYMBOL_SIZE
from rhythmfall.models import Color, FallingSymbol, Position
from rhythmfall.renderer.colors import SYMBOL_FALLBACK, SYMBOL_PALETTE


def build_palette(alphabet: str) -> dict[str, Color]:
    """Map each character of *alphabet* to its draw color, preserving order."""
    palette: dict[str, Color] = {}
    for char in alphabet.upper():
        if char.isspace() or char in palette:
            continue
        palette[char] = SYMBOL_PALETTE.get(char, SYMBOL_FALLBACK)
    if not palette:
        raise ValueError("alphabet must contain at least one character")
    return palette


class SymbolSet:
    """The characters a game can spawn, each paired with its color."""

    def __init__(
        self,
        palette: dict[str, Color] | None = None,
        only_valid_keys: bool = True,
        size: int = SYMBOL_SIZE,
    ) -> None:
        self.palette = dict(palette) if palette else dict(SYMBOL_PALETTE)
        self.only_valid_keys = only_valid_keys
        self.size = size

    @property
    def characters(self) -> tuple[str, ...]:
        return tuple(self.palette)

    def is_valid_key(self, key: str) -> bool:
        if not self.only_valid_keys:
            return True
        return key in self.palette

    def grid_columns(self, width: int) -> int:
        """Number of symbol-sized columns between the one-cell side margins."""
        return max(1, (width - 2 * self.size) // self.size)

    def spawn(self, rng: random.Random, width: int) -> FallingSymbol:
        """Create a symbol just above the playfield in a random grid column."""
        column = rng.randrange(self.grid_columns(width))
        character = rng.choice(self.characters)
        return FallingSymbol(
            position=Position(column * self.size + self.size, -self.size),
            character=character,
            color=self.palette[character],
            size=self.size,
        )
