"""Game settings: defaults from config, optionally loaded from a JSON file."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any

from rhythmfall.config import (
    ONLY_VALID_KEYS,
    SPAWN_INTERVAL_MS,
    SPEED_FACTOR,
    TICK_INTERVAL_MS,
    TOTAL_SPAWNS,
)
from rhythmfall.renderer.colors import SYMBOL_PALETTE

logger = logging.getLogger(__name__)


class SettingsError(ValueError):
    """Raised when settings are malformed or out of range."""


@dataclass
class GameSettings:
    total_spawns: int = TOTAL_SPAWNS
    spawn_interval_ms: int = SPAWN_INTERVAL_MS
    tick_interval_ms: int = TICK_INTERVAL_MS
    speed_factor: int = SPEED_FACTOR
    only_valid_keys: bool = ONLY_VALID_KEYS
    alphabet: str = "".join(SYMBOL_PALETTE)
    seed: int | None = None

    @property
    def fall_per_tick(self) -> int:
        return self.tick_interval_ms // self.speed_factor

    def validate(self) -> GameSettings:
        for name in ("total_spawns", "spawn_interval_ms", "tick_interval_ms", "speed_factor"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise SettingsError(f"{name} must be an integer, got {value!r}")
        if self.total_spawns < 0:
            raise SettingsError("total_spawns must not be negative")
        for name in ("spawn_interval_ms", "tick_interval_ms", "speed_factor"):
            if getattr(self, name) <= 0:
                raise SettingsError(f"{name} must be positive")
        if not isinstance(self.alphabet, str) or not self.alphabet.strip():
            raise SettingsError("alphabet must contain at least one character")
        return self

    def with_overrides(self, **overrides: Any) -> GameSettings:
        """Copy with the given fields replaced; ``None`` values are ignored."""
        known = {f.name for f in fields(self)}
        changes = {k: v for k, v in overrides.items() if k in known and v is not None}
        return replace(self, **changes)


def load_settings(path: Path | None) -> GameSettings:
    """Load settings from the ``"game"`` object of a JSON file.

    A missing file yields the defaults. Unknown keys are ignored.
    """
    if path is None or not path.exists():
        return GameSettings()
    try:
        data = json.loads(path.read_text())
    except (OSError, json.JSONDecodeError) as exc:
        raise SettingsError(f"cannot read settings from {path}: {exc}") from exc

    game = data.get("game", {}) if isinstance(data, dict) else None
    if not isinstance(game, dict):
        raise SettingsError(f"{path}: \"game\" must be an object")

    known = GameSettings.__dataclass_fields__
    unknown = sorted(k for k in game if k not in known)
    if unknown:
        logger.warning("Ignoring unknown settings in %s: %s", path, ", ".join(unknown))
    try:
        return GameSettings(**{k: v for k, v in game.items() if k in known}).validate()
    except TypeError as exc:
        raise SettingsError(f"{path}: {exc}") from exc
