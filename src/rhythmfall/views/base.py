"""View protocol, ViewContext, ViewAction, and ViewManager."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal, Protocol, runtime_checkable

import pygame

from rhythmfall.settings import GameSettings


@dataclass
class ViewContext:
    """Shared state passed to views on entry."""

    screen_size: tuple[int, int]
    settings: GameSettings = field(default_factory=GameSettings)


@dataclass
class ViewAction:
    """Navigation command returned by views."""

    kind: Literal["pop", "quit"]


@runtime_checkable
class View(Protocol):
    """A full-screen game state."""

    name: str

    def on_enter(self, context: ViewContext) -> None: ...
    def on_exit(self) -> None: ...
    def handle_event(self, event: pygame.event.Event) -> ViewAction | None: ...
    def update(self, dt_ms: float) -> ViewAction | None: ...
    def draw(self, surface: pygame.Surface) -> None: ...


class ViewManager:
    """Owns the view stack and dispatches the game loop to the active view."""

    def __init__(self, context: ViewContext) -> None:
        self._registry: dict[str, type] = {}
        self._stack: list[View] = []
        self._context = context

    def register(self, view_cls: type) -> None:
        self._registry[view_cls.name] = view_cls

    def push(self, view_name: str) -> None:
        view = self._registry[view_name]()
        view.on_enter(self._context)
        self._stack.append(view)

    def pop(self) -> None:
        if self._stack:
            self._stack.pop().on_exit()

    @property
    def active_view(self) -> View | None:
        return self._stack[-1] if self._stack else None

    def handle_event(self, event: pygame.event.Event) -> bool:
        if (view := self.active_view) is None:
            return False
        return self._process_action(view.handle_event(event))

    def update(self, dt_ms: float) -> bool:
        if (view := self.active_view) is None:
            return False
        return self._process_action(view.update(dt_ms))

    def draw(self, surface: pygame.Surface) -> None:
        if (view := self.active_view) is not None:
            view.draw(surface)

    def _process_action(self, action: ViewAction | None) -> bool:
        if action is None:
            return True
        if action.kind == "quit":
            return False
        elif action.kind == "pop":
            self.pop()
        return self.active_view is not None
