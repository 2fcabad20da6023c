"""Views subsystem — View protocol, ViewManager, and the game view."""

from rhythmfall.views.base import View, ViewAction, ViewContext, ViewManager

__all__ = ["View", "ViewAction", "ViewContext", "ViewManager"]
