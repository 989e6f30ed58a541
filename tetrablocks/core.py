"""The controller that switches screens and dialogs, and the interfaces of both."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, TypeVar

from tetrablocks.assets import Assets

if TYPE_CHECKING:
    from tetrablocks.renderer import Renderer

# Input codes passed to on_key handlers.
RELEASE = 0
PRESS = 1
MOUSE_BUTTON_LEFT = 0
KEY_ESCAPE = 256


class Controller(ABC):
    """Owns the shared assets and decides which screen and dialog are active."""

    def __init__(self, assets: Assets | None = None) -> None:
        self.assets = assets if assets is not None else Assets()

    @abstractmethod
    def go(self, screen: Screen | None) -> None:
        """Make ``screen`` the active screen."""

    @abstractmethod
    def show(self, dialog: Dialog | None) -> None:
        """Put ``dialog`` on top of the active screen; None removes it."""

    @abstractmethod
    def hide(self) -> None:
        """Remove the dialog that is shown, if any."""

    @abstractmethod
    def exit(self) -> None:
        """Leave the game."""

    _S = TypeVar("_S", bound="Screen")

    def to(self, screen_class: type[_S]) -> None:
        """Build a new screen of ``screen_class`` bound to this controller and go to it."""
        self.go(screen_class(self))


class Screen(ABC):
    """A full-window view of the game."""

    def __init__(self, controller: Controller | None = None) -> None:
        self.controller = controller

    @abstractmethod
    def on_create(self) -> None:
        """Set up the screen once it becomes active."""

    @abstractmethod
    def on_clear(self) -> None:
        """Release what the screen holds before it goes away."""

    @abstractmethod
    def on_draw(self, renderer: Renderer) -> None:
        """Draw the screen."""

    @abstractmethod
    def on_update(self, dt: float) -> None:
        """Advance by ``dt`` seconds."""

    @abstractmethod
    def on_resize(self, w: int, h: int) -> None:
        """Lay the screen out for a view of ``w`` x ``h``."""

    @abstractmethod
    def on_key(self, key: int, action: int, mods: int) -> None:
        """Handle a key or mouse button event."""

    @abstractmethod
    def on_cursor(self, x: float, y: float) -> None:
        """Handle a cursor move."""


class Dialog(ABC):
    """A modal box drawn over the active screen."""

    def __init__(self, controller: Controller) -> None:
        self.controller = controller

    @abstractmethod
    def on_create(self) -> None:
        """Set up the dialog once it is shown."""

    @abstractmethod
    def on_clear(self) -> None:
        """Release what the dialog holds before it goes away."""

    @abstractmethod
    def on_draw(self, renderer: Renderer) -> None:
        """Draw the dialog."""

    @abstractmethod
    def on_update(self, dt: float) -> None:
        """Advance by ``dt`` seconds."""

    @abstractmethod
    def on_resize(self, x: int, y: int, w: int, h: int) -> None:
        """Place the dialog in the box (x, y, w, h)."""

    @abstractmethod
    def on_key(self, key: int, action: int, mods: int) -> None:
        """Handle a key or mouse button event."""

    @abstractmethod
    def on_cursor(self, x: float, y: float) -> None:
        """Handle a cursor move."""