"""A clickable text button."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING

from tetrablocks.constants import (
    BUTTON_BORDER,
    COLOR_BTN_BG,
    COLOR_BTN_BG_HOVER,
    COLOR_BTN_TEXT,
)
from tetrablocks.core import MOUSE_BUTTON_LEFT, PRESS, Controller
from tetrablocks.font import Align
from tetrablocks.utils import in_rect

if TYPE_CHECKING:
    from tetrablocks.renderer import Renderer

Callback = Callable[[], None]


class Button:
    """A bordered label at ``pos`` that runs a callback when clicked."""

    def __init__(self, controller: Controller) -> None:
        self.controller = controller
        self.pos: tuple[float, float] = (0.0, 0.0)
        self.hover = False
        self.text = ""
        self._size: tuple[float, float] = (0.0, 0.0)
        self._callback: Callback | None = None
        self._delta = 0.0

    @property
    def size(self) -> tuple[float, float]:
        return self._size

    @property
    def _font(self):
        return self.controller.assets.font

    def on_create(
        self,
        text: str,
        callback: Callback | None,
        padding: Sequence[float] = (32.0, 16.0),
    ) -> None:
        """Set the label and the action, and size the button around the label."""
        font = self._font
        self._size = (
            float(padding[0] + font.width(text)),
            float(padding[1] + font.size),
        )
        self.text = text
        self._callback = callback
        self._delta = float(font.height(text) - font.size) * 2.0

    def on_clear(self) -> None:
        """Drop the callback; clicks do nothing afterwards."""
        self._callback = None

    def on_draw(self, renderer: Renderer) -> None:
        """Draw the border, the background and the centred label."""
        x, y = self.pos
        w, h = self._size
        accent = COLOR_BTN_BG_HOVER if self.hover else COLOR_BTN_TEXT
        renderer.fill(accent)
        renderer.rect(x, y, w, h)
        renderer.fill(COLOR_BTN_BG)
        renderer.rect(
            x + BUTTON_BORDER,
            y + BUTTON_BORDER,
            w - 2 * BUTTON_BORDER,
            h - 2 * BUTTON_BORDER,
        )
        renderer.fill(accent)
        renderer.text(
            self._font,
            self.text,
            (x + w / 2.0, y + h / 2.0 - self._delta),
            Align.CENTER,
        )

    def on_key(self, key: int, action: int, mods: int) -> None:
        """Run the callback on a left-button press over the button."""
        if key == MOUSE_BUTTON_LEFT and action == PRESS and self.hover and self._callback:
            self._callback()

    def on_cursor(self, x: float, y: float) -> None:
        """Track whether the cursor is over the button."""
        self.hover = in_rect((*self.pos, *self._size), (x, y))