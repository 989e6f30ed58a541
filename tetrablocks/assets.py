"""Fonts shared by every screen and dialog."""

from __future__ import annotations

import os

from tetrablocks.font import Font

TITLE_FONT_SIZE = 64
SMALL_FONT_SIZE = 18
MAIN_FONT_SIZE = 48


class Assets:
    """The title, small and main fonts of the game."""

    def __init__(self) -> None:
        self.font_title = Font(TITLE_FONT_SIZE)
        self.font_small = Font(SMALL_FONT_SIZE)
        self.font = Font(MAIN_FONT_SIZE)

    def init(self, path: str | os.PathLike[str] | None) -> None:
        """Load all fonts from one font file (None: the built-in font)."""
        self.font.load(path)
        self.font_title.load(path)
        self.font_small.load(path)

    def clear(self) -> None:
        """Release the glyphs and atlases of all fonts."""
        self.font.clear()
        self.font_title.clear()
        self.font_small.clear()