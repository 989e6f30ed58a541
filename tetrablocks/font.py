"""Bitmap fonts: glyphs rasterised into a single-channel texture atlas."""

from __future__ import annotations

import errno
import os
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple

import pygame

from tetrablocks.texture import Texture, TextureFilter, TextureFormat, TextureWrap

CODEPOINT_LATIN = (32, 127)


class Align(Enum):
    """Horizontal alignment of text relative to its anchor point."""

    CENTER = "center"
    START = "start"
    END = "end"


@dataclass(frozen=True)
class Glyph:
    """Metrics of one character and its place in the atlas."""

    size: tuple[int, int]
    offset: tuple[int, int]
    advance: int
    uv_a: tuple[float, float]
    uv_b: tuple[float, float]


class _Bitmap(NamedTuple):
    width: int
    height: int
    left: int
    top: int
    advance: int
    data: bytes


def _rasterize(face: pygame.font.Font, char: str, ascent: int) -> _Bitmap | None:
    try:
        metrics = face.metrics(char)
        if not metrics or metrics[0] is None:
            return None
        surface = face.render(char, True, (255, 255, 255), (0, 0, 0))
    except (pygame.error, ValueError):
        return None
    minx, maxx, miny, maxy, advance = metrics[0]
    sw, sh = surface.get_size()
    x0 = min(max(minx, 0), sw)
    y0 = min(max(ascent - maxy, 0), sh)
    width = max(0, min(maxx - minx, sw - x0))
    height = max(0, min(maxy - miny, sh - y0))
    red = pygame.image.tobytes(surface, "RGB")[0::3]
    data = b"".join(
        red[(y0 + r) * sw + x0:(y0 + r) * sw + x0 + width] for r in range(height)
    )
    return _Bitmap(width, height, minx, maxy, advance, data)


class Font:
    """A font of one pixel size whose glyphs live in one texture."""

    def __init__(self, size: int = 24) -> None:
        if not 0 <= size <= 255:
            raise ValueError(f"font size {size} out of range 0..255")
        self.size = size
        self.texture = Texture()
        self._glyphs: dict[int, Glyph] = {}

    def load(
        self,
        path: str | os.PathLike[str] | None = None,
        ranges: Iterable[Sequence[int]] = (CODEPOINT_LATIN,),
    ) -> None:
        """Rasterise the inclusive code point ``ranges`` of a font file (None: built-in font)."""
        if not self.size:
            raise ValueError("cannot load a font of size zero")
        if path is not None:
            path = os.fspath(path)
            if not os.path.isfile(path):
                raise FileNotFoundError(errno.ENOENT, "font file not found", path)
        pygame.font.init()
        face = pygame.font.Font(path, self.size)

        spans = [(int(lo), int(hi)) for lo, hi in ranges]
        area = sum(hi - lo for lo, hi in spans) * self.size * self.size
        side = 64
        while side * side < area:
            side *= 2

        texture = Texture()
        texture.alloc(side, side, TextureFormat.MONO)
        glyphs: dict[int, Glyph] = {}
        ascent = face.get_ascent()
        ox, oy, row_height = 1, 1, -1

        for lo, hi in spans:
            for code in range(lo, hi + 1):
                bitmap = _rasterize(face, chr(code), ascent)
                if bitmap is None:
                    continue
                if ox + bitmap.width > side:
                    ox = 1
                    oy += row_height + 1
                    row_height = -1
                if bitmap.width and bitmap.height:
                    texture.subdata(
                        ox, oy, bitmap.width, bitmap.height, TextureFormat.MONO, bitmap.data
                    )
                glyphs[code] = Glyph(
                    size=(bitmap.width, bitmap.height),
                    offset=(bitmap.left, bitmap.top),
                    advance=bitmap.advance,
                    uv_a=(ox / side, oy / side),
                    uv_b=((ox + bitmap.width) / side, (oy + bitmap.height) / side),
                )
                ox += bitmap.width + 1
                row_height = max(row_height, bitmap.height)

        texture.mipmaps = True
        texture.wrap_s = texture.wrap_t = TextureWrap.CLAMP_EDGE
        texture.min_filter = TextureFilter.LINEAR
        texture.mag_filter = TextureFilter.LINEAR
        self.texture = texture
        self._glyphs = glyphs

    def clear(self) -> None:
        """Drop all glyphs and the atlas; the font size becomes zero."""
        self._glyphs.clear()
        self.texture.dealloc()
        self.size = 0

    def at(self, code: int) -> Glyph | None:
        """Return the glyph of a code point, or None if it was not loaded."""
        return self._glyphs.get(code)

    def width(self, text: str) -> int:
        """Total advance of the known characters of ``text``."""
        return sum(g.advance for g in map(self.at, map(ord, text)) if g is not None)

    def height(self, text: str) -> int:
        """Tallest glyph bitmap among the known characters of ``text``."""
        return max(
            (g.size[1] for g in map(self.at, map(ord, text)) if g is not None),
            default=0,
        )