"""Batched 2-D drawing of filled rectangles, images and text onto a surface."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

import pygame

from tetrablocks.font import Align, Font
from tetrablocks.texture import Texture, TextureFormat

_MODE_NONE = 0
_MODE_FILL = 1
_MODE_IMAGE = 2
_MODE_TEXT = 3

_CACHE_LIMIT = 32


def pack_vertex(
    kind: int,
    pos: Sequence[float],
    color: int,
    uv: Sequence[float],
) -> tuple[int, int, int]:
    """Pack a vertex into (position and kind, colour, texture coordinate) words."""
    px = int(pos[0] + (1 << 14)) & 0xFFFF
    py = int(pos[1] + (1 << 14)) & 0xFFFF
    pos_type = (((kind & 0b11) << 30) | (px << 15) | py) & 0xFFFFFFFF
    u = int(uv[0] * 0xFFFF) & 0xFFFF
    v = int(uv[1] * 0xFFFF) & 0xFFFF
    return pos_type, color & 0xFFFFFFFF, (u << 16) | v


def _argb(color: int) -> tuple[int, int, int, int]:
    c = color & 0xFFFFFFFF
    return (c >> 16) & 0xFF, (c >> 8) & 0xFF, c & 0xFF, c >> 24


@dataclass(frozen=True)
class _Quad:
    mode: int
    x: float
    y: float
    w: float
    h: float
    color: int
    texture: Texture | None
    uv: tuple[float, float, float, float]


def _dest_rect(quad: _Quad) -> pygame.Rect | None:
    x, w = (quad.x + quad.w, -quad.w) if quad.w < 0 else (quad.x, quad.w)
    y, h = (quad.y + quad.h, -quad.h) if quad.h < 0 else (quad.y, quad.h)
    rect = pygame.Rect(round(x), round(y), round(w), round(h))
    return rect if rect.w > 0 and rect.h > 0 else None


def _source_rect(uv: tuple[float, float, float, float], size: tuple[int, int]) -> pygame.Rect | None:
    width, height = size
    u0, u1 = sorted((uv[0], uv[2]))
    v0, v1 = sorted((uv[1], uv[3]))
    x0 = min(max(round(u0 * width), 0), width)
    x1 = min(max(round(u1 * width), 0), width)
    y0 = min(max(round(v0 * height), 0), height)
    y1 = min(max(round(v1 * height), 0), height)
    if x1 <= x0 or y1 <= y0:
        return None
    return pygame.Rect(x0, y0, x1 - x0, y1 - y0)


def _make_surface(texture: Texture, tint: int | None) -> pygame.Surface:
    size = texture.size
    pixels = texture.pixels
    if texture.format is TextureFormat.MONO:
        count = size[0] * size[1]
        if tint is not None:
            red, green, blue, alpha = _argb(tint)
            table = bytes(v * alpha // 255 for v in range(256))
            out = bytearray(count * 4)
            out[0::4] = bytes([red]) * count
            out[1::4] = bytes([green]) * count
            out[2::4] = bytes([blue]) * count
            out[3::4] = pixels.translate(table)
            return pygame.image.frombytes(bytes(out), size, "RGBA")
        out = bytearray(count * 3)
        out[0::3] = pixels
        out[1::3] = pixels
        out[2::3] = pixels
        return pygame.image.frombytes(bytes(out), size, "RGB")
    mode = "RGB" if texture.format is TextureFormat.RGB else "RGBA"
    return pygame.image.frombytes(pixels, size, mode)


class Renderer:
    """Collects quads and draws them onto ``target`` whenever the paint mode changes."""

    def __init__(self, target: pygame.Surface | None = None) -> None:
        self.target = target
        self._owns_target = target is None
        self.view: tuple[int, int] = (0, 0)
        self.matrix: tuple[tuple[float, float, float], tuple[float, float, float]] | None = None
        self.clear_color = 0xFF000000
        self._quads: list[_Quad] = []
        self._mode = _MODE_NONE
        self._color = 0
        self._texture: Texture | None = None
        self._uv: tuple[float, float, float, float] = (0.0, 0.0, 1.0, 1.0)
        self._cache: dict[tuple[int, int | None], tuple[Texture, int, pygame.Surface]] = {}

    def resize(self, w: int, h: int) -> None:
        """Set the view size and the matching orthographic projection."""
        if w <= 0 or h <= 0:
            raise ValueError(f"view size must be positive, got {(w, h)}")
        self.view = (w, h)
        self.matrix = ((2.0 / w, 2.0 / -h, 2.0), (-1.0, 1.0, -1.0))
        if self._owns_target and (self.target is None or self.target.get_size() != (w, h)):
            self.target = pygame.Surface((w, h), pygame.SRCALPHA)

    def clear(self, color: int = 0xFF000000) -> None:
        """Set the colour each frame starts with."""
        self.clear_color = color & 0xFFFFFFFF

    def begin_frame(self) -> None:
        """Fill the target with the clear colour."""
        self._require_target().fill(_argb(self.clear_color))

    def end_frame(self) -> None:
        """Draw everything still waiting in the batch."""
        self._flush()

    def fill(self, color: int = 0xFFFFFFFF) -> None:
        """Paint following rectangles in a solid ARGB colour."""
        self._switch(_MODE_FILL)
        self._color = color & 0xFFFFFFFF

    def image(
        self,
        texture: Texture,
        uv_a: Sequence[float] = (0.0, 0.0),
        uv_b: Sequence[float] = (1.0, 1.0),
    ) -> None:
        """Paint following rectangles with the ``uv_a``..``uv_b`` part of a texture."""
        self._switch(_MODE_IMAGE)
        self._texture = texture
        self._uv = (float(uv_a[0]), float(uv_a[1]), float(uv_b[0]), float(uv_b[1]))

    def rect(self, x: float, y: float, w: float, h: float) -> None:
        """Queue a rectangle in the current paint."""
        self._quads.append(
            _Quad(self._mode, x, y, w, h, self._color, self._texture, self._uv)
        )

    def text(
        self,
        font: Font,
        text: str,
        pos: Sequence[float],
        align: Align = Align.START,
    ) -> None:
        """Queue ``text`` with its baseline at ``pos``, in the current fill colour."""
        self._switch(_MODE_TEXT)
        texture = font.texture
        px, py = float(pos[0]), float(pos[1])
        if align is Align.CENTER:
            px -= font.width(text) / 2.0
        elif align is Align.END:
            px -= font.width(text)
        for char in text:
            glyph = font.at(ord(char))
            if glyph is None:
                continue
            self._quads.append(
                _Quad(
                    _MODE_TEXT,
                    px + glyph.offset[0],
                    py - glyph.offset[1],
                    glyph.size[0],
                    glyph.size[1],
                    self._color,
                    texture,
                    (*glyph.uv_a, *glyph.uv_b),
                )
            )
            px += glyph.advance

    def _require_target(self) -> pygame.Surface:
        if self.target is None:
            raise RuntimeError("renderer has no target surface; call resize first")
        return self.target

    def _switch(self, mode: int) -> None:
        if self._mode != mode:
            self._flush()
            self._mode = mode

    def _flush(self) -> None:
        if not self._quads or self._mode == _MODE_NONE:
            return
        target = self._require_target()
        for quad in self._quads:
            self._draw(target, quad)
        self._quads.clear()

    def _draw(self, target: pygame.Surface, quad: _Quad) -> None:
        dest = _dest_rect(quad)
        if dest is None:
            return
        if quad.mode == _MODE_FILL:
            rgba = _argb(quad.color)
            if rgba[3] == 255:
                target.fill(rgba, dest)
            elif rgba[3]:
                overlay = pygame.Surface(dest.size, pygame.SRCALPHA)
                overlay.fill(rgba)
                target.blit(overlay, dest)
            return
        if quad.mode not in (_MODE_IMAGE, _MODE_TEXT):
            return
        texture = quad.texture
        if texture is None or not texture.allocated:
            return
        area = _source_rect(quad.uv, texture.size)
        if area is None:
            return
        tint = quad.color if quad.mode == _MODE_TEXT else None
        piece = self._surface_for(texture, tint).subsurface(area)
        if piece.get_size() != dest.size:
            piece = pygame.transform.smoothscale(piece, dest.size)
        target.blit(piece, dest)

    def _surface_for(self, texture: Texture, tint: int | None) -> pygame.Surface:
        key = (id(texture), tint)
        entry = self._cache.get(key)
        if entry is not None and entry[0] is texture and entry[1] == texture.revision:
            return entry[2]
        surface = _make_surface(texture, tint)
        if len(self._cache) >= _CACHE_LIMIT:
            self._cache.clear()
        self._cache[key] = (texture, texture.revision, surface)
        return surface