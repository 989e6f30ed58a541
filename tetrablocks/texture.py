"""In-memory textures: a pixel buffer with sampling settings, loaded from and saved to PNG."""

from __future__ import annotations

import errno
import os
from enum import Enum

import pygame


class TextureWrap(Enum):
    """How coordinates outside 0..1 are mapped back onto the texture."""

    REPEAT = "repeat"
    REPEAT_MIRROR = "repeat_mirror"
    CLAMP_EDGE = "clamp_edge"
    CLAMP_BORDER = "clamp_border"


class TextureFilter(Enum):
    """Sampling filter without mipmaps."""

    LINEAR = "linear"
    NEAREST = "nearest"


class TextureMinFilter(Enum):
    """Minification filter that also picks between mipmap levels."""

    LINEAR_LINEAR = "linear_linear"
    LINEAR_NEAREST = "linear_nearest"
    NEAREST_LINEAR = "nearest_linear"
    NEAREST_NEAREST = "nearest_nearest"


class TextureFormat(Enum):
    """Pixel layout; the value is the number of bytes per pixel."""

    RGBA = 4
    RGB = 3
    MONO = 1

    @property
    def bpp(self) -> int:
        return self.value


def _expand_mono(pixels: bytes) -> bytes:
    out = bytearray(len(pixels) * 3)
    out[0::3] = pixels
    out[1::3] = pixels
    out[2::3] = pixels
    return bytes(out)


class Texture:
    """A 2-D pixel buffer together with its wrap and filter settings."""

    def __init__(self, path: str | os.PathLike[str] | None = None) -> None:
        self.size: tuple[int, int] = (0, 0)
        self.format = TextureFormat.MONO
        self.wrap_s = TextureWrap.REPEAT
        self.wrap_t = TextureWrap.REPEAT
        self.min_filter: TextureFilter | TextureMinFilter = TextureMinFilter.NEAREST_LINEAR
        self.mag_filter = TextureFilter.LINEAR
        self.border: tuple[float, float, float, float] = (0.0, 0.0, 0.0, 0.0)
        self.mipmaps = False
        self.revision = 0
        self._pixels: bytearray | None = None
        if path is not None:
            self.load(path)

    @property
    def bpp(self) -> int:
        return self.format.bpp

    @property
    def allocated(self) -> bool:
        return self._pixels is not None

    @property
    def pixels(self) -> bytes:
        """A copy of the pixel data, row by row; empty when nothing is allocated."""
        return bytes(self._pixels) if self._pixels is not None else b""

    def _require_allocated(self) -> bytearray:
        if self._pixels is None:
            raise RuntimeError("no texture allocated")
        return self._pixels

    def load(self, path: str | os.PathLike[str]) -> None:
        """Read an image file into an RGBA buffer with repeating, mipmapped sampling."""
        path = os.fspath(path)
        if not os.path.isfile(path):
            raise FileNotFoundError(errno.ENOENT, "image file not found", path)
        surface = pygame.image.load(path)
        width, height = surface.get_size()
        self.alloc(width, height, TextureFormat.RGBA, pygame.image.tobytes(surface, "RGBA"))
        self.wrap_s = self.wrap_t = TextureWrap.REPEAT
        self.min_filter = TextureMinFilter.LINEAR_LINEAR
        self.mag_filter = TextureFilter.LINEAR
        self.mipmaps = True

    def alloc(
        self,
        w: int,
        h: int,
        fmt: TextureFormat,
        buffer: bytes | bytearray | None = None,
    ) -> None:
        """Allocate a ``w`` x ``h`` buffer, zero-filled or copied from ``buffer``."""
        if w < 0 or h < 0:
            raise ValueError(f"negative texture size {(w, h)}")
        expected = w * h * fmt.bpp
        if buffer is None:
            pixels = bytearray(expected)
        else:
            pixels = bytearray(buffer)
            if len(pixels) != expected:
                raise ValueError(f"buffer holds {len(pixels)} bytes, {expected} expected")
        self._pixels = pixels
        self.size = (w, h)
        self.format = fmt
        self.revision += 1

    def dealloc(self) -> None:
        """Release the pixel buffer."""
        if self._pixels is not None:
            self._pixels = None
            self.size = (0, 0)
            self.revision += 1

    def subdata(
        self,
        x: int,
        y: int,
        w: int,
        h: int,
        fmt: TextureFormat,
        buffer: bytes | bytearray,
    ) -> None:
        """Overwrite the ``w`` x ``h`` region at (x, y) with ``buffer``."""
        pixels = self._require_allocated()
        if fmt is not self.format:
            raise ValueError(f"cannot write {fmt.name} data into a {self.format.name} texture")
        width, height = self.size
        if x < 0 or y < 0 or w < 0 or h < 0 or x + w > width or y + h > height:
            raise ValueError(f"region {(x, y, w, h)} outside texture of size {self.size}")
        bpp = self.bpp
        row = w * bpp
        if len(buffer) != row * h:
            raise ValueError(f"buffer holds {len(buffer)} bytes, {row * h} expected")
        for r in range(h):
            start = ((y + r) * width + x) * bpp
            pixels[start:start + row] = buffer[r * row:(r + 1) * row]
        self.revision += 1

    def save_to(self, filename: str | os.PathLike[str]) -> None:
        """Write the texture to an image file; the format follows the file extension."""
        pixels = bytes(self._require_allocated())
        if self.format is TextureFormat.MONO:
            data, mode = _expand_mono(pixels), "RGB"
        elif self.format is TextureFormat.RGB:
            data, mode = pixels, "RGB"
        else:
            data, mode = pixels, "RGBA"
        surface = pygame.image.frombytes(data, self.size, mode)
        pygame.image.save(surface, os.fspath(filename))