"""Small helpers shared by the model and the game screens."""

from __future__ import annotations

import random
from collections.abc import Iterator, Sequence
from pathlib import Path

ASSETS_DIR = str(Path(__file__).resolve().parent / "assets")

_system_random = random.SystemRandom()


def for_xy(size: Sequence[int]) -> Iterator[tuple[int, int]]:
    """Yield every (x, y) inside ``size``, column by column."""
    width, height = size
    for x in range(width):
        for y in range(height):
            yield x, y


def get_asset(path: str) -> str:
    """Return the full path of an asset given relative to the assets directory."""
    return ASSETS_DIR + path


def random_point(
    minimum: Sequence[float] = (-1.0, -1.0),
    maximum: Sequence[float] = (1.0, 1.0),
) -> tuple[float, float]:
    """Return a uniformly random point inside the box ``minimum``..``maximum``."""
    return (
        _system_random.uniform(minimum[0], maximum[0]),
        _system_random.uniform(minimum[1], maximum[1]),
    )


def rand_color() -> int:
    """Return a random opaque ARGB colour."""
    red, green, blue = (_system_random.randint(0, 255) for _ in range(3))
    return (0xFF << 24) | (red << 16) | (green << 8) | blue


def in_rect(rect: Sequence[float], point: Sequence[float]) -> bool:
    """Tell whether ``point`` lies in ``rect`` = (x, y, w, h), edges included."""
    x, y, w, h = rect
    px, py = point
    return x <= px <= x + w and y <= py <= y + h


def _sign(a: float, b: float) -> int:
    return (a > b) - (a < b)


def compare_vec2(a: Sequence[float], b: Sequence[float]) -> int:
    """Compare two 2-vectors by x first, then y; return -1, 0 or 1."""
    by_x = _sign(a[0], b[0])
    return by_x if by_x != 0 else _sign(a[1], b[1])