"""Random source of the shapes offered to the player."""

from __future__ import annotations

import random

from tetrablocks.block import Block
from tetrablocks.shape import Shape

# Rows of each shape: "#" marks a block, "." an empty cell.
SHAPE_TEMPLATES: tuple[tuple[str, ...], ...] = (
    ("####",),
    ("#", "#", "#", "#"),
    ("##", "##"),
    ("#.", "##", ".#"),
    (".#", "##", "#."),
    (".##", "##."),
    ("##.", ".##"),
    ("###", "#.."),
    ("###", "..#"),
    ("##", "#.", "#."),
    ("#.", "#.", "##"),
    ("#.", "##", "#."),
    (".#", "##", ".#"),
    (".#.", "###"),
    ("###", ".#."),
    ("#..", "###"),
    ("..#", "###"),
    ("##", ".#", ".#"),
    (".#", ".#", "##"),
)

_COLOR_COUNT = 7


def _build(rows: tuple[str, ...], block: Block) -> Shape:
    cells = tuple(block if ch == "#" else Block.EMPTY for row in rows for ch in row)
    return Shape((len(rows[0]), len(rows)), cells)


class ShapeFactory:
    """Hands out shapes of a random form and colour; seed 0 means unseeded."""

    def __init__(self, seed: int = 0) -> None:
        self._rng = random.Random(seed if seed else None)

    def get_next(self) -> Shape:
        """Return a new random shape in a single random colour."""
        block = Block(self._rng.randrange(_COLOR_COUNT) + 1)
        rows = SHAPE_TEMPLATES[self._rng.randrange(len(SHAPE_TEMPLATES))]
        return _build(rows, block)