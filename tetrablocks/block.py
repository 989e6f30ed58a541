"""Cell contents of the board and of shapes."""

from __future__ import annotations

from enum import IntEnum

from tetrablocks.constants import COLOR_GRID_CELL


class Block(IntEnum):
    """A single cell: empty or one of the seven colours."""

    EMPTY = 0
    CYAN = 1
    YELLOW = 2
    PURPLE = 3
    GREEN = 4
    RED = 5
    BLUE = 6
    ORANGE = 7


_COLORS = {
    Block.CYAN: 0xFF00FFFF,
    Block.YELLOW: 0xFFFFFF33,
    Block.PURPLE: 0xFFFF33FF,
    Block.GREEN: 0xFF39FF14,
    Block.RED: 0xFFFF073A,
    Block.BLUE: 0xFF1E90FF,
    Block.ORANGE: 0xFFFF5F1F,
    Block.EMPTY: COLOR_GRID_CELL,
}


def block_color(block: Block) -> int:
    """Return the ARGB colour a block is drawn with."""
    return _COLORS[Block(block)]