"""A piece made of blocks laid out on a small grid."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from tetrablocks.block import Block
from tetrablocks.utils import for_xy


@dataclass(frozen=True)
class Shape:
    """Blocks stored row by row in a grid of ``size`` = (width, height)."""

    size: tuple[int, int] = (0, 0)
    blocks: tuple[Block, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        width, height = self.size
        if width < 0 or height < 0:
            raise ValueError(f"negative shape size {self.size}")
        blocks = tuple(Block(b) for b in self.blocks)
        if len(blocks) != width * height:
            raise ValueError(
                f"shape of size {self.size} needs {width * height} blocks, got {len(blocks)}"
            )
        object.__setattr__(self, "size", (width, height))
        object.__setattr__(self, "blocks", blocks)

    def at(self, pos: Sequence[int]) -> Block:
        """Return the block at (x, y)."""
        x, y = pos
        width, height = self.size
        if not (0 <= x < width and 0 <= y < height):
            raise IndexError(f"position {tuple(pos)} outside shape of size {self.size}")
        return self.blocks[x + y * width]

    def visible(self) -> list[tuple[int, int]]:
        """Return the positions of all non-empty blocks."""
        return [p for p in for_xy(self.size) if self.at(p) is not Block.EMPTY]

    def is_empty(self) -> bool:
        """Tell whether this is the placeholder shape with no cells."""
        return self.size == (0, 0)