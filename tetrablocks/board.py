"""The square playing field."""

from __future__ import annotations

from collections.abc import Sequence

from tetrablocks.block import Block
from tetrablocks.constants import GRID_SIZE
from tetrablocks.shape import Shape
from tetrablocks.utils import compare_vec2


class Board:
    """A grid of blocks on which shapes are placed and full lines cleared."""

    def __init__(self, size: Sequence[int] = (GRID_SIZE, GRID_SIZE)) -> None:
        width, height = size
        if width < 0 or height < 0:
            raise ValueError(f"negative board size {tuple(size)}")
        self._size = (width, height)
        self._cells = [Block.EMPTY] * (width * height)

    @property
    def size(self) -> tuple[int, int]:
        return self._size

    @property
    def data(self) -> list[Block]:
        """A copy of all cells, row by row."""
        return list(self._cells)

    def _index(self, pos: Sequence[int]) -> int:
        x, y = pos
        width, height = self._size
        if not (0 <= x < width and 0 <= y < height):
            raise IndexError(f"position {tuple(pos)} outside board of size {self._size}")
        return x + y * width

    def __getitem__(self, pos: Sequence[int]) -> Block:
        return self._cells[self._index(pos)]

    def __setitem__(self, pos: Sequence[int], block: Block) -> None:
        self._cells[self._index(pos)] = Block(block)

    def fit(self, shape: Shape) -> bool:
        """Tell whether the shape fits anywhere on the board."""
        if compare_vec2(shape.size, (1, 1)) < 0:
            return False
        width, height = self._size
        return any(
            self[x, y] is Block.EMPTY and self.is_fit(shape, (x, y))
            for y in range(height)
            for x in range(width)
        )

    def is_fit(self, shape: Shape, offset: Sequence[int]) -> bool:
        """Tell whether the shape can be placed with its corner at ``offset``."""
        ox, oy = offset
        width, height = self._size
        sw, sh = shape.size
        if ox < 0 or oy < 0 or ox + sw > width or oy + sh > height:
            return False
        return all(self[ox + x, oy + y] is Block.EMPTY for x, y in shape.visible())

    def put(self, shape: Shape, offset: Sequence[int]) -> None:
        """Copy the shape's blocks onto empty cells at ``offset``."""
        ox, oy = offset
        for x, y in shape.visible():
            pos = (ox + x, oy + y)
            if self[pos] is Block.EMPTY:
                self[pos] = shape.at((x, y))

    def check_lines(self) -> int:
        """Clear every full row and column; return how many were cleared."""
        width, height = self._size
        full_rows = [
            y for y in range(height) if all(self[x, y] is not Block.EMPTY for x in range(width))
        ]
        full_cols = [
            x for x in range(width) if all(self[x, y] is not Block.EMPTY for y in range(height))
        ]
        for y in full_rows:
            for x in range(width):
                self[x, y] = Block.EMPTY
        for x in full_cols:
            for y in range(height):
                self[x, y] = Block.EMPTY
        return len(full_rows) + len(full_cols)