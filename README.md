# tetrablocks

The parts of a block-placing puzzle game. Shapes go onto a 9×9 grid, and
any row or column that fills up is cleared. The package holds the game
rules, an in-memory texture and font system, a batched 2-D renderer that
draws onto a `pygame` surface, and the base classes and buttons that
screens and dialogs are built from.

## Installing

```
pip install .
```

This also installs `pygame`, which the texture, font and renderer modules
use.

## What the package does not do

The package has no command to start and it opens no window. It has no
ready-made main menu, game screen, pause, quit or game-over dialogs, and no
main loop. To get a playable game, you write those yourself on top of
`tetrablocks.core.Controller`, `Screen` and `Dialog`.

## The rules: `Board`, `Shape`, `ShapeFactory`

```python
from tetrablocks.board import Board
from tetrablocks.shape_factory import ShapeFactory

factory = ShapeFactory(seed=42)   # seed 0 means unseeded
board = Board()                   # 9 x 9, all cells Block.EMPTY

shape = factory.get_next()
if board.is_fit(shape, (0, 0)):
    board.put(shape, (0, 0))
cleared = board.check_lines()
print(cleared, board.fit(factory.get_next()))
```

- `Block` (`tetrablocks.block`) is an `IntEnum`. It holds `EMPTY` and seven
  colours. `block_color(block)` returns the ARGB colour of a block.
- `Shape(size, blocks)` is a frozen grid of blocks, stored row by row.
  - `at((x, y))` returns one block.
  - `visible()` lists the positions that are not empty.
  - `is_empty()` is true for the placeholder `Shape()` of size `(0, 0)`.
- `ShapeFactory.get_next()` picks one of 19 forms and gives it one random
  colour.
- `Board` reads and writes cells through `board[x, y]`.
  - `is_fit(shape, offset)` checks one position.
  - `fit(shape)` checks whether the shape fits anywhere on the board.
  - `put(shape, offset)` copies the shape's blocks onto the empty cells.
  - `check_lines()` clears every full row and column, and returns how many
    it cleared.

`tetrablocks.constants` holds the grid size, the colours and the point
values: `POINT_SHAPE = 2` and `POINT_LINE = 10`.

## Drawing: `Texture`, `Font`, `Renderer`

- `Texture` is a pixel buffer in `RGBA`, `RGB` or `MONO` format.
  - `alloc` creates the buffer and `subdata` writes into it.
  - `load(path)` reads an image file.
  - `save_to(filename)` writes an image file.
- `Font(size)` rasterises code point ranges into a `MONO` texture atlas
  with `load(path)`. `path=None` uses pygame's built-in font.
  - `at(code)` returns a `Glyph`.
  - `width(text)` and `height(text)` measure a string.
- `Renderer(target=None)` collects rectangles and draws them when the
  paint mode changes or the frame ends.
  - `fill(color)` selects a solid colour.
  - `image(texture, uv_a, uv_b)` selects part of a texture.
  - `text(font, text, pos, align)` draws text.
  - Without a target, `resize(w, h)` creates its own surface.

```python
from tetrablocks.renderer import Renderer
import pygame

renderer = Renderer()
renderer.resize(320, 240)
renderer.clear(0xFF1D1D7C)
renderer.begin_frame()
renderer.fill(0xFF00FF00)
renderer.rect(10, 10, 100, 50)
renderer.end_frame()
pygame.image.save(renderer.target, "frame.png")
```

## UI building blocks

- `Assets` (`tetrablocks.assets`) holds three fonts: title (64), small (18)
  and main (48). `init(path)` loads all three and `clear()` releases them.
- `tetrablocks.core` defines the abstract classes `Controller`, `Screen`
  and `Dialog`, along with the input codes `PRESS`, `RELEASE`,
  `MOUSE_BUTTON_LEFT` and `KEY_ESCAPE`.
  - `Controller.to(screen_class)` builds a screen bound to the controller
    and passes it to `go`.
- `Button` (`tetrablocks.button`) is a bordered label.
  - `on_create(text, callback, padding)` sizes the button around its label.
  - `on_cursor` tracks whether the cursor is over the button.
  - `on_key` runs the callback on a left-button press while the cursor is
    over it.

## Running the tests

```
pip install .[test]
pytest
```