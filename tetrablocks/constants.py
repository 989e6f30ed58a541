"""Game-wide sizes, scoring values and colours (ARGB)."""

GRID_SIZE = 9
GRID_PADDING = 8.0
BUTTON_BORDER = 4

POINT_LINE = 10
POINT_SHAPE = 2

COLOR_BG = 0xFF1D1D7C
COLOR_TEXT = 0xFFFFFFFF

COLOR_BTN_BG = 0xFF1A419D
COLOR_BTN_BG_HOVER = 0xFF00FF00
COLOR_BTN_TEXT = 0xFFFFFFFF

COLOR_DIALOG_BG = 0xFF808080

COLOR_GRID_BORDER = 0xFF808080
COLOR_GRID_CELL = 0xFF000000