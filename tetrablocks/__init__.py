"""Rules, textures, fonts, a 2-D renderer and UI base classes for a block-placing puzzle game."""

__version__ = "0.1.0"