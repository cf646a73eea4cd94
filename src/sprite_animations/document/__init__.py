"""Sprite-sheet documents."""

from __future__ import annotations

from .sprite_sheet import SpriteSheetDocument, read_canvas_size

__all__ = [
    "SpriteSheetDocument",
    "read_canvas_size",
]
