"""Geometry types for sprite sheets."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Size:
    """Width and height in pixels."""

    width: int
    height: int

    @classmethod
    def from_tuple(cls, size: tuple[int, int]) -> "Size":
        """Create a size from a (width, height) tuple."""
        return cls(int(size[0]), int(size[1]))

    def to_tuple(self) -> tuple[int, int]:
        return (self.width, self.height)

    def copy(self) -> "Size":
        """Create a copy of this size."""
        return Size(self.width, self.height)
