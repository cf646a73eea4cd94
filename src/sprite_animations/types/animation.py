"""Animation definition for a sprite sheet."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .values import to_bool, to_int


@dataclass(eq=False)
class Animation:
    """A named run of equally sized frames laid out left to right.

    Two animations compare equal when their names match; whether two
    references are the same entity is decided with ``is``.
    """

    name: str = ""
    fps: int = 4
    frame_count: int = 1
    frame_x: int = 0
    frame_y: int = 0
    frame_width: int = 0
    frame_height: int = 0
    reverse: bool = False

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Animation):
            return NotImplemented
        return self.name == other.name

    # Equality follows the mutable name, so animations are not hashable
    __hash__ = None  # type: ignore[assignment]

    def get_name(self) -> str:
        return self.name

    def set_name(self, name: str) -> None:
        self.name = name

    def set_fps(self, fps: int) -> None:
        self.fps = fps

    def set_frame_count(self, frame_count: int) -> None:
        self.frame_count = frame_count

    def set_frame_x(self, frame_x: int) -> None:
        self.frame_x = frame_x

    def set_frame_y(self, frame_y: int) -> None:
        self.frame_y = frame_y

    def set_frame_width(self, frame_width: int) -> None:
        self.frame_width = frame_width

    def set_frame_height(self, frame_height: int) -> None:
        self.frame_height = frame_height

    def set_reverse(self, reverse: bool) -> None:
        self.reverse = reverse

    def frame_rect(self) -> tuple[int, int, int, int]:
        """Region of the first frame as (x, y, w, h) in the sprite sheet."""
        return (self.frame_x, self.frame_y, self.frame_width, self.frame_height)

    def read(self, data: dict[str, Any]) -> None:
        """Load fields from an animation sub-document.

        Missing or non-numeric values fall back to the defaults of a fresh
        Animation.
        """
        self.name = str(data.get("name") or "")
        self.fps = to_int(data.get("fps"), 4)
        self.frame_count = to_int(data.get("frameCount"), 1)
        self.frame_x = to_int(data.get("frameX"), 0)
        self.frame_y = to_int(data.get("frameY"), 0)
        self.frame_width = to_int(data.get("frameWidth"), 0)
        self.frame_height = to_int(data.get("frameHeight"), 0)
        self.reverse = to_bool(data.get("reverse"), False)

    def write(self, data: dict[str, Any]) -> None:
        """Store fields into an animation sub-document."""
        data["name"] = self.name
        data["fps"] = self.fps
        data["frameCount"] = self.frame_count
        data["frameX"] = self.frame_x
        data["frameY"] = self.frame_y
        data["frameWidth"] = self.frame_width
        data["frameHeight"] = self.frame_height
        data["reverse"] = self.reverse

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Animation":
        """Create an Animation from a sub-document."""
        animation = cls()
        animation.read(data)
        return animation

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {}
        self.write(data)
        return data
