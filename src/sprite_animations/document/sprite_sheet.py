"""Sprite-sheet project documents."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Optional, Union

from PIL import Image

from sprite_animations.config import AnimationDefaults
from sprite_animations.engine import AnimationSystem
from sprite_animations.errors import ProjectLoadError, ProjectSaveError
from sprite_animations.types import Size
from sprite_animations.types.values import to_int

logger = logging.getLogger(__name__)

DEFAULT_CANVAS_SIZE = (256, 256)


def read_canvas_size(image_path: Union[Path, str]) -> Size:
    """Read the pixel size of a sprite-sheet image.

    Args:
        image_path: Path to an image Pillow can open.

    Returns:
        The image size.
    """
    with Image.open(image_path) as img:
        return Size.from_tuple(img.size)


def _sub_document(data: dict[str, Any], key: str) -> dict[str, Any]:
    value = data.get(key)
    if isinstance(value, dict):
        return value
    logger.warning("Ignoring %s: expected an object, got %s", key, type(value).__name__)
    return {}


class SpriteSheetDocument:
    """A sprite sheet image plus the animations cut from it."""

    def __init__(
        self,
        image_path: Optional[Union[Path, str]] = None,
        canvas_size: Optional[Size] = None,
        defaults: Optional[AnimationDefaults] = None,
    ):
        """Initialize a document.

        Args:
            image_path: Sprite-sheet image. Its size is used as the canvas
                size unless ``canvas_size`` is given.
            canvas_size: Explicit canvas size.
            defaults: Settings for generated animations.
        """
        self.image_path = Path(image_path) if image_path is not None else None
        if canvas_size is not None:
            self.canvas_size = canvas_size
        elif self.image_path is not None:
            self.canvas_size = read_canvas_size(self.image_path)
        else:
            self.canvas_size = Size.from_tuple(DEFAULT_CANVAS_SIZE)

        self.animation_system = AnimationSystem(defaults)

    def add_new_animation(self) -> str:
        """Generate an animation spanning the whole canvas."""
        return self.animation_system.add_new_animation(self.canvas_size)

    def close(self) -> None:
        self.animation_system.reset()

    def to_dict(self) -> dict[str, Any]:
        """Serialize the document to a JSON-compatible dict."""
        system_data: dict[str, Any] = {}
        self.animation_system.write_animations(system_data)
        self.animation_system.write(system_data)

        return {
            "image": str(self.image_path) if self.image_path is not None else None,
            "canvasWidth": self.canvas_size.width,
            "canvasHeight": self.canvas_size.height,
            "currentAnimationIndex": self.animation_system.get_current_index(),
            "animationSystem": system_data,
        }

    @classmethod
    def from_dict(
        cls,
        data: dict[str, Any],
        base_path: Optional[Union[Path, str]] = None,
        defaults: Optional[AnimationDefaults] = None,
    ) -> "SpriteSheetDocument":
        """Create a document from a dict produced by ``to_dict``.

        Projects saved before multiple animations were supported keep their
        single animation under ``animationPlayback``; it is upgraded on load.

        Args:
            data: The project dict.
            base_path: Directory a relative ``image`` path is resolved against.
            defaults: Settings for generated animations.
        """
        image = data.get("image")
        image_path = None
        if isinstance(image, str) and image:
            image_path = Path(image)
            if base_path is not None and not image_path.is_absolute():
                image_path = Path(base_path) / image_path

        canvas_size = Size(
            to_int(data.get("canvasWidth"), DEFAULT_CANVAS_SIZE[0]),
            to_int(data.get("canvasHeight"), DEFAULT_CANVAS_SIZE[1]),
        )
        document = cls(image_path=image_path, canvas_size=canvas_size, defaults=defaults)

        system = document.animation_system
        if "animationSystem" in data:
            system.read(_sub_document(data, "animationSystem"))
            current_index = data.get("currentAnimationIndex", -1)
            if isinstance(current_index, bool) or not isinstance(current_index, int):
                logger.warning("Ignoring invalid current animation index %r", current_index)
            elif 0 <= current_index < system.animation_count():
                system.set_current_index(current_index)
        elif "animationPlayback" in data:
            system.read(_sub_document(data, "animationPlayback"))

        return document

    @classmethod
    def load(
        cls,
        path: Union[Path, str],
        defaults: Optional[AnimationDefaults] = None,
    ) -> "SpriteSheetDocument":
        """Load a project file.

        Raises:
            ProjectLoadError: If the file cannot be read or is not valid JSON.
        """
        path = Path(path)
        try:
            with open(path, "r") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.error("Error loading %s: %s", path, e)
            raise ProjectLoadError(f"Could not load project {path}: {e}") from e

        if not isinstance(data, dict):
            raise ProjectLoadError(f"Project {path} does not contain a JSON object")

        document = cls.from_dict(data, base_path=path.parent, defaults=defaults)
        logger.info(
            "%s loaded with %d animations", path, document.animation_system.animation_count()
        )
        return document

    def save(self, path: Union[Path, str]) -> None:
        """Write the project file as JSON.

        Raises:
            ProjectSaveError: If the file cannot be written.
        """
        path = Path(path)
        try:
            with open(path, "w") as f:
                json.dump(self.to_dict(), f, indent=2)
        except OSError as e:
            logger.error("Error saving %s: %s", path, e)
            raise ProjectSaveError(f"Could not save project {path}: {e}") from e

        logger.info("%s saved successfully", path)
