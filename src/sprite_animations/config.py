"""Configuration for sprite animations."""

from __future__ import annotations

import logging
from dataclasses import dataclass


@dataclass
class AnimationDefaults:
    """Defaults used when the system generates a new animation."""

    fps: int = 4
    name_template: str = "Animation {}"

    # Canvases at least this wide are split into several frames
    multi_frame_min_width: int = 8
    multi_frame_count: int = 4
    single_frame_count: int = 1

    def frame_count_for_width(self, canvas_width: int) -> int:
        """Number of frames a new animation gets for a canvas width."""
        if canvas_width >= self.multi_frame_min_width:
            return self.multi_frame_count
        return self.single_frame_count

    def name_for(self, number: int) -> str:
        return self.name_template.format(number)


LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"


def configure_logging(level: int | str = logging.INFO) -> None:
    """Install a stream handler on the package logger.

    Args:
        level: Minimum level to emit, as a logging constant or name.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())

    package_logger = logging.getLogger("sprite_animations")
    package_logger.setLevel(level)
    if not package_logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%H:%M:%S"))
        package_logger.addHandler(handler)
