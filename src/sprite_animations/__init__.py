"""Animation collection state for sprite-sheet documents."""

from __future__ import annotations

from .config import AnimationDefaults, configure_logging
from .document import SpriteSheetDocument
from .engine import AnimationPlayback, AnimationSystem, Signal
from .errors import ProjectLoadError, ProjectSaveError, SpriteAnimationsError
from .types import Animation, Size

__version__ = "0.10.0"

__all__ = [
    "Animation",
    "AnimationDefaults",
    "AnimationPlayback",
    "AnimationSystem",
    "ProjectLoadError",
    "ProjectSaveError",
    "Signal",
    "Size",
    "SpriteAnimationsError",
    "SpriteSheetDocument",
    "configure_logging",
]
