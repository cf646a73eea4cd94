"""Type definitions for sprite animations."""

from .animation import Animation
from .geometry import Size

__all__ = [
    "Animation",
    "Size",
]
