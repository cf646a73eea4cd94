"""Animation collection engine."""

from __future__ import annotations

from .animation_system import AnimationSystem
from .playback import AnimationPlayback
from .signals import Signal

__all__ = [
    "AnimationSystem",
    "AnimationPlayback",
    "Signal",
]
