"""Playback state bound to the current animation."""

from __future__ import annotations

import logging
from typing import Any, Optional

from sprite_animations.types import Animation
from sprite_animations.types.values import to_bool, to_float

from .signals import Signal

logger = logging.getLogger(__name__)


class AnimationPlayback:
    """Play/loop/scale state for a single bound animation.

    Frame timing is driven elsewhere; this object only holds the state
    that is saved with a document and shared with views.
    """

    def __init__(self, name: str = "animationPlayback"):
        self.name = name
        self.animation: Optional[Animation] = None
        self.scale = 1.0
        self.loop = True
        self.playing = False
        self.current_frame_index = 0

        self.animation_changed = Signal("animation_changed")
        self.scale_changed = Signal("scale_changed")
        self.loop_changed = Signal("loop_changed")
        self.playing_changed = Signal("playing_changed")

    def set_animation(self, animation: Optional[Animation]) -> None:
        """Bind to ``animation``, or unbind when it is None."""
        if animation is self.animation:
            return

        logger.debug("%s: bound to %s", self.name, animation.name if animation else None)
        self.animation = animation
        self.current_frame_index = 0
        self.animation_changed.emit()

    def set_scale(self, scale: float) -> None:
        scale = float(scale)
        if scale == self.scale:
            return
        self.scale = scale
        self.scale_changed.emit()

    def set_loop(self, loop: bool) -> None:
        loop = bool(loop)
        if loop == self.loop:
            return
        self.loop = loop
        self.loop_changed.emit()

    def set_playing(self, playing: bool) -> None:
        playing = bool(playing)
        if playing == self.playing:
            return
        self.playing = playing
        self.playing_changed.emit()

    def read(self, data: dict[str, Any]) -> None:
        """Restore scale and loop from a playback sub-document.

        Loading never starts playback.
        """
        self.set_scale(to_float(data.get("scale"), 1.0))
        self.set_loop(to_bool(data.get("loop"), True))
        self.set_playing(False)

    def write(self, data: dict[str, Any]) -> None:
        data["scale"] = self.scale
        data["loop"] = self.loop

    def reset(self) -> None:
        """Return to the state of a freshly constructed playback."""
        self.set_animation(None)
        self.set_scale(1.0)
        self.set_loop(True)
        self.set_playing(False)
        self.current_frame_index = 0
