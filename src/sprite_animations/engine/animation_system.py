"""Ordered collection of the animations in a sprite-sheet document."""

from __future__ import annotations

import logging
from typing import Any, Iterator, Optional, Union

from sprite_animations.config import AnimationDefaults
from sprite_animations.types import Animation, Size
from sprite_animations.types.values import to_bool, to_float, to_int

from .playback import AnimationPlayback
from .signals import Signal

logger = logging.getLogger(__name__)


class AnimationSystem:
    """Owns a document's animations and tracks the current one.

    Every structural change is bracketed by a pair of signals carrying the
    affected index (``about_to_insert``/``inserted`` and
    ``about_to_remove``/``removed``), followed by ``count_changed``.
    ``selection_changed`` fires whenever the current index moves.

    Two different ranges are used for indices. Selection and insertion
    accept ``0 <= index <= count`` (one past the end is allowed), while
    reading an element requires ``0 <= index < count``.
    """

    def __init__(self, defaults: Optional[AnimationDefaults] = None):
        """Initialize an empty system.

        Args:
            defaults: Settings for generated animations.
        """
        self.defaults = defaults or AnimationDefaults()
        self._animations: list[Animation] = []
        self._current_index = -1
        self._created_count = 0
        self._playback = AnimationPlayback("animationSystemPlayback")

        self.about_to_insert = Signal("about_to_insert")
        self.inserted = Signal("inserted")
        self.about_to_remove = Signal("about_to_remove")
        self.removed = Signal("removed")
        self.selection_changed = Signal("selection_changed")
        self.count_changed = Signal("count_changed")

    def __len__(self) -> int:
        return len(self._animations)

    def __iter__(self) -> Iterator[Animation]:
        return iter(list(self._animations))

    @property
    def created_count(self) -> int:
        """Number of names handed out by the generator since the last reset."""
        return self._created_count

    # Selection

    def get_current_index(self) -> int:
        return self._current_index

    def set_current_index(self, index: int) -> None:
        """Select the animation at ``index``.

        Invalid indices are logged and ignored; selecting the current index
        again does nothing.
        """
        if not self._is_valid_insert_index_or_warn(index):
            return

        if index == self._current_index:
            return

        self._select(index)

    def get_current_animation(self) -> Optional[Animation]:
        if 0 <= self._current_index < len(self._animations):
            return self._animations[self._current_index]
        return None

    def get_current_playback(self) -> AnimationPlayback:
        return self._playback

    def _select(self, index: int) -> None:
        self._current_index = index
        self._playback.set_animation(self.get_current_animation())
        self.selection_changed.emit()

    # Lookup

    def contains_animation(self, name: str) -> bool:
        return self._find_animation_with_name(name) is not None

    def index_of_animation(self, name: str) -> int:
        """Position of the animation called ``name``, or -1."""
        animation = self._find_animation_with_name(name)
        if animation is None:
            return -1
        return self._index_of_entity(animation)

    def animation_count(self) -> int:
        return len(self._animations)

    def names(self) -> list[str]:
        return [animation.name for animation in self._animations]

    def animation_at(self, index: int) -> Optional[Animation]:
        if not self._is_valid_element_index_or_warn(index):
            return None
        return self._animations[index]

    def animation_at_name_or_warn(self, name: str) -> Optional[Animation]:
        """Animation called ``name``; logs a warning and returns None if absent."""
        animation = self._find_animation_with_name(name)
        if animation is None:
            logger.warning('Animation named "%s" doesn\'t exist', name)
        return animation

    # Insertion

    def add_new_animation(self, canvas_size: Union[Size, tuple[int, int]]) -> str:
        """Append a generated animation that covers the canvas.

        Args:
            canvas_size: Size of the sprite sheet the frames are cut from.

        Returns:
            The new animation's name, or an empty string when the generated
            name is already taken.
        """
        if not isinstance(canvas_size, Size):
            canvas_size = Size.from_tuple(canvas_size)

        name = self.peek_next_generated_name()
        if self.contains_animation(name):
            logger.warning('Animation named "%s" already exists', name)
            return ""

        logger.debug("adding new animation %s", name)

        add_index = len(self._animations)
        self.about_to_insert.emit(add_index)

        self._created_count += 1

        frame_count = self.defaults.frame_count_for_width(canvas_size.width)
        animation = Animation(
            name=name,
            fps=self.defaults.fps,
            frame_count=frame_count,
            frame_x=0,
            frame_y=0,
            frame_width=canvas_size.width // frame_count,
            frame_height=canvas_size.height,
        )
        self._animations.append(animation)

        if len(self._animations) == 1:
            self._select(0)

        self.inserted.emit(add_index)
        self.count_changed.emit()
        return name

    def add_animation(self, animation: Animation, index: int) -> None:
        """Insert ``animation`` at ``index`` and take ownership of it.

        The current index is shifted so that the previously selected
        animation stays selected.
        """
        existing_index = self._index_of_entity(animation)
        if existing_index != -1:
            logger.warning(
                'Animation named "%s" already exists (at index %d)',
                animation.name,
                existing_index,
            )
            return

        if self.contains_animation(animation.name):
            logger.warning(
                'Animation named "%s" already exists (at index %d)',
                animation.name,
                self.index_of_animation(animation.name),
            )
            return

        if not self._is_valid_insert_index_or_warn(index):
            return

        logger.debug("adding new animation %s at index %d", animation.name, index)

        self.about_to_insert.emit(index)

        self._animations.insert(index, animation)

        if len(self._animations) == 1:
            self._select(0)
        elif index <= self._current_index:
            self._select(self._current_index + 1)

        self.inserted.emit(index)
        self.count_changed.emit()

    # Removal

    def remove_animation(self, name: str) -> None:
        """Remove and discard the animation called ``name``.

        When the removed animation sits at or before the current one the
        selection moves left by one, staying on index 0 while other
        animations remain.
        """
        removed_index = self.index_of_animation(name)
        if removed_index == -1:
            logger.warning('Animation named "%s" doesn\'t exist', name)
            return

        logger.debug("removing animation %s at index %d", name, removed_index)

        self.about_to_remove.emit(removed_index)

        del self._animations[removed_index]

        if not self._animations:
            if self._current_index != -1:
                self._select(-1)
        elif removed_index <= self._current_index:
            self._select(max(self._current_index - 1, 0))

        self.removed.emit(removed_index)
        self.count_changed.emit()

    def take_animation(self, index: int) -> Optional[Animation]:
        """Remove the animation at ``index`` and hand it back to the caller.

        The current index is left where it is; callers that take the
        selected animation are expected to choose a new selection
        themselves. Playback is rebound to whatever now sits at the current
        index.
        """
        if not self._is_valid_element_index_or_warn(index):
            return None

        self.about_to_remove.emit(index)

        animation = self._animations.pop(index)
        self._playback.set_animation(self.get_current_animation())

        self.removed.emit(index)
        self.count_changed.emit()
        return animation

    # Persistence

    def read(self, data: dict[str, Any]) -> None:
        """Load animations and playback state from a document fragment.

        Documents written before multiple animations were supported hold a
        single animation's fields at the top level; those are converted
        into one generated animation.
        """
        if "fps" in data:
            self._read_legacy(data)
            return

        animation_array = data.get("animations") or []
        if not isinstance(animation_array, list):
            logger.warning("Ignoring animations: expected an array")
            animation_array = []

        for animation_data in animation_array:
            if not isinstance(animation_data, dict):
                logger.warning("Skipping animation entry that is not an object")
                continue
            animation = Animation.from_dict(animation_data)
            if self.contains_animation(animation.name):
                logger.warning('Skipping duplicate animation named "%s"', animation.name)
                continue
            self._animations.append(animation)

        playback_data = data.get("currentAnimationPlayback")
        self._playback.read(playback_data if isinstance(playback_data, dict) else {})

        if self._animations and self._current_index == -1:
            self._select(0)

        logger.debug("read %d animations", len(self._animations))

    def _read_legacy(self, data: dict[str, Any]) -> None:
        animation = Animation(
            name=self.take_next_generated_name(),
            fps=to_int(data.get("fps"), self.defaults.fps),
            frame_count=to_int(data.get("frameCount"), 1),
            frame_x=to_int(data.get("frameX"), 0),
            frame_y=to_int(data.get("frameY"), 0),
            frame_width=to_int(data.get("frameWidth"), 0),
            frame_height=to_int(data.get("frameHeight"), 0),
        )
        logger.debug("upgrading single-animation document to %s", animation.name)

        self.add_animation(animation, 0)

        self._playback.set_scale(to_float(data.get("scale"), 1.0))
        self._playback.set_loop(to_bool(data.get("loop"), True))
        self._playback.set_playing(False)

    def write(self, data: dict[str, Any]) -> None:
        """Store the playback sub-document into ``data``."""
        playback_data: dict[str, Any] = {}
        self._playback.write(playback_data)
        data["currentAnimationPlayback"] = playback_data

    def write_animations(self, data: dict[str, Any]) -> None:
        """Store the ordered animation sub-documents into ``data``."""
        data["animations"] = [animation.to_dict() for animation in self._animations]

    def reset(self) -> None:
        """Drop every animation and return to the initial state.

        No collection signals are emitted.
        """
        self._animations.clear()
        self._current_index = -1
        self._playback.reset()
        self._created_count = 0

    # Name generation

    def peek_next_generated_name(self) -> str:
        return self.defaults.name_for(self._created_count + 1)

    def take_next_generated_name(self) -> str:
        name = self.peek_next_generated_name()
        self._created_count += 1
        return name

    # Helpers

    def _is_valid_insert_index_or_warn(self, index: int) -> bool:
        if index < 0 or index > len(self._animations):
            logger.warning("Animation index %d is invalid", index)
            return False
        return True

    def _is_valid_element_index_or_warn(self, index: int) -> bool:
        if index < 0 or index >= len(self._animations):
            logger.warning("Animation index %d is out of range", index)
            return False
        return True

    def _find_animation_with_name(self, name: str) -> Optional[Animation]:
        for animation in self._animations:
            if animation.name == name:
                return animation
        return None

    def _index_of_entity(self, animation: Animation) -> int:
        for i, candidate in enumerate(self._animations):
            if candidate is animation:
                return i
        return -1
