"""Pytest configuration and fixtures."""

from __future__ import annotations

import pytest

from sprite_animations import Animation, AnimationSystem, Size


class SignalRecorder:
    """Collects (signal name, *args) tuples from an AnimationSystem."""

    SIGNALS = (
        "about_to_insert",
        "inserted",
        "about_to_remove",
        "removed",
        "selection_changed",
        "count_changed",
    )

    def __init__(self, system: AnimationSystem):
        self.events: list[tuple] = []
        for name in self.SIGNALS:
            getattr(system, name).connect(self._make_listener(name))

    def _make_listener(self, name: str):
        def listener(*args):
            self.events.append((name, *args))

        return listener

    def names(self) -> list[str]:
        return [event[0] for event in self.events]

    def clear(self) -> None:
        self.events.clear()


@pytest.fixture
def canvas_size() -> Size:
    return Size(64, 16)


@pytest.fixture
def system() -> AnimationSystem:
    return AnimationSystem()


@pytest.fixture
def populated_system(system) -> AnimationSystem:
    """System holding walk, run and jump, with walk selected."""
    for i, name in enumerate(["walk", "run", "jump"]):
        system.add_animation(Animation(name=name, frame_count=2, frame_width=16, frame_height=16), i)
    return system


@pytest.fixture
def recorder(system) -> SignalRecorder:
    return SignalRecorder(system)


@pytest.fixture
def legacy_document() -> dict:
    """Animation fields as saved before multiple animations were supported."""
    return {
        "fps": 8,
        "frameCount": 2,
        "frameX": 0,
        "frameY": 0,
        "frameWidth": 16,
        "frameHeight": 16,
        "scale": 2.0,
        "loop": True,
    }
