"""Synchronous change notifications."""

from __future__ import annotations

from typing import Any, Callable


class Signal:
    """A list of listeners called in order whenever the signal is emitted.

    Listeners run to completion inside ``emit``; an exception raised by a
    listener propagates to the code that emitted the signal.
    """

    def __init__(self, name: str = ""):
        """Initialize an empty signal.

        Args:
            name: Name used in debug output.
        """
        self.name = name
        self._listeners: list[Callable[..., Any]] = []

    def connect(self, listener: Callable[..., Any]) -> Callable[[], None]:
        """Subscribe to the signal.

        Args:
            listener: A function to call with the emitted arguments.

        Returns:
            An unsubscribe function.
        """
        self._listeners.append(listener)
        return lambda: self.disconnect(listener)

    def disconnect(self, listener: Callable[..., Any]) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def emit(self, *args: Any) -> None:
        """Call every listener with ``args``."""
        for listener in list(self._listeners):
            listener(*args)

    def __len__(self) -> int:
        return len(self._listeners)

    def __repr__(self) -> str:
        return f"Signal({self.name!r}, listeners={len(self._listeners)})"
