"""Exceptions raised by the document layer."""

from __future__ import annotations


class SpriteAnimationsError(Exception):
    """Base class for sprite animation errors."""


class ProjectLoadError(SpriteAnimationsError):
    """A project file could not be read or parsed."""


class ProjectSaveError(SpriteAnimationsError):
    """A project file could not be written."""
