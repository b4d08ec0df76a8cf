"""Errors raised while resolving a project layout."""

from __future__ import annotations

from pathlib import Path


class LayoutError(Exception):
    """Base class for projlayout errors."""


class LayoutIOError(LayoutError):
    """A path could not be canonicalized."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        super().__init__(f"Cannot resolve {path}: {reason}")


class ConfigurationError(LayoutError):
    """Custom layout configuration is missing a key or cannot be read."""

    def __init__(self, msg: str, *, key: str | None = None, path: Path | None = None) -> None:
        self.key = key
        self.path = path
        super().__init__(msg)
