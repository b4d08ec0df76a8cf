"""Development / production mode flag."""

from __future__ import annotations

from enum import Enum


class Mode(str, Enum):
    """Whether the app runs from its working tree (DEV) or a built tree (PROD)."""

    DEV = "dev"
    PROD = "prod"

    @property
    def is_dev(self) -> bool:
        return self is Mode.DEV

    @classmethod
    def parse(cls, s: str) -> Mode:
        """Parse dev/development/prod/production (case-insensitive). Raises ValueError."""
        key = s.strip().lower()
        if key in ("dev", "development"):
            return cls.DEV
        if key in ("prod", "production"):
            return cls.PROD
        msg = f"Unknown mode: {s!r} (expected dev or prod)"
        raise ValueError(msg)
