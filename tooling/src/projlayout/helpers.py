"""Shared path helpers: canonical resolution and readability checks."""

from __future__ import annotations

import os
from pathlib import Path

from projlayout.errors import LayoutIOError


def resolve_path(base: Path | str, relative: str) -> Path:
    """Canonical absolute form of base/relative. The target need not exist.

    Raises LayoutIOError if the filesystem fails during canonicalization.
    """
    p = Path(base) / relative
    try:
        # strict first: non-strict resolve ignores symlink loops on 3.13+
        return p.resolve(strict=True)
    except (FileNotFoundError, NotADirectoryError):
        pass
    except RuntimeError as e:
        # symlink loop on interpreters before 3.13
        raise LayoutIOError(p, str(e)) from e
    except OSError as e:
        raise LayoutIOError(p, e.strerror or str(e)) from e
    try:
        return p.resolve()
    except OSError as e:
        raise LayoutIOError(p, e.strerror or str(e)) from e


def is_readable(p: Path) -> bool:
    return os.access(p, os.R_OK)


def is_readable_file(p: Path | None) -> bool:
    """True if p is set, readable and a regular file."""
    return p is not None and is_readable(p) and p.is_file()


def is_readable_dir(p: Path | None) -> bool:
    """True if p is set, readable and a directory."""
    return p is not None and is_readable(p) and p.is_dir()
