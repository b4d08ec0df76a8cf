"""Argument parsing shared by the layout commands (--app-base, --layout, --mode, --json)."""

from __future__ import annotations

from typing import Any

LAYOUT_CHOICES = ("auto", "maven", "play", "pkg", "custom")
MODE_CHOICES = ("dev", "prod")

# flag -> (option key, allowed values or None for free text)
VALUE_FLAGS: dict[str, tuple[str, tuple[str, ...] | None]] = {
    "--app-base": ("app_base", None),
    "--layout": ("layout", LAYOUT_CHOICES),
    "--mode": ("mode", MODE_CHOICES),
}


class UsageError(Exception):
    """Bad command line: unknown flag, missing value or value outside its choices."""


def parse_layout_args(argv: list[str], *, switches: tuple[str, ...] = ()) -> dict[str, Any]:
    """Parse layout command flags.

    Returns {"app_base": str | None, "layout": str, "mode": str | None} plus a
    bool per switch (e.g. "--json" -> "json"). --layout and --mode values are
    lower-cased and checked against their choices. The app base is returned
    unresolved; the caller canonicalizes it.
    """
    opts: dict[str, Any] = {"app_base": None, "layout": "auto", "mode": None}
    for s in switches:
        opts[s.lstrip("-").replace("-", "_")] = False

    it = iter(argv)
    for arg in it:
        if arg in switches:
            opts[arg.lstrip("-").replace("-", "_")] = True
            continue
        if arg not in VALUE_FLAGS:
            msg = f"Unknown argument: {arg}"
            raise UsageError(msg)
        key, choices = VALUE_FLAGS[arg]
        value = next(it, None)
        if value is None:
            msg = f"{arg} requires a value"
            raise UsageError(msg)
        if choices is not None:
            value = value.strip().lower()
            if value not in choices:
                msg = f"Invalid {arg} value {value!r}; expected one of {', '.join(choices)}"
                raise UsageError(msg)
        opts[key] = value
    return opts
