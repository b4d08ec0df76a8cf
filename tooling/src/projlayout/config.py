"""Tooling settings: mode, custom layout file name, layout probe order."""

from __future__ import annotations

import os
from typing import Any

from projlayout.mode import Mode

MODE_ENV_VAR = "PROJLAYOUT_MODE"

DEFAULT_SETTINGS: dict[str, str] = {
    "mode": "dev",
    "layout_file": "proj.layout",
    "probe_order": "maven,play",
}


def resolve_settings(settings: dict[str, Any] | None) -> dict[str, str]:
    """Return settings dict with defaults filled. Mode defaults to $PROJLAYOUT_MODE if set."""
    out = dict(DEFAULT_SETTINGS)
    env_mode = os.environ.get(MODE_ENV_VAR)
    if env_mode:
        out["mode"] = env_mode
    if settings is None:
        return out
    out.update({k: str(v) for k, v in settings.items() if k in out and v is not None})
    return out


def settings_mode(settings: dict[str, str]) -> Mode:
    return Mode.parse(settings["mode"])


def probe_order(settings: dict[str, str]) -> list[str]:
    """Predefined layout names to probe, in order."""
    return [s.strip().lower() for s in settings["probe_order"].split(",") if s.strip()]
