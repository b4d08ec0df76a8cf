"""CLI for layout commands: projlayout show / projlayout probe."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any

from projlayout.cli.parse_common import UsageError, parse_layout_args
from projlayout.config import resolve_settings, settings_mode
from projlayout.discovery import detect_layout
from projlayout.errors import LayoutError
from projlayout.helpers import resolve_path
from projlayout.layout import ProjectLayout, load_layout_file, predefined_layout
from projlayout.probe import probe_app_base
from projlayout.roots import resolve_roots

SHOW_USAGE = (
    "Usage: projlayout show [--app-base <path>] [--layout maven|play|pkg|custom|auto] "
    "[--mode dev|prod] [--json]"
)
PROBE_USAGE = "Usage: projlayout probe [--app-base <path>] --layout maven|play|pkg|custom [--mode dev|prod]"


def _parse(argv: list[str], usage: str, switches: tuple[str, ...] = ()) -> dict[str, Any] | None:
    """Parsed options, or None after printing the error and usage."""
    try:
        return parse_layout_args(argv, switches=switches)
    except UsageError as e:
        print(f"Error: {e}", file=sys.stderr)
        print(usage, file=sys.stderr)
        return None


def _app_base(opts: dict[str, Any]) -> Path:
    return resolve_path(Path.cwd(), opts["app_base"] or ".")


def _select_layout(app_base: Path, name: str, settings: dict[str, str]) -> ProjectLayout | None:
    if name == "auto":
        return detect_layout(app_base, settings)
    if name == "custom":
        return load_layout_file(app_base / settings["layout_file"])
    return predefined_layout(name, settings_mode(settings))


def run_show_argv(argv: list[str]) -> int:
    """Print every root of the app base under the selected layout."""
    opts = _parse(argv, SHOW_USAGE, ("--json",))
    if opts is None:
        return 2
    try:
        app_base = _app_base(opts)
        settings = resolve_settings({"mode": opts["mode"]})
        layout = _select_layout(app_base, opts["layout"], settings)
        if layout is None:
            print(f"Error: No project layout detected at {app_base}", file=sys.stderr)
            return 1
        roots = resolve_roots(layout, app_base)
    except (LayoutError, OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if opts["json"]:
        out = {k: str(v) if v is not None else None for k, v in roots.items()}
        print(json.dumps({"app_base": str(app_base), "layout": out}, indent=2))
        return 0
    width = max(len(k) for k in roots)
    for name, p in roots.items():
        print(f"{name:<{width}}  {p if p is not None else '-'}")
    return 0


def run_probe_argv(argv: list[str]) -> int:
    """Exit 0 if the app base probes true under the given layout, else 1."""
    opts = _parse(argv, PROBE_USAGE)
    if opts is None:
        return 2
    if opts["layout"] == "auto":
        print("Error: probe requires --layout", file=sys.stderr)
        print(PROBE_USAGE, file=sys.stderr)
        return 2
    try:
        app_base = _app_base(opts)
        settings = resolve_settings({"mode": opts["mode"]})
        layout = _select_layout(app_base, opts["layout"], settings)
        ok = probe_app_base(app_base, layout)
    except (LayoutError, OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    print(f"{app_base}: {'matches' if ok else 'does not match'} {opts['layout']} layout")
    return 0 if ok else 1
