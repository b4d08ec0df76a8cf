"""Pick the layout of an app base: predefined layouts first, then its proj.layout file."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from projlayout.config import probe_order, resolve_settings, settings_mode
from projlayout.layout import ProjectLayout, load_layout_file, value_of_ignore_case
from projlayout.probe import probe_app_base

log = logging.getLogger(__name__)


def detect_layout(app_base: Path, settings: dict[str, Any] | None = None) -> ProjectLayout | None:
    """First predefined layout (in probe order) that probes true, else the custom layout file.

    Returns None when nothing matches. Raises ConfigurationError if the layout
    file exists but is incomplete.
    """
    cfg = resolve_settings(settings)
    mode = settings_mode(cfg)
    for name in probe_order(cfg):
        layout = value_of_ignore_case(name, mode)
        if layout is None:
            log.warning("Unknown layout %r in probe order, skipped", name)
            continue
        if probe_app_base(app_base, layout):
            log.info("Detected %s layout at %s (%s mode)", name, app_base, mode.value)
            return layout
    layout_file = app_base / cfg["layout_file"]
    if layout_file.is_file():
        log.info("Using custom layout from %s", layout_file)
        return load_layout_file(layout_file)
    log.debug("No layout matched %s", app_base)
    return None
