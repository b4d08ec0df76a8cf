"""Project layout resolution for development tooling.

Derives source, resource, lib, asset, target, conf and routing-table
locations of an application from its root directory and a layout convention.
"""

from projlayout.errors import ConfigurationError, LayoutError, LayoutIOError
from projlayout.helpers import resolve_path
from projlayout.layout import (
    CustomLayout,
    MavenLayout,
    PackagedLayout,
    PlayLayout,
    ProjectLayout,
    build_layout,
    load_layout_file,
    predefined_layout,
    value_of_ignore_case,
)
from projlayout.mode import Mode
from projlayout.probe import probe_app_base

__all__ = [
    "ConfigurationError",
    "CustomLayout",
    "LayoutError",
    "LayoutIOError",
    "MavenLayout",
    "Mode",
    "PackagedLayout",
    "PlayLayout",
    "ProjectLayout",
    "build_layout",
    "load_layout_file",
    "predefined_layout",
    "probe_app_base",
    "resolve_path",
    "value_of_ignore_case",
]
