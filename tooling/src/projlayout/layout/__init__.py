"""Layout contract, predefined layouts and custom (file based) layouts."""

from .base import CLASSES, CONF, PROJ_LAYOUT_FILE, ROUTES_FILE, ProjectLayout
from .config import load_layout_config, load_layout_file
from .custom import REQUIRED_KEYS, CustomLayout, build_layout
from .predefined import (
    PREDEFINED_LAYOUTS,
    MavenLayout,
    PackagedLayout,
    PlayLayout,
    PredefinedLayout,
    predefined_layout,
    value_of_ignore_case,
)

__all__ = [
    "CLASSES",
    "CONF",
    "PREDEFINED_LAYOUTS",
    "PROJ_LAYOUT_FILE",
    "REQUIRED_KEYS",
    "ROUTES_FILE",
    "CustomLayout",
    "MavenLayout",
    "PackagedLayout",
    "PlayLayout",
    "PredefinedLayout",
    "ProjectLayout",
    "build_layout",
    "load_layout_config",
    "load_layout_file",
    "predefined_layout",
    "value_of_ignore_case",
]
