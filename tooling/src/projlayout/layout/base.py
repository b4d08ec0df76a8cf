"""Project layout contract: where an app keeps its sources, resources, libs and build output.

Every operation maps an application base directory to a canonical absolute
path, or None when the layout has no such root (e.g. no sources in a
packaged app).
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path

# Conventional names shared by all layouts
PROJ_LAYOUT_FILE = "proj.layout"
ROUTES_FILE = "routes"
CONF = "conf"
CLASSES = "classes"


class ProjectLayout(ABC):
    """File structure of an application project, relative to its base dir."""

    @abstractmethod
    def source(self, app_base: Path) -> Path | None:
        """Source code root."""

    @abstractmethod
    def test_source(self, app_base: Path) -> Path | None:
        """Source code root in test scope."""

    @abstractmethod
    def resource(self, app_base: Path) -> Path | None:
        """Resource files root."""

    @abstractmethod
    def test_resource(self, app_base: Path) -> Path | None:
        """Resource files root in test scope."""

    @abstractmethod
    def lib(self, app_base: Path) -> Path | None:
        """Folder holding third-party library archives."""

    @abstractmethod
    def test_lib(self, app_base: Path) -> Path | None:
        """Library folder in test scope."""

    @abstractmethod
    def asset(self, app_base: Path) -> Path | None:
        """Publicly served files (js, css, images)."""

    @abstractmethod
    def target(self, app_base: Path) -> Path | None:
        """Build output folder."""

    @abstractmethod
    def route_table(self, app_base: Path) -> Path | None:
        """Routing table file."""

    @abstractmethod
    def conf(self, app_base: Path) -> Path | None:
        """App configuration location.

        Either a single conf file or a directory of config files (possibly in
        per-profile sub directories).
        """
