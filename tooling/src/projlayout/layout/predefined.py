"""Predefined layouts: Maven, Play (v1.x) and packaged (deployed) apps."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import ClassVar

from projlayout.helpers import resolve_path
from projlayout.layout.base import CLASSES, CONF, ROUTES_FILE, ProjectLayout
from projlayout.mode import Mode


@dataclass(frozen=True)
class PredefinedLayout(ProjectLayout):
    """Layout with conf and route table derived from its resource root."""

    name: ClassVar[str] = ""
    mode: Mode = Mode.DEV

    def _conf_base(self, app_base: Path) -> Path:
        if self.mode.is_dev:
            return self.resource(app_base)
        return resolve_path(app_base, CLASSES)

    def conf(self, app_base: Path) -> Path:
        conf_base = self._conf_base(app_base)
        candidate = resolve_path(conf_base, CONF)
        return candidate if candidate.is_file() else conf_base

    def route_table(self, app_base: Path) -> Path:
        return resolve_path(self.resource(app_base), ROUTES_FILE)

    def _pick(self, dev: str, prod: str) -> str:
        return dev if self.mode.is_dev else prod


@dataclass(frozen=True)
class MavenLayout(PredefinedLayout):
    """Standard maven project::

        <app_root>/
            src/main/java/        # sources
            src/main/lib/         # extra jar files
            src/main/resources/   # conf, routes, other resources
            src/main/asset/       # js, css, images
            src/test/java/
            src/test/resources/
            target/               # build output

    In PROD mode resource, lib and asset point at the built tree
    (classes/, lib/, asset/).
    """

    name: ClassVar[str] = "maven"

    def source(self, app_base: Path) -> Path:
        return resolve_path(app_base, "src/main/java")

    def test_source(self, app_base: Path) -> Path:
        return resolve_path(app_base, "src/test/java")

    def resource(self, app_base: Path) -> Path:
        return resolve_path(app_base, self._pick("src/main/resources", CLASSES))

    def test_resource(self, app_base: Path) -> Path:
        return resolve_path(app_base, self._pick("src/test/resources", "test-classes"))

    def lib(self, app_base: Path) -> Path:
        return resolve_path(app_base, self._pick("src/main/lib", "lib"))

    def test_lib(self, app_base: Path) -> Path:
        return resolve_path(app_base, self._pick("src/test/lib", "test-lib"))

    def asset(self, app_base: Path) -> Path:
        return resolve_path(app_base, self._pick("src/main/asset", "asset"))

    def target(self, app_base: Path) -> Path:
        return resolve_path(app_base, "target")


@dataclass(frozen=True)
class PackagedLayout(PredefinedLayout):
    """Deployed app: classes/, lib/, asset/ directly under the app base. No sources or tests."""

    name: ClassVar[str] = "pkg"

    def _conf_base(self, app_base: Path) -> Path:
        return resolve_path(app_base, CLASSES)

    def source(self, app_base: Path) -> None:
        return None

    def test_source(self, app_base: Path) -> None:
        return None

    def resource(self, app_base: Path) -> Path:
        return resolve_path(app_base, CLASSES)

    def test_resource(self, app_base: Path) -> None:
        return None

    def lib(self, app_base: Path) -> Path:
        return resolve_path(app_base, "lib")

    def test_lib(self, app_base: Path) -> None:
        return None

    def asset(self, app_base: Path) -> Path:
        return resolve_path(app_base, "asset")

    def target(self, app_base: Path) -> Path:
        return resolve_path(app_base, ".")


@dataclass(frozen=True)
class PlayLayout(PredefinedLayout):
    """Playframework v1.x project::

        <app_root>/
            app/      # sources
            conf/     # conf, routes, other resources
            lib/
            public/   # assets
            test/
            tmp/      # build output

    Same paths in every mode; tests share conf/ and lib/.
    """

    name: ClassVar[str] = "play"

    def source(self, app_base: Path) -> Path:
        return resolve_path(app_base, "app")

    def test_source(self, app_base: Path) -> Path:
        return resolve_path(app_base, "test")

    def resource(self, app_base: Path) -> Path:
        return resolve_path(app_base, "conf")

    def test_resource(self, app_base: Path) -> Path:
        return self.resource(app_base)

    def lib(self, app_base: Path) -> Path:
        return resolve_path(app_base, "lib")

    def test_lib(self, app_base: Path) -> Path:
        return self.lib(app_base)

    def asset(self, app_base: Path) -> Path:
        return resolve_path(app_base, "public")

    def target(self, app_base: Path) -> Path:
        return resolve_path(app_base, "tmp")


PREDEFINED_LAYOUTS: dict[str, type[PredefinedLayout]] = {
    cls.name: cls for cls in (MavenLayout, PlayLayout, PackagedLayout)
}


# One instance per (name, mode), built at import.
_INSTANCES: dict[tuple[str, Mode], PredefinedLayout] = {
    (name, mode): cls(mode) for name, cls in PREDEFINED_LAYOUTS.items() for mode in Mode
}


def predefined_layout(name: str, mode: Mode = Mode.DEV) -> PredefinedLayout:
    """Shared layout instance for name (maven, play, pkg) and mode. Raises KeyError if unknown."""
    return _INSTANCES[(name, Mode(mode))]


def value_of_ignore_case(s: str, mode: Mode = Mode.DEV) -> PredefinedLayout | None:
    """Predefined layout by case-insensitive name, or None if no layout has that name."""
    key = s.strip().lower()
    if key not in PREDEFINED_LAYOUTS:
        return None
    return predefined_layout(key, mode)
