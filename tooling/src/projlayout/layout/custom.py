"""Custom project layout built from a flat key/value config (e.g. proj.layout)."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from projlayout.errors import ConfigurationError
from projlayout.helpers import resolve_path
from projlayout.layout.base import ProjectLayout

# Config key -> CustomLayout field, in validation order.
REQUIRED_KEYS: dict[str, str] = {
    "source": "source_path",
    "testSource": "test_source_path",
    "resource": "resource_path",
    "testResource": "test_resource_path",
    "lib": "lib_path",
    "testLib": "test_lib_path",
    "asset": "asset_path",
    "target": "target_path",
    "routes": "route_table_path",
    "conf": "conf_path",
}


@dataclass(frozen=True)
class CustomLayout(ProjectLayout):
    """Layout where every root is an explicit path relative to the app base.

    Mode-insensitive; conf and route_table are taken as configured.
    """

    source_path: str
    test_source_path: str
    resource_path: str
    test_resource_path: str
    lib_path: str
    test_lib_path: str
    asset_path: str
    target_path: str
    route_table_path: str
    conf_path: str

    def source(self, app_base: Path) -> Path:
        return resolve_path(app_base, self.source_path)

    def test_source(self, app_base: Path) -> Path:
        return resolve_path(app_base, self.test_source_path)

    def resource(self, app_base: Path) -> Path:
        return resolve_path(app_base, self.resource_path)

    def test_resource(self, app_base: Path) -> Path:
        return resolve_path(app_base, self.test_resource_path)

    def lib(self, app_base: Path) -> Path:
        return resolve_path(app_base, self.lib_path)

    def test_lib(self, app_base: Path) -> Path:
        return resolve_path(app_base, self.test_lib_path)

    def asset(self, app_base: Path) -> Path:
        return resolve_path(app_base, self.asset_path)

    def target(self, app_base: Path) -> Path:
        return resolve_path(app_base, self.target_path)

    def route_table(self, app_base: Path) -> Path:
        return resolve_path(app_base, self.route_table_path)

    def conf(self, app_base: Path) -> Path:
        return resolve_path(app_base, self.conf_path)


def build_layout(config: Mapping[str, str]) -> CustomLayout:
    """Build a CustomLayout from config, e.g.::

        source=src/main/java
        testSource=src/test/java
        resource=src/main/resources
        testResource=src/test/resources
        lib=lib
        testLib=test-lib
        asset=public
        target=tmp
        routes=src/main/resources/routes
        conf=src/main/resources/conf

    Raises ConfigurationError naming the first missing key.
    """
    fields: dict[str, str] = {}
    for key, field in REQUIRED_KEYS.items():
        value = config.get(key)
        if value is None:
            msg = f"Cannot find '{key}' setting in project layout properties"
            raise ConfigurationError(msg, key=key)
        fields[field] = str(value)
    return CustomLayout(**fields)
