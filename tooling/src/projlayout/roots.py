"""Named accessors for the ten layout roots."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

from projlayout.layout.base import ProjectLayout

RootFn = Callable[[Path, ProjectLayout], "Path | None"]

ROOTS: dict[str, RootFn] = {
    "source": lambda base, layout: layout.source(base),
    "test_source": lambda base, layout: layout.test_source(base),
    "resource": lambda base, layout: layout.resource(base),
    "test_resource": lambda base, layout: layout.test_resource(base),
    "lib": lambda base, layout: layout.lib(base),
    "test_lib": lambda base, layout: layout.test_lib(base),
    "asset": lambda base, layout: layout.asset(base),
    "target": lambda base, layout: layout.target(base),
    "conf": lambda base, layout: layout.conf(base),
    "route_table": lambda base, layout: layout.route_table(base),
}


def root_fn(name: str) -> RootFn:
    """Accessor for a root name. Raises KeyError listing known names if unknown."""
    try:
        return ROOTS[name]
    except KeyError:
        msg = f"Unknown layout root {name!r}; expected one of {', '.join(ROOTS)}"
        raise KeyError(msg) from None


def resolve_roots(layout: ProjectLayout, app_base: Path) -> dict[str, Path | None]:
    """All ten roots of app_base under layout, in ROOTS order."""
    return {name: fn(app_base, layout) for name, fn in ROOTS.items()}

