"""Pytest fixtures for projlayout tests."""

from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def _no_mode_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("PROJLAYOUT_MODE", raising=False)


@pytest.fixture
def app_base(tmp_path: Path) -> Path:
    """Empty app base dir, canonicalized (tmp dirs may sit behind a symlink)."""
    base = tmp_path / "app"
    base.mkdir()
    return base.resolve()


@pytest.fixture
def maven_app(app_base: Path) -> Path:
    """Maven-style tree with sources, resources and a conf file."""
    (app_base / "src" / "main" / "java").mkdir(parents=True)
    (app_base / "src" / "main" / "resources").mkdir(parents=True)
    (app_base / "src" / "main" / "resources" / "conf").write_text("app.name=demo\n")
    (app_base / "src" / "main" / "resources" / "routes").write_text("GET / Home.index\n")
    (app_base / "src" / "test" / "java").mkdir(parents=True)
    return app_base


@pytest.fixture
def play_app(app_base: Path) -> Path:
    """Play v1.x tree with app/ and conf/."""
    (app_base / "app").mkdir()
    (app_base / "conf").mkdir()
    (app_base / "conf" / "routes").write_text("GET / Application.index\n")
    return app_base
