"""Tests for projlayout.cli (show, probe, main dispatch)."""

import json
from pathlib import Path
from unittest.mock import patch

import pytest


class TestParseLayoutArgs:
    def test_defaults(self) -> None:
        from projlayout.cli.parse_common import parse_layout_args

        assert parse_layout_args([], switches=("--json",)) == {
            "app_base": None,
            "layout": "auto",
            "mode": None,
            "json": False,
        }

    def test_values_and_switch(self) -> None:
        from projlayout.cli.parse_common import parse_layout_args

        opts = parse_layout_args(
            ["--json", "--layout", "Play", "--mode", "PROD", "--app-base", "some/dir"],
            switches=("--json",),
        )
        assert opts == {"app_base": "some/dir", "layout": "play", "mode": "prod", "json": True}

    @pytest.mark.parametrize(
        ("argv", "message"),
        [
            (["--bogus"], "Unknown argument: --bogus"),
            (["--json"], "Unknown argument: --json"),
            (["--layout"], "--layout requires a value"),
            (["--layout", "gradle"], "Invalid --layout value 'gradle'"),
            (["--mode", "staging"], "Invalid --mode value 'staging'"),
        ],
    )
    def test_usage_errors(self, argv: list[str], message: str) -> None:
        from projlayout.cli.parse_common import UsageError, parse_layout_args

        with pytest.raises(UsageError) as exc:
            parse_layout_args(argv)
        assert message in str(exc.value)


class TestShow:
    def test_text_output(self, maven_app: Path, capsys) -> None:
        from projlayout.cli.layout_cmd import run_show_argv

        assert run_show_argv(["--app-base", str(maven_app)]) == 0
        out, _ = capsys.readouterr()
        lines = dict(line.split(None, 1) for line in out.splitlines())
        assert lines["source"] == str(maven_app / "src/main/java")
        assert str(maven_app / "src/main/resources/routes") in out

    def test_json_output_packaged(self, app_base: Path, capsys) -> None:
        from projlayout.cli.layout_cmd import run_show_argv

        rc = run_show_argv(["--app-base", str(app_base), "--layout", "pkg", "--json"])
        assert rc == 0
        data = json.loads(capsys.readouterr().out)
        assert data["layout"]["source"] is None
        assert data["layout"]["target"] == str(app_base)
        assert data["layout"]["resource"] == str(app_base / "classes")

    def test_mode_flag(self, app_base: Path, capsys) -> None:
        from projlayout.cli.layout_cmd import run_show_argv

        rc = run_show_argv(
            ["--app-base", str(app_base), "--layout", "maven", "--mode", "prod", "--json"]
        )
        assert rc == 0
        data = json.loads(capsys.readouterr().out)
        assert data["layout"]["lib"] == str(app_base / "lib")

    def test_nothing_detected(self, app_base: Path, capsys) -> None:
        from projlayout.cli.layout_cmd import run_show_argv

        assert run_show_argv(["--app-base", str(app_base)]) == 1
        _, err = capsys.readouterr()
        assert "No project layout detected" in err

    def test_custom_layout_missing_key(self, app_base: Path, capsys) -> None:
        from projlayout.cli.layout_cmd import run_show_argv

        (app_base / "proj.layout").write_text("source=code\n")
        assert run_show_argv(["--app-base", str(app_base), "--layout", "custom"]) == 1
        _, err = capsys.readouterr()
        assert "Error:" in err and "testSource" in err

    def test_unknown_layout_is_usage_error(self, app_base: Path, capsys) -> None:
        from projlayout.cli.layout_cmd import run_show_argv

        assert run_show_argv(["--app-base", str(app_base), "--layout", "gradle"]) == 2
        _, err = capsys.readouterr()
        assert "Invalid --layout value" in err
        assert "Usage: projlayout show" in err

    def test_bad_mode_from_env(
        self, app_base: Path, capsys, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        from projlayout.cli.layout_cmd import run_show_argv

        monkeypatch.setenv("PROJLAYOUT_MODE", "staging")
        assert run_show_argv(["--app-base", str(app_base), "--layout", "maven"]) == 1
        assert "Unknown mode" in capsys.readouterr().err

    def test_unknown_argument_exits_2(self, app_base: Path, capsys) -> None:
        from projlayout.cli.layout_cmd import run_show_argv

        assert run_show_argv(["--bogus"]) == 2
        assert "Unknown argument: --bogus" in capsys.readouterr().err

    def test_relative_app_base_resolved_against_cwd(
        self, app_base: Path, capsys, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        from projlayout.cli.layout_cmd import run_show_argv

        monkeypatch.chdir(app_base.parent)
        rc = run_show_argv(["--app-base", f"{app_base.name}/x/..", "--layout", "play", "--json"])
        assert rc == 0
        assert json.loads(capsys.readouterr().out)["app_base"] == str(app_base)

    def test_unresolvable_app_base_reports_error(self, app_base: Path, capsys) -> None:
        from projlayout.cli.layout_cmd import run_show_argv

        err = PermissionError(13, "Permission denied")
        with patch("pathlib.Path.resolve", side_effect=err):
            rc = run_show_argv(["--app-base", str(app_base), "--layout", "maven"])
        assert rc == 1
        _, out_err = capsys.readouterr()
        assert out_err.startswith("Error: Cannot resolve")
        assert "Permission denied" in out_err


class TestProbe:
    def test_match(self, play_app: Path, capsys) -> None:
        from projlayout.cli.layout_cmd import run_probe_argv

        assert run_probe_argv(["--app-base", str(play_app), "--layout", "play"]) == 0
        assert "matches play layout" in capsys.readouterr().out

    def test_no_match(self, play_app: Path, capsys) -> None:
        from projlayout.cli.layout_cmd import run_probe_argv

        assert run_probe_argv(["--app-base", str(play_app), "--layout", "maven"]) == 1
        assert "does not match" in capsys.readouterr().out

    def test_requires_layout(self, play_app: Path, capsys) -> None:
        from projlayout.cli.layout_cmd import run_probe_argv

        assert run_probe_argv(["--app-base", str(play_app)]) == 2
        assert "requires --layout" in capsys.readouterr().err


class TestMain:
    def test_no_args_prints_usage(self, capsys) -> None:
        from projlayout.cli.main import main

        with patch("sys.argv", ["projlayout"]), pytest.raises(SystemExit) as exc:
            main()
        assert exc.value.code == 2
        assert "Usage: projlayout" in capsys.readouterr().err

    def test_unknown_command(self, capsys) -> None:
        from projlayout.cli.main import main

        with patch("sys.argv", ["projlayout", "build"]), pytest.raises(SystemExit) as exc:
            main()
        assert exc.value.code == 2
        assert "Unknown command: build" in capsys.readouterr().err

    def test_dispatches_show(self, maven_app: Path, capsys) -> None:
        from projlayout.cli.main import main

        argv = ["projlayout", "-v", "show", "--app-base", str(maven_app), "--json"]
        with patch("sys.argv", argv), pytest.raises(SystemExit) as exc:
            main()
        assert exc.value.code == 0
        data = json.loads(capsys.readouterr().out)
        assert data["app_base"] == str(maven_app)
