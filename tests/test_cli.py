"""Tests for CLI argument parsing."""

import json
from pathlib import Path

import pytest

from cli import build_config, parse_args


class TestParseArgs:
    """Test parse_args() function."""

    def test_defaults(self):
        args = parse_args([])
        assert args.config_path is None
        assert args.log_level is None
        assert args.items == []
        assert args.keep_stale_renders is False

    def test_config_path(self):
        args = parse_args(["--config", "/tmp/todo.json"])
        assert args.config_path == Path("/tmp/todo.json")

    def test_log_level_case_insensitive(self):
        assert parse_args(["--log-level", "debug"]).log_level == "DEBUG"

    def test_invalid_log_level_exits(self):
        with pytest.raises(SystemExit):
            parse_args(["--log-level", "chatty"])

    def test_repeatable_add(self):
        args = parse_args(["--add", "buy milk", "--add", "walk dog"])
        assert args.items == ["buy milk", "walk dog"]

    def test_keep_stale_renders(self):
        assert parse_args(["--keep-stale-renders"]).keep_stale_renders is True

    def test_version_exits(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            parse_args(["--version"])
        assert exc_info.value.code == 0
        assert "todo-mvc" in capsys.readouterr().out


class TestBuildConfig:
    """Test build_config() overrides."""

    def test_cli_overrides_file(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({
            "log_level": "WARNING",
            "initial_items": ["from file"],
            "drop_stale_renders": True,
        }))
        args = parse_args([
            "--config", str(path),
            "--log-level", "debug",
            "--add", "from cli",
            "--keep-stale-renders",
        ])
        config = build_config(args)
        assert config.log_level == "DEBUG"
        assert config.initial_items == ["from file", "from cli"]
        assert config.drop_stale_renders is False

    def test_bad_config_exits(self, tmp_path, capsys):
        path = tmp_path / "config.json"
        path.write_text("[")
        with pytest.raises(SystemExit) as exc_info:
            build_config(parse_args(["--config", str(path)]))
        assert exc_info.value.code == 1
        assert "Config error" in capsys.readouterr().err

    def test_warnings_printed(self, tmp_path, capsys):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"unknown": 1}))
        build_config(parse_args(["--config", str(path)]))
        assert "Warning: Unknown config key 'unknown' ignored" in capsys.readouterr().err

    def test_missing_default_config(self, tmp_path, monkeypatch):
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
        config = build_config(parse_args(["--add", "x"]))
        assert config.initial_items == ["x"]
