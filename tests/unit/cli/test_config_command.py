from __future__ import annotations

import json
from pathlib import Path

import pytest
import yaml
from typer.testing import CliRunner

import keel.config.editor as editor_module
from keel.cli.main import app

runner = CliRunner()

VALID_OPTIONS_LINE = "Valid options: get, pick, set, delete, list, edit, location"


def _write(path: Path, text: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")


@pytest.fixture
def workspace(tmp_path: Path) -> Path:
    project_root = tmp_path / "project"
    _write(
        project_root / ".keel" / "config.yaml",
        """
registry: https://registry.npmjs.org/
color: auto
""",
    )
    return tmp_path


def _invoke(workspace: Path, *args: str):
    env = {"XDG_CONFIG_HOME": str(workspace / "xdg"), "NO_COLOR": "1"}
    return runner.invoke(app, ["config", *args, "--working-dir", str(workspace / "project")], env=env)


def test_cli_without_command_shows_help() -> None:
    result = runner.invoke(app, [])

    assert result.exit_code == 0
    assert "Usage" in result.stdout
    assert "config" in result.stdout


def test_config_without_subcommand_is_usage_error(workspace: Path) -> None:
    result = _invoke(workspace)

    assert result.exit_code == 2
    assert "config command requires a subcommand" in result.stderr
    assert VALID_OPTIONS_LINE in result.stderr


def test_config_unrecognized_subcommand(workspace: Path) -> None:
    result = _invoke(workspace, "invalid")

    assert result.exit_code == 2
    assert "Unrecognized config command" in result.stderr
    assert "Found: invalid" in result.stderr
    assert VALID_OPTIONS_LINE in result.stderr


def test_config_get_merged_value(workspace: Path) -> None:
    result = _invoke(workspace, "get", "registry")

    assert result.exit_code == 0
    assert result.stdout == "https://registry.npmjs.org/\n"


def test_config_get_user_scope_missing_prints_nothing(workspace: Path) -> None:
    result = _invoke(workspace, "get", "registry", "--config", "user")

    assert result.exit_code == 0
    assert result.stdout == ""


def test_config_get_project_scope_prints_json(workspace: Path) -> None:
    result = _invoke(workspace, "get", "color", "--config", "project")

    assert result.exit_code == 0
    assert result.stdout == '"auto"\n'


def test_config_get_empty_key(workspace: Path) -> None:
    result = _invoke(workspace, "get", "")

    assert result.exit_code == 2
    assert "Key is required" in result.stderr


def test_config_list_and_ls_alias(workspace: Path) -> None:
    listed = _invoke(workspace, "list")
    aliased = _invoke(workspace, "ls")

    assert listed.exit_code == 0
    assert listed.stdout.splitlines() == ["registry=https://registry.npmjs.org/", "color=auto"]
    assert aliased.stdout == listed.stdout


def test_config_list_merges_user_and_project(workspace: Path) -> None:
    _write(workspace / "xdg" / "keel" / "config.yaml", "color: always\neditor: nano\n")

    result = _invoke(workspace, "list")

    assert result.stdout.splitlines() == ["color=auto", "editor=nano", "registry=https://registry.npmjs.org/"]


def test_config_pick_prints_json(workspace: Path) -> None:
    result = _invoke(workspace, "pick", "registry", "proxy")

    assert result.exit_code == 0
    assert json.loads(result.stdout) == {"registry": "https://registry.npmjs.org/", "proxy": None}


def test_config_pick_empty_user_scope(workspace: Path) -> None:
    result = _invoke(workspace, "pick", "--config", "user")

    assert result.exit_code == 0
    assert result.stdout == "{}\n"


def test_config_pick_yaml_format(workspace: Path) -> None:
    result = _invoke(workspace, "get", "--format", "yaml")

    assert result.exit_code == 0
    assert yaml.safe_load(result.stdout) == {"registry": "https://registry.npmjs.org/", "color": "auto"}


def test_config_set_then_get(workspace: Path) -> None:
    set_result = _invoke(workspace, "set", "retries=3", "color=never")
    get_result = _invoke(workspace, "get", "retries", "color")

    assert set_result.exit_code == 0
    assert set_result.stdout == ""
    assert json.loads(get_result.stdout) == {"retries": 3, "color": "never"}
    stored = yaml.safe_load((workspace / "project" / ".keel" / "config.yaml").read_text(encoding="utf-8"))
    assert stored == {"registry": "https://registry.npmjs.org/", "color": "never", "retries": 3}


def test_config_set_user_scope_creates_user_file(workspace: Path) -> None:
    result = _invoke(workspace, "set", "editor=nano", "--config", "user")

    assert result.exit_code == 0
    user_file = workspace / "xdg" / "keel" / "config.yaml"
    assert yaml.safe_load(user_file.read_text(encoding="utf-8")) == {"editor": "nano"}


def test_config_set_malformed_pair(workspace: Path) -> None:
    result = _invoke(workspace, "set", "color")

    assert result.exit_code == 2
    assert "Invalid key=value pair" in result.stderr
    assert "Found: color" in result.stderr


@pytest.mark.parametrize("command", ["delete", "del", "rm"])
def test_config_delete_aliases(workspace: Path, command: str) -> None:
    result = _invoke(workspace, command, "color")

    assert result.exit_code == 0
    assert _invoke(workspace, "list").stdout.splitlines() == ["registry=https://registry.npmjs.org/"]


def test_config_location(workspace: Path) -> None:
    default = _invoke(workspace, "location")
    project = _invoke(workspace, "location", "--config", "project")
    user = _invoke(workspace, "location", "--config", "USER")

    project_path = (workspace / "project").resolve() / ".keel" / "config.yaml"
    assert default.stdout.strip() == str(project_path)
    assert project.stdout == default.stdout
    assert user.stdout.strip() == str(workspace / "xdg" / "keel" / "config.yaml")


def test_config_edit_launches_editor(workspace: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    calls: list[dict[str, object]] = []
    monkeypatch.setattr(editor_module.typer, "edit", lambda **kwargs: calls.append(kwargs))
    _write(workspace / "xdg" / "keel" / "config.yaml", "editor: nano\n")

    result = _invoke(workspace, "edit", "--config", "user")

    assert result.exit_code == 0
    assert calls == [{"filename": str(workspace / "xdg" / "keel" / "config.yaml"), "editor": "nano"}]


def test_config_reports_store_errors(workspace: Path) -> None:
    broken = workspace / "xdg" / "keel" / "config.yaml"
    _write(broken, "invalid: [")

    result = _invoke(workspace, "list")

    assert result.exit_code == 1
    assert "[user]" in result.stderr
    assert str(broken) in result.stderr


@pytest.mark.parametrize("args", [("list",), ("get", "color"), ("pick",)])
def test_config_reports_values_json_cannot_hold(workspace: Path, args: tuple[str, ...]) -> None:
    config_file = workspace / "project" / ".keel" / "config.yaml"
    _write(config_file, "color: auto\nsince: 2024-01-01\n")

    result = _invoke(workspace, *args)

    assert result.exit_code == 1
    assert "[project]" in result.stderr
    assert "key 'since'" in result.stderr
    assert result.stdout == ""


def test_config_numeric_keys_are_addressable(workspace: Path) -> None:
    config_file = workspace / "project" / ".keel" / "config.yaml"
    _write(config_file, "1: one\ncolor: auto\n")

    got = _invoke(workspace, "get", "1")
    listed = _invoke(workspace, "list")
    deleted = _invoke(workspace, "delete", "1")

    assert got.exit_code == 0
    assert got.stdout == "one\n"
    assert listed.stdout.splitlines() == ["1=one", "color=auto"]
    assert deleted.exit_code == 0
    assert yaml.safe_load(config_file.read_text(encoding="utf-8")) == {"color": "auto"}


def test_config_reports_directory_in_place_of_store(workspace: Path) -> None:
    expected = workspace / "xdg" / "keel" / "config.yaml"
    expected.mkdir(parents=True)

    result = _invoke(workspace, "list")

    assert result.exit_code == 1
    assert "[user]" in result.stderr
    assert f"expected at {expected}" in result.stderr
