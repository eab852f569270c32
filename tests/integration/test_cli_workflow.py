"""End-to-end tests for selecting and resolving interpreters through the CLI."""

from __future__ import annotations

import json
from pathlib import Path

import yaml

from interpreter_path.environment import norm_case


def _folder_key(folder: Path) -> str:
    return f"WORKSPACE_FOLDER_INTERPRETER_PATH_{norm_case(folder.resolve())}"


class TestSingleFolderWorkflow:
    """Tests for a workspace with one folder."""

    def test_global_value_applies_by_default(self, cli, project_dir: Path) -> None:
        """Test the user settings interpreter is used when nothing else is set."""
        result = cli("get", str(project_dir), workspace=["--folder", str(project_dir)])

        assert result.exit_code == 0
        assert result.stdout.strip() == "/usr/bin/python3"

    def test_folder_selection_persists(self, cli, project_dir: Path, state_file: Path) -> None:
        """Test a folder selection is stored in the state file and wins over the global value."""
        folder = ["--folder", str(project_dir)]

        set_result = cli("set", "/venv/bin/python", str(project_dir), workspace=folder)
        get_result = cli("get", str(project_dir / "main.py"), workspace=folder)

        assert set_result.exit_code == 0
        assert get_result.stdout.strip() == "/venv/bin/python"
        assert json.loads(state_file.read_text()) == {_folder_key(project_dir): "/venv/bin/python"}

    def test_variables_expand_on_get(self, cli, project_dir: Path) -> None:
        """Test ${workspaceFolder} is stored verbatim and expanded on read."""
        folder = ["--folder", str(project_dir)]

        cli("set", "${workspaceFolder}/.venv/bin/python", str(project_dir), workspace=folder)
        result = cli("get", str(project_dir), workspace=folder)

        assert result.stdout.strip() == f"{project_dir.resolve()}/.venv/bin/python"

    def test_folder_settings_file_used(self, cli, project_dir: Path) -> None:
        """Test interpreter paths from the folder's settings file are honored."""
        settings = project_dir / ".interpreter" / "settings.yaml"
        settings.parent.mkdir()
        settings.write_text("python:\n  defaultInterpreterPath: /folder/python\n")

        result = cli("get", str(project_dir), workspace=["--folder", str(project_dir)])

        assert result.stdout.strip() == "/folder/python"

    def test_unset_falls_back(self, cli, project_dir: Path, state_file: Path) -> None:
        """Test clearing the folder selection restores the global value."""
        folder = ["--folder", str(project_dir)]
        cli("set", "/venv/bin/python", str(project_dir), workspace=folder)

        unset_result = cli("unset", str(project_dir), workspace=folder)
        get_result = cli("get", str(project_dir), workspace=folder)

        assert unset_result.exit_code == 0
        assert get_result.stdout.strip() == "/usr/bin/python3"
        assert json.loads(state_file.read_text()) == {}

    def test_inspect_shows_scopes(self, cli, project_dir: Path) -> None:
        folder = ["--folder", str(project_dir)]
        cli("set", "/venv/bin/python", str(project_dir), workspace=folder)

        result = cli("inspect", str(project_dir), workspace=folder)

        assert result.exit_code == 0
        assert "workspaceFolder" in result.stdout
        assert "/usr/bin/python3" in result.stdout

    def test_key_command(self, cli, project_dir: Path) -> None:
        result = cli("key", str(project_dir), workspace=["--folder", str(project_dir)])

        assert result.exit_code == 0
        assert result.stdout.strip() == _folder_key(project_dir)


class TestGlobalScope:
    """Tests for the global scope."""

    def test_set_global_writes_user_settings(self, cli, user_settings_file: Path, state_file: Path) -> None:
        """Test global selections go to the user settings file, not the state file."""
        result = cli("set", "/opt/python3.12/bin/python", "--scope", "global")

        assert result.exit_code == 0
        assert yaml.safe_load(user_settings_file.read_text()) == {
            "python": {"defaultInterpreterPath": "/opt/python3.12/bin/python"}
        }
        assert not state_file.exists()
        assert cli("get").stdout.strip() == "/opt/python3.12/bin/python"

    def test_no_workspace_default(self, runner, state_file: Path) -> None:
        """Test the built-in default applies without any settings."""
        from interpreter_path.cli.app import app

        result = runner.invoke(app, ["--state-file", str(state_file), "get"])

        assert result.exit_code == 0
        assert result.stdout.strip() == "python"

    def test_unwritable_user_settings_reported(self, runner, state_file: Path, tmp_path: Path) -> None:
        """Test a user settings path that cannot be created is reported and exits 1."""
        from interpreter_path.cli.app import app

        blocker = tmp_path / "not-a-directory"
        blocker.write_text("")
        user_settings = blocker / "user.yaml"

        result = runner.invoke(
            app,
            ["--state-file", str(state_file), "--user-settings", str(user_settings),
             "set", "/opt/python3.12/bin/python", "--scope", "global"],
        )

        assert result.exit_code == 1
        assert isinstance(result.exception, SystemExit)
        assert "Cannot write settings file" in result.stdout
        assert blocker.read_text() == ""


class TestNoWorkspace:
    """Tests for workspace-scoped updates without a workspace."""

    def test_workspace_update_rejected(self, cli, state_file: Path) -> None:
        """Test a workspace-scoped update without folders writes nothing and fails."""
        result = cli("set", "/venv/bin/python", "--scope", "workspace")

        assert result.exit_code == 1
        assert "no workspace is opened" in result.stdout
        assert not state_file.exists()

    def test_missing_folder_reported(self, cli, tmp_path: Path) -> None:
        """Test a workspace folder that does not exist is reported and exits 1."""
        result = cli("get", workspace=["--folder", str(tmp_path / "missing")])

        assert result.exit_code == 1
        assert "does not exist" in result.stdout


class TestMultiRootWorkspace:
    """Tests for a workspace file opening several folders."""

    def test_workspace_scope_shared_by_folders(
        self, cli, workspace_file: Path, project_dir: Path, second_project_dir: Path, state_file: Path
    ) -> None:
        """Test a workspace-scope selection applies to every folder."""
        ws = ["--workspace-file", str(workspace_file)]

        cli("set", "/ws/python", str(project_dir), "--scope", "workspace", workspace=ws)

        assert cli("get", str(project_dir), workspace=ws).stdout.strip() == "/ws/python"
        assert cli("get", str(second_project_dir), workspace=ws).stdout.strip() == "/ws/python"
        stored = json.loads(state_file.read_text())
        assert stored == {f"WORKSPACE_INTERPRETER_PATH_{norm_case(workspace_file.resolve())}": "/ws/python"}

    def test_folder_scope_overrides_workspace(
        self, cli, workspace_file: Path, project_dir: Path, second_project_dir: Path
    ) -> None:
        """Test a folder selection wins for that folder only."""
        ws = ["--workspace-file", str(workspace_file)]
        cli("set", "/ws/python", str(project_dir), "--scope", "workspace", workspace=ws)

        cli("set", "/lib/python", str(second_project_dir), "--scope", "workspaceFolder", workspace=ws)

        assert cli("get", str(project_dir), workspace=ws).stdout.strip() == "/ws/python"
        assert cli("get", str(second_project_dir), workspace=ws).stdout.strip() == "/lib/python"
