"""Tests for the version CLI command."""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path

import pytest
from click.testing import CliRunner

from kubeplug.cli import cli
from kubeplug.domain.errors import InputError
from kubeplug.infrastructure import executable

MakeLink = Callable[[Path, str | Path], Path]


@pytest.fixture
def run_as(monkeypatch: pytest.MonkeyPatch) -> Callable[[str | Path], None]:
    """Pretend the running program lives at the given path."""

    def _set(path: str | Path) -> None:
        monkeypatch.setattr(executable, "current_executable", lambda: str(path))

    return _set


@pytest.fixture
def _rooted(install_root: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("KUBEPLUG_ROOT", str(install_root))


@pytest.mark.usefixtures("_rooted")
class TestVersionCommand:
    def test_help_lists_remarks(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["version", "--help"])
        assert result.exit_code == 0
        assert "IsPlugin" in result.output
        assert "ExecutedVersion" in result.output

    def test_examples(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["version", "--examples"])
        assert result.exit_code == 0
        assert "kubectl kubeplug version" in result.output

    def test_direct_invocation_table(
        self, cli_runner: CliRunner, install_root: Path, run_as: Callable[[str | Path], None]
    ) -> None:
        run_as(install_root / "bin" / "v1.2.3" / "kubeplug")
        result = cli_runner.invoke(cli, ["version"])
        assert result.exit_code == 0, result.output
        assert "OPTION" in result.output
        assert "ExecutedVersion" in result.output
        assert "v1.2.3" in result.output
        assert str(install_root / "store") in result.output

    def test_direct_invocation_json(
        self, cli_runner: CliRunner, install_root: Path, run_as: Callable[[str | Path], None]
    ) -> None:
        run_as(install_root / "bin" / "v1.2.3" / "kubeplug")
        result = cli_runner.invoke(cli, ["--json", "version"])
        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["ok"] is True
        assert data["data"]["is_plugin"] is False
        assert data["data"]["executed_version"] == "v1.2.3"
        assert data["data"]["base_path"] == str(install_root)
        assert data["data"]["bin_path"] == str(install_root / "bin")

    def test_plugin_invocation_json(
        self, cli_runner: CliRunner, real_tmp: Path, run_as: Callable[[str | Path], None]
    ) -> None:
        plugin = real_tmp / "kubectl-kubeplug"
        plugin.write_text("#!/bin/sh\n")
        run_as(plugin)
        result = cli_runner.invoke(cli, ["--json", "version"])
        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["data"]["is_plugin"] is True
        assert data["data"]["executed_version"] == ""

    def test_symlinked_entry_point_is_direct(
        self,
        cli_runner: CliRunner,
        install_root: Path,
        real_tmp: Path,
        make_link: MakeLink,
        run_as: Callable[[str | Path], None],
    ) -> None:
        link = make_link(real_tmp / "kubeplug", install_root / "bin" / "v1.2.3" / "kubeplug")
        run_as(link)
        result = cli_runner.invoke(cli, ["-q", "version"])
        assert result.exit_code == 0, result.output
        assert result.output.strip() == "v1.2.3"

    def test_quiet_unknown_version(
        self, cli_runner: CliRunner, real_tmp: Path, run_as: Callable[[str | Path], None]
    ) -> None:
        run_as(real_tmp / "elsewhere")
        result = cli_runner.invoke(cli, ["-q", "version"])
        assert result.exit_code == 0
        assert result.output.strip() == "unknown"

    def test_index_uri_from_config(
        self,
        cli_runner: CliRunner,
        install_root: Path,
        run_as: Callable[[str | Path], None],
    ) -> None:
        (install_root / "config.toml").write_text('[index]\nuri = "https://mirror.example/i.git"\n')
        run_as(install_root / "bin" / "v1.2.3" / "kubeplug")
        result = cli_runner.invoke(cli, ["--json", "version"])
        assert result.exit_code == 0, result.output
        assert json.loads(result.output)["data"]["index_uri"] == "https://mirror.example/i.git"

    def test_cyclic_link_fails(
        self,
        cli_runner: CliRunner,
        real_tmp: Path,
        make_link: MakeLink,
        run_as: Callable[[str | Path], None],
    ) -> None:
        make_link(real_tmp / "a", real_tmp / "b")
        make_link(real_tmp / "b", real_tmp / "a")
        run_as(real_tmp / "a")
        result = cli_runner.invoke(cli, ["version"])
        assert result.exit_code == 1
        assert "failed to find current kubeplug version" in result.output

    def test_empty_executable_path_fails(
        self, cli_runner: CliRunner, run_as: Callable[[str | Path], None]
    ) -> None:
        run_as("")
        result = cli_runner.invoke(cli, ["--json", "version"])
        assert result.exit_code == 1
        assert "INVALID_INPUT" in result.output

    def test_unknown_executable_path(
        self, cli_runner: CliRunner, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        def missing() -> str:
            raise InputError("running program 'kp' not found on PATH")

        monkeypatch.setattr(executable, "current_executable", missing)
        result = cli_runner.invoke(cli, ["version"])
        assert result.exit_code == 1
        assert "failed to get the own executable path" in result.output


class TestRootOption:
    def test_root_flag_sets_layout(
        self, cli_runner: CliRunner, install_root: Path, run_as: Callable[[str | Path], None]
    ) -> None:
        run_as(install_root / "bin" / "v1.2.3" / "kubeplug")
        result = cli_runner.invoke(cli, ["--root", str(install_root), "--json", "version"])
        assert result.exit_code == 0, result.output
        data = json.loads(result.output)["data"]
        assert data["base_path"] == str(install_root)
        assert data["executed_version"] == "v1.2.3"
        assert data["is_plugin"] is False

    def test_root_flag_beats_env(
        self,
        cli_runner: CliRunner,
        install_root: Path,
        real_tmp: Path,
        monkeypatch: pytest.MonkeyPatch,
        run_as: Callable[[str | Path], None],
    ) -> None:
        monkeypatch.setenv("KUBEPLUG_ROOT", str(real_tmp / "other"))
        run_as(install_root / "bin" / "v1.2.3" / "kubeplug")
        result = cli_runner.invoke(cli, ["--root", str(install_root), "-q", "version"])
        assert result.exit_code == 0, result.output
        assert result.output.strip() == "v1.2.3"

    def test_tilde_root_from_env_is_expanded(
        self,
        cli_runner: CliRunner,
        real_tmp: Path,
        monkeypatch: pytest.MonkeyPatch,
        run_as: Callable[[str | Path], None],
    ) -> None:
        monkeypatch.setenv("KUBEPLUG_ROOT", "~/kp")
        run_as(real_tmp / "kubectl-kubeplug")
        result = cli_runner.invoke(cli, ["--json", "version"])
        assert result.exit_code == 0, result.output
        data = json.loads(result.output)["data"]
        assert data["base_path"] == str(Path.home() / "kp")
        assert data["bin_path"] == str(Path.home() / "kp" / "bin")
