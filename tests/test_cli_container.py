"""CLI container stories: image build and interactive session."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner, Result

from extkit.adapters import cli as cli_mod
from extkit.adapters.cli.exit_codes import ExitCode


@pytest.mark.os_agnostic
def test_container_build_uses_dockerfile_in_context(
    cli_runner: CliRunner,
    tool_cli_context: Callable[..., Any],
    tmp_path: Path,
) -> None:
    """container-build runs the engine's build in the context directory."""
    (tmp_path / "Dockerfile").write_text("FROM scratch\n")
    ctx = tool_cli_context()

    result: Result = cli_runner.invoke(cli_mod.cli, ["container-build", "--context", str(tmp_path)], obj=ctx.factory)

    context = tmp_path.resolve()
    assert result.exit_code == 0
    assert ctx.spy.calls == [
        (["docker", "build", "-t", "extkit-dev", "-f", str(context / "Dockerfile"), str(context)], context)
    ]


@pytest.mark.os_agnostic
def test_container_build_without_dockerfile_exits_file_not_found(
    cli_runner: CliRunner,
    tool_cli_context: Callable[..., Any],
    tmp_path: Path,
) -> None:
    """A missing Dockerfile is reported before the engine is called."""
    ctx = tool_cli_context()

    result: Result = cli_runner.invoke(cli_mod.cli, ["container-build", "--context", str(tmp_path)], obj=ctx.factory)

    assert result.exit_code == ExitCode.FILE_NOT_FOUND
    assert ctx.spy.commands == []


@pytest.mark.os_agnostic
def test_container_run_mounts_project_interactively(
    cli_runner: CliRunner,
    tool_cli_context: Callable[..., Any],
    tmp_path: Path,
) -> None:
    """container-run bind-mounts the project and allocates a TTY."""
    ctx = tool_cli_context({"container": {"engine": "podman", "image": "dev:2"}})

    result: Result = cli_runner.invoke(cli_mod.cli, ["container-run", "--project", str(tmp_path)], obj=ctx.factory)

    project = tmp_path.resolve()
    assert result.exit_code == 0
    assert ctx.spy.commands == [
        ["podman", "run", "--rm", "-it", "-v", f"{project}:/workspace", "-w", "/workspace", "dev:2"]
    ]


@pytest.mark.os_agnostic
def test_container_run_forwards_inner_command_untouched(
    cli_runner: CliRunner,
    tool_cli_context: Callable[..., Any],
    tmp_path: Path,
) -> None:
    """Options meant for the inner command are not parsed by extkit."""
    ctx = tool_cli_context()

    cli_runner.invoke(
        cli_mod.cli,
        ["container-run", "--project", str(tmp_path), "maturin", "develop", "--release"],
        obj=ctx.factory,
    )

    assert ctx.spy.commands[0][-4:] == ["extkit-dev", "maturin", "develop", "--release"]


@pytest.mark.os_agnostic
def test_container_run_reports_missing_engine(
    cli_runner: CliRunner,
    tool_cli_context: Callable[..., Any],
    tmp_path: Path,
) -> None:
    """Without docker on PATH the session exits FILE_NOT_FOUND."""
    ctx = tool_cli_context(missing={"docker"})

    result: Result = cli_runner.invoke(cli_mod.cli, ["container-run", "--project", str(tmp_path)], obj=ctx.factory)

    assert result.exit_code == ExitCode.FILE_NOT_FOUND
    assert "docker" in result.stderr
