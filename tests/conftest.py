"""Shared pytest fixtures for CLI, adapter and module-entry tests.

Fixtures use descriptive names that read as plain English; tests pick
them up implicitly via conftest discovery.
"""

from __future__ import annotations

import contextlib
import os
import re
import tempfile
from collections.abc import Callable, Iterator
from dataclasses import dataclass, fields
from pathlib import Path
from typing import TYPE_CHECKING, Any

import lib_cli_exit_tools
import lib_log_rich.runtime
import pytest
from click.testing import CliRunner
from lib_layered_config import Config

if TYPE_CHECKING:
    from extkit.adapters.memory.tools import ToolSpy
    from extkit.composition import AppServices

_COVERAGE_BASENAME = ".coverage.extkit"


def pytest_configure(config: pytest.Config) -> None:
    """Keep the coverage database on a local temp directory.

    SQLite needs POSIX locking, which network mounts do not reliably
    provide. Leftover journal files from a crashed run are removed first.
    """
    if "COVERAGE_FILE" not in os.environ:
        cov_path = Path(tempfile.gettempdir()) / _COVERAGE_BASENAME
        for suffix in ("", "-journal", "-wal", "-shm"):
            with contextlib.suppress(FileNotFoundError):
                Path(str(cov_path) + suffix).unlink()
        os.environ["COVERAGE_FILE"] = str(cov_path)


def _load_dotenv() -> None:
    """Load a project-level .env when present."""
    from dotenv import load_dotenv

    env_file = Path(__file__).parent.parent / ".env"
    if env_file.exists():
        load_dotenv(env_file)


_load_dotenv()

ANSI_ESCAPE_PATTERN = re.compile(r"\x1B\[[0-?]*[ -/]*[@-~]")
CONFIG_FIELDS: tuple[str, ...] = tuple(field.name for field in fields(type(lib_cli_exit_tools.config)))


def _snapshot_cli_config() -> dict[str, object]:
    return {name: getattr(lib_cli_exit_tools.config, name) for name in CONFIG_FIELDS}


def _restore_cli_config(snapshot: dict[str, object]) -> None:
    for name, value in snapshot.items():
        setattr(lib_cli_exit_tools.config, name, value)


@pytest.fixture(scope="session", autouse=True)
def _shutdown_logging_after_session() -> Iterator[None]:
    """Flush and stop lib_log_rich once every test has run."""
    yield
    if lib_log_rich.runtime.is_initialised():
        lib_log_rich.runtime.shutdown()


@pytest.fixture(autouse=True)
def logging_runtime() -> None:
    """Make sure a lib_log_rich runtime is live before each test.

    Commands open ``lib_log_rich.runtime.bind`` even when wired with the
    in-memory logging adapter, and ``main()`` shuts the runtime down on
    exit, so it is re-created here whenever a previous test stopped it.
    """
    from extkit.adapters.logging import init_logging

    init_logging(Config({"lib_log_rich": {"environment": "test"}}, {}))


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a fresh CliRunner per test.

    Use ``result.stdout`` when the assertion must not see log lines that
    lib_log_rich writes to stderr.
    """
    return CliRunner()


@pytest.fixture
def production_factory() -> Callable[[], AppServices]:
    """Provide ``build_production`` for commands that need real adapters."""
    from extkit.composition import build_production

    return build_production


@pytest.fixture
def testing_factory() -> Callable[[], AppServices]:
    """Provide ``build_testing``: empty config, no logging, recorded processes."""
    from extkit.composition import build_testing

    return build_testing


@pytest.fixture
def strip_ansi() -> Callable[[str], str]:
    """Return a helper that strips ANSI escape sequences from a string."""

    def _strip(value: str) -> str:
        return ANSI_ESCAPE_PATTERN.sub("", value)

    return _strip


@pytest.fixture
def managed_traceback_state() -> Iterator[None]:
    """Reset traceback flags to a known baseline and restore them afterwards."""
    lib_cli_exit_tools.reset_config()
    lib_cli_exit_tools.config.traceback = False
    lib_cli_exit_tools.config.traceback_force_color = False
    snapshot = _snapshot_cli_config()
    try:
        yield
    finally:
        _restore_cli_config(snapshot)


@pytest.fixture
def clear_config_cache() -> Iterator[None]:
    """Clear the get_config cache before the test."""
    from extkit.adapters.config import loader as config_mod

    config_mod.get_config.cache_clear()
    yield


@pytest.fixture
def config_factory() -> Callable[[dict[str, Any]], Config]:
    """Create real Config instances from plain dicts, without filesystem I/O."""

    def _factory(data: dict[str, Any]) -> Config:
        return Config(data, {})

    return _factory


@dataclass
class ToolCliContext:
    """Services factory plus the spy recording every external command.

    Attributes:
        factory: Callable returning wired AppServices for ``obj=``.
        spy: ToolSpy capturing command lines instead of running them.
        profiles: Profile arguments seen by ``get_config``, in call order.
    """

    factory: Callable[[], Any]
    spy: ToolSpy
    profiles: list[str | None]


@pytest.fixture
def tool_cli_context(
    clear_config_cache: None,
) -> Callable[..., ToolCliContext]:
    """Create a CLI context with injected config and a recording process runner.

    Keyword arguments ``exit_code`` and ``missing`` are forwarded to the
    ToolSpy to simulate failing or absent tools.

    Example:
        def test_develop(cli_runner, tool_cli_context) -> None:
            ctx = tool_cli_context({"maturin": {"release": True}})
            cli_runner.invoke(cli, ["develop"], obj=ctx.factory)
            assert ctx.spy.commands == [["maturin", "develop", "--release"]]
    """
    from extkit.adapters.memory.tools import ToolSpy as ToolSpyImpl
    from extkit.composition import AppServices, build_production

    def _create(
        config_data: dict[str, Any] | None = None,
        *,
        exit_code: int = 0,
        missing: set[str] | None = None,
    ) -> ToolCliContext:
        spy = ToolSpyImpl(exit_code=exit_code, missing=set(missing or ()))
        config = Config(config_data or {}, {})
        profiles: list[str | None] = []
        prod = build_production()

        def _fake_get_config(*, profile: str | None = None, **_kwargs: Any) -> Config:
            profiles.append(profile)
            return config

        test_services = AppServices(
            get_config=_fake_get_config,
            display_config=prod.display_config,
            init_logging=prod.init_logging,
            run_tool=spy.run_tool,
            tac=prod.tac,
            count_lines=prod.count_lines,
        )
        return ToolCliContext(factory=lambda: test_services, spy=spy, profiles=profiles)

    return _create


@pytest.fixture
def text_file(tmp_path: Path) -> Callable[[str], Path]:
    """Write *content* to a fresh UTF-8 file and return its path."""
    counter = iter(range(1_000_000))

    def _write(content: str) -> Path:
        path = tmp_path / f"sample_{next(counter)}.txt"
        path.write_bytes(content.encode("utf-8"))
        return path

    return _write
