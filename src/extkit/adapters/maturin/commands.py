"""Build maturin argument vectors from the ``[maturin]`` config section.

maturin itself does the work; this module only decides which flags to pass.
Every builder is pure and returns a fresh ``list[str]`` so callers can
log, test, or hand it to :func:`extkit.adapters.tools.runner.run_tool`.

Contents:
    * :class:`MaturinSettings` - Pydantic model for ``[maturin]``.
    * :func:`load_maturin_settings` - Parse the section from a Config.
    * :func:`build_new_command` - ``maturin new``.
    * :func:`build_develop_command` - ``maturin develop``.
    * :func:`build_deploy_command` - ``maturin publish``.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import cast

from lib_layered_config import Config
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from extkit.domain.enums import Bindings
from extkit.domain.errors import ConfigurationError


class MaturinSettings(BaseModel):
    """Pydantic model for [maturin] config section validation.

    Example:
        >>> settings = MaturinSettings()
        >>> settings.executable, settings.bindings.value, settings.repository
        ('maturin', 'pyo3', 'pypi')
        >>> MaturinSettings(bindings="cffi").bindings is Bindings.CFFI
        True
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    executable: str = "maturin"
    bindings: Bindings = Bindings.PYO3
    release: bool = False
    repository: str = "pypi"
    skip_existing: bool = False
    extras: list[str] = Field(default_factory=list)


def load_maturin_settings(config: Config) -> MaturinSettings:
    """Parse the ``[maturin]`` section of *config*.

    Raises:
        ConfigurationError: If the section contains invalid or unknown keys.

    Example:
        >>> load_maturin_settings(Config({"maturin": {"release": True}}, {})).release
        True
    """
    raw: object = config.get("maturin", default={})
    try:
        return MaturinSettings.model_validate(cast("dict[str, object]", raw) if raw else {})
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid [maturin] configuration: {exc}") from exc


def build_new_command(
    settings: MaturinSettings,
    path: Path | str,
    *,
    name: str | None = None,
    bindings: Bindings | None = None,
    mixed: bool = False,
) -> list[str]:
    """Return the ``maturin new`` command scaffolding a project at *path*.

    Example:
        >>> build_new_command(MaturinSettings(), "sample")
        ['maturin', 'new', '--bindings', 'pyo3', 'sample']
        >>> build_new_command(MaturinSettings(), "x", name="sample", bindings=Bindings.CFFI, mixed=True)
        ['maturin', 'new', '--bindings', 'cffi', '--name', 'sample', '--mixed', 'x']
    """
    chosen = bindings if bindings is not None else settings.bindings
    command = [settings.executable, "new", "--bindings", chosen.value]
    if name:
        command += ["--name", name]
    if mixed:
        command.append("--mixed")
    command.append(str(path))
    return command


def build_develop_command(
    settings: MaturinSettings,
    *,
    release: bool | None = None,
    extras: Sequence[str] = (),
) -> list[str]:
    """Return the ``maturin develop`` command for the current project.

    CLI arguments win over configured defaults; extras from both are
    combined in order, without duplicates.

    Example:
        >>> build_develop_command(MaturinSettings())
        ['maturin', 'develop']
        >>> build_develop_command(MaturinSettings(extras=["test"]), release=True, extras=["docs", "test"])
        ['maturin', 'develop', '--release', '--extras', 'test,docs']
    """
    command = [settings.executable, "develop"]
    if settings.release if release is None else release:
        command.append("--release")
    merged = list(dict.fromkeys([*settings.extras, *extras]))
    if merged:
        command += ["--extras", ",".join(merged)]
    return command


def build_deploy_command(
    settings: MaturinSettings,
    *,
    repository: str | None = None,
    skip_existing: bool | None = None,
) -> list[str]:
    """Return the ``maturin publish`` command that deploys built wheels.

    Example:
        >>> build_deploy_command(MaturinSettings())
        ['maturin', 'publish', '--repository', 'pypi']
        >>> build_deploy_command(MaturinSettings(), repository="testpypi", skip_existing=True)
        ['maturin', 'publish', '--repository', 'testpypi', '--skip-existing']
    """
    command = [settings.executable, "publish", "--repository", repository or settings.repository]
    if settings.skip_existing if skip_existing is None else skip_existing:
        command.append("--skip-existing")
    return command


__all__ = [
    "MaturinSettings",
    "build_deploy_command",
    "build_develop_command",
    "build_new_command",
    "load_maturin_settings",
]
