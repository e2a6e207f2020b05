"""Build container engine command lines from the ``[container]`` section.

The image is the reproducible build environment: Rust toolchain, maturin
and Python. The project directory is bind-mounted into it so edits on
the host are visible inside the session.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import cast

from lib_layered_config import Config
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from extkit.domain.errors import ConfigurationError


class ContainerSettings(BaseModel):
    """Pydantic model for [container] config section validation.

    Example:
        >>> ContainerSettings().image
        'extkit-dev'
        >>> ContainerSettings(workdir="src")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        pydantic_core._pydantic_core.ValidationError: ...
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    engine: str = "docker"
    image: str = "extkit-dev"
    dockerfile: str = "Dockerfile"
    workdir: str = "/workspace"

    @field_validator("workdir")
    @classmethod
    def _workdir_is_absolute(cls, value: str) -> str:
        if not value.startswith("/"):
            raise ValueError("workdir must be an absolute path inside the container")
        return value


def load_container_settings(config: Config) -> ContainerSettings:
    """Parse the ``[container]`` section of *config*.

    Raises:
        ConfigurationError: If the section contains invalid or unknown keys.
    """
    raw: object = config.get("container", default={})
    try:
        return ContainerSettings.model_validate(cast("dict[str, object]", raw) if raw else {})
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid [container] configuration: {exc}") from exc


def build_image_command(settings: ContainerSettings, context_dir: Path) -> list[str]:
    """Return the command building the development image from *context_dir*.

    Example:
        >>> build_image_command(ContainerSettings(), Path("/src/demo"))
        ['docker', 'build', '-t', 'extkit-dev', '-f', '/src/demo/Dockerfile', '/src/demo']
    """
    dockerfile = context_dir / settings.dockerfile
    return [settings.engine, "build", "-t", settings.image, "-f", str(dockerfile), str(context_dir)]


def build_run_command(
    settings: ContainerSettings,
    project_dir: Path,
    *,
    command: Sequence[str] = (),
) -> list[str]:
    """Return the interactive, bind-mounted ``run`` command.

    Example:
        >>> build_run_command(ContainerSettings(), Path("/src/demo"))
        ['docker', 'run', '--rm', '-it', '-v', '/src/demo:/workspace', '-w', '/workspace', 'extkit-dev']
        >>> build_run_command(ContainerSettings(engine="podman"), Path("/p"), command=["maturin", "develop"])[-3:]
        ['extkit-dev', 'maturin', 'develop']
    """
    mount = f"{project_dir}:{settings.workdir}"
    return [
        settings.engine,
        "run",
        "--rm",
        "-it",
        "-v",
        mount,
        "-w",
        settings.workdir,
        settings.image,
        *command,
    ]


__all__ = [
    "ContainerSettings",
    "build_image_command",
    "build_run_command",
    "load_container_settings",
]
