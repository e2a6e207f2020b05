"""Container adapter - image build and interactive session commands."""

from __future__ import annotations

from .commands import (
    ContainerSettings,
    build_image_command,
    build_run_command,
    load_container_settings,
)

__all__ = [
    "ContainerSettings",
    "build_image_command",
    "build_run_command",
    "load_container_settings",
]
