"""Maturin adapter - command lines for ``new``, ``develop`` and ``deploy``.

Contents:
    * :mod:`.commands` - Settings model and argument-vector builders
"""

from __future__ import annotations

from .commands import (
    MaturinSettings,
    build_deploy_command,
    build_develop_command,
    build_new_command,
    load_maturin_settings,
)

__all__ = [
    "MaturinSettings",
    "build_deploy_command",
    "build_develop_command",
    "build_new_command",
    "load_maturin_settings",
]
