"""maturin adapter stories: settings parsing and command-line building."""

from __future__ import annotations

from pathlib import Path

import pytest
from lib_layered_config import Config

from extkit.adapters.maturin.commands import (
    MaturinSettings,
    build_deploy_command,
    build_develop_command,
    build_new_command,
    load_maturin_settings,
)
from extkit.domain.enums import Bindings
from extkit.domain.errors import ConfigurationError


@pytest.mark.os_agnostic
def test_load_maturin_settings_uses_defaults_when_section_missing() -> None:
    """An absent [maturin] section yields the model defaults."""
    settings = load_maturin_settings(Config({}, {}))

    assert settings == MaturinSettings()


@pytest.mark.os_agnostic
def test_load_maturin_settings_reads_configured_values() -> None:
    """Configured keys override defaults."""
    config = Config({"maturin": {"executable": "/opt/bin/maturin", "bindings": "uniffi", "extras": ["test"]}}, {})

    settings = load_maturin_settings(config)

    assert settings.executable == "/opt/bin/maturin"
    assert settings.bindings is Bindings.UNIFFI
    assert settings.extras == ["test"]


@pytest.mark.os_agnostic
@pytest.mark.parametrize("section", [{"bindings": "swig"}, {"unknown_key": 1}, {"release": "sometimes"}])
def test_load_maturin_settings_rejects_invalid_section(section: dict[str, object]) -> None:
    """Invalid values and unknown keys raise ConfigurationError."""
    with pytest.raises(ConfigurationError, match=r"\[maturin\]"):
        load_maturin_settings(Config({"maturin": section}, {}))


@pytest.mark.os_agnostic
def test_build_new_command_defaults_to_configured_bindings() -> None:
    """Without an explicit flavour the configured one is used."""
    settings = MaturinSettings(bindings=Bindings.CFFI)

    assert build_new_command(settings, Path("demo")) == ["maturin", "new", "--bindings", "cffi", "demo"]


@pytest.mark.os_agnostic
def test_build_new_command_puts_path_last_after_options() -> None:
    """Name and mixed flags precede the positional path."""
    command = build_new_command(MaturinSettings(), "proj", name="sample", bindings=Bindings.BIN, mixed=True)

    assert command == ["maturin", "new", "--bindings", "bin", "--name", "sample", "--mixed", "proj"]


@pytest.mark.os_agnostic
def test_build_develop_command_honours_configured_release() -> None:
    """release=None falls back to the configured value."""
    assert build_develop_command(MaturinSettings(release=True)) == ["maturin", "develop", "--release"]


@pytest.mark.os_agnostic
def test_build_develop_command_cli_debug_beats_configured_release() -> None:
    """An explicit release=False wins over configuration."""
    assert build_develop_command(MaturinSettings(release=True), release=False) == ["maturin", "develop"]


@pytest.mark.os_agnostic
def test_build_develop_command_merges_extras_without_duplicates() -> None:
    """Configured extras come first; repeats are dropped."""
    command = build_develop_command(MaturinSettings(extras=["test", "docs"]), extras=["docs", "bench"])

    assert command == ["maturin", "develop", "--extras", "test,docs,bench"]


@pytest.mark.os_agnostic
def test_build_deploy_command_publishes_to_configured_repository() -> None:
    """deploy maps onto maturin publish."""
    settings = MaturinSettings(repository="internal", skip_existing=True)

    assert build_deploy_command(settings) == ["maturin", "publish", "--repository", "internal", "--skip-existing"]


@pytest.mark.os_agnostic
def test_build_deploy_command_cli_values_win() -> None:
    """Explicit repository and skip flag override configuration."""
    settings = MaturinSettings(repository="internal", skip_existing=True)

    command = build_deploy_command(settings, repository="testpypi", skip_existing=False)

    assert command == ["maturin", "publish", "--repository", "testpypi"]
