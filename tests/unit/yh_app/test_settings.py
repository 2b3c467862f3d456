"""Tests for settings resolution."""

from __future__ import annotations

from pathlib import Path

import pytest

from yh_app.api import HelperSettings, SettingsRepository
from yh_common.errors import ConfigurationError


pytestmark = pytest.mark.unit_app


def test_defaults(tmp_path):
    settings = SettingsRepository(config_home=tmp_path, env={}).load()

    assert settings == HelperSettings()
    assert settings.binary == "yarn"
    assert settings.executor == "terminal"
    assert settings.use_version_manager is False


def test_default_path_under_config_home(tmp_path):
    repo = SettingsRepository(config_home=tmp_path, env={})

    assert repo.default_target == tmp_path / "yh" / "config.toml"
    assert repo.resolve_config_path() is None


def test_reads_yh_section(tmp_path):
    repo = SettingsRepository(config_home=tmp_path, env={})
    repo.config_home.mkdir(parents=True)
    repo.default_target.write_text('[yh]\nuse_version_manager = true\nexecutor = "background"\n')

    settings = repo.load()

    assert settings.use_version_manager is True
    assert settings.executor == "background"


def test_reads_top_level_table(tmp_path):
    path = tmp_path / "custom.toml"
    path.write_text('binary = "yarnpkg"\nunknown_key = 1\n')

    settings = SettingsRepository(config_home=tmp_path, env={}).load(path)

    assert settings.binary == "yarnpkg"


def test_env_beats_file_and_overrides_beat_env(tmp_path):
    path = tmp_path / "c.toml"
    path.write_text('executor = "background"\nuse_version_manager = false\n')
    env = {"YH_CONFIG_PATH": str(path), "YH_EXECUTOR": "print", "YH_USE_NVM": "yes"}
    repo = SettingsRepository(config_home=tmp_path, env=env)

    assert repo.resolve_config_path() == path
    settings = repo.load(use_version_manager=False, binary=None)

    assert settings.executor == "print"
    assert settings.use_version_manager is False
    assert settings.binary == "yarn"


def test_env_paths(tmp_path):
    env = {"YH_NVM_DIR": "/opt/nvm", "YH_BOOTSTRAP": "1"}
    settings = SettingsRepository(config_home=tmp_path, env=env).load()

    assert settings.nvm_dir == Path("/opt/nvm")
    assert settings.bootstrap_unknown_verbs is True


def test_missing_explicit_file(tmp_path):
    with pytest.raises(ConfigurationError, match="not found"):
        SettingsRepository(config_home=tmp_path, env={}).load(tmp_path / "missing.toml")


def test_invalid_toml(tmp_path):
    path = tmp_path / "bad.toml"
    path.write_text("executor = ")

    with pytest.raises(ConfigurationError):
        SettingsRepository(config_home=tmp_path, env={}).load(path)


def test_invalid_value(tmp_path):
    with pytest.raises(ConfigurationError, match="Invalid settings"):
        SettingsRepository(config_home=tmp_path, env={"YH_EXECUTOR": "xterm"}).load()
