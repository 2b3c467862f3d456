"""User settings: TOML file plus ``YH_*`` environment overrides."""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any, Literal, Mapping, Optional

from pydantic import BaseModel, Field, ValidationError

from yh_common.config.env import collect_env, parse_bool_env, parse_str_env
from yh_common.errors import ConfigurationError

CONFIG_NAME = "config.toml"


class HelperSettings(BaseModel):
    """Effective settings for one invocation."""

    binary: str = Field(default="yarn", min_length=1, description="Package-manager executable")
    use_version_manager: bool = Field(
        default=False,
        description="Prefix commands with nvm activation when the project pins a version",
    )
    bootstrap_unknown_verbs: bool = Field(
        default=False,
        description="Run a bare install before commands that do not start with a verb",
    )
    executor: Literal["terminal", "background", "print"] = Field(
        default="terminal",
        description="Where to run the resolved command",
    )
    nvm_dir: Optional[Path] = Field(default=None, description="Override the nvm directory")
    version_marker: str = Field(default=".nvmrc", description="Pinned-version marker file")
    state_dir: Optional[Path] = Field(default=None, description="Background job log directory")

    model_config = {
        "extra": "ignore",
    }


_BOOL_ENV = {
    "YH_USE_NVM": "use_version_manager",
    "YH_BOOTSTRAP": "bootstrap_unknown_verbs",
}
_STR_ENV = {
    "YH_BINARY": "binary",
    "YH_EXECUTOR": "executor",
    "YH_NVM_DIR": "nvm_dir",
    "YH_VERSION_MARKER": "version_marker",
    "YH_STATE_DIR": "state_dir",
}


class SettingsRepository:
    """Resolve settings from ``$XDG_CONFIG_HOME/yh/config.toml`` and env."""

    def __init__(
        self,
        config_home: Optional[Path] = None,
        env: Mapping[str, str] | None = None,
    ) -> None:
        self._env = os.environ if env is None else env
        xdg = self._env.get("XDG_CONFIG_HOME")
        base = Path(xdg) if xdg else Path.home() / ".config"
        self.config_home = (config_home or base) / "yh"
        self.default_target = self.config_home / CONFIG_NAME

    def resolve_config_path(self, config_path: Optional[Path] = None) -> Optional[Path]:
        if config_path is not None:
            return Path(config_path).expanduser()
        env_path = parse_str_env(self._env.get("YH_CONFIG_PATH"))
        if env_path:
            return Path(env_path).expanduser()
        if self.default_target.exists():
            return self.default_target
        return None

    def read_file(self, path: Path) -> dict[str, Any]:
        try:
            data = tomllib.loads(path.read_text(encoding="utf-8"))
        except FileNotFoundError as exc:
            raise ConfigurationError(f"Config file not found: {path}", cause=exc) from exc
        except (OSError, tomllib.TOMLDecodeError) as exc:
            raise ConfigurationError(
                f"Unable to read config {path}: {exc}", context={"path": path}, cause=exc
            ) from exc
        section = data.get("yh")
        return dict(section) if isinstance(section, dict) else data

    def env_overrides(self) -> dict[str, Any]:
        return {
            **collect_env(self._env, _BOOL_ENV, parse_bool_env),
            **collect_env(self._env, _STR_ENV, parse_str_env),
        }

    def load(self, config_path: Optional[Path] = None, **overrides: Any) -> HelperSettings:
        """Merge file, environment and explicit overrides (later wins)."""
        data: dict[str, Any] = {}
        path = self.resolve_config_path(config_path)
        if path is not None:
            data.update(self.read_file(path))
        data.update(self.env_overrides())
        data.update({key: value for key, value in overrides.items() if value is not None})
        try:
            return HelperSettings(**data)
        except ValidationError as exc:
            raise ConfigurationError(
                f"Invalid settings: {exc.errors()[0].get('msg', exc)}",
                context={"path": path},
                cause=exc,
            ) from exc
