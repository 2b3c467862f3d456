"""Public API surface for yh_common."""

from yh_common.config.env import collect_env, parse_bool_env, parse_str_env
from yh_common.errors import (
    ConfigurationError,
    ExecutionError,
    ManifestError,
    ProjectRootNotFound,
    SelectionAborted,
    VersionManagerError,
    YHError,
)
from yh_common.logging import configure_logging, log_context

__all__ = [
    "configure_logging",
    "log_context",
    "collect_env",
    "parse_bool_env",
    "parse_str_env",
    "YHError",
    "SelectionAborted",
    "ProjectRootNotFound",
    "ManifestError",
    "VersionManagerError",
    "ExecutionError",
    "ConfigurationError",
]
