"""Typed failures shared by every yarn-helper layer.

Each error carries a JSON-friendly ``context`` for logs, an ``exit_code``
for the CLI and an optional ``hint`` telling the user what to try next.
"""

from __future__ import annotations

from pathlib import PurePath
from typing import Any, Mapping


def _plain(value: Any) -> Any:
    if isinstance(value, Mapping):
        return normalize_context(value)
    if isinstance(value, (list, tuple, set, frozenset)):
        return [_plain(item) for item in value]
    if isinstance(value, PurePath):
        return value.as_posix()
    if isinstance(value, (str, int, float, bool)) or value is None:
        return value
    return str(value)


def normalize_context(context: Mapping[str, Any]) -> dict[str, Any]:
    """Return a JSON-friendly copy of an error context mapping."""
    return {str(key): _plain(val) for key, val in context.items()}


class YHError(Exception):
    """Base error type for typed failure handling."""

    exit_code: int = 1
    default_hint: str | None = None

    def __init__(
        self,
        message: str,
        *,
        context: Mapping[str, Any] | None = None,
        cause: Exception | None = None,
        hint: str | None = None,
    ) -> None:
        super().__init__(message)
        self.context = normalize_context(context or {})
        self.hint = hint if hint is not None else self.default_hint
        if cause is not None:
            self.__cause__ = cause

    @property
    def error_type(self) -> str:
        return self.__class__.__name__

    def to_dict(self) -> dict[str, Any]:
        payload = {"type": self.error_type, "message": str(self), "context": self.context}
        if self.hint:
            payload["hint"] = self.hint
        return payload


class SelectionAborted(YHError):
    """The user dismissed a chooser; no command may be produced."""

    exit_code = 130

    def __init__(self, message: str = "Selection aborted", **kwargs: Any) -> None:
        super().__init__(message, **kwargs)


class ProjectRootNotFound(YHError):
    """No package.json in the start directory or its ancestors."""

    default_hint = "Run yh inside a project or point --dir at one."


class ManifestError(YHError):
    """package.json could not be read or is not a JSON object."""


class VersionManagerError(YHError):
    """nvm could not be invoked."""


class ExecutionError(YHError):
    """The resolved command could not be handed to its executor."""

    default_hint = "Use --dry-run to print the command instead."


class ConfigurationError(YHError):
    """Invalid settings file or YH_* environment value."""

    default_hint = "Check the settings shown by `yh config show`."
