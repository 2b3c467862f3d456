"""Decide whether a command must switch node versions first."""

from __future__ import annotations

import logging
import shlex
from pathlib import Path
from typing import Callable, Iterable

from yh_app.services.version_manager import NvmClient
from yh_common.errors import VersionManagerError

logger = logging.getLogger(__name__)

DEFAULT_MARKER = ".nvmrc"


def read_pinned_version(project_root: Path, marker_name: str = DEFAULT_MARKER) -> str | None:
    marker = Path(project_root) / marker_name
    if not marker.is_file():
        return None
    try:
        text = marker.read_text(encoding="utf-8")
    except OSError as exc:
        logger.warning("Unable to read %s: %s", marker, exc)
        return None
    for line in text.splitlines():
        line = line.strip()
        if line:
            return line
    return None


def _bare(version: str) -> str:
    return version[1:] if version[:1] in {"v", "V"} else version


def is_version_installed(pinned: str, installed: Iterable[str]) -> bool:
    """Exact or prefix match, ignoring a leading ``v`` on either side."""
    wanted = _bare(pinned.strip())
    if not wanted:
        return False
    for version in installed:
        have = _bare(version.strip())
        if have == wanted or have.startswith(f"{wanted}."):
            return True
    return False


class VersionContextResolver:
    """Build the shell fragment that activates the pinned node version."""

    def __init__(
        self,
        manager: NvmClient,
        confirm: Callable[[str], bool],
        marker_name: str = DEFAULT_MARKER,
    ) -> None:
        self._manager = manager
        self._confirm = confirm
        self._marker_name = marker_name

    def activation_prefix(self, project_root: Path, use_version_manager: bool) -> str | None:
        if not use_version_manager:
            return None
        pinned = read_pinned_version(project_root, self._marker_name)
        if pinned is None:
            return None
        if not self._manager.is_installed():
            logger.info("Version manager not installed; skipping activation")
            return None

        self._ensure_installed(project_root, pinned)

        script = self._manager.activation_script()
        if script is None:
            return "nvm use && "
        return f"source {shlex.quote(str(script))} && nvm use && "

    def _is_installed(self, pinned: str) -> bool:
        try:
            return self._manager.resolve_installed(pinned) is not None
        except VersionManagerError as exc:
            logger.info("Falling back to nvm ls for %s: %s", pinned, exc)
        return is_version_installed(pinned, self._manager.installed_versions())

    def _ensure_installed(self, project_root: Path, pinned: str) -> None:
        if self._is_installed(pinned):
            return
        if not self._confirm(f"Node {pinned} is not installed. Install it with nvm?"):
            return
        code = self._manager.install(pinned, cwd=project_root)
        if code != 0:
            logger.warning("nvm install %s failed (exit %s)", pinned, code)
