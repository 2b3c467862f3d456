"""Project root discovery and per-project naming."""

from __future__ import annotations

import re
from pathlib import Path

from yh_app.services.manifest import MANIFEST_NAME
from yh_common.errors import ProjectRootNotFound

_UNSAFE_NAME = re.compile(r"[^A-Za-z0-9_-]+")


def find_project_root(start: Path | str) -> Path:
    """Nearest directory at or above ``start`` that holds a package.json."""
    current = Path(start).expanduser().resolve()
    if current.is_file():
        current = current.parent
    for candidate in (current, *current.parents):
        if (candidate / MANIFEST_NAME).is_file():
            return candidate
    raise ProjectRootNotFound(
        f"No {MANIFEST_NAME} found in {current} or its parents",
        context={"start": current},
    )


def session_name(project_root: Path, prefix: str = "yarn") -> str:
    """Terminal session / log name for a project, e.g. ``yarn-my-app``."""
    name = _UNSAFE_NAME.sub("-", Path(project_root).name).strip("-") or "root"
    return f"{prefix}-{name}"
