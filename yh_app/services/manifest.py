"""package.json reading with an mtime-validated cache."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable

from yh_app.menu.factory import dependency_options
from yh_app.menu.models import Option
from yh_common.errors import ManifestError

logger = logging.getLogger(__name__)

MANIFEST_NAME = "package.json"


@dataclass
class _CacheEntry:
    mtime_ns: int
    value: Any


class ManifestCache:
    """Values derived from files, keyed by (absolute path, representation tag).

    An entry is reused while the file's modification time is unchanged and
    silently replaced otherwise.
    """

    def __init__(self) -> None:
        self._entries: dict[tuple[str, str], _CacheEntry] = {}

    def get(self, path: Path, tag: str, loader: Callable[[Path], Any]) -> Any:
        resolved = Path(path).resolve()
        try:
            mtime_ns = resolved.stat().st_mtime_ns
        except OSError as exc:
            raise ManifestError(
                f"Unable to stat {resolved}", context={"path": resolved}, cause=exc
            ) from exc
        key = (str(resolved), tag)
        entry = self._entries.get(key)
        if entry is not None and entry.mtime_ns == mtime_ns:
            return entry.value
        value = loader(resolved)
        self._entries[key] = _CacheEntry(mtime_ns=mtime_ns, value=value)
        return value

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)


def _load_json(path: Path) -> dict[str, Any]:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ManifestError(f"Unable to read {path}", context={"path": path}, cause=exc) from exc
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ManifestError(
            f"Malformed JSON in {path}: {exc.msg}",
            context={"path": path, "line": exc.lineno},
            cause=exc,
        ) from exc
    if not isinstance(data, dict):
        raise ManifestError(f"{path} does not contain a JSON object", context={"path": path})
    return data


class ManifestReader:
    """Read package descriptors through a shared cache."""

    def __init__(self, cache: ManifestCache | None = None) -> None:
        self.cache = cache or ManifestCache()

    @staticmethod
    def manifest_path(project_root: Path) -> Path:
        return Path(project_root) / MANIFEST_NAME

    def read_descriptor(self, path: Path) -> dict[str, Any]:
        return self.cache.get(path, "json", _load_json)

    def scripts(self, path: Path) -> dict[str, str]:
        try:
            descriptor = self.read_descriptor(path)
        except ManifestError as exc:
            logger.warning("Ignoring scripts from %s: %s", path, exc)
            return {}
        scripts = descriptor.get("scripts")
        if not isinstance(scripts, dict):
            return {}
        return {str(name): str(body) for name, body in scripts.items()}

    def dependencies(self, path: Path) -> list[Option]:
        try:
            descriptor = self.read_descriptor(path)
        except ManifestError as exc:
            logger.warning("Ignoring dependencies from %s: %s", path, exc)
            return []
        return dependency_options(descriptor)
