"""Reading ``YH_*`` environment variables."""

from __future__ import annotations

import logging
from typing import Any, Callable, Mapping

logger = logging.getLogger(__name__)

_TRUE = frozenset({"1", "true", "yes", "on"})
_FALSE = frozenset({"0", "false", "no", "off"})


def parse_bool_env(value: str | None) -> bool | None:
    """True/False for the usual spellings; None when unset or unrecognised."""
    if value is None:
        return None
    word = value.strip().lower()
    if word in _TRUE:
        return True
    if word in _FALSE:
        return False
    return None


def parse_str_env(value: str | None) -> str | None:
    """Return a stripped string, or None for unset/blank values."""
    if value is None:
        return None
    return value.strip() or None


def collect_env(
    env: Mapping[str, str],
    fields: Mapping[str, str],
    parse: Callable[[str | None], Any],
) -> dict[str, Any]:
    """Map ``{VAR: field}`` to ``{field: parsed}`` for the variables that are set.

    Set but unparseable values are skipped with a warning.
    """
    values: dict[str, Any] = {}
    for var, key in fields.items():
        raw = env.get(var)
        if raw is None:
            continue
        parsed = parse(raw)
        if parsed is None:
            if raw.strip():
                logger.warning("Ignoring %s=%r: unrecognised value", var, raw)
            continue
        values[key] = parsed
    return values
