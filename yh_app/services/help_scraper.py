"""Extract long flags from CLI help output."""

from __future__ import annotations

import re

_FLAG_RE = re.compile(r"--[a-z-]+")


def scrape_flags(text: str) -> list[tuple[str, str]]:
    """Return ``(flag, description)`` pairs in the order they appear.

    The description is whatever follows the last flag on the same line.
    When a flag occurs more than once, the first occurrence wins.
    """
    found: dict[str, str] = {}
    for line in text.splitlines():
        matches = list(_FLAG_RE.finditer(line))
        if not matches:
            continue
        description = line[matches[-1].end():].strip()
        # "-d, --dev <value>  text": drop the metavar before the text.
        description = re.sub(r"^(<[^>]*>|\[[^\]]*\])\s*", "", description)
        for match in matches:
            flag = match.group(0).rstrip("-")
            if len(flag) > 2 and flag not in found:
                found[flag] = description
    return list(found.items())
