"""Queries against the package-manager CLI."""

from __future__ import annotations

import json
import logging
import subprocess
from pathlib import Path

from yh_app.services.help_scraper import scrape_flags

logger = logging.getLogger(__name__)


class PackageManagerClient:
    """Run auxiliary ``yarn`` queries. Failures degrade to empty results."""

    def __init__(self, binary: str = "yarn", cwd: Path | None = None) -> None:
        self.binary = binary
        self.cwd = cwd

    def _run(self, *args: str) -> str:
        cmd = [self.binary, *args]
        try:
            result = subprocess.run(cmd, capture_output=True, text=True, cwd=self.cwd)
        except OSError as exc:
            logger.warning("Unable to run %s: %s", " ".join(cmd), exc)
            return ""
        if result.returncode != 0:
            logger.warning(
                "%s exited with %s: %s",
                " ".join(cmd),
                result.returncode,
                result.stderr.strip(),
            )
            return ""
        return result.stdout

    def help_text(self, verb: str) -> str:
        return self._run(verb, "--help")

    def flags(self, verb: str) -> list[tuple[str, str]]:
        return scrape_flags(self.help_text(verb))

    def versions(self, package: str) -> list[str]:
        """Published versions of ``package``, oldest first."""
        output = self._run("info", package, "versions", "--json")
        for line in output.splitlines():
            line = line.strip()
            if not line:
                continue
            try:
                payload = json.loads(line)
            except json.JSONDecodeError:
                continue
            data = payload.get("data") if isinstance(payload, dict) else payload
            if isinstance(data, list):
                return [str(v) for v in data]
        return []
