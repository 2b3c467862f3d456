"""Thin client over the nvm shell function."""

from __future__ import annotations

import logging
import os
import re
import shlex
import shutil
import subprocess
from pathlib import Path
from typing import Callable, Mapping

from yh_common.errors import VersionManagerError

logger = logging.getLogger(__name__)

ACTIVATION_SCRIPT = "nvm.sh"
DEFAULT_NVM_DIR = Path("~/.nvm")

# An installed entry of `nvm ls`: the version leads the line, after the
# optional "->" current marker. Alias lines lead with their name.
_INSTALLED_RE = re.compile(r"^\s*(?:->)?\s*v(\d+\.\d+\.\d+)\b")
NOT_AVAILABLE = "N/A"


class NvmClient:
    """Locate nvm and run its subcommands through ``bash -c``.

    nvm is a shell function, so every call sources the activation script
    first.
    """

    def __init__(
        self,
        nvm_dir: Path | str | None = None,
        env: Mapping[str, str] | None = None,
        which: Callable[[str], str | None] = shutil.which,
    ) -> None:
        self._explicit_dir = Path(nvm_dir).expanduser() if nvm_dir else None
        self._env = os.environ if env is None else env
        self._which = which

    def locate(self) -> Path | None:
        """First existing nvm directory: explicit, ``$NVM_DIR``, then ``~/.nvm``."""
        candidates: list[Path] = []
        if self._explicit_dir is not None:
            candidates.append(self._explicit_dir)
        env_dir = self._env.get("NVM_DIR")
        if env_dir:
            candidates.append(Path(env_dir).expanduser())
        candidates.append(DEFAULT_NVM_DIR.expanduser())
        for candidate in candidates:
            if candidate.is_dir():
                return candidate
        return None

    def activation_script(self) -> Path | None:
        nvm_dir = self.locate()
        if nvm_dir is None:
            return None
        script = nvm_dir / ACTIVATION_SCRIPT
        return script if script.is_file() else None

    def has_executable(self) -> bool:
        return self._which("nvm") is not None

    def is_installed(self) -> bool:
        return self.activation_script() is not None or self.has_executable()

    def shell_command(self, subcommand: str, *args: str) -> str:
        nvm_call = " ".join(shlex.quote(part) for part in ("nvm", subcommand, *args))
        script = self.activation_script()
        if script is None:
            return nvm_call
        return f"source {shlex.quote(str(script))} && {nvm_call}"

    def run(
        self, subcommand: str, *args: str, cwd: Path | None = None
    ) -> subprocess.CompletedProcess[str]:
        command = self.shell_command(subcommand, *args)
        logger.debug("Running version manager: %s", command)
        try:
            return subprocess.run(
                ["bash", "-c", command],
                capture_output=True,
                text=True,
                cwd=cwd,
            )
        except OSError as exc:
            raise VersionManagerError(
                f"Unable to run nvm: {exc}", context={"command": command}, cause=exc
            ) from exc

    def installed_versions(self) -> list[str]:
        try:
            result = self.run("ls", "--no-colors", "--no-alias")
        except VersionManagerError as exc:
            logger.warning("Unable to list nvm versions: %s", exc)
            return []
        if result.returncode != 0:
            logger.warning(
                "nvm ls failed with exit code %s: %s",
                result.returncode,
                result.stderr.strip(),
            )
            return []
        seen: dict[str, None] = {}
        for line in result.stdout.splitlines():
            if NOT_AVAILABLE in line:
                continue
            match = _INSTALLED_RE.match(line)
            if match:
                seen.setdefault(f"v{match.group(1)}", None)
        return list(seen)

    def resolve_installed(self, version: str) -> str | None:
        """Installed version nvm would use for ``version``, or None.

        Accepts anything nvm does (``18``, ``lts/*``, ``node``). Raises
        VersionManagerError when nvm gives no usable answer.
        """
        result = self.run("version", version)
        lines = result.stdout.strip().splitlines()
        answer = lines[-1].strip() if lines else ""
        if answer == NOT_AVAILABLE:
            return None
        if result.returncode != 0 or not answer:
            raise VersionManagerError(
                f"nvm version {version} exited with {result.returncode}",
                context={"version": version, "stderr": result.stderr.strip()},
            )
        return answer

    def install(self, version: str, *, cwd: Path | None = None) -> int:
        """Install ``version`` keeping the global packages of the current one."""
        try:
            result = self.run(
                "install", version, "--reinstall-packages-from=current", cwd=cwd
            )
        except VersionManagerError as exc:
            logger.warning("Unable to run nvm install: %s", exc)
            return 1
        if result.returncode != 0:
            logger.warning(
                "nvm install %s exited with %s: %s",
                version,
                result.returncode,
                result.stderr.strip(),
            )
        return result.returncode
