"""Hand a finished command line to a terminal session or a background job."""

from __future__ import annotations

import logging
import os
import shutil
import subprocess
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Literal, Protocol

from yh_app.services.project import session_name
from yh_common.errors import ExecutionError

logger = logging.getLogger(__name__)

ExecutorKind = Literal["terminal", "background", "print"]


@dataclass
class ExecutionResult:
    command: str
    mode: str
    session: str | None = None
    pid: int | None = None
    log_path: Path | None = None


class Executor(Protocol):
    def execute(self, project_root: Path, command: str) -> ExecutionResult: ...


class TerminalExecutor:
    """Type the command into a persistent tmux session for the project."""

    def __init__(self, tmux: str = "tmux") -> None:
        self.tmux = tmux

    def _tmux(self, *args: str) -> subprocess.CompletedProcess[str]:
        return subprocess.run([self.tmux, *args], capture_output=True, text=True)

    def execute(self, project_root: Path, command: str) -> ExecutionResult:
        name = session_name(project_root)
        try:
            exists = self._tmux("has-session", "-t", name).returncode == 0
            if not exists:
                created = self._tmux("new-session", "-d", "-s", name, "-c", str(project_root))
                if created.returncode != 0:
                    raise ExecutionError(
                        f"Unable to create tmux session {name}: {created.stderr.strip()}",
                        context={"session": name},
                    )
            sent = self._tmux("send-keys", "-t", name, command, "Enter")
        except OSError as exc:
            raise ExecutionError(f"Unable to run {self.tmux}", cause=exc) from exc
        if sent.returncode != 0:
            raise ExecutionError(
                f"Unable to send command to tmux session {name}: {sent.stderr.strip()}",
                context={"session": name, "command": command},
            )
        logger.info("Sent command to tmux session %s", name)
        return ExecutionResult(command=command, mode="terminal", session=name)


def default_state_dir() -> Path:
    xdg = os.environ.get("XDG_STATE_HOME")
    base = Path(xdg) if xdg else Path.home() / ".local" / "state"
    return base / "yh"


class BackgroundExecutor:
    """Run the command as a detached shell job logging to a per-project file."""

    def __init__(self, state_dir: Path | None = None, shell: str = "bash") -> None:
        self.state_dir = state_dir or default_state_dir()
        self.shell = shell

    def execute(self, project_root: Path, command: str) -> ExecutionResult:
        name = session_name(project_root)
        log_path = self.state_dir / f"{name}.log"
        try:
            log_path.parent.mkdir(parents=True, exist_ok=True)
            with log_path.open("a", encoding="utf-8") as log_file:
                log_file.write(f"$ {command}\n")
                log_file.flush()
                process = subprocess.Popen(
                    [self.shell, "-c", command],
                    cwd=project_root,
                    stdout=log_file,
                    stderr=subprocess.STDOUT,
                    stdin=subprocess.DEVNULL,
                    start_new_session=True,
                )
        except OSError as exc:
            raise ExecutionError(
                f"Unable to start background job: {exc}",
                context={"command": command, "log": log_path},
                cause=exc,
            ) from exc
        logger.info("Started background job %s (pid %s)", name, process.pid)
        return ExecutionResult(
            command=command,
            mode="background",
            session=name,
            pid=process.pid,
            log_path=log_path,
        )


@dataclass
class DryRunExecutor:
    """Record commands without running them."""

    executed: list[tuple[Path, str]] = field(default_factory=list)

    def execute(self, project_root: Path, command: str) -> ExecutionResult:
        self.executed.append((project_root, command))
        return ExecutionResult(command=command, mode="print")


def select_executor(
    preference: ExecutorKind,
    *,
    state_dir: Path | None = None,
    which: Callable[[str], str | None] = shutil.which,
) -> Executor:
    """Pick the executor for a preference, falling back when tmux is missing."""
    if preference == "print":
        return DryRunExecutor()
    if preference == "terminal":
        tmux = which("tmux")
        if tmux:
            return TerminalExecutor(tmux)
        logger.info("tmux not found; running in the background instead")
    return BackgroundExecutor(state_dir=state_dir)
