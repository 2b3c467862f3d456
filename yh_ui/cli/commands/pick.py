from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from yh_app.api import ExecutionResult, ResolvedCommand
from yh_ui.cli.commands.run_helpers import cli_errors
from yh_ui.tui.core.protocols import UI
from yh_ui.wiring.dependencies import UIContext


def _report(ui: UI, resolved: ResolvedCommand, result: ExecutionResult) -> None:
    if result.mode == "print":
        typer.echo(resolved.command)
        return
    ui.present.command(resolved.command)
    if result.mode == "terminal":
        ui.present.success(f"Sent to tmux session {result.session}")
    else:
        ui.present.success(f"Started in background (pid {result.pid}), log: {result.log_path}")


def run_pick(
    ctx: UIContext,
    directory: Path,
    *,
    dry_run: bool = False,
    nvm: Optional[bool] = None,
    executor: Optional[str] = None,
    bootstrap: Optional[bool] = None,
) -> None:
    """Resolve a command interactively for ``directory`` and run it."""
    with cli_errors(ctx.ui):
        settings = ctx.settings(
            use_version_manager=nvm,
            executor="print" if dry_run else executor,
            bootstrap_unknown_verbs=bootstrap,
        )
        resolved, result = ctx.command_service(settings).run(directory)
    _report(ctx.ui, resolved, result)


def register_pick_command(app: typer.Typer, ctx: UIContext) -> None:
    @app.command("pick")
    def pick(
        directory: Path = typer.Option(
            Path("."),
            "--dir",
            "-d",
            help="Directory inside the project (package.json is searched upwards).",
        ),
        dry_run: bool = typer.Option(
            False, "--dry-run", help="Print the command instead of running it."
        ),
        nvm: Optional[bool] = typer.Option(
            None, "--nvm/--no-nvm", help="Switch to the pinned node version first."
        ),
        executor: Optional[str] = typer.Option(
            None,
            "--executor",
            "-e",
            help="terminal (tmux), background or print.",
        ),
        bootstrap: Optional[bool] = typer.Option(
            None,
            "--bootstrap/--no-bootstrap",
            help="Run a bare install before commands that do not start with a verb.",
        ),
    ) -> None:
        """Pick a package-manager command from menus and run it."""
        run_pick(
            ctx,
            directory,
            dry_run=dry_run,
            nvm=nvm,
            executor=executor,
            bootstrap=bootstrap,
        )
