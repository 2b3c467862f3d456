"""
Command-line interface for yarn-helper.

Pick package-manager commands from menus built from package.json and the
package manager's own help, then run them in a tmux session or as a
background job.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from yh_ui.cli.commands.config import create_config_app
from yh_ui.cli.commands.inspect import register_inspect_commands
from yh_ui.cli.commands.pick import register_pick_command, run_pick
from yh_ui.wiring.dependencies import UIContext, configure_logging

ctx_store = UIContext()

app = typer.Typer(help="Pick and run yarn commands for the current project.")


@app.callback(invoke_without_command=True)
def entry(
    ctx: typer.Context,
    headless: bool = typer.Option(
        False,
        "--headless",
        help="Force headless output (useful in CI).",
    ),
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Settings file (TOML) to load.",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    """Without a subcommand, pick a command for the current directory."""
    configure_logging(debug=verbose, force=True)
    ctx_store.headless = headless
    ctx_store.config_path = config

    if ctx.invoked_subcommand is None:
        run_pick(ctx_store, Path.cwd())


register_pick_command(app, ctx_store)
register_inspect_commands(app, ctx_store)
app.add_typer(create_config_app(ctx_store), name="config")


def main() -> None:
    """Console script entrypoint (Typer app)."""
    app()


if __name__ == "__main__":
    main()
