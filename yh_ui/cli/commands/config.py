from __future__ import annotations

import typer

from yh_ui.cli.commands.run_helpers import cli_errors
from yh_ui.presenters.tables import build_settings_table
from yh_ui.wiring.dependencies import UIContext


def create_config_app(ctx: UIContext) -> typer.Typer:
    """Build the config Typer app, wired to the given context."""
    app = typer.Typer(help="Inspect yarn-helper settings.", no_args_is_help=True)

    @app.command("show")
    def show() -> None:
        """Show the effective settings (file + YH_* environment)."""
        with cli_errors(ctx.ui):
            ctx.ui.tables.show(build_settings_table(ctx.settings()))

    @app.command("path")
    def path() -> None:
        """Print the config file in use, if any."""
        resolved = ctx.settings_repository.resolve_config_path(ctx.config_path)
        if resolved is None:
            ctx.ui.present.info(
                f"No config file; defaults apply ({ctx.settings_repository.default_target})"
            )
            return
        typer.echo(str(resolved))

    return app
