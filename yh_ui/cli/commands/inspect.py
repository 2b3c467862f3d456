from __future__ import annotations

from pathlib import Path

import typer

from yh_app.api import (
    NvmClient,
    PackageManagerClient,
    VersionContextResolver,
    find_project_root,
    read_pinned_version,
)
from yh_ui.cli.commands.run_helpers import cli_errors
from yh_ui.presenters.tables import (
    build_dependencies_table,
    build_flags_table,
    build_scripts_table,
)
from yh_ui.wiring.dependencies import UIContext

_DIR_OPTION = typer.Option(Path("."), "--dir", "-d", help="Directory inside the project.")


def register_inspect_commands(app: typer.Typer, ctx: UIContext) -> None:
    """Read-only commands showing what the menus are built from."""

    @app.command("scripts")
    def scripts(directory: Path = _DIR_OPTION) -> None:
        """List the project's scripts."""
        with cli_errors(ctx.ui):
            root = find_project_root(directory)
            reader = ctx.manifest_reader()
            ctx.ui.tables.show(build_scripts_table(reader.scripts(reader.manifest_path(root))))

    @app.command("deps")
    def deps(directory: Path = _DIR_OPTION) -> None:
        """List declared dependencies of every kind."""
        with cli_errors(ctx.ui):
            root = find_project_root(directory)
            reader = ctx.manifest_reader()
            ctx.ui.tables.show(
                build_dependencies_table(reader.dependencies(reader.manifest_path(root)))
            )

    @app.command("flags")
    def flags(verb: str = typer.Argument(..., help="Package-manager verb, e.g. add.")) -> None:
        """Show the flags scraped from ``<binary> <verb> --help``."""
        with cli_errors(ctx.ui):
            settings = ctx.settings()
            client = PackageManagerClient(settings.binary)
            with ctx.ui.progress.status(f"Reading {settings.binary} {verb} --help"):
                found = client.flags(verb)
            if not found:
                ctx.ui.present.warning(f"No flags found for {verb}")
                raise typer.Exit(1)
            ctx.ui.tables.show(build_flags_table(verb, found))

    @app.command("nvm")
    def nvm(directory: Path = _DIR_OPTION) -> None:
        """Show the pinned node version and the activation prefix."""
        with cli_errors(ctx.ui):
            settings = ctx.settings()
            root = find_project_root(directory)
            pinned = read_pinned_version(root, settings.version_marker)
            manager = NvmClient(settings.nvm_dir)
            resolver = VersionContextResolver(
                manager,
                confirm=lambda message: ctx.ui.form.confirm(message, default=False),
                marker_name=settings.version_marker,
            )
            prefix = resolver.activation_prefix(root, use_version_manager=True)
            lines = [
                f"Pinned version: {pinned or '-'} ({settings.version_marker})",
                f"nvm directory: {manager.locate() or '-'}",
                f"Activation: {prefix.strip() if prefix else '-'}",
                f"Enabled: {'yes' if settings.use_version_manager else 'no'}",
            ]
            ctx.ui.present.panel("\n".join(lines), title="Node version")
