from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

import typer

from yh_common.api import SelectionAborted, YHError
from yh_ui.tui.core.protocols import UI


@contextmanager
def cli_errors(ui: UI) -> Iterator[None]:
    """Render typed failures through the presenter and exit with their code."""
    try:
        yield
    except SelectionAborted as exc:
        ui.present.warning(f"{exc}. Nothing was run.")
        raise typer.Exit(exc.exit_code) from exc
    except YHError as exc:
        ui.present.error(str(exc))
        if exc.hint:
            ui.present.info(exc.hint)
        raise typer.Exit(exc.exit_code) from exc
