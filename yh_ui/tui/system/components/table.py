from rich import box
from rich.console import Console
from rich.table import Table

from yh_ui.tui.core import theme
from yh_ui.tui.core.protocols import TablePresenter
from yh_ui.tui.system.models import TableModel


def build_rich_table(model: TableModel) -> Table:
    """Rich table for a TableModel; the last column wraps, others stay on one line."""
    table = Table(
        title=model.title,
        box=box.ROUNDED,
        border_style=theme.RICH_BORDER_STYLE,
        header_style=theme.RICH_ACCENT_BOLD,
        title_style=theme.RICH_ACCENT_BOLD,
        expand=False,
    )
    last = len(model.columns) - 1
    for idx, column in enumerate(model.columns):
        table.add_column(column, no_wrap=idx != last, overflow="fold")
    for row in model.rows:
        table.add_row(*row)
    return table


class RichTablePresenter(TablePresenter):
    def __init__(self, console: Console):
        self._console = console

    def show(self, table: TableModel) -> None:
        if not table.rows:
            self._console.print(f"[dim]{table.title}: nothing to show[/dim]")
            return
        self._console.print(build_rich_table(table))
