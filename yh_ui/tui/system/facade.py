from rich.console import Console

from yh_ui.tui.core.protocols import Form, Picker, Presenter, Progress, TablePresenter, UI
from yh_ui.tui.system.components.picker import PowerPicker
from yh_ui.tui.system.components.presenter import RichPresenter
from yh_ui.tui.system.components.prompts import RichForm, RichProgress
from yh_ui.tui.system.components.table import RichTablePresenter


class TUI(UI):
    """Interactive UI. Everything but tables goes to stderr.

    Keeping stdout clean lets ``yh pick --dry-run`` feed a shell, e.g.
    ``eval "$(yh pick --dry-run)"``.
    """

    def __init__(self, console: Console | None = None, out: Console | None = None):
        self._console = console or Console(stderr=True)
        self._out = out or Console()
        self.picker: Picker = PowerPicker()
        self.tables: TablePresenter = RichTablePresenter(self._out)
        self.present: Presenter = RichPresenter(self._console)
        self.form: Form = RichForm(self._console)
        self.progress: Progress = RichProgress(self._console)

    @property
    def console(self) -> Console:
        return self._console
