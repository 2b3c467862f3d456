from __future__ import annotations

import sys
from contextlib import nullcontext
from dataclasses import dataclass, field
from typing import ContextManager, Sequence

from yh_ui.tui.core.protocols import Form, Picker, PresenterSink, Progress, TablePresenter, UI
from yh_ui.tui.system.components.presenter import PresenterBase
from yh_ui.tui.system.models import PickItem, PickOutcome, TableModel

ScriptedPick = str | list[str] | None


@dataclass
class RecordedTable:
    model: TableModel


@dataclass
class HeadlessUI(UI):
    """UI that answers from scripted responses and records what it was shown.

    ``scripted_picks`` drives ``picker.pick`` in order: a string picks the
    item with that title (or is returned as free text), a list marks those
    titles, and None cancels. An exhausted script cancels as well, so an
    unattended run never resolves a command by itself.

    With ``echo`` set, tables are written to stdout as tab-separated rows
    and messages to stderr (``yh --headless``).
    """

    echo: bool = False

    recorded_tables: list[RecordedTable] = field(default_factory=list)
    recorded_messages: list[str] = field(default_factory=list)
    recorded_prompts: list[str] = field(default_factory=list)

    scripted_picks: list[ScriptedPick] = field(default_factory=list)
    form_responses: list[str] = field(default_factory=list)
    next_form_response: str = ""
    confirm_responses: list[bool] = field(default_factory=list)
    # None answers every unscripted confirmation with its default.
    next_confirm_response: bool | None = None

    def __post_init__(self):
        self.picker = _HeadlessPicker(self)
        self.tables = _HeadlessTablePresenter(self)
        self.present = PresenterBase(_HeadlessPresenterSink(self))
        self.form = _HeadlessForm(self)
        self.progress = _HeadlessProgress(self)

    def record(self, message: str) -> None:
        self.recorded_messages.append(message)
        if self.echo:
            print(message, file=sys.stderr)


class _HeadlessPicker(Picker):
    def __init__(self, ui: HeadlessUI):
        self._ui = ui

    def pick(
        self,
        items: Sequence[PickItem],
        *,
        title: str,
        query_hint: str = "",
        allow_free_text: bool = True,
    ) -> PickOutcome | None:
        self._ui.recorded_prompts.append(title)
        if not self._ui.scripted_picks:
            return None
        scripted = self._ui.scripted_picks.pop(0)
        if scripted is None:
            return None
        if isinstance(scripted, list):
            return PickOutcome(
                items=[self._find(items, label, allow_free_text) for label in scripted],
                marked=True,
            )
        return PickOutcome(items=[self._find(items, scripted, allow_free_text)])

    @staticmethod
    def _find(items: Sequence[PickItem], label: str, allow_free_text: bool) -> PickItem:
        for item in items:
            if item.title == label:
                return item
        if not allow_free_text:
            raise LookupError(f"No item titled {label!r}")
        return PickItem(id=label, title=label, free_text=True)


class _HeadlessTablePresenter(TablePresenter):
    def __init__(self, ui: HeadlessUI):
        self._ui = ui

    def show(self, table: TableModel) -> None:
        self._ui.recorded_tables.append(RecordedTable(table))
        if self._ui.echo:
            for row in table.rows:
                print("\t".join(row))


class _HeadlessPresenterSink(PresenterSink):
    def __init__(self, ui: HeadlessUI) -> None:
        self._ui = ui

    def emit(self, level: str, message: str) -> None:
        self._ui.record(f"{level.upper()}: {message}")

    def emit_panel(self, message: str, title: str | None, border_style: str | None) -> None:
        self._ui.record(f"PANEL: {title} - {message}")

    def emit_command(self, command: str) -> None:
        self._ui.record(f"COMMAND: {command}")


class _HeadlessForm(Form):
    def __init__(self, ui: HeadlessUI):
        self._ui = ui

    def ask(self, prompt: str, default: str | None = None) -> str:
        self._ui.recorded_prompts.append(prompt)
        if self._ui.form_responses:
            return self._ui.form_responses.pop(0)
        return self._ui.next_form_response or (default or "")

    def confirm(self, prompt: str, default: bool = True) -> bool:
        self._ui.recorded_prompts.append(prompt)
        if self._ui.confirm_responses:
            return self._ui.confirm_responses.pop(0)
        if self._ui.next_confirm_response is None:
            return default
        return self._ui.next_confirm_response


class _HeadlessProgress(Progress):
    def __init__(self, ui: HeadlessUI):
        self._ui = ui

    def status(self, message: str) -> ContextManager[None]:
        self._ui.record(f"STATUS: {message}")
        return nullcontext()
