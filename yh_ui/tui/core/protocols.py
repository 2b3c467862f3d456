"""Interfaces the CLI talks to; TUI and HeadlessUI implement them."""

from __future__ import annotations

from typing import ContextManager, Protocol, Sequence

from yh_ui.tui.system.models import PickItem, PickOutcome, TableModel


class Picker(Protocol):
    def pick(
        self,
        items: Sequence[PickItem],
        *,
        title: str,
        query_hint: str = "",
        allow_free_text: bool = True,
    ) -> PickOutcome | None:
        """Let the user pick or mark items; None when the picker is dismissed.

        With ``allow_free_text`` the outcome may hold a typed item that is
        not one of ``items`` (``PickItem.free_text`` is set).
        """
        ...


class TablePresenter(Protocol):
    def show(self, table: TableModel) -> None: ...


class PresenterSink(Protocol):
    """Where a presenter's output ends up (a console, or a test recorder)."""

    def emit(self, level: str, message: str) -> None: ...

    def emit_panel(self, message: str, title: str | None, border_style: str | None) -> None: ...

    def emit_command(self, command: str) -> None: ...


class Presenter(Protocol):
    def info(self, message: str) -> None: ...

    def warning(self, message: str) -> None: ...

    def error(self, message: str) -> None: ...

    def success(self, message: str) -> None: ...

    def panel(self, message: str, title: str | None = None, border_style: str | None = None) -> None: ...

    def command(self, command: str) -> None:
        """Show a resolved command line."""
        ...


class Form(Protocol):
    def ask(self, prompt: str, default: str | None = None) -> str: ...

    def confirm(self, prompt: str, default: bool = True) -> bool: ...


class Progress(Protocol):
    def status(self, message: str) -> ContextManager[None]: ...


class UI(Protocol):
    picker: Picker
    tables: TablePresenter
    present: Presenter
    form: Form
    progress: Progress
