"""Bridge the UI picker and forms to the resolver's collaborator protocols."""

from __future__ import annotations

from typing import Sequence

from yh_app.api import Choice, Chooser, Option, Prompter
from yh_ui.tui.core.protocols import UI
from yh_ui.tui.system.models import PickItem


def option_to_item(option: Option) -> PickItem:
    tags = tuple(t for t in (option.version, option.kind.value if option.kind else "") if t)
    return PickItem(
        id=option.label,
        title=option.label,
        tags=tags,
        description=option.description,
        search_blob=" ".join(p for p in (option.label, option.description) if p),
        payload=option,
    )


class ChooserAdapter(Chooser):
    """Present menu options in the UI picker."""

    def __init__(self, ui: UI) -> None:
        self._ui = ui

    def choose(self, prompt: str, options: Sequence[Option]) -> Choice | None:
        items = [option_to_item(option) for option in options]
        outcome = self._ui.picker.pick(items, title=prompt)
        if outcome is None:
            return None
        labels = [item.title for item in outcome.items]
        if outcome.marked:
            return Choice.many(labels)
        if not labels:
            return None
        return Choice.single(labels[0])


class PrompterAdapter(Prompter):
    """Ask free-form questions through the UI form; Ctrl+C/EOF cancel."""

    def __init__(self, ui: UI) -> None:
        self._ui = ui

    def ask(self, prompt: str, default: str | None = None) -> str | None:
        try:
            return self._ui.form.ask(prompt, default=default)
        except (KeyboardInterrupt, EOFError):
            return None

    def confirm(self, prompt: str, default: bool = True) -> bool:
        try:
            return self._ui.form.confirm(prompt, default=default)
        except (KeyboardInterrupt, EOFError):
            return False
