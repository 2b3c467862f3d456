"""Line-mode questions and spinners for the Rich console UI."""

from typing import ContextManager

from rich.console import Console
from rich.prompt import Confirm, Prompt

from yh_ui.tui.core import theme
from yh_ui.tui.core.protocols import Form, Progress


class RichForm(Form):
    def __init__(self, console: Console):
        self._console = console

    def ask(self, prompt: str, default: str | None = None) -> str:
        if default is None:
            return Prompt.ask(prompt, console=self._console)
        return Prompt.ask(prompt, console=self._console, default=default)

    def confirm(self, prompt: str, default: bool = True) -> bool:
        return Confirm.ask(prompt, console=self._console, default=default)


class RichProgress(Progress):
    """Transient spinner shown while the package manager is queried."""

    def __init__(self, console: Console):
        self._console = console

    def status(self, message: str) -> ContextManager[None]:
        return self._console.status(message, spinner="dots", spinner_style=theme.RICH_ACCENT)
