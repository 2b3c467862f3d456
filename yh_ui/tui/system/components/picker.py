from __future__ import annotations

import sys
from typing import Any, Sequence

from prompt_toolkit.application import Application
from prompt_toolkit.formatted_text import ANSI
from prompt_toolkit.key_binding import KeyBindings
from prompt_toolkit.layout import HSplit, Layout, VSplit, Window
from prompt_toolkit.layout.controls import FormattedTextControl
from prompt_toolkit.layout.dimension import Dimension
from prompt_toolkit.styles import Style
from prompt_toolkit.widgets import Frame, TextArea
from rapidfuzz import fuzz, process
from rich.console import Console
from rich.text import Text

from yh_ui.tui.core import theme
from yh_ui.tui.core.protocols import Picker
from yh_ui.tui.system.models import PickItem, PickOutcome

FUZZY_LIMIT = 200
FUZZY_SCORE_CUTOFF = 50


def search_text(item: PickItem) -> str:
    return item.search_blob or " ".join(p for p in (item.title, item.description) if p)


def rank_items(items: Sequence[PickItem], query: str) -> list[PickItem]:
    """Titles starting with the query first, then fuzzy matches by score."""
    query = query.strip()
    if not query:
        return list(items)
    lowered = query.lower()
    prefixed = [item for item in items if item.title.lower().startswith(lowered)]
    rest = [item for item in items if not item.title.lower().startswith(lowered)]
    # rapidfuzz only sees strings; payloads may be unhashable.
    matches = process.extract(
        query,
        [search_text(item) for item in rest],
        scorer=fuzz.WRatio,
        limit=FUZZY_LIMIT,
        score_cutoff=FUZZY_SCORE_CUTOFF,
    )
    return prefixed + [rest[index] for _, _, index in matches]


class PickerState:
    """Query, cursor and marks of one picker, independent of the terminal."""

    def __init__(self, items: Sequence[PickItem]) -> None:
        self.items: list[PickItem] = list(items)
        self.query = ""
        self.filtered: list[PickItem] = list(self.items)
        self.cursor = 0
        # Item positions in marking order.
        self.marks: dict[int, None] = {}

    def set_query(self, query: str) -> None:
        self.query = query.strip()
        self.filtered = rank_items(self.items, self.query)
        self.cursor = 0

    @property
    def current(self) -> PickItem | None:
        if not self.filtered:
            return None
        return self.filtered[min(self.cursor, len(self.filtered) - 1)]

    def move(self, delta: int) -> None:
        if self.filtered:
            self.cursor = (self.cursor + delta) % len(self.filtered)

    def _position(self, item: PickItem) -> int:
        return next(i for i, candidate in enumerate(self.items) if candidate is item)

    def is_marked(self, item: PickItem) -> bool:
        return self._position(item) in self.marks

    def toggle_mark(self) -> None:
        item = self.current
        if item is None:
            return
        position = self._position(item)
        if position in self.marks:
            del self.marks[position]
        else:
            self.marks[position] = None

    def marked_outcome(self) -> PickOutcome:
        return PickOutcome(items=[self.items[i] for i in self.marks], marked=True)

    def submit(self, *, allow_free_text: bool) -> PickOutcome | None:
        """Outcome for Enter: marks, else the cursor item, else the typed query."""
        if self.marks:
            return self.marked_outcome()
        item = self.current
        if item is not None:
            return PickOutcome(items=[item])
        if allow_free_text and self.query:
            return PickOutcome(items=[PickItem(id=self.query, title=self.query, free_text=True)])
        return None


class _MarkingPickerApp:
    """Full-screen fuzzy list where Tab (or Space on an empty query) marks
    items and Enter submits.

    With free text allowed, Enter on a query that matches nothing returns
    the query itself. Ctrl+S submits the marks even when none are set.
    """

    def __init__(
        self,
        items: Sequence[PickItem],
        title: str,
        *,
        allow_free_text: bool = True,
    ) -> None:
        self.state = PickerState(items)
        self.allow_free_text = allow_free_text
        self._console = Console(force_terminal=True)

        self.search = TextArea(height=1, prompt="Search: ", style="class:search", multiline=False)
        self.search.buffer.on_text_changed += lambda _: self._on_query()

        body = HSplit(
            [
                self.search,
                Window(height=1, char="-", style="class:separator"),
                VSplit(
                    [
                        Window(
                            FormattedTextControl(self._render_list, focusable=True),
                            width=Dimension(weight=1),
                        ),
                        Window(width=1, char="|", style="class:separator"),
                        Window(
                            FormattedTextControl(self._render_preview),
                            width=Dimension(weight=1),
                        ),
                    ],
                    padding=1,
                ),
                Window(height=1, content=FormattedTextControl(self._hint)),
            ]
        )
        self.app: Application = Application(
            layout=Layout(Frame(body, title=title), focused_element=self.search),
            key_bindings=self._keybindings(),
            style=Style.from_dict(dict(theme.prompt_toolkit_picker_style())),
            full_screen=True,
        )

    def _on_query(self) -> None:
        self.state.set_query(self.search.text)
        self.app.invalidate()

    def _hint(self) -> list[tuple[str, str]]:
        parts = ["Enter=select", "Tab=mark", "Ctrl+S=submit marks"]
        if self.allow_free_text:
            parts.append("typed text is accepted")
        parts.append("Esc=cancel")
        return [("class:hint", "  ".join(parts))]

    def _render_row(self, item: PickItem, is_current: bool) -> tuple[str, str]:
        marked = self.state.is_marked(item)
        box = "[x]" if marked else "[ ]"
        style = ""
        if is_current:
            style = "class:selected"
        elif marked:
            style = "class:checked"
        return style, f" {box} {item.title}"

    def _render_list(self) -> list[tuple[str, str]]:
        current = self.state.current
        rows = []
        for item in self.state.filtered:
            style, text = self._render_row(item, item is current)
            rows.append((style, f"{text}\n"))
        if not rows and self.allow_free_text and self.state.query:
            rows.append(("class:hint", f" Enter to use '{self.state.query}'\n"))
        return rows

    def _render_preview(self) -> ANSI:
        item = self.state.current
        if item is None:
            return ANSI("")
        renderable = item.preview
        if renderable is None:
            renderable = Text(item.title, style="bold")
            if item.tags:
                renderable.append("\n" + "  ".join(item.tags), style=theme.TAG_STYLE)
            if item.description:
                renderable.append(f"\n\n{item.description}")
        with self._console.capture() as capture:
            self._console.print(renderable)
        return ANSI(capture.get())

    def _exit(self, result: Any) -> None:
        if not self.app.is_done:
            self.app.exit(result=result)

    def _keybindings(self) -> KeyBindings:
        kb = KeyBindings()

        @kb.add("down")
        @kb.add("c-n")
        def _(e: Any) -> None:
            self.state.move(1)

        @kb.add("up")
        @kb.add("c-p")
        def _(e: Any) -> None:
            self.state.move(-1)

        @kb.add("enter")
        def _(e: Any) -> None:
            outcome = self.state.submit(allow_free_text=self.allow_free_text)
            if outcome is not None:
                self._exit(outcome)

        @kb.add("tab")
        def _(e: Any) -> None:
            self.state.toggle_mark()

        @kb.add("space")
        def _(e: Any) -> None:
            # Space marks only while the query is empty.
            if self.state.query:
                self.search.buffer.insert_text(" ")
            else:
                self.state.toggle_mark()

        @kb.add("c-s")
        def _(e: Any) -> None:
            self._exit(self.state.marked_outcome())

        @kb.add("escape")
        @kb.add("c-c")
        @kb.add("c-g")
        def _(e: Any) -> None:
            self._exit(None)

        return kb

    def run(self) -> PickOutcome | None:
        return self.app.run()


def _is_interactive() -> bool:
    return sys.stdin.isatty() and sys.stdout.isatty()


class PowerPicker(Picker):
    """prompt_toolkit picker; dismisses itself when not attached to a terminal."""

    def pick(
        self,
        items: Sequence[PickItem],
        *,
        title: str,
        query_hint: str = "",
        allow_free_text: bool = True,
    ) -> PickOutcome | None:
        if not _is_interactive():
            return None
        if not items and not allow_free_text:
            return None
        app = _MarkingPickerApp(items, title, allow_free_text=allow_free_text)
        if query_hint:
            app.search.text = query_hint
        return app.run()
