"""Tests for the picker's ranking, marking and submit rules."""

import pytest

from yh_ui.tui.core import theme
from yh_ui.tui.system.components.picker import PickerState, _MarkingPickerApp, rank_items
from yh_ui.tui.system.models import PickItem


pytestmark = pytest.mark.unit_ui


class Unhashable:
    __hash__ = None


def _items():
    return [
        PickItem(id="add", title="add", description="Add dependencies", payload=Unhashable()),
        PickItem(id="remove", title="remove"),
        PickItem(id="why", title="why"),
        PickItem(id="upgrade-interactive", title="upgrade-interactive"),
    ]


def test_rank_puts_prefix_matches_first():
    items = _items()
    ranked = rank_items(items, "up")
    assert ranked[0].title == "upgrade-interactive"


def test_rank_empty_query_keeps_order():
    items = _items()
    assert rank_items(items, "  ") == items


def test_enter_returns_item_under_cursor():
    state = PickerState(_items())
    state.move(1)

    outcome = state.submit(allow_free_text=True)

    assert [item.title for item in outcome.items] == ["remove"]
    assert outcome.marked is False


def test_cursor_wraps():
    state = PickerState(_items())
    state.move(-1)
    assert state.current.title == "upgrade-interactive"


def test_marks_submitted_in_marking_order():
    state = PickerState(_items())
    state.move(2)
    state.toggle_mark()
    state.move(-2)
    state.toggle_mark()

    outcome = state.submit(allow_free_text=True)

    assert [item.title for item in outcome.items] == ["why", "add"]
    assert outcome.marked is True


def test_toggle_twice_unmarks():
    state = PickerState(_items())
    state.toggle_mark()
    state.toggle_mark()
    assert state.marks == {}
    assert state.marked_outcome().items == []


def test_free_text_when_nothing_matches():
    state = PickerState(_items())
    state.set_query("zzqqxx")

    assert state.filtered == []
    outcome = state.submit(allow_free_text=True)

    assert outcome.items[0].title == "zzqqxx"
    assert outcome.items[0].free_text is True
    assert state.submit(allow_free_text=False) is None


def test_app_rows_follow_state():
    app = _MarkingPickerApp(_items(), "yarn: ")
    item = app.state.items[0]

    assert app._render_row(item, True) == ("class:selected", " [ ] add")
    app.state.toggle_mark()
    assert app._render_row(item, False) == ("class:checked", " [x] add")


def test_app_search_filters_state():
    app = _MarkingPickerApp(_items(), "yarn: ")
    app.search.text = "why"
    assert [item.title for item in app.state.filtered] == ["why"]


def test_hint_and_style():
    app = _MarkingPickerApp(_items(), "t", allow_free_text=False)
    assert "typed text" not in app._hint()[0][1]
    styles = theme.prompt_toolkit_picker_style()
    for key in ("selected", "checked", "separator", "search", "hint"):
        assert key in styles
