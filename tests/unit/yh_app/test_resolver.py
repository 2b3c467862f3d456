"""Tests for the menu walk performed by ChoiceResolver."""

from __future__ import annotations

import pytest

from yh_app.api import (
    Choice,
    ChoiceResolver,
    Deferred,
    Option,
    OptionList,
    SubMenu,
    Terminal,
    joined,
)
from yh_common.errors import SelectionAborted


pytestmark = pytest.mark.unit_app


class ScriptedChooser:
    """Answers in order: str = single pick, list = marked, None = cancel."""

    def __init__(self, answers):
        self.answers = list(answers)
        self.prompts: list[str] = []
        self.offered: list[list[str]] = []

    def choose(self, prompt, options):
        self.prompts.append(prompt)
        self.offered.append([opt.label for opt in options])
        answer = self.answers.pop(0)
        if answer is None:
            return None
        if isinstance(answer, list):
            return Choice.many(answer)
        return Choice.single(answer)


class FirstChooser:
    def __init__(self):
        self.calls = 0

    def choose(self, prompt, options):
        self.calls += 1
        return Choice.single(options[0].label)


def _opts(*labels: str) -> OptionList:
    return OptionList(tuple(Option(label) for label in labels))


def test_terminal_root_yields_its_token():
    chooser = ScriptedChooser([])
    assert ChoiceResolver(chooser).resolve(Terminal("install")) == ["install"]
    assert chooser.prompts == []


def test_single_selection_drills_into_submenu():
    menu = SubMenu({"add": _opts("lodash", "react"), "install": None})
    chooser = ScriptedChooser(["add", "react"])

    result = ChoiceResolver(chooser).resolve(menu)

    assert result == ["add", "react"]
    assert chooser.prompts == ["yarn: ", "yarn add: "]
    assert chooser.offered[0] == ["add", "install"]


def test_label_without_continuation_ends_walk():
    menu = SubMenu({"install": None, "add": _opts("lodash")})
    chooser = ScriptedChooser(["install"])

    assert ChoiceResolver(chooser).resolve(menu) == ["install"]
    assert len(chooser.prompts) == 1


def test_empty_option_list_returns_selection_unchanged():
    chooser = ScriptedChooser([])
    assert ChoiceResolver(chooser).resolve(OptionList()) == []
    assert ChoiceResolver(chooser).resolve(SubMenu({})) == []
    assert chooser.prompts == []


def test_empty_continuation_ends_after_label():
    menu = SubMenu({"remove": OptionList(), "add": _opts("x")})
    chooser = ScriptedChooser(["remove"])

    assert ChoiceResolver(chooser).resolve(menu) == ["remove"]
    assert len(chooser.prompts) == 1


def test_deeply_nested_submenus_terminate():
    node = Terminal("leaf")
    for level in range(500):
        node = SubMenu({f"l{level}": node})
    chooser = FirstChooser()

    result = ChoiceResolver(chooser, prompt_builder=lambda crumbs, depth: "> ").resolve(node)

    assert len(result) == 501
    assert result[0] == "l499"
    assert result[-1] == "leaf"
    assert chooser.calls == 500


def test_deferred_yielding_node_is_walked():
    menu = SubMenu({"audit": Deferred(lambda: _opts("--json", "--level"))})
    chooser = ScriptedChooser(["audit", "--json"])

    assert ChoiceResolver(chooser).resolve(menu) == ["audit", "--json"]


def test_deferred_yielding_string_and_batch():
    chooser = ScriptedChooser([])
    resolver = ChoiceResolver(chooser)

    assert resolver.resolve(Deferred(lambda: "react @18")) == ["react @18"]
    assert resolver.resolve(Deferred(lambda: ["react", " ", "lodash"])) == ["react lodash"]


def test_callable_and_string_continuations():
    menu = SubMenu({"a": lambda: "from-callable", "b": "fixed"})

    assert ChoiceResolver(ScriptedChooser(["a"])).resolve(menu) == ["a", "from-callable"]
    assert ChoiceResolver(ScriptedChooser(["b"])).resolve(menu) == ["b", "fixed"]


def test_multi_selection_merges_one_token_per_label_in_chooser_order():
    menu = SubMenu(
        {
            "a": "x",
            "b": _opts("b1", "b2"),
            "c": lambda: "y",
            "d": None,
        }
    )
    chooser = ScriptedChooser([["c", "a", "b", "d"], "b1"])

    result = ChoiceResolver(chooser).resolve(menu)

    assert result == ["c y", "a x", "b b1", "d"]
    # The sub-walk for "b" is prompted with its label as context.
    assert chooser.prompts[1] == "yarn b: "
    assert chooser.answers == []


def test_multi_selection_ends_the_level():
    menu = SubMenu({"remove": _opts("lodash", "react", "vue")})
    chooser = ScriptedChooser(["remove", ["vue", "lodash"]])

    assert ChoiceResolver(chooser).resolve(menu) == ["remove", "vue", "lodash"]
    assert len(chooser.prompts) == 2


def test_multi_selection_with_no_marks_keeps_accumulated_tokens():
    menu = SubMenu({"remove": _opts("lodash")})
    chooser = ScriptedChooser(["remove", []])

    assert ChoiceResolver(chooser).resolve(menu) == ["remove"]


def test_free_form_label_is_accepted_and_ends_walk():
    menu = SubMenu({"add": _opts("lodash")})
    chooser = ScriptedChooser(["outdated --json"])

    assert ChoiceResolver(chooser).resolve(menu) == ["outdated --json"]


@pytest.mark.parametrize(
    "answers",
    [
        [None],
        ["add", None],
        [["b"], None],
    ],
)
def test_cancellation_at_any_depth_aborts(answers):
    menu = SubMenu({"add": _opts("lodash"), "b": _opts("b1")})

    with pytest.raises(SelectionAborted):
        ChoiceResolver(ScriptedChooser(answers)).resolve(menu)


def test_deferred_may_abort():
    def producer():
        raise SelectionAborted("typed nothing")

    with pytest.raises(SelectionAborted, match="typed nothing"):
        ChoiceResolver(ScriptedChooser(["add"])).resolve(SubMenu({"add": Deferred(producer)}))


def test_prompt_builder_sees_breadcrumb_and_depth():
    seen = []

    def builder(crumbs, depth):
        seen.append((list(crumbs), depth))
        return "?"

    menu = SubMenu({"global": SubMenu({"add": _opts("typescript")})})
    ChoiceResolver(ScriptedChooser(["global", "add", "typescript"]), builder).resolve(menu)

    assert seen == [([], 0), (["global"], 1), (["global", "add"], 2)]


def test_joined_collapses_whitespace():
    selection = [" add ", "react   @18", "--dev"]
    text = joined(selection)

    assert text == "add react @18 --dev"
    assert joined(text.split(" ")) == text
