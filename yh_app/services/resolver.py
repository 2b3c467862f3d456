"""Walk a menu tree with a chooser and accumulate the chosen tokens."""

from __future__ import annotations

import logging
from typing import Callable, Sequence, TypeAlias

from yh_app.menu.models import (
    Continuation,
    Deferred,
    DeferredResult,
    MenuNode,
    OptionList,
    SubMenu,
    Terminal,
    is_empty,
    is_menu_node,
)
from yh_app.services.interfaces import Chooser
from yh_common.errors import SelectionAborted

logger = logging.getLogger(__name__)

Selection: TypeAlias = list[str]
PromptBuilder: TypeAlias = Callable[[Sequence[str], int], str]


def joined(selection: Sequence[str]) -> str:
    """Single-spaced command text for a selection."""
    return " ".join(word for token in selection for word in token.split())


def breadcrumb_prompt(binary: str = "yarn") -> PromptBuilder:
    """Prompt showing everything chosen so far, e.g. ``yarn add: ``."""

    def build(breadcrumb: Sequence[str], depth: int) -> str:
        _ = depth
        return f"{joined([binary, *breadcrumb])}: "

    return build


class ChoiceResolver:
    """Drive a chooser through a menu tree.

    Single selections drill into the chosen continuation; a marked
    (multi) selection resolves every marked label independently, records
    one merged token per label and ends the walk.
    """

    def __init__(
        self,
        chooser: Chooser,
        prompt_builder: PromptBuilder | None = None,
    ) -> None:
        self._chooser = chooser
        self._prompt_builder = prompt_builder or breadcrumb_prompt()

    def resolve(self, root: MenuNode) -> Selection:
        result: Selection = []
        self._walk(root, result, depth=0, context=())
        logger.debug("Resolved selection %s", result)
        return result

    def _walk(
        self,
        node: MenuNode | None,
        result: Selection,
        *,
        depth: int,
        context: tuple[str, ...],
    ) -> None:
        current = node
        while current is not None:
            if isinstance(current, Terminal):
                _append(result, current.token)
                return
            if isinstance(current, Deferred):
                current = _absorb(current.producer(), result)
                continue
            if isinstance(current, (OptionList, SubMenu)):
                current = self._step(current, result, depth=depth, context=context)
                depth += 1
                continue
            raise TypeError(f"Unsupported menu node: {current!r}")

    def _step(
        self,
        node: OptionList | SubMenu,
        result: Selection,
        *,
        depth: int,
        context: tuple[str, ...],
    ) -> MenuNode | None:
        if is_empty(node):
            return None
        options = node.options if isinstance(node, OptionList) else node.menu_options()
        prompt = self._prompt_builder([*context, *result], depth)
        choice = self._chooser.choose(prompt, options)
        if choice is None:
            raise SelectionAborted(context={"breadcrumb": [*context, *result]})

        if choice.marked:
            breadcrumb = (*context, *result)
            for label in choice.labels:
                value = self._resolve_marked(node, label, depth=depth, context=breadcrumb)
                _append(result, joined([label, value]))
            return None

        if len(choice.labels) != 1:
            raise SelectionAborted(
                "Chooser returned no single label",
                context={"labels": list(choice.labels)},
            )
        label = choice.labels[0]
        _append(result, label)
        if isinstance(node, OptionList):
            return None
        return _continuation_node(node.continuation(label))

    def _resolve_marked(
        self,
        node: OptionList | SubMenu,
        label: str,
        *,
        depth: int,
        context: tuple[str, ...],
    ) -> str:
        if isinstance(node, OptionList):
            return ""
        value: Continuation | DeferredResult = node.continuation(label)
        if callable(value) and not is_menu_node(value):
            value = value()
        if value is None:
            return ""
        if isinstance(value, str):
            return value
        if is_menu_node(value):
            sub: Selection = []
            self._walk(value, sub, depth=depth + 1, context=(*context, label))
            return joined(sub)
        return joined(list(value))


def _append(result: Selection, token: str) -> None:
    token = token.strip()
    if token:
        result.append(token)


def _continuation_node(value: Continuation) -> MenuNode | None:
    if value is None:
        return None
    if is_menu_node(value):
        return None if is_empty(value) else value
    if isinstance(value, str):
        return Terminal(value) if value.strip() else None
    if callable(value):
        return Deferred(value)
    raise TypeError(f"Unsupported continuation: {value!r}")


def _absorb(produced: DeferredResult, result: Selection) -> MenuNode | None:
    """Continue with a produced node, or record a produced final token."""
    if is_menu_node(produced):
        return produced
    if isinstance(produced, str):
        _append(result, produced)
        return None
    if isinstance(produced, (list, tuple)):
        _append(result, joined([str(token) for token in produced]))
        return None
    raise TypeError(f"Unsupported deferred result: {produced!r}")
