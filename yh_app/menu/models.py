"""Menu node model walked by the choice resolver.

A menu is a tagged union of four node shapes:

- ``OptionList``: a flat list of options; picking one ends the walk.
- ``SubMenu``: an ordered mapping of label -> continuation.
- ``Deferred``: a producer invoked at resolution time (e.g. scraping CLI help).
- ``Terminal``: a single fixed token.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Mapping, Sequence, TypeAlias, Union


class DependencyKind(str, Enum):
    RUNTIME = "dependencies"
    DEV = "devDependencies"
    PEER = "peerDependencies"
    OPTIONAL = "optionalDependencies"


@dataclass(frozen=True)
class Option:
    """A selectable label plus display metadata.

    Only ``label`` takes part in equality and hashing.
    """

    label: str
    description: str = field(default="", compare=False)
    version: str = field(default="", compare=False)
    kind: DependencyKind | None = field(default=None, compare=False)


@dataclass(frozen=True)
class OptionList:
    options: tuple[Option, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "options", tuple(self.options))

    def labels(self) -> list[str]:
        return [opt.label for opt in self.options]


@dataclass(frozen=True)
class SubMenu:
    """Ordered label -> continuation mapping.

    ``options`` optionally carries display metadata for entries; labels
    without an Option are shown bare.
    """

    entries: Mapping[str, "Continuation"] = field(default_factory=dict)
    options: Mapping[str, Option] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "entries", dict(self.entries))
        object.__setattr__(self, "options", dict(self.options))

    def menu_options(self) -> tuple[Option, ...]:
        return tuple(self.options.get(label, Option(label)) for label in self.entries)

    def continuation(self, label: str) -> "Continuation":
        return self.entries.get(label)


@dataclass(frozen=True)
class Deferred:
    producer: Callable[[], "DeferredResult"]


@dataclass(frozen=True)
class Terminal:
    token: str


MenuNode: TypeAlias = Union[OptionList, SubMenu, Deferred, Terminal]
DeferredResult: TypeAlias = Union[MenuNode, str, Sequence[str]]
Continuation: TypeAlias = Union[MenuNode, str, Callable[[], DeferredResult], None]

MENU_NODE_TYPES = (OptionList, SubMenu, Deferred, Terminal)


def is_menu_node(value: object) -> bool:
    return isinstance(value, MENU_NODE_TYPES)


def is_empty(node: MenuNode) -> bool:
    """True for option lists and sub-menus with nothing to pick."""
    if isinstance(node, OptionList):
        return not node.options
    if isinstance(node, SubMenu):
        return not node.entries
    return False
