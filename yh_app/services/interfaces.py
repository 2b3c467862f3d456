"""Contracts between the core and its interactive collaborators."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, Sequence

from yh_app.menu.models import Option


@dataclass(frozen=True)
class Choice:
    """Outcome of one chooser step.

    ``marked`` is True when the user marked zero or more labels
    (multi-selection); otherwise ``labels`` holds exactly one label.
    """

    labels: tuple[str, ...]
    marked: bool = False

    @classmethod
    def single(cls, label: str) -> "Choice":
        return cls(labels=(label,), marked=False)

    @classmethod
    def many(cls, labels: Sequence[str]) -> "Choice":
        return cls(labels=tuple(labels), marked=True)


class Chooser(Protocol):
    def choose(self, prompt: str, options: Sequence[Option]) -> Choice | None:
        """Return the user's choice, or None when the chooser was dismissed."""
        ...


class Prompter(Protocol):
    def ask(self, prompt: str, default: str | None = None) -> str | None: ...

    def confirm(self, prompt: str, default: bool = True) -> bool: ...
