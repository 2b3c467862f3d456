"""Assemble the root menu for a project from live collaborator data."""

from __future__ import annotations

import logging
from typing import Collection, Mapping, Sequence

from yh_app.menu.factory import flag_options, script_options, version_options
from yh_app.menu.models import (
    Continuation,
    Deferred,
    DeferredResult,
    Option,
    OptionList,
    SubMenu,
)
from yh_app.services.interfaces import Chooser, Prompter
from yh_app.services.normalizer import YARN_VERBS
from yh_app.services.package_manager import PackageManagerClient
from yh_common.errors import SelectionAborted

logger = logging.getLogger(__name__)

# Verbs whose argument is one of the project's own dependencies.
DEPENDENCY_VERBS: tuple[str, ...] = ("remove", "upgrade", "why", "info", "unlink")


def parse_dependency_input(text: str, binary: str = "yarn") -> list[str]:
    """Split a typed dependency string, dropping echoed ``yarn``/``add`` words.

    >>> parse_dependency_input("yarn add react @18")
    ['react', '@18']
    """
    words = text.split()
    if words and words[0] == binary:
        words = words[1:]
    if words and words[0] == "add":
        words = words[1:]
    return words


def _package_name(spec: str) -> str:
    """``react@18`` -> ``react``; scoped names keep their leading ``@``."""
    head, sep, _ = spec[1:].partition("@")
    return spec[0] + head if sep else spec


class MenuBuilder:
    """Build the root menu. Nothing is cached between invocations."""

    def __init__(
        self,
        client: PackageManagerClient,
        chooser: Chooser,
        prompter: Prompter,
        verbs: Collection[str] = YARN_VERBS,
    ) -> None:
        self._client = client
        self._chooser = chooser
        self._prompter = prompter
        self._verbs = verbs

    def build(self, scripts: Mapping[str, str], dependencies: Sequence[Option]) -> SubMenu:
        entries: dict[str, Continuation] = {}
        options: dict[str, Option] = {}

        for option in script_options(scripts):
            entries[option.label] = None
            options[option.label] = option

        entries["run"] = OptionList(tuple(script_options(scripts)))
        options["run"] = Option("run", description="Run a project script")

        entries["add"] = Deferred(self.add_dependency)
        options["add"] = Option("add", description="Add dependencies")

        deps = OptionList(tuple(dependencies))
        for verb in DEPENDENCY_VERBS:
            entries[verb] = deps
            options[verb] = Option(verb, description=f"{verb} a dependency")

        for verb in sorted(self._verbs):
            if verb in entries:
                continue
            entries[verb] = Deferred(self._flags_producer(verb))
        return SubMenu(entries, options)

    def _flags_producer(self, verb: str):
        def produce() -> DeferredResult:
            return OptionList(tuple(flag_options(self._client.flags(verb))))

        return produce

    def add_dependency(self) -> DeferredResult:
        """Ask for dependencies to add, optionally pinning the first one."""
        raw = self._prompter.ask("Dependencies to add")
        if raw is None:
            raise SelectionAborted()
        words = parse_dependency_input(raw, self._client.binary)
        if not words:
            raise SelectionAborted("No dependency given")

        first = words[0]
        if self._prompter.confirm(f"Check available versions of {first}?", default=False):
            words[0] = self._pin_version(first)
        return " ".join(words)

    def _pin_version(self, spec: str) -> str:
        name = _package_name(spec)
        versions = self._client.versions(name)
        if not versions:
            logger.warning("No versions found for %s", name)
            return spec
        choice = self._chooser.choose(f"{name} version: ", version_options(versions))
        if choice is None or not choice.labels:
            raise SelectionAborted(context={"package": name})
        return f"{name}@{choice.labels[0]}"
