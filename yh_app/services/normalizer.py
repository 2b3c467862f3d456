"""Fold a resolved token sequence into one command line."""

from __future__ import annotations

from typing import Collection, Iterable, Sequence

YARN_VERBS: frozenset[str] = frozenset(
    {
        "add",
        "audit",
        "autoclean",
        "bin",
        "cache",
        "check",
        "config",
        "create",
        "dedupe",
        "generate-lock-entry",
        "global",
        "help",
        "import",
        "info",
        "init",
        "install",
        "licenses",
        "link",
        "list",
        "lockfile",
        "login",
        "logout",
        "outdated",
        "owner",
        "pack",
        "policies",
        "prune",
        "publish",
        "remove",
        "run",
        "self-update",
        "tag",
        "team",
        "test",
        "unlink",
        "upgrade",
        "upgrade-interactive",
        "version",
        "versions",
        "why",
        "workspace",
        "workspaces",
    }
)


def _clean(tokens: Iterable[str]) -> str:
    return " ".join(word for token in tokens for word in token.split())


def normalize(
    tokens: Sequence[str],
    verbs: Collection[str] = YARN_VERBS,
    activation: str | None = None,
    *,
    binary: str = "yarn",
    bootstrap_unknown_verbs: bool = False,
) -> str:
    """Build the final command line.

    >>> normalize(["", "  add", "lodash "])
    'yarn add lodash'
    """
    command = _clean(tokens)
    words = command.split(" ") if command else []

    if not words:
        command = binary
    elif words[0] != binary:
        if bootstrap_unknown_verbs and words[0] not in verbs:
            command = f"{binary} && {binary} {command}"
        else:
            command = f"{binary} {command}"

    prefix = (activation or "").strip()
    if prefix:
        if not prefix.endswith("&&"):
            prefix = f"{prefix} &&"
        command = f"{prefix} {command}"
    return command.strip()


# Built-in verbs that yarn itself forwards to the script of the same name.
SCRIPT_FORWARDING_VERBS: frozenset[str] = frozenset({"test"})


def collapse_script_shortcut(
    tokens: Sequence[str],
    scripts: Collection[str],
    verbs: Collection[str] = YARN_VERBS,
) -> list[str]:
    """Rewrite ``run <script> ...`` to ``<script> ...``.

    Scripts shadowed by a built-in verb keep the explicit ``run``.
    """
    words = _clean(tokens).split()
    if len(words) < 2 or words[0] != "run" or words[1] not in scripts:
        return list(tokens)
    script = words[1]
    if script in verbs and script not in SCRIPT_FORWARDING_VERBS:
        return list(tokens)
    return words[1:]
