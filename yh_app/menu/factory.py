"""Shape raw collaborator data into menu options. No I/O."""

from __future__ import annotations

from typing import Any, Iterable, Mapping

from yh_app.menu.models import DependencyKind, Option


def script_options(scripts: Mapping[str, str]) -> list[Option]:
    """One option per script; the description is the script body."""
    return [
        Option(label=name, description=str(body))
        for name, body in scripts.items()
        if str(name).strip()
    ]


def dependency_options(descriptor: Mapping[str, Any]) -> list[Option]:
    """Options for every declared dependency, grouped by kind in manifest order."""
    options: list[Option] = []
    for kind in DependencyKind:
        section = descriptor.get(kind.value)
        if not isinstance(section, Mapping):
            continue
        for name, version in section.items():
            options.append(
                Option(
                    label=str(name),
                    description=f"{version} ({kind.value})",
                    version=str(version),
                    kind=kind,
                )
            )
    return options


def flag_options(pairs: Iterable[tuple[str, str]]) -> list[Option]:
    return [Option(label=flag, description=desc) for flag, desc in pairs]


def version_options(versions: Iterable[str]) -> list[Option]:
    """Newest first, as the registry lists them oldest first."""
    return [Option(label=v, version=v) for v in reversed(list(versions))]
