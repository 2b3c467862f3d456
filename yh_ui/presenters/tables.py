"""Table models for the inspection commands."""

from __future__ import annotations

from typing import Mapping, Sequence

from yh_app.api import HelperSettings, Option
from yh_ui.tui.system.models import TableModel


def build_scripts_table(scripts: Mapping[str, str]) -> TableModel:
    return TableModel(
        title="Scripts",
        columns=["Script", "Command"],
        rows=[[name, body] for name, body in scripts.items()],
    )


def build_dependencies_table(dependencies: Sequence[Option]) -> TableModel:
    return TableModel(
        title="Dependencies",
        columns=["Package", "Version", "Kind"],
        rows=[
            [dep.label, dep.version, dep.kind.value if dep.kind else ""]
            for dep in dependencies
        ],
    )


def build_flags_table(verb: str, flags: Sequence[tuple[str, str]]) -> TableModel:
    return TableModel(
        title=f"Flags for {verb}",
        columns=["Flag", "Description"],
        rows=[[flag, desc] for flag, desc in flags],
    )


def build_settings_table(settings: HelperSettings) -> TableModel:
    rows = []
    for name, value in settings.model_dump().items():
        rows.append([name, "" if value is None else str(value)])
    return TableModel(title="Settings", columns=["Key", "Value"], rows=rows)
