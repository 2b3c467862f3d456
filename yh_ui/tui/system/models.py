from dataclasses import dataclass, field
from typing import Any, Tuple


@dataclass
class TableModel:
    title: str
    columns: list[str]
    rows: list[list[str]]


@dataclass(frozen=True)
class PickItem:
    id: str
    title: str
    tags: Tuple[str, ...] = ()
    description: str = ""
    search_blob: str = ""
    preview: object | None = None  # Rich renderable
    payload: Any = None  # domain object
    free_text: bool = False  # typed by the user, not one of the offered items


@dataclass
class PickOutcome:
    """Result of a marking picker: marked items, or the single item under the cursor."""

    items: list[PickItem] = field(default_factory=list)
    marked: bool = False
