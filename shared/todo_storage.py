"""
Model and parser for the todo list TodoMVC keeps in localStorage.

The app serialises its list as a JSON array of ``{title, completed}``
records under a single key. The key and the record shape belong to the
app; this module only reads them.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Iterable


class PersistedStateError(ValueError):
    """Raised when the stored todo list cannot be parsed."""


class PersistedStateTimeout(AssertionError):
    """Raised when a localStorage predicate does not hold before the timeout."""

    def __init__(self, expectation: str, last_value: str | None, timeout_ms: int):
        self.expectation = expectation
        self.last_value = last_value
        self.timeout_ms = timeout_ms
        super().__init__(
            f"Expected persisted todos to satisfy '{expectation}' within "
            f"{timeout_ms}ms, but last stored value was {last_value!r}"
        )


@dataclass(frozen=True)
class TodoItem:
    """A single todo entry as the app persists it."""

    title: str
    completed: bool = False

    @classmethod
    def from_record(cls, record: Any) -> "TodoItem":
        if not isinstance(record, dict) or not isinstance(record.get("title"), str):
            raise PersistedStateError(f"Not a todo record: {record!r}")
        return cls(title=record["title"], completed=bool(record.get("completed", False)))

    def to_record(self) -> dict[str, Any]:
        return {"title": self.title, "completed": self.completed}


def parse_persisted_todos(raw: str | None) -> list[TodoItem]:
    """
    Parse the raw localStorage value into todo items.

    Args:
        raw: Stored string, or None when the key is absent.

    Returns:
        Items in stored order. Absent or empty values give an empty list.

    Raises:
        PersistedStateError: If the value is not a JSON array of records.
    """
    if not raw:
        return []
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise PersistedStateError(f"Stored todos are not valid JSON: {raw!r}") from exc
    if not isinstance(data, list):
        raise PersistedStateError(f"Stored todos are not a JSON array: {raw!r}")
    return [TodoItem.from_record(record) for record in data]


def serialize_todos(items: Iterable[TodoItem]) -> str:
    """Encode items the way the app stores them."""
    return json.dumps([item.to_record() for item in items])


def count_completed(items: Iterable[TodoItem]) -> int:
    return sum(1 for item in items if item.completed)


def titles_of(items: Iterable[TodoItem]) -> list[str]:
    return [item.title for item in items]


def filter_by_completion(items: Iterable[TodoItem], completed: bool) -> list[TodoItem]:
    """Return the items whose completion flag equals ``completed``."""
    return [item for item in items if item.completed is completed]


# -----------------------------------------------------------------------------
# In-browser predicates for page.wait_for_function
# -----------------------------------------------------------------------------

# Each receives [storageKey, expected] and reads the list inside the page.
# A missing or empty value reads as an empty list, as in parse_persisted_todos.
COUNT_PREDICATE = """([key, expected]) => {
    const raw = localStorage.getItem(key);
    return JSON.parse(raw || "[]").length === expected;
}"""

COMPLETED_COUNT_PREDICATE = """([key, expected]) => {
    const raw = localStorage.getItem(key);
    return JSON.parse(raw || "[]").filter((todo) => todo.completed).length === expected;
}"""

CONTAINS_TITLE_PREDICATE = """([key, title]) => {
    const raw = localStorage.getItem(key);
    return JSON.parse(raw || "[]").map((todo) => todo.title).includes(title);
}"""

LACKS_TITLE_PREDICATE = """([key, title]) => {
    const raw = localStorage.getItem(key);
    return !JSON.parse(raw || "[]").map((todo) => todo.title).includes(title);
}"""
