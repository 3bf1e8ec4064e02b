"""Identifier generation with disjoint prefixes per entity kind."""

import uuid
from collections.abc import Callable, Container

TASK_PREFIX = "t-"
COLUMN_PREFIX = "col-"
CHECKLIST_PREFIX = "ci-"
ATTACHMENT_PREFIX = "att-"
BOARD_PREFIX = "b-"


def _random_suffix() -> str:
    return uuid.uuid4().hex[:8]


class IdGenerator:
    """
    Generates prefixed identifiers.

    Task and column ids live in separate namespaces ("t-..." vs "col-..."),
    so a drop target can always be classified as a column or a task.
    The suffix factory is injectable for deterministic tests.
    """

    def __init__(self, suffix_factory: Callable[[], str] | None = None) -> None:
        self._suffix = suffix_factory or _random_suffix

    def _generate(self, prefix: str, taken: Container[str] = ()) -> str:
        while True:
            candidate = f"{prefix}{self._suffix()}"
            if candidate not in taken:
                return candidate

    def task_id(self, taken: Container[str] = ()) -> str:
        """Generate a task id not present in taken."""
        return self._generate(TASK_PREFIX, taken)

    def column_id(self, taken: Container[str] = ()) -> str:
        """Generate a column id not present in taken."""
        return self._generate(COLUMN_PREFIX, taken)

    def checklist_item_id(self, taken: Container[str] = ()) -> str:
        return self._generate(CHECKLIST_PREFIX, taken)

    def attachment_id(self, taken: Container[str] = ()) -> str:
        return self._generate(ATTACHMENT_PREFIX, taken)

    def board_id(self, taken: Container[str] = ()) -> str:
        return self._generate(BOARD_PREFIX, taken)


def sequential_suffixes(start: int = 1) -> Callable[[], str]:
    """Return a suffix factory yielding "1", "2", ... for predictable ids."""
    counter = start - 1

    def _next() -> str:
        nonlocal counter
        counter += 1
        return str(counter)

    return _next
