"""Service for parsing and applying filters to tasks."""

import contextlib
import logging
import re
from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import date

from ..models import BoardState, Priority, Task
from ..utils import parse_date

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FilterCriteria:
    """Board filter; empty or unset fields do not restrict."""

    search: str = ""  # Substring of title or description
    priorities: frozenset[Priority] = field(default_factory=frozenset)
    column_ids: frozenset[str] = field(default_factory=frozenset)
    assignee_ids: frozenset[str] = field(default_factory=frozenset)  # Any overlap
    due_date_from: date | None = None  # Inclusive
    due_date_to: date | None = None  # Inclusive
    has_attachments: bool | None = None  # None = either

    def __post_init__(self) -> None:
        # Accept any iterable (lists from form state) for the set fields
        for name in ("priorities", "column_ids", "assignee_ids"):
            value = getattr(self, name)
            if not isinstance(value, frozenset):
                object.__setattr__(self, name, frozenset(value))

    @property
    def is_empty(self) -> bool:
        return self == FilterCriteria()


class FilterService:
    """Service for parsing and applying filters to tasks."""

    # Pattern for key:value tokens
    TOKEN_PATTERN = re.compile(r"(?:(priority|column|assignee|from|to|attachments):)?(\S+)")

    YES = frozenset({"yes", "true", "1"})
    NO = frozenset({"no", "false", "0"})

    def parse(self, expression: str) -> FilterCriteria:
        """
        Parse a filter expression string.

        Syntax:
        - Free text: matches title or description
        - priority:high/medium/low
        - column:<column id>
        - assignee:<member id>
        - from:YYYY-MM-DD / to:YYYY-MM-DD - due date bounds
        - attachments:yes/no

        Repeated keys are ORed, different keys are ANDed.
        Invalid priorities, dates and attachment flags are ignored.
        """
        text_parts: list[str] = []
        priorities: set[Priority] = set()
        column_ids: set[str] = set()
        assignee_ids: set[str] = set()
        due_from: date | None = None
        due_to: date | None = None
        has_attachments: bool | None = None

        for match in self.TOKEN_PATTERN.finditer(expression):
            key = match.group(1)
            raw = match.group(2)
            value = raw.lower()

            if key is None:
                text_parts.append(raw)

            elif key == "priority":
                with contextlib.suppress(ValueError):
                    priorities.add(Priority(value))

            elif key == "column":
                column_ids.add(raw)

            elif key == "assignee":
                assignee_ids.add(raw)

            elif key in ("from", "to"):
                try:
                    bound = parse_date(raw)
                except ValueError:
                    logger.debug("Ignoring invalid date in filter: %s", raw)
                    continue
                if key == "from":
                    due_from = bound
                else:
                    due_to = bound

            elif key == "attachments":
                if value in self.YES:
                    has_attachments = True
                elif value in self.NO:
                    has_attachments = False

        return FilterCriteria(
            search=" ".join(text_parts),
            priorities=frozenset(priorities),
            column_ids=frozenset(column_ids),
            assignee_ids=frozenset(assignee_ids),
            due_date_from=due_from,
            due_date_to=due_to,
            has_attachments=has_attachments,
        )

    def apply(self, tasks: Iterable[Task], criteria: FilterCriteria) -> list[Task]:
        """Apply filter to a list of tasks, keeping their order."""
        return [task for task in tasks if self.matches(task, criteria)]

    def visible_tasks(
        self, state: BoardState, criteria: FilterCriteria, column_id: str
    ) -> list[Task]:
        """Tasks of one column that pass the filter, in board order."""
        return self.apply(state.tasks_in(column_id), criteria)

    def visible_board(self, state: BoardState, criteria: FilterCriteria) -> dict[str, list[Task]]:
        """Filtered task lists for every column, keyed in display order."""
        return {
            column_id: self.visible_tasks(state, criteria, column_id)
            for column_id in state.column_ids
        }

    def matches(self, task: Task, f: FilterCriteria) -> bool:
        """Check if a task matches every active criterion."""
        # Text search (case-insensitive)
        query = f.search.strip().lower()
        if query and query not in task.title.lower() and query not in task.description.lower():
            return False

        # Priority filter (any match)
        if f.priorities and task.priority not in f.priorities:
            return False

        # Column filter (any match)
        if f.column_ids and task.column_id not in f.column_ids:
            return False

        # Assignee filter (any overlap)
        if f.assignee_ids and f.assignee_ids.isdisjoint(task.assignees):
            return False

        # Due date range; undated tasks cannot satisfy a bound
        if f.due_date_from is not None or f.due_date_to is not None:
            due = task.due_date
            if due is None:
                return False
            if f.due_date_from is not None and due < f.due_date_from:
                return False
            if f.due_date_to is not None and due > f.due_date_to:
                return False

        if f.has_attachments is not None and task.has_attachments != f.has_attachments:
            return False

        return True

    def active_count(self, f: FilterCriteria) -> int:
        """Number of active criteria, as shown on the filter apply button."""
        return sum(
            [
                1 if f.search.strip() else 0,
                len(f.priorities),
                len(f.column_ids),
                len(f.assignee_ids),
                1 if f.due_date_from is not None or f.due_date_to is not None else 0,
                1 if f.has_attachments is not None else 0,
            ]
        )
