"""Exceptions raised by board operations."""


class KanboardError(Exception):
    """Base exception for kanboard errors."""

    pass


class NotFoundError(KanboardError, KeyError):
    """A CRUD operation referenced a board, column, task or item that does not exist."""

    def __init__(self, kind: str, entity_id: str) -> None:
        self.kind = kind
        self.entity_id = entity_id
        super().__init__(f"{kind} not found: {entity_id}")

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message
        return str(self.args[0])


class InvalidDragStateError(KanboardError):
    """A drag ended for an item that is not on the board (strict mode only)."""

    def __init__(self, active_id: str, over_id: str | None = None) -> None:
        self.active_id = active_id
        self.over_id = over_id
        super().__init__(f"Dragged item is not on the board: {active_id} (over {over_id})")
