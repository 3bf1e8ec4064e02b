"""Drag events supplied by the gesture layer."""

from pydantic import BaseModel, ConfigDict


class DragStartEvent(BaseModel):
    """A drag began on a task card or column."""

    model_config = ConfigDict(frozen=True)

    active_id: str


class DragEndEvent(BaseModel):
    """A drag was released; over_id is None when dropped over empty space."""

    model_config = ConfigDict(frozen=True)

    active_id: str
    over_id: str | None = None
