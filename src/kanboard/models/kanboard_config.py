"""Configuration models for kanboard.yml."""

from pydantic import BaseModel, Field, field_validator, model_validator

from ..utils.ids import TASK_PREFIX
from .board import BoardState, Column


def _validate_column_id(value: str) -> str:
    """Validate a configured column id is a lowercase slug outside the task namespace."""
    if not value[0].isalpha():
        raise ValueError("Column ID must start with a letter")
    if not all(c.isalnum() or c in "-_" for c in value):
        raise ValueError("Column ID must be alphanumeric with hyphens or underscores only")
    if value != value.lower():
        raise ValueError("Column ID must be lowercase")
    if value.startswith(TASK_PREFIX):
        raise ValueError(f"Column ID cannot start with the task prefix '{TASK_PREFIX}'")
    return value


def _check_unique(ids: list[str], what: str) -> None:
    if len(ids) != len(set(ids)):
        raise ValueError(f"{what} IDs must be unique")


class ColumnConfig(BaseModel):
    """Configuration for a single board column."""

    id: str = Field(..., min_length=1)
    title_key: str = Field(..., min_length=1, description="Label key for the column title")
    name: str | None = Field(default=None, description="Literal title overriding the label key")

    @field_validator("id")
    @classmethod
    def validate_id(cls, v: str) -> str:
        return _validate_column_id(v)

    def to_column(self) -> Column:
        return Column(id=self.id, title_key=self.title_key, name=self.name)


class MemberConfig(BaseModel):
    """A board member who can be assigned to tasks."""

    id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    avatar: str | None = None


class BoardItemConfig(BaseModel):
    """A board listed in the board switcher."""

    id: str = Field(..., min_length=1)
    name_key: str | None = None
    name: str | None = None

    @model_validator(mode="after")
    def require_label(self) -> "BoardItemConfig":
        if not self.name_key and not self.name:
            raise ValueError(f"Board '{self.id}' needs a name or name_key")
        return self


class BoardConfig(BaseModel):
    """Columns every new board starts with, and the member directory."""

    columns: list[ColumnConfig] = Field(..., min_length=1, max_length=20)
    members: list[MemberConfig] = Field(default_factory=list)

    @field_validator("columns")
    @classmethod
    def validate_columns(cls, v: list[ColumnConfig]) -> list[ColumnConfig]:
        _check_unique([col.id for col in v], "Column")
        return v

    @field_validator("members")
    @classmethod
    def validate_members(cls, v: list[MemberConfig]) -> list[MemberConfig]:
        _check_unique([m.id for m in v], "Member")
        return v

    @property
    def column_ids(self) -> list[str]:
        """List of column IDs in display order."""
        return [col.id for col in self.columns]

    @property
    def member_ids(self) -> list[str]:
        return [m.id for m in self.members]

    def get_member(self, member_id: str) -> MemberConfig | None:
        """Get member config by ID."""
        for m in self.members:
            if m.id == member_id:
                return m
        return None

    def empty_state(self) -> BoardState:
        """A board with the configured columns and no tasks."""
        return BoardState(columns=tuple(col.to_column() for col in self.columns))

    @classmethod
    def default(cls) -> "BoardConfig":
        """Return default 3-column configuration with the demo members."""
        return cls(
            columns=[
                ColumnConfig(id="backlog", title_key="backlog"),
                ColumnConfig(id="in-progress", title_key="inProgress"),
                ColumnConfig(id="done", title_key="done"),
            ],
            members=[
                MemberConfig(id="m1", name="Alex Brown", avatar="/image/avatar_men.png"),
                MemberConfig(id="m2", name="Chris Davis", avatar="/image/avatar_girl.png"),
                MemberConfig(id="m3", name="Emma Wilson", avatar="/image/avatar_girl.png"),
                MemberConfig(id="m4", name="James Lee", avatar="/image/avatar_men.png"),
                MemberConfig(id="m5", name="Maria Garcia", avatar="/image/avatar_girl.png"),
                MemberConfig(id="m6", name="Tom Smith", avatar="/image/avatar_men.png"),
                MemberConfig(id="m7", name="Sarah Kim", avatar="/image/avatar_girl.png"),
                MemberConfig(id="m8", name="David Nguyen", avatar="/image/avatar_men.png"),
            ],
        )


def _default_boards() -> list[BoardItemConfig]:
    return [
        BoardItemConfig(id="b1", name_key="boardWork"),
        BoardItemConfig(id="b2", name_key="boardEmail"),
    ]


class KanboardConfig(BaseModel):
    """Root configuration from kanboard.yml."""

    version: int = 1
    board: BoardConfig = Field(default_factory=BoardConfig.default)
    boards: list[BoardItemConfig] = Field(default_factory=_default_boards, min_length=1)

    @field_validator("boards")
    @classmethod
    def validate_boards(cls, v: list[BoardItemConfig]) -> list[BoardItemConfig]:
        _check_unique([b.id for b in v], "Board")
        return v

    @classmethod
    def default(cls) -> "KanboardConfig":
        """Return default configuration."""
        return cls(board=BoardConfig.default(), boards=_default_boards())
