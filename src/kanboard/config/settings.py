"""Application settings."""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings."""

    project_root: Path = Field(
        default=Path(),
        description="Path to directory containing kanboard.yml",
    )

    verbose: int = Field(
        default=0,
        description="Verbosity level (0=off, 1=INFO, 2+=DEBUG)",
    )

    log_file: Path | None = Field(
        default=None,
        description="Optional path to write logs to file",
    )

    strict_drag: bool = Field(
        default=False,
        description="Raise InvalidDragStateError for drags of items not on the board",
    )

    model_config = {
        "env_prefix": "KANBOARD_",
    }
