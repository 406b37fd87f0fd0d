"""
Configuration - Board settings and logging, read from the environment.

Environment variables:
    DRAUGHTS_BOARD_WIDTH     Board columns (default 8)
    DRAUGHTS_BOARD_HEIGHT    Board rows (default 8)
    DRAUGHTS_ROWS_PER_SIDE   Starting rows filled per color (default 3)
    DRAUGHTS_LOG_LEVEL       Logging level name (default WARNING)
"""

import logging
import os

from pydantic import BaseModel, Field, model_validator


DRAUGHTS_LOG_LEVEL = os.getenv("DRAUGHTS_LOG_LEVEL", "WARNING")


class GameConfig(BaseModel):
    """Board shape and starting layout for a game."""
    width: int = Field(8, ge=1, description="Number of columns")
    height: int = Field(8, ge=1, description="Number of rows")
    rows_per_side: int = Field(3, ge=1, description="Starting rows per color")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def _check_rows_fit(self):
        if 2 * self.rows_per_side > self.height:
            raise ValueError(
                f"rows_per_side={self.rows_per_side} overlaps on a board of height {self.height}"
            )
        return self


def load_config() -> GameConfig:
    """Build a GameConfig from DRAUGHTS_* environment variables."""
    values = {}
    for field_name, env_name in (
        ("width", "DRAUGHTS_BOARD_WIDTH"),
        ("height", "DRAUGHTS_BOARD_HEIGHT"),
        ("rows_per_side", "DRAUGHTS_ROWS_PER_SIDE"),
    ):
        raw = os.getenv(env_name)
        if raw is not None:
            values[field_name] = raw
    return GameConfig(**values)


def configure_logging(level: str | None = None):
    """Set up root logging for entry points. Library code never calls this."""
    logging.basicConfig(
        level=(level or DRAUGHTS_LOG_LEVEL).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
