"""Application settings loaded from environment variables.

Every value can be overridden with a `STUDIO_PLANNER_`-prefixed variable
or a `.env` file, e.g. `STUDIO_PLANNER_DATA_DIR=/var/lib/studio`.
"""

from datetime import time
from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Default data directory (repo root / data)
DATA_DIR = Path(__file__).parent.parent.parent / "data"


class Settings(BaseSettings):
    """studio-planner configuration."""

    model_config = SettingsConfigDict(
        env_prefix="STUDIO_PLANNER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    data_dir: Path = Field(
        default=DATA_DIR,
        description="Directory holding the SQLite database",
    )
    db_filename: str = Field(default="studio_planner.db")
    default_start_time: time = Field(
        default=time(9, 0),
        description="Start time for classes created from templates",
    )
    minutes_per_movement: float = Field(
        default=4.5,
        description="Sequence duration heuristic (minutes per movement)",
    )
    default_category: str = Field(default="Regular")
    log_level: str = Field(default="INFO")

    @field_validator("minutes_per_movement")
    @classmethod
    def validate_minutes_per_movement(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("minutes_per_movement must be positive")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {v}")
        return level

    @property
    def db_path(self) -> Path:
        return self.data_dir / self.db_filename


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance."""
    return Settings()
