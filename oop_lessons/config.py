"""Configuration settings for OOP Lessons."""

from decimal import Decimal
from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    json_logs: bool = False

    # Error handling examples
    data_file: Path = Field(default=Path("input.txt"), description="File read by the file reader demo")
    initial_account_balance: Decimal = Field(default=Decimal("100"), ge=0)

    # Parallel vs sequential benchmark
    benchmark_size: int = Field(default=1000, gt=0, description="Numbers processed per run")
    work_delay_ms: float = Field(default=1.0, ge=0, description="Simulated work per item")
    max_workers: int = Field(default=32, gt=0)

    model_config = SettingsConfigDict(env_file=".env", env_prefix="OOP_LESSONS_")

    @field_validator("log_level", mode="before")
    @classmethod
    def normalise_log_level(cls, v: object) -> object:
        """Accept level names in any case (debug, Debug, DEBUG)."""
        return v.upper() if isinstance(v, str) else v

    @property
    def work_delay_seconds(self) -> float:
        """Per-item delay in seconds, as expected by time.sleep."""
        return self.work_delay_ms / 1000


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
