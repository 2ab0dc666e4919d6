"""Pydantic configuration models for Contrario."""

from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, field_validator, model_validator


class PathsConfig(BaseModel):
    """File paths configuration."""

    data_db: Path = Path("~/.contrario/contrario.db")
    facts_file: Optional[Path] = None  # None = bundled facts
    log_file: Optional[Path] = None

    @model_validator(mode="after")
    def expand_paths(self):
        """Expand ~ in all paths."""
        self.data_db = self.data_db.expanduser()
        if self.facts_file is not None:
            self.facts_file = self.facts_file.expanduser()
        if self.log_file is not None:
            self.log_file = self.log_file.expanduser()
        return self


class NewsConfig(BaseModel):
    """Hacker News client configuration."""

    api_base: str = "https://hacker-news.firebaseio.com/v0"
    batch_size: int = Field(default=10, ge=1)
    default_limit: int = Field(default=30, ge=1)
    comment_limit: int = Field(default=20, ge=1)
    timeout: float = 30.0
    user_agent: str = "Contrario/1.0"

    @field_validator("api_base")
    @classmethod
    def validate_api_base(cls, v: str) -> str:
        if not v.startswith(("http://", "https://")):
            raise ValueError(f"api_base must be an http(s) URL, got {v}")
        return v.rstrip("/")


class JourneyConfig(BaseModel):
    """Gamification tuning."""

    weekly_goal: int = Field(default=21, ge=1)


class RetryConfig(BaseModel):
    """Retry/backoff configuration."""

    max_attempts: int = Field(default=3, ge=1)
    min_wait: float = 2.0
    max_wait: float = 10.0


VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "INFO"
    json_mode: bool = False

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        v_upper = v.upper()
        if v_upper not in VALID_LOG_LEVELS:
            raise ValueError(f"Invalid log level: {v}. Must be one of {VALID_LOG_LEVELS}")
        return v_upper


class ContrarioConfig(BaseModel):
    """Main configuration model."""

    paths: PathsConfig = Field(default_factory=PathsConfig)
    news: NewsConfig = Field(default_factory=NewsConfig)
    journey: JourneyConfig = Field(default_factory=JourneyConfig)
    retry: RetryConfig = Field(default_factory=RetryConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @classmethod
    def from_dict(cls, data: dict) -> "ContrarioConfig":
        return cls.model_validate(data)
