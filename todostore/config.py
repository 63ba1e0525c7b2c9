"""Configuration management using pydantic settings."""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings

Backend = Literal["sqlite", "zodb"]


class StorageConfig(BaseModel):
    """Storage locations for both backends."""

    data_dir: Path = Field(default=Path("data"))
    sqlite_filename: str = Field(default="todos_secure.db", min_length=1)
    zodb_filename: str = Field(default="todos.fs", min_length=1)

    @property
    def sqlite_path(self) -> Path:
        return self.data_dir / self.sqlite_filename

    @property
    def zodb_path(self) -> Path:
        return self.data_dir / self.zodb_filename

    def path_for(self, backend: str) -> Path:
        """Return the file a backend stores its data in."""
        if backend == "sqlite":
            return self.sqlite_path
        if backend == "zodb":
            return self.zodb_path
        raise ValueError(f"Unknown backend '{backend}'")


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(default="INFO")
    log_dir: Path = Field(default=Path("logs"))
    json_format: bool = Field(default=False)
    # Console output shares the terminal with the screens
    console_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(default="WARNING")


class CompareConfig(BaseModel):
    """Storage comparison workload."""

    count: int = Field(
        default=500,
        ge=1,
        le=100_000,
        description="Number of todos inserted, updated and deleted per backend",
    )


class Settings(BaseSettings):
    """Application settings."""

    # Backend used by one-shot commands and the first screen
    backend: Backend = Field(default="sqlite")
    storage: StorageConfig = Field(default_factory=StorageConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    compare: CompareConfig = Field(default_factory=CompareConfig)

    model_config = {
        "env_prefix": "TODOSTORE_",
        "env_nested_delimiter": "__",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


def load_settings() -> Settings:
    """Load settings from environment variables."""
    return Settings()
