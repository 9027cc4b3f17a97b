"""Application configuration using Pydantic Settings."""

from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    """Application settings, configurable via environment variables or .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Paths
    data_dir: Path = Path("data")
    seed_file: Path | None = None  # JSON entries imported into an empty database

    # Logging
    log_level: LogLevel = "INFO"
    log_file_enabled: bool = False
    log_file_path: Path | None = None
    log_file_max_bytes: int = 10 * 1024 * 1024  # 10 MB
    log_file_backup_count: int = 5

    @property
    def resolved_log_file_path(self) -> Path:
        """Return log file path, defaulting to data_dir/wordlookup.log if not set."""
        return self.log_file_path or self.data_dir / "wordlookup.log"

    @property
    def db_path(self) -> Path:
        return self.data_dir / "words.db"

    # Dictionary service
    dictionary_host: str = "127.0.0.1"
    dictionary_port: int = 9091

    # Aggregator service
    aggregator_host: str = "127.0.0.1"
    aggregator_port: int = 9090
    dictionary_service_url: str = "http://localhost:9091"
    request_timeout: float = 10.0  # seconds per call to the dictionary service


settings = Settings()
