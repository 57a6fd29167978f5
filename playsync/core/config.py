"""Configuration settings for playsync.

Values are read from environment variables prefixed with ``PLAYSYNC_`` and
from an optional ``.env`` file in the working directory.
"""

from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime settings.

    MAX_CONCURRENT_TASKS and HTTP_TIMEOUT_SECONDS default to None: every
    per-library task runs at once and no request ever times out.
    """

    model_config = SettingsConfigDict(
        env_prefix="PLAYSYNC_", env_file=".env", extra="ignore", case_sensitive=True
    )

    # Repository
    REPOSITORY_URL: str = Field(
        default="https://mvnrepository.com/artifact/com.google.android.gms",
        description="Root listing page of the Maven group to sync",
    )
    REPOSITORY_NAME: str = Field(
        default="google", description="Value of the ?repo= query used on library pages"
    )
    ARCHIVE_EXTENSION: str = Field(default="aar", description="Archive file type to vendor")
    MAX_LISTING_PAGES: int = Field(default=50, ge=1)

    # Library policy
    LIBRARY_PREFIX: str = "play-"
    LICENSE_SUFFIX: str = "license"

    # Filesystem
    DESTINATION_DIR: Path = Path("android/lib")
    LOCKFILE_PATH: Path = Path("libraries-lock.json")

    # Execution
    MAX_CONCURRENT_TASKS: Optional[int] = Field(
        default=None, description="Cap on concurrent per-library tasks (None = unbounded)"
    )
    HTTP_TIMEOUT_SECONDS: Optional[float] = None
    USER_AGENT: str = "playsync/0.1"
    INTEGRITY_ALGORITHM: str = "sha512"
    THREAD_POOL_SIZE: int = 8

    LOG_LEVEL: str = "INFO"

    @field_validator("MAX_CONCURRENT_TASKS")
    @classmethod
    def _validate_concurrency(cls, value: Optional[int]) -> Optional[int]:
        if value is not None and value < 1:
            raise ValueError("MAX_CONCURRENT_TASKS must be positive or unset")
        return value

    @field_validator("INTEGRITY_ALGORITHM")
    @classmethod
    def _validate_algorithm(cls, value: str) -> str:
        value = value.lower()
        if value not in ("sha1", "sha256", "sha384", "sha512"):
            raise ValueError(f"Unsupported integrity algorithm: {value}")
        return value


settings = Settings()
