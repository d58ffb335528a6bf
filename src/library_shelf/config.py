"""Configuration management for library-shelf.

Settings are read from the environment (``LIBRARY_SHELF_`` prefix) or a
``.env`` file and validated with pydantic-settings. Command-line flags in
the demo driver override them.
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ShelfConfig(BaseSettings):
    """Settings for the library-shelf demo driver."""

    model_config = SettingsConfigDict(
        env_prefix="LIBRARY_SHELF_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    library_name: str = Field(
        default="BCIT Digital Library",
        description="Name of the demonstration library",
    )

    librarian_name: str = Field(
        default="Alex",
        description="Name of the librarian giving recommendations",
    )

    log_level: str = Field(
        default="WARNING",
        description="Logging level (DEBUG, INFO, WARNING, ERROR)",
        pattern=r"^(DEBUG|INFO|WARNING|ERROR)$",
    )

    separator_width: int = Field(
        default=50,
        description="Width of the rule printed between demo sections",
        ge=1,
        le=200,
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Accept log levels in any case."""
        return v.upper() if isinstance(v, str) else v

    @field_validator("library_name", "librarian_name")
    @classmethod
    def validate_names(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Name must not be blank")
        return v

    @property
    def is_debug(self) -> bool:
        return self.log_level == "DEBUG"


class _ConfigStore:
    """Internal storage for configuration singleton."""

    _instance: ShelfConfig | None = None


def get_config() -> ShelfConfig:
    """Get or create the global configuration instance."""
    if _ConfigStore._instance is None:  # type: ignore[reportPrivateUsage]
        _ConfigStore._instance = ShelfConfig()  # type: ignore[reportPrivateUsage]
    return _ConfigStore._instance  # type: ignore[reportPrivateUsage]


def reset_config() -> None:
    """Reset configuration (useful for testing)."""
    _ConfigStore._instance = None  # type: ignore[reportPrivateUsage]
