"""Shared base class for settings modules."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class ClientSettingsBase(BaseSettings):
    """Base class for client settings.

    All settings classes should inherit from this class to ensure
    consistent configuration behavior (env file loading, case sensitivity,
    construction by field name).
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
        populate_by_name=True,
    )
