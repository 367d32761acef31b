"""
Application Configuration

Settings are read from ``MERGE_MY_GPX_*`` environment variables.
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from merge_my_gpx import __version__


class Settings(BaseSettings):
    """Runtime settings shared by the CLI and the MCP server."""

    model_config = SettingsConfigDict(env_prefix="MERGE_MY_GPX_")

    log_level: str = Field(default="INFO", description="Logging level")
    creator: str = Field(
        default=f"merge-my-gpx v{__version__}",
        description="Value written to the creator attribute of every saved GPX file",
    )


@lru_cache
def get_settings() -> Settings:
    return Settings()
