"""Configuration management for the validation engine.

This module handles environment-based configuration using Pydantic Settings.
Every setting can be overridden with a ``SYNTAXE_``-prefixed environment
variable.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

class EngineSettings(BaseSettings):
    """Validation engine configuration."""

    model_config = SettingsConfigDict(env_prefix="SYNTAXE_", case_sensitive=False)

    # Environment
    environment: Literal["development", "testing", "production"] = Field(
        default="development", description="Application environment"
    )

    # Logging
    log_level: str = Field(default="WARNING", description="Log level")
    json_logs: bool = Field(default=False, description="Enable JSON formatted logs")

    # Engine behaviour
    autoload_builtins: bool = Field(
        default=True,
        description="Register the built-in validators and encoders in the default registry",
    )
    fault_prefix: str = Field(
        default="Exception while validating: ",
        description="Prefix of the finding reported when a validator faults",
    )

@lru_cache(maxsize=1)
def get_settings() -> EngineSettings:
    """Return the process-wide settings, read from the environment once."""
    return EngineSettings()
