"""
envsettings Registry Configuration
Loads the registry's own knobs from ENVSETTINGS_* environment variables
"""

from enum import Enum
from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class DuplicatePolicy(str, Enum):
    """What to do when a setting name is registered twice."""
    ERROR = "error"            # Raise DuplicateSetting
    LAST_WINS = "last_wins"    # Replace the earlier entry


class RegistryConfig(BaseSettings):
    """Registry behaviour loaded from environment."""

    model_config = SettingsConfigDict(env_prefix="ENVSETTINGS_", case_sensitive=False)

    # Environment classification
    environment_variable: str = "ENVIRONMENT"
    local_environment_value: str = "Development"

    # Resolution
    duplicate_policy: DuplicatePolicy = DuplicatePolicy.ERROR

    # Logging
    log_safe_dump: bool = False
    log_level: str = "WARNING"

    @field_validator("environment_variable")
    @classmethod
    def validate_environment_variable(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("environment_variable must not be blank")
        return v

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        return v.strip().upper()


@lru_cache()
def get_config() -> RegistryConfig:
    """Get cached registry configuration."""
    return RegistryConfig()
