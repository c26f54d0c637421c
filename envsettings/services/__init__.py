"""
Services Layer - Public API

Quick Reference:
    from envsettings.services import EnvironmentSettings, MappingValueProvider
"""

from envsettings.services.providers import (
    CallableSecretProvider,
    CallableValueProvider,
    EnvironmentSecretProvider,
    EnvironmentVariableProvider,
    MappingSecretProvider,
    MappingValueProvider,
    PlainValueProvider,
    SecretValueProvider,
    ValueProvider,
)
from envsettings.services.resolver import ResolutionEngine
from envsettings.services.environment_settings import EnvironmentSettings

__all__ = [
    # Providers
    "ValueProvider",
    "PlainValueProvider",
    "SecretValueProvider",
    "EnvironmentVariableProvider",
    "EnvironmentSecretProvider",
    "CallableValueProvider",
    "CallableSecretProvider",
    "MappingValueProvider",
    "MappingSecretProvider",
    # Resolution
    "ResolutionEngine",
    "EnvironmentSettings",
]
