"""
envsettings - typed settings registry for environment variables and secrets.
"""

from envsettings.config import (
    GLOBAL_SETTINGS,
    DuplicatePolicy,
    RegistryConfig,
    ResolutionStore,
    get_config,
)
from envsettings.errors import (
    DuplicateSetting,
    MissingRequiredSetting,
    ParseError,
    SettingNotLoaded,
    SettingsError,
)
from envsettings.models import (
    EnvironmentScope,
    ResolvedEntry,
    SettingDeclaration,
    SourceKind,
    ValueSource,
)
from envsettings.services import (
    CallableSecretProvider,
    CallableValueProvider,
    EnvironmentSecretProvider,
    EnvironmentSettings,
    EnvironmentVariableProvider,
    MappingSecretProvider,
    MappingValueProvider,
    PlainValueProvider,
    ResolutionEngine,
    SecretValueProvider,
)
from envsettings.utils.environment import EnvironmentClassifier
from envsettings.utils.logging import configure_logging, get_logger

__version__ = "0.1.0"

__all__ = [
    "EnvironmentSettings",
    "SettingDeclaration",
    "ResolvedEntry",
    "SourceKind",
    "EnvironmentScope",
    "ValueSource",
    "ResolutionEngine",
    "ResolutionStore",
    "EnvironmentClassifier",
    # Providers
    "PlainValueProvider",
    "SecretValueProvider",
    "EnvironmentVariableProvider",
    "EnvironmentSecretProvider",
    "CallableValueProvider",
    "CallableSecretProvider",
    "MappingValueProvider",
    "MappingSecretProvider",
    # Errors
    "SettingsError",
    "MissingRequiredSetting",
    "SettingNotLoaded",
    "ParseError",
    "DuplicateSetting",
    # Config
    "RegistryConfig",
    "DuplicatePolicy",
    "get_config",
    "GLOBAL_SETTINGS",
    # Logging
    "configure_logging",
    "get_logger",
]
