"""
EnvironmentSettings - typed settings registry

The public entry point. Owns a ResolutionStore and a ResolutionEngine and
exposes typed accessors over the resolved values.

Usage:
    from envsettings import EnvironmentSettings, SettingDeclaration

    DB_PORT = SettingDeclaration(name="DB_PORT", default_value="5432", should_log_value=True)

    settings = EnvironmentSettings()
    settings.add_settings([DB_PORT])

    settings.get_int(DB_PORT)               # 5432
    settings.get_string("DB_HOST", "db")    # "db" if DB_HOST not registered
    print(settings.dump_safe())             # DB_PORT=5432
"""

import re
from typing import Any, Dict, Iterable, List, Optional, Union

from envsettings.config.secrets import format_safe_dump, safe_dict
from envsettings.config.settings import RegistryConfig, get_config
from envsettings.config.store import ResolutionStore
from envsettings.errors import ParseError, SettingNotLoaded
from envsettings.models import ResolvedEntry, SettingDeclaration, is_blank
from envsettings.services.providers import (
    EnvironmentSecretProvider,
    EnvironmentVariableProvider,
    PlainValueProvider,
    SecretValueProvider,
)
from envsettings.services.resolver import ResolutionEngine
from envsettings.utils.logging import get_logger

logger = get_logger(__name__, prefix="Settings")

SettingKey = Union[str, SettingDeclaration]

# Distinguishes "no default given" from default=None
_MISSING: Any = object()

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")
_BOOL_VALUES = {"true": True, "false": False}


def _name_of(key: SettingKey) -> str:
    if isinstance(key, SettingDeclaration):
        return key.name
    return key


class EnvironmentSettings:
    """
    Typed settings registry.

    Settings are registered in batches with add_settings(). Each batch is
    resolved once against the providers and is immutable afterwards.

    Accessors take a setting name or the SettingDeclaration itself. Calling an
    accessor without a default raises SettingNotLoaded when the setting is
    unknown or blank; passing a default returns it instead. A default only
    replaces an absent value: a present value that fails to parse always
    raises ParseError.
    """

    def __init__(
        self,
        plain_provider: Optional[PlainValueProvider] = None,
        secret_provider: Optional[SecretValueProvider] = None,
        config: Optional[RegistryConfig] = None,
    ):
        self._config = config or get_config()
        self._plain_provider = plain_provider or EnvironmentVariableProvider()
        self._secret_provider = secret_provider or EnvironmentSecretProvider()
        self._store = ResolutionStore(self._config)
        self._engine = ResolutionEngine(
            store=self._store,
            plain_provider=self._plain_provider,
            secret_provider=self._secret_provider,
            config=self._config,
        )

    @property
    def store(self) -> ResolutionStore:
        return self._store

    # -------------------------------------------------------------------------
    # Registration
    # -------------------------------------------------------------------------

    def add_settings(self, declarations: Iterable[SettingDeclaration]) -> List[ResolvedEntry]:
        """
        Resolve and register a batch of settings.

        Args:
            declarations: Ordered declarations for this batch

        Returns:
            Entries committed by this batch

        Raises:
            MissingRequiredSetting: a required setting has no provider value.
                Settings earlier in the batch stay registered.
            DuplicateSetting: a name is already registered (policy "error")
        """
        return self._engine.resolve(declarations)

    def is_local(self) -> bool:
        """Check whether the process currently runs in a local context."""
        return self._engine.classifier.is_local()

    # -------------------------------------------------------------------------
    # Lookup
    # -------------------------------------------------------------------------

    def has_setting(self, key: SettingKey) -> bool:
        return _name_of(key) in self._store

    def get_entry(self, key: SettingKey) -> Optional[ResolvedEntry]:
        return self._store.get(_name_of(key))

    def names(self) -> List[str]:
        return self._store.names()

    def _raw(self, name: str) -> Optional[str]:
        entry = self._store.get(name)
        if entry is None or is_blank(entry.value):
            return None
        return entry.value

    # -------------------------------------------------------------------------
    # Typed accessors
    # -------------------------------------------------------------------------

    def get_string(self, key: SettingKey, default: Any = _MISSING) -> Optional[str]:
        """
        Get a setting as a string.

        Args:
            key: Setting name or declaration
            default: Returned when the setting is unknown or blank

        Raises:
            SettingNotLoaded: no default given and setting is unknown or blank
        """
        name = _name_of(key)
        value = self._raw(name)
        if value is None:
            if default is _MISSING:
                raise SettingNotLoaded(name)
            return default
        return value

    def get_int(self, key: SettingKey, default: Any = _MISSING) -> Optional[int]:
        """
        Get a setting as a base-10 integer.

        Raises:
            SettingNotLoaded: no default given and setting is unknown or blank
            ParseError: value is present but not an integer
        """
        name = _name_of(key)
        value = self._raw(name)
        if value is None:
            if default is _MISSING:
                raise SettingNotLoaded(name)
            return default

        text = value.strip()
        if not _INT_PATTERN.fullmatch(text):
            raise ParseError(name, "int")

        try:
            return int(text)
        except ValueError as e:
            # Digit strings over the interpreter's conversion limit
            raise ParseError(name, "int") from e

    def get_bool(self, key: SettingKey, default: Any = _MISSING) -> Optional[bool]:
        """
        Get a setting as a bool. Only "true" and "false" (any case) are accepted.

        Raises:
            SettingNotLoaded: no default given and setting is unknown or blank
            ParseError: value is present but not "true"/"false"
        """
        name = _name_of(key)
        value = self._raw(name)
        if value is None:
            if default is _MISSING:
                raise SettingNotLoaded(name)
            return default

        try:
            return _BOOL_VALUES[value.strip().lower()]
        except KeyError as e:
            raise ParseError(name, "bool") from e

    # -------------------------------------------------------------------------
    # Safe serialization
    # -------------------------------------------------------------------------

    def dump_safe(self) -> str:
        """
        Render all settings as NAME=value lines with secrets redacted.

        See envsettings.config.secrets.render_safe_value for the rules.
        """
        return format_safe_dump(self._store.values())

    def safe_dict(self) -> Dict[str, str]:
        """Redacted name -> value mapping, in registration order."""
        return safe_dict(self._store.values())

    def __len__(self) -> int:
        return len(self._store)

    def __contains__(self, key: SettingKey) -> bool:
        return self.has_setting(key)

    def __repr__(self) -> str:
        return f"EnvironmentSettings(names={self.names()!r})"
