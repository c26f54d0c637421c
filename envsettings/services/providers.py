"""
Value providers for the settings registry.

The registry reads raw values through two narrow interfaces:
- PlainValueProvider: ordinary environment-sourced values
- SecretValueProvider: secret-sourced values

Each has a single lookup(name) -> Optional[str] method. Lookups may raise;
the resolution engine lets those errors propagate.
"""

import os
from abc import ABC, abstractmethod
from typing import Callable, Mapping, Optional

LookupFunc = Callable[[str], Optional[str]]


class ValueProvider(ABC):
    """Abstract base class for anything that can look up a setting by name."""

    @abstractmethod
    def lookup(self, name: str) -> Optional[str]:
        """
        Look up the raw value for a setting.

        Args:
            name: Symbolic setting name

        Returns:
            The raw string value, or None if not present
        """
        pass


class PlainValueProvider(ValueProvider):
    """Provider for plain (non-secret) values."""


class SecretValueProvider(ValueProvider):
    """Provider for secret values."""


# =============================================================================
# Environment-backed providers
# =============================================================================

class EnvironmentVariableProvider(PlainValueProvider):
    """Reads plain values from the process environment."""

    def lookup(self, name: str) -> Optional[str]:
        return os.environ.get(name)


class EnvironmentSecretProvider(SecretValueProvider):
    """
    Reads secrets from the process environment.

    Secret stores are usually projected into the environment by the platform
    (Kubernetes secrets, Docker env files), so this is the default secret channel.
    """

    def lookup(self, name: str) -> Optional[str]:
        return os.environ.get(name)


# =============================================================================
# Adapters
# =============================================================================

class CallableValueProvider(PlainValueProvider):
    """Adapts a plain function to the PlainValueProvider interface."""

    def __init__(self, func: LookupFunc):
        self._func = func

    def lookup(self, name: str) -> Optional[str]:
        return self._func(name)


class CallableSecretProvider(SecretValueProvider):
    """Adapts a plain function to the SecretValueProvider interface."""

    def __init__(self, func: LookupFunc):
        self._func = func

    def lookup(self, name: str) -> Optional[str]:
        return self._func(name)


class MappingValueProvider(PlainValueProvider):
    """Plain provider backed by a dict. Handy for tests and embedding."""

    def __init__(self, values: Optional[Mapping[str, str]] = None):
        self.values = dict(values or {})

    def lookup(self, name: str) -> Optional[str]:
        return self.values.get(name)


class MappingSecretProvider(SecretValueProvider):
    """Secret provider backed by a dict."""

    def __init__(self, values: Optional[Mapping[str, str]] = None):
        self.values = dict(values or {})

    def lookup(self, name: str) -> Optional[str]:
        return self.values.get(name)

    def __repr__(self) -> str:
        return f"MappingSecretProvider(names={sorted(self.values)!r})"
