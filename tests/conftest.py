"""
Pytest configuration and shared fixtures for envsettings tests.

This file provides common test fixtures used across unit and integration tests:
- Registry config fixtures (isolated from ENVSETTINGS_* in the real environment)
- Provider fixtures (in-memory and mocked)
- Declaration fixtures mirroring a typical service's settings
"""

from unittest.mock import MagicMock

import pytest

from envsettings import (
    EnvironmentScope,
    EnvironmentSettings,
    MappingSecretProvider,
    MappingValueProvider,
    PlainValueProvider,
    RegistryConfig,
    SecretValueProvider,
    SettingDeclaration,
    SourceKind,
)


# =============================================================================
# Config Fixtures
# =============================================================================

@pytest.fixture
def registry_config():
    """Registry config with explicit values so the host environment can't leak in."""
    return RegistryConfig(
        environment_variable="ENVIRONMENT",
        local_environment_value="Development",
        duplicate_policy="error",
        log_safe_dump=False,
    )


@pytest.fixture
def last_wins_config():
    return RegistryConfig(duplicate_policy="last_wins")


# =============================================================================
# Provider Fixtures
# =============================================================================

@pytest.fixture
def plain_values():
    """Mutable dict backing the plain provider. Defaults to a local environment."""
    return {"ENVIRONMENT": "Development"}


@pytest.fixture
def secret_values():
    return {}


@pytest.fixture
def plain_provider(plain_values):
    provider = MappingValueProvider()
    provider.values = plain_values
    return provider


@pytest.fixture
def secret_provider(secret_values):
    provider = MappingSecretProvider()
    provider.values = secret_values
    return provider


@pytest.fixture
def mock_plain_provider():
    """Mock plain provider; returns None for every name unless configured."""
    provider = MagicMock(spec=PlainValueProvider)
    provider.lookup.return_value = None
    return provider


@pytest.fixture
def mock_secret_provider():
    provider = MagicMock(spec=SecretValueProvider)
    provider.lookup.return_value = None
    return provider


@pytest.fixture
def env_settings(plain_provider, secret_provider, registry_config):
    """Empty registry wired to the in-memory providers."""
    return EnvironmentSettings(
        plain_provider=plain_provider,
        secret_provider=secret_provider,
        config=registry_config,
    )


# =============================================================================
# Declaration Fixtures
# =============================================================================

@pytest.fixture
def test_declarations():
    """A batch covering every combination of metadata the registry supports."""
    return [
        SettingDeclaration(name="SETTING_WITH_NO_METADATA"),
        SettingDeclaration(name="SOME_STRING_SETTING", default_value="some string", should_log_value=True),
        SettingDeclaration(name="SOME_INT_SETTING", default_value="42", should_log_value=True),
        SettingDeclaration(name="SOME_BOOL_SETTING_TRUE", default_value="true", should_log_value=True),
        SettingDeclaration(name="SOME_BOOL_SETTING_FALSE", default_value="false", should_log_value=True),
        SettingDeclaration(name="SETTING_WITH_NO_DEFAULT_VALUE", should_log_value=True),
        SettingDeclaration(
            name="SOME_SECRET_WITH_LOCAL_DEFAULT_ONLY",
            default_value="test_secret_local_only_default",
            source_kind=SourceKind.SECRET,
            environment_scope=EnvironmentScope.LOCAL_ONLY,
        ),
        SettingDeclaration(
            name="SOME_SECRET_WITH_ALL_ENVIRONMENTS_DEFAULT",
            default_value="test_secret_all_environment_default",
            source_kind=SourceKind.SECRET,
            environment_scope=EnvironmentScope.ALL_ENVIRONMENTS,
        ),
        SettingDeclaration(name="SOME_SECRET", source_kind=SourceKind.SECRET),
    ]


@pytest.fixture
def alt_declarations():
    """A second batch with names disjoint from test_declarations."""
    return [
        SettingDeclaration(name="SOME_STRING_SETTING_ALT", default_value="foo", should_log_value=True),
        SettingDeclaration(name="SOME_INT_SETTING_ALT", default_value="777", should_log_value=True),
    ]


@pytest.fixture
def required_declaration():
    return SettingDeclaration(name="DONT_START_APP_WITHOUT_ME", throw_if_not_set=True)


# =============================================================================
# Pytest Configuration
# =============================================================================

def pytest_configure(config):
    """Pytest configuration hook."""
    # Add custom markers
    config.addinivalue_line(
        "markers", "unit: mark test as a unit test"
    )
    config.addinivalue_line(
        "markers", "integration: mark test as an integration test"
    )
