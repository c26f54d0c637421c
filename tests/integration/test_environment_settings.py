"""
Integration tests for EnvironmentSettings against the real process environment.

These use the default providers (os.environ) and monkeypatch to control
the environment, verifying the complete flow:
1. Declare settings
2. Register them with add_settings()
3. Read typed values and the safe dump
"""

import pytest

from envsettings import (
    GLOBAL_SETTINGS,
    EnvironmentSettings,
    MissingRequiredSetting,
    RegistryConfig,
    SettingDeclaration,
    SettingNotLoaded,
    SourceKind,
)
from envsettings.config.global_settings import POSTGRES_HOST, POSTGRES_PORT


@pytest.fixture
def clean_env(monkeypatch):
    """Remove every variable the global settings read."""
    for declaration in GLOBAL_SETTINGS:
        monkeypatch.delenv(declaration.name, raising=False)
    return monkeypatch


@pytest.mark.integration
class TestEnvironmentSettingsFromOsEnviron:
    """Default providers read os.environ."""

    def test_global_settings_local_defaults(self, clean_env, registry_config):
        settings = EnvironmentSettings(config=registry_config)
        settings.add_settings(GLOBAL_SETTINGS)

        assert settings.is_local() is True
        assert settings.get_string(POSTGRES_HOST) == "localhost"
        assert settings.get_int(POSTGRES_PORT) == 5432
        assert settings.get_string("DB_NAME") == "some_db"

        dump = settings.dump_safe()
        assert "POSTGRES_HOST=localhost\n" in dump
        assert "POSTGRES_USER=not-whitelisted\n" in dump
        assert "POSTGRES_PASSWORD=not-whitelisted\n" in dump
        assert "super_secret" not in dump
        assert "ENVIRONMENT=\n" in dump

    def test_global_settings_in_production(self, clean_env, registry_config):
        clean_env.setenv("ENVIRONMENT", "Production")
        clean_env.setenv("POSTGRES_HOST", "db.prod.internal")

        settings = EnvironmentSettings(config=registry_config)
        settings.add_settings(GLOBAL_SETTINGS)

        assert settings.is_local() is False
        assert settings.get_string(POSTGRES_HOST) == "db.prod.internal"
        assert settings.get_int(POSTGRES_PORT, 6543) == 6543
        with pytest.raises(SettingNotLoaded):
            settings.get_string("POSTGRES_PASSWORD")
        assert settings.get_string("DB_NAME") == "some_db"

        dump = settings.dump_safe()
        assert "ENVIRONMENT=Production\n" in dump
        assert "POSTGRES_PASSWORD=not-whitelisted - empty\n" in dump

    def test_secret_read_from_environment(self, clean_env, registry_config):
        clean_env.setenv("SERVICE_TOKEN", "tok-123")

        settings = EnvironmentSettings(config=registry_config)
        settings.add_settings([SettingDeclaration(name="SERVICE_TOKEN", source_kind=SourceKind.SECRET)])

        assert settings.get_string("SERVICE_TOKEN") == "tok-123"
        assert settings.dump_safe() == "SERVICE_TOKEN=secret\n"

    def test_required_setting_missing_from_environment(self, clean_env, registry_config):
        clean_env.delenv("DONT_START_APP_WITHOUT_ME", raising=False)
        settings = EnvironmentSettings(config=registry_config)

        with pytest.raises(MissingRequiredSetting, match="DONT_START_APP_WITHOUT_ME"):
            settings.add_settings([SettingDeclaration(name="DONT_START_APP_WITHOUT_ME", throw_if_not_set=True)])

    def test_custom_environment_variable(self, clean_env):
        clean_env.setenv("APP_ENV", "Development")
        clean_env.setenv("ENVIRONMENT", "Production")
        config = RegistryConfig(environment_variable="APP_ENV")

        settings = EnvironmentSettings(config=config)
        settings.add_settings(GLOBAL_SETTINGS)

        assert settings.is_local() is True
        assert settings.get_string(POSTGRES_HOST) == "localhost"
