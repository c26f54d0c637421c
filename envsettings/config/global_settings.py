"""
Common settings shared by most services.

Register with:
    settings.add_settings(GLOBAL_SETTINGS)

Postgres connection values default to a local database only on developer
machines; deployed environments must provide them.
"""

from typing import Tuple

from envsettings.models import EnvironmentScope, SettingDeclaration

ENVIRONMENT = SettingDeclaration(name="ENVIRONMENT", should_log_value=True)

POSTGRES_HOST = SettingDeclaration(
    name="POSTGRES_HOST",
    default_value="localhost",
    environment_scope=EnvironmentScope.LOCAL_ONLY,
    should_log_value=True,
)

POSTGRES_PORT = SettingDeclaration(
    name="POSTGRES_PORT",
    default_value="5432",
    environment_scope=EnvironmentScope.LOCAL_ONLY,
    should_log_value=True,
)

POSTGRES_USER = SettingDeclaration(
    name="POSTGRES_USER",
    default_value="postgres",
    environment_scope=EnvironmentScope.LOCAL_ONLY,
)

# Plain source but not whitelisted for logging
POSTGRES_PASSWORD = SettingDeclaration(
    name="POSTGRES_PASSWORD",
    default_value="super_secret",
    environment_scope=EnvironmentScope.LOCAL_ONLY,
)

DB_NAME = SettingDeclaration(
    name="DB_NAME",
    default_value="some_db",
    should_log_value=True,
)

GLOBAL_SETTINGS: Tuple[SettingDeclaration, ...] = (
    ENVIRONMENT,
    POSTGRES_HOST,
    POSTGRES_PORT,
    POSTGRES_USER,
    POSTGRES_PASSWORD,
    DB_NAME,
)
