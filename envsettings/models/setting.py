"""
Setting Declaration and Resolved Entry Models

Core concepts:
- SettingDeclaration: static metadata for one setting name (default, source, scope, flags)
- ResolvedEntry: the value a declaration resolved to in the current process environment
"""

from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class SourceKind(str, Enum):
    """Which provider channel a setting is read from."""
    PLAIN = "plain"      # Plain environment variable
    SECRET = "secret"    # Secret store (never rendered in safe dumps)


class EnvironmentScope(str, Enum):
    """Where a declared default value is allowed to apply."""
    ALL_ENVIRONMENTS = "all_environments"
    LOCAL_ONLY = "local_only"    # Default suppressed outside local contexts


class ValueSource(str, Enum):
    """Where a resolved value came from."""
    PLAIN_PROVIDER = "plain_provider"
    SECRET_PROVIDER = "secret_provider"
    DEFAULT = "default"
    SUPPRESSED = "suppressed"    # Local-only default withheld outside local contexts
    NOT_FOUND = "not_found"


def is_blank(value: Optional[str]) -> bool:
    """True if value is None, empty, or whitespace only."""
    return value is None or not value.strip()


class SettingDeclaration(BaseModel):
    """
    Metadata describing one setting.

    Defaults give a plain, unscoped, unlogged, optional setting with no default value.
    """
    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Symbolic setting name (e.g., 'POSTGRES_HOST')")
    default_value: str = Field(default="", description="Fallback value; empty means no default")
    source_kind: SourceKind = Field(default=SourceKind.PLAIN, description="Provider channel to read from")
    environment_scope: EnvironmentScope = Field(
        default=EnvironmentScope.ALL_ENVIRONMENTS,
        description="Whether the default applies everywhere or only in local contexts"
    )
    should_log_value: bool = Field(default=False, description="Whether safe dumps may show the value")
    throw_if_not_set: bool = Field(default=False, description="Fail registration when no provider value exists")

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        if is_blank(v):
            raise ValueError("Setting name must not be blank")
        return v

    @property
    def is_secret(self) -> bool:
        return self.source_kind == SourceKind.SECRET

    @property
    def is_local_only(self) -> bool:
        return self.environment_scope == EnvironmentScope.LOCAL_ONLY

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dict for diagnostics."""
        return {
            "name": self.name,
            "default_value": "" if self.is_secret and self.default_value else self.default_value,
            "source_kind": self.source_kind.value,
            "environment_scope": self.environment_scope.value,
            "should_log_value": self.should_log_value,
            "throw_if_not_set": self.throw_if_not_set,
        }


class ResolvedEntry(BaseModel):
    """Result of resolving a single declaration. Immutable once created."""
    model_config = ConfigDict(frozen=True)

    name: str
    value: Optional[str] = None                 # None means absent
    declaration: SettingDeclaration
    source: ValueSource = ValueSource.NOT_FOUND

    @property
    def is_set(self) -> bool:
        return not is_blank(self.value)
