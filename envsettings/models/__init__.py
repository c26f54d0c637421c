"""Data models"""

from .setting import (
    EnvironmentScope,
    ResolvedEntry,
    SettingDeclaration,
    SourceKind,
    ValueSource,
    is_blank,
)

__all__ = [
    "EnvironmentScope",
    "ResolvedEntry",
    "SettingDeclaration",
    "SourceKind",
    "ValueSource",
    "is_blank",
]
