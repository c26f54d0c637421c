"""
Configuration module - registry config, resolution store, and redaction.
"""

from .settings import (
    get_config,
    DuplicatePolicy,
    RegistryConfig,
)
from .store import ResolutionStore
from .secrets import (
    EMPTY_SUFFIX,
    NOT_WHITELISTED_TOKEN,
    SECRET_TOKEN,
    format_safe_dump,
    render_safe_value,
    safe_dict,
)
from .global_settings import GLOBAL_SETTINGS

__all__ = [
    # Registry config
    "get_config",
    "DuplicatePolicy",
    "RegistryConfig",
    # Store
    "ResolutionStore",
    # Redaction
    "EMPTY_SUFFIX",
    "NOT_WHITELISTED_TOKEN",
    "SECRET_TOKEN",
    "format_safe_dump",
    "render_safe_value",
    "safe_dict",
    # Bundled declarations
    "GLOBAL_SETTINGS",
]
