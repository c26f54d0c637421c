"""
Redaction utilities for safe settings dumps.

Single source of truth for how a resolved setting is rendered in logs.

This module provides:
- SECRET_TOKEN / NOT_WHITELISTED_TOKEN / EMPTY_SUFFIX: literal tokens used in dumps
- render_safe_value(): redacted rendering of one resolved entry
- safe_dict(): redacted name -> value mapping for a set of entries
- format_safe_dump(): NAME=value lines for a set of entries
"""

from typing import Dict, Iterable

from envsettings.models import ResolvedEntry, is_blank

SECRET_TOKEN = "secret"
NOT_WHITELISTED_TOKEN = "not-whitelisted"
EMPTY_SUFFIX = " - empty"


def render_safe_value(entry: ResolvedEntry) -> str:
    """
    Render an entry's value for logging.

    Rules:
        - Secret: "secret", plus " - empty" if the value is blank. Never the value.
        - Plain, loggable: the value verbatim ("" when absent, no suffix)
        - Plain, not loggable: "not-whitelisted", plus " - empty" if the value is blank

    Args:
        entry: Resolved entry to render

    Returns:
        Redacted string safe to log
    """
    declaration = entry.declaration
    empty = is_blank(entry.value)

    if declaration.is_secret:
        return SECRET_TOKEN + EMPTY_SUFFIX if empty else SECRET_TOKEN

    if declaration.should_log_value:
        return entry.value or ""

    return NOT_WHITELISTED_TOKEN + EMPTY_SUFFIX if empty else NOT_WHITELISTED_TOKEN


def safe_dict(entries: Iterable[ResolvedEntry]) -> Dict[str, str]:
    """Map each entry name to its redacted value, preserving order."""
    return {entry.name: render_safe_value(entry) for entry in entries}


def format_safe_dump(entries: Iterable[ResolvedEntry]) -> str:
    """Render entries as newline-terminated NAME=value lines."""
    return "".join(f"{entry.name}={render_safe_value(entry)}\n" for entry in entries)
