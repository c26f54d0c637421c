"""
Resolution Store - holds resolved settings by name

Handles:
- Insertion-ordered storage of ResolvedEntry objects
- Duplicate detection (error or last-wins, per RegistryConfig.duplicate_policy)
- Read-only Mapping access for accessors and safe dumps

Only the resolution engine commits entries. Precondition: at most one
resolution batch in flight per store instance; there is no internal locking.
"""

from collections.abc import Mapping
from typing import Dict, Iterator, List, Optional

from envsettings.config.settings import DuplicatePolicy, RegistryConfig, get_config
from envsettings.errors import DuplicateSetting
from envsettings.models import ResolvedEntry
from envsettings.utils.logging import get_logger

logger = get_logger(__name__, prefix="Store")


class ResolutionStore(Mapping):
    """Mapping of setting name to ResolvedEntry, in insertion order."""

    def __init__(self, config: Optional[RegistryConfig] = None):
        self._config = config or get_config()
        self._entries: Dict[str, ResolvedEntry] = {}

    @property
    def duplicate_policy(self) -> DuplicatePolicy:
        return self._config.duplicate_policy

    def commit(self, entry: ResolvedEntry) -> None:
        """
        Add a resolved entry to the store.

        Args:
            entry: Entry produced by the resolution engine

        Raises:
            DuplicateSetting: name already present and policy is "error"
        """
        if entry.name in self._entries:
            if self.duplicate_policy == DuplicatePolicy.ERROR:
                raise DuplicateSetting(entry.name)
            logger.warning(f"Setting {entry.name} registered again, replacing earlier entry")

        # Replacing an existing key keeps its original position
        self._entries[entry.name] = entry

    def __getitem__(self, name: str) -> ResolvedEntry:
        return self._entries[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def names(self) -> List[str]:
        return list(self._entries)

    def __repr__(self) -> str:
        return f"ResolutionStore(names={self.names()!r})"
