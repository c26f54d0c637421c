"""
Resolution Engine

Turns a batch of SettingDeclarations into ResolvedEntries committed to a
ResolutionStore.

Per batch:
1. Classify the environment once (local or not)
2. For each declaration, in order:
   a. Read the raw value from the provider matching its source kind
   b. Pick the effective value (raw, else default, unless a LOCAL_ONLY
      default is suppressed outside local contexts)
   c. Fail with MissingRequiredSetting if required and raw is absent
   d. Commit the entry

Failure is fail-fast with partial commit: entries before the failing
declaration remain in the store, the failing one and later ones do not.
"""

from typing import Iterable, List, Optional, Tuple

from envsettings.config.secrets import format_safe_dump
from envsettings.config.settings import RegistryConfig, get_config
from envsettings.config.store import ResolutionStore
from envsettings.errors import MissingRequiredSetting
from envsettings.models import (
    ResolvedEntry,
    SettingDeclaration,
    SourceKind,
    ValueSource,
    is_blank,
)
from envsettings.services.providers import PlainValueProvider, SecretValueProvider
from envsettings.utils.environment import EnvironmentClassifier
from envsettings.utils.logging import get_logger

logger = get_logger(__name__, prefix="Resolver")


class ResolutionEngine:
    """
    Resolves declaration batches against the plain and secret providers.

    Provider errors raised during resolution propagate unchanged; only the
    environment classifier swallows them.
    """

    def __init__(
        self,
        store: ResolutionStore,
        plain_provider: PlainValueProvider,
        secret_provider: SecretValueProvider,
        config: Optional[RegistryConfig] = None,
        classifier: Optional[EnvironmentClassifier] = None,
    ):
        self._store = store
        self._plain_provider = plain_provider
        self._secret_provider = secret_provider
        self._config = config or get_config()
        self._classifier = classifier or EnvironmentClassifier(plain_provider, self._config)

    @property
    def store(self) -> ResolutionStore:
        return self._store

    @property
    def classifier(self) -> EnvironmentClassifier:
        return self._classifier

    def resolve(self, declarations: Iterable[SettingDeclaration]) -> List[ResolvedEntry]:
        """
        Resolve a batch of declarations into the store.

        Args:
            declarations: Ordered declarations for one batch

        Returns:
            Entries committed by this batch, in input order

        Raises:
            MissingRequiredSetting: a required declaration has no provider value
            DuplicateSetting: a name is already in the store (policy "error")
        """
        is_local = self._classifier.is_local()
        committed: List[ResolvedEntry] = []

        for declaration in declarations:
            entry = self._resolve_one(declaration, is_local)
            self._store.commit(entry)
            committed.append(entry)

        logger.info(f"Resolved {len(committed)} settings (local={is_local})")

        if self._config.log_safe_dump and committed:
            logger.info(f"Settings:\n{format_safe_dump(committed)}")

        return committed

    def _resolve_one(self, declaration: SettingDeclaration, is_local: bool) -> ResolvedEntry:
        raw = self._lookup(declaration)
        if is_blank(raw):
            raw = None

        value, source = self._effective_value(declaration, raw, is_local)

        # Required-ness looks only at the provider value, never at defaults
        if declaration.throw_if_not_set and raw is None:
            raise MissingRequiredSetting(declaration.name)

        logger.debug(f"{declaration.name}: {source.value}")

        return ResolvedEntry(
            name=declaration.name,
            value=value,
            declaration=declaration,
            source=source,
        )

    def _lookup(self, declaration: SettingDeclaration) -> Optional[str]:
        if declaration.source_kind == SourceKind.SECRET:
            return self._secret_provider.lookup(declaration.name)
        return self._plain_provider.lookup(declaration.name)

    @staticmethod
    def _effective_value(
        declaration: SettingDeclaration,
        raw: Optional[str],
        is_local: bool,
    ) -> Tuple[Optional[str], ValueSource]:
        """
        Pick the value that wins for one declaration.

        Returns:
            Tuple of (value or None, where it came from)
        """
        if raw is not None:
            if declaration.source_kind == SourceKind.SECRET:
                return raw, ValueSource.SECRET_PROVIDER
            return raw, ValueSource.PLAIN_PROVIDER

        if is_blank(declaration.default_value):
            return None, ValueSource.NOT_FOUND

        if declaration.is_local_only and not is_local:
            return None, ValueSource.SUPPRESSED

        return declaration.default_value, ValueSource.DEFAULT
