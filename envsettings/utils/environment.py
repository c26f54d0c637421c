"""
Environment classification.

Decides whether the process runs in a "local" (developer machine) context,
which controls whether LOCAL_ONLY defaults may apply.
"""

from typing import Optional

from envsettings.config.settings import RegistryConfig, get_config
from envsettings.models import is_blank
from envsettings.services.providers import PlainValueProvider
from envsettings.utils.logging import get_logger

logger = get_logger(__name__, prefix="Environment")


class EnvironmentClassifier:
    """
    Classifies the current environment by reading one well-known variable.

    Local when the variable is unset, blank, or equals the configured local
    marker (default "Development") after trimming. Case-sensitive.

    Usage:
        classifier = EnvironmentClassifier(EnvironmentVariableProvider())
        if classifier.is_local():
            ...

    Not cached: every call re-reads the provider.
    """

    def __init__(self, provider: PlainValueProvider, config: Optional[RegistryConfig] = None):
        self._provider = provider
        self._config = config or get_config()

    @property
    def variable_name(self) -> str:
        return self._config.environment_variable

    def is_local(self) -> bool:
        """
        Check whether the process runs in a local context.

        Never raises: a failing provider classifies as not local.
        """
        try:
            value = self._provider.lookup(self.variable_name)
            return is_blank(value) or value.strip() == self._config.local_environment_value
        except Exception as e:
            logger.debug(f"Could not read {self.variable_name}, treating as not local: {e}")
            return False

    def __repr__(self) -> str:
        return f"EnvironmentClassifier(variable={self.variable_name!r})"
