"""Configuration for the Multikey key service."""

import logging
from typing import Any, Dict, FrozenSet, Iterable

from .key_types import Scheme, scheme_from_name

LOGGER = logging.getLogger(__name__)


class MultikeyConfig:
    """Configuration built from a flat settings dictionary."""

    DEFAULT_ENABLED_SCHEMES = tuple(scheme.value for scheme in Scheme)

    def __init__(self, settings: Dict[str, Any]):
        """Initialize Multikey configuration.

        Args:
            settings: Settings dictionary with ``multikey.*`` keys
        """
        self.settings = settings

        self.enabled_schemes = self._get_schemes(
            "multikey.enabled_schemes", self.DEFAULT_ENABLED_SCHEMES
        )
        self.include_private = self._get_bool("multikey.include_private", True)

        # Logging and debugging
        self.debug_mode = self._get_bool("multikey.debug_mode", False)
        self.log_conversions = self._get_bool("multikey.log_conversions", False)

        LOGGER.info(f"Multikey config initialized: {self.get_summary()}")

    def _get_bool(self, key: str, default: bool) -> bool:
        """Get boolean setting."""
        value = self.settings.get(key, default)
        if isinstance(value, str):
            return value.lower() in ("true", "1", "yes", "on")
        return bool(value)

    def _get_schemes(self, key: str, default: Iterable[str]) -> FrozenSet[Scheme]:
        """Get a set of schemes from a list or a comma-separated string."""
        value = self.settings.get(key, default)
        if isinstance(value, str):
            value = value.split(",")

        schemes = set()
        for name in value:
            if isinstance(name, Scheme):
                schemes.add(name)
                continue
            if not str(name).strip():
                continue
            try:
                schemes.add(scheme_from_name(str(name)))
            except ValueError as e:
                LOGGER.warning(f"Ignoring {key} entry: {e}")
        return frozenset(schemes)

    def is_scheme_enabled(self, scheme: Scheme) -> bool:
        """Check if a scheme may be converted by the key service."""
        return scheme in self.enabled_schemes

    @property
    def verbose(self) -> bool:
        """Whether each conversion should be logged."""
        return self.debug_mode or self.log_conversions

    def get_summary(self) -> str:
        """Get configuration summary."""
        schemes = ",".join(sorted(scheme.value for scheme in self.enabled_schemes))
        return (
            f"Schemes={schemes or 'none'}, "
            f"IncludePrivate={self.include_private}, "
            f"Debug={self.debug_mode}"
        )
