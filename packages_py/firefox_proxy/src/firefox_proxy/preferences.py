"""
Typed access to already-loaded Firefox preferences.

Parsing prefs.js is left to the caller; anything that can hand over a
key/value mapping can back a DictPreferenceStore.
"""
import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Mapping, Optional

logger = logging.getLogger(__name__)


class PreferenceStore(ABC):
    """Read-only view over browser preferences."""

    @abstractmethod
    def get_string(self, key: str) -> str:
        """Value as a string, empty string when the key is absent."""
        pass

    @abstractmethod
    def get_int(self, key: str, default: int) -> int:
        """Value as an integer, default when absent or not numeric."""
        pass

    @abstractmethod
    def get_boolean(self, key: str, default: bool) -> bool:
        """Value as a boolean, default when absent."""
        pass


class DictPreferenceStore(PreferenceStore):
    """PreferenceStore backed by a plain mapping of raw preference values."""

    def __init__(self, values: Optional[Mapping[str, Any]] = None):
        self._values: Dict[str, Any] = dict(values or {})

    def __contains__(self, key: str) -> bool:
        return key in self._values

    def get_string(self, key: str) -> str:
        val = self._values.get(key)
        if val is None:
            return ""
        if isinstance(val, bool):
            return "true" if val else "false"
        return str(val)

    def get_int(self, key: str, default: int) -> int:
        val = self._values.get(key)
        if val is None or isinstance(val, bool):
            return default
        try:
            return int(str(val).strip())
        except (ValueError, TypeError):
            logger.debug(f"Preference '{key}' is not an integer ({val!r}), using default {default}")
            return default

    def get_boolean(self, key: str, default: bool) -> bool:
        val = self._values.get(key)
        if val is None:
            return default
        if isinstance(val, bool):
            return val
        if isinstance(val, str):
            text = val.strip().lower()
            if text in ("true", "1", "yes", "on"):
                return True
            if text in ("false", "0", "no", "off"):
                return False
            logger.debug(f"Preference '{key}' is not a boolean ({val!r}), using default {default}")
            return default
        if isinstance(val, int):
            return bool(val)

        return bool(val)
