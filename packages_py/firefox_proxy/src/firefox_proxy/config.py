"""
Environment overrides.
"""
import os
import logging
from typing import Optional

from .constants import PLATFORM_ENV_VAR, PAC_TIMEOUT_ENV_VAR, DEFAULT_PAC_TIMEOUT

logger = logging.getLogger(__name__)

def get_platform_override() -> Optional[str]:
    """Platform name forced through FIREFOX_PROXY_PLATFORM, if any."""
    value = os.getenv(PLATFORM_ENV_VAR, "").strip().lower()
    if value:
        logger.debug(f"Resolved {PLATFORM_ENV_VAR}: {value}")
        return value
    return None

def get_pac_timeout(default: float = DEFAULT_PAC_TIMEOUT) -> float:
    """PAC download timeout in seconds."""
    raw = os.getenv(PAC_TIMEOUT_ENV_VAR)
    if raw is None:
        return default
    try:
        return float(raw)
    except ValueError:
        logger.debug(f"Ignoring invalid {PAC_TIMEOUT_ENV_VAR}: {raw!r}")
        return default
