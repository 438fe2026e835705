"""
Operating system detection.
"""
import sys
import logging
from enum import Enum
from typing import Callable

from .config import get_platform_override

logger = logging.getLogger(__name__)


class OperatingSystem(str, Enum):
    WINDOWS = 'windows'
    MAC = 'mac'
    LINUX = 'linux'
    OTHER = 'other'

    def __str__(self) -> str:
        return self.value


PlatformDetector = Callable[[], OperatingSystem]

_ALIASES = {
    'windows': OperatingSystem.WINDOWS,
    'win32': OperatingSystem.WINDOWS,
    'cygwin': OperatingSystem.WINDOWS,
    'mac': OperatingSystem.MAC,
    'macos': OperatingSystem.MAC,
    'darwin': OperatingSystem.MAC,
    'linux': OperatingSystem.LINUX,
}


def platform_from_name(name: str) -> OperatingSystem:
    """Map a platform name (sys.platform style or enum value) to an OperatingSystem."""
    name = name.strip().lower()
    if name.startswith('linux'):
        return OperatingSystem.LINUX
    return _ALIASES.get(name, OperatingSystem.OTHER)


def get_local_platform() -> OperatingSystem:
    """Operating system family of the running interpreter."""
    override = get_platform_override()
    detected = platform_from_name(override if override else sys.platform)
    logger.debug(f"Local platform: {detected}")
    return detected
