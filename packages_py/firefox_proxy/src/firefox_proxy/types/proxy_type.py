from enum import IntEnum

from ..errors import UnsupportedProxyTypeError


class FirefoxProxyType(IntEnum):
    """Values of the network.proxy.type preference."""
    NONE = 0
    MANUAL = 1
    PAC = 2
    SYSTEM = 5

    @classmethod
    def from_config_value(cls, value: int) -> "FirefoxProxyType":
        # 4 (auto-detect / WPAD) is a valid Firefox value but has no strategy here
        try:
            return cls(value)
        except ValueError:
            raise UnsupportedProxyTypeError(value)
