from collections.abc import Sequence

from scanner_bridge.devices.base import BaseDeviceResolver
from scanner_bridge.devices.models import Device


class ChainedDeviceResolver(BaseDeviceResolver):
    """Tries resolvers in priority order and stops at the first hit."""

    def __init__(self, resolvers: Sequence[BaseDeviceResolver]) -> None:
        self._resolvers = list(resolvers)

    @property
    def resolvers(self) -> list[BaseDeviceResolver]:
        return list(self._resolvers)

    def resolve(self) -> Device | None:
        for resolver in self._resolvers:
            device = resolver.resolve()
            if device is not None:
                return device
        return None
