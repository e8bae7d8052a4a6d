from typing import ClassVar

from scanner_bridge.config.settings import Settings
from scanner_bridge.devices.base import BaseDeviceResolver
from scanner_bridge.devices.chain import ChainedDeviceResolver
from scanner_bridge.devices.naps2_resolver import Naps2DeviceResolver
from scanner_bridge.naps2.console import Naps2Console


class DeviceResolverFactory:
    """Creates the driver-priority resolver chain from settings."""

    SUPPORTED_DRIVERS: ClassVar[tuple[str, ...]] = ("wia", "twain", "sane", "escl", "apple")

    @classmethod
    def create(cls, settings: Settings, console: Naps2Console) -> BaseDeviceResolver:
        resolvers: list[BaseDeviceResolver] = []
        for raw in settings.scan_drivers:
            driver = raw.strip().lower()
            if driver not in cls.SUPPORTED_DRIVERS:
                raise ValueError(
                    f"Unknown scan driver '{driver}'. Choose from: {list(cls.SUPPORTED_DRIVERS)}"
                )
            resolvers.append(
                Naps2DeviceResolver(
                    console,
                    driver,
                    timeout_seconds=settings.device_list_timeout_seconds,
                )
            )
        return ChainedDeviceResolver(resolvers)
