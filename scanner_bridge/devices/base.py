from abc import ABC, abstractmethod

from scanner_bridge.devices.models import Device


class BaseDeviceResolver(ABC):
    """Contract for all scanner discovery strategies."""

    @abstractmethod
    def resolve(self) -> Device | None:
        """Find the first attached scanner.

        Returns:
            The discovered Device, or None when nothing was found. Discovery
            failures are reported as None, never raised.
        """
