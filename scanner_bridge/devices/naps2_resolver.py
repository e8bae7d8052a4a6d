from scanner_bridge.devices.base import BaseDeviceResolver
from scanner_bridge.devices.models import Device
from scanner_bridge.logging.logger import Log
from scanner_bridge.naps2.console import Naps2Console
from scanner_bridge.naps2.exceptions import Naps2Error


class Naps2DeviceResolver(BaseDeviceResolver):
    """Lists devices for a single NAPS2 driver and takes the first one.

    The first non-empty line of the listing is used as both identifier and
    display name.
    """

    def __init__(
        self,
        console: Naps2Console,
        driver: str,
        timeout_seconds: float | None = None,
    ) -> None:
        self._console = console
        self._driver = driver
        self._timeout_seconds = timeout_seconds

    @property
    def driver(self) -> str:
        return self._driver

    def resolve(self) -> Device | None:
        try:
            result = self._console.list_devices(self._driver, self._timeout_seconds)
        except Naps2Error as exc:
            Log.debug(f"Device listing failed for driver {self._driver}: {exc}")
            return None

        if not result.ok:
            Log.debug(
                f"Device listing for driver {self._driver} exited with {result.returncode}"
            )
            return None

        for line in result.output.splitlines():
            line = line.strip()
            if line:
                return Device(identifier=line, display_name=line, driver=self._driver)
        return None
