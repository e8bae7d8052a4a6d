import os
import sys
from dataclasses import dataclass
from pathlib import Path

from scanner_bridge.config.settings import Settings
from scanner_bridge.devices.base import BaseDeviceResolver
from scanner_bridge.devices.models import Device
from scanner_bridge.logging.logger import Log
from scanner_bridge.profiles.exceptions import ProfileError, ProfileWriteError
from scanner_bridge.profiles.patcher import patch_profiles
from scanner_bridge.profiles.reader import read_profiles_text

PROFILES_FILE_NAME = "profiles.xml"


def user_config_dir() -> Path:
    """Per-user configuration root, as NAPS2 resolves it on each platform."""
    if sys.platform == "win32":
        app_data = os.environ.get("APPDATA")
        if not app_data:
            raise ProfileWriteError("APPDATA is not set")
        return Path(app_data)
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support"
    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg)
    return Path.home() / ".config"


@dataclass(frozen=True)
class SyncResult:
    """Outcome of one synchronization; ``warning`` is set when it degraded."""

    published_path: Path | None = None
    device: Device | None = None
    warning: str | None = None

    @property
    def ok(self) -> bool:
        return self.warning is None


class ProfileSynchronizer:
    """Patches the local profiles.xml for the attached scanner and publishes it
    to the NAPS2 configuration directory.

    Failures never propagate; they are logged and reported in
    ``SyncResult.warning`` and the previously published file stays in place.
    """

    def __init__(self, settings: Settings, resolver: BaseDeviceResolver) -> None:
        self._source_path = settings.profiles_source_path
        self._config_dir = settings.naps2_config_dir
        self._resolver = resolver

    @property
    def source_path(self) -> Path:
        return self._source_path

    def destination_path(self) -> Path:
        """Resolve where NAPS2 reads its profiles from.

        Raises:
            ProfileWriteError: if no configuration directory can be determined.
        """
        config_dir = self._config_dir
        if config_dir is None:
            config_dir = user_config_dir() / "NAPS2"
        return config_dir / PROFILES_FILE_NAME

    def sync(self) -> SyncResult:
        try:
            content = read_profiles_text(self._source_path)
        except ProfileError as exc:
            return self._degraded(str(exc))

        device = self._resolver.resolve()
        if device is None:
            Log.warning("No scanner detected, publishing profiles without patching")
        else:
            Log.info(
                "Patching profiles for detected scanner",
                name=device.display_name,
                driver=device.driver,
            )
        content = patch_profiles(content, device)

        try:
            destination = self.destination_path()
            self._publish(destination, content)
        except ProfileError as exc:
            return self._degraded(str(exc), device)

        Log.info(f"Published profiles to {destination}")
        return SyncResult(published_path=destination, device=device)

    @staticmethod
    def _publish(destination: Path, content: str) -> None:
        try:
            destination.parent.mkdir(parents=True, exist_ok=True)
            with open(destination, "w", encoding="utf-8", newline="") as fh:
                fh.write(content)
        except OSError as exc:
            raise ProfileWriteError(
                f"Failed to write profiles file {destination}: {exc}"
            ) from exc

    @staticmethod
    def _degraded(reason: str, device: Device | None = None) -> SyncResult:
        Log.warning(f"Profile sync skipped: {reason}")
        return SyncResult(device=device, warning=reason)
