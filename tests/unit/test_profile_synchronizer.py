from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from scanner_bridge.devices.base import BaseDeviceResolver
from scanner_bridge.devices.models import Device
from scanner_bridge.profiles.synchronizer import ProfileSynchronizer, user_config_dir


def _make_settings(source: Path, config_dir: Path | None):  # type: ignore[no-untyped-def]
    with patch("scanner_bridge.config.settings.Settings") as mock_cls:
        settings = mock_cls.return_value
        settings.profiles_source_path = source
        settings.naps2_config_dir = config_dir
        return settings


def _resolver(device: Device | None) -> MagicMock:
    resolver = MagicMock(spec=BaseDeviceResolver)
    resolver.resolve.return_value = device
    return resolver


@pytest.fixture
def source(tmp_path: Path, profiles_xml: str) -> Path:
    path = tmp_path / "backend" / "profiles.xml"
    path.parent.mkdir()
    path.write_bytes(profiles_xml.encode("utf-8"))
    return path


class TestSyncPublishes:
    def test_writes_patched_profiles_to_config_dir(self, source: Path, tmp_path: Path) -> None:
        config_dir = tmp_path / "AppData" / "NAPS2"
        device = Device("USB001", "Canon X", "wia")
        sync = ProfileSynchronizer(_make_settings(source, config_dir), _resolver(device))

        result = sync.sync()

        published = (config_dir / "profiles.xml").read_bytes().decode("utf-8")
        assert result.ok
        assert result.published_path == config_dir / "profiles.xml"
        assert result.device == device
        assert "<ID>USB001</ID><Name>Canon X</Name>" in published
        assert "<DriverName>twain</DriverName>" not in published

    def test_source_file_is_never_modified(self, source: Path, tmp_path: Path) -> None:
        before = source.read_bytes()
        sync = ProfileSynchronizer(
            _make_settings(source, tmp_path / "cfg"),
            _resolver(Device("USB001", "Canon X", "wia")),
        )

        sync.sync()

        assert source.read_bytes() == before

    def test_no_device_publishes_byte_identical_copy(self, source: Path, tmp_path: Path) -> None:
        config_dir = tmp_path / "cfg"
        sync = ProfileSynchronizer(_make_settings(source, config_dir), _resolver(None))

        result = sync.sync()

        assert result.ok
        assert result.device is None
        assert (config_dir / "profiles.xml").read_bytes() == source.read_bytes()

    def test_overwrites_existing_destination(self, source: Path, tmp_path: Path) -> None:
        config_dir = tmp_path / "cfg"
        config_dir.mkdir()
        (config_dir / "profiles.xml").write_text("stale")
        sync = ProfileSynchronizer(_make_settings(source, config_dir), _resolver(None))

        sync.sync()

        assert (config_dir / "profiles.xml").read_bytes() == source.read_bytes()


class TestSyncDegrades:
    def test_missing_source_returns_warning(self, tmp_path: Path) -> None:
        resolver = _resolver(Device("USB001", "Canon X", "wia"))
        sync = ProfileSynchronizer(
            _make_settings(tmp_path / "missing.xml", tmp_path / "cfg"), resolver
        )

        result = sync.sync()

        assert not result.ok
        assert "Failed to read profiles file" in (result.warning or "")
        resolver.resolve.assert_not_called()
        assert not (tmp_path / "cfg").exists()

    def test_unwritable_destination_returns_warning(self, source: Path, tmp_path: Path) -> None:
        blocker = tmp_path / "not_a_dir"
        blocker.write_text("file in the way")
        sync = ProfileSynchronizer(_make_settings(source, blocker / "NAPS2"), _resolver(None))

        result = sync.sync()

        assert not result.ok
        assert "Failed to write profiles file" in (result.warning or "")

    def test_unresolvable_config_dir_returns_warning(
        self, source: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setattr("scanner_bridge.profiles.synchronizer.sys.platform", "win32")
        monkeypatch.delenv("APPDATA", raising=False)
        sync = ProfileSynchronizer(_make_settings(source, None), _resolver(None))

        result = sync.sync()

        assert result.warning == "APPDATA is not set"


class TestUserConfigDir:
    def test_windows_uses_appdata(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr("scanner_bridge.profiles.synchronizer.sys.platform", "win32")
        monkeypatch.setenv("APPDATA", "C:/Users/op/AppData/Roaming")
        assert user_config_dir() == Path("C:/Users/op/AppData/Roaming")

    def test_linux_prefers_xdg_config_home(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr("scanner_bridge.profiles.synchronizer.sys.platform", "linux")
        monkeypatch.setenv("XDG_CONFIG_HOME", "/tmp/xdg")
        assert user_config_dir() == Path("/tmp/xdg")

    def test_linux_falls_back_to_dot_config(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr("scanner_bridge.profiles.synchronizer.sys.platform", "linux")
        monkeypatch.delenv("XDG_CONFIG_HOME", raising=False)
        assert user_config_dir() == Path.home() / ".config"
