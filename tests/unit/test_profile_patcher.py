from scanner_bridge.devices.models import Device
from scanner_bridge.profiles.patcher import find_device_block, patch_profiles

CANON = Device(identifier="USB001", display_name="Canon X", driver="wia")


class TestPatchWithoutDevice:
    def test_is_identity(self, profiles_xml: str) -> None:
        assert patch_profiles(profiles_xml, None) == profiles_xml

    def test_identity_on_arbitrary_text(self) -> None:
        text = "<Device><ID>\\weird$1</ID></Device>\n\r\n"
        assert patch_profiles(text, None) == text


class TestPatchDeviceBlock:
    def test_replaces_id_and_name_inside_block(self) -> None:
        content = "<Device><ID>OLD</ID><Name>OldCam</Name></Device><DriverName>twain</DriverName>"

        patched = patch_profiles(content, CANON)

        assert patched == (
            "<Device><ID>USB001</ID><Name>Canon X</Name></Device>"
            "<DriverName>wia</DriverName>"
        )

    def test_only_first_device_block_is_patched(self, profiles_xml: str) -> None:
        patched = patch_profiles(profiles_xml, CANON)

        assert "<Device><ID>USB001</ID><Name>Canon X</Name></Device>" in patched
        assert "<Device><ID>OTHER</ID><Name>OtherCam</Name></Device>" in patched

    def test_ids_outside_block_are_untouched(self, profiles_xml: str) -> None:
        patched = patch_profiles(profiles_xml, CANON)

        assert "<ID>keep-me</ID>" in patched
        assert "<IconID>3</IconID>" in patched

    def test_driver_name_replaced_everywhere(self, profiles_xml: str) -> None:
        patched = patch_profiles(profiles_xml, CANON)

        assert patched.count("<DriverName>wia</DriverName>") == 2
        assert "<DriverName>twain</DriverName>" not in patched

    def test_everything_else_is_byte_identical(self, profiles_xml: str) -> None:
        patched = patch_profiles(profiles_xml, CANON)

        expected = (
            profiles_xml.replace("<ID>OLD</ID><Name>OldCam</Name>", "<ID>USB001</ID><Name>Canon X</Name>")
            .replace("<DriverName>twain</DriverName>", "<DriverName>wia</DriverName>")
        )
        assert patched == expected
        assert "\r\n" in patched
        assert "C:\\Scans\\$(n).jpg" in patched


class TestPatchEdgeCases:
    def test_backslashes_in_identifier_are_literal(self) -> None:
        device = Device(
            identifier=r"{6BDD1FC6-810F-11D0-BEC7-08002BE2092F}\0001",
            display_name=r"Plustek \1 K76",
            driver="wia",
        )

        patched = patch_profiles("<Device><ID>x</ID><Name>y</Name></Device>", device)

        assert patched == (
            r"<Device><ID>{6BDD1FC6-810F-11D0-BEC7-08002BE2092F}\0001</ID>"
            r"<Name>Plustek \1 K76</Name></Device>"
        )

    def test_markup_in_device_name_is_escaped(self) -> None:
        device = Device(identifier="a&b", display_name="<Scanner>", driver="twain")

        patched = patch_profiles("<Device><ID>x</ID><Name>y</Name></Device>", device)

        assert patched == "<Device><ID>a&amp;b</ID><Name>&lt;Scanner&gt;</Name></Device>"

    def test_without_device_block_only_driver_changes(self) -> None:
        content = "<ScanProfile><ID>1</ID><DriverName>twain</DriverName></ScanProfile>"

        patched = patch_profiles(content, CANON)

        assert patched == "<ScanProfile><ID>1</ID><DriverName>wia</DriverName></ScanProfile>"

    def test_unterminated_device_block_is_left_alone(self) -> None:
        content = "<Device><ID>OLD</ID><DriverName>twain</DriverName>"

        patched = patch_profiles(content, CANON)

        assert patched == "<Device><ID>OLD</ID><DriverName>wia</DriverName>"


class TestFindDeviceBlock:
    def test_returns_span_of_first_block(self) -> None:
        content = "ab<Device>x</Device><Device>y</Device>"
        assert find_device_block(content) == (2, 20)

    def test_returns_none_without_block(self) -> None:
        assert find_device_block("<Devices/>") is None
