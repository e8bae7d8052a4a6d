import pymupdf
import pytest


def make_jpeg(width: int = 40, height: int = 60, shade: int = 200) -> bytes:
    """Generate a small solid-colour JPEG."""
    pixmap = pymupdf.Pixmap(pymupdf.csRGB, pymupdf.IRect(0, 0, width, height), False)
    pixmap.clear_with(shade)
    return pixmap.tobytes("jpg")


@pytest.fixture()
def jpeg_factory():  # type: ignore[no-untyped-def]
    return make_jpeg


@pytest.fixture()
def front_jpeg() -> bytes:
    return make_jpeg(shade=220)


@pytest.fixture()
def back_jpeg() -> bytes:
    return make_jpeg(width=60, height=40, shade=120)


@pytest.fixture()
def profiles_xml() -> str:
    """A NAPS2 profiles document with two profiles and fields we do not model."""
    return (
        '<?xml version="1.0"?>\r\n'
        '<ArrayOfScanProfile xmlns:xsi="http://www.w3.org/2001/XMLSchema-instance">\r\n'
        "  <ScanProfile>\r\n"
        "    <Version>5</Version>\r\n"
        "    <Device><ID>OLD</ID><Name>OldCam</Name></Device>\r\n"
        "    <DriverName>twain</DriverName>\r\n"
        "    <DisplayName>Duplex ADF Scanner(K76)</DisplayName>\r\n"
        "    <IconID>3</IconID>\r\n"
        "    <ID>keep-me</ID>\r\n"
        "    <AutoSaveSettings><FilePath>C:\\Scans\\$(n).jpg</FilePath></AutoSaveSettings>\r\n"
        "  </ScanProfile>\r\n"
        "  <ScanProfile>\r\n"
        "    <Device><ID>OTHER</ID><Name>OtherCam</Name></Device>\r\n"
        "    <DriverName>wia</DriverName>\r\n"
        "    <DisplayName>Flatbed</DisplayName>\r\n"
        "  </ScanProfile>\r\n"
        "</ArrayOfScanProfile>\r\n"
    )
