"""Text-level patching of NAPS2 ``profiles.xml``.

The document is edited as a string and never re-serialized. Every byte
outside the replaced elements is preserved, including line endings.
"""

import re
from xml.sax.saxutils import escape

from scanner_bridge.devices.models import Device

DEVICE_START = "<Device>"
DEVICE_END = "</Device>"

_DRIVER_NAME = re.compile(r"<DriverName>.*?</DriverName>")
_ID = re.compile(r"<ID>.*?</ID>")
_NAME = re.compile(r"<Name>.*?</Name>")


def _element(tag: str, value: str) -> str:
    return f"<{tag}>{escape(value)}</{tag}>"


def find_device_block(content: str) -> tuple[int, int] | None:
    """Return the [start, end) span of the first <Device>...</Device> block."""
    start = content.find(DEVICE_START)
    if start == -1:
        return None
    end = content.find(DEVICE_END, start)
    if end == -1:
        return None
    return start, end + len(DEVICE_END)


def patch_profiles(content: str, device: Device | None) -> str:
    """Point the profiles document at ``device``.

    Every <DriverName> in the document is replaced (one scanner per machine),
    while <ID> and <Name> are replaced only inside the first <Device> block so
    other ID-like elements (IconID and friends) are left alone. With no device
    the content is returned as is.
    """
    if device is None:
        return content

    driver = _element("DriverName", device.driver)
    patched = _DRIVER_NAME.sub(lambda _m: driver, content)

    span = find_device_block(patched)
    if span is None:
        return patched

    start, end = span
    identifier = _element("ID", device.identifier)
    name = _element("Name", device.display_name)
    block = patched[start:end]
    block = _ID.sub(lambda _m: identifier, block)
    block = _NAME.sub(lambda _m: name, block)
    return patched[:start] + block + patched[end:]
