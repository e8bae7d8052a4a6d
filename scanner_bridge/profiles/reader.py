import xml.etree.ElementTree as ET
from pathlib import Path

from scanner_bridge.profiles.exceptions import ProfileReadError


def read_profiles_text(path: Path) -> str:
    """Read a profiles document as raw UTF-8 text, line endings untranslated.

    Raises:
        ProfileReadError: if the file cannot be read.
    """
    try:
        with open(path, encoding="utf-8", newline="") as fh:
            return fh.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise ProfileReadError(f"Failed to read profiles file {path}: {exc}") from exc


def _local_name(tag: str) -> str:
    return tag.rsplit("}", 1)[-1]


def list_profile_names(content: str) -> list[str]:
    """Return the non-empty <DisplayName> of every <ScanProfile>, in order.

    Parsing here is read-only; the tree is never written back.

    Raises:
        ProfileReadError: if the document is not well-formed XML.
    """
    try:
        root = ET.fromstring(content.lstrip("\ufeff"))
    except ET.ParseError as exc:
        raise ProfileReadError(f"Failed to parse profiles document: {exc}") from exc

    names: list[str] = []
    for profile in root.iter():
        if _local_name(profile.tag) != "ScanProfile":
            continue
        for child in profile:
            if _local_name(child.tag) == "DisplayName":
                display_name = (child.text or "").strip()
                if display_name:
                    names.append(display_name)
                break
    return names
