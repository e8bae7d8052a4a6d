import base64
import binascii

from scanner_bridge.pdf.exceptions import InvalidImageDataError

JPEG_MIME = "image/jpeg"


def encode_data_uri(data: bytes, mime_type: str = JPEG_MIME) -> str:
    """Wrap raw image bytes in a base64 data URI."""
    return f"data:{mime_type};base64," + base64.b64encode(data).decode("ascii")


def decode_data_uri(value: str) -> bytes:
    """Strip an optional ``data:...;base64,`` envelope and decode the payload.

    Raises:
        InvalidImageDataError: if the payload is empty or not valid base64.
    """
    payload = value.strip()
    if payload.startswith("data:"):
        _, sep, payload = payload.partition(",")
        if not sep:
            raise InvalidImageDataError("Data URI has no payload")
    if not payload:
        raise InvalidImageDataError("Image payload is empty")
    try:
        return base64.b64decode(payload, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise InvalidImageDataError(f"Image payload is not valid base64: {exc}") from exc
