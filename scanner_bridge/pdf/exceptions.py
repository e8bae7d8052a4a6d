class AssemblyError(Exception):
    """Raised when the output PDF cannot be rendered or written."""


class InvalidImageDataError(ValueError):
    """Raised when an image payload is not valid base64 (with or without a data URI)."""
