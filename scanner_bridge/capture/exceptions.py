class CaptureError(Exception):
    """Base exception for capture session errors."""


class ScanToolError(CaptureError):
    """Raised when NAPS2 exits with a non-zero status.

    The tool's combined output is kept verbatim in ``output``.
    """

    def __init__(self, returncode: int, output: str) -> None:
        self.returncode = returncode
        self.output = output
        super().__init__(f"Scan failed (exit code {returncode}) | NAPS2 output: {output.strip()}")


class NoPagesProducedError(CaptureError):
    """Raised when NAPS2 succeeds but writes no page images."""


class CaptureTimeoutError(CaptureError):
    """Raised when the scan does not finish within the configured bound."""
