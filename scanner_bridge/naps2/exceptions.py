class Naps2Error(Exception):
    """Base exception for NAPS2 console invocation errors."""


class Naps2NotFoundError(Naps2Error):
    """Raised when the NAPS2 console executable cannot be started."""


class Naps2TimeoutError(Naps2Error):
    """Raised when a NAPS2 console call exceeds its time bound and is killed."""
