class ProfileError(Exception):
    """Base exception for device-profile handling errors."""


class ProfileReadError(ProfileError):
    """Raised when a profiles document cannot be read or parsed."""


class ProfileWriteError(ProfileError):
    """Raised when a profiles document cannot be published."""
