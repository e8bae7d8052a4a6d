class ProcessorError(Exception):
    """Base exception for capture and archive orchestration errors."""


class InvalidSaveRequestError(ProcessorError):
    """Raised when a save request cannot be processed as given."""


class ConflictError(ProcessorError):
    """Raised when saving would duplicate an existing document."""


class DuplicateSerialError(ConflictError):
    """Raised when a record with the same SN BAPP already exists."""


class OutputExistsError(ConflictError):
    """Raised when the target PDF already exists in storage."""


class RecordRejectedError(ConflictError):
    """Raised when the database refuses the record after the PDF was written."""
