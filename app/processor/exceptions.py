class ProcessorError(Exception):
    """Base exception for all processor-related errors."""


class UploadValidationError(ProcessorError):
    """Raised when an upload is rejected before the pipeline runs."""
