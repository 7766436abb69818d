class InferenceError(Exception):
    """Base exception for the AI inference collaborator."""


class CollaboratorUnavailableError(InferenceError):
    """Raised when no credential is configured for the inference provider."""


class CollaboratorCallError(InferenceError):
    """Raised when a single capability call fails (network, timeout, quota, model loading)."""
