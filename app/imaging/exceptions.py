class ImagingError(Exception):
    """Base exception for image decoding and re-encoding."""


class DecodeError(ImagingError):
    """Raised when an upload cannot be decoded as a supported raster image."""
