from dataclasses import dataclass


@dataclass(frozen=True)
class ImageMetadata:
    """Intrinsic properties of the original (non-normalized) upload."""

    width: int
    height: int
    format: str
    color_space: str | None
    density: float | None
    has_alpha: bool
    size_bytes: int

    @property
    def pixel_count(self) -> int:
        return self.width * self.height


@dataclass(frozen=True)
class NormalizedImage:
    """Canonical JPEG rendition consumed by every downstream analyzer."""

    content: bytes
    width: int
    height: int
    mime_type: str = "image/jpeg"
