from typing import ClassVar

from app.analysis.models import Finding, FindingFactory, FindingType
from app.imaging.models import ImageMetadata


class MetadataAnalyzer:
    """Scores intrinsic image properties. Every check runs independently."""

    MIN_DIMENSION: ClassVar[int] = 200
    EXPECTED_COLOR_SPACES: ClassVar[frozenset[str]] = frozenset({"srgb", "rgb", "cmyk"})
    MIN_BYTES_PER_PIXEL: ClassVar[float] = 0.1
    MIN_DPI: ClassVar[float] = 72

    def __init__(self, findings: FindingFactory | None = None) -> None:
        self._findings = findings or FindingFactory()

    def analyze(self, metadata: ImageMetadata) -> list[Finding]:
        found: list[Finding] = []
        width, height = metadata.width, metadata.height

        if width < self.MIN_DIMENSION or height < self.MIN_DIMENSION:
            found.append(self._findings.make(
                FindingType.LOW_RESOLUTION,
                f"Image resolution is very low ({width}x{height}). "
                "Legitimate documents are usually higher resolution.",
            ))

        space = metadata.color_space
        if space and space.lower() not in self.EXPECTED_COLOR_SPACES:
            found.append(self._findings.make(
                FindingType.UNUSUAL_COLOR_SPACE,
                f"Unusual color space detected: {space}. "
                "This could indicate image manipulation.",
            ))

        if metadata.pixel_count > 0:
            bytes_per_pixel = metadata.size_bytes / metadata.pixel_count
            if bytes_per_pixel < self.MIN_BYTES_PER_PIXEL:
                found.append(self._findings.make(
                    FindingType.HIGH_COMPRESSION,
                    f"Image is highly compressed relative to its dimensions "
                    f"({bytes_per_pixel:.3f} bytes per pixel). "
                    "This may indicate multiple re-saves or editing.",
                ))

        if metadata.has_alpha:
            found.append(self._findings.make(
                FindingType.ALPHA_CHANNEL,
                "Image has an alpha (transparency) channel. "
                "Scanned documents typically do not have transparency.",
            ))

        if metadata.density and metadata.density < self.MIN_DPI:
            found.append(self._findings.make(
                FindingType.LOW_DPI,
                f"Low DPI detected ({metadata.density:g}). "
                "Authentic scanned documents usually have 150+ DPI.",
            ))

        return found
