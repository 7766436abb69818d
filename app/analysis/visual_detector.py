"""Pixel-statistics tests for pasted, composited or spliced content.

All three tests run on the same luminance grid derived from the normalized
image, resized (without keeping the aspect ratio) to a square working size:

1. Uniformity: share of pixels in the most populated luminance bin.
2. Edge variance: population variance of the horizontal gradient
   ``|L(x,y)-L(x-1,y)| + |L(x,y)-L(x+1,y)|`` over interior pixels.
3. Quadrant noise: variance across the 2x2 quadrants of each quadrant's mean
   horizontal adjacent-pixel difference.
"""

import io
from dataclasses import dataclass

import numpy as np
from PIL import Image

from app.analysis.models import Finding, FindingFactory, FindingType
from app.logging.logger import Log


@dataclass(frozen=True)
class VisualThresholds:
    uniformity_ratio: float = 0.25
    edge_variance: float = 2000.0
    noise_variance: float = 50.0


@dataclass(frozen=True)
class VisualStatistics:
    dominant_ratio: float
    edge_variance: float
    quadrant_noise: tuple[float, float, float, float]
    noise_variance: float


class VisualAnomalyDetector:
    """Runs the uniformity, edge-variance and quadrant-noise tests."""

    def __init__(
        self,
        thresholds: VisualThresholds | None = None,
        working_size: int = 512,
        findings: FindingFactory | None = None,
    ) -> None:
        self._thresholds = thresholds or VisualThresholds()
        self._working_size = working_size
        self._findings = findings or FindingFactory()

    def analyze(self, image: bytes) -> list[Finding]:
        """Decode ``image`` and run all tests.

        Undecodable pixel data yields no findings; it is logged, not raised.
        """
        try:
            luminance = self.luminance(image)
        except Exception as exc:
            Log.warning(f"Visual analysis skipped: {exc}")
            return []
        return self.detect(luminance)

    def luminance(self, image: bytes) -> np.ndarray:
        """Integer luminance grid of ``image`` at the working resolution."""
        with Image.open(io.BytesIO(image)) as decoded:
            rgb = decoded.convert("RGB").resize(
                (self._working_size, self._working_size),
                Image.Resampling.BILINEAR,
            )
        return to_luminance(np.asarray(rgb))

    def detect(self, luminance: np.ndarray) -> list[Finding]:
        stats = measure(luminance)
        Log.debug(
            "Visual statistics",
            dominant_ratio=round(stats.dominant_ratio, 4),
            edge_variance=round(stats.edge_variance, 2),
            noise_variance=round(stats.noise_variance, 2),
        )
        found: list[Finding] = []

        if stats.dominant_ratio > self._thresholds.uniformity_ratio:
            found.append(self._findings.make(
                FindingType.UNIFORM_COLOR_REGION,
                f"Large uniform color regions detected "
                f"({stats.dominant_ratio * 100:.1f}% of image). This may indicate "
                "digitally created or heavily edited content.",
            ))

        if stats.edge_variance > self._thresholds.edge_variance:
            found.append(self._findings.make(
                FindingType.EDGE_INCONSISTENCY,
                "Mixed edge sharpness detected across the document. This could "
                "indicate content was pasted from different sources.",
            ))

        if stats.noise_variance > self._thresholds.noise_variance:
            found.append(self._findings.make(
                FindingType.NOISE_INCONSISTENCY,
                "Different noise levels detected across document quadrants. This "
                "is a strong indicator of content splicing or digital manipulation.",
            ))

        return found


def to_luminance(rgb: np.ndarray) -> np.ndarray:
    """Rec. 601 luma of an ``(h, w, 3)`` array, rounded half up to 0..255."""
    channels = rgb.astype(np.float64)
    luma = 0.299 * channels[..., 0] + 0.587 * channels[..., 1] + 0.114 * channels[..., 2]
    return np.clip(np.floor(luma + 0.5), 0, 255).astype(np.int64)


def measure(luminance: np.ndarray) -> VisualStatistics:
    if luminance.ndim != 2 or min(luminance.shape) < 4:
        raise ValueError(f"Luminance grid too small: {luminance.shape}")
    lum = luminance.astype(np.int64)

    histogram = np.bincount(lum.ravel(), minlength=256)
    dominant_ratio = float(histogram.max()) / lum.size

    centre = lum[1:-1, 1:-1]
    gradient = np.abs(centre - lum[1:-1, :-2]) + np.abs(centre - lum[1:-1, 2:])
    edge_variance = float(gradient.var())

    height, width = lum.shape
    qh, qw = height // 2, width // 2
    means: list[float] = []
    for qy in range(2):
        for qx in range(2):
            # last quadrant row is skipped, last column is only a right neighbour
            block = lum[qy * qh:(qy + 1) * qh - 1, qx * qw:(qx + 1) * qw]
            means.append(float(np.abs(np.diff(block, axis=1)).mean()))
    noise_variance = float(np.var(means))

    return VisualStatistics(
        dominant_ratio=dominant_ratio,
        edge_variance=edge_variance,
        quadrant_noise=(means[0], means[1], means[2], means[3]),
        noise_variance=noise_variance,
    )
