"""Canonical re-encoding of uploaded document images."""

import io
from typing import ClassVar

from PIL import Image

from app.imaging.exceptions import DecodeError
from app.imaging.models import NormalizedImage
from app.logging.logger import Log


class ImageNormalizer:
    """Decodes an upload and re-encodes it as a bounded, fixed-quality JPEG.

    Images larger than ``max_dimension`` on either side are shrunk to fit,
    keeping the aspect ratio. Smaller images are never enlarged.
    """

    SUPPORTED_FORMATS: ClassVar[frozenset[str]] = frozenset(
        {"JPEG", "MPO", "PNG", "WEBP", "TIFF"}
    )

    def __init__(self, max_dimension: int = 1024, quality: int = 85) -> None:
        self._max_dimension = max_dimension
        self._quality = quality

    def normalize(self, content: bytes) -> NormalizedImage:
        """Return the canonical rendition of ``content``.

        Raises:
            DecodeError: if the payload is corrupt or not a supported raster format.
        """
        try:
            with Image.open(io.BytesIO(content)) as image:
                if image.format not in self.SUPPORTED_FORMATS:
                    raise DecodeError(f"Unsupported image format: {image.format}")
                image.load()
                rgb = image.convert("RGB")
            rgb.thumbnail(
                (self._max_dimension, self._max_dimension),
                Image.Resampling.LANCZOS,
            )
            buf = io.BytesIO()
            rgb.save(buf, format="JPEG", quality=self._quality)
        except DecodeError:
            raise
        except Exception as exc:
            raise DecodeError(f"Image decoding failed: {exc}") from exc

        Log.debug(
            "Normalized image",
            width=rgb.width,
            height=rgb.height,
            bytes=buf.tell(),
        )
        return NormalizedImage(content=buf.getvalue(), width=rgb.width, height=rgb.height)
