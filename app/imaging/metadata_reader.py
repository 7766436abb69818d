import io
import numbers

from PIL import Image

from app.imaging.exceptions import DecodeError
from app.imaging.models import ImageMetadata

# Pillow modes mapped to the colour-space names used in findings.
_COLOR_SPACES: dict[str, str] = {
    "1": "b-w",
    "L": "b-w",
    "LA": "b-w",
    "La": "b-w",
    "I": "b-w",
    "F": "b-w",
    "I;16": "grey16",
    "I;16B": "grey16",
    "I;16L": "grey16",
    "P": "srgb",
    "PA": "srgb",
    "RGB": "srgb",
    "RGBA": "srgb",
    "RGBa": "srgb",
    "RGBX": "srgb",
    "YCbCr": "srgb",
    "CMYK": "cmyk",
    "LAB": "lab",
    "HSV": "hsv",
}

_ALPHA_MODES = frozenset({"LA", "La", "PA", "RGBA", "RGBa"})


def read_image_metadata(content: bytes) -> ImageMetadata:
    """Read intrinsic properties of an image without decoding its pixels.

    Raises:
        DecodeError: if the header cannot be parsed.
    """
    try:
        with Image.open(io.BytesIO(content)) as image:
            width, height = image.size
            mode = image.mode
            has_alpha = mode in _ALPHA_MODES or (
                mode == "P" and "transparency" in image.info
            )
            return ImageMetadata(
                width=width,
                height=height,
                format=(image.format or "").lower(),
                color_space=_COLOR_SPACES.get(mode, mode.lower()),
                density=_density(image.info.get("dpi")),
                has_alpha=has_alpha,
                size_bytes=len(content),
            )
    except Exception as exc:
        raise DecodeError(f"Image metadata could not be read: {exc}") from exc


def _density(dpi: object) -> float | None:
    """Horizontal density in DPI, or None when the file does not declare one."""
    if isinstance(dpi, tuple) and dpi:
        dpi = dpi[0]
    if isinstance(dpi, numbers.Real) and float(dpi) > 0:
        return float(dpi)
    return None
