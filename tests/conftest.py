import io

import numpy as np
import pytest
from PIL import Image


def encode(image: Image.Image, fmt: str = "PNG", **params: object) -> bytes:
    buf = io.BytesIO()
    image.save(buf, format=fmt, **params)
    return buf.getvalue()


def quadrant_noise_image(amplitudes: tuple[int, int, int, int], size: int = 512) -> Image.Image:
    """Grey image whose 2x2 quadrants carry uniform noise of the given amplitudes."""
    rng = np.random.default_rng(1234)
    half = size // 2
    pixels = np.empty((size, size), dtype=np.float64)
    for index, amplitude in enumerate(amplitudes):
        qy, qx = divmod(index, 2)
        noise = rng.uniform(-amplitude, amplitude, size=(half, half))
        pixels[qy * half:(qy + 1) * half, qx * half:(qx + 1) * half] = 128 + noise
    grey = np.clip(np.rint(pixels), 0, 255).astype(np.uint8)
    return Image.fromarray(np.stack([grey, grey, grey], axis=-1))


@pytest.fixture()
def flat_gray_png() -> bytes:
    """100x100 RGB image of a single grey level."""
    return encode(Image.new("RGB", (100, 100), (128, 128, 128)))


@pytest.fixture()
def spliced_noise_png() -> bytes:
    """512x512 image whose quadrants have markedly different noise floors."""
    return encode(quadrant_noise_image((2, 10, 40, 80)))


@pytest.fixture()
def even_noise_png() -> bytes:
    """512x512 image with the same noise amplitude in every quadrant."""
    return encode(quadrant_noise_image((40, 40, 40, 40)))


@pytest.fixture()
def large_photo_jpeg() -> bytes:
    """2000x1000 JPEG with a smooth gradient and mild noise."""
    rng = np.random.default_rng(7)
    ramp = np.tile(np.linspace(40, 220, 2000), (1000, 1))
    grey = np.clip(ramp + rng.normal(0, 3, ramp.shape), 0, 255).astype(np.uint8)
    image = Image.fromarray(np.stack([grey, grey, grey], axis=-1))
    return encode(image, "JPEG", quality=95, dpi=(300, 300))
