import logging

import numpy as np
from PIL import Image

logger = logging.getLogger(__name__)

# Largest channel value kept before scaling to 8 bits.
MAX_INTENSITY = 0.999


def linear_to_gamma(linear: np.ndarray) -> np.ndarray:
    """
    Gamma 2 transform of linear-light colors; negative values map to 0.
    """
    return np.sqrt(np.maximum(linear, 0.0))


def to_uint8(pixels: np.ndarray, width: int, height: int) -> np.ndarray:
    """
    Convert a (height * width, 3) buffer of linear colors into a
    (height, width, 3) 8-bit image.
    """
    pixels = np.asarray(pixels, dtype=np.float64)
    if pixels.shape != (width * height, 3):
        raise ValueError(f"Expected {width * height} RGB pixels, got array of shape {pixels.shape}")
    # NaN samples are written as black rather than undefined bytes.
    gamma = np.nan_to_num(linear_to_gamma(pixels), nan=0.0)
    clamped = np.clip(gamma, 0.0, MAX_INTENSITY)
    return (clamped * 256).astype(np.uint8).reshape(height, width, 3)


def write_image(path: str, pixels: np.ndarray, width: int, height: int) -> None:
    """
    Gamma-correct, quantise and save a rendered buffer (PNG or any format
    Pillow infers from the file extension).
    """
    image = Image.fromarray(to_uint8(pixels, width, height))
    image.save(path)
    logger.info("Wrote %dx%d image to %s", width, height, path)
