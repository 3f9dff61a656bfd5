# renderer/export.py
import os

import numpy as np
from PIL import Image


def save_image(pixels: np.ndarray, filepath: str) -> None:
    """
    Save an 8-bit RGB buffer (H x W x 3, row 0 at the top) to disk.

    The file format follows the extension (.png, .ppm, .bmp, ...).

    Raises:
        FileNotFoundError: If the target directory doesn't exist
        ValueError: If the buffer is not uint8 RGB
    """
    if pixels.dtype != np.uint8 or pixels.ndim != 3 or pixels.shape[2] != 3:
        raise ValueError(f"Expected a uint8 (H, W, 3) buffer, got {pixels.dtype} {pixels.shape}")

    directory = os.path.dirname(os.path.abspath(filepath))
    if not os.path.isdir(directory):
        raise FileNotFoundError(f"Output directory not found: {directory}")

    Image.fromarray(pixels).save(filepath)


def load_image(filepath: str) -> np.ndarray:
    """
    Load an image file as a uint8 (H x W x 3) RGB array.
    """
    if not os.path.exists(filepath):
        raise FileNotFoundError(f"Image file not found: {filepath}")

    with Image.open(filepath) as img:
        if img.mode != 'RGB':
            img = img.convert('RGB')
        return np.array(img, dtype=np.uint8)
