# renderer/tone_mapping.py
import numpy as np
from numba import njit


def gamma_encode(linear):
    """
    Gamma 2 encoding: square root of every channel, negatives clamped to 0.
    """
    return np.sqrt(np.clip(linear, 0.0, None))


@njit(cache=False)
def quantize_kernel(encoded_image, output_image):
    height, width, channels = encoded_image.shape
    for y in range(height):
        for x in range(width):
            for c in range(channels):
                value = encoded_image[y, x, c]
                # NaN fails every comparison
                if not value > 0.0:
                    value = 0.0
                if value > 0.999:
                    value = 0.999
                output_image[y, x, c] = int(256.0 * value)


def quantize(linear):
    """
    Convert an averaged linear colour buffer (H x W x 3) to 8-bit output:
    gamma 2 encoding, then int(256 * clamp(value, 0, 0.999)) per channel.
    """
    encoded = np.ascontiguousarray(gamma_encode(linear), dtype=np.float32)
    output = np.zeros(encoded.shape, dtype=np.uint8)
    quantize_kernel(encoded, output)
    return output
