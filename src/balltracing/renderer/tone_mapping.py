# renderer/tone_mapping.py
import numpy as np
from numba import njit

def clamp_colors(image: np.ndarray) -> np.ndarray:
    """
    Caps every color channel at 1.0, the way the display expects it.
    Values below zero are left untouched.
    """
    return np.minimum(image, 1.0)

def reinhard_tone_mapping(image, exposure=1.0, white_point=1.0, gamma=2.2):
    """
    Apply Reinhard tone mapping to a linear color buffer and return 8-bit values.
    """
    scaled = np.maximum(image, 0.0) * exposure
    mapped = scaled / (1.0 + scaled / white_point)
    mapped = mapped ** (1.0 / gamma)
    output = (mapped * 255).clip(0, 255).astype("uint8")
    return output

@njit
def _to_uint8_kernel(image, output):
    height, width, channels = image.shape
    for y in range(height):
        for x in range(width):
            for c in range(channels):
                v = image[y, x, c]
                if v > 1.0:
                    v = 1.0
                # Also catches NaN
                if not v >= 0.0:
                    v = 0.0
                output[y, x, c] = int(v * 255)

def to_uint8(image: np.ndarray) -> np.ndarray:
    """
    Converts a (height, width, 3) color buffer to 8-bit channels, clamping
    each channel to [0, 1] before scaling to 0-255.
    """
    image = np.ascontiguousarray(image, dtype=np.float32)
    output = np.empty(image.shape, dtype=np.uint8)
    _to_uint8_kernel(image, output)
    return output
