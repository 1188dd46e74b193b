# renderer/image_io.py
import os
import numpy as np
from PIL import Image
from balltracing.renderer.tone_mapping import to_uint8

def save_image(image: np.ndarray, path: str) -> str:
    """
    Write a (height, width, 3) color buffer to disk. The format follows the
    file extension (png, jpg, bmp, ppm...).

    Args:
        image: Linear color buffer, channels clamped to [0, 1] on write
        path: Destination file

    Returns:
        The path that was written
    """
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    Image.fromarray(to_uint8(image)).save(path)
    return path

def load_image(path: str) -> np.ndarray:
    """
    Read an image back as a float32 color buffer in [0, 1].

    Raises:
        FileNotFoundError: If the image file doesn't exist
    """
    if not os.path.exists(path):
        raise FileNotFoundError(f"Image file not found: {path}")

    with Image.open(path) as img:
        if img.mode != 'RGB':
            img = img.convert('RGB')
        data = np.asarray(img, dtype=np.float32)
    return data / 255.0
