# camera/camera.py
import math
from balltracing.core.vector import Vector3
from balltracing.core.ray import Ray

class Camera:
    """
    Fixed pinhole camera at the origin looking down -z.

    fov is the vertical field of view in degrees. Pixel (0, 0) is the top-left
    corner of the image.
    """
    def __init__(self, width: int, height: int, fov: float = 40.0):
        if width <= 0 or height <= 0:
            raise ValueError(f"Image size must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self.fov = fov
        self.position = Vector3(0, 0, 0)
        self.update_camera()

    def update_camera(self):
        """Recomputes the viewport scale from fov and image size."""
        self.inv_width = 1 / float(self.width)
        self.inv_height = 1 / float(self.height)
        self.aspect_ratio = self.width / float(self.height)
        self.angle = math.tan(math.pi * 0.5 * self.fov / 180.0)

    def get_ray(self, x: int, y: int) -> Ray:
        """Generates the primary ray through the center of pixel (x, y)."""
        xx = (2 * ((x + 0.5) * self.inv_width) - 1) * self.angle * self.aspect_ratio
        yy = (1 - 2 * ((y + 0.5) * self.inv_height)) * self.angle
        direction = Vector3(xx, yy, -1).normalize()
        return Ray(self.position, direction)
