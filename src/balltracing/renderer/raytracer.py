# renderer/raytracer.py
import time
import numpy as np
from balltracing.core.vector import Vector3
from balltracing.core.utils import mix, reflect, refract
from balltracing.camera.camera import Camera
from balltracing.geometry.world import Scene

# Deeper recursion is slower and can over-accumulate color on a single pixel
MAX_RAY_DEPTH = 5
# Offset for secondary ray origins, keeps them off the surface they start from
BIAS = 1e-4
# Index of refraction shared by every transparent sphere
IOR = 1.2
BACKGROUND = (1.0, 1.0, 1.0)


def trace(origin: Vector3, direction: Vector3, scene: Scene,
          depth: int = 0, max_depth: int = MAX_RAY_DEPTH) -> Vector3:
    """
    Returns the color seen along the ray (origin, unit direction).

    Specular and transparent spheres spawn a reflection ray and, when
    transparent, a refraction ray, blended by a Fresnel term. Once depth
    reaches max_depth, or for diffuse spheres, the hit point is lit directly
    by every emissive sphere with shadow rays. Rays that hit nothing return
    the white background.
    """
    rec = scene.hit(origin, direction)
    if rec is None:
        return Vector3(*BACKGROUND)

    sphere = rec.sphere
    rec.p = origin + direction * rec.t
    rec.set_face_normal(direction, (rec.p - sphere.center).normalize())
    phit = rec.p
    nhit = rec.normal

    if sphere.is_specular and depth < max_depth:
        cos_i = direction.dot(nhit)
        facing_ratio = max(0.0, -cos_i)
        # Weak reflection when looking straight at the surface, strong at grazing angles
        fresnel = mix((1 - facing_ratio) ** 3, 1, 0.1)

        refl_dir = reflect(direction, nhit).normalize()
        reflection = trace(phit + nhit * BIAS, refl_dir, scene, depth + 1, max_depth)

        refraction = Vector3(0, 0, 0)
        if sphere.transparency > 0:
            refr_dir = refract(direction, nhit, 1 / IOR)
            # Total internal reflection leaves no refracted contribution
            if refr_dir is not None:
                refraction = trace(phit - nhit * BIAS, refr_dir.normalize(), scene, depth + 1, max_depth)

        reflect_color = reflection * fresnel
        refract_color = refraction * (1 - fresnel) * sphere.transparency
        return (reflect_color + refract_color) * sphere.surface_color

    surface_color = Vector3(0, 0, 0)
    # Shared by every light of this hit, never reset between lights
    shadow = 1.0
    shadow_origin = phit + nhit * BIAS
    for light in scene:
        if light is sphere or not light.is_light:
            continue
        transmission = 1.0
        light_dir = (light.center - phit).normalize()
        for occluder in scene.occluded_by(shadow_origin, light_dir, skip=light):
            shadow = max(0.0, shadow - (1.0 - occluder.transparency))
            transmission = transmission * shadow
        surface_color = surface_color + sphere.surface_color * transmission * light.emission_color
    return surface_color


class Renderer:
    """
    Casts one primary ray per pixel through a pinhole camera and stores the
    traced colors in a (height, width, 3) float32 buffer, row 0 at the top.
    """
    def __init__(self, width: int, height: int, fov: float = 40.0,
                 max_depth: int = MAX_RAY_DEPTH, debug_mode: bool = False):
        self.width = width
        self.height = height
        self.max_depth = max_depth
        self.debug_mode = debug_mode
        self.camera = Camera(width, height, fov)
        self.last_render_time = 0.0

    def render_pixel(self, scene: Scene, x: int, y: int) -> Vector3:
        ray = self.camera.get_ray(x, y)
        return trace(ray.origin, ray.direction, scene, 0, self.max_depth)

    def render(self, scene: Scene) -> np.ndarray:
        """
        Traces every pixel of the image and returns the color buffer.
        """
        print(f"\n=== Rendering {self.width}x{self.height} ===")
        print(f"Scene contains {len(scene)} spheres, {len(scene.lights())} lights")
        print(f"Max ray depth: {self.max_depth}")

        image = np.zeros((self.height, self.width, 3), dtype=np.float32)
        start = time.perf_counter()
        for y in range(self.height):
            for x in range(self.width):
                image[y, x] = self.render_pixel(scene, x, y).as_tuple()
            if self.debug_mode and (y % 60 == 0 or y == self.height - 1):
                print(f"  Row {y + 1}/{self.height}")

        self.last_render_time = time.perf_counter() - start
        print(f"Render finished in {self.last_render_time:.2f}s")
        return image
