# geometry/sphere.py
import math
from typing import Optional, Tuple
from balltracing.core.vector import Vector3

class Sphere:
    """
    Represents a sphere defined by its center, radius, and material weights.

    A sphere whose emission color has a positive red component acts as a light
    source. A sphere with a reflection or transparency weight above zero is
    shaded as a specular dielectric, otherwise it is diffuse.
    """
    def __init__(self, center: Vector3, radius: float, surface_color: Vector3,
                 reflection: float = 0.0, transparency: float = 0.0,
                 emission_color: Optional[Vector3] = None):
        self.center = center
        self.radius = radius
        self.surface_color = surface_color
        self.emission_color = emission_color if emission_color is not None else Vector3(0, 0, 0)
        self.reflection = reflection
        self.transparency = transparency

    @property
    def radius(self) -> float:
        return self._radius

    @radius.setter
    def radius(self, value: float):
        if value <= 0:
            raise ValueError(f"Sphere radius must be positive, got {value}")
        self._radius = value
        self._radius2 = value * value

    @property
    def radius2(self) -> float:
        """Squared radius, kept in sync with radius."""
        return self._radius2

    @property
    def is_light(self) -> bool:
        return self.emission_color.x > 0

    @property
    def is_specular(self) -> bool:
        return self.reflection > 0 or self.transparency > 0

    def intersect(self, origin: Vector3, direction: Vector3) -> Optional[Tuple[float, float]]:
        """
        Intersects the infinite ray (origin, unit direction) with the sphere.
        Returns the signed distances (t0, t1) to the near and far hit points,
        or None when the ray misses.
        """
        l = self.center - origin
        # Projection of the center onto the ray
        proj = l.dot(direction)
        if proj < 0:
            return None

        # Squared distance from the center to the ray line
        d2 = l.dot(l) - proj * proj
        if d2 > self._radius2:
            return None

        half_chord = math.sqrt(self._radius2 - d2)
        return proj - half_chord, proj + half_chord

    def __repr__(self) -> str:
        return (f"Sphere(center={self.center!r}, radius={self.radius}, "
                f"surface_color={self.surface_color!r}, reflection={self.reflection}, "
                f"transparency={self.transparency}, emission_color={self.emission_color!r})")
