from balltracing.geometry.hittable import HitRecord
from balltracing.geometry.sphere import Sphere
from balltracing.geometry.world import Scene

__all__ = ["HitRecord", "Sphere", "Scene"]
