# geometry/hittable.py
from balltracing.core.vector import Vector3

class HitRecord:
    """
    Records details of a ray-sphere intersection.
    """
    def __init__(self, t: float = 0, sphere=None, p: Vector3 = None,
                 normal: Vector3 = None, front_face: bool = True):
        self.t = t                    # Ray parameter at intersection
        self.sphere = sphere          # Sphere that was hit
        self.p = p                    # Intersection point
        self.normal = normal          # Surface normal, facing the incoming ray
        self.front_face = front_face  # False when the ray leaves the sphere from inside

    def set_face_normal(self, direction: Vector3, outward_normal: Vector3):
        """
        Ensures that the normal always points against the ray.
        """
        self.front_face = direction.dot(outward_normal) <= 0
        self.normal = outward_normal if self.front_face else -outward_normal
