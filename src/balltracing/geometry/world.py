# geometry/world.py
import math
from typing import Iterator, List, Optional
from balltracing.core.vector import Vector3
from balltracing.geometry.hittable import HitRecord
from balltracing.geometry.sphere import Sphere

class Scene:
    """
    An ordered list of spheres. Every query scans the whole list; the order in
    which spheres were added decides ties.
    """
    def __init__(self, spheres: Optional[List[Sphere]] = None):
        self.objects: List[Sphere] = list(spheres) if spheres else []

    def add(self, sphere: Sphere):
        self.objects.append(sphere)

    def clear(self):
        self.objects.clear()

    def __len__(self) -> int:
        return len(self.objects)

    def __iter__(self) -> Iterator[Sphere]:
        return iter(self.objects)

    def __getitem__(self, index: int) -> Sphere:
        return self.objects[index]

    def lights(self) -> List[Sphere]:
        return [obj for obj in self.objects if obj.is_light]

    def hit(self, origin: Vector3, direction: Vector3) -> Optional[HitRecord]:
        """
        Returns the nearest intersection along the ray, or None.
        Only t and sphere are filled in on the returned record.
        """
        tnear = math.inf
        nearest = None
        for obj in self.objects:
            hit = obj.intersect(origin, direction)
            if hit is None:
                continue
            t0, t1 = hit
            # Origin inside the sphere: use the far intersection
            if t0 < 0:
                t0 = t1
            if t0 < tnear:
                tnear = t0
                nearest = obj

        if nearest is None:
            return None
        return HitRecord(t=tnear, sphere=nearest)

    def occluded_by(self, origin: Vector3, direction: Vector3, skip: Sphere) -> Iterator[Sphere]:
        """
        Yields, in scene order, every sphere other than skip that the ray hits.
        """
        for obj in self.objects:
            if obj is skip:
                continue
            if obj.intersect(origin, direction) is not None:
                yield obj
