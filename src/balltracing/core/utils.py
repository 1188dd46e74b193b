# core/utils.py
import math
from typing import Optional
from balltracing.core.vector import Vector3

def mix(a: float, b: float, t: float) -> float:
    """
    Linear blend of a and b by t: returns a at t=0 and b at t=1.
    """
    return b * t + a * (1 - t)

def reflect(v: Vector3, n: Vector3) -> Vector3:
    """
    Reflects vector v about the normal n.
    """
    return v - n * 2 * v.dot(n)

def refract(v: Vector3, n: Vector3, eta: float) -> Optional[Vector3]:
    """
    Bends unit vector v through a surface with normal n (facing v) using the
    ratio of refractive indices eta. Returns None on total internal reflection.
    """
    cos_i = v.dot(n)
    k = 1 - eta * eta * (1 - cos_i * cos_i)
    if k < 0:
        return None
    return v * eta - n * (eta * cos_i + math.sqrt(k))
