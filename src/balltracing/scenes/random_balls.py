# scenes/random_balls.py
from typing import Optional
import numpy as np
from balltracing.core.vector import Vector3
from balltracing.geometry.sphere import Sphere
from balltracing.geometry.world import Scene

BALL_COUNT = 15

# Huge sphere standing in for the floor
GROUND_CENTER = Vector3(0, -10004, -20)
GROUND_RADIUS = 10001

LIGHT_CENTER = Vector3(0, 20, -30)
LIGHT_RADIUS = 3
LIGHT_EMISSION = Vector3(3, 3, 3)

def ground() -> Sphere:
    """Mirror-like white floor."""
    return Sphere(GROUND_CENTER, GROUND_RADIUS, Vector3(1.0, 1.0, 1.0), 1.0, 0.0)

def light() -> Sphere:
    """Emissive sphere above and behind the balls."""
    return Sphere(LIGHT_CENTER, LIGHT_RADIUS, Vector3(0, 0, 0), 0.0, 0.0, LIGHT_EMISSION)

def random_ball(rng: np.random.Generator) -> Sphere:
    """
    A glassy ball somewhere on the z=-20 plane with a pale random tint.
    """
    x = float(rng.uniform(-10, 10))
    y = float(rng.uniform(-2, 2))
    z = -20.0
    radius = float(rng.uniform(0.3, 1.2))
    color = Vector3(float(rng.uniform(0.5, 0.9)),
                    float(rng.uniform(0.5, 0.9)),
                    float(rng.uniform(0.5, 0.9)))
    reflection = float(rng.uniform(0.2, 0.5))
    transparency = 0.9
    return Sphere(Vector3(x, y, z), radius, color, reflection, transparency)

def random_balls_scene(count: int = BALL_COUNT, rng: Optional[np.random.Generator] = None,
                       with_light: bool = False) -> Scene:
    """
    Build the demo scene: the ground sphere followed by count random balls,
    plus an optional light source at the end.

    Args:
        count: Number of random balls
        rng: Random generator, a fresh unseeded one when omitted
        with_light: Append an emissive sphere so diffuse hits receive light

    Returns:
        Scene with the spheres in insertion order
    """
    if count < 0:
        raise ValueError(f"Ball count must not be negative, got {count}")
    if rng is None:
        rng = np.random.default_rng()

    scene = Scene()
    scene.add(ground())
    for _ in range(count):
        scene.add(random_ball(rng))
    if with_light:
        scene.add(light())
    return scene
