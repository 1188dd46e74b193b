# scenes/scene_log.py
import os
import re
from typing import Iterable, List
from balltracing.core.vector import Vector3
from balltracing.geometry.sphere import Sphere

# (x,y,z)<TAB>radius<TAB>(R,G,B)<TAB>reflection<TAB>transparency[<TAB>(eR,eG,eB)]
_TRIPLE = r"\(\s*([^,()]+),\s*([^,()]+),\s*([^,()]+)\)"
_NUMBER = r"(\S+)"
_LINE = re.compile(
    r"^" + _TRIPLE + r"\t" + _NUMBER + r"\t" + _TRIPLE + r"\t" + _NUMBER + r"\t" + _NUMBER
    + r"(?:\t" + _TRIPLE + r")?\s*$"
)

def _num(value: float) -> str:
    return str(float(value))

def _triple(v: Vector3) -> str:
    return f"({_num(v.x)},{_num(v.y)},{_num(v.z)})"

def format_sphere(sphere: Sphere) -> str:
    """
    One log line for a sphere, without the trailing newline. The emission
    column is only written for spheres that emit light.
    """
    fields = [
        _triple(sphere.center),
        _num(sphere.radius),
        _triple(sphere.surface_color),
        _num(sphere.reflection),
        _num(sphere.transparency),
    ]
    e = sphere.emission_color
    if e.x != 0 or e.y != 0 or e.z != 0:
        fields.append(_triple(e))
    return "\t".join(fields)

def parse_sphere(line: str) -> Sphere:
    """
    Inverse of format_sphere.

    Raises:
        ValueError: If the line is not in the log format
    """
    match = _LINE.match(line)
    if match is None:
        raise ValueError(f"Malformed scene log line: {line!r}")
    values = match.groups()
    cx, cy, cz, radius, sr, sg, sb, reflection, transparency = (float(v) for v in values[:9])
    emission = None
    if values[9] is not None:
        emission = Vector3(*(float(v) for v in values[9:12]))
    return Sphere(Vector3(cx, cy, cz), radius, Vector3(sr, sg, sb),
                  reflection, transparency, emission)

def write_scene_log(spheres: Iterable[Sphere], path: str) -> int:
    """
    Record sphere parameters, one line each, so a random scene can be
    inspected or rendered again later. The command line writes the whole
    scene, ground and light included, so --load-scene can rebuild it.

    Returns:
        Number of spheres written
    """
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    count = 0
    with open(path, "w", encoding="utf-8") as out:
        for sphere in spheres:
            out.write(format_sphere(sphere) + "\n")
            count += 1
    return count

def read_scene_log(path: str) -> List[Sphere]:
    """
    Load spheres written by write_scene_log. Blank lines are skipped.

    Raises:
        FileNotFoundError: If the log file doesn't exist
        ValueError: If a line cannot be parsed, naming the line number
    """
    if not os.path.exists(path):
        raise FileNotFoundError(f"Scene log not found: {path}")

    spheres = []
    with open(path, "r", encoding="utf-8") as f:
        for lineno, line in enumerate(f, start=1):
            if not line.strip():
                continue
            try:
                spheres.append(parse_sphere(line))
            except ValueError as e:
                raise ValueError(f"{path}:{lineno}: {e}") from e
    return spheres
