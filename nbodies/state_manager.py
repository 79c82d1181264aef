import json
from pathlib import Path

from .physics import Body
from .universe import Universe, UniverseFormatError


def save_state(filepath, universe: Universe):
    """Serialize a universe to a JSON file."""
    data = {
        "radius": float(universe.radius),
        "bodies": [
            {
                "mass": b.mass,
                "pos": b.pos.tolist(),
                "vel": b.vel.tolist(),
                "label": b.label,
            }
            for b in universe.bodies
        ],
    }
    Path(filepath).write_text(json.dumps(data))


def _vector(item, key, index):
    if key not in item:
        raise UniverseFormatError(f"body {index}: missing {key!r}")
    try:
        vector = [float(v) for v in item[key]]
    except (TypeError, ValueError):
        raise UniverseFormatError(f"body {index}: invalid {key} {item[key]!r}") from None
    if len(vector) != 2:
        raise UniverseFormatError(
            f"body {index}: {key} needs two components, got {len(vector)}"
        )
    return vector


def load_state(filepath) -> Universe:
    """Load a universe from a JSON file.

    Raises :class:`~nbodies.universe.UniverseFormatError` when a body lacks a
    positive mass or either of its vectors.
    """
    data = json.loads(Path(filepath).read_text())
    bodies = []
    for index, item in enumerate(data.get("bodies", [])):
        mass = item.get("mass")
        if not isinstance(mass, (int, float)) or isinstance(mass, bool) or not mass > 0:
            raise UniverseFormatError(f"body {index}: mass must be positive, got {mass!r}")
        bodies.append(
            Body(
                float(mass),
                _vector(item, "pos", index),
                _vector(item, "vel", index),
                label=item.get("label", ""),
            )
        )
    return Universe(bodies, data.get("radius", 0.0))
