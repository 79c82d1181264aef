"""Point-mass bodies and their pairwise gravitational interaction.

A :class:`Body` owns its kinematic state as 2-D float64 vectors.  Mass and
label are fixed at construction.  Acceleration and net force are derived
values: they are only written by a force pass, never set directly.

``mass > 0`` is a precondition.  Nothing here checks it and degenerate
inputs (zero mass, coincident bodies) produce ``inf``/``nan`` values which
propagate silently through later steps.
"""
import numpy as np

from .constants import G


def _as_vector(values):
    v = np.asarray(values, dtype=float).reshape(-1)
    if v.size != 2:
        raise ValueError(f"expected a 2-D vector, got {v.size} components")
    return v.copy()


class Body:
    """A point mass moving in the plane."""

    def __init__(self, mass, pos, vel, label=""):
        """Create a body.

        Parameters
        ----------
        mass : float
            Mass in kilograms.  Must be positive.
        pos : array-like
            Initial ``(x, y)`` position in metres.
        vel : array-like
            Initial ``(vx, vy)`` velocity in m/s.
        label : str, optional
            Opaque tag carried through for rendering and output.
        """
        self._mass = float(mass)
        self._label = str(label)
        self.pos = _as_vector(pos)
        self.vel = _as_vector(vel)
        self._acc = np.zeros(2, dtype=np.float64)
        self._net_force = np.zeros(2, dtype=np.float64)

    @property
    def mass(self):
        return self._mass

    @property
    def label(self):
        return self._label

    @property
    def acc(self):
        """Acceleration from the most recent force pass (read-only copy)."""
        return self._acc.copy()

    @property
    def net_force(self):
        """Net force from the most recent force pass (read-only copy)."""
        return self._net_force.copy()

    def distance_to(self, other):
        """Euclidean distance between this body and ``other``."""
        dx = other.pos[0] - self.pos[0]
        dy = other.pos[1] - self.pos[1]
        return np.sqrt(dx * dx + dy * dy)

    def pairwise_force(self, other, g_constant=G):
        """Magnitude of the gravitational force between this body and ``other``.

        Unbounded as the distance goes to zero; coincident bodies give ``inf``.
        """
        distance = self.distance_to(other)
        with np.errstate(divide="ignore", invalid="ignore"):
            return g_constant * self.mass * other.mass / (distance * distance)

    def compute_net_force(self, bodies, g_constant=G):
        """Sum the forces from every other body in ``bodies``.

        The body itself is skipped by identity, so another body at the same
        coordinates still contributes.  Stores the result as the net force
        and derives the acceleration from it.
        """
        fx = 0.0
        fy = 0.0
        with np.errstate(divide="ignore", invalid="ignore"):
            for other in bodies:
                if other is self:
                    continue
                magnitude = self.pairwise_force(other, g_constant)
                distance = self.distance_to(other)
                fx += magnitude * (other.pos[0] - self.pos[0]) / distance
                fy += magnitude * (other.pos[1] - self.pos[1]) / distance
        self.apply_net_force((fx, fy))
        return self.net_force

    def apply_net_force(self, force):
        """Store an externally computed net force and derive the acceleration."""
        self._net_force = np.array(force, dtype=np.float64).reshape(2)
        with np.errstate(divide="ignore", invalid="ignore"):
            self._acc = self._net_force / self.mass

    def update_velocity(self, factor):
        """Advance the velocity by ``factor * acc``."""
        self.vel = self.vel + factor * self._acc

    def update_position(self, factor):
        """Advance the position by ``factor * vel`` using the current velocity."""
        self.pos = self.pos + factor * self.vel

    def __repr__(self):
        return (
            f"Body(mass={self.mass}, pos={self.pos.tolist()}, "
            f"vel={self.vel.tolist()}, label={self.label!r})"
        )
