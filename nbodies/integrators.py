import numpy as np

from . import constants as C


def compute_net_forces(positions: np.ndarray, masses: np.ndarray, g_constant: float = C.G) -> np.ndarray:
    """Net gravitational force on every body from a snapshot of the system.

    Each body sums the pairwise forces of all the others in index order,
    skipping its own index.  The per-pair expression matches
    :meth:`nbodies.physics.Body.compute_net_force` term for term, so both
    paths give bit-identical results.

    Coincident bodies are not guarded against and yield ``nan``.
    """
    positions = np.asarray(positions, dtype=np.float64)
    masses = np.asarray(masses, dtype=np.float64)
    n = len(masses)
    forces = np.zeros((n, 2), dtype=np.float64)

    with np.errstate(divide="ignore", invalid="ignore"):
        for i in range(n):
            xi, yi = positions[i]
            fx = 0.0
            fy = 0.0
            for j in range(n):
                if j == i:
                    continue
                dx = positions[j, 0] - xi
                dy = positions[j, 1] - yi
                distance = np.sqrt(dx * dx + dy * dy)
                magnitude = g_constant * masses[i] * masses[j] / (distance * distance)
                fx += magnitude * dx / distance
                fy += magnitude * dy / distance
            forces[i, 0] = fx
            forces[i, 1] = fy
    return forces


def compute_accelerations(forces: np.ndarray, masses: np.ndarray) -> np.ndarray:
    """Divide each net force by its body's mass."""
    forces = np.asarray(forces, dtype=np.float64)
    masses = np.asarray(masses, dtype=np.float64)
    with np.errstate(divide="ignore", invalid="ignore"):
        return forces / masses[:, np.newaxis]


def euler_update(
    positions,
    velocities,
    accelerations,
    factor,
) -> tuple[np.ndarray, np.ndarray]:
    """Explicit Euler update, velocity first.

    The position is advanced with the velocity produced in the same call.
    """
    vel_new = velocities + factor * accelerations
    pos_new = positions + factor * vel_new
    return pos_new, vel_new
