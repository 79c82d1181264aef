"""numba compiled force kernel.

Same all-pairs loop as :func:`nbodies.integrators.compute_net_forces`, with
the outer loop spread over threads.  Each body writes only its own row and
sums its partners sequentially in index order.
"""

import numba as nb
import numpy as np


@nb.njit(parallel=True, error_model="numpy")
def net_forces_jit(positions, masses, g_const):
    n = masses.shape[0]
    forces = np.zeros((n, 2), dtype=np.float64)
    for i in nb.prange(n):
        xi = positions[i, 0]
        yi = positions[i, 1]
        fx = 0.0
        fy = 0.0
        for j in range(n):
            if j == i:
                continue
            dx = positions[j, 0] - xi
            dy = positions[j, 1] - yi
            distance = np.sqrt(dx * dx + dy * dy)
            magnitude = g_const * masses[i] * masses[j] / (distance * distance)
            fx += magnitude * dx / distance
            fy += magnitude * dy / distance
        forces[i, 0] = fx
        forces[i, 1] = fy
    return forces
