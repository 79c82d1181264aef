import time
import numpy as np

from nbodies import Body, SimulationConfig, Simulator, Universe
from nbodies.integrators import compute_accelerations, compute_net_forces, euler_update
from nbodies.jit import net_forces_jit
from nbodies.constants import G


def time_step_paths(positions, velocities, masses, factor):
    """Time one full step as arrays and through Simulator.step on Body objects."""
    bodies = [Body(m, p, v) for m, p, v in zip(masses, positions, velocities)]
    sim = Simulator(Universe(bodies, 1e11), SimulationConfig(factor, factor))

    t0 = time.time()
    forces = compute_net_forces(positions, masses, G)
    accelerations = compute_accelerations(forces, masses)
    pos_new, vel_new = euler_update(positions, velocities, accelerations, factor)
    t1 = time.time()
    sim.step(factor)
    t2 = time.time()

    assert np.array_equal(pos_new, np.array([b.pos for b in bodies]))
    assert np.array_equal(vel_new, np.array([b.vel for b in bodies]))
    print(f"Array step  : {t1 - t0:.3f}s")
    print(f"Body step   : {t2 - t1:.3f}s")


if __name__ == "__main__":
    np.random.seed(0)
    N = 1500  # >1k bodies
    positions = np.random.random((N, 2)) * 1e11
    velocities = (np.random.random((N, 2)) - 0.5) * 6e4
    masses = np.random.random(N) * 1e24 + 1e20

    # warm up JIT
    net_forces_jit(positions[:2], masses[:2], G)

    t0 = time.time()
    baseline = compute_net_forces(positions, masses, G)
    t1 = time.time()
    accelerated = net_forces_jit(positions, masses, G)
    t2 = time.time()

    assert np.allclose(baseline, accelerated, rtol=1e-12, atol=0.0)
    print(f"Python loop: {t1 - t0:.3f}s")
    print(f"Accelerated : {t2 - t1:.3f}s")
    if t2 - t1 > 0:
        print(f"Speedup     : {(t1 - t0) / (t2 - t1):.1f}x")

    n_step = 300
    time_step_paths(positions[:n_step], velocities[:n_step], masses[:n_step], 3600.0)
