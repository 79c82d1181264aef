"""Diagnostics computed from the body state.

These only observe the system; nothing here feeds back into the integration.
"""
import csv
import os
from collections import deque

import numpy as np

from . import constants as C


def system_energy(bodies, g_constant=C.G):
    """Return kinetic, potential and total energy of the system."""
    kinetic = 0.0
    potential = 0.0
    for b in bodies:
        kinetic += 0.5 * b.mass * np.dot(b.vel, b.vel)
    for i, bi in enumerate(bodies):
        for bj in bodies[i + 1:]:
            r = np.linalg.norm(bj.pos - bi.pos)
            if r == 0:
                continue
            potential -= g_constant * bi.mass * bj.mass / r
    return kinetic, potential, kinetic + potential


def total_momentum(bodies):
    p = np.zeros(2, dtype=float)
    for b in bodies:
        p += b.mass * b.vel
    return p


def center_of_mass(bodies):
    """Mass-weighted position and velocity, or ``(None, None)`` without mass."""
    total_mass = sum(b.mass for b in bodies)
    if not bodies or total_mass == 0:
        return None, None
    pos = sum(b.mass * b.pos for b in bodies) / total_mass
    vel = sum(b.mass * b.vel for b in bodies) / total_mass
    return pos, vel


class EnergyMonitor:
    """Track the relative drift of total energy over a run."""

    def __init__(self, max_points=500):
        self.history = deque(maxlen=max_points)
        self.initial_energy = None

    def set_initial_energy(self, bodies, g_constant=C.G):
        _, _, self.initial_energy = system_energy(bodies, g_constant)
        self.history.clear()

    def update(self, bodies, g_constant=C.G):
        if self.initial_energy is None or self.initial_energy == 0:
            return
        _, _, current_energy = system_energy(bodies, g_constant)
        drift = ((current_energy - self.initial_energy) / abs(self.initial_energy)) * 100
        self.history.append(drift)

    def export_csv(self, file, delimiter=","):
        """Write one ``step,energy_drift_percent`` row per retained update.

        ``file`` is a path or an already open text stream; a path is opened
        and closed here, a stream is left open for the caller. Only the last
        ``max_points`` updates are kept, so step numbers count from the oldest
        retained one.
        """
        close = False
        if isinstance(file, (str, bytes, os.PathLike)):
            f = open(file, "w", newline="")
            close = True
        else:
            f = file
        try:
            writer = csv.writer(f, delimiter=delimiter)
            writer.writerow(["step", "energy_drift_percent"])
            for i, drift in enumerate(self.history):
                writer.writerow([i, drift])
        finally:
            if close:
                f.close()
