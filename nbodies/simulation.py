import logging
from enum import Enum
from typing import Callable, Optional

import numpy as np

from .config import SimulationConfig
from .integrators import compute_net_forces
from .universe import Universe
from .utils import format_elapsed

logger = logging.getLogger(__name__)


class SimulationState(Enum):
    IDLE = "idle"
    STEPPING = "stepping"
    DONE = "done"


class Simulator:
    """Fixed-step driver for a :class:`~nbodies.universe.Universe`.

    Every iteration runs three passes over the whole body collection, each
    finishing before the next starts:

    1. net force and acceleration for every body, from one position snapshot
    2. velocity update for every body
    3. position update for every body

    ``on_frame`` is called with the simulator after each iteration.
    """

    def __init__(
        self,
        universe: Universe,
        config: SimulationConfig,
        on_frame: Optional[Callable[["Simulator"], None]] = None,
    ):
        self.universe = universe
        self.config = config
        self.on_frame = on_frame
        self.state = SimulationState.IDLE
        self.elapsed = 0.0
        self.steps = 0

    @property
    def bodies(self):
        return self.universe.bodies

    def _net_forces(self) -> np.ndarray:
        positions = np.array([b.pos for b in self.bodies], dtype=np.float64).reshape(-1, 2)
        masses = np.array([b.mass for b in self.bodies], dtype=np.float64)
        if self.config.use_jit:
            from .jit import net_forces_jit

            return net_forces_jit(positions, masses, self.config.g_constant)
        return compute_net_forces(positions, masses, self.config.g_constant)

    def step(self, factor: float) -> None:
        """Run one force pass followed by the velocity and position passes."""
        forces = self._net_forces()
        for body, force in zip(self.bodies, forces):
            body.apply_net_force(force)

        for body in self.bodies:
            body.update_velocity(factor)

        for body in self.bodies:
            body.update_position(factor)

    def run(self) -> None:
        """Advance from ``t = 0`` until ``t >= total_time``."""
        if self.state is not SimulationState.IDLE:
            raise RuntimeError(f"Simulation already {self.state.value}")

        total_time = self.config.total_time
        dt = self.config.dt
        logger.info(
            "Running %d bodies for %s with dt=%s (%s mode)",
            len(self.bodies),
            format_elapsed(total_time),
            format_elapsed(dt),
            self.config.step_mode.value,
        )

        self.state = SimulationState.STEPPING
        t = 0.0
        while t < total_time:
            self.step(self.config.step_factor(t))
            self.steps += 1
            t += dt
            self.elapsed = t
            if self.on_frame is not None:
                self.on_frame(self)

        self.state = SimulationState.DONE
        logger.info("Finished after %d steps", self.steps)
