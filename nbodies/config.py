"""Run configuration for a simulation."""
from dataclasses import dataclass
from enum import Enum

from . import constants as C


class ConfigurationError(ValueError):
    """Raised when simulation parameters cannot be used."""


class StepMode(Enum):
    """Which factor is handed to the velocity and position updates.

    ``ELAPSED`` passes the elapsed simulation time ``t`` of the current
    iteration (0, dt, 2*dt, ...). ``FIXED`` passes the step size ``dt``.
    """

    ELAPSED = "elapsed"
    FIXED = "fixed"


@dataclass(frozen=True)
class SimulationConfig:
    total_time: float
    dt: float
    step_mode: StepMode = StepMode.ELAPSED
    g_constant: float = C.G
    use_jit: bool = False

    def __post_init__(self):
        if not self.dt > 0:
            raise ConfigurationError(f"time step must be positive, got {self.dt!r}")

    def step_factor(self, t: float) -> float:
        """Return the integration factor for the iteration starting at ``t``."""
        if self.step_mode is StepMode.FIXED:
            return self.dt
        return t
