"""2-D N-body gravity simulation."""

from importlib.metadata import PackageNotFoundError, version

from .physics import Body
from .integrators import compute_net_forces, compute_accelerations, euler_update
from .config import ConfigurationError, SimulationConfig, StepMode
from .constants import G
from .simulation import Simulator, SimulationState
from .universe import (
    Universe,
    UniverseFormatError,
    read_universe,
    write_universe,
    format_universe,
)
from .state_manager import save_state, load_state
from .analysis import system_energy, total_momentum, center_of_mass
try:
    __version__ = version("nbodies")
except PackageNotFoundError:
    # Fallback when package metadata is unavailable (e.g. running from source)
    __version__ = "0.0.0"

__all__ = [
    "Body",
    "compute_net_forces",
    "compute_accelerations",
    "euler_update",
    "ConfigurationError",
    "SimulationConfig",
    "StepMode",
    "G",
    "Simulator",
    "SimulationState",
    "Universe",
    "UniverseFormatError",
    "read_universe",
    "write_universe",
    "format_universe",
    "save_state",
    "load_state",
    "system_energy",
    "total_momentum",
    "center_of_mass",
    "__version__",
]
