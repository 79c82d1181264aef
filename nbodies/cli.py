"""Command line entry point.

Usage: ``nbodies <time> <time step> <universe file> [options]``

Prints the final state of the universe to standard output in the same text
format the universe file uses.
"""
import argparse
import logging
import sys

from . import constants as C
from .analysis import EnergyMonitor
from .config import SimulationConfig, StepMode
from .simulation import Simulator
from .state_manager import save_state
from .universe import format_universe, read_universe

logger = logging.getLogger(__name__)

USAGE_MESSAGE = (
    "Incorrect amount of arguments.\n"
    "Usage: nbodies <time> <time step> <universe file>"
)
FAULTY_ARGUMENTS_MESSAGE = "Faulty command line arguments were supplied."


class _ArgumentError(Exception):
    pass


class _Parser(argparse.ArgumentParser):
    def error(self, message):
        raise _ArgumentError(message)


def build_parser() -> argparse.ArgumentParser:
    parser = _Parser(prog="nbodies", description="2-D N-body gravity simulation")
    parser.add_argument("time", help="Total simulated time in seconds")
    parser.add_argument("time_step", help="Time step in seconds")
    parser.add_argument("universe_file", help="Universe description file")
    parser.add_argument("--no-display", action="store_true", help="Run without a window")
    parser.add_argument("--mute", action="store_true", help="Do not play the soundtrack")
    parser.add_argument(
        "--fixed-step",
        action="store_true",
        help="Integrate with the time step instead of the elapsed time",
    )
    parser.add_argument("--jit", action="store_true", help="Use the numba force kernel")
    parser.add_argument("--images-dir", default=C.IMAGES_DIR, help="Directory of body images")
    parser.add_argument("--soundtrack", default=C.SOUNDTRACK_FILE, help="Soundtrack file")
    parser.add_argument("--save-state", metavar="JSON", help="Also save the final state as JSON")
    parser.add_argument("--energy-csv", metavar="CSV", help="Export the energy drift history")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def _run(args) -> None:
    config = SimulationConfig(
        total_time=float(args.time),
        dt=float(args.time_step),
        step_mode=StepMode.FIXED if args.fixed_step else StepMode.ELAPSED,
        use_jit=args.jit,
    )
    universe = read_universe(args.universe_file)
    logger.info(
        "Loaded %d bodies, universe radius %r",
        universe.count,
        universe.radius,
    )

    hooks = []
    monitor = None
    if args.energy_csv:
        monitor = EnergyMonitor()
        monitor.set_initial_energy(universe.bodies, config.g_constant)
        hooks.append(lambda sim: monitor.update(sim.bodies, config.g_constant))

    def on_frame(sim):
        for hook in hooks:
            hook(sim)

    renderer = None
    try:
        if not args.no_display:
            from .rendering import Renderer

            renderer = Renderer(universe, images_dir=args.images_dir)
            hooks.append(renderer.on_frame)
            renderer.draw()

        if not args.mute:
            from .audio import play_soundtrack

            play_soundtrack(args.soundtrack)

        Simulator(universe, config, on_frame=on_frame if hooks else None).run()
    finally:
        if not args.mute:
            from .audio import stop_soundtrack

            stop_soundtrack()
        if renderer is not None:
            renderer.close()

    print(format_universe(universe), end="")
    if args.save_state:
        save_state(args.save_state, universe)
    if monitor is not None:
        monitor.export_csv(args.energy_csv)


def main(argv=None) -> int:
    parser = build_parser()
    try:
        args = parser.parse_args(sys.argv[1:] if argv is None else argv)
    except _ArgumentError:
        print(USAGE_MESSAGE)
        return C.EXIT_FAILURE

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        _run(args)
    except (ValueError, OSError, RuntimeError) as exc:
        # Configuration and format errors are ValueErrors, pygame.error a RuntimeError.
        logger.debug("Run failed: %s", exc)
        print(FAULTY_ARGUMENTS_MESSAGE)
        return C.EXIT_FAILURE
    return C.EXIT_SUCCESS


if __name__ == "__main__":  # pragma: no cover - manual tool
    sys.exit(main())
