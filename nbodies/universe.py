"""Universe container and the plain-text body format.

The text format is::

    N
    radius
    x y vx vy mass label      (N records)

Fields are whitespace separated.  :func:`write_universe` emits the same
layout with the numeric body fields in ``%7.4e`` notation so its output can
be read back by :func:`read_universe`.
"""
from dataclasses import dataclass, field
import io
import logging
from pathlib import Path
from typing import List, TextIO, Union

from . import constants as C
from .physics import Body

logger = logging.getLogger(__name__)


class UniverseFormatError(ValueError):
    """Raised when a universe description cannot be parsed."""


@dataclass
class Universe:
    """The simulated bodies plus the display radius.

    ``radius`` only scales rendering; it never enters the physics.
    """

    bodies: List[Body] = field(default_factory=list)
    radius: float = 0.0

    @property
    def count(self) -> int:
        return len(self.bodies)


def _parse_float(token: str, what: str, lineno: int) -> float:
    try:
        return float(token)
    except ValueError:
        raise UniverseFormatError(f"line {lineno}: invalid {what} {token!r}") from None


def parse_record(line: str, lineno: int = 0) -> Body:
    """Build a :class:`Body` from one ``x y vx vy mass label`` record."""
    fields = line.split()
    if len(fields) != C.RECORD_FIELDS:
        raise UniverseFormatError(
            f"line {lineno}: expected {C.RECORD_FIELDS} fields, got {len(fields)}"
        )
    x, y, vx, vy, mass = (
        _parse_float(tok, name, lineno)
        for tok, name in zip(fields[:5], ("x", "y", "vx", "vy", "mass"))
    )
    if not mass > 0:
        raise UniverseFormatError(f"line {lineno}: mass must be positive, got {mass!r}")
    return Body(mass, [x, y], [vx, vy], label=fields[5])


def read_universe(source: Union[str, Path, TextIO]) -> Universe:
    """Load a universe from a path or an open text stream."""
    if isinstance(source, (str, Path)):
        with open(source) as f:
            return read_universe(f)

    lines = [
        (lineno, line.strip())
        for lineno, line in enumerate(source, start=1)
        if line.strip()
    ]
    if len(lines) < 2:
        raise UniverseFormatError("missing body count or universe radius")

    lineno, text = lines[0]
    try:
        count = int(text)
    except ValueError:
        raise UniverseFormatError(f"line {lineno}: invalid body count {text!r}") from None
    if count < 0:
        raise UniverseFormatError(f"line {lineno}: negative body count {count}")

    lineno, text = lines[1]
    radius = _parse_float(text, "universe radius", lineno)

    records = lines[2:]
    if len(records) != count:
        raise UniverseFormatError(
            f"declared {count} bodies but found {len(records)} records"
        )
    bodies = [parse_record(text, lineno) for lineno, text in records]
    logger.debug("Read %d bodies, universe radius %r", count, radius)
    return Universe(bodies, radius)


def format_record(body: Body) -> str:
    return C.RECORD_FORMAT % (
        body.pos[0],
        body.pos[1],
        body.vel[0],
        body.vel[1],
        body.mass,
        body.label,
    )


def format_universe(universe: Universe) -> str:
    """Render the universe in the text format, one record per line."""
    out = io.StringIO()
    write_universe(universe, out)
    return out.getvalue()


def write_universe(universe: Universe, target: Union[str, Path, TextIO]) -> None:
    """Write the universe to a path or an open text stream."""
    if isinstance(target, (str, Path)):
        with open(target, "w") as f:
            write_universe(universe, f)
        return
    target.write(f"{universe.count}\n")
    target.write(f"{float(universe.radius)!r}\n")
    for body in universe.bodies:
        target.write(format_record(body) + "\n")
