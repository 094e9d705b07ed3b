"""
Seed photon input.

Text format, one record per line, whitespace separated:

    POS_X POS_Y POS_Z DIR_X DIR_Y DIR_Z ENERGY [COUNT]

COUNT defaults to 1 and expands to that many identical photons. Directions
need not be normalized. Blank lines are ignored.
"""

from pathlib import Path
from typing import Iterable, List, Union

from feedback_cascade.core.exceptions import SeedFormatError
from feedback_cascade.core.particle import Photon
from feedback_cascade.core.vector import Vector3


def default_seed(cloud_size: float) -> List[Photon]:
    """One downward photon of unit energy in the middle of the cloud."""
    return [Photon(Vector3(0.0, 0.0, cloud_size / 2), Vector3(0.0, 0.0, -1.0), 1.0)]


def parse_seed_line(line: str, line_number: int = 1) -> List[Photon]:
    """
    Parse one seed record.

    Raises:
        SeedFormatError: fewer than 7 fields, non-numeric field, negative
            count, zero direction or non-positive energy
    """
    fields = line.split()
    if len(fields) < 7:
        raise SeedFormatError(line_number, line,
                              f"expected at least 7 fields, got {len(fields)}")

    try:
        values = [float(f) for f in fields[:7]]
        count = int(fields[7]) if len(fields) > 7 else 1
    except ValueError as exc:
        raise SeedFormatError(line_number, line, str(exc)) from exc

    if count < 0:
        raise SeedFormatError(line_number, line, f"negative count {count}")

    try:
        photon = Photon(Vector3.of(values[0:3]), Vector3.of(values[3:6]), values[6])
    except ValueError as exc:
        raise SeedFormatError(line_number, line, str(exc)) from exc

    return [photon] * count


def parse_seed_photons(lines: Iterable[str]) -> List[Photon]:
    """Parse seed records, keeping file order."""
    seed = []
    for line_number, line in enumerate(lines, start=1):
        if not line.strip():
            continue
        seed.extend(parse_seed_line(line, line_number))
    return seed


def load_seed_photons(path: Union[str, Path]) -> List[Photon]:
    """
    Read seed photons from a file.

    Raises:
        FileNotFoundError: missing file
        SeedFormatError: malformed record
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Seed photon file not found: {path}")

    with open(path, 'r') as f:
        return parse_seed_photons(f)
