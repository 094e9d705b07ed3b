"""
Simulation configuration.

Options use the same names as the command-line tool (gain, free-path,
cell-length, cloud-size, field-magnitude, particle-limit, seed,
seed-photons); underscores are accepted in place of hyphens. Values may be
numbers or numeric strings, as read from YAML or the command line.

Example config.yaml:

    gain: 1.5
    free-path: 100
    cloud-size: 1000
    particle-limit: 50000
    seed: 42
    seed-photons: seeds.txt
"""

import math
from pathlib import Path
from typing import List, Mapping, Optional, Union

import yaml

from feedback_cascade.core.exceptions import ConfigurationError
from feedback_cascade.core.particle import Particle
from feedback_cascade.io.seed import default_seed, load_seed_photons
from feedback_cascade.physics.atmosphere import Atmosphere, ATMOSPHERE_PARAMETERS


# option name -> Atmosphere keyword
ATMOSPHERE_OPTIONS = {
    'gain': 'multiplication',
    'free_path': 'photon_free_path',
    'cell_length': 'cell_length',
    'cloud_size': 'cloud_size',
    'field_magnitude': 'field_magnitude',
}

DEFAULTS = {
    **{option: ATMOSPHERE_PARAMETERS[keyword][0]
       for option, keyword in ATMOSPHERE_OPTIONS.items()},
    'particle_limit': 10000,
    'seed': None,
    'seed_photons': None,
}


def _parse_float(option: str, value) -> float:
    if isinstance(value, bool):
        raise ConfigurationError(option, value)
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise ConfigurationError(option, value) from None
    if not math.isfinite(number):
        raise ConfigurationError(option, value, "must be finite")
    return number


def _parse_int(option: str, value, minimum: int) -> int:
    if isinstance(value, bool):
        raise ConfigurationError(option, value, "not a valid integer")
    if isinstance(value, float) and not value.is_integer():
        raise ConfigurationError(option, value, "not a valid integer")
    try:
        number = int(value)
    except (TypeError, ValueError):
        raise ConfigurationError(option, value, "not a valid integer") from None
    if number < minimum:
        raise ConfigurationError(option, value, f"must be >= {minimum}")
    return number


class SimulationConfig:
    """
    Validated settings for one run.

    Parameters:
        atmosphere: Keyword arguments for Atmosphere
        particle_limit: Population size that stops the run
        seed: Random seed (None = not reproducible)
        seed_photons: Path of the seed photon file (None = default seed)
    """

    def __init__(self, atmosphere: Optional[dict] = None, particle_limit: int = 10000,
                 seed: Optional[int] = None,
                 seed_photons: Optional[Union[str, Path]] = None):
        self.atmosphere = dict(atmosphere or {})
        self.particle_limit = particle_limit
        self.seed = seed
        self.seed_photons = Path(seed_photons) if seed_photons is not None else None

    def build_atmosphere(self) -> Atmosphere:
        return Atmosphere(**self.atmosphere)

    def load_seed(self, cloud_size: Optional[float] = None) -> List[Particle]:
        """Seed photons from the configured file, or the default seed."""
        if self.seed_photons is not None:
            return load_seed_photons(self.seed_photons)
        if cloud_size is None:
            cloud_size = self.build_atmosphere().cloud_size
        return default_seed(cloud_size)

    def __repr__(self) -> str:
        return (f"SimulationConfig(atmosphere={self.atmosphere}, "
                f"particle_limit={self.particle_limit}, seed={self.seed}, "
                f"seed_photons={self.seed_photons})")


def parse_config(options: Optional[Mapping] = None) -> SimulationConfig:
    """
    Validate raw options and build a SimulationConfig.

    Missing options take their DEFAULTS value. Every supplied option is
    checked before anything is built, so a bad value never leaves a partly
    applied configuration behind.

    Raises:
        ConfigurationError: unknown option, unparseable or out-of-range value
    """
    values = dict(DEFAULTS)
    for key, value in (options or {}).items():
        option = str(key).replace('-', '_')
        if option not in DEFAULTS:
            raise ConfigurationError(str(key), value, "unknown option")
        values[option] = value

    atmosphere = {ATMOSPHERE_OPTIONS[option]: _parse_float(option.replace('_', '-'), values[option])
                  for option in ATMOSPHERE_OPTIONS}
    particle_limit = _parse_int('particle-limit', values['particle_limit'], minimum=1)
    seed = values['seed']
    if seed is not None:
        seed = _parse_int('seed', seed, minimum=0)

    # Range checks live in Atmosphere; run them now rather than at first use
    try:
        Atmosphere(**atmosphere)
    except ConfigurationError as exc:
        option = {v: k for k, v in ATMOSPHERE_OPTIONS.items()}[exc.option]
        raise ConfigurationError(option.replace('_', '-'), exc.value, exc.reason) from exc

    return SimulationConfig(atmosphere, particle_limit, seed, values['seed_photons'])


def load_config(path: Union[str, Path]) -> SimulationConfig:
    """
    Read a YAML configuration file.

    Raises:
        FileNotFoundError: missing file
        ConfigurationError: file is not a mapping, or invalid option
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(path, 'r') as f:
        options = yaml.safe_load(f)

    if options is None:
        options = {}
    if not isinstance(options, dict):
        raise ConfigurationError('config', str(path), "expected a mapping of options")

    config = parse_config(options)

    # Relative seed files are resolved against the config file
    if config.seed_photons is not None and not config.seed_photons.is_absolute():
        config.seed_photons = path.parent / config.seed_photons

    return config
