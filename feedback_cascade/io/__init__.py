"""I/O module: configuration, seed photons and generation reports."""

from feedback_cascade.io.config import SimulationConfig, parse_config, load_config, DEFAULTS
from feedback_cascade.io.seed import default_seed, parse_seed_photons, load_seed_photons
from feedback_cascade.io.report import format_generation, log_generations

__all__ = [
    "SimulationConfig",
    "parse_config",
    "load_config",
    "DEFAULTS",
    "default_seed",
    "parse_seed_photons",
    "load_seed_photons",
    "format_generation",
    "log_generations",
]
