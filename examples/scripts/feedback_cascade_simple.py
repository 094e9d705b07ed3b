"""
Feedback Cascade - Simple Example

Runs one avalanche from the default seed photon (or from the YAML config
given as the only argument) and prints the per-generation report.

Usage:
    python feedback_cascade_simple.py [config.yaml]

Expected behaviour with default parameters (gain 2.0, cloud 1000):
    - Population roughly doubles per generation while photons stay inside
    - Run ends when the population exceeds the particle limit or dies out
"""

import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from feedback_cascade.io.config import load_config, parse_config
from feedback_cascade.io.report import log_generations, format_termination
from feedback_cascade.transport.engine import CascadeEngine


def run_cascade(config, table: bool = False):
    """
    Run a cascade and print one line per generation.

    Parameters:
        config: SimulationConfig
        table: Fixed-width table output

    Returns:
        Last generation
    """
    engine = CascadeEngine.from_config(config)
    seed = config.load_seed(engine.atmosphere.cloud_size)

    print(f"\n{'='*70}")
    print(f"Feedback Cascade Simulation")
    print(f"{'='*70}")
    print(f"  {engine.atmosphere}")
    print(f"  Seed photons: {len(seed)}")
    print(f"  Particle limit: {engine.particle_limit:,}")
    print(f"  Random seed: {engine.rng.seed}")
    print(f"{'='*70}\n")

    sequence = engine.run(seed)
    for _ in log_generations(sequence, table=table):
        pass

    print(f"\n{format_termination(sequence.termination, sequence.current)}")
    return sequence.current


if __name__ == "__main__":
    if len(sys.argv) > 1:
        config = load_config(sys.argv[1])
    else:
        config = parse_config({'seed': 42})

    run_cascade(config)
