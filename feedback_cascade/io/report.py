"""
Per-generation text report.

Two layouts, as written by the command-line tool: a sentence per
generation for the console, or a fixed-width table for output files.
"""

import sys
from typing import Iterable, Iterator, Optional, TextIO

from feedback_cascade.transport.generation import Generation, Termination


TABLE_HEADER = "%10s %7s %7s" % ("generation", "number", "height")


def format_generation(generation: Generation, table: bool = False) -> str:
    """One report line (no trailing newline)."""
    if table:
        return "%10d %7d %7.2f" % (generation.index, generation.size,
                                   generation.mean_height)
    return (f"There are {generation.size} photons in generation {generation.index} . "
            f"Average height is {generation.mean_height}")


def format_termination(termination: Optional[Termination], generation: Generation) -> str:
    """Closing line describing how the run ended."""
    if termination is Termination.OVERFLOW:
        return (f"Particle limit reached in generation {generation.index} "
                f"({generation.size} photons)")
    if termination is Termination.EXTINCTION:
        return f"Avalanche died out in generation {generation.index}"
    return f"Stopped at generation {generation.index} (still running)"


def log_generations(generations: Iterable[Generation], stream: Optional[TextIO] = None,
                    table: bool = False) -> Iterator[Generation]:
    """
    Pass generations through unchanged, writing a report line for each.

    Parameters:
        generations: Generation stream (e.g. a GenerationSequence)
        stream: Text stream to write to (default: stdout)
        table: Fixed-width table layout with a header line

    Yields:
        The same generations, in order
    """
    if stream is None:
        stream = sys.stdout

    if table:
        stream.write(TABLE_HEADER + "\n")

    for generation in generations:
        stream.write(format_generation(generation, table) + "\n")
        stream.flush()
        yield generation
