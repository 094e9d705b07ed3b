"""Transport module: generation sequences and the cascade engine."""

from feedback_cascade.transport.generation import Generation, GenerationSequence, Termination
from feedback_cascade.transport.engine import CascadeEngine

__all__ = ["Generation", "GenerationSequence", "Termination", "CascadeEngine"]
