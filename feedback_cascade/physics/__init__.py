"""Physics module: atmosphere model and feedback kernels."""

from feedback_cascade.physics.atmosphere import Atmosphere
from feedback_cascade.physics.feedback import FIELD_AXIS

__all__ = ["Atmosphere", "FIELD_AXIS"]
