"""Time: integer time stepping."""

from pybarrier.time.stepper import Stepper

__all__ = [
    "Stepper",
]
