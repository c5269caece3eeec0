"""Time stepping utilities.

Classes
-------
Stepper
    Fixed-size integer time stepping (one step is one month).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

import numpy as np


@dataclass
class Stepper:
    """Fixed integer time stepper.

    Args:
        t_end: Last timestep (inclusive).
        dt: Step size in timesteps.  Defaults to 1.
        t_start: First timestep.  Defaults to 0.

    Example::

        stepper = Stepper(t_end=12)  # one year, monthly
        for t in stepper:
            tree.step(t)
    """

    t_end: int
    dt: int = 1
    t_start: int = 0

    def __post_init__(self) -> None:
        if int(self.dt) != self.dt or self.dt <= 0:
            raise ValueError(f"dt must be a positive integer, got {self.dt!r}.")
        if self.t_end < self.t_start:
            raise ValueError("t_end must not precede t_start.")
        self.t_start = int(self.t_start)
        self.t_end = int(self.t_end)
        self.dt = int(self.dt)

    @property
    def n_steps(self) -> int:
        """Number of timesteps visited, including the first."""
        return (self.t_end - self.t_start) // self.dt + 1

    @property
    def times(self) -> np.ndarray:
        """Array of all visited times."""
        return np.arange(self.t_start, self.t_end + 1, self.dt)

    def __iter__(self) -> Iterator[int]:
        """Yield each timestep in order."""
        t = self.t_start
        while t <= self.t_end:
            yield t
            t += self.dt

    def __repr__(self) -> str:
        return f"Stepper(t_end={self.t_end}, dt={self.dt}, t_start={self.t_start})"
