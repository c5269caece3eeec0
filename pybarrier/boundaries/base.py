"""Boundary-condition kinds.

Classes
-------
BoundaryConditionKind
    Interface physics a component uses when drawing mass from the
    components it encloses.
"""

from __future__ import annotations

from enum import Enum

from pybarrier.errors import BoundaryConditionError


class BoundaryConditionKind(Enum):
    """Closed set of inner-boundary transfer models.

    * ``SOURCE_TERM``: take the daughter's whole available source term.
    * ``DIRICHLET``: prescribed concentration, advective transfer.
    * ``NEUMANN``: prescribed gradient, dispersive transfer.
    * ``CAUCHY``: combined advective and dispersive transfer.
    * ``UNSET``: not configured; no transfer model can run.
    """

    SOURCE_TERM = "SOURCE_TERM"
    DIRICHLET = "DIRICHLET"
    NEUMANN = "NEUMANN"
    CAUCHY = "CAUCHY"
    UNSET = "UNSET"

    @classmethod
    def parse(cls, text: str) -> "BoundaryConditionKind":
        """Parse one of the four named kinds, ignoring case.

        Raises:
            BoundaryConditionError: For any other string, including
                ``"UNSET"``.
        """
        key = str(text).strip().upper()
        if key == cls.UNSET.value or key not in cls.__members__:
            choices = ", ".join(k.value for k in cls if k is not cls.UNSET)
            raise BoundaryConditionError(
                f"Unknown boundary condition type {text!r}. Choose one of: {choices}."
            )
        return cls[key]

    def __str__(self) -> str:
        return self.value
