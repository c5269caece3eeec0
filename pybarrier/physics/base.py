"""Abstract base class for nuclide transport models.

Every barrier component model (waste form, package, buffer, ...)
inherits from :class:`NuclideModel` and implements the common
capability set the component tree drives each timestep.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Mapping, Sequence

from pybarrier.constants import NEVER
from pybarrier.geometry.annulus import Geometry
from pybarrier.materials.base import CompositionMass, MaterialLot
from pybarrier.materials.tools import sum_lots


class NuclideModel(ABC):
    """Abstract nuclide transport model of one barrier component.

    A model owns its geometry, its material inventory and two
    time-indexed histories.  Daughter components are only ever borrowed
    for the duration of :meth:`update_inner_bc`.

    Attributes:
        name: Component identifier.
        model_type: Short identifier of the model family.
        geometry: The component :class:`~pybarrier.geometry.Geometry`.
        inventory: Material lots, oldest first.
        vec_hist: ``time -> CompositionMass`` of the whole inventory.
        conc_hist: ``time -> {iso: kg/m³}``.
    """

    model_type: str

    def __init__(self, name: str = "unnamed", geometry: Geometry | None = None) -> None:
        self.name = name
        self.geometry = geometry if geometry is not None else Geometry()
        self.inventory: list[MaterialLot] = []
        self.vec_hist: dict[int, CompositionMass] = {}
        self.conc_hist: dict[int, dict[int, float]] = {}
        self._last_updated = NEVER

    # ------------------------------------------------------------------
    # Timestep interface
    # ------------------------------------------------------------------

    @abstractmethod
    def transport_nuclides(self, time: int) -> None:
        """Advance the model to *time* and refresh its histories."""

    @abstractmethod
    def update_inner_bc(self, time: int, daughters: Sequence["NuclideModel"]) -> None:
        """Draw mass across the inner boundary from each daughter."""

    # ------------------------------------------------------------------
    # Boundary conditions
    # ------------------------------------------------------------------

    @abstractmethod
    def source_term_bc(self) -> CompositionMass:
        """Composition and mass (kg) that could leave the component now."""

    @abstractmethod
    def dirichlet_bc(self) -> dict[int, float]:
        """Boundary concentration per isotope (kg/m³)."""

    @abstractmethod
    def neumann_bc(self, c_ext: Mapping[int, float], r_ext: float) -> dict[int, float]:
        """Concentration gradient per isotope against an external state (kg/m⁴)."""

    @abstractmethod
    def cauchy_bc(self, c_ext: Mapping[int, float], r_ext: float) -> dict[int, float]:
        """Advective-dispersive flux per isotope (kg/m²/s)."""

    # ------------------------------------------------------------------
    # Inventory
    # ------------------------------------------------------------------

    @abstractmethod
    def absorb(self, lot: MaterialLot) -> None:
        """Add a material lot to the inventory."""

    @abstractmethod
    def extract(self, composition: Mapping[int, float], mass: float) -> MaterialLot:
        """Remove *mass* kg of *composition* from the inventory."""

    @abstractmethod
    def copy(self) -> "NuclideModel":
        """Return a model with the same parameters and a fresh state."""

    def total_inventory(self) -> CompositionMass:
        """Composition and mass of everything contained, degraded or not."""
        return sum_lots(self.inventory)

    @property
    def last_updated(self) -> int:
        """Time of the last history refresh (``NEVER`` before the first)."""
        return self._last_updated

    def history_times(self) -> list[int]:
        """Times with a recorded history entry, ascending."""
        return sorted(self.vec_hist)

    def params_table(self) -> dict[str, Any]:
        """Model parameters for reporting."""
        return {}

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(name={self.name!r}, "
            f"n_lots={len(self.inventory)}, last_updated={self._last_updated})"
        )
