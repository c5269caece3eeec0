"""Congruent-release model of a degrading engineered barrier.

The component releases its contained contaminants at a rate set solely
by its degradation rate: if it degrades by 15 % per timestep, another
15 % of the contained mass becomes available at its boundaries each
timestep.  This suits the waste form, waste package, buffer and near
field of a repository; the far field and biosphere do not degrade and
are not represented by it.

Boundary conditions at the component's outer surface:

* source term:  ``(composition, f_deg * M)``
* Dirichlet:    ``C_i = x_i f_deg M / V``
* Neumann:      ``dC_i/dr = (C_i - C_ext,i) / (r_mid - r_ext)``
* Cauchy:       ``q_i = -D(Z_i) dC_i/dr + v C_i``

where ``f_deg`` is the total degraded fraction, ``M`` the contained
mass, ``x_i`` the mass fraction of isotope ``i`` and ``Z_i`` its
element.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Sequence

from pybarrier.boundaries.base import BoundaryConditionKind
from pybarrier.boundaries.interface import candidate_transfer
from pybarrier.constants import NEVER, SENTINEL_ISOTOPE
from pybarrier.errors import (
    GeometryError,
    InsufficientMassError,
    RangeError,
    TemporalOrderError,
)
from pybarrier.geometry.annulus import Geometry
from pybarrier.materials.base import CompositionMass, MaterialLot, element_of
from pybarrier.materials.library import DispersionTable
from pybarrier.materials.tools import (
    comp_to_conc_map,
    extract_by_composition,
    sum_lots,
)
from pybarrier.physics.base import NuclideModel

logger = logging.getLogger(__name__)

_ROUND_OFF = 1e-12


class DegradingBarrier(NuclideModel):
    """Barrier component releasing contaminants congruently with degradation.

    Args:
        name: Component identifier.
        degradation_rate: Fraction degraded per timestep, in [0, 1].
        advective_velocity: Advective velocity through the component (m/s).
        dispersion: Hydrodynamic dispersion coefficient (m²/s), either a
            single value for every element or a
            :class:`~pybarrier.materials.DispersionTable`.
        bc_kind: Inner-boundary transfer model, a
            :class:`~pybarrier.boundaries.BoundaryConditionKind` or its
            name.
        geometry: Component geometry.  Defaults to a degenerate one.

    Raises:
        RangeError: If the rate, velocity or dispersion is out of range.

    Example::

        buffer = DegradingBarrier(
            name="buffer",
            degradation_rate=0.01,
            advective_velocity=1e-10,
            bc_kind="CAUCHY",
            geometry=Geometry(inner_radius=0.5, outer_radius=1.0, length=4.0),
        )
    """

    model_type = "degrading_barrier"

    def __init__(
        self,
        name: str = "unnamed",
        degradation_rate: float = 0.0,
        advective_velocity: float = 0.0,
        dispersion: float | DispersionTable = 0.0,
        bc_kind: BoundaryConditionKind | str = BoundaryConditionKind.UNSET,
        geometry: Geometry | None = None,
    ) -> None:
        super().__init__(name=name, geometry=geometry)
        self._deg_rate = 0.0
        self._tot_deg = 0.0
        self._last_degraded = NEVER
        self._velocity = 0.0
        self._dispersion = DispersionTable()
        self.set_degradation_rate(degradation_rate)
        self.set_advective_velocity(advective_velocity)
        self.set_dispersion(dispersion)
        if isinstance(bc_kind, str):
            bc_kind = BoundaryConditionKind.parse(bc_kind)
        self.bc_kind = bc_kind

    # ------------------------------------------------------------------
    # Parameters
    # ------------------------------------------------------------------

    @property
    def degradation_rate(self) -> float:
        """Fraction degraded per timestep."""
        return self._deg_rate

    def set_degradation_rate(self, rate: float) -> None:
        """Set the degradation rate.

        Raises:
            RangeError: If *rate* is outside [0, 1]; the stored rate is
                left unchanged.
        """
        if not 0.0 <= rate <= 1.0:
            msg = (
                "The degradation rate range is 0 to 1, inclusive. "
                f"The value provided was {rate}."
            )
            logger.error("%s: %s", self.name, msg)
            raise RangeError(msg)
        self._deg_rate = float(rate)

    @property
    def total_degraded(self) -> float:
        """Cumulative degraded fraction, in [0, 1]."""
        return self._tot_deg

    @property
    def last_degraded(self) -> int:
        """Time of the last degradation update (``NEVER`` before the first)."""
        return self._last_degraded

    @property
    def advective_velocity(self) -> float:
        """Advective velocity through the component (m/s)."""
        return self._velocity

    def set_advective_velocity(self, velocity: float) -> None:
        if velocity < 0:
            raise RangeError(
                f"Advective velocity must be non-negative, got {velocity!r}."
            )
        self._velocity = float(velocity)

    @property
    def dispersion(self) -> DispersionTable:
        return self._dispersion

    def set_dispersion(self, dispersion: float | DispersionTable) -> None:
        """Set a uniform dispersion coefficient or a per-element table."""
        if isinstance(dispersion, DispersionTable):
            self._dispersion = dispersion
        else:
            self._dispersion = DispersionTable(reference=dispersion)

    def dispersion_coefficient(self, element: int | None = None) -> float:
        """Dispersion coefficient of *element*, or the reference value (m²/s)."""
        if element is None:
            return self._dispersion.reference
        return self._dispersion.D(element)

    # ------------------------------------------------------------------
    # Degradation
    # ------------------------------------------------------------------

    def update_degradation(self, time: int, rate: float) -> float:
        """Accumulate degradation up to *time* at *rate*.

        The first call only anchors the degradation clock, so it adds no
        degradation.  The total is capped at 1.

        Returns:
            The new total degraded fraction.

        Raises:
            TemporalOrderError: If *time* precedes the last degradation.
            RangeError: If *rate* is outside [0, 1].
        """
        if self._last_degraded != NEVER and time < self._last_degraded:
            raise TemporalOrderError(
                f"{self.name}: degradation requested at t={time}, before the "
                f"last degradation at t={self._last_degraded}."
            )
        if rate != self._deg_rate:
            self.set_degradation_rate(rate)
        if self._last_degraded == NEVER:
            self._last_degraded = time
        total = self._tot_deg + self._deg_rate * (time - self._last_degraded)
        # Totals within round-off of 1 count as fully degraded
        if total >= 1.0 - _ROUND_OFF:
            total = 1.0
        self._tot_deg = min(1.0, total)
        assert self._tot_deg <= 1.0
        self._last_degraded = time
        logger.debug("%s: t=%s total degraded %.6g", self.name, time, self._tot_deg)
        return self._tot_deg

    # ------------------------------------------------------------------
    # Inventory
    # ------------------------------------------------------------------

    def absorb(self, lot: MaterialLot) -> None:
        """Append *lot* to the inventory."""
        logger.debug("%s is absorbing %r", self.name, lot)
        self.inventory.append(lot)

    def extract(self, composition: Mapping[int, float], mass: float) -> MaterialLot:
        """Remove *mass* kg of *composition* from the inventory.

        Lots are drained oldest first.  The histories are not touched;
        they are refreshed by the next :meth:`transport_nuclides`.

        Raises:
            InsufficientMassError: If the inventory cannot supply it.
        """
        logger.debug("%s is extracting %.6g kg", self.name, mass)
        return extract_by_composition(self.inventory, composition, mass)

    def contained_mass(self) -> float:
        """Degraded, hence available, part of the contained mass (kg)."""
        return self._tot_deg * sum_lots(self.inventory).mass

    # ------------------------------------------------------------------
    # Boundary conditions
    # ------------------------------------------------------------------

    def source_term_bc(self) -> CompositionMass:
        comp, mass = sum_lots(self.inventory)
        return CompositionMass(comp, self._tot_deg * mass)

    def dirichlet_bc(self) -> dict[int, float]:
        comp, mass = self.source_term_bc()
        return comp_to_conc_map(comp, mass, self.geometry.volume())

    def neumann_bc(self, c_ext: Mapping[int, float], r_ext: float) -> dict[int, float]:
        """Gradient between the internal concentration and *c_ext*.

        The internal concentration is the Dirichlet concentration taken
        at the radial midpoint.  An isotope missing from one side counts
        as zero there.

        Raises:
            GeometryError: If *r_ext* equals the radial midpoint.
        """
        c_int = self.dirichlet_bc()
        r_int = self.geometry.radial_midpoint()
        if r_int == r_ext:
            raise GeometryError(
                f"{self.name}: external radius {r_ext} coincides with the "
                f"radial midpoint; the gradient is undefined."
            )
        gradient: dict[int, float] = {}
        for iso in list(c_int) + [i for i in c_ext if i not in c_int]:
            gradient[iso] = (
                (c_int.get(iso, 0.0) - c_ext.get(iso, 0.0)) / (r_int - r_ext)
            )
        return gradient

    def cauchy_bc(self, c_ext: Mapping[int, float], r_ext: float) -> dict[int, float]:
        # -D dC/dr + v C
        c_int = self.dirichlet_bc()
        gradient = self.neumann_bc(c_ext, r_ext)
        return {
            iso: (
                -self.dispersion_coefficient(element_of(iso)) * grad
                + self._velocity * c_int.get(iso, 0.0)
            )
            for iso, grad in gradient.items()
        }

    # ------------------------------------------------------------------
    # Transfer and transport
    # ------------------------------------------------------------------

    def update_inner_bc(self, time: int, daughters: Sequence[NuclideModel]) -> None:
        """Pull mass from each daughter with this component's transfer model.

        Raises:
            TemporalOrderError: If *time* precedes the last update.
            BoundaryConditionError: If no transfer model is set and there
                is at least one daughter.
            InsufficientMassError: If a transfer exceeds what the daughter
                can release, or asks for an isotope it does not hold.
        """
        if self._last_updated != NEVER and time < self._last_updated:
            raise TemporalOrderError(
                f"{self.name}: inner boundary update at t={time}, before the "
                f"last update at t={self._last_updated}."
            )
        for daughter in daughters:
            transfer = candidate_transfer(self, daughter)
            if transfer.mass > 0:
                available = daughter.source_term_bc().mass
                if transfer.mass > available:
                    msg = (
                        f"t={time}: {self.name} ({self.bc_kind}) requested "
                        f"{transfer.mass:.6g} kg from {daughter.name}, which can "
                        f"release only {available:.6g} kg."
                    )
                    logger.error(msg)
                    raise InsufficientMassError(msg)
                lot = daughter.extract(transfer.composition, transfer.mass)
                self.absorb(lot)
                logger.debug(
                    "t=%s: %s -> %s %.6g kg (%s)",
                    time, daughter.name, self.name, lot.mass, self.bc_kind,
                )

    def transport_nuclides(self, time: int) -> None:
        """Degrade to *time*, then snapshot the inventory into the histories."""
        self._check_time(time)
        self.update_degradation(time, self._deg_rate)
        self.update_vec_hist(time)
        self.update_conc_hist(time)
        self._last_updated = time

    def update_vec_hist(self, time: int) -> CompositionMass:
        """Record the summed inventory at *time* (overwrites an existing entry)."""
        self.vec_hist[time] = sum_lots(self.inventory)
        return self.vec_hist[time]

    def update_conc_hist(self, time: int) -> dict[int, float]:
        """Record the contained concentration at *time*.

        An empty inventory, or an unbounded or zero volume, is recorded
        as a single zero entry for ``SENTINEL_ISOTOPE``.
        """
        self._check_time(time)
        comp, mass = sum_lots(self.inventory)
        volume = self.geometry.volume()
        if mass != 0 and volume not in (0.0, float("inf")):
            conc = comp_to_conc_map(comp, mass, volume)
        else:
            conc = {SENTINEL_ISOTOPE: 0.0}
        self.conc_hist[time] = conc
        return conc

    def _check_time(self, time: int) -> None:
        if self._last_degraded != NEVER and time < self._last_degraded:
            raise TemporalOrderError(
                f"{self.name}: t={time} precedes the last degradation at "
                f"t={self._last_degraded}."
            )
        if self._last_updated != NEVER and time < self._last_updated:
            raise TemporalOrderError(
                f"{self.name}: t={time} precedes the last update at "
                f"t={self._last_updated}."
            )

    # ------------------------------------------------------------------
    # Reporting
    # ------------------------------------------------------------------

    def copy(self) -> "DegradingBarrier":
        """Same parameters and geometry; empty inventory and histories."""
        return DegradingBarrier(
            name=self.name,
            degradation_rate=self._deg_rate,
            advective_velocity=self._velocity,
            dispersion=self._dispersion,
            bc_kind=self.bc_kind,
            geometry=self.geometry.copy(),
        )

    def params_table(self) -> dict[str, Any]:
        return {
            "degradation": self._deg_rate,
            "advective_velocity": self._velocity,
            "ref_disp": self._dispersion.reference,
            "bc_type": str(self.bc_kind),
        }

    def log_state(self) -> None:
        """Write a verbose description of the current state at DEBUG level."""
        comp, mass = sum_lots(self.inventory)
        logger.debug("DegradingBarrier %r", self.name)
        logger.debug("  %r", self.geometry)
        logger.debug(
            "  rate=%g total_degraded=%g last_degraded=%s last_updated=%s",
            self._deg_rate, self._tot_deg, self._last_degraded, self._last_updated,
        )
        logger.debug(
            "  v=%g D_ref=%g bc=%s", self._velocity, self._dispersion.reference,
            self.bc_kind,
        )
        logger.debug("  %d lots, %.6g kg: %r", len(self.inventory), mass, comp)
