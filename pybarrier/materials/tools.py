"""Inventory arithmetic on material lots and concentration maps.

Functions
---------
sum_lots
    Combine lots into one composition and total mass.
extract_by_composition
    Remove a given mass of a composition from a list of lots.
scale_conc_map
    Multiply every entry of a concentration map.
conc_to_comp_map
    Concentration map and volume -> composition and mass.
comp_to_conc_map
    Composition, mass and volume -> concentration map.
mix_compositions
    Blend two compositions by mass ratio.
"""

from __future__ import annotations

import logging
from typing import Mapping, MutableSequence, Sequence

import numpy as np

from pybarrier.constants import EXTRACTION_TOLERANCE
from pybarrier.errors import InsufficientMassError, RangeError
from pybarrier.materials.base import Composition, CompositionMass, MaterialLot

logger = logging.getLogger(__name__)

# Rounding slack for requests equal to the whole available mass
_ULPS = 4.0 * np.finfo(float).eps


def isotope_totals(lots: Sequence[MaterialLot]) -> dict[int, float]:
    """Per-isotope mass summed over *lots* (kg)."""
    totals: dict[int, float] = {}
    for lot in lots:
        for iso, kg in lot.isotope_masses().items():
            totals[iso] = totals.get(iso, 0.0) + kg
    return totals


def sum_lots(lots: Sequence[MaterialLot]) -> CompositionMass:
    """Sum *lots* into a single composition and total mass.

    An empty inventory yields an empty composition and a mass of 0.
    """
    totals = isotope_totals(lots)
    mass = float(np.sum(list(totals.values()))) if totals else 0.0
    return CompositionMass(Composition.from_masses(totals), mass)


def extract_by_composition(
    lots: MutableSequence[MaterialLot],
    composition: Mapping[int, float],
    mass: float,
    tolerance: float = EXTRACTION_TOLERANCE,
) -> MaterialLot:
    """Remove *mass* kg of *composition* from *lots*.

    Each isotope is demanded in proportion to its fraction.  Lots are
    drained in insertion order; the last lot touched may be consumed
    only partially.  Emptied lots are removed from *lots* in place.

    Args:
        lots: Inventory, modified in place.
        composition: Isotope fractions to extract.
        mass: Total mass to extract (kg).
        tolerance: Absolute shortfall tolerated per isotope (kg).  It is
            widened to a few ulps of the available mass so that asking
            for exactly everything never fails on rounding.

    Returns:
        The extracted lot.

    Raises:
        RangeError: If *mass* is negative.
        InsufficientMassError: If the inventory cannot supply some
            isotope within tolerance.
    """
    if mass < 0:
        raise RangeError(f"Cannot extract a negative mass ({mass!r} kg).")

    comp = composition if isinstance(composition, Composition) else Composition(composition)
    available = isotope_totals(lots)

    demand: dict[int, float] = {}
    for iso, frac in comp.items():
        need = frac * mass
        have = available.get(iso, 0.0)
        slack = max(tolerance, _ULPS * have)
        if need - have > slack:
            raise InsufficientMassError(
                f"Requested {need:.6g} kg of isotope {iso} but only "
                f"{have:.6g} kg is available."
            )
        demand[iso] = min(need, have)

    taken: dict[int, float] = {}
    for lot in lots:
        for iso, need in demand.items():
            if need <= 0:
                continue
            got = lot.take(iso, need)
            demand[iso] = need - got
            taken[iso] = taken.get(iso, 0.0) + got
        if all(need <= 0 for need in demand.values()):
            break

    lots[:] = [lot for lot in lots if lot.mass > 0]
    extracted = MaterialLot.from_masses(taken)
    logger.debug("Extracted %.6g kg over %d isotopes", extracted.mass, len(taken))
    return extracted


def scale_conc_map(conc_map: Mapping[int, float], factor: float) -> dict[int, float]:
    """Return ``{iso: value * factor}``."""
    return {iso: value * factor for iso, value in conc_map.items()}


def conc_to_comp_map(conc_map: Mapping[int, float], volume: float) -> CompositionMass:
    """Convert concentrations (kg/m³) in *volume* (m³) to composition and mass.

    Zero entries are dropped; negative entries are not allowed.
    """
    masses = {iso: conc * volume for iso, conc in conc_map.items()}
    comp = Composition.from_masses(masses)
    mass = float(np.sum(list(masses.values()))) if masses else 0.0
    return CompositionMass(comp, mass)


def comp_to_conc_map(
    composition: Mapping[int, float],
    mass: float,
    volume: float,
) -> dict[int, float]:
    """Spread *mass* kg of *composition* over *volume* m³.

    A zero or infinite volume gives a zero concentration for every
    isotope of the composition.
    """
    if volume == 0 or np.isinf(volume):
        return {iso: 0.0 for iso in composition}
    return {iso: frac * mass / volume for iso, frac in composition.items()}


def mix_compositions(
    a: Mapping[int, float],
    b: Mapping[int, float],
    ratio: float,
) -> Composition:
    """Mix *ratio* parts of composition *a* with one part of *b*.

    Example::

        mix_compositions({1001: 1.0}, {2004: 1.0}, ratio=3.0)
        # Composition({1001: 0.75, 2004: 0.25})
    """
    if ratio < 0:
        raise RangeError(f"Mixing ratio must be non-negative, got {ratio!r}.")
    mixed: dict[int, float] = {}
    for iso, frac in a.items():
        mixed[iso] = mixed.get(iso, 0.0) + frac * ratio
    for iso, frac in b.items():
        mixed[iso] = mixed.get(iso, 0.0) + frac
    return Composition(mixed)
