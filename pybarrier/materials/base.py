"""Isotope compositions and material lots.

Classes
-------
Composition
    Immutable isotope -> mass-fraction vector.
CompositionMass
    A composition together with a total mass (kg).
MaterialLot
    A quantity of material held in a component inventory.

Functions
---------
element_of
    Chemical element (atomic number) of an isotope identifier.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Iterator, NamedTuple

import numpy as np

from pybarrier.errors import RangeError


def element_of(iso: int) -> int:
    """Return the element of *iso*, encoded as ``Z * 1000 + A``.

    Example::

        element_of(92235)  # 92 (uranium)
    """
    return int(iso) // 1000


class Composition(Mapping):
    """Isotope mass fractions summing to one.

    Entries are normalised on construction and zero entries are
    dropped, so a composition is empty exactly when it was built from
    all-zero input.

    Args:
        fractions: Mapping ``iso -> relative amount``.  Amounts need not
            be normalised.

    Raises:
        RangeError: If any amount is negative.

    Example::

        comp = Composition({92235: 1.0, 92238: 3.0})
        comp[92235]  # 0.25
    """

    def __init__(self, fractions: Mapping[int, float] | None = None) -> None:
        fractions = dict(fractions or {})
        for iso, value in fractions.items():
            if value < 0:
                raise RangeError(
                    f"Negative amount {value!r} for isotope {iso} in composition."
                )
        values = np.fromiter(fractions.values(), dtype=float, count=len(fractions))
        total = float(values.sum()) if len(values) else 0.0
        if total > 0:
            self._fractions = {
                int(iso): float(value) / total
                for iso, value in fractions.items()
                if value > 0
            }
        else:
            self._fractions = {}

    @classmethod
    def from_masses(cls, masses: Mapping[int, float]) -> "Composition":
        """Build a composition from per-isotope masses (kg)."""
        return cls(masses)

    def __getitem__(self, iso: int) -> float:
        return self._fractions[iso]

    def __iter__(self) -> Iterator[int]:
        return iter(self._fractions)

    def __len__(self) -> int:
        return len(self._fractions)

    def isotopes(self) -> list[int]:
        """Sorted isotope identifiers."""
        return sorted(self._fractions)

    def __repr__(self) -> str:
        return f"Composition({self._fractions!r})"


class CompositionMass(NamedTuple):
    """A composition paired with its total mass (kg)."""

    composition: Composition
    mass: float

    def isotope_masses(self) -> dict[int, float]:
        """Per-isotope mass, ``fraction * mass``."""
        return {iso: frac * self.mass for iso, frac in self.composition.items()}


class MaterialLot:
    """A lot of material: per-isotope masses in kg.

    Args:
        composition: Isotope fractions of the lot.
        mass: Total mass (kg).

    Raises:
        RangeError: If *mass* is negative.

    Example::

        lot = MaterialLot(Composition({92235: 0.05, 92238: 0.95}), mass=100.0)
        lot.mass                       # 100.0
        lot.isotope_masses()[92235]    # 5.0
    """

    def __init__(self, composition: Mapping[int, float], mass: float) -> None:
        if mass < 0:
            raise RangeError(f"Lot mass must be non-negative, got {mass!r}.")
        comp = composition if isinstance(composition, Composition) else Composition(composition)
        self._masses: dict[int, float] = {
            iso: frac * float(mass) for iso, frac in comp.items()
        }

    @classmethod
    def from_masses(cls, masses: Mapping[int, float]) -> "MaterialLot":
        """Build a lot directly from per-isotope masses (kg)."""
        lot = cls(Composition(), 0.0)
        for iso, kg in masses.items():
            if kg < 0:
                raise RangeError(f"Negative mass {kg!r} for isotope {iso}.")
            if kg > 0:
                lot._masses[int(iso)] = float(kg)
        return lot

    @property
    def mass(self) -> float:
        """Total mass (kg)."""
        return float(sum(self._masses.values()))

    @property
    def composition(self) -> Composition:
        return Composition.from_masses(self._masses)

    def isotope_masses(self) -> dict[int, float]:
        """Copy of the per-isotope masses (kg)."""
        return dict(self._masses)

    def take(self, iso: int, kg: float) -> float:
        """Remove up to *kg* of *iso* from the lot.

        Returns:
            The mass actually removed.
        """
        have = self._masses.get(iso, 0.0)
        taken = min(have, kg)
        if taken >= have:
            self._masses.pop(iso, None)
        else:
            self._masses[iso] = have - taken
        return taken

    def __repr__(self) -> str:
        return f"MaterialLot(mass={self.mass!r}, isotopes={sorted(self._masses)})"
