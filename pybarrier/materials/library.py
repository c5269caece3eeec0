"""Element-specific transport data.

:class:`DispersionTable` maps a chemical element to a hydrodynamic
dispersion coefficient.  Pre-configured tables for common barrier media
are provided; values are order-of-magnitude textbook estimates.

Usage::

    from pybarrier.materials import bentonite
    bentonite.D(55)  # caesium, m²/s
"""

from __future__ import annotations

from typing import Mapping

from pybarrier.errors import RangeError


class DispersionTable:
    """Hydrodynamic dispersion coefficients keyed by element.

    Args:
        reference: Coefficient used for elements without an entry (m²/s).
        elements: Optional ``{atomic_number: D}`` overrides (m²/s).
        name: Human-readable name of the medium.

    Raises:
        RangeError: If any coefficient is negative.
    """

    def __init__(
        self,
        reference: float = 0.0,
        elements: Mapping[int, float] | None = None,
        name: str = "unnamed",
    ) -> None:
        _check_coefficient("reference", reference)
        self.name = name
        self.reference = float(reference)
        self._elements: dict[int, float] = {}
        for elem, value in (elements or {}).items():
            _check_coefficient(f"element {elem}", value)
            self._elements[int(elem)] = float(value)

    def D(self, element: int) -> float:
        """Dispersion coefficient of *element* (m²/s)."""
        return self._elements.get(int(element), self.reference)

    @property
    def elements(self) -> dict[int, float]:
        """Read-only view of the per-element overrides."""
        return dict(self._elements)

    def __repr__(self) -> str:
        return (
            f"DispersionTable(name={self.name!r}, reference={self.reference!r}, "
            f"elements={self._elements!r})"
        )


def _check_coefficient(label: str, value: float) -> None:
    if value < 0:
        raise RangeError(
            f"Dispersion coefficient for {label} must be non-negative, got {value!r}."
        )


# ------------------------------------------------------------------
# Media
# ------------------------------------------------------------------

free_water = DispersionTable(
    name="free_water",
    reference=2.0e-9,              # m²/s, typical free-water diffusivity
)

bentonite = DispersionTable(
    name="bentonite",
    reference=1.0e-10,             # m²/s
    elements={
        53: 3.0e-12,               # I, anion exclusion
        17: 3.0e-12,               # Cl, anion exclusion
        55: 5.0e-10,               # Cs, surface diffusion
        38: 2.0e-10,               # Sr
    },
)

concrete = DispersionTable(
    name="concrete",
    reference=1.0e-11,
)
