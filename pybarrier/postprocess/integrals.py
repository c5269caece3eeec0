"""Mass balance over barrier components.

Functions
---------
mass_balance
    Contained mass per component and in total.
inventory_by_isotope
    Contained mass per isotope summed over components.
"""

from __future__ import annotations

from typing import Any, Iterable

import numpy as np


def mass_balance(components: Iterable[Any]) -> dict[str, float]:
    """Contained mass of each component, plus ``"total"``.

    Args:
        components: Nuclide models, or a
            :class:`~pybarrier.coupling.ComponentTree`.

    Returns:
        ``{name: kg, ..., "total": kg}``.
    """
    result = {c.name: c.total_inventory().mass for c in components}
    result["total"] = float(np.sum(list(result.values()))) if result else 0.0
    return result


def inventory_by_isotope(components: Iterable[Any]) -> dict[int, float]:
    """Contained mass of each isotope over all *components* (kg)."""
    totals: dict[int, float] = {}
    for c in components:
        for iso, kg in c.total_inventory().isotope_masses().items():
            totals[iso] = totals.get(iso, 0.0) + kg
    return totals
