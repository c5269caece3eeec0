"""Materials: isotope compositions, inventory lots and transport data."""

from pybarrier.materials.base import (
    Composition,
    CompositionMass,
    MaterialLot,
    element_of,
)
from pybarrier.materials.tools import (
    sum_lots,
    extract_by_composition,
    scale_conc_map,
    conc_to_comp_map,
    comp_to_conc_map,
    mix_compositions,
)
from pybarrier.materials.library import DispersionTable, free_water, bentonite, concrete

__all__ = [
    "Composition",
    "CompositionMass",
    "MaterialLot",
    "element_of",
    "sum_lots",
    "extract_by_composition",
    "scale_conc_map",
    "conc_to_comp_map",
    "comp_to_conc_map",
    "mix_compositions",
    "DispersionTable",
    "free_water",
    "bentonite",
    "concrete",
]
