"""
pybarrier: Radionuclide release and transport through the degrading
engineered barriers of a geologic repository.

Subpackages
-----------
geometry
    Annular component dimensions and volumes.
materials
    Isotope compositions, inventory lots, element transport data.
boundaries
    Boundary-condition kinds and inner-boundary transfer models.
physics
    Nuclide transport models (congruent-release degrading barrier).
coupling
    Stepping nested components together.
time
    Integer time stepping.
io
    YAML configuration.
postprocess
    Mass balance and export.
visualization
    History plots.
"""

from pybarrier import (
    geometry,
    materials,
    boundaries,
    physics,
    coupling,
    time,
    io,
    postprocess,
    visualization,
)
from pybarrier.errors import (
    PyBarrierError,
    RangeError,
    GeometryError,
    TemporalOrderError,
    InsufficientMassError,
    BoundaryConditionError,
    ConfigurationError,
)

__version__ = "0.1.0"

__all__ = [
    "geometry",
    "materials",
    "boundaries",
    "physics",
    "coupling",
    "time",
    "io",
    "postprocess",
    "visualization",
    "PyBarrierError",
    "RangeError",
    "GeometryError",
    "TemporalOrderError",
    "InsufficientMassError",
    "BoundaryConditionError",
    "ConfigurationError",
]
