"""Exception hierarchy.

Classes
-------
PyBarrierError
    Base class for every error raised by the package.
RangeError
    A rate or physical parameter outside its valid domain.
GeometryError
    Negative or inconsistent radii and lengths.
TemporalOrderError
    An update requested for a time earlier than the last recorded one.
InsufficientMassError
    An extraction request exceeding the available inventory.
BoundaryConditionError
    Unknown or unset boundary-condition kind.
ConfigurationError
    Malformed configuration input.
"""

from __future__ import annotations


class PyBarrierError(ValueError):
    """Base class for all pybarrier errors."""


class RangeError(PyBarrierError):
    """A parameter lies outside its valid range (e.g. a rate not in [0, 1])."""


class GeometryError(PyBarrierError):
    """Negative radius or length, or inner radius beyond the outer radius."""


class TemporalOrderError(PyBarrierError):
    """A timestep update was invoked with a time earlier than the last one.

    This points at a bug in the driver loop and is never corrected
    silently.
    """


class InsufficientMassError(PyBarrierError):
    """An extraction asked for more mass than the inventory holds."""


class BoundaryConditionError(PyBarrierError):
    """Unknown boundary-condition name, or an inner update with no kind set."""


class ConfigurationError(PyBarrierError):
    """Malformed or inconsistent configuration input."""
