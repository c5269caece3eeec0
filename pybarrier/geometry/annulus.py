"""Annular (hollow cylinder) component geometry.

Classes
-------
Point
    Cartesian centroid coordinates.
RadiusKind
    Selects the inner or outer radius in :meth:`Geometry.set_radius`.
Geometry
    Inner/outer radius, length and centroid of a barrier component.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

import numpy as np

from pybarrier.errors import GeometryError


@dataclass(frozen=True)
class Point:
    """Point in 3-D space (m)."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0


class RadiusKind(Enum):
    INNER = "inner"
    OUTER = "outer"


class Geometry:
    """Annular cylinder aligned with the z axis.

    A solid cylinder is an annulus with ``inner_radius == 0``.  The
    default geometry is degenerate (all zero) and has zero volume.  An
    infinite outer radius is allowed and represents an unbounded far
    field.

    Args:
        inner_radius: Inner radius (m).
        outer_radius: Outer radius (m).
        length: Axial length (m).
        centroid: Centre of the component.

    Raises:
        GeometryError: If a dimension is negative or the inner radius
            exceeds the outer radius.

    Example::

        geom = Geometry(inner_radius=4, outer_radius=5, length=5)
        geom.volume()           # pi * 5 * (25 - 16)
        geom.radial_midpoint()  # 4.5
    """

    def __init__(
        self,
        inner_radius: float = 0.0,
        outer_radius: float = 0.0,
        length: float = 0.0,
        centroid: Point | None = None,
    ) -> None:
        _check_non_negative("inner_radius", inner_radius)
        _check_non_negative("outer_radius", outer_radius)
        _check_non_negative("length", length)
        if inner_radius > outer_radius:
            raise GeometryError(
                f"Inner radius ({inner_radius}) exceeds outer radius "
                f"({outer_radius})."
            )
        self._inner_radius = float(inner_radius)
        self._outer_radius = float(outer_radius)
        self._length = float(length)
        self._centroid = centroid if centroid is not None else Point()

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def inner_radius(self) -> float:
        return self._inner_radius

    @property
    def outer_radius(self) -> float:
        return self._outer_radius

    @property
    def length(self) -> float:
        return self._length

    @property
    def centroid(self) -> Point:
        return self._centroid

    @property
    def x(self) -> float:
        return self._centroid.x

    @property
    def y(self) -> float:
        return self._centroid.y

    @property
    def z(self) -> float:
        return self._centroid.z

    # ------------------------------------------------------------------
    # Setters
    # ------------------------------------------------------------------

    def set_radius(self, which: RadiusKind | str, value: float) -> None:
        """Set the inner or outer radius.

        An outer radius of zero counts as "not yet set", so the inner
        radius of a default geometry may be assigned first.  Until the
        outer radius is set, :meth:`volume` and :meth:`radial_midpoint`
        raise.

        Args:
            which: :class:`RadiusKind` or ``"inner"`` / ``"outer"``.
            value: New radius (m).

        Raises:
            GeometryError: On a negative radius or inverted radii.
        """
        kind = RadiusKind(which) if isinstance(which, str) else which
        _check_non_negative(f"{kind.value}_radius", value)
        value = float(value)
        if kind is RadiusKind.INNER:
            if self._outer_radius > 0 and value > self._outer_radius:
                raise GeometryError(
                    f"Inner radius ({value}) exceeds outer radius "
                    f"({self._outer_radius})."
                )
            self._inner_radius = value
        else:
            if value < self._inner_radius:
                raise GeometryError(
                    f"Outer radius ({value}) is smaller than inner radius "
                    f"({self._inner_radius})."
                )
            self._outer_radius = value

    def set_length(self, value: float) -> None:
        """Set the axial length (m)."""
        _check_non_negative("length", value)
        self._length = float(value)

    def set_centroid(self, centroid: Point) -> None:
        self._centroid = centroid

    # ------------------------------------------------------------------
    # Derived quantities
    # ------------------------------------------------------------------

    def volume(self) -> float:
        """Annular volume ``pi L (r_o^2 - r_i^2)`` (m³)."""
        self._check_radii()
        if self._length == 0 or self._outer_radius == 0:
            return 0.0
        if np.isinf(self._outer_radius):
            return float("inf")
        return float(
            np.pi * self._length
            * (self._outer_radius ** 2 - self._inner_radius ** 2)
        )

    def surface_area(self) -> float:
        """Outer surface area ``2 pi r_o (r_o + L)`` (m²)."""
        return float(
            2.0 * np.pi * self._outer_radius * (self._outer_radius + self._length)
        )

    def radial_midpoint(self) -> float:
        """Radius halfway between the inner and outer surfaces (m)."""
        self._check_radii()
        return self._inner_radius + (self._outer_radius - self._inner_radius) / 2.0

    @staticmethod
    def solid_volume(radius: float, length: float) -> float:
        """Volume of a solid cylinder ``pi r^2 L`` (m³)."""
        return float(np.pi * radius ** 2 * length)

    def _check_radii(self) -> None:
        if self._inner_radius > self._outer_radius:
            raise GeometryError(
                f"Inner radius ({self._inner_radius}) exceeds outer radius "
                f"({self._outer_radius}); set the outer radius first."
            )

    def copy(self, centroid: Point | None = None) -> "Geometry":
        """Return an independent copy, optionally moved to *centroid*."""
        return Geometry(
            inner_radius=self._inner_radius,
            outer_radius=self._outer_radius,
            length=self._length,
            centroid=centroid if centroid is not None else self._centroid,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Geometry):
            return NotImplemented
        return (
            self._inner_radius == other._inner_radius
            and self._outer_radius == other._outer_radius
            and self._length == other._length
            and self._centroid == other._centroid
        )

    def __repr__(self) -> str:
        return (
            f"Geometry(inner_radius={self._inner_radius}, "
            f"outer_radius={self._outer_radius}, length={self._length}, "
            f"centroid=({self.x}, {self.y}, {self.z}))"
        )


def _check_non_negative(name: str, value: float) -> None:
    if value is None or np.isnan(value) or value < 0:
        raise GeometryError(f"{name} must be non-negative, got {value!r}.")
