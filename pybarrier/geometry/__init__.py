"""Geometry: annular component dimensions and derived volumes."""

from pybarrier.geometry.annulus import Geometry, Point, RadiusKind

__all__ = [
    "Geometry",
    "Point",
    "RadiusKind",
]
