"""Tests for the geometry module."""

import numpy as np
import pytest

from pybarrier.errors import GeometryError
from pybarrier.geometry.annulus import Geometry, Point, RadiusKind


def _make_test_geom():
    return Geometry(inner_radius=4, outer_radius=5, length=5, centroid=Point(5, 0, 0))


class TestConstruction:
    def test_default(self):
        g = Geometry()
        assert g.inner_radius == 0.0
        assert g.outer_radius == 0.0
        assert g.length == 0.0
        assert g.centroid == Point(0, 0, 0)
        assert (g.x, g.y, g.z) == (0.0, 0.0, 0.0)

    def test_full(self):
        g = _make_test_geom()
        assert g.inner_radius == 4.0
        assert g.outer_radius == 5.0
        assert g.length == 5.0
        assert g.x == 5.0
        assert g.y == 0.0
        assert g.z == 0.0

    def test_negative_radius(self):
        with pytest.raises(GeometryError, match="non-negative"):
            Geometry(inner_radius=-1, outer_radius=5, length=1)

    def test_negative_length(self):
        with pytest.raises(GeometryError):
            Geometry(inner_radius=0, outer_radius=5, length=-1)

    def test_inverted_radii(self):
        with pytest.raises(GeometryError, match="exceeds"):
            Geometry(inner_radius=6, outer_radius=5, length=1)


class TestDerivedQuantities:
    def test_radial_midpoint(self):
        assert Geometry().radial_midpoint() == 0.0
        assert _make_test_geom().radial_midpoint() == pytest.approx(4.5)

    def test_volume(self):
        assert _make_test_geom().volume() == pytest.approx(np.pi * 5 * (25 - 16))
        assert Geometry().volume() == 0.0

    def test_surface_area(self):
        assert _make_test_geom().surface_area() == pytest.approx(2 * np.pi * 5 * (5 + 5))
        assert Geometry().surface_area() == 0.0

    def test_solid_volume(self):
        g = _make_test_geom()
        for radius in (0.0, 0.5, 2.5, 4.5):
            for length in (0.0, 1.0, 3.5):
                assert g.solid_volume(radius, length) == pytest.approx(
                    np.pi * radius ** 2 * length
                )

    def test_solid_volume_ignores_state(self):
        assert Geometry.solid_volume(1.0, 2.0) == pytest.approx(2 * np.pi)

    def test_infinite_outer_radius(self):
        g = Geometry(inner_radius=1, outer_radius=np.inf, length=1)
        assert np.isinf(g.volume())


class TestSetters:
    def test_set_on_default(self):
        g = Geometry()
        g.set_radius(RadiusKind.INNER, 4)
        g.set_radius(RadiusKind.OUTER, 5)
        g.set_length(5)
        assert g.volume() == pytest.approx(np.pi * 5 * (25 - 16))
        assert g.surface_area() == pytest.approx(2 * np.pi * 5 * 10)

    def test_inner_before_outer(self):
        g = Geometry()
        g.set_radius(RadiusKind.INNER, 4)
        with pytest.raises(GeometryError, match="outer radius first"):
            g.radial_midpoint()
        with pytest.raises(GeometryError):
            g.volume()
        g.set_radius(RadiusKind.OUTER, 5)
        assert g.radial_midpoint() == pytest.approx(4.5)

    def test_set_by_name(self):
        g = Geometry()
        g.set_radius("outer", 2.0)
        g.set_radius("inner", 1.0)
        assert g.radial_midpoint() == pytest.approx(1.5)

    def test_reject_negative(self):
        g = _make_test_geom()
        with pytest.raises(GeometryError):
            g.set_radius(RadiusKind.OUTER, -1)
        with pytest.raises(GeometryError):
            g.set_length(-0.1)
        assert g.outer_radius == 5.0
        assert g.length == 5.0

    def test_reject_outer_below_inner(self):
        g = _make_test_geom()
        with pytest.raises(GeometryError, match="smaller"):
            g.set_radius(RadiusKind.OUTER, 3)

    def test_reject_inner_above_outer(self):
        g = _make_test_geom()
        with pytest.raises(GeometryError):
            g.set_radius(RadiusKind.INNER, 6)


class TestCopy:
    def test_copy_is_independent(self):
        g = _make_test_geom()
        c = g.copy()
        assert c == g
        c.set_length(1.0)
        assert g.length == 5.0

    def test_copy_with_centroid(self):
        g = _make_test_geom()
        c = g.copy(centroid=Point(0, 0, 10))
        assert c.z == 10.0
        assert c.outer_radius == g.outer_radius
