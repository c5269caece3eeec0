"""Tests for boundary-condition kinds and inner-boundary transfers."""

import numpy as np
import pytest

from pybarrier.boundaries.base import BoundaryConditionKind
from pybarrier.boundaries.interface import (
    candidate_transfer,
    inner_cauchy,
    inner_dirichlet,
    inner_neumann,
    inner_source_term,
)
from pybarrier.constants import SECONDS_PER_MONTH
from pybarrier.errors import BoundaryConditionError
from pybarrier.geometry.annulus import Geometry
from pybarrier.materials.base import MaterialLot
from pybarrier.materials.library import DispersionTable
from pybarrier.physics.degradation import DegradingBarrier

U235 = 92235
CS137 = 55137


def _make_daughter(mass=10.0, rate=1.0):
    """Solid cylinder r=1, L=2 (volume 2 pi), degraded once at *rate*."""
    d = DegradingBarrier(
        name="daughter",
        degradation_rate=rate,
        bc_kind="SOURCE_TERM",
        geometry=Geometry(inner_radius=0, outer_radius=1, length=2),
    )
    d.absorb(MaterialLot({U235: 1.0}, mass))
    d.update_degradation(0, rate)
    d.update_degradation(1, rate)
    return d


def _make_parent(kind, velocity=0.0, dispersion=0.0):
    p = DegradingBarrier(
        name="parent",
        degradation_rate=1.0,
        advective_velocity=velocity,
        dispersion=dispersion,
        bc_kind=kind,
        geometry=Geometry(inner_radius=1, outer_radius=2, length=2),
    )
    p.update_degradation(0, 1.0)
    p.update_degradation(1, 1.0)
    return p


class TestBoundaryConditionKind:
    def test_parse(self):
        assert BoundaryConditionKind.parse("SOURCE_TERM") is BoundaryConditionKind.SOURCE_TERM
        assert BoundaryConditionKind.parse("dirichlet") is BoundaryConditionKind.DIRICHLET
        assert BoundaryConditionKind.parse(" Neumann ") is BoundaryConditionKind.NEUMANN
        assert BoundaryConditionKind.parse("CAUCHY") is BoundaryConditionKind.CAUCHY

    def test_parse_rejects_unknown(self):
        with pytest.raises(BoundaryConditionError, match="Unknown"):
            BoundaryConditionKind.parse("ROBIN")

    def test_parse_rejects_unset(self):
        with pytest.raises(BoundaryConditionError):
            BoundaryConditionKind.parse("UNSET")

    def test_str(self):
        assert str(BoundaryConditionKind.CAUCHY) == "CAUCHY"


class TestSourceTerm:
    def test_takes_available_mass(self):
        daughter = _make_daughter(mass=10.0, rate=0.5)
        result = inner_source_term(_make_parent("SOURCE_TERM"), daughter)
        assert result.mass == pytest.approx(5.0)
        assert result.composition[U235] == pytest.approx(1.0)

    def test_negligible_source(self):
        daughter = _make_daughter(mass=1e-40)
        result = inner_source_term(_make_parent("SOURCE_TERM"), daughter)
        assert result.mass == 0.0
        assert len(result.composition) == 0


class TestDirichlet:
    def test_advective_transfer(self):
        daughter = _make_daughter(mass=10.0)
        parent = _make_parent("DIRICHLET", velocity=1e-9)
        result = inner_dirichlet(parent, daughter)
        expected = 10.0 / (2 * np.pi) * 2 * SECONDS_PER_MONTH * 2 * 1 * 1e-9
        assert result.mass == pytest.approx(expected)
        assert result.composition[U235] == pytest.approx(1.0)

    def test_no_velocity_no_transfer(self):
        # A large dispersion must not leak into the advective model
        daughter = _make_daughter(mass=10.0)
        parent = _make_parent("DIRICHLET", velocity=0.0, dispersion=1e-3)
        assert candidate_transfer(parent, daughter).mass == 0.0


class TestNeumann:
    def test_dispersive_influx(self):
        daughter = _make_daughter(mass=10.0)
        parent = _make_parent("NEUMANN", dispersion=1e-12)
        result = inner_neumann(parent, daughter)
        c_d = 10.0 / (2 * np.pi)
        # gradient (c_d - 0) / (0.5 - 1.5), scaled and negated by D
        expected = 1e-12 * c_d * 2 * SECONDS_PER_MONTH * 2 * 1
        assert result.mass == pytest.approx(expected)

    def test_outward_gradient_ignored(self):
        daughter = _make_daughter(mass=1.0)
        parent = _make_parent("NEUMANN", dispersion=1e-12)
        # Parent much more concentrated than the daughter
        parent.absorb(MaterialLot({U235: 1.0}, 1e6))
        assert inner_neumann(parent, daughter).mass == 0.0

    def test_undegraded_parent_takes_nothing(self):
        daughter = _make_daughter(mass=10.0)
        parent = DegradingBarrier(
            name="parent",
            dispersion=1e-12,
            bc_kind="NEUMANN",
            geometry=Geometry(inner_radius=1, outer_radius=2, length=2),
        )
        assert inner_neumann(parent, daughter).mass == 0.0


class TestCauchy:
    def test_sum_of_both(self):
        daughter = _make_daughter(mass=10.0)
        parent = _make_parent("CAUCHY", velocity=1e-9, dispersion=1e-12)
        d = inner_dirichlet(parent, daughter).mass
        n = inner_neumann(parent, daughter).mass
        result = inner_cauchy(parent, daughter)
        assert result.mass == pytest.approx(d + n)
        assert result.composition[U235] == pytest.approx(1.0)

    def test_dispersion_only(self):
        daughter = _make_daughter(mass=10.0)
        parent = _make_parent("CAUCHY", velocity=0.0, dispersion=1e-12)
        result = inner_cauchy(parent, daughter)
        assert result.mass == pytest.approx(inner_neumann(parent, daughter).mass)
        assert result.composition[U235] == pytest.approx(1.0)

    def test_mass_weighted_mix(self):
        daughter = DegradingBarrier(
            name="daughter",
            degradation_rate=1.0,
            geometry=Geometry(inner_radius=0, outer_radius=1, length=2),
        )
        daughter.absorb(MaterialLot({CS137: 0.25, U235: 0.75}, 10.0))
        daughter.update_degradation(0, 1.0)
        daughter.update_degradation(1, 1.0)
        # Only caesium disperses, so the Neumann part is pure Cs-137
        parent = _make_parent(
            "CAUCHY", velocity=1e-11, dispersion=DispersionTable(0.0, {55: 1e-11})
        )
        neumann = inner_neumann(parent, daughter)
        dirichlet = inner_dirichlet(parent, daughter)
        assert neumann.mass == pytest.approx(0.25 * dirichlet.mass)

        result = inner_cauchy(parent, daughter)
        total = neumann.mass + dirichlet.mass
        assert result.mass == pytest.approx(total)
        for iso in (CS137, U235):
            expected = (
                neumann.composition.get(iso, 0.0) * neumann.mass
                + dirichlet.composition.get(iso, 0.0) * dirichlet.mass
            ) / total
            assert result.composition[iso] == pytest.approx(expected)
        assert result.composition[CS137] == pytest.approx(0.4)
        assert result.composition[U235] == pytest.approx(0.6)


class TestDispatch:
    def test_dispatch_matches_kind(self):
        daughter = _make_daughter(mass=10.0, rate=0.5)
        parent = _make_parent("SOURCE_TERM")
        assert candidate_transfer(parent, daughter).mass == pytest.approx(5.0)

    def test_unset_raises(self):
        daughter = _make_daughter()
        parent = DegradingBarrier(name="parent")
        with pytest.raises(BoundaryConditionError, match="parent"):
            candidate_transfer(parent, daughter)

