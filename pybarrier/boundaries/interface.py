"""Mass transfer across the inner boundary of a component.

Each function computes how much mass, and of what composition, a
*parent* component draws from one *daughter* (its inward neighbour)
during one timestep.  The result is a candidate only; the parent
checks it against the daughter's source term and performs the
extraction.

Functions
---------
inner_source_term
    The daughter's whole available source term.
inner_dirichlet
    Advective transfer driven by the daughter's boundary concentration.
inner_neumann
    Dispersive transfer driven by the concentration gradient between
    the two components.
inner_cauchy
    Sum of the Dirichlet and Neumann transfers.
candidate_transfer
    Dispatch on the parent's boundary-condition kind.
"""

from __future__ import annotations

import logging
from typing import Any

from pybarrier.boundaries.base import BoundaryConditionKind
from pybarrier.constants import NEGLIGIBLE_MASS, SECONDS_PER_MONTH
from pybarrier.errors import BoundaryConditionError
from pybarrier.materials.base import Composition, CompositionMass, element_of
from pybarrier.materials.tools import conc_to_comp_map, mix_compositions, scale_conc_map

logger = logging.getLogger(__name__)

_EMPTY = CompositionMass(Composition(), 0.0)


def _interface_factor(daughter: Any) -> float:
    """Monthly exchange factor ``2 s_month L_d r_d`` of the daughter's outer face."""
    geom = daughter.geometry
    return 2.0 * SECONDS_PER_MONTH * geom.length * geom.outer_radius


def inner_source_term(parent: Any, daughter: Any) -> CompositionMass:
    """Take the daughter's source term when it is not negligible."""
    source = daughter.source_term_bc()
    if source.mass > NEGLIGIBLE_MASS:
        return source
    return _EMPTY


def inner_dirichlet(parent: Any, daughter: Any) -> CompositionMass:
    """Advective transfer of the daughter's boundary concentration.

    The daughter's Dirichlet concentrations are scaled by the interface
    area term times the parent's advective velocity and one month.
    Negative values are clamped to zero.
    """
    factor = _interface_factor(daughter) * parent.advective_velocity
    conc = scale_conc_map(daughter.dirichlet_bc(), factor)
    conc = {iso: max(value, 0.0) for iso, value in conc.items()}
    return conc_to_comp_map(conc, 1.0)


def inner_neumann(parent: Any, daughter: Any) -> CompositionMass:
    """Dispersive transfer down the concentration gradient.

    The gradient is evaluated by the daughter against the parent's
    Dirichlet concentration at the parent's radial midpoint.  Only
    negative entries are kept: with the daughter inside the parent,
    these are isotopes more concentrated in the daughter, i.e. moving
    outward into the parent.  Outward gradients towards the daughter
    are ignored; this model only carries influx.
    """
    factor = _interface_factor(daughter) * parent.total_degraded
    gradient = daughter.neumann_bc(
        parent.dirichlet_bc(), parent.geometry.radial_midpoint()
    )
    scaled = scale_conc_map(gradient, factor)
    dispersed = {
        iso: -parent.dispersion_coefficient(element_of(iso)) * value
        for iso, value in scaled.items()
        if value < 0.0
    }
    return conc_to_comp_map(dispersed, 1.0)


def inner_cauchy(parent: Any, daughter: Any) -> CompositionMass:
    """Combined advective and dispersive transfer.

    The two candidates are computed independently; their compositions
    are mixed in proportion to their masses and the masses add.
    """
    neumann = inner_neumann(parent, daughter)
    dirichlet = inner_dirichlet(parent, daughter)
    total = neumann.mass + dirichlet.mass
    if dirichlet.mass > 0:
        comp = mix_compositions(
            neumann.composition, dirichlet.composition,
            neumann.mass / dirichlet.mass,
        )
    else:
        comp = neumann.composition
    return CompositionMass(comp, total)


def candidate_transfer(parent: Any, daughter: Any) -> CompositionMass:
    """Run the transfer model selected by ``parent.bc_kind``.

    Raises:
        BoundaryConditionError: If the kind is ``UNSET``.
    """
    kind = parent.bc_kind
    if kind is BoundaryConditionKind.SOURCE_TERM:
        candidate = inner_source_term(parent, daughter)
    elif kind is BoundaryConditionKind.DIRICHLET:
        candidate = inner_dirichlet(parent, daughter)
    elif kind is BoundaryConditionKind.NEUMANN:
        candidate = inner_neumann(parent, daughter)
    elif kind is BoundaryConditionKind.CAUCHY:
        candidate = inner_cauchy(parent, daughter)
    else:
        raise BoundaryConditionError(
            f"Component {parent.name!r} has no boundary condition type set."
        )
    logger.debug(
        "%s candidate %s <- %s: %.6g kg",
        kind, parent.name, daughter.name, candidate.mass,
    )
    return candidate
