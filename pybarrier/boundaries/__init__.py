"""Boundaries: boundary-condition kinds and inner-boundary transfer models."""

from pybarrier.boundaries.base import BoundaryConditionKind
from pybarrier.boundaries.interface import (
    inner_source_term,
    inner_dirichlet,
    inner_neumann,
    inner_cauchy,
    candidate_transfer,
)

__all__ = [
    "BoundaryConditionKind",
    "inner_source_term",
    "inner_dirichlet",
    "inner_neumann",
    "inner_cauchy",
    "candidate_transfer",
]
