"""Coupling: stepping nested barrier components together."""

from pybarrier.coupling.sequential import ComponentTree

__all__ = [
    "ComponentTree",
]
