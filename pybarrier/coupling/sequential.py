"""Sequential stepping of a tree of barrier components.

Components are nested: each has at most one parent (the component
around it) and any number of daughters (the components inside it).
Within one timestep every inner-boundary transfer runs first, from the
innermost components outward, and only then does each component
degrade and record its histories.  A component's reported available
mass therefore includes everything it received in that step.
"""

from __future__ import annotations

import logging
from typing import Iterable

from pybarrier.errors import ConfigurationError
from pybarrier.physics.base import NuclideModel

logger = logging.getLogger(__name__)


class ComponentTree:
    """Named barrier components and their parent links.

    The tree only stores topology.  Daughters are handed to
    :meth:`~pybarrier.physics.NuclideModel.update_inner_bc` for the
    duration of the call.

    Example::

        tree = ComponentTree()
        tree.add(waste_form)
        tree.add(package, daughters=["waste_form"])
        tree.add(buffer, daughters=["package"])
        for t in Stepper(t_end=120):
            tree.step(t)
    """

    def __init__(self) -> None:
        self._components: dict[str, NuclideModel] = {}
        self._parent: dict[str, str | None] = {}

    def add(
        self,
        component: NuclideModel,
        parent: str | None = None,
        daughters: Iterable[str] = (),
    ) -> None:
        """Register *component*, optionally linking a parent and daughters.

        Raises:
            ConfigurationError: On a duplicate name, an unknown parent or
                daughter, or a daughter that already has a parent.
        """
        name = component.name
        if name in self._components:
            raise ConfigurationError(f"Duplicate component name {name!r}.")
        if parent is not None and parent not in self._components:
            raise ConfigurationError(f"Unknown parent component {parent!r}.")
        daughters = list(daughters)
        for d in daughters:
            if d not in self._components:
                raise ConfigurationError(f"Unknown daughter component {d!r}.")
            if self._parent[d] is not None:
                raise ConfigurationError(
                    f"Component {d!r} already sits inside {self._parent[d]!r}."
                )
        self._components[name] = component
        self._parent[name] = parent
        for d in daughters:
            self._parent[d] = name

    def link(self, daughter: str, parent: str) -> None:
        """Place the already registered *daughter* inside *parent*."""
        for n in (daughter, parent):
            if n not in self._components:
                raise ConfigurationError(f"Unknown component {n!r}.")
        ancestor: str | None = parent
        while ancestor is not None:
            if ancestor == daughter:
                raise ConfigurationError(
                    f"Placing {daughter!r} inside {parent!r} would create a cycle."
                )
            ancestor = self._parent[ancestor]
        self._parent[daughter] = parent

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def __getitem__(self, name: str) -> NuclideModel:
        return self._components[name]

    def __contains__(self, name: str) -> bool:
        return name in self._components

    def __iter__(self):
        return iter(self._components.values())

    def __len__(self) -> int:
        return len(self._components)

    def parent(self, name: str) -> str | None:
        return self._parent[name]

    def daughters(self, name: str) -> list[NuclideModel]:
        """Components directly inside *name*, in registration order."""
        return [
            self._components[n] for n, p in self._parent.items() if p == name
        ]

    def roots(self) -> list[NuclideModel]:
        """Outermost components."""
        return [self._components[n] for n, p in self._parent.items() if p is None]

    def post_order(self) -> list[NuclideModel]:
        """Every component after all of its daughters."""
        ordered: list[NuclideModel] = []

        def visit(component: NuclideModel) -> None:
            for d in self.daughters(component.name):
                visit(d)
            ordered.append(component)

        for root in self.roots():
            visit(root)
        return ordered

    # ------------------------------------------------------------------
    # Stepping
    # ------------------------------------------------------------------

    def step(self, time: int) -> None:
        """Advance every component to *time*."""
        order = self.post_order()
        for component in order:
            daughters = self.daughters(component.name)
            if daughters:
                component.update_inner_bc(time, daughters)
        for component in order:
            component.transport_nuclides(time)
        logger.debug("Stepped %d components to t=%s", len(order), time)

    def run(self, times: Iterable[int]) -> None:
        """Call :meth:`step` for each time in *times* (e.g. a Stepper)."""
        n = 0
        for t in times:
            self.step(t)
            n += 1
        logger.info("Ran %d timesteps over %d components", n, len(self))

    def total_mass(self) -> float:
        """Mass contained in all components together (kg)."""
        return sum(c.total_inventory().mass for c in self._components.values())

    def __repr__(self) -> str:
        return f"ComponentTree(components={list(self._components)})"
