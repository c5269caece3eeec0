# pybarrier/io/config.py
"""
YAML -> barrier components and component tree.

Schema (example):

components:
  - name: waste_form
    degradation: 0.001
    advective_velocity: 1.0e-10
    bc_type: SOURCE_TERM
    geometry: { inner_radius: 0.0, outer_radius: 0.3, length: 4.0, centroid: [0, 0, 0] }
    inventory:
      - { composition: { 92235: 0.04, 92238: 0.96 }, mass: 1000.0 }
  - name: buffer
    parent: null
    degradation: 0.01
    advective_velocity: 1.0e-10
    dispersion: { reference: 1.0e-10, elements: { 55: 5.0e-10 } }
    bc_type: CAUCHY
    geometry: { inner_radius: 0.3, outer_radius: 1.0, length: 4.0 }

A component's ``parent`` names the component around it; parents may be
listed before or after their daughters.
"""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

import yaml

from pybarrier.boundaries.base import BoundaryConditionKind
from pybarrier.coupling.sequential import ComponentTree
from pybarrier.errors import ConfigurationError
from pybarrier.geometry.annulus import Geometry, Point
from pybarrier.materials.base import Composition, MaterialLot
from pybarrier.materials.library import DispersionTable
from pybarrier.physics.degradation import DegradingBarrier

_REQUIRED = ("name", "degradation", "advective_velocity", "bc_type")


@dataclass
class RunConfig:
    raw: dict
    path: Path | None = None


def load_config(path: Path | str) -> RunConfig:
    data = yaml.safe_load(Path(path).read_text())
    return parse_config(data, path=Path(path))


def parse_config(data: Any, path: Path | None = None) -> RunConfig:
    if not isinstance(data, dict):
        raise ConfigurationError("Top-level YAML must be a mapping")
    _validate_minimum(data)
    return RunConfig(raw=data, path=path)


def build_component(row: Mapping[str, Any]) -> DegradingBarrier:
    for key in _REQUIRED:
        if key not in row:
            raise ConfigurationError(
                f"Component {row.get('name', '?')!r} is missing {key!r}"
            )
    component = DegradingBarrier(
        name=str(row["name"]),
        degradation_rate=float(row["degradation"]),
        advective_velocity=float(row["advective_velocity"]),
        dispersion=_build_dispersion(row.get("dispersion", 0.0)),
        bc_kind=BoundaryConditionKind.parse(row["bc_type"]),
        geometry=_build_geometry(row.get("geometry") or {}),
    )
    for lot in row.get("inventory") or []:
        component.absorb(_build_lot(lot))
    return component


def build_components(cfg: RunConfig) -> dict[str, DegradingBarrier]:
    components: dict[str, DegradingBarrier] = {}
    for row in cfg.raw["components"]:
        component = build_component(row)
        if component.name in components:
            raise ConfigurationError(f"Duplicate component name {component.name!r}")
        components[component.name] = component
    return components


def build_tree(cfg: RunConfig) -> ComponentTree:
    components = build_components(cfg)
    tree = ComponentTree()
    for component in components.values():
        tree.add(component)
    for row in cfg.raw["components"]:
        parent = row.get("parent")
        if parent is None:
            continue
        if parent not in components:
            raise ConfigurationError(
                f"Component {row['name']!r} names unknown parent {parent!r}"
            )
        tree.link(str(row["name"]), str(parent))
    return tree


def _build_geometry(g: Mapping[str, Any]) -> Geometry:
    centroid = g.get("centroid")
    if centroid is not None:
        if len(centroid) != 3:
            raise ConfigurationError("geometry.centroid must have three coordinates")
        centroid = Point(*map(float, centroid))
    return Geometry(
        inner_radius=float(g.get("inner_radius", 0.0)),
        outer_radius=float(g.get("outer_radius", 0.0)),
        length=float(g.get("length", 0.0)),
        centroid=centroid,
    )


def _build_dispersion(d: Any) -> float | DispersionTable:
    if isinstance(d, Mapping):
        return DispersionTable(
            reference=float(d.get("reference", 0.0)),
            elements={int(k): float(v) for k, v in (d.get("elements") or {}).items()},
            name=str(d.get("name", "unnamed")),
        )
    return float(d)


def _build_lot(row: Mapping[str, Any]) -> MaterialLot:
    try:
        comp = {int(k): float(v) for k, v in row["composition"].items()}
        mass = float(row["mass"])
    except (KeyError, AttributeError, TypeError) as exc:
        raise ConfigurationError(
            "Inventory entries need a 'composition' mapping and a 'mass'"
        ) from exc
    return MaterialLot(Composition(comp), mass)


def _validate_minimum(cfg: dict) -> None:
    components = cfg.get("components")
    if not components:
        raise ConfigurationError("Missing or empty top-level key: components")
    if not isinstance(components, list):
        raise ConfigurationError("components must be a list")
    for row in components:
        if not isinstance(row, dict):
            raise ConfigurationError("Each component entry must be a mapping")
