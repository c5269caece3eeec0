"""I/O: configuration files."""

from pybarrier.io.config import (
    RunConfig,
    load_config,
    parse_config,
    build_component,
    build_components,
    build_tree,
)

__all__ = [
    "RunConfig",
    "load_config",
    "parse_config",
    "build_component",
    "build_components",
    "build_tree",
]
