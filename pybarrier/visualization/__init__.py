"""Visualization: history plots."""

from pybarrier.visualization.plot import plot_history

__all__ = [
    "plot_history",
]
