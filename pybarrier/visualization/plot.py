"""History plotting utilities.

Functions
---------
plot_history
    Plot a component's concentration or mass history over time.
"""

from __future__ import annotations

from typing import Any, Sequence

from pybarrier.postprocess.export import history_table


def plot_history(
    model: Any,
    isotopes: Sequence[int] | None = None,
    kind: str = "conc",
    title: str = "",
    ax: Any = None,
    logy: bool = False,
) -> Any:
    """Plot the history of a component, one line per isotope.

    Args:
        model: A nuclide model with recorded histories.
        isotopes: Isotopes to draw (default: all recorded).
        kind: ``"conc"`` (kg/m³) or ``"vec"`` (kg).
        title: Plot title (defaults to the component name).
        ax: Matplotlib axes (creates new figure if None).
        logy: Use a logarithmic y axis.

    Returns:
        Matplotlib axes.
    """
    import matplotlib.pyplot as plt

    if ax is None:
        fig, ax = plt.subplots(1, 1, figsize=(8, 4))

    times, recorded, values = history_table(model, kind)
    wanted = list(recorded) if isotopes is None else list(isotopes)
    for iso in wanted:
        if iso not in recorded:
            continue
        ax.plot(times, values[:, recorded.index(iso)], label=str(iso))

    if logy:
        ax.set_yscale("log")
    ax.set_title(title or model.name)
    ax.set_xlabel("time (months)")
    ax.set_ylabel("concentration (kg/m³)" if kind == "conc" else "mass (kg)")
    if wanted:
        ax.legend(title="isotope")
    return ax
