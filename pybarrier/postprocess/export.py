"""Export histories and parameters to CSV.

Functions
---------
export_history_csv
    One row per recorded time, one column per isotope.
export_params_csv
    One row of model parameters per component.
"""

from __future__ import annotations

import csv
from pathlib import Path
from typing import Any, Iterable

import numpy as np


def history_table(model: Any, kind: str = "conc") -> tuple[np.ndarray, list[int], np.ndarray]:
    """Tabulate a component history.

    Args:
        model: A nuclide model.
        kind: ``"conc"`` for concentrations (kg/m³) or ``"vec"`` for
            isotope masses (kg).

    Returns:
        Tuple ``(times, isotopes, values)`` with *values* of shape
        ``(n_times, n_isotopes)``; isotopes absent at a time are 0.
    """
    if kind == "conc":
        hist = {t: dict(v) for t, v in model.conc_hist.items()}
    elif kind == "vec":
        hist = {t: v.isotope_masses() for t, v in model.vec_hist.items()}
    else:
        raise ValueError(f"Unknown history kind: {kind!r}")

    times = np.array(sorted(hist), dtype=int)
    isotopes = sorted({iso for row in hist.values() for iso in row})
    values = np.zeros((len(times), len(isotopes)))
    for i, t in enumerate(times):
        row = hist[int(t)]
        for j, iso in enumerate(isotopes):
            values[i, j] = row.get(iso, 0.0)
    return times, isotopes, values


def export_history_csv(model: Any, filename: str | Path, kind: str = "conc") -> None:
    """Export a component history to CSV.

    Args:
        model: A nuclide model.
        filename: Output file path.
        kind: ``"conc"`` or ``"vec"``, see :func:`history_table`.
    """
    times, isotopes, values = history_table(model, kind)
    header = ",".join(["time"] + [str(iso) for iso in isotopes])
    data = np.column_stack([times, values]) if len(times) else np.empty((0, len(isotopes) + 1))
    np.savetxt(filename, data, delimiter=",", header=header, comments="")


def export_params_csv(components: Iterable[Any], filename: str | Path) -> None:
    """Export the parameter table of each component to CSV."""
    rows = [{"name": c.name, **c.params_table()} for c in components]
    fields: list[str] = []
    for row in rows:
        fields.extend(k for k in row if k not in fields)
    with open(filename, "w", newline="", encoding="utf-8") as fh:
        writer = csv.DictWriter(fh, fieldnames=fields)
        writer.writeheader()
        writer.writerows(rows)
