"""Post-processing: mass balance and export."""

from pybarrier.postprocess.integrals import mass_balance, inventory_by_isotope
from pybarrier.postprocess.export import history_table, export_history_csv, export_params_csv

__all__ = [
    "mass_balance",
    "inventory_by_isotope",
    "history_table",
    "export_history_csv",
    "export_params_csv",
]
