"""Tests for post-processing, plotting and logging setup."""

import csv
import logging

import matplotlib

matplotlib.use("Agg")

import numpy as np
import pytest

from pybarrier.geometry.annulus import Geometry
from pybarrier.logging_config import setup_logging
from pybarrier.materials.base import MaterialLot
from pybarrier.physics.degradation import DegradingBarrier
from pybarrier.postprocess.export import (
    export_history_csv,
    export_params_csv,
    history_table,
)
from pybarrier.postprocess.integrals import inventory_by_isotope, mass_balance
from pybarrier.visualization.plot import plot_history

U235 = 92235
PU239 = 94239


def _make_model(name="wf"):
    m = DegradingBarrier(
        name=name,
        degradation_rate=0.1,
        bc_kind="SOURCE_TERM",
        geometry=Geometry(0, 1, 1),
    )
    m.absorb(MaterialLot({U235: 1.0}, np.pi))
    m.transport_nuclides(0)
    m.absorb(MaterialLot({PU239: 1.0}, 2 * np.pi))
    m.transport_nuclides(1)
    return m


class TestIntegrals:
    def test_mass_balance(self):
        a = _make_model("a")
        b = DegradingBarrier(name="b")
        b.absorb(MaterialLot({U235: 1.0}, 1.0))
        balance = mass_balance([a, b])
        assert balance["a"] == pytest.approx(3 * np.pi)
        assert balance["b"] == pytest.approx(1.0)
        assert balance["total"] == pytest.approx(3 * np.pi + 1.0)

    def test_mass_balance_empty(self):
        assert mass_balance([]) == {"total": 0.0}

    def test_inventory_by_isotope(self):
        a = _make_model("a")
        b = DegradingBarrier(name="b")
        b.absorb(MaterialLot({U235: 1.0}, 1.0))
        totals = inventory_by_isotope([a, b])
        assert totals[U235] == pytest.approx(np.pi + 1.0)
        assert totals[PU239] == pytest.approx(2 * np.pi)


class TestHistoryTable:
    def test_conc(self):
        times, isotopes, values = history_table(_make_model(), "conc")
        np.testing.assert_array_equal(times, [0, 1])
        assert isotopes == [U235, PU239]
        # Volume is pi: 1 kg/m³ of U-235 throughout, Pu-239 from t=1
        np.testing.assert_allclose(values, [[1.0, 0.0], [1.0, 2.0]])

    def test_vec(self):
        times, isotopes, values = history_table(_make_model(), "vec")
        np.testing.assert_allclose(values[:, 0], [np.pi, np.pi])
        np.testing.assert_allclose(values[:, 1], [0.0, 2 * np.pi])

    def test_unknown_kind(self):
        with pytest.raises(ValueError):
            history_table(_make_model(), "flux")


class TestExport:
    def test_history_csv(self, tmp_path):
        path = tmp_path / "hist.csv"
        export_history_csv(_make_model(), path)
        header = path.read_text().splitlines()[0]
        assert header == "time,92235,94239"
        data = np.loadtxt(path, delimiter=",", skiprows=1)
        np.testing.assert_allclose(data, [[0.0, 1.0, 0.0], [1.0, 1.0, 2.0]])

    def test_params_csv(self, tmp_path):
        path = tmp_path / "params.csv"
        export_params_csv([_make_model("a"), _make_model("b")], path)
        with open(path, newline="", encoding="utf-8") as fh:
            rows = list(csv.DictReader(fh))
        assert [r["name"] for r in rows] == ["a", "b"]
        assert rows[0]["bc_type"] == "SOURCE_TERM"
        assert float(rows[0]["degradation"]) == pytest.approx(0.1)


class TestPlot:
    def test_plot_history(self):
        ax = plot_history(_make_model())
        assert len(ax.get_lines()) == 2
        assert ax.get_title() == "wf"
        assert ax.get_xlabel() == "time (months)"

    def test_plot_selected_isotopes(self):
        import matplotlib.pyplot as plt

        fig, ax = plt.subplots()
        out = plot_history(_make_model(), isotopes=[PU239, 1001], kind="vec", ax=ax)
        assert out is ax
        assert len(ax.get_lines()) == 1
        assert ax.get_ylabel() == "mass (kg)"
        plt.close(fig)


class TestLogging:
    @pytest.fixture(autouse=True)
    def _reset_handlers(self):
        yield
        logger = logging.getLogger("pybarrier")
        for handler in list(logger.handlers):
            handler.close()
            logger.removeHandler(handler)
        logger.setLevel(logging.NOTSET)

    def test_setup_logging(self, tmp_path):
        log_file = tmp_path / "run.log"
        logger = setup_logging(level=logging.DEBUG, log_file=str(log_file))
        assert logger.name == "pybarrier"
        assert len(logger.handlers) == 2
        logger.info("hello")
        for handler in logger.handlers:
            handler.flush()
        assert "hello" in log_file.read_text()

    def test_no_duplicate_handlers(self):
        setup_logging()
        logger = setup_logging()
        assert len(logger.handlers) == 1
