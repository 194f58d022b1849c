"""End-to-end runs of the Streamlit app: sidebar, routing and both views."""

from pathlib import Path

import pytest
from streamlit.testing.v1 import AppTest

from data.service import get_crash_locations


APP_SCRIPT = str(Path(__file__).resolve().parents[1] / "app" / "app.py")
MAP_LABEL = "🗺️ Crash Map"


def _geocoded(cfg, year) -> int:
    records = get_crash_locations(cfg, True, year).data or []
    return sum(1 for r in records if r["LATITUDE"] is not None and r["LONGITUDE"] is not None)


@pytest.fixture
def app_env(monkeypatch, tmp_path):
    for name in ("USE_MOCK_DATA", "FIRST_YEAR", "LAST_YEAR", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("CRASH_DB_SOURCE", str(tmp_path / "missing.sqlite"))


@pytest.fixture
def app(app_env):
    def _start(view_label=None, use_mock=True) -> AppTest:
        at = AppTest.from_file(APP_SCRIPT, default_timeout=60)
        at.session_state["use_mock"] = use_mock
        if view_label is not None:
            at.session_state["nav_label"] = view_label
        return at.run()

    return _start


class TestChartView:
    def test_plot_draws_one_chart(self, app):
        at = app()
        at.selectbox(key="chart_year").set_value(2021)
        at.selectbox(key="chart_field").set_value("SEVERITY")
        at.button(key="plot_chart").click().run()
        assert not at.exception
        assert len(at.get("plotly_chart")) == 1
        assert len(at.info) == 0 and len(at.error) == 0

    def test_replot_replaces_the_chart(self, app):
        at = app()
        at.selectbox(key="chart_year").set_value(2021)
        at.button(key="plot_chart").click().run()
        at.radio(key="chart_type").set_value("pie")
        at.button(key="plot_chart").click().run()
        assert not at.exception
        assert len(at.get("plotly_chart")) == 1

    def test_year_without_crashes_shows_one_notice(self, app):
        at = app()
        at.selectbox(key="chart_year").set_value(2012)
        at.button(key="plot_chart").click().run()
        assert not at.exception
        assert len(at.info) == 1
        assert at.info[0].value == "No data available for the selected criteria."
        assert len(at.get("plotly_chart")) == 0

    def test_missing_database_shows_error(self, app):
        at = app(use_mock=False)
        at.button(key="plot_chart").click().run()
        assert not at.exception
        assert len(at.error) == 1
        assert "DatabaseLoadError" in at.error[0].value
        assert len(at.get("plotly_chart")) == 0


class TestMapView:
    def test_replot_reuses_map_and_replaces_markers(self, app, make_cfg):
        at = app(MAP_LABEL)
        at.selectbox(key="map_year").set_value(2021)
        at.button(key="plot_map").click().run()
        first = at.session_state["crash_map"]
        assert first.marker_count == _geocoded(make_cfg(), 2021)

        at.selectbox(key="map_year").set_value(2022)
        at.button(key="plot_map").click().run()
        assert not at.exception
        assert at.session_state["crash_map"] is first
        assert first.marker_count == _geocoded(make_cfg(), 2022)

    def test_year_without_crashes_clears_markers(self, app):
        at = app(MAP_LABEL)
        at.selectbox(key="map_year").set_value(2021)
        at.button(key="plot_map").click().run()
        assert at.session_state["crash_map"].marker_count > 0

        at.selectbox(key="map_year").set_value(2012)
        at.button(key="plot_map").click().run()
        assert not at.exception
        assert at.session_state["crash_map"].marker_count == 0
        assert len(at.info) == 1

    def test_failed_load_clears_markers_and_shows_error(self, app):
        at = app(MAP_LABEL)
        at.selectbox(key="map_year").set_value(2021)
        at.button(key="plot_map").click().run()
        assert at.session_state["crash_map"].marker_count > 0

        at.session_state["use_mock"] = False
        at.button(key="plot_map").click().run()
        assert not at.exception
        assert at.session_state["crash_map"].marker_count == 0
        assert len(at.error) == 1
        assert "DatabaseLoadError" in at.error[0].value
