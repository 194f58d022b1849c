"""Tests for the "Plot map" step: query, then reset and refill the owned map."""

from components.crash_map import CrashMap
from views.map_view import plot_map


def test_places_geocoded_crashes(cfg):
    cm = CrashMap()
    result, placed = plot_map(cfg, False, "2020", cm)
    assert result.ok
    assert len(result.data) == 3
    # A2 has no longitude
    assert placed == 2
    assert cm.marker_count == 2


def test_replot_replaces_markers(cfg):
    cm = CrashMap()
    plot_map(cfg, False, "2020", cm)
    _, placed = plot_map(cfg, False, "2021", cm)
    assert placed == 1
    assert cm.marker_count == 1


def test_empty_year_clears_markers(cfg):
    cm = CrashMap()
    plot_map(cfg, False, "2020", cm)
    result, placed = plot_map(cfg, False, "1999", cm)
    assert result.ok and result.empty
    assert placed == 0
    assert cm.marker_count == 0


def test_failed_load_clears_markers(cfg, make_cfg):
    cm = CrashMap()
    plot_map(cfg, False, "2020", cm)
    broken = make_cfg(source=str(cfg.db_source) + ".missing")
    result, placed = plot_map(broken, False, "2020", cm)
    assert not result.ok
    assert placed == 0
    assert cm.marker_count == 0
