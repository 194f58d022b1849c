"""
Crash Map - clustered crash locations on an OpenStreetMap base layer.

Uses folium (Leaflet) with the MarkerCluster plugin:
- one map per session, built lazily and never rebuilt
- one cluster layer, emptied and refilled on every plot
- popups with date / time / crash type
"""
from __future__ import annotations

import html
from typing import Any, Iterable, Mapping, Optional

import folium
import pandas as pd
from folium.plugins import MarkerCluster

from config import AppConfig, OSM_ATTRIBUTION, OSM_TILES


MELBOURNE = (-37.8136, 144.9631)


def _has_coords(rec: Mapping[str, Any]) -> bool:
    lat, lon = rec.get("LATITUDE"), rec.get("LONGITUDE")
    return not (lat is None or lon is None or pd.isna(lat) or pd.isna(lon))


def popup_html(rec: Mapping[str, Any]) -> str:
    return (
        f"<b>Date:</b> {html.escape(str(rec.get('ACCIDENT_DATE', '')))}<br>"
        f"<b>Time:</b> {html.escape(str(rec.get('ACCIDENT_TIME', '')))}<br>"
        f"<b>Type:</b> {html.escape(str(rec.get('ACCIDENT_TYPE_DESC', '')))}"
    )


def _children(cluster: MarkerCluster) -> dict:
    # folium has no public remove; markers live in the element's children
    return cluster._children


def _marker_keys(cluster: MarkerCluster) -> list[str]:
    return [k for k, v in _children(cluster).items() if isinstance(v, folium.Marker)]


class CrashMap:
    """Owns the folium map and its single marker-cluster layer."""

    def __init__(
        self,
        center: tuple[float, float] = MELBOURNE,
        zoom: int = 10,
        tiles: str = OSM_TILES,
        attribution: str = OSM_ATTRIBUTION,
    ):
        self.center = center
        self.zoom = zoom
        self.tiles = tiles
        self.attribution = attribution
        self._map: Optional[folium.Map] = None
        self._cluster: Optional[MarkerCluster] = None

    @classmethod
    def from_config(cls, cfg: AppConfig) -> "CrashMap":
        return cls(
            center=cfg.map_center,
            zoom=cfg.map_zoom,
            tiles=cfg.tile_url,
            attribution=cfg.tile_attribution,
        )

    @property
    def initialized(self) -> bool:
        return self._map is not None

    @property
    def map(self) -> folium.Map:
        if self._map is None:
            self._map = folium.Map(
                location=list(self.center),
                zoom_start=self.zoom,
                tiles=self.tiles,
                attr=self.attribution,
            )
        return self._map

    @property
    def cluster(self) -> Optional[MarkerCluster]:
        return self._cluster

    @property
    def marker_count(self) -> int:
        if self._cluster is None:
            return 0
        return len(_marker_keys(self._cluster))

    def reset(self) -> None:
        """Empty the cluster layer, creating and attaching it on first use."""
        if self._cluster is None:
            self._cluster = MarkerCluster(name="Crashes")
            self._cluster.add_to(self.map)
            return
        for key in _marker_keys(self._cluster):
            del _children(self._cluster)[key]

    def add_crashes(self, records: Iterable[Mapping[str, Any]]) -> int:
        """Add one marker per record with both coordinates. Returns markers placed."""
        if self._cluster is None:
            self.reset()
        placed = 0
        for rec in records:
            if not _has_coords(rec):
                continue
            folium.Marker(
                location=[float(rec["LATITUDE"]), float(rec["LONGITUDE"])],
                popup=folium.Popup(popup_html(rec), max_width=300),
            ).add_to(self._cluster)
            placed += 1
        return placed


def render_crash_map(crash_map: CrashMap, records: Iterable[Mapping[str, Any]]) -> int:
    crash_map.reset()
    return crash_map.add_crashes(records)
