from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional

from .config import Endpoints
from .export import javascript_url, static_map_url, to_json
from .models import MapConfig
from .validation import build_config


class MapObject:
    """Server side half of a map for the static and dynamic maps APIs.

    Construct it with the map fields (``key``, ``center``, ``zoom``, ``size``,
    ``format``, ``maptype``, ``mobile``, ``sensor``, ``hl``, ``markers`` and
    optionally ``autozoom``). Everything is validated up front; the object is
    read only afterwards and makes no network calls.

    Example::

        gmap = MapObject(
            key="ABQ...",
            zoom=13,
            size="512x400",
            maptype="terrain",
            markers=[
                {"location": "46.818285,14.587601", "color": "green", "label": "M",
                 "title": "Gasthaus Mesner"},
            ],
        )
        gmap.static_map_url()
    """

    def __init__(self, endpoints: Optional[Endpoints] = None, **fields: Any) -> None:
        self._config = build_config(fields)
        self._endpoints = endpoints or Endpoints()

    @classmethod
    def from_fields(
        cls, fields: Mapping[str, Any], endpoints: Optional[Endpoints] = None
    ) -> "MapObject":
        return cls.from_config(build_config(fields), endpoints)

    @classmethod
    def from_config(cls, config: MapConfig, endpoints: Optional[Endpoints] = None) -> "MapObject":
        obj = cls.__new__(cls)
        obj._config = config
        obj._endpoints = endpoints or Endpoints()
        return obj

    @property
    def config(self) -> MapConfig:
        return self._config

    @property
    def center(self) -> Optional[str]:
        return self._config.center

    @property
    def zoom(self) -> Optional[int]:
        return self._config.zoom

    def static_map_url(self, escape: bool = True) -> str:
        return static_map_url(self._config, self._endpoints, escape=escape)

    def javascript_url(self, escape: bool = True) -> str:
        return javascript_url(self._config, self._endpoints, escape=escape)

    def json(self) -> str:
        """JSON for client side code. The API key is left out."""
        return to_json(self._config)

    def markers(self) -> List[Dict[str, Any]]:
        return [m.as_dict() for m in self._config.markers]

    def width(self) -> Optional[int]:
        return self._config.size.width if self._config.size else None

    def height(self) -> Optional[int]:
        return self._config.size.height if self._config.size else None

    def __repr__(self) -> str:
        return f"MapObject(center={self.center!r}, zoom={self.zoom!r}, markers={len(self._config.markers)})"
