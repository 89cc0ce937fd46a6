from __future__ import annotations

from typing import List, Optional

from ..config import API_VERSION, Endpoints
from ..markers import marker_params
from ..models import MapConfig


def _bool(value: bool) -> str:
    return "true" if value else "false"


def _separator(escape: bool) -> str:
    # Escaped form is meant to be pasted straight into HTML attributes
    return "&amp;" if escape else "&"


def static_map_url(
    config: MapConfig, endpoints: Optional[Endpoints] = None, *, escape: bool = True
) -> str:
    """Static map image URL, e.g. for a fallback inside a noscript element."""
    endpoints = endpoints or Endpoints()
    params: List[str] = []
    if config.center is not None:
        params.append(f"center={config.center}")
    if config.zoom is not None:
        params.append(f"zoom={config.zoom}")
    if config.format is not None:
        params.append(f"format={config.format.value}")
    if config.size is not None:
        params.append(f"size={config.size}")
    params.append(f"mobile={_bool(config.mobile)}")
    params.append(f"key={config.key}")
    params.append(f"sensor={_bool(config.sensor)}")
    if config.hl is not None:
        params.append(f"hl={config.hl}")
    params.extend(marker_params(config.markers))
    return f"{endpoints.static_url}?" + _separator(escape).join(params)


def javascript_url(
    config: MapConfig, endpoints: Optional[Endpoints] = None, *, escape: bool = True
) -> str:
    """URL that loads the dynamic maps script."""
    endpoints = endpoints or Endpoints()
    params = [
        "file=api",
        f"v={API_VERSION}",
        f"key={config.key}",
        f"sensor={_bool(config.sensor)}",
    ]
    if config.hl is not None:
        params.append(f"hl={config.hl}")
    return f"{endpoints.javascript_url}?" + _separator(escape).join(params)
