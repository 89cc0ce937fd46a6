from __future__ import annotations

import html
import json
from typing import Any, Dict

from ..models import MAPTYPE_CODES, MapConfig


def to_payload(config: MapConfig) -> Dict[str, Any]:
    """Client side view of a map: no API key, integer maptype, readable titles."""
    data: Dict[str, Any] = {}
    if config.center is not None:
        data["center"] = config.center
    if config.zoom is not None:
        data["zoom"] = config.zoom
    if config.size is not None:
        data["size"] = {"width": config.size.width, "height": config.size.height}
    if config.format is not None:
        data["format"] = config.format.value
    if config.maptype is not None:
        data["maptype"] = MAPTYPE_CODES[config.maptype]
    data["mobile"] = config.mobile
    data["sensor"] = config.sensor
    if config.hl is not None:
        data["hl"] = config.hl

    markers = []
    for marker in config.markers:
        item = marker.as_dict()
        if isinstance(item.get("title"), str):
            # Titles are shown verbatim in mouse overs
            item["title"] = html.unescape(item["title"])
        markers.append(item)
    data["markers"] = markers
    return data


def to_json(config: MapConfig) -> str:
    return json.dumps(to_payload(config), ensure_ascii=False, default=str)
