from __future__ import annotations

import copy
import logging
import re
from typing import Any, Mapping, Optional, Tuple

from pydantic import ValidationError

from .autozoom import resolve_strategy
from .errors import (
    InvalidMarkerList,
    InvalidSize,
    InvalidZoom,
    MissingCenter,
    MissingCredential,
    MissingZoom,
    UnrecognizedFormat,
    UnrecognizedMapType,
)
from .models import ImageFormat, MapConfig, MapType, Marker, Size

logger = logging.getLogger(__name__)

ZOOM_RE = re.compile(r"\d{1,2}")
SIZE_RE = re.compile(r"(\d{1,3})x(\d{1,3})")
MAX_DIMENSION = 640


def build_config(fields: Mapping[str, Any]) -> MapConfig:
    """Validate constructor arguments and return the resulting MapConfig.

    ``center`` and ``zoom`` may only be left out when there is at least one
    marker. With ``autozoom`` and markers both given, whichever of the two is
    missing is calculated from the marker locations.
    """
    args = dict(fields)
    markers = parse_markers(args.get("markers"))

    key = args.get("key")
    if not key:
        raise MissingCredential("missing API key")

    if markers and args.get("autozoom") is not None:
        strategy = resolve_strategy(args["autozoom"])
        zoom, center = strategy.calculate_zoom_and_center(markers)
        logger.debug("Autozoom suggested zoom=%s center=%s", zoom, center)
        if args.get("zoom") is None:
            args["zoom"] = zoom
        if args.get("center") is None:
            args["center"] = center

    center = args.get("center")
    if center is None and not markers:
        raise MissingCenter("missing center")
    zoom = args.get("zoom")
    if zoom is None and not markers:
        raise MissingZoom("missing zoom")

    return MapConfig(
        key=str(key),
        center=None if center is None else str(center),
        zoom=None if zoom is None else parse_zoom(zoom),
        size=None if args.get("size") is None else parse_size(args["size"]),
        format=None if args.get("format") is None else parse_format(args["format"]),
        maptype=None if args.get("maptype") is None else parse_maptype(args["maptype"]),
        mobile=_flag(args.get("mobile")),
        sensor=_flag(args.get("sensor")),
        hl=None if args.get("hl") is None else str(args["hl"]),
        markers=markers,
    )


def _flag(value: Any) -> bool:
    return value is True or value == "true"


def parse_markers(value: Any) -> Tuple[Marker, ...]:
    if value is None:
        return ()
    if not isinstance(value, (list, tuple)):
        raise InvalidMarkerList("markers must be a list")
    markers = []
    for item in value:
        if isinstance(item, Marker):
            markers.append(item)
            continue
        if not isinstance(item, Mapping):
            raise InvalidMarkerList(f"markers must be a list of mappings, got {item!r}")
        try:
            markers.append(Marker.model_validate(copy.deepcopy(dict(item))))
        except ValidationError as exc:
            raise InvalidMarkerList(f"invalid marker {dict(item)!r}: {exc}") from exc
    return tuple(markers)


def parse_zoom(value: Any) -> int:
    if isinstance(value, bool) or not ZOOM_RE.fullmatch(str(value)) or int(value) >= 22:
        raise InvalidZoom(f"zoom not a number: {value}")
    return int(value)


def parse_maptype(value: Any) -> MapType:
    try:
        return MapType(value)
    except (ValueError, TypeError):
        raise UnrecognizedMapType(f"maptype {value} not recognized") from None


def parse_format(value: Any) -> ImageFormat:
    try:
        return ImageFormat(value)
    except (ValueError, TypeError):
        raise UnrecognizedFormat(f"format {value} not recognized") from None


def parse_size(value: Any) -> Size:
    """Accept ``"WxH"`` or ``{"width": W, "height": H}``."""
    if isinstance(value, Size):
        return value
    if isinstance(value, Mapping):
        width, height = value.get("width"), value.get("height")
    else:
        match = SIZE_RE.fullmatch(value) if isinstance(value, str) else None
        if match is None:
            raise InvalidSize("cannot recognize size", reason="unparseable")
        width, height = match.groups()
    return Size(width=_dimension(width, "width"), height=_dimension(height, "height"))


def _dimension(value: Any, name: str) -> int:
    if value is None or value == "" or value == 0:
        raise InvalidSize(f"no {name}", reason=name)
    number: Optional[int] = None
    if isinstance(value, int) and not isinstance(value, bool):
        number = value
    elif isinstance(value, str) and value.isdigit():
        number = int(value)
    if number is None or not 0 < number <= MAX_DIMENSION:
        raise InvalidSize(
            f"{name} should be positive and no more than {MAX_DIMENSION}", reason=name
        )
    return number
