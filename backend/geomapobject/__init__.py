__version__ = "0.2.0"

from .autozoom import (
    CustomFunction,
    CustomStrategy,
    FixedMaxZoom,
    calculate_zoom_and_center,
    resolve_strategy,
)
from .config import AppConfig, Endpoints
from .errors import (
    InvalidMarkerList,
    InvalidSize,
    InvalidZoom,
    MapObjectError,
    MissingCenter,
    MissingCredential,
    MissingMarkerLocation,
    MissingZoom,
    UnrecognizedAutoZoom,
    UnrecognizedFormat,
    UnrecognizedMapType,
)
from .mapobject import MapObject
from .models import MAPTYPE_CODES, ImageFormat, MapConfig, MapType, Marker, Size

__all__ = [
    "AppConfig",
    "CustomFunction",
    "CustomStrategy",
    "Endpoints",
    "FixedMaxZoom",
    "ImageFormat",
    "InvalidMarkerList",
    "InvalidSize",
    "InvalidZoom",
    "MAPTYPE_CODES",
    "MapConfig",
    "MapObject",
    "MapObjectError",
    "MapType",
    "Marker",
    "MissingCenter",
    "MissingCredential",
    "MissingMarkerLocation",
    "MissingZoom",
    "Size",
    "UnrecognizedAutoZoom",
    "UnrecognizedFormat",
    "UnrecognizedMapType",
    "__version__",
    "calculate_zoom_and_center",
    "resolve_strategy",
]
