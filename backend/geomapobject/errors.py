from __future__ import annotations

from typing import Optional


class MapObjectError(Exception):
    """Base class for every validation failure raised while building a map."""

    field: Optional[str] = None

    def __init__(self, message: str, *, field: Optional[str] = None) -> None:
        super().__init__(message)
        if field is not None:
            self.field = field


class MissingCredential(MapObjectError):
    field = "key"


class MissingCenter(MapObjectError):
    field = "center"


class MissingZoom(MapObjectError):
    field = "zoom"


class InvalidZoom(MapObjectError):
    field = "zoom"


class UnrecognizedMapType(MapObjectError):
    field = "maptype"


class UnrecognizedFormat(MapObjectError):
    field = "format"


class InvalidSize(MapObjectError):
    """Raised for a size that cannot be parsed or has a dimension out of range.

    ``reason`` is one of ``"unparseable"``, ``"width"`` or ``"height"``.
    """

    field = "size"

    def __init__(self, message: str, *, reason: str) -> None:
        super().__init__(message)
        self.reason = reason


class InvalidMarkerList(MapObjectError):
    field = "markers"


class MissingMarkerLocation(MapObjectError):
    field = "markers"


class UnrecognizedAutoZoom(MapObjectError):
    field = "autozoom"
