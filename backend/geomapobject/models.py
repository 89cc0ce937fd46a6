from __future__ import annotations

import copy
from enum import Enum
from types import MappingProxyType
from typing import Any, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field


class MapType(str, Enum):
    ROADMAP = "roadmap"
    SATELLITE = "satellite"
    TERRAIN = "terrain"
    HYBRID = "hybrid"


# Integer codes understood by the client-side script
MAPTYPE_CODES = MappingProxyType(
    {
        MapType.ROADMAP: 0,
        MapType.SATELLITE: 1,
        MapType.TERRAIN: 2,
        MapType.HYBRID: 3,
    }
)


class ImageFormat(str, Enum):
    PNG8 = "png8"
    PNG = "png"
    PNG32 = "png32"
    GIF = "gif"
    JPG = "jpg"
    JPG_BASELINE = "jpg-baseline"


class Size(BaseModel):
    model_config = ConfigDict(frozen=True)

    width: int = Field(..., ge=1, le=640)
    height: int = Field(..., ge=1, le=640)

    def __str__(self) -> str:
        return f"{self.width}x{self.height}"


class Marker(BaseModel):
    """A point of interest.

    Only ``location``, ``color``, ``size`` and ``label`` mean anything to the
    static maps API. Any other field (title, href, icon, id, ...) is kept as
    given for the client side code.
    """

    model_config = ConfigDict(frozen=True, extra="allow")

    location: Optional[str] = None  # "lat,lng" or an address
    color: Any = None
    size: Any = None
    label: Any = None

    def as_dict(self) -> dict:
        """Copy of the fields as the caller supplied them, extras included."""
        data = {
            name: getattr(self, name)
            for name in type(self).model_fields
            if name in self.model_fields_set
        }
        data.update(self.model_extra or {})
        return copy.deepcopy(data)


class MapConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    key: str
    center: Optional[str] = None
    zoom: Optional[int] = Field(None, ge=0, le=21)
    size: Optional[Size] = None
    format: Optional[ImageFormat] = None
    maptype: Optional[MapType] = None
    mobile: bool = False
    sensor: bool = False
    hl: Optional[str] = None
    markers: Tuple[Marker, ...] = ()
