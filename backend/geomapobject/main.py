from __future__ import annotations

from functools import lru_cache
from typing import Any, Dict, Optional, Union

from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response
from pydantic import BaseModel

from . import __version__
from .autozoom import MAX_ZOOM, resolve_strategy
from .config import AppConfig
from .errors import MapObjectError
from .mapobject import MapObject
from .validation import parse_markers


app = FastAPI(title="geo-mapobject API", version=__version__)

# Permissive CORS so browser code can pull the map JSON; tighten in production
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


class MapRequest(BaseModel):
    key: Optional[str] = None
    center: Optional[str] = None
    zoom: Optional[Union[int, str]] = None
    size: Optional[Union[str, Dict[str, Any]]] = None
    format: Optional[str] = None
    maptype: Optional[str] = None
    mobile: Optional[Union[bool, str]] = None
    sensor: Optional[Union[bool, str]] = None
    hl: Optional[str] = None
    markers: Optional[Any] = None  # checked by the map layer, not here
    autozoom: Optional[int] = None


class UrlResponse(BaseModel):
    url: str


class AutoZoomResponse(BaseModel):
    zoom: int
    center: str


@lru_cache(maxsize=1)
def get_settings() -> AppConfig:
    return AppConfig.load()


@app.exception_handler(MapObjectError)
async def map_error_handler(request: Request, exc: MapObjectError) -> JSONResponse:
    return JSONResponse(
        status_code=422,
        content={"error": type(exc).__name__, "field": exc.field, "detail": str(exc)},
    )


def _build_map(req: MapRequest, settings: AppConfig) -> MapObject:
    fields = req.model_dump(exclude_none=True)
    if "key" not in fields and settings.api_key:
        fields["key"] = settings.api_key
    return MapObject.from_fields(fields, settings.endpoints)


@app.get("/")
def root() -> Dict[str, str]:
    return {"service": "geo-mapobject", "status": "ok"}


@app.get("/health")
def health() -> Dict[str, str]:
    return {"status": "healthy"}


@app.post("/maps/static-url", response_model=UrlResponse)
def create_static_url(
    req: MapRequest, escape: bool = True, settings: AppConfig = Depends(get_settings)
) -> UrlResponse:
    """Map fields -> static map image URL."""
    return UrlResponse(url=_build_map(req, settings).static_map_url(escape=escape))


@app.post("/maps/javascript-url", response_model=UrlResponse)
def create_javascript_url(
    req: MapRequest, escape: bool = True, settings: AppConfig = Depends(get_settings)
) -> UrlResponse:
    """Map fields -> dynamic maps script URL."""
    return UrlResponse(url=_build_map(req, settings).javascript_url(escape=escape))


@app.post("/maps/json")
def create_json(req: MapRequest, settings: AppConfig = Depends(get_settings)) -> Response:
    """Map fields -> client side JSON (without the API key)."""
    payload = _build_map(req, settings).json()
    return Response(content=payload, media_type="application/json")


@app.post("/maps/autozoom", response_model=AutoZoomResponse)
def create_autozoom(req: MapRequest) -> AutoZoomResponse:
    """Markers -> suggested zoom and center, using the builtin calculation."""
    markers = parse_markers(req.markers)
    max_zoom = MAX_ZOOM if req.autozoom is None else req.autozoom
    zoom, center = resolve_strategy(max_zoom).calculate_zoom_and_center(markers)
    return AutoZoomResponse(zoom=zoom, center=center)
