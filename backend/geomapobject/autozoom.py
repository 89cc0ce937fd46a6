"""Automatic zoom level and center for a set of markers.

Points are handled as (theta, phi) pairs on the unit sphere, theta being the
longitude and phi the colatitude, both in radians.
"""

from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass
from typing import Callable, Optional, Protocol, Sequence, Tuple, runtime_checkable

from .errors import MissingMarkerLocation, UnrecognizedAutoZoom
from .models import Marker

logger = logging.getLogger(__name__)

MAX_ZOOM = 21
FALLBACK_CENTER = "0,0"

LOCATION_RE = re.compile(r"(-?\d+\.?\d*),(-?\d+\.?\d*)")

ZoomAndCenter = Tuple[int, str]


def great_circle_distance(theta0: float, phi0: float, theta1: float, phi1: float) -> float:
    # Vincenty formula on a sphere, well conditioned for tiny and huge distances
    dtheta = theta1 - theta0
    c1 = math.sin(phi1) * math.sin(dtheta)
    c2 = math.sin(phi0) * math.cos(phi1) - math.cos(phi0) * math.sin(phi1) * math.cos(dtheta)
    c3 = math.cos(phi0) * math.cos(phi1) + math.sin(phi0) * math.sin(phi1) * math.cos(dtheta)
    return math.atan2(math.hypot(c1, c2), c3)


def great_circle_midpoint(
    theta0: float, phi0: float, theta1: float, phi1: float
) -> Optional[Tuple[float, float]]:
    """Midpoint of the shorter arc, or None when the points are antipodal."""
    d = great_circle_distance(theta0, phi0, theta1, phi1)
    if math.isclose(d, math.pi, rel_tol=0.0, abs_tol=1e-12):
        return None
    sd = math.sin(d)
    if sd == 0:
        return theta0, phi0
    a = math.sin(0.5 * d) / sd
    lat0 = math.pi / 2 - phi0
    lat1 = math.pi / 2 - phi1
    x = a * (math.cos(lat0) * math.cos(theta0) + math.cos(lat1) * math.cos(theta1))
    y = a * (math.cos(lat0) * math.sin(theta0) + math.cos(lat1) * math.sin(theta1))
    z = a * (math.sin(lat0) + math.sin(lat1))
    return math.atan2(y, x), math.acos(max(-1.0, min(1.0, z)))


def _points(markers: Sequence[Marker]):
    for marker in markers:
        if not marker.location:
            raise MissingMarkerLocation("location missing")
        match = LOCATION_RE.fullmatch(marker.location)
        if match is None:
            logger.debug("Skipping %r for autozoom", marker.location)
            continue
        lat, lng = float(match.group(1)), float(match.group(2))
        yield math.radians(lng), math.radians(90 - lat)


def calculate_zoom_and_center(markers: Sequence[Marker], max_zoom: int) -> ZoomAndCenter:
    """Suggest a zoom level and a center that keep every marker in view.

    This is a running approximation rather than a minimal enclosing circle:
    whenever a point falls outside the current radius the radius grows to
    ``distance + radius / 2`` and the center moves half way towards the
    point. The outcome therefore depends on the order of the markers.
    """
    center: Optional[Tuple[float, float]] = None
    radius = 0.0

    for theta, phi in _points(markers):
        if center is None:
            center = (theta, phi)
            continue
        distance = great_circle_distance(theta, phi, *center)
        if distance > radius:
            radius = distance + radius / 2
            midpoint = great_circle_midpoint(theta, phi, *center)
            if midpoint is None:
                logger.debug("Antipodal markers, falling back to %s", FALLBACK_CENTER)
                return max_zoom, FALLBACK_CENTER
            center = midpoint

    if center is None:
        return max_zoom, FALLBACK_CENTER

    zoom = max_zoom
    if radius > 0:
        zoom = int(-math.log2(radius))
    zoom = max(0, min(zoom, max_zoom))

    theta, phi = center
    # + 0.0 turns a negative zero into "0"
    longitude = math.degrees(theta) + 0.0
    latitude = 90 - math.degrees(phi) + 0.0
    logger.debug("Autozoom radius=%.6f zoom=%d", radius, zoom)
    return zoom, f"{latitude:.15g},{longitude:.15g}"


@runtime_checkable
class CustomStrategy(Protocol):
    def calculate_zoom_and_center(self, markers: Sequence[Marker]) -> ZoomAndCenter:
        ...


@dataclass(frozen=True)
class FixedMaxZoom:
    max_zoom: int = MAX_ZOOM

    def calculate_zoom_and_center(self, markers: Sequence[Marker]) -> ZoomAndCenter:
        return calculate_zoom_and_center(markers, self.max_zoom)


@dataclass(frozen=True)
class CustomFunction:
    fn: Callable[[Sequence[Marker]], ZoomAndCenter]

    def calculate_zoom_and_center(self, markers: Sequence[Marker]) -> ZoomAndCenter:
        return self.fn(markers)


def resolve_strategy(value) -> CustomStrategy:
    """Turn an ``autozoom`` argument into something that can place the map.

    An integer from 0 to 21 selects the builtin calculation with that maximum
    zoom. A callable taking the markers and returning ``(zoom, center)`` is
    used instead of it, and so is any object with a
    ``calculate_zoom_and_center`` method.
    """
    if isinstance(value, str) and value.isdigit():
        value = int(value)
    if isinstance(value, int) and not isinstance(value, bool):
        if 0 <= value <= MAX_ZOOM:
            return FixedMaxZoom(value)
    elif isinstance(value, CustomStrategy):
        return value
    elif callable(value):
        return CustomFunction(value)
    raise UnrecognizedAutoZoom(f"{value!r} not recognized as autozoom")
