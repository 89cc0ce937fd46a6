"""Grouping of markers by style for the static maps API.

The static maps API takes one ``markers`` parameter per style, e.g.
``markers=color:red|label:S|46.81,14.57|46.82,14.58``. Markers that share a
style are folded into the same parameter and the parameters are emitted in
sorted style order so that equal marker sets always give equal URLs.
"""

from __future__ import annotations

import logging
import re
from typing import Dict, Iterable, List

from .errors import MissingMarkerLocation
from .models import Marker

logger = logging.getLogger(__name__)

COLOR_RE = re.compile(
    r"0x[0-9A-Fa-f]{6}|black|brown|green|purple|yellow|blue|gray|orange|red|white"
)
SIZE_RE = re.compile(r"tiny|mid|small")
LABEL_RE = re.compile(r"[A-Z0-9]")


def _matches(pattern: re.Pattern, value: object) -> bool:
    return isinstance(value, str) and pattern.fullmatch(value) is not None


def _as_text(value: object) -> object:
    # YAML and JSON give `label: 5` as an int
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    return value


def style_key(marker: Marker) -> str:
    """Return the ``color:..|size:..|label:..`` key of a marker.

    Attributes that the static maps API would not understand are left out
    rather than rejected.
    """
    style: List[str] = []
    for name, pattern in (("color", COLOR_RE), ("size", SIZE_RE), ("label", LABEL_RE)):
        value = _as_text(getattr(marker, name))
        if value is None:
            continue
        if _matches(pattern, value):
            style.append(f"{name}:{value}")
        else:
            logger.debug("Ignoring marker %s %r", name, value)
    return "|".join(style)


def group_by_style(markers: Iterable[Marker]) -> Dict[str, List[str]]:
    """Map each style key to its marker locations, in input order."""
    groups: Dict[str, List[str]] = {}
    for marker in markers:
        style = style_key(marker)
        if not marker.location:
            raise MissingMarkerLocation(f"no location for {style!r}")
        groups.setdefault(style, []).append(marker.location)
    return groups


def marker_params(markers: Iterable[Marker]) -> List[str]:
    """Build the ``markers=`` URL parameters, sorted by style key."""
    groups = group_by_style(markers)
    params = []
    for style in sorted(groups):
        value = "|".join(groups[style])
        if style:
            value = f"{style}|{value}"
        params.append(f"markers={value}")
    return params
