from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import yaml


DEFAULT_CONFIG_PATHS = (
    Path("config.yaml"),
    Path("backend/config.yaml"),
    Path("backend/config/config.yaml"),
)

STATIC_MAP_URL = "http://maps.google.com/maps/api/staticmap"
JAVASCRIPT_URL = "http://maps.google.com/maps"
# Only version 2 of the dynamic API is supported
API_VERSION = "2"


@dataclass(frozen=True)
class Endpoints:
    static_url: str = STATIC_MAP_URL
    javascript_url: str = JAVASCRIPT_URL


@dataclass(frozen=True)
class AppConfig:
    endpoints: Endpoints = field(default_factory=Endpoints)
    api_key: Optional[str] = None  # server side fallback when a request has no key

    @staticmethod
    def load(path: Optional[Path] = None) -> "AppConfig":
        data = {}
        cfg_path: Optional[Path] = None
        if path and path.exists():
            cfg_path = path
        else:
            for p in DEFAULT_CONFIG_PATHS:
                if p.exists():
                    cfg_path = p
                    break

        if cfg_path:
            data = yaml.safe_load(cfg_path.read_text(encoding="utf-8")) or {}

        # Env overrides
        section = data.get("maps") or {}
        static_url = os.getenv("GMAP_STATIC_URL") or section.get("static_url") or STATIC_MAP_URL
        javascript_url = (
            os.getenv("GMAP_JAVASCRIPT_URL") or section.get("javascript_url") or JAVASCRIPT_URL
        )
        api_key = os.getenv("GMAP_API_KEY") or section.get("api_key")

        return AppConfig(
            endpoints=Endpoints(
                static_url=static_url,
                javascript_url=javascript_url,
            ),
            api_key=api_key,
        )
