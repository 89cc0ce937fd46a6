from .payload import to_json
from .urls import javascript_url, static_map_url

__all__ = ["javascript_url", "static_map_url", "to_json"]
