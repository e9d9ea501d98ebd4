from __future__ import annotations

from .common import combine_route_paths, has_dynamic_segments
from .data_router import extract_data_router_routes, parse_data_router_routes
from .jsx import extract_jsx_routes, parse_jsx_routes
from .object import extract_object_routes, parse_object_routes

__all__ = [
    "combine_route_paths",
    "has_dynamic_segments",
    "parse_jsx_routes",
    "parse_object_routes",
    "parse_data_router_routes",
    "extract_jsx_routes",
    "extract_object_routes",
    "extract_data_router_routes",
]
