from __future__ import annotations

"""
Helpers shared by the route-literal extractors.
"""

import logging
import re
from typing import Callable, Iterable, List, Optional

from routescope.domain.models import RouteInfo
from routescope.infra.fs import read_text

_TRUE_VALUE = r"(?:true|\{\s*true\s*\}|\"true\"|'true'|`true`)"
INDEX_FIELD_RX = re.compile(rf"(?<![\w$])index\s*:\s*{_TRUE_VALUE}")

Extractor = Callable[[str], List[RouteInfo]]


def combine_route_paths(parent_path: Optional[str], path: str) -> str:
    """
    Join a route path under its parent.

    Absolute paths stand alone; a relative path with no parent is rooted.
    """
    if path.startswith("/"):
        return path
    if not parent_path:
        return "/" + path
    parent = parent_path if parent_path.endswith("/") else parent_path + "/"
    return parent + path


def has_dynamic_segments(path: str) -> bool:
    """``:param`` and ``*`` splats mark a dynamic path."""
    return ":" in path or "*" in path


def build_route(
        raw_path: Optional[str],
        parent_path: Optional[str],
        *,
        index: bool = False,
        element: Optional[str] = None,
        children: Optional[List[RouteInfo]] = None,
) -> RouteInfo:
    """Create a RouteInfo with its path resolved against the parent."""
    path = combine_route_paths(parent_path, raw_path) if raw_path else ""
    return RouteInfo(
        path=path,
        has_dynamic_segments=has_dynamic_segments(path),
        children=children or None,
        parent_path=parent_path or None,
        element=element,
        index=index,
    )


def child_parent(route_path: str, parent_path: Optional[str]) -> Optional[str]:
    """Pathless routes pass their own parent down to their children."""
    return route_path or parent_path


def dedupe_routes(routes: Iterable[RouteInfo]) -> List[RouteInfo]:
    """Keep the first occurrence of each (path, index, parent) in discovery order."""
    seen = set()
    out: List[RouteInfo] = []
    for route in routes:
        key = (route.path, route.index, route.parent_path)
        if key in seen:
            continue
        seen.add(key)
        out.append(route)
    return out


def parse_file(
        file_path: str,
        extractor: Extractor,
        label: str,
        logger: Optional[logging.Logger],
) -> List[RouteInfo]:
    """
    Read file_path and run a content-level extractor on it.

    A read failure is logged at ERROR and yields an empty list.
    """
    log = logger or logging.getLogger(__name__)
    log.debug(f"Parsing {label} routes from file: {file_path}")

    try:
        content = read_text(file_path)
    except OSError as e:
        log.error(f"Failed to parse {label} routes from {file_path}: {e}")
        return []

    routes = extractor(content)
    log.debug(f"Found {len(routes)} top-level routes in {file_path}")
    return routes
