from __future__ import annotations

"""
React route extraction and URL generation.

Dispatches each detected router file to the parser for its router type,
then flattens the resulting route trees into concrete URLs against the
development server's base URL.
"""

import logging
import re
from typing import Callable, Dict, Iterable, List, Optional

from routescope.core.react.parsers import (
    parse_data_router_routes,
    parse_jsx_routes,
    parse_object_routes,
)
from routescope.domain.models import RouteInfo, RouterFileInfo, RouterType, RouteUrl

_PARSERS: Dict[RouterType, Callable[..., List[RouteInfo]]] = {
    RouterType.JSX: parse_jsx_routes,
    RouterType.OBJECT: parse_object_routes,
    RouterType.DATA_ROUTER: parse_data_router_routes,
}


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def extract_routes(
        router_files: Iterable[RouterFileInfo],
        logger: Optional[logging.Logger] = None,
) -> List[RouteInfo]:
    """
    Run the matching parser over every router file.

    Files of unknown type are skipped. Results keep file order.

    Args:
        router_files: Positive detection results.
        logger: Optional logger.

    Returns:
        List[RouteInfo]: Top-level routes of all files, concatenated.
    """
    log = logger or logging.getLogger(__name__)
    all_routes: List[RouteInfo] = []

    for info in router_files:
        parser = _PARSERS.get(info.router_type)
        if parser is None:
            log.debug(f"No parser for router type {info.router_type.value}: {info.file_path}")
            continue

        log.info(f"Extracting routes from: {info.file_path} ({info.router_type.value})")
        routes = parser(info.file_path, log)
        log.info(f"Extracted {len(routes)} routes from {info.file_path}")
        all_routes.extend(routes)

    return all_routes


def generate_route_urls(
        routes: Iterable[RouteInfo],
        base_url: str,
        pattern: Optional[str] = None,
) -> List[RouteUrl]:
    """
    Flatten route trees into URLs, depth-first.

    Index routes resolve to their parent's path (``/`` at top level).
    Pathless layout routes emit nothing themselves but their children are
    still visited. Each URL is emitted once.

    Args:
        routes: Top-level routes.
        base_url: Scheme, host and port, without a trailing slash.
        pattern: Optional regex matched case-insensitively against the URL.

    Returns:
        List[RouteUrl]: URLs in visit order.

    Raises:
        re.error: If pattern is not a valid regular expression.
    """
    rx = re.compile(pattern, re.IGNORECASE) if pattern else None
    base = base_url.rstrip("/")
    urls: List[RouteUrl] = []
    seen = set()

    def emit(path: str, dynamic: bool) -> None:
        url = f"{base}{path}"
        if url in seen:
            return
        if rx is not None and not rx.search(url):
            return
        seen.add(url)
        urls.append(RouteUrl(path=path, url=url, has_dynamic_segments=dynamic))

    def visit(route: RouteInfo, parent: str) -> None:
        if route.index:
            path = route.parent_path or parent or "/"
            emit(path, False)
            return

        full_path = parent
        if route.path:
            full_path = _join(parent, route.path)
            emit(full_path, route.has_dynamic_segments)

        for child in route.children or []:
            visit(child, full_path)

    for route in routes:
        visit(route, "")

    return urls


# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _join(parent: str, path: str) -> str:
    if path.startswith("/"):
        return path
    return re.sub(r"/+", "/", f"{parent}/{path}")
