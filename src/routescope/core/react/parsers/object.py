from __future__ import annotations

"""
Object-Literal Route Extraction.

Handles route tables passed to ``createBrowserRouter`` and friends, or
declared as a ``routes`` array / default-exported array.
"""

import logging
import re
from typing import List, Optional

from routescope.core.react.parsers.common import (
    INDEX_FIELD_RX,
    build_route,
    child_parent,
    dedupe_routes,
    parse_file,
)
from routescope.core.services.literals import (
    balanced_body,
    split_top_level_objects,
    string_field,
    top_level_text,
)
from routescope.domain.models import RouteInfo

# Tried in order; the first match wins
_ARRAY_START_PATTERNS = (
    re.compile(r"(?<![\w$])create(?:Browser|Hash|Memory|Static)Router\s*\(\s*\["),
    re.compile(r"(?:export\s+)?(?:const|let|var)\s+routes\s*(?::[^=]+)?=\s*\["),
    re.compile(r"export\s+default\s*\["),
)

_CHILDREN_RX = re.compile(r"(?<![\w$])children\s*:\s*\[")
_ELEMENT_RX = re.compile(r"(?<![\w$])element\s*:\s*<\s*([A-Za-z_$][\w$.]*)")
_COMPONENT_RX = re.compile(r"(?<![\w$])Component\s*:\s*([A-Za-z_$][\w$.]*)")


def parse_object_routes(file_path: str, logger: Optional[logging.Logger] = None) -> List[RouteInfo]:
    """
    Extract routes declared as an array of route objects.

    Args:
        file_path: Router-definition file.
        logger: Optional logger; defaults to the parsers' logger.

    Returns:
        List[RouteInfo]: Top-level routes with nested children.
    """
    return parse_file(file_path, extract_object_routes, "object", logger)


def extract_object_routes(content: str) -> List[RouteInfo]:
    """Content-level counterpart of ``parse_object_routes``."""
    for rx in _ARRAY_START_PATTERNS:
        m = rx.search(content)
        if not m:
            continue
        body = balanced_body(content, m.end() - 1)
        if body is None:
            continue
        return dedupe_routes(_routes_from_array(body, None))
    return []


# ==============================================================================
# PRIVATE HELPERS
# ==============================================================================

def _routes_from_array(array_body: str, parent_path: Optional[str]) -> List[RouteInfo]:
    routes: List[RouteInfo] = []
    for obj in split_top_level_objects(array_body):
        route = _route_from_object(obj, parent_path)
        if route is not None:
            routes.append(route)
    return routes


def _route_from_object(obj: str, parent_path: Optional[str]) -> Optional[RouteInfo]:
    body = obj[1:-1]
    own = top_level_text(obj)

    raw_path = string_field(own, "path")
    is_index = bool(INDEX_FIELD_RX.search(own))

    route = build_route(raw_path, parent_path, index=is_index)
    children: List[RouteInfo] = []

    cm = _CHILDREN_RX.search(own)
    if cm:
        child_body = balanced_body(body, cm.end() - 1)
        if child_body is not None:
            children = _routes_from_array(child_body, child_parent(route.path, parent_path))

    if not (raw_path or is_index or children):
        return None

    return build_route(
        raw_path,
        parent_path,
        index=is_index,
        element=_element_name(own),
        children=children,
    )


def _element_name(own: str) -> Optional[str]:
    m = _ELEMENT_RX.search(own) or _COMPONENT_RX.search(own)
    return m.group(1) if m else None
