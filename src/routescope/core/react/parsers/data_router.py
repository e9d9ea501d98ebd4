from __future__ import annotations

"""
Data-Router Route Extraction.

Covers the declaration styles of data-router libraries:
``createRoute({...})`` definitions (type parameters tolerated),
``route('/path', {...})`` / ``route({...})`` builder calls and a
standalone ``routeTree = {...}`` object tree. The three scans are merged
in discovery order.
"""

import logging
import re
from typing import List, Optional, Tuple

from routescope.core.react.parsers.common import (
    INDEX_FIELD_RX,
    build_route,
    child_parent,
    dedupe_routes,
    parse_file,
)
from routescope.core.services.literals import (
    balanced_body,
    find_closing,
    mask_nested,
    split_top_level_objects,
    string_field,
    top_level_text,
)
from routescope.domain.models import RouteInfo

_CREATE_ROUTE_RX = re.compile(r"(?<![\w$])createRoute(?=\s*[<(])")
_CALL_OBJECT_RX = re.compile(r"\s*\(\s*\{")
_ROUTE_CALL_RX = re.compile(r"(?<![\w$.])route\s*\(\s*")
_ROUTE_TREE_RX = re.compile(r"(?<![\w$])routeTree\s*=\s*\{")

_LEADING_STRING_RX = re.compile(r"(['\"`])((?:\\.|(?!\1).)*)\1\s*(,\s*\{)?", re.DOTALL)
_ARRAY_ITEM_RX = re.compile(r"(['\"`])((?:\\.|(?!\1).)*)\1|\{", re.DOTALL)
_CHILDREN_ARRAY_RX = re.compile(r"(?<![\w$])children\s*:\s*\[")
_CHILDREN_OBJECT_RX = re.compile(r"(?<![\w$])children\s*:\s*\{")


def parse_data_router_routes(file_path: str, logger: Optional[logging.Logger] = None) -> List[RouteInfo]:
    """
    Extract routes from data-router declarations.

    Args:
        file_path: Router-definition file.
        logger: Optional logger; defaults to the parsers' logger.

    Returns:
        List[RouteInfo]: Union of all declaration styles, each path once.
    """
    return parse_file(file_path, extract_data_router_routes, "data router", logger)


def extract_data_router_routes(content: str) -> List[RouteInfo]:
    """Content-level counterpart of ``parse_data_router_routes``."""
    found: List[Tuple[int, RouteInfo]] = []
    found.extend(_create_route_definitions(content))
    found.extend(_route_builder_calls(content))
    found.extend(_route_tree(content))

    found.sort(key=lambda item: item[0])
    return dedupe_routes(route for _, route in found)


# ==============================================================================
# PRIVATE HELPERS
# ==============================================================================

def _create_route_definitions(content: str) -> List[Tuple[int, RouteInfo]]:
    out: List[Tuple[int, RouteInfo]] = []
    for m in _CREATE_ROUTE_RX.finditer(content):
        after = _skip_type_parameters(content, m.end())
        if after is None:
            continue
        cm = _CALL_OBJECT_RX.match(content, after)
        if not cm:
            continue
        close = find_closing(content, cm.end() - 1)
        if close is None:
            continue
        route = _route_from_definition(content[cm.end() - 1:close + 1], None)
        if route is not None:
            out.append((m.start(), route))
    return out


def _skip_type_parameters(content: str, start: int) -> Optional[int]:
    """Index past a balanced ``<...>`` list at start (whitespace allowed), or start itself."""
    i = start
    n = len(content)
    while i < n and content[i].isspace():
        i += 1
    if i >= n or content[i] != "<":
        return start

    depth = 0
    while i < n:
        ch = content[i]
        if ch == "<":
            depth += 1
        elif ch == ">" and content[i - 1] != "=":
            depth -= 1
            if depth == 0:
                return i + 1
        i += 1
    return None


def _route_builder_calls(content: str) -> List[Tuple[int, RouteInfo]]:
    out: List[Tuple[int, RouteInfo]] = []
    for m in _ROUTE_CALL_RX.finditer(content):
        start = m.end()
        if start >= len(content):
            break

        if content[start] == "{":
            close = find_closing(content, start)
            if close is None:
                continue
            route = _route_from_definition(content[start:close + 1], None)
        else:
            sm = _LEADING_STRING_RX.match(content, start)
            if not sm or not sm.group(2):
                continue
            children: List[RouteInfo] = []
            raw_path = sm.group(2).strip()
            if sm.group(3):
                options = balanced_body(content, sm.end() - 1)
                if options is not None:
                    parent = build_route(raw_path, None).path
                    children = _children_of(options, mask_nested(options), parent)
            route = build_route(raw_path, None, children=children)

        if route is not None:
            out.append((m.start(), route))
    return out


def _route_tree(content: str) -> List[Tuple[int, RouteInfo]]:
    m = _ROUTE_TREE_RX.search(content)
    if not m:
        return []
    close = find_closing(content, m.end() - 1)
    if close is None:
        return []
    return [(m.start(), r) for r in _tree_nodes(content[m.end() - 1:close + 1], None)]


def _route_from_definition(obj: str, parent_path: Optional[str]) -> Optional[RouteInfo]:
    """A ``{ path, index, children }`` definition; children may be paths or objects."""
    body = obj[1:-1]
    own = top_level_text(obj)

    raw_path = string_field(own, "path")
    is_index = bool(INDEX_FIELD_RX.search(own))
    path = build_route(raw_path, parent_path).path
    children = _children_of(body, own, child_parent(path, parent_path))

    if not (raw_path or is_index or children):
        return None
    return build_route(raw_path, parent_path, index=is_index, children=children)


def _children_of(body: str, own: str, parent_path: Optional[str]) -> List[RouteInfo]:
    m = _CHILDREN_ARRAY_RX.search(own)
    if not m:
        return []
    array_body = balanced_body(body, m.end() - 1)
    if array_body is None:
        return []

    children: List[RouteInfo] = []
    for item in _ARRAY_ITEM_RX.finditer(mask_nested(array_body)):
        if item.group(0) == "{":
            close = find_closing(array_body, item.start())
            if close is None:
                break
            child = _route_from_definition(array_body[item.start():close + 1], parent_path)
            if child is not None:
                children.append(child)
        elif item.group(2):
            children.append(build_route(item.group(2).strip(), parent_path))
    return children


def _tree_nodes(obj: str, parent_path: Optional[str]) -> List[RouteInfo]:
    """
    Routes for one routeTree node.

    A node without a path contributes its children directly.
    """
    body = obj[1:-1]
    own = top_level_text(obj)

    raw_path = string_field(own, "path")
    is_index = bool(INDEX_FIELD_RX.search(own))
    path = build_route(raw_path, parent_path).path
    next_parent = child_parent(path, parent_path)

    children: List[RouteInfo] = []
    cm = _CHILDREN_OBJECT_RX.search(own)
    if cm:
        values = balanced_body(body, cm.end() - 1)
        for child in split_top_level_objects(values or ""):
            children.extend(_tree_nodes(child, next_parent))
    else:
        children = _children_of(body, own, next_parent)

    if not (raw_path or is_index):
        return children
    return [build_route(raw_path, parent_path, index=is_index, children=children)]
