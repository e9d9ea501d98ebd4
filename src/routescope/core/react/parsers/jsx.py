from __future__ import annotations

"""
JSX Route Extraction.

Recovers ``<Route>`` element trees from source text. A single forward scan
pairs opening and closing tags with a stack, so nesting of any depth is
rebuilt and child paths are joined under their parent's path.
"""

import logging
import re
from typing import Any, Dict, List, Optional

from routescope.core.react.parsers.common import (
    build_route,
    child_parent,
    dedupe_routes,
    parse_file,
)
from routescope.core.services.literals import (
    balanced_body,
    find_closing,
    mask_comments,
    mask_nested,
)
from routescope.domain.models import RouteInfo

_TAG_RX = re.compile(r"<Route(?=[\s/>])|</Route\s*>")
_PATH_ATTR_RX = re.compile(r"(?<![\w$.-])path\s*=\s*")
_INDEX_ATTR_RX = re.compile(r"(?<![\w$.-])index(?![\w$-])(\s*=\s*)?")
_ELEMENT_ATTR_RX = re.compile(r"(?<![\w$.-])element\s*=\s*\{")
_COMPONENT_RX = re.compile(r"^\s*<\s*([A-Za-z_$][\w$.]*)")
_STRING_VALUE_RX = re.compile(r"^\s*(['\"`])((?:\\.|(?!\1).)*)\1\s*$", re.DOTALL)
_TRUE_VALUE_RX = re.compile(r"^(?:\{\s*true\s*\}|\"true\"|'true')")

_QUOTES = "'\"`"


def parse_jsx_routes(file_path: str, logger: Optional[logging.Logger] = None) -> List[RouteInfo]:
    """
    Extract routes declared as ``<Route>`` elements.

    Args:
        file_path: Router-definition file.
        logger: Optional logger; defaults to the parsers' logger.

    Returns:
        List[RouteInfo]: Top-level routes with nested children.
    """
    return parse_file(file_path, extract_jsx_routes, "JSX", logger)


def extract_jsx_routes(content: str) -> List[RouteInfo]:
    """Content-level counterpart of ``parse_jsx_routes``."""
    content = mask_comments(content)
    top: List[RouteInfo] = []
    stack: List[Dict[str, Any]] = []
    pos = 0

    while True:
        m = _TAG_RX.search(content, pos)
        if not m:
            break

        if m.group(0).startswith("</"):
            if stack:
                _attach(_close(stack.pop()), stack, top)
            pos = m.end()
            continue

        # A tag never extends past the next Route tag
        nxt = _TAG_RX.search(content, m.end())
        bounded = content[:nxt.start()] if nxt else content

        end = _tag_end(bounded, m.end())
        if end is None:
            end = _tag_end(bounded, m.end(), strict=False)
        if end is None:
            pos = m.end()
            continue

        attrs = content[m.end():end]
        self_closing = attrs.rstrip().endswith("/")
        parent = stack[-1]["effective"] if stack else None
        frame = _open(attrs, parent)

        if self_closing:
            _attach(_close(frame), stack, top)
        else:
            stack.append(frame)
        pos = end + 1

    # Unclosed tags still count as routes
    while stack:
        _attach(_close(stack.pop()), stack, top)

    return dedupe_routes(top)


# ==============================================================================
# PRIVATE HELPERS
# ==============================================================================

def _tag_end(content: str, start: int, strict: bool = True) -> Optional[int]:
    """
    Index of the ``>`` ending the tag, skipping ``{...}`` expressions and strings.

    With strict off, braces inside expressions are counted without regard to
    quotes, which tolerates JSX text such as ``<p>Don't</p>``.
    """
    i = start
    n = len(content)
    while i < n:
        ch = content[i]
        if ch == "{":
            close = find_closing(content, i) if strict else _plain_closing(content, i)
            if close is None:
                return None
            i = close + 1
            continue
        if ch in _QUOTES:
            close = content.find(ch, i + 1)
            if close == -1:
                return None
            i = close + 1
            continue
        if ch == ">":
            return i
        i += 1
    return None


def _plain_closing(content: str, open_index: int) -> Optional[int]:
    depth = 0
    for i in range(open_index, len(content)):
        if content[i] == "{":
            depth += 1
        elif content[i] == "}":
            depth -= 1
            if depth == 0:
                return i
    return None


def _open(attrs: str, parent_path: Optional[str]) -> Dict[str, Any]:
    flat = mask_nested(attrs)
    raw_path = _attr_string(attrs, flat, _PATH_ATTR_RX)
    route = build_route(raw_path, parent_path, index=_is_index(attrs, flat))
    return {
        "raw_path": raw_path,
        "parent": parent_path,
        "index": route.index,
        "element": _element_name(attrs, flat),
        "effective": child_parent(route.path, parent_path),
        "children": [],
    }


def _close(frame: Dict[str, Any]) -> RouteInfo:
    return build_route(
        frame["raw_path"],
        frame["parent"],
        index=frame["index"],
        element=frame["element"],
        children=frame["children"],
    )


def _attach(route: RouteInfo, stack: List[Dict[str, Any]], top: List[RouteInfo]) -> None:
    if not (route.path or route.index or route.children):
        return
    if stack:
        stack[-1]["children"].append(route)
    else:
        top.append(route)


def _attr_string(attrs: str, flat: str, rx: re.Pattern) -> Optional[str]:
    """Literal value of ``attr="v"``, ``attr='v'`` or ``attr={"v"}``."""
    m = rx.search(flat)
    if not m:
        return None

    start = m.end()
    if start >= len(attrs):
        return None

    ch = attrs[start]
    if ch in _QUOTES:
        close = attrs.find(ch, start + 1)
        return attrs[start + 1:close].strip() if close != -1 else None
    if ch == "{":
        body = balanced_body(attrs, start)
        if body is not None:
            sm = _STRING_VALUE_RX.match(body)
            if sm:
                return sm.group(2).strip()
    return None


def _is_index(attrs: str, flat: str) -> bool:
    m = _INDEX_ATTR_RX.search(flat)
    if not m:
        return False
    if not m.group(1):
        return True
    return bool(_TRUE_VALUE_RX.match(attrs[m.end():]))


def _element_name(attrs: str, flat: str) -> Optional[str]:
    m = _ELEMENT_ATTR_RX.search(flat)
    if not m:
        return None
    body = balanced_body(attrs, m.end() - 1)
    if body is None:
        return None
    cm = _COMPONENT_RX.match(body)
    if cm:
        return cm.group(1)
    return body.strip() or None
