from __future__ import annotations

"""
Bracket-notation segment classification shared by both Next.js routers.
"""

from typing import NamedTuple


class SegmentKind:
    LITERAL = "literal"
    DYNAMIC = "dynamic"
    CATCH_ALL = "catch-all"
    OPTIONAL_CATCH_ALL = "optional-catch-all"
    ROUTE_GROUP = "route-group"
    PARALLEL = "parallel"


class SegmentFlags(NamedTuple):
    is_dynamic: bool = False
    is_catch_all: bool = False
    is_optional_catch_all: bool = False


def segment_kind(segment: str) -> str:
    """
    Classify one path segment.

    ``[[...x]]`` is tested before ``[...x]`` before ``[x]`` since each form
    also satisfies the looser checks that follow it.
    """
    if segment.startswith("[[...") and segment.endswith("]]"):
        return SegmentKind.OPTIONAL_CATCH_ALL
    if segment.startswith("[...") and segment.endswith("]"):
        return SegmentKind.CATCH_ALL
    if segment.startswith("[") and segment.endswith("]"):
        return SegmentKind.DYNAMIC
    if segment.startswith("(") and segment.endswith(")"):
        return SegmentKind.ROUTE_GROUP
    if segment.startswith("@"):
        return SegmentKind.PARALLEL
    return SegmentKind.LITERAL


def merge_flags(flags: SegmentFlags, kind: str) -> SegmentFlags:
    """Fold one segment kind into accumulated dynamic flags."""
    if kind == SegmentKind.OPTIONAL_CATCH_ALL:
        return SegmentFlags(True, flags.is_catch_all, True)
    if kind == SegmentKind.CATCH_ALL:
        return SegmentFlags(True, True, flags.is_optional_catch_all)
    if kind == SegmentKind.DYNAMIC:
        return SegmentFlags(True, flags.is_catch_all, flags.is_optional_catch_all)
    return flags


def join_route(segments) -> str:
    """Join URL segments under a leading slash; no segments gives ``/``."""
    return "/" + "/".join(segments)
