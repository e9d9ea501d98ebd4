from __future__ import annotations

"""
Next.js App Router Analyzer.

In the App Router a route is defined by its directory; the file name only
says which role (page, layout, route handler...) the file plays there.
Route groups ``(name)`` and parallel slots ``@name`` shape the tree but
never appear in the URL.
"""

import logging
import os
from typing import Iterable, List, Optional

from routescope.core.nextjs.segments import (
    SegmentFlags,
    SegmentKind,
    join_route,
    merge_flags,
    segment_kind,
)
from routescope.core.nextjs.special_files import classify_file
from routescope.core.services.scanner import scan_directory
from routescope.domain.constants import APP_ROUTE_FILE_TYPES, SOURCE_EXTENSIONS
from routescope.domain.models import AppRouteInfo, FileType
from routescope.infra.fs import to_posix, validate_directory


def analyze_app_router(
        app_directory: Optional[str],
        files: Optional[Iterable[str]] = None,
        logger: Optional[logging.Logger] = None,
        *,
        respect_gitignore: bool = True,
) -> List[AppRouteInfo]:
    """
    Build one AppRouteInfo per routing file of an ``app`` directory.

    Args:
        app_directory: The ``app`` root.
        files: Paths to translate; scanned when omitted.
        logger: Optional logger; defaults to this module's logger.
        respect_gitignore: Passed to the scanner when files is omitted.

    Returns:
        List[AppRouteInfo]: Routes in input (or scan) order.

    Raises:
        MissingDirectoryError: If app_directory is not given.
        DirectoryNotFoundError: If it does not exist.
        PathNotADirectoryError: If it is not a directory.
    """
    log = logger or logging.getLogger(__name__)
    root = validate_directory(app_directory, label="App")

    log.info(f"Analyzing Next.js App Router structure in: {root}")

    if files is None:
        files = scan_directory(root, SOURCE_EXTENSIONS, respect_gitignore=respect_gitignore)

    routes: List[AppRouteInfo] = []
    for f in files:
        abs_path = f if os.path.isabs(f) else os.path.join(root, f)
        info = classify_file(abs_path)
        if info.file_type.value not in APP_ROUTE_FILE_TYPES:
            continue
        routes.append(_build_route(abs_path, root, info))

    log.info(f"Found {len(routes)} route files in the App Router")
    log.info(f"Found {sum(1 for r in routes if r.is_page)} page routes")
    log.info(f"Found {sum(1 for r in routes if r.is_route)} API routes")
    log.info(f"Found {sum(1 for r in routes if r.is_layout)} layout files")
    log.info(f"Found {sum(1 for r in routes if r.is_dynamic)} dynamic routes")
    return routes


def translate_app_path(relative_path: str):
    """
    Map a file path relative to the app root onto its URL.

    Returns:
        Tuple of (route_path, is_route_group, is_parallel_route, SegmentFlags).
    """
    parts = [p for p in relative_path.replace("\\", "/").split("/") if p]
    url_segments: List[str] = []
    flags = SegmentFlags()
    in_group = False
    in_slot = False

    for segment in parts[:-1]:
        kind = segment_kind(segment)
        if kind == SegmentKind.ROUTE_GROUP:
            in_group = True
            continue
        if kind == SegmentKind.PARALLEL:
            in_slot = True
            continue
        flags = merge_flags(flags, kind)
        url_segments.append(segment)

    return join_route(url_segments), in_group, in_slot, flags


def _build_route(abs_path: str, root: str, info) -> AppRouteInfo:
    relative_path = to_posix(os.path.relpath(abs_path, root))
    route_path, in_group, in_slot, flags = translate_app_path(relative_path)

    return AppRouteInfo(
        absolute_path=abs_path,
        relative_path=relative_path,
        route_path=route_path,
        segments=relative_path.split("/"),
        file_type=info.file_type,
        is_page=info.file_type == FileType.PAGE,
        is_layout=info.file_type == FileType.LAYOUT,
        is_route=info.file_type == FileType.ROUTE,
        is_route_group=in_group,
        is_parallel_route=in_slot,
        is_dynamic=flags.is_dynamic,
        is_catch_all=flags.is_catch_all,
        is_optional_catch_all=flags.is_optional_catch_all,
        is_client_component=info.is_client_component,
        is_server_component=info.is_server_component,
    )
