from __future__ import annotations

"""
Next.js Pages Router Analyzer.

Translates every file under a ``pages`` directory into the URL route it
serves. Bracket notation is kept in the route path (``/blog/[slug]``);
dynamic, catch-all and optional catch-all segments are reported as flags.
"""

import logging
import os
from concurrent.futures import ThreadPoolExecutor
from typing import Iterable, List, NamedTuple, Optional

from routescope.core.nextjs.metadata import extract_route_metadata
from routescope.core.nextjs.segments import SegmentFlags, join_route, merge_flags, segment_kind
from routescope.core.nextjs.special_files import classify_file
from routescope.core.services.scanner import scan_directory
from routescope.domain.constants import (
    API_SEGMENT,
    INDEX_FILE_NAME,
    PAGES_BOOTSTRAP_PREFIXES,
    SOURCE_EXTENSIONS,
)
from routescope.domain.models import FileType, PageRouteInfo
from routescope.infra.fs import to_posix, validate_directory


class PagePath(NamedTuple):
    """Result of translating one pages-relative file path."""
    route_path: str
    segments: List[str]
    is_api: bool
    flags: SegmentFlags


# ==============================================================================
# PUBLIC API
# ==============================================================================

def translate_page_path(relative_path: str) -> PagePath:
    """
    Translate a path relative to the pages root into its route.

    Args:
        relative_path: e.g. ``blog/[slug].tsx`` (either separator style).

    Returns:
        PagePath: Route path, original path parts, API flag and dynamic flags.
    """
    parts = [p for p in to_posix(relative_path).replace("\\", "/").split("/") if p]
    if not parts:
        return PagePath("/", [], False, SegmentFlags())

    stem = os.path.splitext(parts[-1])[0]
    url_segments = parts[:-1] + [stem]
    if url_segments[-1] == INDEX_FILE_NAME:
        url_segments.pop()

    is_api = API_SEGMENT in parts[:-1]

    flags = SegmentFlags()
    for segment in url_segments:
        flags = merge_flags(flags, segment_kind(segment))

    return PagePath(join_route(url_segments), parts, is_api, flags)


def is_bootstrap_file(file_path: str) -> bool:
    """``_app``, ``_document``, ``_error`` and ``_middleware`` never become routes."""
    return os.path.basename(file_path).startswith(PAGES_BOOTSTRAP_PREFIXES)


def analyze_pages_router(
        pages_directory: Optional[str],
        files: Optional[Iterable[str]] = None,
        logger: Optional[logging.Logger] = None,
        *,
        include_metadata: bool = True,
        respect_gitignore: bool = True,
) -> List[PageRouteInfo]:
    """
    Build one PageRouteInfo per route file of a Pages Router directory.

    Structural checks run before any file is touched, so a bad directory
    never yields partial results.

    Args:
        pages_directory: The ``pages`` root.
        files: Paths to translate (absolute or pages-relative). When omitted
            the directory is scanned for JS/TS sources.
        logger: Optional logger; defaults to this module's logger.
        include_metadata: Read each file for RouteMetadata.
        respect_gitignore: Passed to the scanner when files is omitted.

    Returns:
        List[PageRouteInfo]: Routes in input (or scan) order.

    Raises:
        MissingDirectoryError: If pages_directory is not given.
        DirectoryNotFoundError: If it does not exist.
        PathNotADirectoryError: If it is not a directory.
    """
    log = logger or logging.getLogger(__name__)
    root = validate_directory(pages_directory, label="Pages")

    log.info(f"Analyzing Next.js Pages Router structure in: {root}")

    if files is None:
        files = scan_directory(root, SOURCE_EXTENSIONS, respect_gitignore=respect_gitignore)

    abs_files = [f if os.path.isabs(f) else os.path.join(root, f) for f in files]
    route_files = [f for f in abs_files if not is_bootstrap_file(f)]

    log.info(f"Found {len(route_files)} route files in the Pages Router")

    if include_metadata and route_files:
        with ThreadPoolExecutor(thread_name_prefix="PagesMetadata") as executor:
            metadata = list(executor.map(lambda f: extract_route_metadata(f, log), route_files))
    else:
        metadata = [None] * len(route_files)

    routes = [_build_route(f, root, m) for f, m in zip(route_files, metadata)]
    _log_summary(routes, log)
    return routes


# ==============================================================================
# PRIVATE HELPERS
# ==============================================================================

def _build_route(abs_path: str, root: str, metadata) -> PageRouteInfo:
    relative_path = to_posix(os.path.relpath(abs_path, root))
    translated = translate_page_path(relative_path)
    info = classify_file(abs_path)

    return PageRouteInfo(
        absolute_path=abs_path,
        relative_path=relative_path,
        route_path=translated.route_path,
        segments=translated.segments,
        file_type=FileType.API if translated.is_api else FileType.PAGE,
        is_dynamic=translated.flags.is_dynamic,
        is_catch_all=translated.flags.is_catch_all,
        is_optional_catch_all=translated.flags.is_optional_catch_all,
        is_api_route=translated.is_api,
        is_special_file=info.is_special_file,
        is_client_component=info.is_client_component,
        is_server_component=info.is_server_component,
        metadata=metadata,
    )


def _log_summary(routes: List[PageRouteInfo], log: logging.Logger) -> None:
    pages = sum(1 for r in routes if r.file_type == FileType.PAGE)
    apis = sum(1 for r in routes if r.is_api_route)
    dynamic = sum(1 for r in routes if r.is_dynamic)
    special = sum(1 for r in routes if r.is_special_file)

    log.info(f"Found {pages} page routes")
    log.info(f"Found {apis} API routes")
    log.info(f"Found {dynamic} dynamic routes")
    if special:
        log.info(f"Found {special} special Next.js files")
