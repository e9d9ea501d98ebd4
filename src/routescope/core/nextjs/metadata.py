from __future__ import annotations

"""
Route File Metadata Extraction.

Gathers lexical facts from a route file body: directives, exports, HTTP
method handlers, package imports and data-fetching markers. Matching is
textual; nothing is parsed or evaluated.
"""

import logging
import re
from typing import List, Optional

from routescope.domain.constants import HTTP_METHODS
from routescope.domain.models import RouteMetadata
from routescope.infra.fs import read_text

# -----------------------------------------------------------------------------
# PATTERNS
# -----------------------------------------------------------------------------

_DEFAULT_EXPORT_RX = re.compile(r"export\s+default\b")
_FUNCTION_EXPORT_RX = re.compile(r"export\s+(?:async\s+)?function\s*\*?\s*(\w+)")
_BINDING_EXPORT_RX = re.compile(r"export\s+(?:const|let|var)\s+(\w+)")
_LIST_EXPORT_RX = re.compile(r"export\s+(?:type\s+)?\{([^}]+)\}")
_IMPORT_RX = re.compile(r"import\s+[^;]*?\s+from\s+['\"`]([^'\"`]+)['\"`]")
_SIDE_EFFECT_IMPORT_RX = re.compile(r"^\s*import\s+['\"`]([^'\"`]+)['\"`]", re.MULTILINE)

_DATA_FETCHING_MARKERS = (
    ("fetch(", "fetch"),
    ("getServerSideProps", "getServerSideProps"),
    ("getStaticProps", "getStaticProps"),
    ("getStaticPaths", "getStaticPaths"),
    ("generateStaticParams", "generateStaticParams"),
    ("generateMetadata", "generateMetadata"),
)

_MIDDLEWARE_MARKERS = ("middleware", "NextRequest", "NextResponse")
_ERROR_BOUNDARY_MARKERS = ("ErrorBoundary", "error.tsx", "error.jsx")


# ==============================================================================
# PUBLIC API
# ==============================================================================

def extract_route_metadata(
        file_path: str,
        logger: Optional[logging.Logger] = None,
) -> RouteMetadata:
    """
    Read a route file and extract its metadata.

    Args:
        file_path: File to inspect.
        logger: Optional logger; defaults to this module's logger.

    Returns:
        RouteMetadata: Extracted facts, or the defaults when the file is unreadable.
    """
    log = logger or logging.getLogger(__name__)
    log.debug(f"Extracting metadata from: {file_path}")

    try:
        content = read_text(file_path)
    except OSError as e:
        log.warning(f"Failed to extract metadata from {file_path}: {e}")
        return RouteMetadata()

    return extract_metadata_from_content(content)


def extract_metadata_from_content(content: str) -> RouteMetadata:
    """Content-level counterpart of ``extract_route_metadata``."""
    directives: List[str] = []
    is_client = _has_directive(content, "use client")
    if is_client:
        directives.append("use client")
    if _has_directive(content, "use server"):
        directives.append("use server")

    http_methods = _http_methods(content)

    return RouteMetadata(
        has_default_export=bool(_DEFAULT_EXPORT_RX.search(content)),
        named_exports=_named_exports(content),
        is_client_component=is_client,
        is_server_component=not is_client,
        has_middleware=any(m in content for m in _MIDDLEWARE_MARKERS),
        imports=_package_imports(content),
        directives=directives,
        error_handling=_has_error_handling(content),
        data_fetching=[label for marker, label in _DATA_FETCHING_MARKERS if marker in content],
        http_methods=http_methods or None,
    )


# ==============================================================================
# PRIVATE HELPERS
# ==============================================================================

def _has_directive(content: str, directive: str) -> bool:
    return f'"{directive}"' in content or f"'{directive}'" in content


def _named_exports(content: str) -> List[str]:
    names: List[str] = []
    names.extend(_FUNCTION_EXPORT_RX.findall(content))
    names.extend(_BINDING_EXPORT_RX.findall(content))

    for group in _LIST_EXPORT_RX.findall(content):
        for item in group.split(","):
            # "a as b" exports the local name a under b
            local = item.strip().split(" as ")[0].strip()
            if local:
                names.append(local)

    return _dedupe(names)


def _http_methods(content: str) -> List[str]:
    found: List[str] = []
    for method in HTTP_METHODS:
        rx = re.compile(
            rf"export\s+(?:(?:async\s+)?function\s+{method}\b|(?:const|let|var)\s+{method}\b)"
        )
        if rx.search(content):
            found.append(method)
    return found


def _package_imports(content: str) -> List[str]:
    modules = _IMPORT_RX.findall(content) + _SIDE_EFFECT_IMPORT_RX.findall(content)
    return _dedupe(m for m in modules if not m.startswith((".", "/")))


def _has_error_handling(content: str) -> bool:
    if re.search(r"\btry\s*\{", content) and re.search(r"\bcatch\b", content):
        return True
    return any(m in content for m in _ERROR_BOUNDARY_MARKERS)


def _dedupe(items) -> List[str]:
    seen = set()
    out: List[str] = []
    for item in items:
        if item not in seen:
            seen.add(item)
            out.append(item)
    return out
