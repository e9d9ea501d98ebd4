from __future__ import annotations

"""
Route Discovery Domain Data Models.

Defines the immutable records produced by the Next.js and React analyzers
and consumed by the CLI layer. Every record is derived fresh from the
filesystem on each invocation; nothing here is cached or mutated after
construction.
"""

from dataclasses import dataclass, field, fields, is_dataclass
from enum import Enum
from typing import Any, Dict, List, Optional

# -----------------------------------------------------------------------------
# ENUMERATIONS
# -----------------------------------------------------------------------------

class FileType(str, Enum):
    """Routing role of a source file."""
    PAGE = "page"
    LAYOUT = "layout"
    ROUTE = "route"
    LOADING = "loading"
    NOT_FOUND = "not-found"
    ERROR = "error"
    TEMPLATE = "template"
    MIDDLEWARE = "middleware"
    DEFAULT = "default"
    API = "api"
    OTHER = "other"


class RouterType(str, Enum):
    """Flavour of a React router-definition file."""
    JSX = "jsx"
    OBJECT = "object"
    DATA_ROUTER = "data-router"
    UNKNOWN = "unknown"

# -----------------------------------------------------------------------------
# SERIALIZATION SUPPORT
# -----------------------------------------------------------------------------

def _camel(name: str) -> str:
    head, *tail = name.split("_")
    return head + "".join(part.capitalize() for part in tail)


def _to_jsonable(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    if is_dataclass(value) and not isinstance(value, type):
        return value.to_dict()
    if isinstance(value, (list, tuple)):
        return [_to_jsonable(v) for v in value]
    return value


class JsonRecord:
    """Mixin rendering a dataclass into the camelCase JSON shape of the CLI."""

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {}
        for f in fields(self):  # type: ignore[arg-type]
            value = getattr(self, f.name)
            # Optional members are omitted rather than rendered as null
            if value is None:
                continue
            out[_camel(f.name)] = _to_jsonable(value)
        return out

# -----------------------------------------------------------------------------
# NEXT.JS MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class ProjectStructure(JsonRecord):
    """
    Router roots detected in a Next.js project.

    A flag is True iff its directory field is set; use ``from_directories``
    to keep both in step.
    """
    has_app_router: bool
    has_pages_router: bool
    app_directory: Optional[str] = None
    pages_directory: Optional[str] = None

    @classmethod
    def from_directories(
            cls,
            app_directory: Optional[str],
            pages_directory: Optional[str],
    ) -> "ProjectStructure":
        return cls(
            has_app_router=app_directory is not None,
            has_pages_router=pages_directory is not None,
            app_directory=app_directory,
            pages_directory=pages_directory,
        )


@dataclass(frozen=True)
class SpecialFileInfo(JsonRecord):
    """
    Classification of a single file path against the Next.js taxonomy.

    Attributes:
        file_path: Path as supplied by the caller.
        file_name: Base name including extension.
        file_type: Reserved-name type, ``page`` for index files, else ``other``.
        extension: Extension including the leading dot.
        is_special_file: True only for the nine reserved names.
        is_client_component: Extension-based client heuristic.
        is_server_component: Special file that is not a client component.
    """
    file_path: str
    file_name: str
    file_type: FileType
    extension: str
    is_special_file: bool
    is_client_component: bool
    is_server_component: bool


@dataclass(frozen=True)
class RouteMetadata(JsonRecord):
    """Lexical facts gathered from a route file body."""
    has_default_export: bool = False
    named_exports: List[str] = field(default_factory=list)
    is_client_component: bool = False
    is_server_component: bool = True
    has_middleware: bool = False
    imports: List[str] = field(default_factory=list)
    directives: List[str] = field(default_factory=list)
    error_handling: bool = False
    data_fetching: List[str] = field(default_factory=list)
    http_methods: Optional[List[str]] = None


@dataclass(frozen=True)
class PageRouteInfo(JsonRecord):
    """
    A Pages Router file translated into its URL route.

    ``is_catch_all`` and ``is_optional_catch_all`` imply ``is_dynamic``;
    ``is_api_route`` holds iff ``file_type`` is ``FileType.API``.
    """
    absolute_path: str
    relative_path: str
    route_path: str
    segments: List[str]
    file_type: FileType
    is_dynamic: bool
    is_catch_all: bool
    is_optional_catch_all: bool
    is_api_route: bool
    is_special_file: bool = False
    is_client_component: bool = False
    is_server_component: bool = False
    metadata: Optional[RouteMetadata] = None


@dataclass(frozen=True)
class AppRouteInfo(JsonRecord):
    """An App Router file translated into the URL of its directory."""
    absolute_path: str
    relative_path: str
    route_path: str
    segments: List[str]
    file_type: FileType
    is_page: bool
    is_layout: bool
    is_route: bool
    is_route_group: bool
    is_parallel_route: bool
    is_dynamic: bool
    is_catch_all: bool
    is_optional_catch_all: bool
    is_client_component: bool
    is_server_component: bool


@dataclass(frozen=True)
class MiddlewareInfo(JsonRecord):
    """Middleware presence; ``file_path`` is set iff ``exists``."""
    exists: bool
    file_path: Optional[str] = None
    matcher: Optional[List[str]] = None


@dataclass(frozen=True)
class RewriteRule(JsonRecord):
    source: str
    destination: str


@dataclass(frozen=True)
class RedirectRule(JsonRecord):
    source: str
    destination: str
    permanent: bool = False
    status_code: Optional[int] = None


@dataclass(frozen=True)
class MiddlewareResult(JsonRecord):
    """Aggregate of middleware and config-file routing rules."""
    middleware: MiddlewareInfo
    rewrites: List[RewriteRule] = field(default_factory=list)
    redirects: List[RedirectRule] = field(default_factory=list)


@dataclass(frozen=True)
class DevServerConfig(JsonRecord):
    """Development server port and where it was found."""
    port: int
    config_found: bool
    config_source: Optional[str] = None

# -----------------------------------------------------------------------------
# REACT ROUTER MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class RouterFileInfo(JsonRecord):
    """Detection verdict for one file; ``router_type`` is UNKNOWN unless ``is_router``."""
    file_path: str
    is_router: bool
    router_type: RouterType = RouterType.UNKNOWN

    @classmethod
    def negative(cls, file_path: str) -> "RouterFileInfo":
        return cls(file_path=file_path, is_router=False, router_type=RouterType.UNKNOWN)


@dataclass(frozen=True)
class RouteInfo(JsonRecord):
    """
    A route literal recovered from a router-definition file.

    Attributes:
        path: Full path joined under the parent (empty for index routes).
        has_dynamic_segments: Path carries ``:param`` or ``*`` segments.
        children: Nested routes in declaration order, or None.
        parent_path: Path of the enclosing route, if any.
        element: Rendered component name when it could be read.
        index: Route renders at its parent's path.
    """
    path: str
    has_dynamic_segments: bool = False
    children: Optional[List["RouteInfo"]] = None
    parent_path: Optional[str] = None
    element: Optional[str] = None
    index: bool = False


@dataclass(frozen=True)
class RouteUrl(JsonRecord):
    path: str
    url: str
    has_dynamic_segments: bool


@dataclass(frozen=True)
class ViteConfigResult(JsonRecord):
    config_path: Optional[str] = None
    port: Optional[int] = None
