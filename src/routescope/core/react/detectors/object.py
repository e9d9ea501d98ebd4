from __future__ import annotations

from routescope.core.react.detectors.base import REACT_ROUTER_IMPORTS, RouterDetector
from routescope.domain.models import RouterType

_ROUTE_FACTORIES = (
    "createBrowserRouter",
    "createHashRouter",
    "createMemoryRouter",
    "createStaticRouter",
    "createRoutesFromElements",
)


class ObjectRouterDetector(RouterDetector):
    """Routes declared as object arrays passed to a ``create*Router`` factory."""

    import_patterns = REACT_ROUTER_IMPORTS
    component_patterns = _ROUTE_FACTORIES + ("RouterProvider",)

    @property
    def router_type(self) -> RouterType:
        return RouterType.OBJECT

    def determine_router_type(self, file_path: str) -> RouterType:
        # RouterProvider alone only consumes a router built elsewhere
        content = self._read_or_none(file_path)
        if content is not None and any(f in content for f in _ROUTE_FACTORIES):
            return RouterType.OBJECT
        return RouterType.UNKNOWN
