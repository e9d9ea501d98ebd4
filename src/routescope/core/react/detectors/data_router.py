from __future__ import annotations

from routescope.core.react.detectors.base import RouterDetector
from routescope.domain.models import RouterType


class DataRouterDetector(RouterDetector):
    """TanStack-style data routers built from ``createRoute`` calls or a route tree."""

    import_patterns = (
        "from '@tanstack/react-router'",
        'from "@tanstack/react-router"',
    )
    component_patterns = ("new Router(", "createRoute", "defineRoutes", "routeTree")

    @property
    def router_type(self) -> RouterType:
        return RouterType.DATA_ROUTER

    def determine_router_type(self, file_path: str) -> RouterType:
        content = self._read_or_none(file_path)
        if content is not None and any(p in content for p in self.component_patterns):
            return RouterType.DATA_ROUTER
        return RouterType.UNKNOWN
