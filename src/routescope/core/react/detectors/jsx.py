from __future__ import annotations

import re

from routescope.core.react.detectors.base import REACT_ROUTER_IMPORTS, RouterDetector
from routescope.domain.models import RouterType

# <Route or <Routes as a whole tag name; <RouterProvider does not count
_ROUTE_TAG_RX = re.compile(r"<Routes?[\s/>]")


class JsxRouterDetector(RouterDetector):
    """Routes declared as ``<Routes><Route .../></Routes>`` element trees."""

    import_patterns = REACT_ROUTER_IMPORTS
    component_patterns = (
        "<BrowserRouter",
        "<HashRouter",
        "<MemoryRouter",
        "<Router",
        "<Routes",
        "<Route",
    )

    @property
    def router_type(self) -> RouterType:
        return RouterType.JSX

    def determine_router_type(self, file_path: str) -> RouterType:
        content = self._read_or_none(file_path)
        if content is not None and _ROUTE_TAG_RX.search(content):
            return RouterType.JSX
        return RouterType.UNKNOWN
