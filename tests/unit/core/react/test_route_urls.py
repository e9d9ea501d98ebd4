from __future__ import annotations

"""
Unit tests for route extraction dispatch and URL generation.
"""

import re
from unittest.mock import patch

import pytest

from routescope.core.react.routes import extract_routes, generate_route_urls
from routescope.domain.models import RouteInfo, RouterFileInfo, RouterType, RouteUrl

BASE = "http://localhost:5173"


def _tree():
    return [
        RouteInfo(
            path="/",
            children=[
                RouteInfo(path="", parent_path="/", index=True),
                RouteInfo(path="/about", parent_path="/"),
                RouteInfo(
                    path="",
                    parent_path="/",
                    children=[RouteInfo(path="/inbox", parent_path="/")],
                ),
                RouteInfo(path="/users/:id", parent_path="/", has_dynamic_segments=True),
            ],
        ),
    ]


def test_urls_depth_first_and_unique() -> None:
    """Index routes collapse onto the parent URL; pathless layouts only contribute children."""
    urls = generate_route_urls(_tree(), BASE)

    assert [u.path for u in urls] == ["/", "/about", "/inbox", "/users/:id"]
    assert urls[0] == RouteUrl(path="/", url=f"{BASE}/", has_dynamic_segments=False)
    assert urls[3].has_dynamic_segments is True


def test_top_level_index_resolves_to_root() -> None:
    """An index route with no parent renders at /."""
    urls = generate_route_urls([RouteInfo(path="", index=True)], BASE)
    assert [u.url for u in urls] == [f"{BASE}/"]


def test_relative_child_is_joined() -> None:
    """Relative child paths are joined under the parent without doubled slashes."""
    routes = [RouteInfo(path="/org/", children=[RouteInfo(path="members")])]
    urls = generate_route_urls(routes, BASE)
    assert [u.path for u in urls] == ["/org/", "/org/members"]


def test_trailing_slash_on_base_url() -> None:
    """The base URL is normalised before joining."""
    urls = generate_route_urls([RouteInfo(path="/a")], BASE + "/")
    assert urls[0].url == f"{BASE}/a"


def test_pattern_filters_case_insensitively() -> None:
    """The regex is searched in the full URL, ignoring case."""
    urls = generate_route_urls(_tree(), BASE, pattern="USERS")
    assert [u.path for u in urls] == ["/users/:id"]


def test_invalid_pattern_raises() -> None:
    """A malformed regex surfaces as re.error."""
    with pytest.raises(re.error):
        generate_route_urls(_tree(), BASE, pattern="(")


def test_extract_routes_dispatches_by_type() -> None:
    """Each file goes to its parser; unknown types are skipped."""
    files = [
        RouterFileInfo("a.tsx", True, RouterType.JSX),
        RouterFileInfo("b.ts", True, RouterType.UNKNOWN),
        RouterFileInfo("c.ts", True, RouterType.OBJECT),
    ]
    jsx_route = RouteInfo(path="/jsx")
    obj_route = RouteInfo(path="/obj")

    with patch.dict(
        "routescope.core.react.routes._PARSERS",
        {
            RouterType.JSX: lambda path, log: [jsx_route],
            RouterType.OBJECT: lambda path, log: [obj_route],
        },
    ):
        routes = extract_routes(files)

    assert routes == [jsx_route, obj_route]


def test_extract_routes_from_files(write_tree, tmp_path) -> None:
    """End to end over real files of two router types."""
    write_tree(tmp_path, {
        "App.tsx": '<Routes><Route path="/home" element={<Home />} /></Routes>',
        "router.ts": "createBrowserRouter([{ path: '/dash' }]);",
    })
    files = [
        RouterFileInfo(str(tmp_path / "App.tsx"), True, RouterType.JSX),
        RouterFileInfo(str(tmp_path / "router.ts"), True, RouterType.OBJECT),
    ]

    assert [r.path for r in extract_routes(files)] == ["/home", "/dash"]
