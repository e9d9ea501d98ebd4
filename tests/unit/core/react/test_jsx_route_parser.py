from __future__ import annotations

"""
Unit tests for JSX <Route> extraction.
"""

import logging
from pathlib import Path

import pytest

from routescope.core.react.parsers import extract_jsx_routes, parse_jsx_routes

NESTED_ROUTES = """
import { Routes, Route } from 'react-router-dom';

export default function App() {
  return (
    <Routes>
      <Route path="/" element={<Layout />}>
        <Route index element={<Home />} />
        <Route path="about" element={<About title={"x > y"} />} />
        <Route path='users/:id' element={<User />} />
        <Route path={"settings"}>
          <Route path="*" element={<NotFound />} />
        </Route>
      </Route>
      <Route path="/login" element={<Login />} />
    </Routes>
  );
}
"""


def test_nested_tree_is_rebuilt() -> None:
    """Children are nested and their paths joined under the parent."""
    routes = extract_jsx_routes(NESTED_ROUTES)

    assert [r.path for r in routes] == ["/", "/login"]

    root = routes[0]
    assert root.element == "Layout"
    assert [c.path for c in root.children] == ["", "/about", "/users/:id", "/settings"]

    index = root.children[0]
    assert index.index is True
    assert index.parent_path == "/"
    assert index.element == "Home"

    about = root.children[1]
    assert about.element == "About"
    assert about.has_dynamic_segments is False

    user = root.children[2]
    assert user.has_dynamic_segments is True

    settings = root.children[3]
    assert settings.children[0].path == "/settings/*"
    assert settings.children[0].parent_path == "/settings"
    assert settings.children[0].has_dynamic_segments is True


def test_pathless_layout_route_passes_parent_down() -> None:
    """A route without path groups children under the enclosing path."""
    content = """
    <Route path="/app">
      <Route element={<Shell />}>
        <Route path="inbox" />
      </Route>
    </Route>
    """
    routes = extract_jsx_routes(content)

    shell = routes[0].children[0]
    assert shell.path == ""
    assert shell.element == "Shell"
    assert shell.children[0].path == "/app/inbox"


def test_expression_paths_are_pathless() -> None:
    """Non-literal path expressions are not resolved."""
    routes = extract_jsx_routes('<Route path={ROUTES.home} element={<Home />} />')
    assert routes == []


def test_index_attribute_forms() -> None:
    """index, index={true} and index={false} are distinguished."""
    routes = extract_jsx_routes("""
    <Route path="/a">
      <Route index={true} element={<A />} />
      <Route index={false} path="b" />
    </Route>
    """)
    children = routes[0].children
    assert children[0].index is True
    assert children[1].index is False
    assert children[1].path == "/a/b"


def test_unclosed_route_is_finalized() -> None:
    """A route still open at end of file is kept with its children."""
    routes = extract_jsx_routes('<Route path="/docs"><Route path="intro" />')
    assert routes[0].path == "/docs"
    assert routes[0].children[0].path == "/docs/intro"


def test_duplicates_recorded_once() -> None:
    """The same top-level route appears once."""
    routes = extract_jsx_routes('<Route path="/a" /><Route path="/a" />')
    assert len(routes) == 1


def test_commented_out_routes_are_ignored() -> None:
    """JSX and line comments hide the routes they contain."""
    routes = extract_jsx_routes("""
    <Routes>
      <Route path="/a" element={<A />} />
      {/* <Route path="/old" element={<Old />} /> */}
      // <Route path="/legacy" />
    </Routes>
    """)
    assert [r.path for r in routes] == ["/a"]


def test_apostrophe_in_element_text_keeps_scanning() -> None:
    """Unbalanced quotes in JSX text do not lose this or later routes."""
    routes = extract_jsx_routes("""
    <Routes>
      <Route path="/a" element={<p>Don't</p>} />
      <Route path="/b" element={<B />} />
    </Routes>
    """)
    assert [r.path for r in routes] == ["/a", "/b"]
    assert routes[1].element == "B"


def test_route_prefixed_components_are_ignored() -> None:
    """<Routes>, <RouterProvider> and <RouteGuard> are not routes."""
    assert extract_jsx_routes("<Routes><RouteGuard path='/x' /></Routes>") == []


def test_parse_missing_file(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    """A read failure is logged at ERROR and gives no routes."""
    with caplog.at_level(logging.ERROR):
        assert parse_jsx_routes(str(tmp_path / "missing.tsx")) == []
    assert "Failed to parse JSX routes" in caplog.text


def test_parse_file(tmp_path: Path) -> None:
    """parse_jsx_routes reads the file and extracts its routes."""
    f = tmp_path / "App.tsx"
    f.write_text(NESTED_ROUTES, encoding="utf-8")
    assert [r.path for r in parse_jsx_routes(str(f))] == ["/", "/login"]
