from __future__ import annotations

"""
Integration tests for the Next.js analysis command.

Runs the full engine over a real on-disk project: structure detection,
scanning, both router analyzers, port detection and middleware rules.
"""

import re
from pathlib import Path

import pytest

from routescope.core.pipeline.engine import run_nextjs_routes
from routescope.domain.errors import DirectoryNotFoundError


@pytest.fixture
def nextjs_project(pages_project: Path, write_tree) -> Path:
    """Pages fixture plus an app directory, middleware and config files."""
    return write_tree(pages_project, {
        "app/page.tsx": "export default function Home() { return null }\n",
        "app/dashboard/page.tsx": "'use client'\nexport default function Dash() { return null }\n",
        "middleware.ts": "export const config = { matcher: ['/dashboard/:path*'] }\n",
        "next.config.js": (
            "module.exports = {\n"
            "  async rewrites() { return [{ source: '/docs', destination: '/blog' }] },\n"
            "  async redirects() { return [{ source: '/old', destination: '/', permanent: true }] },\n"
            "}\n"
        ),
        ".env.local": "PORT=4000\n",
    })


def test_full_report(nextjs_project: Path) -> None:
    """Every section of the report is populated."""
    report = run_nextjs_routes({"path": str(nextjs_project)})

    assert report["scannedDirectory"] == str(nextjs_project)
    assert report["port"] == 4000
    assert report["filesFound"] == 15

    structure = report["structure"]
    assert structure["hasAppRouter"] is True
    assert structure["hasPagesRouter"] is True
    assert structure["appDirectory"] == str(nextjs_project / "app")
    assert structure["pagesDirectory"] == str(nextjs_project / "pages")

    assert len(report["pagesRoutes"]) == 9
    assert sorted(r["routePath"] for r in report["appRoutes"]) == ["/", "/dashboard"]

    assert report["middleware"]["exists"] is True
    assert report["middleware"]["matcher"] == ["/dashboard/:path*"]
    assert report["rewrites"] == [{"source": "/docs", "destination": "/blog"}]
    assert report["redirects"] == [{"source": "/old", "destination": "/", "permanent": True}]


def test_route_type_filter(nextjs_project: Path) -> None:
    """The type filter narrows Pages Router routes only."""
    api = run_nextjs_routes({"path": str(nextjs_project)}, route_type="api")
    pages = run_nextjs_routes({"path": str(nextjs_project)}, route_type="page")

    assert len(api["pagesRoutes"]) == 2
    assert all(r["isApiRoute"] for r in api["pagesRoutes"])
    assert len(pages["pagesRoutes"]) == 7
    assert len(api["appRoutes"]) == len(pages["appRoutes"]) == 2


def test_pattern_filter(nextjs_project: Path) -> None:
    """The regex applies to route paths of both routers, ignoring case."""
    report = run_nextjs_routes({"path": str(nextjs_project)}, pattern="BLOG")

    assert sorted(r["routePath"] for r in report["pagesRoutes"]) == ["/blog", "/blog/[slug]"]
    assert report["appRoutes"] == []


def test_explicit_port_wins(nextjs_project: Path) -> None:
    """A port passed in overrides detection."""
    assert run_nextjs_routes({"path": str(nextjs_project)}, port=8080)["port"] == 8080


def test_configured_port_when_nothing_detected(pages_project: Path) -> None:
    """Without project config the configured default is used."""
    report = run_nextjs_routes({"path": str(pages_project), "nextjs_port": 3100})
    assert report["port"] == 3100


def test_ignore_patterns_prune_routes(nextjs_project: Path) -> None:
    """Ignored directories never reach the analyzers."""
    report = run_nextjs_routes({"path": str(nextjs_project), "ignore_patterns": ["api"]})
    assert not any(r["isApiRoute"] for r in report["pagesRoutes"])
    assert len(report["pagesRoutes"]) == 7


def test_project_without_routers(tmp_path: Path) -> None:
    """An empty project yields an empty but well-formed report."""
    report = run_nextjs_routes({"path": str(tmp_path)})

    assert report["structure"] == {"hasAppRouter": False, "hasPagesRouter": False}
    assert report["pagesRoutes"] == []
    assert report["appRoutes"] == []
    assert report["middleware"] == {"exists": False}
    assert report["port"] == 3000


def test_missing_directory(tmp_path: Path) -> None:
    """A missing root is a structural error."""
    with pytest.raises(DirectoryNotFoundError):
        run_nextjs_routes({"path": str(tmp_path / "ghost")})


def test_invalid_pattern(nextjs_project: Path) -> None:
    """A malformed regex is rejected before any scan."""
    with pytest.raises(re.error):
        run_nextjs_routes({"path": str(nextjs_project)}, pattern="[unclosed")
