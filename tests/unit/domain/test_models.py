from __future__ import annotations

"""
Unit tests for the domain records and their JSON rendering.
"""

import dataclasses

import pytest

from routescope.domain.models import (
    FileType,
    MiddlewareInfo,
    ProjectStructure,
    RedirectRule,
    RouteInfo,
    RouterFileInfo,
    RouterType,
    RouteUrl,
)


def test_to_dict_uses_camel_case_and_enum_values():
    """Field names are camelCased and enums rendered by value."""
    info = RouterFileInfo("src/App.tsx", True, RouterType.DATA_ROUTER)
    assert info.to_dict() == {
        "filePath": "src/App.tsx",
        "isRouter": True,
        "routerType": "data-router",
    }


def test_to_dict_omits_none_members():
    """Optional members that are unset do not appear."""
    assert MiddlewareInfo(exists=False).to_dict() == {"exists": False}
    assert RedirectRule("/a", "/b").to_dict() == {
        "source": "/a",
        "destination": "/b",
        "permanent": False,
    }


def test_nested_routes_are_serialized():
    """Children are rendered recursively."""
    route = RouteInfo(
        path="/",
        children=[RouteInfo(path="", parent_path="/", index=True, element="Home")],
    )
    assert route.to_dict() == {
        "path": "/",
        "hasDynamicSegments": False,
        "index": False,
        "children": [{
            "path": "",
            "hasDynamicSegments": False,
            "parentPath": "/",
            "element": "Home",
            "index": True,
        }],
    }


def test_project_structure_flags_follow_directories():
    """from_directories keeps flags and paths consistent."""
    s = ProjectStructure.from_directories("/p/app", None)
    assert s.has_app_router is True
    assert s.has_pages_router is False
    assert s.to_dict() == {"hasAppRouter": True, "hasPagesRouter": False, "appDirectory": "/p/app"}


def test_router_file_negative():
    """Negative verdicts always carry UNKNOWN."""
    info = RouterFileInfo.negative("util.ts")
    assert info.is_router is False
    assert info.router_type is RouterType.UNKNOWN


def test_records_are_immutable():
    """Records are frozen after construction."""
    url = RouteUrl(path="/", url="http://localhost:3000/", has_dynamic_segments=False)
    with pytest.raises(dataclasses.FrozenInstanceError):
        url.path = "/other"  # type: ignore[misc]


def test_file_type_values():
    """Serialized file types match the Next.js reserved names."""
    assert FileType.NOT_FOUND.value == "not-found"
    assert FileType("api") is FileType.API
