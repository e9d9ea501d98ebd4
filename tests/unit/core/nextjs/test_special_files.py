from __future__ import annotations

"""
Unit tests for the Next.js Special-File Classifier.

Verifies:
1. Extension gating of special-file detection.
2. The index asymmetry between is_special_file and classify_file.
3. Client/server approximation from the extension.
"""

import pytest

from routescope.core.nextjs.special_files import (
    analyze_files,
    classify_file,
    filter_special_files,
    is_special_file,
)
from routescope.domain.models import FileType

RESERVED = ["page", "layout", "route", "loading", "not-found", "error", "template", "default", "middleware"]


@pytest.mark.parametrize("stem", RESERVED)
@pytest.mark.parametrize("ext", [".js", ".jsx", ".ts", ".tsx"])
def test_reserved_names_are_special(stem: str, ext: str) -> None:
    """Every reserved name with a source extension is special."""
    assert is_special_file(f"app/dashboard/{stem}{ext}") is True


@pytest.mark.parametrize("ext", [".css", ".txt", ".md", ".json"])
def test_unrecognized_extension_is_never_special(ext: str) -> None:
    """A reserved name with a non-source extension is rejected."""
    assert is_special_file(f"app/page{ext}") is False
    assert is_special_file(f"pages/index{ext}") is False


def test_index_asymmetry() -> None:
    """index is special for the predicate but typed page without the special flag."""
    assert is_special_file("pages/index.tsx") is True

    info = classify_file("pages/index.tsx")
    assert info.file_type == FileType.PAGE
    assert info.is_special_file is False


def test_classify_reserved_and_other() -> None:
    """Reserved stems map to their type; unknown stems are 'other'."""
    layout = classify_file("/abs/app/layout.tsx")
    assert layout.file_type == FileType.LAYOUT
    assert layout.file_name == "layout.tsx"
    assert layout.extension == ".tsx"
    assert layout.is_special_file is True

    assert classify_file("app/not-found.js").file_type == FileType.NOT_FOUND
    assert classify_file("components/Button.tsx").file_type == FileType.OTHER


def test_client_server_heuristic() -> None:
    """Markup extensions mean client; server only applies to special files."""
    client = classify_file("app/page.tsx")
    assert client.is_client_component is True
    assert client.is_server_component is False

    server = classify_file("app/route.ts")
    assert server.is_client_component is False
    assert server.is_server_component is True

    plain = classify_file("lib/db.ts")
    assert plain.is_server_component is False


def test_batch_helpers_preserve_order() -> None:
    """filter_special_files and analyze_files keep input order."""
    paths = ["app/page.tsx", "lib/util.ts", "app/layout.tsx", "pages/index.js", "styles/page.css"]

    assert filter_special_files(paths) == ["app/page.tsx", "app/layout.tsx", "pages/index.js"]
    # classify_file keys on the stem alone, so a reserved stem with a
    # non-source extension is still reported
    assert [i.file_path for i in analyze_files(paths)] == ["app/page.tsx", "app/layout.tsx", "styles/page.css"]
