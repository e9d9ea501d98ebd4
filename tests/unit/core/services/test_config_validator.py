from __future__ import annotations

"""
Unit tests for the configuration validation service.

Covers lenient coercion (with warnings) and strict-mode failures.
"""

import pytest

from routescope.core.services.validator import validate_config
from routescope.domain.config import get_default_config


def test_valid_config_passes_unchanged(mock_config_dict):
    """A complete, well-typed config produces no warnings."""
    cfg, warnings = validate_config(mock_config_dict)

    assert warnings == []
    assert cfg["path"] == "/tmp/test_project"
    assert cfg["extensions"] == [".js", ".jsx", ".ts", ".tsx"]


def test_non_dict_falls_back_to_defaults():
    """Anything but a dict yields the defaults plus a warning."""
    cfg, warnings = validate_config(["not", "a", "dict"])

    assert cfg == get_default_config()
    assert "Invalid config type" in warnings[0]


def test_non_dict_strict_raises():
    """Strict mode refuses a non-dict config."""
    with pytest.raises(TypeError):
        validate_config("nope", strict=True)


def test_partial_config_is_merged_with_defaults():
    """Missing keys come from the defaults."""
    cfg, warnings = validate_config({"path": "  /srv/app  "})

    assert warnings == []
    assert cfg["path"] == "/srv/app"
    assert cfg["nextjs_port"] == 3000
    assert cfg["react_port"] == 5173


def test_bool_coercion():
    """Truthy and falsy strings become booleans with a warning."""
    cfg, warnings = validate_config({"respect_gitignore": "no", "pretty": 1})

    assert cfg["respect_gitignore"] is False
    assert cfg["pretty"] is True
    assert len(warnings) == 2


@pytest.mark.parametrize("value, expected", [
    ("8080", 8080),
    (0, 3000),
    (70000, 3000),
    ("abc", 3000),
    (True, 3000),
])
def test_port_coercion(value, expected):
    """Ports must be integers in 1..65535; others fall back."""
    cfg, warnings = validate_config({"nextjs_port": value})

    assert cfg["nextjs_port"] == expected
    assert warnings


def test_port_strict_raises():
    """Strict mode rejects out-of-range ports."""
    with pytest.raises(ValueError):
        validate_config({"react_port": 0}, strict=True)


def test_extensions_csv_and_dot_correction():
    """A CSV string is split and missing dots are added."""
    cfg, warnings = validate_config({"extensions": "tsx, .ts, tsx"})

    assert cfg["extensions"] == [".tsx", ".ts"]
    assert any("converted from CSV" in w for w in warnings)
    assert any("corrected to '.tsx'" in w for w in warnings)


def test_extension_strict_raises():
    """Strict mode refuses extensions without a leading dot."""
    with pytest.raises(ValueError):
        validate_config({"extensions": ["tsx"]}, strict=True)


def test_invalid_list_items_discarded():
    """Non-string list items are dropped with a warning."""
    cfg, warnings = validate_config({"ignore_patterns": ["dist", 5, " "]})

    assert cfg["ignore_patterns"] == ["dist"]
    assert any("Item discarded" in w for w in warnings)
