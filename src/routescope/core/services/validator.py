from __future__ import annotations

"""
Configuration Validation Service.

Normalizes the merged runtime configuration (defaults, persisted state and
CLI overrides) into strictly typed values before any analysis runs.
Coercions are reported as warnings instead of failing the run.
"""

import logging
from typing import Any, Dict, List, Tuple

from routescope.domain.config import get_default_config
from routescope.domain.constants import SOURCE_EXTENSIONS

logger = logging.getLogger(__name__)

_MAX_PORT = 65535


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def validate_config(
        config: Any,
        *,
        strict: bool = False,
) -> Tuple[Dict[str, Any], List[str]]:
    """
    Validate and normalize a configuration dictionary.

    Args:
        config: Raw configuration data.
        strict: Raise on type mismatch instead of coercing.

    Returns:
        Tuple[Dict[str, Any], List[str]]: Normalized configuration and warnings.

    Raises:
        TypeError: In strict mode, on a value of the wrong type.
        ValueError: In strict mode, on a malformed extension or port.
    """
    warnings: List[str] = []
    defaults = get_default_config()

    if not isinstance(config, dict):
        msg = f"Invalid config type: expected dict, received {type(config).__name__}."
        if strict:
            raise TypeError(msg)
        warnings.append(f"{msg} Using defaults.")
        logger.warning(msg)
        return defaults, warnings

    merged: Dict[str, Any] = dict(defaults)
    merged.update(config)

    merged["path"] = _as_str(merged.get("path"), defaults["path"], "path", warnings, strict)

    for field in ("respect_gitignore", "pretty"):
        merged[field] = _as_bool(merged.get(field), defaults[field], field, warnings, strict)

    for field in ("nextjs_port", "react_port"):
        merged[field] = _as_port(merged.get(field), defaults[field], field, warnings, strict)

    merged["extensions"] = _as_list_str(
        merged.get("extensions"), list(SOURCE_EXTENSIONS), "extensions", warnings, strict
    )
    merged["ignore_patterns"] = _as_list_str(
        merged.get("ignore_patterns"), [], "ignore_patterns", warnings, strict
    )

    merged["extensions"] = _normalize_extensions(merged["extensions"], warnings, strict)

    return merged, warnings


# -----------------------------------------------------------------------------
# PRIVATE HELPERS: TYPE COERCION
# -----------------------------------------------------------------------------

def _as_str(value: Any, fallback: str, field: str, warnings: List[str], strict: bool) -> str:
    if value is None:
        return fallback
    if isinstance(value, str):
        v = value.strip()
        return v if v else fallback

    msg = f"Invalid field '{field}': expected str, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback


def _as_bool(value: Any, fallback: bool, field: str, warnings: List[str], strict: bool) -> bool:
    """Coerce 0/1 and yes/no style strings into booleans."""
    if isinstance(value, bool):
        return value
    if value is None:
        return fallback

    if not strict:
        if isinstance(value, (int, float)) and value in (0, 1):
            warnings.append(f"Field '{field}' converted from number {value} to bool.")
            return bool(value)
        if isinstance(value, str):
            s = value.strip().lower()
            if s in ("true", "1", "yes", "y", "on"):
                warnings.append(f"Field '{field}' converted from '{value}' to True.")
                return True
            if s in ("false", "0", "no", "n", "off"):
                warnings.append(f"Field '{field}' converted from '{value}' to False.")
                return False

    msg = f"Invalid field '{field}': expected bool, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback


def _as_port(value: Any, fallback: int, field: str, warnings: List[str], strict: bool) -> int:
    """Accept ints or numeric strings in the TCP port range."""
    if value is None:
        return fallback

    port = None
    if isinstance(value, int) and not isinstance(value, bool):
        port = value
    elif isinstance(value, str) and value.strip().isdigit() and not strict:
        port = int(value.strip())
        warnings.append(f"Field '{field}' converted from '{value}' to {port}.")
    elif strict:
        raise TypeError(f"Invalid field '{field}': expected int, received {type(value).__name__}.")

    if port is not None and 0 < port <= _MAX_PORT:
        return port

    msg = f"Invalid port for '{field}': {value!r}."
    if strict:
        raise ValueError(msg)
    warnings.append(f"{msg} Using {fallback}.")
    return fallback


def _as_list_str(value: Any, fallback: List[str], field: str, warnings: List[str], strict: bool) -> List[str]:
    """Ensure a list of stripped strings; a CSV string is split when not strict."""
    if value is None:
        return list(fallback)

    if isinstance(value, str) and not strict:
        items = [x.strip() for x in value.split(",") if x.strip()]
        if items:
            warnings.append(f"Field '{field}' converted from CSV string to list.")
            return items
        return list(fallback)

    if isinstance(value, list):
        out: List[str] = []
        for i, item in enumerate(value):
            if isinstance(item, str):
                s = item.strip()
                if s:
                    out.append(s)
            else:
                msg = f"Invalid item in '{field}[{i}]': expected str."
                if strict:
                    raise TypeError(msg)
                warnings.append(f"{msg} Item discarded.")
        return out if out else list(fallback)

    msg = f"Invalid field '{field}': expected list[str], received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return list(fallback)


# -----------------------------------------------------------------------------
# PRIVATE HELPERS: DOMAIN NORMALIZATION
# -----------------------------------------------------------------------------

def _normalize_extensions(exts: List[str], warnings: List[str], strict: bool) -> List[str]:
    """Prefix every extension with a dot and drop duplicates, keeping order."""
    out: List[str] = []
    for ext in exts:
        e = ext.strip()
        if not e:
            continue
        if not e.startswith("."):
            if strict:
                raise ValueError(f"Invalid extension '{ext}': must start with '.'.")
            warnings.append(f"Extension '{ext}' corrected to '.{e}'.")
            e = "." + e
        if e not in out:
            out.append(e)
    return out if out else list(SOURCE_EXTENSIONS)
