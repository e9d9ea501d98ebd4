from __future__ import annotations

"""
Next.js Middleware and Config Routing Rules.

Detects the project's middleware file and its ``matcher``, and lifts the
``rewrites()`` / ``redirects()`` arrays out of ``next.config.*``. Values
are read as literals only; computed entries are skipped.
"""

import logging
import os
import re
from typing import List, Optional, Tuple

from routescope.core.services.literals import (
    balanced_body,
    split_top_level_objects,
    string_field,
    string_literals,
    top_level_text,
)
from routescope.domain.constants import MIDDLEWARE_CANDIDATES, NEXT_CONFIG_CANDIDATES
from routescope.domain.models import MiddlewareInfo, MiddlewareResult, RedirectRule, RewriteRule
from routescope.infra.fs import read_text

# -----------------------------------------------------------------------------
# PATTERNS
# -----------------------------------------------------------------------------

_MATCHER_RX = re.compile(r"(?<![\w$])matcher\s*:\s*([\['\"`])")
_PERMANENT_RX = re.compile(r"(?<![\w$])permanent\s*:\s*(true|false)\b")
_STATUS_CODE_RX = re.compile(r"(?<![\w$])statusCode\s*:\s*(\d+)")


def _rule_array_rx(name: str) -> re.Pattern:
    # Method shorthand: [async] rewrites() { return [ ... ] }
    return re.compile(rf"(?<![\w$]){name}\s*\(\s*\)\s*\{{\s*return\s*(\[)")


_REWRITES_RX = _rule_array_rx("rewrites")
_REDIRECTS_RX = _rule_array_rx("redirects")


# ==============================================================================
# PUBLIC API
# ==============================================================================

def detect_middleware(
        base_path: str = ".",
        logger: Optional[logging.Logger] = None,
) -> MiddlewareResult:
    """
    Detect middleware, rewrites and redirects of a Next.js project.

    Args:
        base_path: Project root.
        logger: Optional logger; defaults to this module's logger.

    Returns:
        MiddlewareResult: Middleware info plus rewrite and redirect rules.
    """
    log = logger or logging.getLogger(__name__)
    root = os.path.abspath(base_path or ".")
    log.info(f"Detecting Next.js middleware and rewrites in: {root}")

    middleware = _detect_middleware_file(root, log)
    rewrites, redirects = _detect_config_rules(root, log)

    return MiddlewareResult(middleware=middleware, rewrites=rewrites, redirects=redirects)


def parse_matcher(content: str) -> Optional[List[str]]:
    """
    Extract the middleware ``matcher`` as a list.

    A bare string becomes a one-element list; a list keeps its string
    literals in order. Returns None when no literal matcher is present.
    """
    m = _MATCHER_RX.search(content)
    if not m:
        return None

    start = m.start(1)
    if m.group(1) == "[":
        body = balanced_body(content, start)
        if body is None:
            return None
        return string_literals(body)

    values = string_literals(content[start:])
    return values[:1] or None


def parse_rewrites(content: str) -> List[RewriteRule]:
    """Literal ``{source, destination}`` entries of ``rewrites()``."""
    rules: List[RewriteRule] = []
    for obj in _rule_objects(content, _REWRITES_RX):
        pair = _source_destination(obj)
        if pair:
            rules.append(RewriteRule(source=pair[0], destination=pair[1]))
    return rules


def parse_redirects(content: str) -> List[RedirectRule]:
    """Literal entries of ``redirects()``; ``permanent`` defaults to False."""
    rules: List[RedirectRule] = []
    for obj in _rule_objects(content, _REDIRECTS_RX):
        pair = _source_destination(obj)
        if not pair:
            continue
        own = top_level_text(obj)
        permanent = _PERMANENT_RX.search(own)
        status = _STATUS_CODE_RX.search(own)
        rules.append(RedirectRule(
            source=pair[0],
            destination=pair[1],
            permanent=bool(permanent and permanent.group(1) == "true"),
            status_code=int(status.group(1)) if status else None,
        ))
    return rules


# ==============================================================================
# PRIVATE HELPERS
# ==============================================================================

def _detect_middleware_file(root: str, log: logging.Logger) -> MiddlewareInfo:
    for parts in MIDDLEWARE_CANDIDATES:
        path = os.path.join(root, *parts)
        if not os.path.isfile(path):
            continue

        log.info(f"Found middleware file: {path}")
        try:
            content = read_text(path)
        except OSError as e:
            log.warning(f"Failed to read middleware file {path}: {e}")
            continue

        return MiddlewareInfo(exists=True, file_path=path, matcher=parse_matcher(content))

    return MiddlewareInfo(exists=False)


def _detect_config_rules(root: str, log: logging.Logger) -> Tuple[List[RewriteRule], List[RedirectRule]]:
    for name in NEXT_CONFIG_CANDIDATES:
        path = os.path.join(root, name)
        if not os.path.isfile(path):
            continue

        log.info(f"Found Next.js config file: {path}")
        try:
            content = read_text(path)
        except OSError as e:
            log.warning(f"Failed to read Next.js config file {path}: {e}")
            continue

        rewrites = parse_rewrites(content)
        redirects = parse_redirects(content)
        log.info(f"Found {len(rewrites)} rewrites and {len(redirects)} redirects in config")
        return rewrites, redirects

    return [], []


def _rule_objects(content: str, rx: re.Pattern) -> List[str]:
    m = rx.search(content)
    if not m:
        return []
    body = balanced_body(content, m.start(1))
    if body is None:
        return []
    return split_top_level_objects(body)


def _source_destination(obj: str) -> Optional[Tuple[str, str]]:
    own = top_level_text(obj)
    source = string_field(own, "source")
    destination = string_field(own, "destination")
    if source is None or destination is None:
        return None
    return source, destination
