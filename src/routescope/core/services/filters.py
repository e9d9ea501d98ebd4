from __future__ import annotations

"""
Path Filtering Rules.

Regex-based exclusion used by the directory scanner: built-in noise
directories of JavaScript projects, user ignore globs and the project's
root .gitignore, all translated to compiled patterns.
"""

import fnmatch
import logging
import os
import re
from typing import Iterable, List

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# CONFIGURATION DEFAULTS
# -----------------------------------------------------------------------------

def default_exclude_patterns() -> List[str]:
    """
    System-level exclusions applied to every scan.

    Dependency caches, VCS metadata and framework caches never hold route
    sources. Build output is left to the project .gitignore.

    Returns:
        List[str]: Regex patterns matched against entry names.
    """
    return [
        r"^(node_modules|bower_components|jspm_packages)$",
        r"^(\.git|\.hg|\.svn)$",
        r"^(\.next|\.nuxt|\.turbo|\.vercel|\.cache|\.parcel-cache)$",
        r"^(\.idea|\.vscode)$",
    ]

# -----------------------------------------------------------------------------
# PATTERN COMPILATION AND MATCHING
# -----------------------------------------------------------------------------

def compile_patterns(patterns: Iterable[str]) -> List[re.Pattern]:
    """
    Compile raw regex strings, discarding malformed ones.

    Args:
        patterns: Raw regex strings.

    Returns:
        List[re.Pattern]: Compiled regex objects.
    """
    compiled: List[re.Pattern] = []
    for p in patterns:
        try:
            compiled.append(re.compile(p))
        except re.error as e:
            logger.warning(f"Ignoring invalid pattern '{p}': {e}")
    return compiled


def globs_to_regexes(globs: Iterable[str]) -> List[str]:
    """Translate shell globs (gitignore-style) to regex strings."""
    out: List[str] = []
    for g in globs:
        regex = _gitignore_to_regex(g)
        if regex:
            out.append(regex)
    return out


def matches_any(name: str, compiled_patterns: List[re.Pattern]) -> bool:
    """
    True if name matches at least one compiled pattern.

    Args:
        name: Entry name or forward-slash relative path.
        compiled_patterns: Pre-compiled regex objects.
    """
    return any(rx.search(name) for rx in compiled_patterns)


def is_excluded(name: str, rel_path: str, compiled_patterns: List[re.Pattern]) -> bool:
    """Check both the bare entry name and its path relative to the scan root."""
    return matches_any(name, compiled_patterns) or matches_any(rel_path, compiled_patterns)

# -----------------------------------------------------------------------------
# GITIGNORE INTEGRATION
# -----------------------------------------------------------------------------

def load_gitignore_patterns(root_path: str) -> List[str]:
    """
    Parse the root .gitignore and translate its globs into regexes.

    Negations (``!pattern``) are not supported and are skipped.

    Args:
        root_path: Directory containing the .gitignore file.

    Returns:
        List[str]: Equivalent regex strings.
    """
    gitignore_path = os.path.join(root_path, ".gitignore")
    if not os.path.isfile(gitignore_path):
        return []

    try:
        with open(gitignore_path, "r", encoding="utf-8", errors="replace") as f:
            lines = f.readlines()
    except OSError as e:
        logger.warning(f"Could not read {gitignore_path}: {e}")
        return []

    globs = []
    for line in lines:
        line = line.strip()
        if not line or line.startswith("#") or line.startswith("!"):
            continue
        globs.append(line)

    return globs_to_regexes(globs)


def _gitignore_to_regex(glob_pattern: str) -> str:
    """
    Translate one gitignore/shell glob to a regex.

    Trailing slashes (directory markers) and leading slashes (root anchors)
    are dropped since matching runs against names and root-relative paths.
    """
    glob_pattern = glob_pattern.strip().strip("/")
    while glob_pattern.startswith("**/"):
        glob_pattern = glob_pattern[3:]
    if not glob_pattern:
        return ""
    return fnmatch.translate(glob_pattern)
