from __future__ import annotations

"""
File Discovery Service.

Enumerates source files under a project root for the analyzers, pruning
excluded directories during the walk.
"""

import logging
import os
import re
from typing import Iterable, List, Optional

from routescope.core.services.filters import (
    compile_patterns,
    default_exclude_patterns,
    globs_to_regexes,
    is_excluded,
    load_gitignore_patterns,
)
from routescope.infra.fs import to_posix, validate_directory

logger = logging.getLogger(__name__)


# ==============================================================================
# PUBLIC API (DISCOVERY SERVICES)
# ==============================================================================

def scan_directory(
        base_path: str,
        extensions: Iterable[str],
        ignore_patterns: Optional[List[str]] = None,
        respect_gitignore: bool = True,
) -> List[str]:
    """
    List files under base_path whose extension is in extensions.

    Args:
        base_path: Directory to walk.
        extensions: Allowed extensions including the leading dot.
        ignore_patterns: Extra glob patterns to exclude.
        respect_gitignore: Apply the root .gitignore rules.

    Returns:
        List[str]: Absolute file paths in sorted walk order.

    Raises:
        DirectoryNotFoundError: If base_path does not exist.
        PathNotADirectoryError: If base_path is not a directory.
    """
    root_abs = validate_directory(base_path)
    allowed = {e.lower() for e in extensions}
    exclude_rx = prepare_exclusion_rules(root_abs, ignore_patterns, respect_gitignore)

    results: List[str] = []
    for root, dirs, files in os.walk(root_abs):
        rel_root = os.path.relpath(root, root_abs)
        rel_root = "" if rel_root == "." else to_posix(rel_root) + "/"

        # In-place pruning keeps os.walk out of excluded trees
        dirs[:] = sorted(d for d in dirs if not is_excluded(d, rel_root + d, exclude_rx))

        for file_name in sorted(files):
            if os.path.splitext(file_name)[1].lower() not in allowed:
                continue
            if is_excluded(file_name, rel_root + file_name, exclude_rx):
                continue
            results.append(os.path.join(root, file_name))

    logger.debug(f"Scanned {root_abs}: {len(results)} matching files")
    return results


def prepare_exclusion_rules(
        root_path: str,
        ignore_patterns: Optional[List[str]],
        respect_gitignore: bool,
) -> List[re.Pattern]:
    """
    Aggregate built-in, user and .gitignore exclusions into compiled regexes.

    Args:
        root_path: Project root (holds the .gitignore).
        ignore_patterns: Extra user globs.
        respect_gitignore: Whether to parse the root .gitignore.

    Returns:
        List[re.Pattern]: Compiled exclusion patterns.
    """
    exclusions = default_exclude_patterns()

    if ignore_patterns:
        exclusions.extend(globs_to_regexes(ignore_patterns))

    if respect_gitignore:
        git_patterns = load_gitignore_patterns(root_path)
        if git_patterns:
            logger.debug(f"Loaded {len(git_patterns)} patterns from .gitignore")
            exclusions.extend(git_patterns)

    return compile_patterns(exclusions)
