from __future__ import annotations

"""
Next.js Project Structure Detection.

Locates the App Router and Pages Router roots of a project. Either, both or
neither may be present; only an invalid project root is an error.
"""

import logging
import os
from typing import Optional

from routescope.domain.constants import APP_DIR_CANDIDATES, PAGES_DIR_CANDIDATES
from routescope.domain.models import ProjectStructure
from routescope.infra.fs import first_existing, validate_directory


def detect_structure(
        base_path: str = ".",
        logger: Optional[logging.Logger] = None,
) -> ProjectStructure:
    """
    Probe ``app/``, ``src/app``, ``pages/`` and ``src/pages`` under base_path.

    The root-level directory wins over its ``src/`` counterpart.

    Args:
        base_path: Project root, resolved against the working directory.
        logger: Optional logger; defaults to this module's logger.

    Returns:
        ProjectStructure: Detected router roots as absolute paths.

    Raises:
        DirectoryNotFoundError: If base_path does not exist.
        PathNotADirectoryError: If base_path is not a directory.
    """
    log = logger or logging.getLogger(__name__)
    root = validate_directory(os.path.abspath(base_path or "."))
    log.debug(f"Detecting Next.js structure in: {root}")

    app_dir = first_existing(root, APP_DIR_CANDIDATES, want_dir=True)
    if app_dir:
        log.debug(f"Found App Router directory: {app_dir}")

    pages_dir = first_existing(root, PAGES_DIR_CANDIDATES, want_dir=True)
    if pages_dir:
        log.debug(f"Found Pages Router directory: {pages_dir}")

    structure = ProjectStructure.from_directories(app_dir, pages_dir)

    if structure.has_app_router and structure.has_pages_router:
        log.info("Detected both App Router and Pages Router")
    elif structure.has_app_router:
        log.info("Detected App Router only")
    elif structure.has_pages_router:
        log.info("Detected Pages Router only")
    else:
        log.warning("Could not detect Next.js router structure")

    return structure
