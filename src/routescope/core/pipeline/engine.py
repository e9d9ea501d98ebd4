from __future__ import annotations

"""
Command orchestration.

Each entry point runs one full analysis and returns a JSON-ready payload:

1. Validates configuration and resolves the target directory.
2. Enumerates candidate source files once.
3. Runs the Next.js or React analyzers over them.
4. Applies the route-type and pattern filters.
"""

import logging
import os
import re
from typing import Any, Dict, List, Optional

from routescope.core.nextjs.app_router import analyze_app_router
from routescope.core.nextjs.dev_config import detect_nextjs_dev_config
from routescope.core.nextjs.middleware import detect_middleware
from routescope.core.nextjs.pages_router import analyze_pages_router
from routescope.core.nextjs.structure import detect_structure
from routescope.core.react.detectors import RouterDetectorFactory
from routescope.core.react.routes import extract_routes, generate_route_urls
from routescope.core.react.vite_config import detect_vite_config
from routescope.core.services.scanner import scan_directory
from routescope.core.services.validator import validate_config
from routescope.domain.constants import SOURCE_EXTENSIONS
from routescope.infra.fs import validate_directory

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def run_nextjs_routes(
        config: Optional[Dict[str, Any]],
        *,
        port: Optional[int] = None,
        route_type: str = "all",
        pattern: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Analyze a Next.js project.

    Args:
        config: Runtime configuration (raw or partial).
        port: Explicit dev server port; detected from the project when None.
        route_type: ``page``, ``api`` or ``all``; filters the Pages Router routes.
        pattern: Optional case-insensitive regex applied to route paths.

    Returns:
        Dict[str, Any]: Report with structure, routes, middleware and rules.

    Raises:
        DirectoryNotFoundError: If the project path does not exist.
        PathNotADirectoryError: If the project path is not a directory.
        re.error: If pattern is not a valid regular expression.
    """
    cfg = _prepare(config)
    rx = re.compile(pattern, re.IGNORECASE) if pattern else None

    structure = detect_structure(cfg["path"])
    root = validate_directory(cfg["path"])

    logger.info(f"Scanning Next.js project directory: {root}")
    files = _scan(root, list(SOURCE_EXTENSIONS), cfg)

    if port is None:
        dev = detect_nextjs_dev_config(root)
        port = dev.port if dev.config_found else cfg["nextjs_port"]
    logger.info(f"Using Next.js dev server port: {port}")

    pages_routes = []
    if structure.pages_directory:
        pages_routes = analyze_pages_router(
            structure.pages_directory,
            _files_under(files, structure.pages_directory),
        )
        if route_type == "page":
            pages_routes = [r for r in pages_routes if not r.is_api_route]
        elif route_type == "api":
            pages_routes = [r for r in pages_routes if r.is_api_route]

    app_routes = []
    if structure.app_directory:
        app_routes = analyze_app_router(
            structure.app_directory,
            _files_under(files, structure.app_directory),
        )

    if rx is not None:
        pages_routes = [r for r in pages_routes if rx.search(r.route_path)]
        app_routes = [r for r in app_routes if rx.search(r.route_path)]

    mw = detect_middleware(root)

    return {
        "scannedDirectory": root,
        "port": port,
        "filesFound": len(files),
        "structure": structure.to_dict(),
        "pagesRoutes": [r.to_dict() for r in pages_routes],
        "appRoutes": [r.to_dict() for r in app_routes],
        "middleware": mw.middleware.to_dict(),
        "rewrites": [r.to_dict() for r in mw.rewrites],
        "redirects": [r.to_dict() for r in mw.redirects],
    }


def run_react_routes(
        config: Optional[Dict[str, Any]],
        *,
        port: Optional[int] = None,
        pattern: Optional[str] = None,
) -> List[Dict[str, Any]]:
    """
    Analyze a React project and list its routes as URLs.

    Args:
        config: Runtime configuration (raw or partial).
        port: Explicit dev server port; Vite config or the configured default otherwise.
        pattern: Optional case-insensitive regex applied to full URLs.

    Returns:
        List[Dict[str, Any]]: Serialized RouteUrl records.

    Raises:
        DirectoryNotFoundError: If the project path does not exist.
        PathNotADirectoryError: If the project path is not a directory.
        re.error: If pattern is not a valid regular expression.
    """
    cfg = _prepare(config)
    root = validate_directory(cfg["path"])

    logger.info(f"Looking for files with extensions: {', '.join(cfg['extensions'])}")

    if port is None:
        port = _react_port(root, cfg["react_port"])
    base_url = f"http://localhost:{port}"
    logger.info(f"Using base URL: {base_url}")

    files = _scan(root, cfg["extensions"], cfg)

    router_files = RouterDetectorFactory().find_router_files(files)
    if router_files:
        for info in router_files:
            logger.info(f"- {info.file_path} (type: {info.router_type.value})")
    else:
        logger.warning("No React Router definition files found in the scanned directory")

    routes = extract_routes(router_files)
    logger.info(f"Total routes extracted: {len(routes)}")

    urls = generate_route_urls(routes, base_url, pattern)
    logger.info(f"Generated {len(urls)} route URLs")
    return [u.to_dict() for u in urls]


# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _prepare(config: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    cfg, warnings = validate_config(config, strict=False)
    for warning in warnings:
        logger.warning(f"Configuration Warning: {warning}")
    return cfg


def _scan(root: str, extensions: List[str], cfg: Dict[str, Any]) -> List[str]:
    files = scan_directory(
        root,
        extensions,
        ignore_patterns=cfg["ignore_patterns"],
        respect_gitignore=cfg["respect_gitignore"],
    )
    logger.info(f"Found {len(files)} files matching extensions")
    return files


def _files_under(files: List[str], directory: str) -> List[str]:
    prefix = os.path.join(directory, "")
    return [f for f in files if f.startswith(prefix)]


def _react_port(root: str, fallback: int) -> int:
    logger.info("Detecting Vite configuration...")
    vite = detect_vite_config(root)

    if not vite.config_path:
        logger.info("No Vite configuration detected, using defaults")
        return fallback

    logger.info(f"Found Vite configuration: {vite.config_path}")
    if vite.port:
        logger.info(f"Using detected Vite port: {vite.port}")
        return vite.port
    return fallback
