from __future__ import annotations

"""
Vite configuration discovery for React projects.
"""

import logging
import os
import re
from typing import Optional

from routescope.domain.constants import VITE_CONFIG_CANDIDATES
from routescope.domain.models import ViteConfigResult
from routescope.infra.fs import read_text

_PORT_RXS = (
    re.compile(r"server\s*:\s*\{[^}]*\bport\s*:\s*(\d+)", re.DOTALL),
    re.compile(r"defineConfig\s*\(\s*\{[^}]*\bport\s*:\s*(\d+)", re.DOTALL),
    re.compile(r"(?:const|let|var)\s+PORT\s*=\s*(\d+)", re.IGNORECASE),
)


def detect_vite_config(
        base_path: str = ".",
        logger: Optional[logging.Logger] = None,
) -> ViteConfigResult:
    """
    Locate the first Vite config file and read its dev server port.

    Args:
        base_path: Project root.
        logger: Optional logger; defaults to this module's logger.

    Returns:
        ViteConfigResult: Config path and port; either may be None.
    """
    log = logger or logging.getLogger(__name__)
    root = os.path.abspath(base_path or ".")
    log.debug(f"Looking for Vite configuration in: {root}")

    for name in VITE_CONFIG_CANDIDATES:
        path = os.path.join(root, name)
        if not os.path.isfile(path):
            continue

        log.debug(f"Found Vite configuration file: {path}")
        try:
            port = extract_vite_port(read_text(path))
        except OSError as e:
            log.warning(f"Error reading {path}: {e}")
            port = None

        if port:
            log.debug(f"Detected Vite port {port} in {path}")
        return ViteConfigResult(config_path=path, port=port)

    log.debug("No Vite configuration found")
    return ViteConfigResult()


def extract_vite_port(content: str) -> Optional[int]:
    """Port from ``server: { port }``, ``defineConfig({ port })`` or ``const PORT = N``."""
    for rx in _PORT_RXS:
        m = rx.search(content)
        if m:
            return int(m.group(1))
    return None
