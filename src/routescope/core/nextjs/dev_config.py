from __future__ import annotations

"""
Next.js Development Server Port Detection.

Sources are consulted in priority order: ``.env`` files, ``package.json``
``dev``/``start`` scripts, then ``next.config.{js,mjs}``. The first port
found wins; otherwise the Next.js default applies.
"""

import json
import logging
import os
import re
from typing import Optional, Tuple

from routescope.domain.constants import (
    DEFAULT_NEXTJS_PORT,
    ENV_FILE_CANDIDATES,
    NEXT_PORT_CONFIG_CANDIDATES,
)
from routescope.domain.models import DevServerConfig
from routescope.infra.fs import read_text

_ENV_PORT_RX = re.compile(r"^\s*(?:export\s+)?(?:PORT|NEXT_PUBLIC_PORT)\s*=\s*['\"]?(\d+)", re.MULTILINE)
_SCRIPT_PORT_RX = re.compile(r"(?:^|\s)(?:-p|--port)(?:=|\s+)(\d+)")
_CONFIG_PORT_RXS = (
    re.compile(r"serverRuntimeConfig\s*:\s*\{[^}]*\bport\s*:\s*(\d+)"),
    re.compile(r"(?<![\w$])env\s*:\s*\{[^}]*\bPORT\s*:\s*['\"]?(\d+)"),
)

PortHit = Tuple[int, str]


def detect_nextjs_dev_config(
        base_path: str = ".",
        logger: Optional[logging.Logger] = None,
) -> DevServerConfig:
    """
    Find the port the project's ``next dev`` server listens on.

    Args:
        base_path: Project root.
        logger: Optional logger; defaults to this module's logger.

    Returns:
        DevServerConfig: Port and its source, or the default 3000.
    """
    log = logger or logging.getLogger(__name__)
    root = os.path.abspath(base_path or ".")
    log.debug(f"Detecting Next.js configuration in: {root}")

    for probe in (_port_from_env_files, _port_from_package_json, _port_from_next_config):
        hit = probe(root, log)
        if hit:
            port, source = hit
            log.info(f"Detected Next.js port: {port} from {source}")
            return DevServerConfig(port=port, config_found=True, config_source=source)

    log.info(f"No custom port configuration found, using default port: {DEFAULT_NEXTJS_PORT}")
    return DevServerConfig(port=DEFAULT_NEXTJS_PORT, config_found=False)


def parse_script_port(script: str) -> Optional[int]:
    """Port from ``-p N``, ``--port N`` or their ``=`` forms in a script line."""
    m = _SCRIPT_PORT_RX.search(script)
    return int(m.group(1)) if m else None


# ------------------------------------------------------------------------------
# Probes
# ------------------------------------------------------------------------------

def _port_from_env_files(root: str, log: logging.Logger) -> Optional[PortHit]:
    for name in ENV_FILE_CANDIDATES:
        path = os.path.join(root, name)
        if not os.path.isfile(path):
            continue
        try:
            content = read_text(path)
        except OSError as e:
            log.debug(f"Error reading {name}: {e}")
            continue
        m = _ENV_PORT_RX.search(content)
        if m:
            return int(m.group(1)), name

    log.debug("No port configuration found in .env files")
    return None


def _port_from_package_json(root: str, log: logging.Logger) -> Optional[PortHit]:
    path = os.path.join(root, "package.json")
    if not os.path.isfile(path):
        log.debug("package.json not found")
        return None

    try:
        scripts = json.loads(read_text(path)).get("scripts") or {}
    except (OSError, ValueError, AttributeError) as e:
        log.debug(f"Error parsing package.json: {e}")
        return None

    for name in ("dev", "start"):
        script = scripts.get(name)
        if isinstance(script, str):
            port = parse_script_port(script)
            if port:
                return port, f"package.json ({name} script)"

    log.debug("No port configuration found in package.json scripts")
    return None


def _port_from_next_config(root: str, log: logging.Logger) -> Optional[PortHit]:
    for name in NEXT_PORT_CONFIG_CANDIDATES:
        path = os.path.join(root, name)
        if not os.path.isfile(path):
            continue
        try:
            content = read_text(path)
        except OSError as e:
            log.debug(f"Error reading {name}: {e}")
            continue
        for rx in _CONFIG_PORT_RXS:
            m = rx.search(content)
            if m:
                return int(m.group(1)), name
        log.debug(f"No port configuration found in {name}")
    return None
