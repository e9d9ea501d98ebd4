from __future__ import annotations

"""
Domain Constants and Static Data Structures.

Centralizes the filename taxonomy, candidate probe lists and default ports
shared by the Next.js and React analyzers.
"""

from typing import List, Tuple

CURRENT_CONFIG_VERSION = "1.0.0"

# -----------------------------------------------------------------------------
# SOURCE FILE TAXONOMY
# -----------------------------------------------------------------------------

SOURCE_EXTENSIONS: Tuple[str, ...] = (".js", ".jsx", ".ts", ".tsx")

# Extensions that may embed markup; used as the client component heuristic
MARKUP_EXTENSIONS: Tuple[str, ...] = (".jsx", ".tsx")

SPECIAL_FILE_NAMES: Tuple[str, ...] = (
    "page",
    "layout",
    "route",
    "loading",
    "not-found",
    "error",
    "template",
    "default",
    "middleware",
)

INDEX_FILE_NAME = "index"

# Pages Router bootstrap files that never become routes
PAGES_BOOTSTRAP_PREFIXES: Tuple[str, ...] = ("_app.", "_document.", "_error.", "_middleware.")

# App Router file types that contribute to the route tree
APP_ROUTE_FILE_TYPES: Tuple[str, ...] = (
    "page",
    "layout",
    "route",
    "loading",
    "not-found",
    "error",
    "template",
    "default",
)

API_SEGMENT = "api"

# -----------------------------------------------------------------------------
# PROBE LISTS (ORDER MATTERS: FIRST MATCH WINS)
# -----------------------------------------------------------------------------

APP_DIR_CANDIDATES: List[Tuple[str, ...]] = [("app",), ("src", "app")]
PAGES_DIR_CANDIDATES: List[Tuple[str, ...]] = [("pages",), ("src", "pages")]

MIDDLEWARE_CANDIDATES: List[Tuple[str, ...]] = [
    ("middleware.ts",),
    ("middleware.js",),
    ("src", "middleware.ts"),
    ("src", "middleware.js"),
]

NEXT_CONFIG_CANDIDATES: List[str] = ["next.config.js", "next.config.mjs", "next.config.ts"]

# Port detection only understands plain JS config files
NEXT_PORT_CONFIG_CANDIDATES: List[str] = ["next.config.js", "next.config.mjs"]

ENV_FILE_CANDIDATES: List[str] = [
    ".env.local",
    ".env.development.local",
    ".env.development",
    ".env",
]

VITE_CONFIG_CANDIDATES: List[str] = [
    "vite.config.js",
    "vite.config.ts",
    "vite.config.mjs",
    "vite.config.cjs",
    ".viterc",
    ".viterc.js",
    ".viterc.ts",
]

# -----------------------------------------------------------------------------
# DEV SERVER DEFAULTS
# -----------------------------------------------------------------------------

DEFAULT_NEXTJS_PORT = 3000
DEFAULT_VITE_PORT = 5173

HTTP_METHODS: Tuple[str, ...] = ("GET", "POST", "PUT", "DELETE", "PATCH", "HEAD", "OPTIONS")

# -----------------------------------------------------------------------------
# CLI CHOICES
# -----------------------------------------------------------------------------

ROUTE_TYPE_CHOICES: Tuple[str, ...] = ("page", "api", "all")
