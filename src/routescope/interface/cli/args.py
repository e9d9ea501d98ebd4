from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the ``nextjs-routes`` and ``react-routes`` subcommands, their help
messages and defaults. Provides logic to translate raw argparse namespaces
into configuration overrides.
"""

import argparse
from typing import Any, Dict, List, Optional

from routescope.domain.constants import ROUTE_TYPE_CHOICES

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the routescope CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="routescope",
        description="Static route discovery for Next.js and React projects.",
    )
    sub = p.add_subparsers(dest="command", metavar="COMMAND")
    sub.required = True

    nextjs = sub.add_parser(
        "nextjs-routes",
        help="Analyze a Next.js project and report its routes as JSON.",
    )
    _add_common_arguments(nextjs, "Directory path to scan for Next.js routes.")
    nextjs.add_argument(
        "-t", "--type",
        dest="route_type",
        choices=ROUTE_TYPE_CHOICES,
        default="all",
        help="Filter Pages Router routes by type.",
    )

    react = sub.add_parser(
        "react-routes",
        help="Analyze a React project and list its routes as URLs.",
    )
    _add_common_arguments(react, "Directory path to scan for React router files.")
    react.add_argument(
        "-e", "--extensions",
        dest="extensions",
        default=None,
        help="Comma-separated list of file extensions to scan (default: .js,.jsx,.ts,.tsx).",
    )

    return p


def _add_common_arguments(p: argparse.ArgumentParser, path_help: str) -> None:
    # --- Target ---
    p.add_argument(
        "-p", "--path",
        dest="path",
        default=None,
        help=path_help,
    )
    p.add_argument(
        "-P", "--port",
        dest="port",
        type=int,
        default=None,
        help="Development server port (detected from the project when omitted).",
    )

    # --- Output ---
    p.add_argument(
        "-o", "--output",
        dest="output",
        default=None,
        help="Output file path (default: print to stdout).",
    )
    p.add_argument(
        "--pretty",
        action="store_true",
        help="Pretty print the JSON output.",
    )
    p.add_argument(
        "-f", "--filter",
        dest="filter",
        default=None,
        help="Only keep routes matching this regular expression (case-insensitive).",
    )

    # --- Enumeration ---
    p.add_argument(
        "--ignore",
        dest="ignore_patterns",
        default=None,
        help="Comma-separated glob patterns to exclude from scanning.",
    )
    p.add_argument(
        "--no-gitignore",
        action="store_true",
        help="Ignore local .gitignore rules.",
    )

    # --- Configuration and Diagnostic Tools ---
    p.add_argument(
        "--use-defaults",
        action="store_true",
        help="Ignore the persisted configuration file.",
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help="Also write logs to this file (rotated).",
    )

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into a configuration dictionary.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides subset.
    """
    overrides: Dict[str, Any] = {}

    overrides["path"] = args.path

    if getattr(args, "extensions", None):
        overrides["extensions"] = _split_csv(args.extensions)
    if args.ignore_patterns:
        overrides["ignore_patterns"] = _split_csv(args.ignore_patterns)
    if args.no_gitignore:
        overrides["respect_gitignore"] = False
    if args.pretty:
        overrides["pretty"] = True

    return overrides

# -----------------------------------------------------------------------------
# HELPERS
# -----------------------------------------------------------------------------

def _split_csv(value: Optional[str]) -> Optional[List[str]]:
    """
    Convert a comma-separated string into a list of sanitized strings.
    """
    if value is None:
        return None
    parts = [x.strip() for x in value.split(",")]
    return [x for x in parts if x]
