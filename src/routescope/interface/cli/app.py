from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: initialization of logging, loading and
merging of configuration sources (defaults, persistent storage and CLI
overrides), analysis execution and JSON rendering. Results go to stdout
or a file; all diagnostics go to stderr.
"""

import json
import os
import re
import sys
from typing import Any, Dict, List, Optional

from routescope.core.pipeline.engine import run_nextjs_routes, run_react_routes
from routescope.core.services.validator import validate_config
from routescope.domain.config import get_default_config, load_config
from routescope.domain.errors import RouteScopeError
from routescope.infra.fs import normalize_path
from routescope.infra.logging import LoggingConfig, configure_logging, get_logger
from routescope.interface.cli import args as cli_args

logger = get_logger(__name__)

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the main CLI application workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code (0 success, 1 analysis failure, 2 invalid
        input, 130 interrupted).
    """
    if sys.platform == "win32":
        if hasattr(sys.stdout, "reconfigure"):
            sys.stdout.reconfigure(encoding="utf-8")
        if hasattr(sys.stderr, "reconfigure"):
            sys.stderr.reconfigure(encoding="utf-8")

    # 1. Argument parsing phase
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 2. Logging bootstrap (console on stderr, optional rotating file)
    log_level = "DEBUG" if args.debug else "INFO"
    logging_conf = LoggingConfig(level=log_level, console=True, log_file=args.log_file)
    configure_logging(logging_conf, force=True)

    logger.debug("CLI execution initiated. Resolving configuration hierarchy...")

    # 3. Resolve base configuration (Default vs Persistent state)
    if args.use_defaults:
        base_conf = get_default_config()
    else:
        base_conf = load_config()

    # 4. Map and merge command-line overrides
    overrides = cli_args.args_to_overrides(args)
    raw_conf = _merge_config(base_conf, overrides)

    # 5. Schema validation and normalization
    clean_conf, warnings = validate_config(raw_conf, strict=False)

    if warnings:
        for w in warnings:
            logger.warning(f"Configuration Constraint: {w}")

    # 6. Pre-flight input verification
    target = normalize_path(clean_conf.get("path"), ".")
    clean_conf["path"] = target
    if not os.path.isdir(target):
        msg = f"Directory does not exist or is not a directory: {target}"
        logger.error(msg)
        print(f"ERROR: {msg}", file=sys.stderr)
        return 2

    # 7. Analysis phase
    logger.info(f"Targeting project directory: {target}")
    try:
        result = _run_command(args, clean_conf)
    except KeyboardInterrupt:
        msg = "Operation interrupted by user."
        logger.warning(msg)
        print(msg, file=sys.stderr)
        return 130
    except (RouteScopeError, re.error) as e:
        msg = f"Invalid input: {e}"
        logger.error(msg)
        print(f"ERROR: {msg}", file=sys.stderr)
        return 2
    except Exception as e:
        msg = f"Failed to analyze routes: {e}"
        logger.critical(msg, exc_info=True)
        print(f"ERROR: {msg}", file=sys.stderr)
        return 1

    # 8. Output rendering phase
    return _emit(result, clean_conf["pretty"], args.output)

# -----------------------------------------------------------------------------
# COMMAND DISPATCH
# -----------------------------------------------------------------------------

def _run_command(args: Any, conf: Dict[str, Any]) -> Any:
    if args.command == "nextjs-routes":
        return run_nextjs_routes(
            conf,
            port=args.port,
            route_type=args.route_type,
            pattern=args.filter,
        )
    return run_react_routes(conf, port=args.port, pattern=args.filter)

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """
    Perform a shallow merge of override values into the base configuration.

    Filters input to ensure only known keys are merged.

    Args:
        base: The primary configuration dictionary.
        overrides: New values to inject.

    Returns:
        Dict[str, Any]: The merged configuration state.
    """
    out = dict(base)
    keys_to_merge = [
        "path", "extensions", "ignore_patterns", "respect_gitignore", "pretty",
    ]
    for k in keys_to_merge:
        if k in overrides and overrides[k] is not None:
            out[k] = overrides[k]
    return out

# -----------------------------------------------------------------------------
# VIEW RENDERING (JSON)
# -----------------------------------------------------------------------------

def _emit(result: Any, pretty: bool, output_path: Optional[str]) -> int:
    """
    Serialize the result and deliver it to a file or stdout.

    Returns:
        int: 0 on success, 1 when the output file cannot be written.
    """
    text = json.dumps(result, ensure_ascii=False, indent=2 if pretty else None)

    if not output_path:
        print(text)
        return 0

    logger.info(f"Writing output to: {output_path}")
    try:
        with open(output_path, "w", encoding="utf-8") as f:
            f.write(text)
    except OSError as e:
        msg = f"Failed to write output file {output_path}: {e}"
        logger.error(msg)
        print(f"ERROR: {msg}", file=sys.stderr)
        return 1
    return 0

# -----------------------------------------------------------------------------
# CLI ENTRYPOINT
# -----------------------------------------------------------------------------

if __name__ == "__main__":
    sys.exit(main())
