from __future__ import annotations

"""
Logging Core Orchestrator.

Configures the root logger once per process. Records go through a single
QueueHandler to a QueueListener thread so analyzer worker threads never
block on stderr or file I/O.
"""

import atexit
import logging
import queue
import sys
from logging.handlers import QueueHandler, QueueListener
from typing import List, Optional

from routescope.infra.logging.config import _LEVEL_MAP, LoggingConfig
from routescope.infra.logging.handlers import (
    _create_console_handler,
    _create_rotating_file_handler,
    _is_our_handler,
    _tag_handler,
)

_CONFIGURED_FLAG_ATTR: str = "_routescope_configured"
_QUEUE_LISTENER_ATTR: str = "_routescope_queue_listener"


# ==============================================================================
# PUBLIC API
# ==============================================================================

def configure_logging(cfg: LoggingConfig, *, force: bool = False) -> logging.Logger:
    """
    Attach routescope's queue-based handlers to the root logger.

    Repeated calls are no-ops unless ``force`` is set, in which case the
    previous handlers and listener are torn down first.

    Args:
        cfg: Logging settings for this run.
        force: Re-initialize even if already configured.

    Returns:
        logging.Logger: The root logger.
    """
    root = logging.getLogger()

    try:
        if getattr(root, _CONFIGURED_FLAG_ATTR, False) and not force:
            return root

        level_int = _parse_level(cfg.level)
        root.setLevel(level_int)

        _remove_our_handlers(root)
        _stop_existing_listener(root)

        sinks: List[logging.Handler] = []

        if cfg.console:
            sinks.append(_create_console_handler(level_int, logging.Formatter(cfg.console_fmt)))

        if cfg.log_file:
            fh = _create_rotating_file_handler(
                cfg.log_file,
                level_int,
                logging.Formatter(cfg.file_fmt, datefmt=cfg.datefmt),
                cfg.max_bytes,
                cfg.backup_count,
            )
            if fh:
                sinks.append(fh)

        if not sinks:
            return root

        log_queue: queue.Queue[logging.LogRecord] = queue.Queue(-1)
        queue_handler = QueueHandler(log_queue)
        _tag_handler(queue_handler)

        listener = QueueListener(log_queue, *sinks, respect_handler_level=True)
        listener.start()
        root.addHandler(queue_handler)

        setattr(root, _QUEUE_LISTENER_ATTR, listener)
        setattr(root, _CONFIGURED_FLAG_ATTR, True)

        # Flush pending records on interpreter shutdown
        atexit.register(_safe_stop_listener, listener)
        return root

    except Exception:
        return _install_emergency_console(root)


def get_logger(name: str) -> logging.Logger:
    """Named logger under the configured root (usually ``__name__``)."""
    return logging.getLogger(name)


def shutdown_logging() -> None:
    """Drain the queue and detach routescope handlers."""
    root = logging.getLogger()
    _stop_existing_listener(root)
    _remove_our_handlers(root)
    setattr(root, _CONFIGURED_FLAG_ATTR, False)


# ==============================================================================
# PRIVATE HELPERS
# ==============================================================================

def _parse_level(level: str) -> int:
    if not level:
        return logging.INFO
    return _LEVEL_MAP.get(str(level).strip().upper(), logging.INFO)


def _install_emergency_console(root: logging.Logger) -> logging.Logger:
    """Plain synchronous stderr logging used when queue setup fails."""
    root.setLevel(logging.INFO)
    _remove_our_handlers(root)
    _stop_existing_listener(root)

    sh = logging.StreamHandler(sys.stderr)
    sh.setFormatter(logging.Formatter("CRITICAL FALLBACK | %(levelname)s | %(message)s"))
    _tag_handler(sh)
    root.addHandler(sh)

    root.warning("Logging setup failed. Switched to emergency console.")
    return root


def _remove_our_handlers(root: logging.Logger) -> None:
    for h in list(root.handlers):
        if _is_our_handler(h):
            root.removeHandler(h)
            h.close()


def _stop_existing_listener(root: logging.Logger) -> None:
    listener = getattr(root, _QUEUE_LISTENER_ATTR, None)
    if listener:
        _safe_stop_listener(listener)
        setattr(root, _QUEUE_LISTENER_ATTR, None)


def _safe_stop_listener(listener: Optional[QueueListener]) -> None:
    """
    Stop a listener tolerating double stops.

    ``QueueListener.stop`` fails once its thread has been joined, which
    happens when atexit runs after an explicit shutdown.
    """
    if not listener:
        return
    if getattr(listener, "_thread", None) is not None:
        listener.stop()
