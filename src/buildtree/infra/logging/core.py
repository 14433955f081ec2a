from __future__ import annotations

"""
Logging Core Orchestrator.

Maintains the idempotent lifecycle of the logging subsystem. Records go
through a QueueHandler on the root logger and are written by a
QueueListener, so handler I/O stays off the calling thread.
"""

import atexit
import logging
import queue
import sys
from logging.handlers import QueueHandler, QueueListener
from typing import List, Optional

from buildtree.infra.logging.config import _LEVEL_MAP, LoggingConfig
from buildtree.infra.logging.handlers import (
    _create_rotating_file_handler,
    _is_our_handler,
    _tag_handler,
)

_CONFIGURED_FLAG_ATTR: str = "_buildtree_configured"
_QUEUE_LISTENER_ATTR: str = "_buildtree_queue_listener"

_atexit_registered: bool = False


# ==============================================================================
# PUBLIC API
# ==============================================================================

def configure_logging(cfg: LoggingConfig, *, force: bool = False) -> logging.Logger:
    """
    Configure the root logger idempotently using non-blocking I/O.

    The CLI calls this twice: once at startup with console output only,
    and again with force=True once the configuration file has supplied
    the level and optional log file.

    Args:
        cfg: Structural configuration for the logging system.
        force: If True, tear down our handlers and re-initialize.

    Returns:
        logging.Logger: The initialized root logger instance.
    """
    root = logging.getLogger()

    # 1. Idempotency Check
    already_configured = bool(getattr(root, _CONFIGURED_FLAG_ATTR, False))
    if already_configured and not force:
        return root

    level_int = _parse_level(cfg.level)
    root.setLevel(level_int)

    _remove_our_handlers(root)
    _stop_existing_listener(root)

    # 2. Handler Definition
    console_formatter = logging.Formatter(cfg.console_fmt)
    file_formatter = logging.Formatter(cfg.file_fmt, datefmt=cfg.datefmt)

    handlers_list: List[logging.Handler] = []

    if cfg.console:
        sh = logging.StreamHandler(sys.stderr)
        sh.setLevel(level_int)
        sh.setFormatter(console_formatter)
        _tag_handler(sh)
        handlers_list.append(sh)

    if cfg.log_file:
        fh = _create_rotating_file_handler(
            cfg.log_file,
            level_int,
            file_formatter,
            cfg.max_bytes,
            cfg.backup_count,
        )
        if fh:
            handlers_list.append(fh)

    if not handlers_list:
        setattr(root, _CONFIGURED_FLAG_ATTR, True)
        return root

    # 3. Queue-Based Orchestration
    log_queue: queue.Queue[logging.LogRecord] = queue.Queue(-1)

    queue_handler = QueueHandler(log_queue)
    _tag_handler(queue_handler)

    listener = QueueListener(log_queue, *handlers_list, respect_handler_level=True)
    listener.start()

    root.addHandler(queue_handler)

    setattr(root, _QUEUE_LISTENER_ATTR, listener)
    setattr(root, _CONFIGURED_FLAG_ATTR, True)

    _register_atexit_flush()

    return root


def shutdown_logging() -> None:
    """
    Flush queued records and detach our handlers from the root logger.

    Leaves the root unconfigured so the next configure_logging call
    starts from scratch.
    """
    root = logging.getLogger()
    _stop_existing_listener(root)
    _remove_our_handlers(root)
    setattr(root, _CONFIGURED_FLAG_ATTR, False)


def get_logger(name: str) -> logging.Logger:
    """
    Acquire a named logger instance compliant with the global configuration.

    Args:
        name: Hierarchical name for the logger (usually __name__).

    Returns:
        logging.Logger: The requested logger instance.
    """
    return logging.getLogger(name)


# ==============================================================================
# PRIVATE HELPERS
# ==============================================================================

def _parse_level(level: str) -> int:
    """Convert a string-based logging level to its numeric constant."""
    if not level:
        return logging.INFO
    return _LEVEL_MAP.get(str(level).strip().upper(), logging.INFO)


def _remove_our_handlers(root: logging.Logger) -> None:
    """Detach and close every handler installed by this package."""
    for h in list(root.handlers):
        if _is_our_handler(h):
            root.removeHandler(h)
            h.close()


def _stop_existing_listener(root: logging.Logger) -> None:
    """Terminate and release the existing QueueListener to reset state."""
    listener = getattr(root, _QUEUE_LISTENER_ATTR, None)
    if listener:
        _safe_stop_listener(listener)
        setattr(root, _QUEUE_LISTENER_ATTR, None)


def _register_atexit_flush() -> None:
    """Register the exit-time flush once per process."""
    global _atexit_registered
    if _atexit_registered:
        return
    atexit.register(_flush_at_exit)
    _atexit_registered = True


def _flush_at_exit() -> None:
    """Stop whichever listener is installed when the interpreter exits."""
    _stop_existing_listener(logging.getLogger())


def _safe_stop_listener(listener: Optional[QueueListener]) -> None:
    """
    Stop a QueueListener, tolerating listeners that were already stopped.

    atexit and test resets can both reach the same listener.
    """
    if not listener:
        return
    if getattr(listener, "_thread", None) is not None:
        listener.stop()
