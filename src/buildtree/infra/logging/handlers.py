from __future__ import annotations

"""
Logging Handlers and Low-Level Utilities.

Provides the rotating file handler factory and the tagging mechanism
that lets the application tell its own handlers apart from handlers
installed by libraries or test harnesses.
"""

import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import Optional

_HANDLER_TAG_ATTR: str = "_buildtree_handler"


# ==============================================================================
# INTERNAL LOGGING UTILITIES
# ==============================================================================

def _tag_handler(handler: logging.Handler) -> None:
    """Mark a handler as managed by this package."""
    setattr(handler, _HANDLER_TAG_ATTR, True)


def _is_our_handler(handler: logging.Handler) -> bool:
    """Verify if a handler was installed by this package."""
    return bool(getattr(handler, _HANDLER_TAG_ATTR, False))


def _create_rotating_file_handler(
        log_file: str,
        level_int: int,
        formatter: logging.Formatter,
        max_bytes: int,
        backup_count: int,
) -> Optional[RotatingFileHandler]:
    """
    Initialize a RotatingFileHandler.

    A log file that cannot be opened only disables file logging; the
    discovery run itself does not depend on it.

    Args:
        log_file: Target path for the log file.
        level_int: Numeric logging level.
        formatter: Pre-configured logging formatter.
        max_bytes: Rollover threshold in bytes.
        backup_count: Number of archived files to keep.

    Returns:
        Optional[RotatingFileHandler]: Configured handler or None if I/O fails.
    """
    try:
        _ensure_parent_dir(log_file)
        fh = RotatingFileHandler(
            log_file,
            maxBytes=int(max_bytes),
            backupCount=int(backup_count),
            encoding="utf-8",
        )
    except OSError as e:
        sys.stderr.write(f"WARNING: Cannot open log file '{log_file}': {e}\n")
        return None

    fh.setLevel(level_int)
    fh.setFormatter(formatter)
    _tag_handler(fh)
    return fh


# ==============================================================================
# PRIVATE HELPERS
# ==============================================================================

def _ensure_parent_dir(path: str) -> None:
    """Create the parent directory hierarchy for a target file."""
    parent = os.path.dirname(os.path.abspath(path))
    if parent:
        os.makedirs(parent, exist_ok=True)
