from __future__ import annotations

"""
Domain Error Taxonomy and Process Exit Codes.

Every fatal condition the discovery stage can hit maps to one exception
class, and every exception class maps to one distinguishable exit code.
"""

from enum import IntEnum
from typing import Optional

# -----------------------------------------------------------------------------
# EXIT CODES
# -----------------------------------------------------------------------------

class ExitCode(IntEnum):
    """Process exit status reported by the CLI."""
    OK = 0
    UNEXPECTED = 1
    USAGE = 2
    CONFIG = 3
    TREE = 4
    RESOLUTION = 5
    INTERRUPTED = 130

# -----------------------------------------------------------------------------
# EXCEPTION HIERARCHY
# -----------------------------------------------------------------------------

class BuildTreeError(Exception):
    """Base class for all fatal discovery errors."""
    exit_code: ExitCode = ExitCode.UNEXPECTED


class ConfigError(BuildTreeError):
    """Configuration file missing, unreadable, malformed or invalid."""
    exit_code = ExitCode.CONFIG

    def __init__(self, message: str, path: Optional[str] = None) -> None:
        super().__init__(message)
        self.path = path


class TreeIndexError(BuildTreeError):
    """Filesystem failure while indexing the project source tree."""
    exit_code = ExitCode.TREE

    def __init__(self, message: str, path: Optional[str] = None) -> None:
        super().__init__(message)
        self.path = path


class SubtreeResolutionError(BuildTreeError):
    """
    A declared subtree failed one of its build preconditions.

    Attributes:
        subtree: Logical name of the failing subtree.
        precondition: 'missing_subtree' or 'missing_linker_script'.
    """
    exit_code = ExitCode.RESOLUTION

    MISSING_SUBTREE = "missing_subtree"
    MISSING_LINKER_SCRIPT = "missing_linker_script"

    def __init__(self, message: str, subtree: str, precondition: str) -> None:
        super().__init__(message)
        self.subtree = subtree
        self.precondition = precondition
