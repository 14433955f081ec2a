from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Provides cross-platform path canonicalization used by every component that
compares folder paths. All folder index keys and subtree targets go through
the same helpers so that containment checks only ever see one separator.
"""

import os
from typing import Optional

# -----------------------------------------------------------------------------
# GLOBAL CONSTANTS
# -----------------------------------------------------------------------------

CANONICAL_SEP = "/"
_WIN_EXTENDED_PREFIX = "\\\\?\\"

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def canonical_path(path: str) -> str:
    """
    Convert a filesystem path into its canonical comparison form.

    Strips the Windows extended-length prefix, collapses redundant
    components, converts the platform separators to '/' and removes
    trailing separators (the filesystem root keeps its single '/').
    On POSIX a backslash is an ordinary name character and is kept.

    Args:
        path: Raw path string as produced by the OS or a user.

    Returns:
        str: Canonical path string.
    """
    p = path
    if p.startswith(_WIN_EXTENDED_PREFIX):
        p = p[len(_WIN_EXTENDED_PREFIX):]

    p = os.path.normpath(p)
    for sep in (os.sep, os.altsep):
        if sep and sep != CANONICAL_SEP:
            p = p.replace(sep, CANONICAL_SEP)

    # Preserve a bare root ('/' or 'C:/')
    stripped = p.rstrip(CANONICAL_SEP)
    if not stripped or stripped.endswith(":"):
        return stripped + CANONICAL_SEP
    return stripped


def normalize_path(path: Optional[str], fallback: str) -> str:
    """
    Normalize a directory path string into an absolute canonical path.

    Handles environment variable expansion ($VAR/%VAR%) and user home
    shortcuts (~/). Relative paths are resolved against the fallback
    directory. Reverts to fallback if the input is empty.

    Args:
        path: Raw input path string.
        fallback: Base directory for relative paths and empty input.

    Returns:
        str: Normalized absolute canonical path.
    """
    p = (path or "").strip()
    if not p:
        p = fallback
    p = os.path.expandvars(os.path.expanduser(p))
    if not os.path.isabs(p):
        p = os.path.join(fallback, p)
    return canonical_path(os.path.abspath(p))


def join_subtree_path(project_root: str, relative_path: str) -> str:
    """
    Join a project root with a subtree path written in either separator style.

    Leading and trailing separators of the relative part are ignored, so
    '\\boot\\stage1', '/boot/stage1' and 'boot/stage1' address the same
    folder. An empty relative part addresses the project root itself.

    Args:
        project_root: Canonical absolute project root.
        relative_path: Subtree path relative to the root.

    Returns:
        str: Canonical absolute subtree folder path.
    """
    rel = relative_path.replace("\\", CANONICAL_SEP).strip(CANONICAL_SEP)
    root = canonical_path(project_root)
    if not rel:
        return root
    if root.endswith(CANONICAL_SEP):
        return canonical_path(root + rel)
    return canonical_path(root + CANONICAL_SEP + rel)


def descendant_prefix(folder: str) -> str:
    """
    Return the prefix every descendant of a canonical folder starts with.

    Args:
        folder: Canonical folder path.

    Returns:
        str: The folder followed by exactly one separator.
    """
    return folder if folder.endswith(CANONICAL_SEP) else folder + CANONICAL_SEP


def is_descendant(candidate: str, folder: str) -> bool:
    """
    Check whether a canonical path lies strictly below a canonical folder.
    """
    return candidate != folder and candidate.startswith(descendant_prefix(folder))
