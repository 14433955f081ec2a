from __future__ import annotations

"""
Source File Classification.

Maps file extensions to compilation roles. Lookups are case-sensitive
against a lowercase table, so 'start.S' is not treated as assembly.
"""

import os
from typing import Optional

from buildtree.domain.constants import EXTENSION_ROLES
from buildtree.domain.source_models import ClassifiedFile, FileRole
from buildtree.infra.fs import canonical_path


def classify_extension(extension: str) -> FileRole:
    """
    Return the compilation role of a file extension.

    Args:
        extension: Extension with or without its leading dot.

    Returns:
        FileRole: The mapped role, or FileRole.UNKNOWN.
    """
    ext = extension[1:] if extension.startswith(".") else extension
    return EXTENSION_ROLES.get(ext, FileRole.UNKNOWN)


def classify_file(path: str) -> Optional[ClassifiedFile]:
    """
    Build a ClassifiedFile for a path, or None if its role is unknown.

    Files without an extension (and dotfiles such as '.ld') are unknown.
    """
    _, ext = os.path.splitext(path)
    if not ext:
        return None

    role = classify_extension(ext)
    if role is FileRole.UNKNOWN:
        return None

    return ClassifiedFile(path=canonical_path(path), extension=ext[1:], role=role)
