from __future__ import annotations

"""
Source File Domain Data Models.

Defines the compilation roles a file can play in the build and the
immutable records the indexer produces for every recognised file.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Mapping, Tuple

# -----------------------------------------------------------------------------
# ROLE ENUMERATION
# -----------------------------------------------------------------------------

class FileRole(Enum):
    """Compilation category assigned to a file from its extension."""
    CPLUSPLUS = "cplusplus"
    C = "c"
    ASSEMBLY = "assembly"
    HEADER = "header"
    LINKER = "linker"
    UNKNOWN = "unknown"

    @property
    def is_source(self) -> bool:
        """True for roles that belong in a subtree's source set."""
        return self not in (FileRole.LINKER, FileRole.UNKNOWN)

# -----------------------------------------------------------------------------
# CORE DATA MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class ClassifiedFile:
    """
    A file found under the project root together with its build role.

    Attributes:
        path: Canonical absolute path to the file.
        extension: Extension as found on disk, without the leading dot.
        role: Compilation role derived from the extension.
    """
    path: str
    extension: str
    role: FileRole

    @property
    def name(self) -> str:
        return self.path.rsplit("/", 1)[-1]


# Canonical folder path -> files directly inside that folder
FolderIndex = Mapping[str, Tuple[ClassifiedFile, ...]]
