from __future__ import annotations

"""
Build Subtree Domain Data Models.

Defines the declarations of the named subtrees a build needs and the
results produced when those declarations are resolved against the
folder index.
"""

from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple

from buildtree.domain.source_models import ClassifiedFile

# -----------------------------------------------------------------------------
# DECLARATIONS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class SubtreeSpec:
    """
    Declaration of one logical subtree the build requires.

    Attributes:
        name: Logical subtree identifier (e.g. 'kernel').
        relative_path: Folder path relative to the project root.
        requires_linker_script: Whether a missing linker script is fatal.
    """
    name: str
    relative_path: str
    requires_linker_script: bool = True

# -----------------------------------------------------------------------------
# RESOLUTION RESULTS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class SubtreeResult:
    """
    Files owned by a resolved subtree.

    Attributes:
        name: Logical subtree identifier.
        folder: Canonical absolute folder the subtree was resolved to.
        sources: Source files, deduplicated and sorted by path.
        linker_script: Selected linker script, or None when absent.
        linker_candidates: Every linker script seen, in selection order.
    """
    name: str
    folder: str
    sources: Tuple[ClassifiedFile, ...] = ()
    linker_script: Optional[ClassifiedFile] = None
    linker_candidates: Tuple[ClassifiedFile, ...] = field(default=())

    @property
    def has_linker_script(self) -> bool:
        return self.linker_script is not None


# Logical subtree name -> resolved subtree, in declaration order
BuildSubtreeDirectory = Dict[str, SubtreeResult]
