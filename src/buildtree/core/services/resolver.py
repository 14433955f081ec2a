from __future__ import annotations

"""
Subtree Resolution Service.

Determines which files a logical build subtree owns. A subtree is a
folder of the folder index; when it has nested folders it owns their
files too. Folder paths are compared in canonical form only, so a
descendant is any key that starts with the target followed by '/'.

Resolution is a pure read over the index. A missing folder yields None
and a missing linker script yields a result without one; deciding
whether either is fatal is left to the caller.
"""

import logging
from typing import Dict, Iterator, List, Optional, Tuple

from buildtree.core.services.catalog import files_by_folder_and_role
from buildtree.domain.source_models import ClassifiedFile, FileRole, FolderIndex
from buildtree.domain.subtree_models import SubtreeResult
from buildtree.infra.fs import is_descendant, join_subtree_path

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def resolve_subtree(
        relative_path: str,
        folder_index: FolderIndex,
        project_root: str,
        name: str = "",
) -> Optional[SubtreeResult]:
    """
    Resolve a subtree path to its source files and linker script.

    Args:
        relative_path: Subtree folder relative to the project root, in
                       either separator style.
        folder_index: Folder index built by the scanner.
        project_root: Canonical absolute project root the index was built from.
        name: Logical name recorded on the result and used in log messages.
              Defaults to the relative path.

    Returns:
        Optional[SubtreeResult]: The resolved subtree, or None when its
                                 folder is not in the index.
    """
    label = name or relative_path
    target = join_subtree_path(project_root, relative_path)

    if not folder_exists(target, folder_index):
        logger.debug(f"Subtree '{label}' not found: {target}")
        return None

    if has_descendants(target, folder_index):
        folders = [target] + sorted(descendant_folders(target, folder_index))
    else:
        folders = [target]

    sources, linkers = _collect(folders, folder_index)

    linker_script: Optional[ClassifiedFile] = linkers[0] if linkers else None
    if len(linkers) > 1:
        logger.warning(
            f"Subtree '{label}' has {len(linkers)} linker scripts; using {linker_script.path}. "
            f"Ignored: {', '.join(f.path for f in linkers[1:])}"
        )

    logger.debug(
        f"Subtree '{label}' resolved to {target}: {len(sources)} sources across {len(folders)} folders."
    )
    return SubtreeResult(
        name=label,
        folder=target,
        sources=sources,
        linker_script=linker_script,
        linker_candidates=tuple(linkers),
    )


def folder_exists(target: str, folder_index: FolderIndex) -> bool:
    """Check whether a canonical folder path is a key of the index."""
    return target in folder_index


def has_descendants(target: str, folder_index: FolderIndex) -> bool:
    """Check whether any indexed folder lies strictly below the target."""
    return any(is_descendant(folder, target) for folder in folder_index)


def descendant_folders(target: str, folder_index: FolderIndex) -> Iterator[str]:
    """Yield every indexed folder strictly below the target."""
    return (folder for folder in folder_index if is_descendant(folder, target))


# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _collect(
        folders: List[str],
        folder_index: FolderIndex,
) -> Tuple[Tuple[ClassifiedFile, ...], List[ClassifiedFile]]:
    """
    Gather sources and linker scripts from the given folders.

    Folders are visited in the order given and files within a folder by
    path, which fixes the linker script selection order.

    Returns:
        Tuple: (sources sorted by path, linker scripts in visit order).
    """
    sources: Dict[str, ClassifiedFile] = {}
    linkers: List[ClassifiedFile] = []
    seen_linkers: set = set()

    for folder in folders:
        for f in sorted(files_by_folder_and_role(folder_index, folder, FileRole.LINKER), key=lambda x: x.path):
            if f.path not in seen_linkers:
                seen_linkers.add(f.path)
                linkers.append(f)
        for f in folder_index.get(folder, ()):
            if f.role.is_source:
                sources.setdefault(f.path, f)

    ordered = tuple(sources[p] for p in sorted(sources))
    return ordered, linkers
