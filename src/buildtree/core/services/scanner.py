from __future__ import annotations

"""
Source Tree Discovery Service.

Walks the project source root once and builds the folder index: every
directory under the root mapped to the classified files directly inside
it. Symlinked directories are followed, each real directory once.
Traversal failures abort the whole index; a partial tree is never
returned.
"""

import logging
import os
from types import MappingProxyType
from typing import Dict, Iterable, List, NoReturn, Set, Tuple

from buildtree.core.services.classifier import classify_file
from buildtree.domain.errors import TreeIndexError
from buildtree.domain.source_models import ClassifiedFile, FolderIndex
from buildtree.infra.fs import canonical_path

logger = logging.getLogger(__name__)


# ==============================================================================
# PUBLIC API (DISCOVERY SERVICES)
# ==============================================================================

def walk_source_tree(root_path: str) -> Iterable[Tuple[str, List[ClassifiedFile]]]:
    """
    Traverse the filesystem and yield each folder with its recognised files.

    Directories and files are visited in sorted order so that repeated
    runs over the same tree produce the same sequence. A symlinked
    directory is walked under its link path unless its target was
    already visited, which also stops symlink cycles.

    Args:
        root_path: Absolute path to the project source root.

    Yields:
        Tuple[str, List[ClassifiedFile]]: Canonical folder path and the
                                          classified files directly in it
                                          (possibly empty).

    Raises:
        TreeIndexError: If the root is not a directory or any part of the
                        tree cannot be read.
    """
    if not os.path.isdir(root_path):
        raise TreeIndexError(f"Source root is not a readable directory: {root_path}", root_path)

    visited: Set[str] = set()

    for root, dirs, files in os.walk(root_path, onerror=_raise_walk_error, followlinks=True):
        real = os.path.realpath(root)
        if real in visited:
            logger.debug(f"Skipping already visited directory: {root} -> {real}")
            dirs[:] = []
            continue
        visited.add(real)

        dirs.sort()
        files.sort()

        folder = canonical_path(root)
        classified: List[ClassifiedFile] = []

        for file_name in files:
            file_path = os.path.join(root, file_name)
            if not os.path.isfile(file_path):
                continue

            source = classify_file(file_path)
            if source is None:
                continue

            logger.debug(f"Found source file: {source.path} ({source.role.value})")
            classified.append(source)

        yield folder, classified


def build_folder_index(root_path: str) -> FolderIndex:
    """
    Build the immutable folder index for a project source root.

    Args:
        root_path: Absolute path to the project source root.

    Returns:
        FolderIndex: Read-only mapping of canonical folder path to the
                     tuple of classified files directly inside it.

    Raises:
        TreeIndexError: Propagated from the traversal, or when two
                        directories map to the same canonical key.
    """
    logger.info(f"Reading directory: {root_path}")

    index: Dict[str, Tuple[ClassifiedFile, ...]] = {}
    file_count = 0
    for folder, files in walk_source_tree(root_path):
        if folder in index:
            raise TreeIndexError(f"Duplicate folder in source tree: {folder}", folder)
        index[folder] = tuple(files)
        file_count += len(files)

    logger.info(f"Indexed {file_count} source files in {len(index)} folders.")
    return MappingProxyType(index)


# ==============================================================================
# PRIVATE HELPERS
# ==============================================================================

def _raise_walk_error(error: OSError) -> NoReturn:
    """Turn an os.walk failure into a fatal index error naming the path."""
    path = error.filename or ""
    raise TreeIndexError(f"Error reading source directory '{path}': {error.strerror or error}", path) from error
