from __future__ import annotations

"""
Build Subtree Directory.

Resolves the declared subtrees of a build in order and stops at the
first one that violates a precondition.
"""

import logging
from typing import Iterable

from buildtree.core.services.resolver import resolve_subtree
from buildtree.domain.errors import SubtreeResolutionError
from buildtree.domain.source_models import FolderIndex
from buildtree.domain.subtree_models import BuildSubtreeDirectory, SubtreeSpec
from buildtree.infra.fs import join_subtree_path

logger = logging.getLogger(__name__)


def resolve_all(
        specs: Iterable[SubtreeSpec],
        folder_index: FolderIndex,
        project_root: str,
) -> BuildSubtreeDirectory:
    """
    Resolve every declared subtree against the folder index.

    Args:
        specs: Subtree declarations, processed in the given order.
        folder_index: Folder index built by the scanner.
        project_root: Canonical absolute project root.

    Returns:
        BuildSubtreeDirectory: Resolved subtrees keyed by logical name,
                               in declaration order.

    Raises:
        SubtreeResolutionError: For the first subtree whose folder is
                                missing, or which requires a linker
                                script and has none. Later subtrees are
                                not resolved.
    """
    directory: BuildSubtreeDirectory = {}

    for spec in specs:
        result = resolve_subtree(spec.relative_path, folder_index, project_root, name=spec.name)

        if result is None:
            target = join_subtree_path(project_root, spec.relative_path)
            raise SubtreeResolutionError(
                f"subtree {spec.name} not found at {target}",
                subtree=spec.name,
                precondition=SubtreeResolutionError.MISSING_SUBTREE,
            )

        if result.linker_script is None:
            if spec.requires_linker_script:
                raise SubtreeResolutionError(
                    f"linker script for {spec.name} not found",
                    subtree=spec.name,
                    precondition=SubtreeResolutionError.MISSING_LINKER_SCRIPT,
                )
            logger.debug(f"Subtree '{spec.name}' has no linker script (not required).")
        else:
            logger.info(f"Linker script {spec.name}: {result.linker_script.path}")

        logger.info(f"Found {len(result.sources)} sources for {spec.name}")
        directory[spec.name] = result

    return directory
