from __future__ import annotations

"""
Core orchestration pipeline.

This module coordinates one discovery run:
1. Verifies the configured project source root.
2. Indexes the source tree (one full traversal).
3. Resolves the declared build subtrees, fail-fast.
4. Packages the outcome as a PipelineResult.
"""

import logging
import os
from typing import Any, Dict

from buildtree.core.services.catalog import role_counts
from buildtree.core.services.directory import resolve_all
from buildtree.core.services.scanner import build_folder_index
from buildtree.domain.errors import BuildTreeError, ConfigError
from buildtree.domain.pipeline_models import (
    PipelineResult,
    create_error_result,
    create_success_result,
)

logger = logging.getLogger(__name__)


def run_pipeline(cfg: Dict[str, Any], *, config_path: str = "") -> PipelineResult:
    """
    Execute the full discovery pipeline on a validated configuration.

    Args:
        cfg: Configuration normalized by the validator stage.
        config_path: Path of the configuration file, for reporting.

    Returns:
        PipelineResult: Object containing status, exit code and subtrees.
    """
    logger.info("Pipeline execution started.")

    # -------------------------------------------------------------------------
    # 1) Project Root Verification
    # -------------------------------------------------------------------------
    project_root = cfg["project_src_root"]
    logger.info(f"ProjectSrcRoot: {project_root}")
    _log_toolchain(cfg)

    try:
        if not os.path.isdir(project_root):
            raise ConfigError(f"ProjectSrcRoot is not an existing directory: {project_root}", config_path)

        # ---------------------------------------------------------------------
        # 2) Source Tree Indexing
        # ---------------------------------------------------------------------
        folder_index = build_folder_index(project_root)

        # ---------------------------------------------------------------------
        # 3) Subtree Resolution
        # ---------------------------------------------------------------------
        subtrees = resolve_all(cfg["subtrees"], folder_index, project_root)

    except BuildTreeError as e:
        logger.error(str(e))
        return create_error_result(e, config_path, cfg)

    counts = role_counts(folder_index)
    logger.info("Pipeline execution finished.")
    return create_success_result(
        cfg,
        config_path,
        subtrees,
        file_count=sum(counts.values()),
        folder_count=len(folder_index),
        role_counts=counts,
    )


def _log_toolchain(cfg: Dict[str, Any]) -> None:
    """Report the pass-through toolchain settings."""
    languages = cfg.get("languages", {})
    logger.info(f"C++ Compiler: {languages.get('cpp', {}).get('cxx', '')}")
    logger.info(f"C Compiler: {languages.get('c', {}).get('cc', '')}")
    logger.info(f"Assembler: {languages.get('asm', {}).get('assembler', '')}")
    logger.debug(f"Path specific flags: {cfg.get('path_specific_flags', {})}")
