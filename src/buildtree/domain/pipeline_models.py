from __future__ import annotations

"""
Pipeline Domain Data Models.

Defines the result object passed from the discovery pipeline to the
interface layer, plus factory functions for success and failure.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from buildtree.domain.errors import BuildTreeError, ExitCode
from buildtree.domain.subtree_models import BuildSubtreeDirectory

# -----------------------------------------------------------------------------
# CORE DATA MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class PipelineResult:
    """
    Unified result object of a complete discovery run.

    Attributes:
        ok: Flag indicating success or failure.
        error: Descriptive message in case of failure.
        exit_code: Process exit code matching the outcome.
        config_path: Configuration file the run was driven by.
        project_root: Canonical project source root ('' if never resolved).
        toolchain: Pass-through language/tool settings for the build driver.
        path_specific_flags: Pass-through per-path compiler flags.
        file_count: Number of classified files in the folder index.
        folder_count: Number of folders in the folder index.
        role_counts: Classified file count per role value.
        subtrees: Resolved subtrees keyed by logical name.
        failed_subtree: Name of the subtree that stopped resolution, if any.
    """
    ok: bool
    error: str
    exit_code: int

    config_path: str
    project_root: str = ""

    toolchain: Dict[str, Dict[str, str]] = field(default_factory=dict)
    path_specific_flags: Dict[str, Any] = field(default_factory=dict)

    file_count: int = 0
    folder_count: int = 0
    role_counts: Dict[str, int] = field(default_factory=dict)

    subtrees: BuildSubtreeDirectory = field(default_factory=dict)
    failed_subtree: str = ""

# -----------------------------------------------------------------------------
# FACTORY FUNCTIONS
# -----------------------------------------------------------------------------

def create_error_result(
        error: BuildTreeError,
        config_path: str,
        cfg: Optional[Dict[str, Any]] = None,
) -> PipelineResult:
    """
    Create a failed pipeline result from a domain error.

    Args:
        error: The fatal error that stopped the run.
        config_path: Configuration file path.
        cfg: Normalized configuration, if validation got that far.

    Returns:
        PipelineResult: An immutable error result object.
    """
    cfg = cfg or {}
    return PipelineResult(
        ok=False,
        error=str(error),
        exit_code=int(error.exit_code),
        config_path=config_path,
        project_root=cfg.get("project_src_root", ""),
        toolchain=cfg.get("languages", {}),
        path_specific_flags=cfg.get("path_specific_flags", {}),
        failed_subtree=getattr(error, "subtree", ""),
    )


def create_success_result(
        cfg: Dict[str, Any],
        config_path: str,
        subtrees: BuildSubtreeDirectory,
        file_count: int,
        folder_count: int,
        role_counts: Dict[str, int],
) -> PipelineResult:
    """
    Create a successful pipeline result instance.

    Args:
        cfg: Normalized configuration used during the run.
        config_path: Configuration file path.
        subtrees: Resolved subtree directory.
        file_count: Classified files indexed.
        folder_count: Folders indexed.
        role_counts: Classified file count per role.

    Returns:
        PipelineResult: An immutable success result object.
    """
    return PipelineResult(
        ok=True,
        error="",
        exit_code=int(ExitCode.OK),
        config_path=config_path,
        project_root=cfg["project_src_root"],
        toolchain=cfg["languages"],
        path_specific_flags=cfg["path_specific_flags"],
        file_count=file_count,
        folder_count=folder_count,
        role_counts=role_counts,
        subtrees=subtrees,
    )
