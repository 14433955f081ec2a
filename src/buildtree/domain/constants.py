from __future__ import annotations

"""
Domain Constants and Static Data Structures.

Provides the extension role table, the default subtree declarations of
the boot/kernel build and the configuration file keys.
"""

from typing import Dict, Tuple

from buildtree.domain.source_models import FileRole
from buildtree.domain.subtree_models import SubtreeSpec

# -----------------------------------------------------------------------------
# CLASSIFICATION TABLE
# -----------------------------------------------------------------------------

# Lowercase only; lookups are case-sensitive
EXTENSION_ROLES: Dict[str, FileRole] = {
    "cpp": FileRole.CPLUSPLUS,
    "cxx": FileRole.CPLUSPLUS,
    "cc": FileRole.CPLUSPLUS,
    "c": FileRole.C,
    "asm": FileRole.ASSEMBLY,
    "s": FileRole.ASSEMBLY,
    "h": FileRole.HEADER,
    "hpp": FileRole.HEADER,
    "ld": FileRole.LINKER,
}

# -----------------------------------------------------------------------------
# DEFAULT BUILD LAYOUT
# -----------------------------------------------------------------------------

DEFAULT_SUBTREES: Tuple[SubtreeSpec, ...] = (
    SubtreeSpec("stage1", "boot/stage1", requires_linker_script=True),
    SubtreeSpec("stage2", "boot/stage2", requires_linker_script=True),
    SubtreeSpec("kernel", "kernel", requires_linker_script=True),
    SubtreeSpec("libcore", "libs/core", requires_linker_script=False),
)

# -----------------------------------------------------------------------------
# CONFIGURATION FILE SCHEMA KEYS
# -----------------------------------------------------------------------------

KEY_PROJECT_ROOT = "ProjectSrcRoot"
KEY_LANGUAGES = "Languages"
KEY_PATH_FLAGS = "PathSpecificFlags"
KEY_SUBTREES = "Subtrees"
KEY_LOGGING = "Logging"

# Language section -> required tool keys
REQUIRED_TOOLCHAIN_KEYS: Dict[str, Tuple[str, ...]] = {
    "cpp": ("cxx", "ld"),
    "c": ("cc", "ld"),
    "asm": ("assembler",),
}
