from __future__ import annotations

"""
Source Catalog Views.

Read-only groupings of a folder index used for reporting and subtree
resolution: the flat file list, files by role and files by folder and role.
"""

from typing import Dict, List, Tuple

from buildtree.domain.source_models import ClassifiedFile, FileRole, FolderIndex


def all_files(folder_index: FolderIndex) -> List[ClassifiedFile]:
    """Return every indexed file, ordered by folder then path."""
    out: List[ClassifiedFile] = []
    for folder in sorted(folder_index):
        out.extend(sorted(folder_index[folder], key=lambda f: f.path))
    return out


def files_by_role(folder_index: FolderIndex) -> Dict[FileRole, List[ClassifiedFile]]:
    """Group every indexed file by its role. Roles with no files are omitted."""
    grouped: Dict[FileRole, List[ClassifiedFile]] = {}
    for f in all_files(folder_index):
        grouped.setdefault(f.role, []).append(f)
    return grouped


def files_by_folder_and_role(
        folder_index: FolderIndex,
        folder: str,
        role: FileRole,
) -> Tuple[ClassifiedFile, ...]:
    """Return the files of one role directly inside one folder."""
    return tuple(f for f in folder_index.get(folder, ()) if f.role is role)


def role_counts(folder_index: FolderIndex) -> Dict[str, int]:
    """Count indexed files per role, keyed by role value."""
    return {role.value: len(files) for role, files in files_by_role(folder_index).items()}
