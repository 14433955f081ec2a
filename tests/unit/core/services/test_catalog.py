from __future__ import annotations

"""
Unit tests for the Source Catalog views.
"""

from buildtree.core.services.catalog import (
    all_files,
    files_by_folder_and_role,
    files_by_role,
    role_counts,
)
from buildtree.core.services.classifier import classify_file
from buildtree.domain.source_models import FileRole


def _index():
    layout = {
        "/proj/kernel": ["kernel.ld", "k.cpp", "k.h"],
        "/proj/boot": ["start.asm"],
        "/proj/empty": [],
    }
    return {folder: tuple(classify_file(f"{folder}/{n}") for n in names) for folder, names in layout.items()}


def test_all_files_is_ordered_by_folder_then_path() -> None:
    paths = [f.path for f in all_files(_index())]

    assert paths == [
        "/proj/boot/start.asm",
        "/proj/kernel/k.cpp",
        "/proj/kernel/k.h",
        "/proj/kernel/kernel.ld",
    ]


def test_files_by_role_omits_empty_roles() -> None:
    grouped = files_by_role(_index())

    assert set(grouped) == {FileRole.ASSEMBLY, FileRole.CPLUSPLUS, FileRole.HEADER, FileRole.LINKER}
    assert FileRole.C not in grouped


def test_files_by_folder_and_role() -> None:
    index = _index()

    linkers = files_by_folder_and_role(index, "/proj/kernel", FileRole.LINKER)
    assert [f.name for f in linkers] == ["kernel.ld"]
    assert files_by_folder_and_role(index, "/proj/missing", FileRole.C) == ()


def test_role_counts() -> None:
    assert role_counts(_index()) == {"assembly": 1, "cplusplus": 1, "header": 1, "linker": 1}
