from __future__ import annotations

"""
Unit tests for Source File Classification.

Verifies the extension role table, case sensitivity and the exclusion
of unknown files.
"""

import pytest

from buildtree.core.services.classifier import classify_extension, classify_file
from buildtree.domain.source_models import FileRole


@pytest.mark.parametrize("ext, role", [
    ("cpp", FileRole.CPLUSPLUS),
    ("cxx", FileRole.CPLUSPLUS),
    ("cc", FileRole.CPLUSPLUS),
    ("c", FileRole.C),
    ("asm", FileRole.ASSEMBLY),
    ("s", FileRole.ASSEMBLY),
    ("h", FileRole.HEADER),
    ("hpp", FileRole.HEADER),
    ("ld", FileRole.LINKER),
])
def test_known_extensions_map_to_roles(ext: str, role: FileRole) -> None:
    """Every table entry maps to its role, with or without the dot."""
    assert classify_extension(ext) is role
    assert classify_extension("." + ext) is role


@pytest.mark.parametrize("ext", ["txt", "py", "o", "", "CPP", "S", "Ld"])
def test_unknown_and_uppercase_extensions_are_unknown(ext: str) -> None:
    """Lookups are case-sensitive; anything outside the table is UNKNOWN."""
    assert classify_extension(ext) is FileRole.UNKNOWN


def test_classification_is_deterministic() -> None:
    """Repeated lookups of the same extension yield the same role."""
    assert {classify_extension("cc") for _ in range(10)} == {FileRole.CPLUSPLUS}


def test_classify_file_builds_record() -> None:
    """A recognised file keeps its extension without the dot."""
    f = classify_file("/proj/kernel/k.cpp")

    assert f is not None
    assert f.path == "/proj/kernel/k.cpp"
    assert f.extension == "cpp"
    assert f.role is FileRole.CPLUSPLUS
    assert f.name == "k.cpp"


@pytest.mark.parametrize("path", [
    "/proj/README.md",
    "/proj/Makefile",
    "/proj/.ld",
    "/proj/boot/start.S",
])
def test_classify_file_returns_none_for_unknown(path: str) -> None:
    """Unknown roles never produce a record."""
    assert classify_file(path) is None
