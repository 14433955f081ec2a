from __future__ import annotations

"""
Unit tests for domain data models.
"""

import dataclasses

import pytest

from buildtree.domain.errors import ConfigError, ExitCode, SubtreeResolutionError, TreeIndexError
from buildtree.domain.source_models import ClassifiedFile, FileRole
from buildtree.domain.subtree_models import SubtreeResult, SubtreeSpec


def test_classified_file_is_immutable() -> None:
    f = ClassifiedFile("/proj/kernel/k.cpp", "cpp", FileRole.CPLUSPLUS)

    with pytest.raises(dataclasses.FrozenInstanceError):
        f.path = "/elsewhere"  # type: ignore[misc]


def test_source_roles() -> None:
    assert {r for r in FileRole if r.is_source} == {
        FileRole.CPLUSPLUS, FileRole.C, FileRole.ASSEMBLY, FileRole.HEADER,
    }


def test_subtree_defaults() -> None:
    assert SubtreeSpec("kernel", "kernel").requires_linker_script is True

    result = SubtreeResult(name="kernel", folder="/proj/kernel")
    assert result.sources == ()
    assert not result.has_linker_script


def test_error_exit_codes_are_distinct() -> None:
    codes = {
        ConfigError("x").exit_code,
        TreeIndexError("x").exit_code,
        SubtreeResolutionError("x", "kernel", SubtreeResolutionError.MISSING_SUBTREE).exit_code,
        ExitCode.USAGE,
        ExitCode.OK,
    }
    assert len(codes) == 5
