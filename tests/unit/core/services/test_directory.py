from __future__ import annotations

"""
Unit tests for the Build Subtree Directory.

Verifies fail-fast ordering, per-subtree linker requirements and the
reported precondition.
"""

from unittest.mock import patch

import pytest

from buildtree.core.services import directory as directory_module
from buildtree.core.services.classifier import classify_file
from buildtree.core.services.directory import resolve_all
from buildtree.domain.constants import DEFAULT_SUBTREES
from buildtree.domain.errors import SubtreeResolutionError
from buildtree.domain.subtree_models import SubtreeSpec


def _index(layout):
    return {folder: tuple(classify_file(f"{folder}/{n}") for n in names) for folder, names in layout.items()}


@pytest.fixture
def scenario_index():
    """The four-subtree example: stage2 lacks its linker script."""
    return _index({
        "/proj/boot/stage1": ["start.asm", "link.ld"],
        "/proj/boot/stage2": ["main.cpp"],
        "/proj/kernel": ["k.cpp", "kernel.ld"],
        "/proj/libs/core": ["core.c"],
    })


def test_missing_required_linker_stops_at_stage2(scenario_index) -> None:
    """stage2 fails before kernel and libcore are evaluated."""
    with patch.object(directory_module, "resolve_subtree", wraps=directory_module.resolve_subtree) as spy:
        with pytest.raises(SubtreeResolutionError) as exc:
            resolve_all(DEFAULT_SUBTREES, scenario_index, "/proj")

    assert str(exc.value) == "linker script for stage2 not found"
    assert exc.value.subtree == "stage2"
    assert exc.value.precondition == SubtreeResolutionError.MISSING_LINKER_SCRIPT
    assert [c.kwargs["name"] for c in spy.call_args_list] == ["stage1", "stage2"]


def test_missing_subtree_is_fatal(scenario_index) -> None:
    specs = [SubtreeSpec("stage1", "boot/stage1"), SubtreeSpec("stage3", "boot/stage3")]

    with pytest.raises(SubtreeResolutionError) as exc:
        resolve_all(specs, scenario_index, "/proj")

    assert exc.value.subtree == "stage3"
    assert exc.value.precondition == SubtreeResolutionError.MISSING_SUBTREE
    assert "/proj/boot/stage3" in str(exc.value)


def test_first_failure_in_list_order_is_reported(scenario_index) -> None:
    """Two broken subtrees: only the first one is reported."""
    specs = [
        SubtreeSpec("ghost", "nowhere"),
        SubtreeSpec("stage2", "boot/stage2"),
    ]

    with pytest.raises(SubtreeResolutionError) as exc:
        resolve_all(specs, scenario_index, "/proj")

    assert exc.value.subtree == "ghost"


def test_optional_linker_subtree_resolves(scenario_index) -> None:
    """A subtree not requiring a linker script resolves without one."""
    specs = [
        SubtreeSpec("stage1", "boot/stage1", requires_linker_script=True),
        SubtreeSpec("stage2", "boot/stage2", requires_linker_script=False),
        SubtreeSpec("libcore", "libs/core", requires_linker_script=False),
    ]

    directory = resolve_all(specs, scenario_index, "/proj")

    assert list(directory) == ["stage1", "stage2", "libcore"]
    assert directory["stage1"].linker_script.name == "link.ld"
    assert directory["stage2"].linker_script is None
    assert [f.name for f in directory["libcore"].sources] == ["core.c"]


def test_default_layout_resolves_complete_tree() -> None:
    index = _index({
        "/proj/boot/stage1": ["start.asm", "link.ld"],
        "/proj/boot/stage2": ["main.cpp", "stage2.ld"],
        "/proj/kernel": ["k.cpp", "kernel.ld"],
        "/proj/kernel/drivers": ["uart.c"],
        "/proj/libs/core": ["core.c"],
    })

    directory = resolve_all(DEFAULT_SUBTREES, index, "/proj")

    assert list(directory) == ["stage1", "stage2", "kernel", "libcore"]
    assert "uart.c" in [f.name for f in directory["kernel"].sources]
    assert directory["libcore"].linker_script is None
