from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared fixtures for configuration dictionaries and sample kernel trees.
"""

import json
import os
import sys
from pathlib import Path
from typing import Any, Callable, Dict

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def mock_config_dict() -> Dict[str, Any]:
    """
    Return a valid, complete raw configuration dictionary.

    Mirrors the JSON layout of a build configuration file, with the
    project root relative to the configuration file's directory.
    """
    return {
        "ProjectSrcRoot": "src",
        "Languages": {
            "cpp": {"cxx": "clang++", "ld": "ld.lld"},
            "c": {"cc": "clang", "ld": "ld.lld"},
            "asm": {"assembler": "nasm"},
        },
        "PathSpecificFlags": {"cpp": {"stage1": {"asm": "-f bin"}}},
    }


@pytest.fixture
def kernel_project(tmp_path: Path) -> Path:
    """
    Create a kernel project source tree that resolves cleanly.

    Structure:
    /project/src
      /boot/stage1   start.asm, link.ld, notes.txt
      /boot/stage2   main.cpp, disk.h, stage2.ld
      /kernel        k.cpp, kernel.ld
      /kernel/drivers uart.c
      /libs/core     core.c
    """
    src = tmp_path / "project" / "src"
    files = {
        "boot/stage1/start.asm": "bits 16",
        "boot/stage1/link.ld": "ENTRY(start)",
        "boot/stage1/notes.txt": "ignored",
        "boot/stage2/main.cpp": "int main() {}",
        "boot/stage2/disk.h": "#pragma once",
        "boot/stage2/stage2.ld": "ENTRY(main)",
        "kernel/k.cpp": "void kmain() {}",
        "kernel/kernel.ld": "ENTRY(kmain)",
        "kernel/drivers/uart.c": "void uart_init(void) {}",
        "libs/core/core.c": "int core;",
    }
    for rel, content in files.items():
        path = src / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    return src


@pytest.fixture
def write_config(tmp_path: Path) -> Callable[[Dict[str, Any]], Path]:
    """Return a helper that writes a config dict next to the project tree."""
    def _write(data: Dict[str, Any], name: str = "build.json") -> Path:
        config_dir = tmp_path / "project"
        config_dir.mkdir(parents=True, exist_ok=True)
        path = config_dir / name
        path.write_text(json.dumps(data), encoding="utf-8")
        return path

    return _write
