from __future__ import annotations

"""
Unit tests for CLI Argument Parsing.

Verifies:
1. The config file flag is captured.
2. The flag is required and unknown flags are rejected with usage status 2.
"""

import pytest

from buildtree.interface.cli.args import build_parser


def parse_args(arg_list):
    """Helper to simulate CLI argument parsing."""
    parser = build_parser()
    return parser.parse_args(arg_list)


def test_cli_config_file_flag():
    args = parse_args(["--config-file", "/etc/os/build.json"])

    assert args.config_file == "/etc/os/build.json"


def test_cli_config_file_is_required(capsys):
    with pytest.raises(SystemExit) as exc:
        parse_args([])

    assert exc.value.code == 2
    assert "--config-file" in capsys.readouterr().err


def test_cli_rejects_unknown_flags():
    with pytest.raises(SystemExit) as exc:
        parse_args(["--config-file", "build.json", "--json"])

    assert exc.value.code == 2
