from __future__ import annotations

"""
CLI Argument Definition.

The discovery stage takes exactly one input: the path of the build
configuration file. Everything else comes from that file.
"""

import argparse


def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the buildtree CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="buildtree",
        description=(
            "Index a kernel project's source tree and resolve the build "
            "subtrees (sources and linker script) declared in its configuration."
        ),
    )
    p.add_argument(
        "--config-file",
        dest="config_file",
        metavar="PATH",
        required=True,
        help="Path to the JSON build configuration file.",
    )
    return p
