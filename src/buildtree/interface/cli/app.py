from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: logging bootstrap, configuration loading
and validation, logging re-configuration from the file's Logging section,
pipeline execution and result rendering. Every failure class ends in its
own exit code.
"""

import os
import sys
from typing import List, Optional

from buildtree.core.pipeline.engine import run_pipeline
from buildtree.core.pipeline.stages.validator import validate_config
from buildtree.domain.config import load_build_config
from buildtree.domain.errors import ConfigError, ExitCode
from buildtree.domain.pipeline_models import PipelineResult
from buildtree.infra.logging import LoggingConfig, configure_logging, get_logger, shutdown_logging
from buildtree.interface.cli import args as cli_args

logger = get_logger(__name__)

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the main CLI application workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code (see ExitCode).
    """
    if sys.platform == "win32":
        if hasattr(sys.stdout, "reconfigure"):
            sys.stdout.reconfigure(encoding="utf-8")
        if hasattr(sys.stderr, "reconfigure"):
            sys.stderr.reconfigure(encoding="utf-8")

    # 1. Argument parsing phase (argparse exits with 2 on bad usage)
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 2. Logging bootstrap (console only until the config file is read)
    configure_logging(LoggingConfig(level="INFO", console=True, log_file=None))

    try:
        return _run(args.config_file)
    except KeyboardInterrupt:
        logger.warning("Interrupted by user.")
        print("Interrupted by user.", file=sys.stderr)
        return int(ExitCode.INTERRUPTED)
    finally:
        shutdown_logging()


def _run(config_file: str) -> int:
    config_path = os.path.abspath(config_file)
    logger.info(f"Config file exists: {os.path.exists(config_path)}")

    # 3. Configuration loading and validation
    try:
        raw_conf = load_build_config(config_path)
        clean_conf, warnings = validate_config(raw_conf, base_dir=os.path.dirname(config_path))
    except ConfigError as e:
        logger.error(str(e))
        print(f"ERROR: {e}", file=sys.stderr)
        return int(ExitCode.CONFIG)

    # 4. Logging re-configuration from the file's Logging section
    configure_logging(
        LoggingConfig(level=clean_conf["log_level"], console=True, log_file=clean_conf["log_file"]),
        force=True,
    )
    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    # 5. Pipeline execution phase
    result = run_pipeline(clean_conf, config_path=config_path)

    # 6. Output rendering phase
    _print_human_summary(result)
    return result.exit_code

# -----------------------------------------------------------------------------
# VIEW RENDERING (HUMAN READABLE)
# -----------------------------------------------------------------------------

def _print_human_summary(result: PipelineResult) -> None:
    """
    Format and print the execution result.

    Failures go to stderr as a single 'ERROR:' line; successful runs list
    the toolchain and every resolved subtree on stdout.

    Args:
        result: The pipeline result to render.
    """
    if not result.ok:
        print(f"ERROR: {result.error}", file=sys.stderr)
        return

    print(f"ProjectSrcRoot: {result.project_root}")
    print(f"C++ Compiler: {result.toolchain['cpp']['cxx']}")
    print(f"C Compiler: {result.toolchain['c']['cc']}")
    print(f"Assembler: {result.toolchain['asm']['assembler']}")
    print(f"Indexed {result.file_count} source files in {result.folder_count} folders.")

    for name, subtree in result.subtrees.items():
        linker = subtree.linker_script.path if subtree.linker_script else "none"
        print(f"Linker script {name}: {linker}")
        print(f"Found {len(subtree.sources)} sources for {name}")

# -----------------------------------------------------------------------------
# CLI ENTRYPOINT
# -----------------------------------------------------------------------------

if __name__ == "__main__":
    sys.exit(main())
