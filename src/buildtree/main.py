from __future__ import annotations

"""
Main Entry Point and Global Supervisor.

Routes execution to the CLI controller and installs a global exception
hook so that unexpected crashes are logged and reported with a stack
trace and a non-zero exit status.
"""

import logging
import os
import sys
import traceback
from typing import Any

# -----------------------------------------------------------------------------
# ENVIRONMENT INITIALIZATION
# -----------------------------------------------------------------------------

# Make 'src' importable when run as a script
BASE_DIR = os.path.dirname(os.path.abspath(__file__))
if not getattr(sys, 'frozen', False):
    SRC_DIR = os.path.dirname(BASE_DIR)
    if SRC_DIR not in sys.path:
        sys.path.insert(0, SRC_DIR)


# -----------------------------------------------------------------------------
# GLOBAL SUPERVISOR (EXCEPTION HANDLING)
# -----------------------------------------------------------------------------

def global_exception_handler(exctype: type[BaseException], value: BaseException, tb: Any) -> None:
    """
    Trap unhandled exceptions, log them and terminate with status 1.

    Args:
        exctype: Exception class.
        value: Exception instance.
        tb: Traceback object.
    """
    stack_trace = "".join(traceback.format_exception(exctype, value, tb))

    logger = logging.getLogger("buildtree.supervisor")
    logger.critical(f"FATAL EXCEPTION DETECTED: {value}\n{stack_trace}")

    print("\n" + "=" * 80, file=sys.stderr)
    print("CRITICAL ERROR (BUILDTREE)", file=sys.stderr)
    print("=" * 80, file=sys.stderr)
    print(stack_trace, file=sys.stderr)
    sys.exit(1)


sys.excepthook = global_exception_handler


# -----------------------------------------------------------------------------
# EXECUTION ROUTING
# -----------------------------------------------------------------------------

def main() -> int:
    """
    Delegate to the CLI controller.

    Returns:
        int: Process exit code.
    """
    try:
        from buildtree.interface.cli.app import main as cli_main
        return cli_main()
    except Exception as e:
        global_exception_handler(type(e), e, e.__traceback__)
        return 1


if __name__ == "__main__":
    sys.exit(main())
