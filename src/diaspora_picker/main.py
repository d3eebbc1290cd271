from __future__ import annotations

"""
Main Entry Point and Global Supervisor.

Routes execution to the CLI (any argument present) or to the GUI, and
installs a global exception hook so fatal crashes are logged and reported
in a way that fits the active interface.
"""

import logging
import os
import sys
import traceback
from typing import Any, List, Optional

# -----------------------------------------------------------------------------
# ENVIRONMENT INITIALIZATION
# -----------------------------------------------------------------------------

BASE_DIR = os.path.dirname(os.path.abspath(__file__))
if not getattr(sys, 'frozen', False):
    SRC_DIR = os.path.dirname(BASE_DIR)
    if SRC_DIR not in sys.path:
        sys.path.insert(0, SRC_DIR)


# -----------------------------------------------------------------------------
# GLOBAL SUPERVISOR (EXCEPTION HANDLING)
# -----------------------------------------------------------------------------

def global_exception_handler(exctype: type, value: BaseException, tb: Any) -> None:
    """
    Trap unhandled exceptions and route them to the interface reporter.

    CLI runs get the full trace on stderr; GUI runs get a message box that
    points to the log file. Both exit with status 1.
    """
    stack_trace = "".join(traceback.format_exception(exctype, value, tb))
    error_msg = str(value)

    logger = logging.getLogger("diaspora_picker.supervisor")
    logger.critical(f"FATAL EXCEPTION DETECTED: {error_msg}\n{stack_trace}")

    if len(sys.argv) > 1:
        print("\n" + "=" * 80, file=sys.stderr)
        print("CRITICAL ERROR (DIASPORA PICKER CLI)", file=sys.stderr)
        print("=" * 80, file=sys.stderr)
        print(stack_trace, file=sys.stderr)
        sys.exit(1)

    try:
        import tkinter.messagebox as mb
        from tkinter import Tk
        root = Tk()
        root.withdraw()
        mb.showerror(
            "DiasporaPicker - Fatal Error",
            f"A critical error occurred in the interface:\n\n{error_msg}\n\n"
            f"Technical details have been saved to the log file."
        )
        root.destroy()
    except Exception:
        print(f"CRITICAL SYSTEM ERROR: {error_msg}\n{stack_trace}", file=sys.stderr)

    sys.exit(1)


sys.excepthook = global_exception_handler


# -----------------------------------------------------------------------------
# EXECUTION ROUTING
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Detect execution context and delegate to the interface controller.

    Args:
        argv: Arguments without the program name. Defaults to sys.argv[1:].

    Returns:
        int: Process exit code.
    """
    args = sys.argv[1:] if argv is None else argv
    try:
        if args:
            from diaspora_picker.interface.cli.app import main as cli_main
            return cli_main(args)

        from diaspora_picker.interface.gui.app import main as gui_main
        gui_main()
        return 0

    except Exception as e:
        global_exception_handler(type(e), e, sys.exc_info()[2])
        return 1


if __name__ == "__main__":
    sys.exit(main())
