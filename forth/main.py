"""Runs a forth program file. Called from the forth console script.

Only program output and diagnostics are printed: no newline is added after the program's own output.
"""

import argparse

from forth.lang.error import ErrorHandler
from forth.lang.session import Session


def main(argv=None):
    """Runs forth interpreter on the file named in argv (defaults to sys.argv)."""
    parser = argparse.ArgumentParser(prog="forth")
    parser.add_argument("file", help="forth program to run")
    parser.add_argument("--no-color", action="store_true", help="print diagnostics without colors")
    parser.add_argument("--debug", action="store_true", help="trace each token before it is evaluated")
    args = parser.parse_args(argv)

    with ErrorHandler(color=not args.no_color) as error_handler:
        Session(error_handler, args.file, debug=args.debug).run()


if __name__ == "__main__":
    main()
