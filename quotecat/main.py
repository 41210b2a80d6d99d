"""Runs the quotecat interpreter on a file, or in command-line mode when no file is given. Also uses the error handling
context manager. Called from the quotecat console script and from `python -m quotecat`.

Exit codes: 0 on success, on a runtime error and after the `exit` word; 1 if the file can't be opened, if it fails to
parse, or on a fatal error.
"""

import argparse
import sys

from quotecat.lang.error import ErrorHandler, ParseError
from quotecat.lang.session import Session
from quotecat.lang.shell import Shell


def main(argv=None):
    """Runs the quotecat interpreter. Returns the process exit code."""
    with ErrorHandler() as error_handler:
        parser = argparse.ArgumentParser(prog="quotecat", description="concatenative language interpreter")
        parser.add_argument("file", help="file to interpret and run (if empty, goes to command-line mode)", nargs="?")
        args = parser.parse_args(argv)

        sess = Session(ErrorHandler(fatal=False))

        if args.file is not None:
            source = Session.load(args.file)
            sess.run(source, show_on_error=True)

            if sess.parse_failed:
                error_handler.throw(ParseError("invalid parse"))

        else:
            Shell(sess).cmdloop()

    return 0


if __name__ == "__main__":
    sys.exit(main())
