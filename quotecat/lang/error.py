"""Error handling for the quotecat language. Only GenericExceptions should be encountered during running: if another
type of error is raised and makes it all the way to ErrorHandler, it is assumed to be an internal issue.

There are three severities:
    1. fatal: allocation failure or unrecognized input. The process is terminated, whatever the handler's mode.
    2. parse error: the current program unit is discarded before anything in it is evaluated.
    3. runtime error: evaluation of the current program unit is aborted and a backtrace is printed.
"""

import sys

from termcolor import colored


class GenericException(Exception):
    """Templates an error message so that it can be reported by ErrorHandler. Names passed in `names` are substituted
    into `msg` and bolded when displayed.
    """
    label = "error"
    fatal = False

    def __init__(self, msg, names=None, line=None, internal=False):
        if names is None:
            names = ()
        if isinstance(names, str):
            names = (names,)

        self.names = tuple(names)
        self.plain_msg = msg.format(*self.names)
        self.msg = msg.format(*(colored(name, attrs=["bold"]) for name in self.names))

        self.line = line
        self.internal = internal
        super().__init__(self.plain_msg)


class FatalError(GenericException):
    """Unrecoverable failure, e.g. memory exhaustion while growing a buffer."""
    label = "fatal"
    fatal = True


class LexicalError(GenericException):
    """Unrecognized input character. The lexer cannot resynchronize, so this is always fatal."""
    label = "syntax error"
    fatal = True


class ParseError(GenericException):
    label = "parse error"


class EvalError(GenericException):
    """Runtime error. backtrace is a list of (line, name) frames, innermost first, captured at the point of failure."""
    label = "runtime error"

    def __init__(self, msg, names=None, line=None, backtrace=None):
        super().__init__(msg, names, line)
        self.backtrace = backtrace


class StackUnderflow(EvalError):
    def __init__(self, needed=1, line=None):
        super().__init__("stack underflow", line=line)
        self.needed = needed


class TypeMismatch(EvalError):
    pass


class UnknownWord(EvalError):
    pass


class ErrorHandler:
    """Context manager that will report quotecat errors and suppress them unless they are fatal."""
    ERROR = "red"

    def __init__(self, fatal=True, stream=None):
        self.fatal = fatal
        self.stream = stream
        self.error = None  # last error thrown since reset()

    @property
    def failed(self):
        return self.error is not None

    def reset(self):
        """Clears the failed state. Should be called before each program unit."""
        self.error = None

    @staticmethod
    def backtrace(error):
        """Returns the lines of error's backtrace, innermost frame first."""
        return [f"  at {line}: " + colored(name, attrs=["bold"]) for line, name in error.backtrace or []]

    def format(self, error):
        """Returns the full message for error, as printed by throw."""
        error_msg = ""
        if error.internal:
            error_msg += colored("[internal] ", ErrorHandler.ERROR, attrs=["bold"])

        error_msg += colored(f"{error.label}: ", ErrorHandler.ERROR, attrs=["bold"])
        if error.line is not None:
            error_msg += f"{error.line}: "
        error_msg += error.msg

        if isinstance(error, EvalError):
            error_msg = "\n".join([error_msg] + ErrorHandler.backtrace(error))

        return error_msg

    def throw(self, error):
        """Reports error. Exits the process if error is fatal or this handler is fatal."""
        self.error = error
        print(self.format(error), file=self.stream or sys.stderr)

        if error.fatal or self.fatal:
            sys.exit(1)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        do_exit = False
        if exc_type is None:
            return False
        elif issubclass(exc_type, KeyboardInterrupt):
            self.throw(GenericException("keyboard interrupt"))
        elif issubclass(exc_type, SystemExit):
            do_exit = True
        elif issubclass(exc_type, RecursionError):
            self.throw(EvalError("maximum recursion depth exceeded"))
        elif issubclass(exc_type, MemoryError):
            self.throw(FatalError("out of memory"))
        elif issubclass(exc_type, GenericException):
            self.throw(exc_val)
        else:
            self.throw(GenericException("unknown error: '{}'", f"{exc_type.__name__}: {exc_val}", internal=True))
            do_exit = True

        return not do_exit
