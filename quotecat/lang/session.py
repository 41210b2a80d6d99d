"""Session control for the quotecat language: one interpreter context, used either line by line in command-line mode or
once on a whole file.
"""

from quotecat.lang.error import GenericException, ParseError
from quotecat.lang.evaluator import Evaluator
from quotecat.lang.parser import Parser


class Session:
    """Governs a quotecat session. The stack and dictionary persist across program units."""
    MAX_SOURCE = 16 * 1024  # bytes read from a file in batch mode

    def __init__(self, error_handler, out=None):
        self.error_handler = error_handler
        self.evaluator = Evaluator(out=out)

    @property
    def stack(self):
        return self.evaluator.stack

    @property
    def dictionary(self):
        return self.evaluator.dictionary

    @staticmethod
    def load(path):
        """Returns the first MAX_SOURCE bytes of path, decoded."""
        try:
            with open(path, "rb") as file:
                source = file.read(Session.MAX_SOURCE)
        except OSError:
            raise GenericException("`{}' could not be opened", path)

        return source.decode("utf-8", errors="replace")

    def parse(self, source, line=1):
        return Parser(source, self.dictionary, line).parse()

    def run(self, source, line=1, show_on_error=False):
        """Parses and evaluates source as one program unit, then prints the stack. Errors are reported through the
        error handler, which is reset first. Nothing is evaluated or printed if parsing fails; after a runtime error the
        stack is printed only if show_on_error. Returns whether or not the unit succeeded.
        """
        self.error_handler.reset()

        with self.error_handler:
            program = self.parse(source, line)
        if self.error_handler.failed:
            return False

        with self.error_handler:
            self.evaluator.evaluate(program)

        if show_on_error or not self.error_handler.failed:
            self.evaluator.display()
        return not self.error_handler.failed

    @property
    def parse_failed(self):
        """Whether or not the last unit was rejected by the parser."""
        return isinstance(self.error_handler.error, ParseError)
