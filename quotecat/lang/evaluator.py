"""Stack evaluator for the quotecat language.

Evaluation recurses on the Python call stack: a word that invokes itself without end grows both the call frame chain
and the interpreter's own stack until Python's recursion limit is hit. The resulting RecursionError is reported by
ErrorHandler as a runtime error; guarding against it is up to the program.
"""

from collections import namedtuple
import sys

from quotecat.lang import words
from quotecat.lang.dictionary import Dictionary
from quotecat.lang.error import EvalError, StackUnderflow, UnknownWord
from quotecat.lang.objects import Symbol


Frame = namedtuple("Frame", ["line", "name"])


class Evaluator:
    """Owns the operand stack, the dictionary and the call frame chain. out is where `show` prints (stdout if None)."""

    def __init__(self, dictionary=None, out=None):
        if dictionary is None:
            dictionary = Dictionary()
            words.install(dictionary)

        self.dictionary = dictionary
        self.out = out
        self.stack = []
        self.frames = []

    # stack access

    def push(self, value):
        self.stack.append(value)

    def require(self, n):
        """Raises StackUnderflow unless at least n values are on the stack."""
        if len(self.stack) < n:
            raise StackUnderflow(n)

    def pop(self):
        self.require(1)
        return self.stack.pop()

    def peek(self, depth=0):
        """Returns the value depth positions below the top without removing it."""
        self.require(depth + 1)
        return self.stack[-1 - depth]

    def clear(self):
        self.stack.clear()

    # evaluation

    def evaluate(self, quotation):
        """Evaluates each item of quotation in order. Raises EvalError if any word fails."""
        for item in quotation:
            if isinstance(item, Symbol) and not item.frozen:
                word = self.dictionary.lookup(item.name)
                if word is None:
                    raise UnknownWord("unknown word `{}'", item.name, line=item.line, backtrace=self.backtrace())
                self.invoke(word, item.line)
            else:
                self.push(item)

    def invoke(self, word, line):
        """Runs word, called from source line line. The frame chain at the moment of failure is attached to any
        EvalError that doesn't carry one yet.
        """
        self.frames.append(Frame(line, word.name))
        try:
            if word.native is not None:
                word.native(self)
            else:
                self.evaluate(word.body)
        except EvalError as error:
            if error.backtrace is None:
                error.backtrace = self.backtrace()
            if error.line is None:
                error.line = line
            raise
        finally:
            self.frames.pop()

    def backtrace(self):
        """Snapshot of the call frame chain, innermost first."""
        return list(reversed(self.frames))

    # output

    def show(self):
        """Returns the stack as printed by `show`: depth, then every value from bottom to top."""
        return f"{len(self.stack)}: " + "".join(value.render() for value in self.stack)

    def display(self):
        print(self.show(), file=self.out or sys.stdout)
