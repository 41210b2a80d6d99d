"""Word dictionary. Words are bound by name and looked up at call time, so a definition may refer to itself or to words
that are only defined later.
"""

from quotecat.lang.objects import Quotation


class Word:
    """A named behavior: either a native Python function taking the evaluator, or a user-defined quotation body."""

    def __init__(self, name, behavior):
        self.name = name
        if isinstance(behavior, Quotation):
            self.native, self.body = None, behavior
        elif callable(behavior):
            self.native, self.body = behavior, None
        else:
            raise TypeError(f"word '{name}' must be bound to a quotation or a callable, got {behavior!r}")

    @property
    def defined(self):
        """Whether or not this word was defined by a program (as opposed to being native)."""
        return self.body is not None

    def __repr__(self):
        kind = "defined" if self.defined else "native"
        return f"Word('{self.name}', {kind})"


class Dictionary:
    """Mapping of name: Word. Redefining a name replaces the previous binding."""

    def __init__(self):
        self.words = {}

    def define(self, name, behavior):
        """Binds name to behavior, replacing any existing binding. Returns the new Word."""
        word = Word(name, behavior)
        self.words[name] = word
        return word

    def lookup(self, name):
        """Returns the Word bound to name, or None."""
        return self.words.get(name)
