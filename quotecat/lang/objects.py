"""Runtime values of the quotecat language: symbols and quotations.

Values are shared by reference. A quotation owns its item list, but the items themselves may be reachable from several
places (see Quotation.copy). Quotations are only appended to while they are being built by the parser or a builtin,
so aliasing is never observable.
"""


class Value:
    """Superclass of every quotecat value. line is the source line the value was read from (0 if synthesized)."""

    def __init__(self, line=0):
        self.line = line
        self._cls = type(self).__name__

    def render(self):
        """Textual rendering used by `show`."""
        raise NotImplementedError()

    def __str__(self):
        return self.render().rstrip()


class Symbol(Value):
    """A name. Frozen symbols are data literals; the others are invocations looked up when evaluated."""

    def __init__(self, name, frozen=False, line=0):
        super().__init__(line)
        self.name = name
        self.frozen = frozen

    def render(self):
        return f"{self.name} "

    def __repr__(self):
        return f"{self._cls}('{self.name}', frozen={self.frozen})"

    def __eq__(self, other):
        return isinstance(other, Symbol) and (self.name, self.frozen) == (other.name, other.frozen)

    def __hash__(self):
        return hash((self.name, self.frozen))


class Quotation(Value):
    """An ordered sequence of values, pushed as a single value and only evaluated on demand."""

    def __init__(self, items=None, line=0):
        super().__init__(line)
        self.items = list(items) if items is not None else []

    def append(self, item):
        self.items.append(item)
        return self

    def copy(self):
        """Returns a new quotation with a shallow copy of this one's items: nested quotations are aliased."""
        return Quotation(self.items, self.line)

    def render(self):
        return "[ " + "".join(item.render() for item in self.items) + "] "

    def __iter__(self):
        return iter(self.items)

    def __len__(self):
        return len(self.items)

    def __getitem__(self, idx):
        return self.items[idx]

    def __repr__(self):
        return f"{self._cls}({self.items!r})"

    def __eq__(self, other):
        return isinstance(other, Quotation) and self.items == other.items

    __hash__ = None
