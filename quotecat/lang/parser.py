"""Parser for the quotecat language. Builds a tree of quotations from a token stream and, while doing so, installs word
definitions into the dictionary.

Grammar:

```
<program>    ::= (<item> | <definition> | <eol>)*   ; the implicit top-level quotation
<definition> ::= ":" <word> <item>* ";"             ; not inside a definition or a quotation
<item>       ::= <word> | <symbol> | <quotation>
<quotation>  ::= "[" <item>* "]"
```

Definitions are installed as soon as their `;` is read, so a unit that fails to parse may still have defined the words
that precede the error. Nothing from a failed unit is evaluated.
"""

from quotecat.lang.error import ParseError
from quotecat.lang.lexical import Lexer, Token
from quotecat.lang.objects import Quotation, Symbol


class Parser:
    """Parses one program unit. A Parser is single-use: create a new one for each source string."""

    def __init__(self, source, dictionary, line=1):
        self.lexer = Lexer(source, line)
        self.dictionary = dictionary
        self.line = line

        self.quotes = []         # quotations being built, innermost last
        self.depth = 0           # number of open "["
        self.in_def = False      # whether or not inside ": ... ;"
        self.def_name = None     # name of the definition being built

    @property
    def current(self):
        return self.quotes[-1]

    def error(self, msg, names=None):
        raise ParseError(msg, names, line=self.line)

    def parse(self):
        """Returns the top-level quotation of the program. Raises ParseError on malformed nesting."""
        self.quotes = [Quotation(line=self.line)]
        tokens = iter(self.lexer)

        for token in tokens:
            if token.kind == Token.BDEF:
                self.begin_definition(next(tokens, None))

            elif token.kind == Token.EDEF:
                self.end_definition()

            elif token.kind == Token.BQUOTE:
                self.depth += 1
                self.quotes.append(Quotation(line=self.line))

            elif token.kind == Token.EQUOTE:
                if self.depth == 0:
                    self.error("unexpected `]': no matching `['")
                self.depth -= 1
                quote = self.quotes.pop()
                self.current.append(quote)

            elif token.kind == Token.SYMBOL:
                self.current.append(Symbol(token.text, frozen=True, line=self.line))

            elif token.kind == Token.WORD:
                self.current.append(Symbol(token.text, frozen=False, line=self.line))

            elif token.kind == Token.EOL:
                self.line += 1

        if self.depth:
            self.error("unterminated quotation")
        if self.in_def:
            self.error("unterminated definition of `{}'", self.def_name)

        return self.quotes[0]

    def begin_definition(self, name):
        if self.in_def:
            self.error("can't define inside a definition")
        if self.depth > 0:
            self.error("can't define inside a quotation")
        if name is None or name.kind != Token.WORD:
            self.error("expecting word after definition")

        self.def_name = name.text
        self.in_def = True
        self.quotes.append(Quotation(line=self.line))

    def end_definition(self):
        if not self.in_def:
            self.error("unexpected `;': not inside a definition")
        if self.depth != 0:
            self.error("mismatched quotes inside of `{}'", self.def_name)

        self.in_def = False
        self.dictionary.define(self.def_name, self.quotes.pop())


def parse(source, dictionary, line=1):
    """Shortcut for Parser(source, dictionary, line).parse()."""
    return Parser(source, dictionary, line).parse()
