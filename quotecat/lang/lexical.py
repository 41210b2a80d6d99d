"""Lexical analysis for the quotecat language. Converts a source string into a flat sequence of tokens.

All lexical grammar can be loosely defined as follows:

```
<word>    ::= <lower> (<lower> | <digit> | "'")*  ; invocation, resolved by name at run time
<symbol>  ::= <upper>+                            ; frozen data literal, never looked up
<bdef>    ::= ":"
<edef>    ::= ";"
<bquote>  ::= "["
<equote>  ::= "]"
<eol>     ::= "\r" | "\n" | "\r\n"
<comment> ::= "#" <char>*                         ; runs to end of line, not emitted
```

Spaces and tabs separate tokens but are otherwise ignored. The first character of a run decides whether it is a word
or a symbol, so `fooBAR` is the word `foo` followed by the symbol `BAR`.
"""

from dataclasses import dataclass
import string

from quotecat.lang.error import LexicalError


@dataclass
class Token:
    """A single token. line is the source line the token was read from."""
    EOF = "<eof>"
    EOL = "<eol>"
    WORD = "<word>"
    SYMBOL = "<symbol>"
    BDEF = ":"
    EDEF = ";"
    BQUOTE = "["
    EQUOTE = "]"

    kind: str
    text: str
    line: int


class Lexer:
    """Scans tokens out of source one at a time. Iterating over a Lexer yields every token up to, but excluding, the
    end-of-input token.
    """
    WHITESPACE = " \t"
    NEWLINE = "\r\n"
    COMMENT = "#"
    END = "\0"
    PUNCTUATION = {":": Token.BDEF, ";": Token.EDEF, "[": Token.BQUOTE, "]": Token.EQUOTE}

    WORD_START = string.ascii_lowercase
    WORD_CHARS = string.ascii_lowercase + string.digits + "'"
    SYMBOL_CHARS = string.ascii_uppercase

    def __init__(self, source, line=1):
        self.source = source
        self.pos = 0
        self.line = line

    @property
    def current(self):
        """Character under the cursor, or "" at end of input."""
        return self.source[self.pos] if self.pos < len(self.source) else ""

    def _skip_comment(self):
        while self.current and self.current not in Lexer.NEWLINE:
            self.pos += 1

    def _scan_run(self, chars):
        start = self.pos
        while self.current and self.current in chars:
            self.pos += 1
        return self.source[start:self.pos]

    def scan(self):
        """Returns the next token. Raises LexicalError on a character that can't start any token."""
        while True:
            char = self.current

            if not char or char == Lexer.END:
                return Token(Token.EOF, "", self.line)

            elif char in Lexer.NEWLINE:
                self.pos += 1
                if char == "\r" and self.current == "\n":
                    self.pos += 1
                self.line += 1
                return Token(Token.EOL, char, self.line - 1)

            elif char in Lexer.WHITESPACE:
                self.pos += 1

            elif char == Lexer.COMMENT:
                self._skip_comment()

            elif char in Lexer.PUNCTUATION:
                self.pos += 1
                return Token(Lexer.PUNCTUATION[char], char, self.line)

            elif char in Lexer.WORD_START:
                self.pos += 1
                return Token(Token.WORD, char + self._scan_run(Lexer.WORD_CHARS), self.line)

            elif char in Lexer.SYMBOL_CHARS:
                return Token(Token.SYMBOL, self._scan_run(Lexer.SYMBOL_CHARS), self.line)

            else:
                raise LexicalError("unrecognized input `{}' {}", (char, f"0x{ord(char):X}"), line=self.line)

    def __iter__(self):
        while True:
            token = self.scan()
            if token.kind == Token.EOF:
                return
            yield token


def tokenize(source, line=1):
    """Returns the list of tokens in source, excluding end-of-input."""
    return list(Lexer(source, line))
