"""quotecat: interpreter for a small concatenative language.

For reference:
- "word": a named operation, either native or defined with `: name ... ;`
- "quotation": a `[ ... ]` block, pushed as a value and only run on demand (by `i`, `dip` or a word body)

Basic program flow:
    1. Lexer: splits the source into tokens, see quotecat/lang/lexical.py
    2. Parser: builds the tree of quotations and installs definitions, see quotecat/lang/parser.py
    3. Evaluator: runs the top-level quotation against the stack, see quotecat/lang/evaluator.py

"""

__version__ = "0.1.0"
