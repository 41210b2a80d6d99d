"""Handles interactive/command-line mode for the quotecat interpreter. Uses cmd as backend."""

import cmd
import sys


class LineReader:
    """Wraps an input stream and remembers whether or not it has run out of lines."""

    def __init__(self, stream):
        self.stream = stream
        self.exhausted = False

    def readline(self):
        line = self.stream.readline()
        if not line:
            self.exhausted = True
        return line


class Shell(cmd.Cmd):
    """quotecat interpreter shell. Every line is parsed and evaluated as its own program unit: no line is treated as a
    shell command, except "?" (which can't be valid quotecat).
    """
    intro = "quotecat :: concatenative interpreter\nType '?' for more information."
    prompt = ">>> "
    HELP = "?"

    def __init__(self, sess, stdin=None, stdout=None, *args, **kwargs):
        super().__init__(*args, stdin=LineReader(stdin if stdin is not None else sys.stdin), stdout=stdout, **kwargs)
        self.use_rawinput = False  # lines must come through self.stdin to tell end of input from a typed "EOF"

        self.sess = sess
        self.line_num = 0

    def onecmd(self, line):
        """Sends every line to default, bypassing cmd's command dispatch."""
        if line == "EOF" and self.stdin.exhausted:
            return self.do_EOF(line)
        elif line.strip() == Shell.HELP:
            return self.do_help("")
        elif not line.strip():
            return self.emptyline()
        return self.default(line)

    def default(self, line):
        """Executes arbitrary quotecat line."""
        self.line_num += 1
        self.sess.run(line, self.line_num)

    def do_help(self, arg):
        """Doesnt return docs, but rather a short intro."""
        print("Welcome to the quotecat interpreter!\n\n"
              "Programs are sequences of words and symbols that act on a shared stack. \n"
              "UPPERCASE tokens are pushed as data, lowercase tokens invoke words and \n"
              "[ ... ] pushes a quotation without running it.\n\n"
              "Try typing 'FOO BAR swap'. Then define a word with ': twice dup cat ;' \n"
              "and try '[ FOO ] twice'. Builtins: zap empty i unit dup cat swap cons \n"
              "dip show exit.\n\n"
              "Line numbers in error messages count the lines typed in this shell.", file=self.stdout)

    def emptyline(self):
        """Do not repeat previous command on empty line."""
        self.line_num += 1
        return ""

    def do_EOF(self, arg):
        """Exits interpreter."""
        print(file=self.stdout)
        return True
