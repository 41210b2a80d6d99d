import contextlib
import io
import os
import re
import tempfile
import unittest

from quotecat.lang.session import Session
from quotecat.main import main


ANSI = re.compile(r"\033\[[0-9;]*m")


class MainTestCase(unittest.TestCase):

    def setUp(self):
        self.tmpdir = tempfile.TemporaryDirectory()

    def tearDown(self):
        self.tmpdir.cleanup()

    def write(self, source, name="prog.qc"):
        path = os.path.join(self.tmpdir.name, name)
        with open(path, "w") as file:
            file.write(source)
        return path

    def run_main(self, *argv):
        """Returns (exit code, stdout, stderr) of main(argv)."""
        out, err = io.StringIO(), io.StringIO()
        with contextlib.redirect_stdout(out), contextlib.redirect_stderr(err):
            try:
                code = main(list(argv))
            except SystemExit as exc:
                code = exc.code
        return code, out.getvalue(), ANSI.sub("", err.getvalue())

    def test_batch(self):
        path = self.write("# swap two symbols\n: flip swap ;\nFOO BAR\nflip\n")
        self.assertEqual((0, "2: BAR FOO \n", ""), self.run_main(path))

    def test_batch_runtime_error_exits_zero(self):
        code, out, err = self.run_main(self.write("A\nzap zap"))
        self.assertEqual(0, code)
        self.assertEqual("0: \n", out)
        self.assertEqual("runtime error: 2: stack underflow\n  at 2: zap\n", err)

    def test_batch_runtime_error_shows_remaining_stack(self):
        code, out, __ = self.run_main(self.write("A B [ C ] nosuchword D"))
        self.assertEqual(0, code)
        self.assertEqual("3: A B [ C ] \n", out)

    def test_batch_parse_error_exits_one(self):
        code, out, err = self.run_main(self.write("[ A\n"))
        self.assertEqual(1, code)
        self.assertEqual("", out)
        self.assertEqual(["parse error: 2: unterminated quotation", "parse error: invalid parse"], err.splitlines())

    def test_batch_syntax_error_exits_one(self):
        code, __, err = self.run_main(self.write("A\nB 7"))
        self.assertEqual(1, code)
        self.assertEqual("syntax error: 2: unrecognized input `7' 0x37\n", err)

    def test_missing_file(self):
        path = os.path.join(self.tmpdir.name, "missing.qc")
        code, __, err = self.run_main(path)
        self.assertEqual(1, code)
        self.assertEqual(f"error: `{path}' could not be opened\n", err)

    def test_exit_word(self):
        code, out, __ = self.run_main(self.write("A show exit B show"))
        self.assertEqual(0, code)
        self.assertEqual("1: A \n", out)

    def test_source_bound(self):
        path = self.write("A " * Session.MAX_SOURCE)
        self.assertEqual(Session.MAX_SOURCE, len(Session.load(path)))


if __name__ == '__main__':
    unittest.main()
