"""
Tests for the gillis command-line front end.

Author: xwest
"""

import io
import os
import sys
import tempfile
import unittest
from contextlib import redirect_stdout, redirect_stderr

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from gillis.cli import main


class TestCommandLine(unittest.TestCase):
    """Test the lex and parse commands."""

    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self._tmp.cleanup)

    def _write(self, source: str) -> str:
        path = os.path.join(self._tmp.name, "program.gls")
        with open(path, "w", encoding="utf-8") as f:
            f.write(source)
        return path

    def _run(self, *argv):
        out, err = io.StringIO(), io.StringIO()
        with redirect_stdout(out), redirect_stderr(err):
            code = main(list(argv))
        return code, out.getvalue(), err.getvalue()

    def test_lex_prints_tokens_and_variables(self):
        path = self._write("LET P BE\n  y = 3 :\n  x = y :\nEND\n")
        code, out, err = self._run("lex", path)

        self.assertEqual(code, 0)
        lines = out.splitlines()
        self.assertEqual(lines[0], "token: " + "LET".ljust(15) + " lexical unit: LET")
        self.assertEqual(lines[3], "token: " + "y".ljust(15) + " lexical unit: VARNAME")
        self.assertEqual(lines[-3:], ["Variables", "x\t3", "y\t2"])
        self.assertEqual(err, "")

    def test_parse_prints_rule_numbers(self):
        path = self._write("LET P BE x = 3 : END")
        code, out, _ = self._run("parse", path)

        self.assertEqual(code, 0)
        self.assertEqual(out, "1 2 4 9 11 3 \n")

    def test_parse_verbose(self):
        path = self._write("LET P BE END")
        code, out, _ = self._run("parse", "-v", path)

        self.assertEqual(code, 0)
        self.assertEqual(len(out.splitlines()), 2)
        self.assertIn("<Program>", out)

    def test_syntax_error_exit_code(self):
        path = self._write("LET P BE x = 3 :")
        code, _, err = self._run("parse", path)

        self.assertEqual(code, 1)
        self.assertTrue(err.startswith("ERROR: "))
        self.assertIn("<Code>", err)

    def test_syntax_error_ends_trace_line(self):
        path = self._write("LET P BE x = 3 :")
        code, out, err = self._run("parse", path)

        self.assertEqual(code, 1)
        self.assertEqual(out, "1 2 4 9 11 \n")
        self.assertIn("while parsing <Code>", err)

    def test_error_before_any_rule_prints_no_trace(self):
        path = self._write("# LET P BE END")
        code, out, err = self._run("parse", path)

        self.assertEqual(code, 1)
        self.assertEqual(out, "")
        self.assertIn("'#'", err)

    def test_undecodable_file(self):
        path = os.path.join(self._tmp.name, "latin1.gls")
        with open(path, "wb") as f:
            f.write(b"LET P BE x = 1 : \xff END")

        for command in ("lex", "parse"):
            with self.subTest(command=command):
                code, _, err = self._run(command, path)
                self.assertEqual(code, 1)
                self.assertTrue(err.startswith("ERROR: "))
                self.assertIn("Cannot decode source text", err)

    def test_lexical_error_exit_code(self):
        path = self._write("LET P BE\n x = # : END")
        code, _, err = self._run("lex", path)

        self.assertEqual(code, 1)
        self.assertIn("'#'", err)
        self.assertIn("line 2", err)

    def test_missing_file(self):
        code, _, err = self._run("parse", os.path.join(self._tmp.name, "missing.gls"))
        self.assertEqual(code, 2)
        self.assertIn("valid Gillis file", err)


if __name__ == '__main__':
    unittest.main()
