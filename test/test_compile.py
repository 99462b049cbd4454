import io
import os
import tempfile
import unittest
from contextlib import redirect_stderr, redirect_stdout
from unittest.mock import patch

from java2js import diagnostics
from java2js.__main__ import main
from java2js.compile import compile_file, read_source

HELLO = 'System.out.println("이리오너라!");\n'


class TestCompileFile(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.dir = self._tmp.name

    def tearDown(self):
        self._tmp.cleanup()

    def path(self, name):
        return os.path.join(self.dir, name)

    def write(self, name, contents):
        with open(self.path(name), "w", encoding="utf-8", newline="") as f:
            f.write(contents)

    def read(self, name):
        with open(self.path(name), "r", encoding="utf-8", newline="") as f:
            return f.read()

    def test_compile(self):
        self.write("input.java", HELLO)
        compile_file(self.path("input.java"), self.path("output.js"))
        self.assertEqual(self.read("output.js"), 'console.log("이리오너라!");\n')

    def test_empty_output_is_written(self):
        self.write("input.java", "int x = 1;")
        compile_file(self.path("input.java"), self.path("output.js"))
        self.assertEqual(self.read("output.js"), "")

    def test_carriage_return_inside_literal_is_kept(self):
        self.write("input.java", 'System.out.println("a\r\nb");\r\n')
        compile_file(self.path("input.java"), self.path("output.js"))
        self.assertEqual(self.read("output.js"), 'console.log("a\r\nb");\n')

    def test_missing_input(self):
        with self.assertRaises(FileNotFoundError):
            compile_file(self.path("missing.java"), self.path("output.js"))
        self.assertFalse(os.path.exists(self.path("output.js")))

    def test_unwritable_output(self):
        self.write("input.java", HELLO)
        with self.assertRaises(OSError):
            compile_file(self.path("input.java"), self.dir)


class TestMain(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.input = os.path.join(self._tmp.name, "input.java")
        self.output = os.path.join(self._tmp.name, "output.js")
        with open(self.input, "w", encoding="utf-8") as f:
            f.write(HELLO + 'foo("bar");\n')

    def tearDown(self):
        self._tmp.cleanup()
        diagnostics.enabled_diagnostics.clear()

    def run_main(self, *argv):
        stdout, stderr = io.StringIO(), io.StringIO()
        with redirect_stdout(stdout), redirect_stderr(stderr):
            status = main(list(argv))
        return status, stdout.getvalue(), stderr.getvalue()

    def test_success(self):
        status, stdout, stderr = self.run_main(self.input, "-o", self.output)
        self.assertEqual(status, 0)
        self.assertEqual(stdout, "Compilation successful!\n")
        self.assertEqual(stderr, "")
        with open(self.output, encoding="utf-8") as f:
            self.assertEqual(f.read(), 'console.log("이리오너라!");\n')

    def test_missing_input(self):
        missing = os.path.join(self._tmp.name, "nope.java")
        status, stdout, stderr = self.run_main(missing, "-o", self.output)
        self.assertEqual(status, 1)
        self.assertEqual(stdout, "")
        self.assertTrue(stderr.startswith("Error during compilation: "))
        self.assertIn("nope.java", stderr)

    def test_dump_tokens(self):
        status, stdout, _ = self.run_main(self.input, "-o", self.output, "--dump-tokens")
        self.assertEqual(status, 0)
        self.assertEqual(
            stdout.splitlines(),
            [
                "KEYWORD('System.out.println')",
                "LEFT_PAREN",
                "STRING('이리오너라!')",
                "RIGHT_PAREN",
                "SEMICOLON",
                "KEYWORD('foo')",
                "LEFT_PAREN",
                "STRING('bar')",
                "RIGHT_PAREN",
                "SEMICOLON",
                "Compilation successful!",
            ],
        )

    def test_dumps_and_output_share_one_read(self):
        with patch("java2js.__main__.read_source", wraps=read_source) as reader:
            status, stdout, _ = self.run_main(
                self.input, "-o", self.output, "--dump-tokens", "--dump-ast"
            )
        self.assertEqual(status, 0)
        reader.assert_called_once_with(self.input)
        self.assertIn('System.out.println("이리오너라!");', stdout.splitlines())

    def test_dump_ast(self):
        status, stdout, _ = self.run_main(self.input, "-o", self.output, "--dump-ast")
        self.assertEqual(status, 0)
        self.assertEqual(
            stdout.splitlines(),
            ['System.out.println("이리오너라!");', "Compilation successful!"],
        )

    def test_warnings(self):
        status, _, stderr = self.run_main(self.input, "-o", self.output, "-Wall")
        self.assertEqual(status, 0)
        self.assertEqual(
            stderr, "WARN(unknown-statement): Skipping unrecognized statement 'foo'\n"
        )


if __name__ == "__main__":
    unittest.main()
