"""
Test cases for the jsonmend command line interface.
"""

import io
import os
import shutil
import tempfile
import unittest
from unittest import mock

from jsonmend.cli import main


class TestCommandLine(unittest.TestCase):
    """Test reading, writing and exit codes."""

    def setUp(self):
        self.tmpdir = tempfile.mkdtemp()

    def tearDown(self):
        shutil.rmtree(self.tmpdir)

    def _write(self, name, content):
        path = os.path.join(self.tmpdir, name)
        with open(path, "w", encoding="utf-8") as fp:
            fp.write(content)
        return path

    def _read(self, path):
        with open(path, encoding="utf-8") as fp:
            return fp.read()

    def _run(self, argv, stdin=""):
        """Run the CLI and return (exit code, stdout, stderr)."""
        stdout = io.StringIO()
        stderr = io.StringIO()
        with mock.patch("sys.stdin", io.StringIO(stdin)), mock.patch(
            "sys.stdout", stdout
        ), mock.patch("sys.stderr", stderr):
            code = main(argv)
        return code, stdout.getvalue(), stderr.getvalue()

    def test_file_to_stdout(self):
        path = self._write("in.json", "{a: 1")
        code, out, _ = self._run([path])
        self.assertEqual(code, 0)
        self.assertEqual(out, '{\n  "a": 1\n}\n')

    def test_single_line_output(self):
        path = self._write("in.json", "[1 2]")
        code, out, _ = self._run([path, "--indent", "0"])
        self.assertEqual(code, 0)
        self.assertEqual(out, "[1, 2]\n")

    def test_stdin(self):
        code, out, _ = self._run(["--indent", "0"], stdin="{'a': [1,]}")
        self.assertEqual(code, 0)
        self.assertEqual(out, '{"a": [1]}\n')

    def test_output_file(self):
        path = self._write("in.json", "[1,]")
        target = os.path.join(self.tmpdir, "out.json")
        code, out, _ = self._run([path, "-o", target, "--indent", "0"])
        self.assertEqual(code, 0)
        self.assertEqual(out, "")
        self.assertEqual(self._read(target), "[1]\n")

    def test_inline(self):
        path = self._write("in.json", "{'a': True}")
        code, _, _ = self._run([path, "--inline", "--indent", "0"])
        self.assertEqual(code, 0)
        self.assertEqual(self._read(path), '{"a": true}\n')

    def test_inline_requires_filename(self):
        code, _, err = self._run(["--inline"], stdin="[1]")
        self.assertEqual(code, 2)
        self.assertIn("--inline requires a filename", err)

    def test_ensure_ascii(self):
        path = self._write("in.json", '{"a": "\u00e9"}')
        _, out, _ = self._run([path, "--indent", "0"])
        self.assertEqual(out, '{"a": "\u00e9"}\n')

        _, out, _ = self._run([path, "--indent", "0", "--ensure-ascii"])
        self.assertEqual(out, '{"a": "\\u00e9"}\n')

        _, out, _ = self._run([path, "--indent", "0", "--ensure_ascii"])
        self.assertEqual(out, '{"a": "\\u00e9"}\n')

    def test_skip_validation(self):
        path = self._write("in.json", '{"a": 1.50}')
        code, out, _ = self._run([path, "--indent", "0", "--skip-validation"])
        self.assertEqual(code, 0)
        self.assertEqual(out, '{"a": 1.50}\n')

    def test_sentinels(self):
        path = self._write("in.json", "[NaN, -Infinity")
        _, out, _ = self._run([path, "--indent", "0"])
        self.assertEqual(out, "[null, null]\n")

        _, out, _ = self._run([path, "--indent", "0", "--allow-nan"])
        self.assertEqual(out, "[NaN, -Infinity]\n")

    def test_empty_input(self):
        """Test that input with no value exits with code 3 and one line of error."""
        path = self._write("empty.json", "   ")
        code, out, err = self._run([path])
        self.assertEqual(code, 3)
        self.assertEqual(out, "")
        self.assertIn("No JSON value found", err)
        self.assertEqual(len(err.strip().splitlines()), 1)

    def test_missing_file(self):
        code, _, err = self._run([os.path.join(self.tmpdir, "missing.json")])
        self.assertEqual(code, 1)
        self.assertIn("cannot read input", err)

    def test_negative_indent(self):
        code, _, _ = self._run(["--indent", "-1"], stdin="[1]")
        self.assertEqual(code, 2)

    def test_bad_arguments(self):
        with self.assertRaises(SystemExit) as cm:
            self._run(["--indent", "two"])
        self.assertEqual(cm.exception.code, 2)


if __name__ == "__main__":
    unittest.main()
