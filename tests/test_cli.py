"""
CLI end to end: exit codes, gradient listing, flags.
"""
import io
import sys
import tempfile
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from punchcard.cli import main

TWO_LINES = "2023-01-02 09:00:00 +0000\n2023-01-02 09:00:00 +0000\n"


class _BrokenStdin:
    def __iter__(self):
        yield "2023-01-02 09:00:00 +0000\n"
        raise OSError("read failed")


class TestCli(unittest.TestCase):
    def _run(self, argv, stdin=""):
        out = io.StringIO()
        if isinstance(stdin, str):
            stdin = io.StringIO(stdin)
        code = main(argv, stdin=stdin, stdout=out)
        return code, out.getvalue()

    def test_renders_grid(self):
        code, out = self._run([], TWO_LINES)
        self.assertEqual(code, 0)
        self.assertIn("   Monday ", out)
        self.assertIn("\x1b[48;5;231m", out)

    def test_unknown_gradient(self):
        code, out = self._run(["--gradient", "doesnotexist"], TWO_LINES)
        self.assertEqual(code, 1)
        self.assertIn("Valid palettes:", out)
        self.assertIn("- fire", out)
        self.assertNotIn("Monday", out)

    def test_palette_alias(self):
        code, out = self._run(["--palette", "fire", "--scale"], TWO_LINES)
        self.assertEqual(code, 0)
        self.assertEqual(len(out.splitlines()), 9)

    def test_list_gradients(self):
        code, out = self._run(["--list-gradients"])
        self.assertEqual(code, 0)
        self.assertIn("- blackwhite", out)

    def test_bad_lines_do_not_fail(self):
        with self.assertLogs("punchcard.ingest", level="WARNING"):
            code, out = self._run(["--transparent"], "nope\n" + TWO_LINES)
        self.assertEqual(code, 0)
        self.assertIn("Sunday", out)

    def test_read_error_aborts_without_render(self):
        code, out = self._run([], _BrokenStdin())
        self.assertEqual(code, 1)
        self.assertNotIn("Monday", out)

    def test_flag_turns_off_config_toggle(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "punchcard.yaml"
            path.write_text("display:\n  scale: true\n", encoding="utf-8")
            code, out = self._run(["--config", str(path)], TWO_LINES)
            self.assertEqual(code, 0)
            self.assertEqual(len(out.splitlines()), 9)
            code, out = self._run(["--config", str(path), "--no-scale"], TWO_LINES)
        self.assertEqual(code, 0)
        self.assertEqual(len(out.splitlines()), 7)

    def test_quoted_toggle_in_config(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "punchcard.yaml"
            path.write_text("display:\n  margins: \"yes\"\n", encoding="utf-8")
            code, out = self._run(["--config", str(path)], TWO_LINES)
        self.assertEqual(code, 1)
        self.assertEqual(out, "")

    def test_bad_config(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "punchcard.yaml"
            path.write_text("- not\n- a mapping\n", encoding="utf-8")
            code, out = self._run(["--config", str(path)], TWO_LINES)
        self.assertEqual(code, 1)
        self.assertEqual(out, "")


if __name__ == "__main__":
    unittest.main()
