import io
import json
import sys
import tempfile
import unittest
from contextlib import redirect_stderr, redirect_stdout
from pathlib import Path
from unittest.mock import patch

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "apps" / "cli"))
sys.path.insert(0, str(ROOT / "packages" / "core"))
sys.path.insert(0, str(ROOT / "packages" / "renderer"))

from carousel_app import cli
from carousel_app.cli import build_parser
from carousel_core.config import AppConfig


class CliParserTests(unittest.TestCase):
    def test_export_command(self):
        args = build_parser().parse_args(["export", "--input", "quotes.txt", "--format", "raster", "--partial"])
        self.assertEqual(args.command, "export")
        self.assertEqual(args.input, "quotes.txt")
        self.assertEqual(args.format, "raster")
        self.assertTrue(args.partial)

    def test_themes_command(self):
        args = build_parser().parse_args(["themes"])
        self.assertEqual(args.command, "themes")

    def test_profile_set_command(self):
        args = build_parser().parse_args(["profile", "set", "--name", "Ada", "--theme", "Sunset"])
        self.assertEqual(args.profile_cmd, "set")
        self.assertEqual(args.name, "Ada")
        self.assertEqual(args.theme, "Sunset")


@patch.object(cli, "configure_logging")
@patch.object(cli, "load_config", side_effect=lambda: AppConfig())
class CliRunTests(unittest.TestCase):
    def _run(self, argv):
        out, err = io.StringIO(), io.StringIO()
        with redirect_stdout(out), redirect_stderr(err):
            rc = cli.main(argv)
        return rc, out.getvalue(), err.getvalue()

    def test_export_writes_pdf(self, _load, _logging):
        with tempfile.TemporaryDirectory() as tmp:
            rc, out, _ = self._run(["export", "--text", "Work hard.\nStay humble.", "--out-dir", tmp])
            self.assertEqual(rc, 0)
            payload = json.loads(out)
            self.assertEqual(payload["filename"], "work-hard.pdf")
            self.assertEqual(payload["pages"], 2)
            self.assertTrue((Path(tmp) / "work-hard.pdf").exists())

    def test_export_raster_with_custom_colors(self, _load, _logging):
        with tempfile.TemporaryDirectory() as tmp:
            rc, out, _ = self._run(
                ["export", "--text", "Stay humble.", "--format", "raster", "--colors", "#000000,#ffffff,#ff0000", "--out-dir", tmp]
            )
            self.assertEqual(rc, 0)
            self.assertTrue((Path(tmp) / "stay-humble-images.zip").exists())

    def test_empty_input_reports_single_reason(self, _load, _logging):
        with tempfile.TemporaryDirectory() as tmp:
            rc, out, err = self._run(["export", "--text", "  \n ", "--out-dir", tmp])
            self.assertEqual(rc, 2)
            self.assertEqual(out, "")
            self.assertIn("error: Please add at least one quote!", err.splitlines())
            self.assertEqual(list(Path(tmp).iterdir()), [])

    def test_unknown_theme(self, _load, _logging):
        rc, _, err = self._run(["export", "--text", "q", "--theme", "Neon"])
        self.assertEqual(rc, 2)
        self.assertIn("Unknown theme", err)

    def test_themes_lists_catalog(self, _load, _logging):
        rc, out, _ = self._run(["themes"])
        self.assertEqual(rc, 0)
        themes = json.loads(out)
        self.assertEqual(themes[0], {"name": "Clean White", "background": "#ffffff", "text": "#1a1a1a", "accent": "#0a66c2"})

    def test_profile_set_saves(self, _load, _logging):
        with patch.object(cli, "save_config", return_value=Path("/tmp/config.json")) as save:
            rc, _, _ = self._run(["profile", "set", "--name", "Ada", "--theme", "Sunset"])
        self.assertEqual(rc, 0)
        saved = save.call_args.args[0]
        self.assertEqual(saved.profile.display_name, "Ada")
        self.assertEqual(saved.ui.theme, "Sunset")


if __name__ == "__main__":
    unittest.main()
