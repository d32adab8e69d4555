import sys
import unittest
from contextlib import redirect_stderr
from io import StringIO
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "apps" / "cli"))
sys.path.insert(0, str(ROOT / "packages" / "core"))
sys.path.insert(0, str(ROOT / "packages" / "style"))

from helmet_app.cli import build_parser
from helmet_style import Direction


class CliTests(unittest.TestCase):
    def _parse_fails(self, argv):
        with redirect_stderr(StringIO()):
            with self.assertRaises(SystemExit) as ctx:
                build_parser().parse_args(argv)
        return ctx.exception.code

    def test_generate_defaults(self):
        args = build_parser().parse_args(["generate"])
        self.assertEqual(args.command, "generate")
        self.assertEqual(args.out_dir, ".")
        self.assertIsNone(args.flavor)
        self.assertFalse(args.fail_fast)

    def test_generate_with_flavors(self):
        args = build_parser().parse_args(["generate", "out", "--flavor", "blue", "--flavor", "fire", "--fail-fast"])
        self.assertEqual(args.out_dir, "out")
        self.assertEqual(args.flavor, ["blue", "fire"])
        self.assertTrue(args.fail_fast)

    def test_colorize_command(self):
        args = build_parser().parse_args(
            ["colorize", "--thick-band", "#00E5A0:#0099FF:#304FFE", "--direction", "diag", "--size", "1024x1024"]
        )
        self.assertEqual(args.command, "colorize")
        self.assertEqual(args.thick_band, "#00E5A0:#0099FF:#304FFE")
        self.assertEqual(args.heart, "#000000")
        self.assertIs(args.direction, Direction.DIAGONAL)
        self.assertEqual(args.size, (1024, 1024))
        self.assertEqual(args.output, "helmet_out")
        self.assertEqual(args.bg, "white")

    def test_colorize_bad_size_is_usage_error(self):
        self.assertEqual(self._parse_fails(["colorize", "--size", "big"]), 2)

    def test_colorize_bad_direction_is_usage_error(self):
        self.assertEqual(self._parse_fails(["colorize", "--direction", "sideways"]), 2)

    def test_unknown_flag_is_usage_error(self):
        self.assertEqual(self._parse_fails(["colorize", "--sparkle", "#fff"]), 2)

    def test_doctor_command(self):
        args = build_parser().parse_args(["doctor", "--compositor", "pillow"])
        self.assertEqual(args.command, "doctor")
        self.assertEqual(args.compositor, "pillow")


if __name__ == "__main__":
    unittest.main()
