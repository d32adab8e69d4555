import json
import sys
import tempfile
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "packages" / "style"))
sys.path.insert(0, str(ROOT / "packages" / "core"))

from helmet_core.catalog import ASSET_CATALOG
from helmet_core.driver import AssetDriver
from helmet_core.flavors import get_flavor
from helmet_core.templates import load_template
from helmet_style import ExternalToolFailure


class FakeToolchain:
    """Writes placeholder files instead of spawning rsvg-convert/magick."""

    def __init__(self, fail_on=()):
        self.fail_on = set(fail_on)
        self.sources: list[Path] = []
        self.composites: list[tuple[str, tuple[int, int], str, int | None]] = []
        self.checked = 0

    def check(self, require_compositor=True):
        self.checked += 1

    def _write(self, output: Path, op: str) -> Path:
        if output.name in self.fail_on:
            raise ExternalToolFailure([op, str(output)], 1, "simulated failure")
        output.write_bytes(op.encode("ascii"))
        return output

    def rasterize(self, source, output, size=None):
        self.sources.append(source)
        return self._write(output, "rasterize")

    def bundle_icon(self, sources, output):
        return self._write(output, "bundle")

    def composite(self, foreground, output, canvas, background, quality=None):
        self.composites.append((output.name, canvas, background, quality))
        return self._write(output, "composite")


EXPECTED_THEME_FILES = {a.name for a in ASSET_CATALOG} | {"site.webmanifest", "browserconfig.xml"}


class GenerateFlavorTests(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.root = Path(self._tmp.name) / "out"

    def tearDown(self):
        self._tmp.cleanup()

    def test_one_flavor_both_themes(self):
        tc = FakeToolchain()
        lines: list[str] = []
        driver = AssetDriver(template=load_template(), toolchain=tc, progress=lines.append)
        report = driver.run(self.root, [get_flavor("blue")])

        self.assertTrue(report.success)
        self.assertEqual(report.flavors_completed, 1)
        self.assertEqual(tc.checked, 1)
        self.assertEqual(sorted(p.name for p in self.root.iterdir()), ["blue"])
        flavor_dir = self.root / "blue"
        self.assertEqual(sorted(p.name for p in flavor_dir.iterdir()), ["dark", "favicon.svg", "light"])
        for theme in ("light", "dark"):
            self.assertEqual({p.name for p in (flavor_dir / theme).iterdir()}, EXPECTED_THEME_FILES)
        self.assertEqual(report.files_written, 2 * len(EXPECTED_THEME_FILES) + 1)
        self.assertEqual(lines, ["blue/", "  ✓ light", "  ✓ dark", "  ✓ favicon.svg"])

    def test_auto_document_has_two_conditional_blocks(self):
        driver = AssetDriver(template=load_template(), toolchain=FakeToolchain())
        driver.run(self.root, [get_flavor("blue")])

        svg = (self.root / "blue" / "favicon.svg").read_text(encoding="utf-8")
        style = svg[svg.index("<style>") : svg.index("</style>")]
        self.assertEqual(style.count("@media(prefers-color-scheme:light)"), 1)
        self.assertEqual(style.count("@media(prefers-color-scheme:dark)"), 1)
        for theme in ("light", "dark"):
            for css_class in ("thick-band", "thin-band"):
                self.assertIn(f'id="grad-{css_class}-{theme}"', svg)
        self.assertNotIn('id="grad-thick-band"', svg)

    def test_themed_backgrounds_and_quality(self):
        tc = FakeToolchain()
        AssetDriver(template=load_template(), toolchain=tc, jpeg_quality=85).run(self.root, [get_flavor("black")])
        self.assertIn(("og-image.jpg", (1200, 630), "white", 85), tc.composites)
        self.assertIn(("og-image.jpg", (1200, 630), "black", 85), tc.composites)
        self.assertIn(("maskable-512x512.png", (512, 512), "black", None), tc.composites)

    def test_manifests_are_fixed(self):
        AssetDriver(template=load_template(), toolchain=FakeToolchain()).run(self.root, [get_flavor("fire")])
        light = self.root / "fire" / "light"
        dark = self.root / "fire" / "dark"
        manifest = json.loads((light / "site.webmanifest").read_text(encoding="utf-8"))
        self.assertEqual(len(manifest["icons"]), 3)
        self.assertEqual(manifest["icons"][2]["purpose"], "maskable")
        self.assertEqual(
            (light / "site.webmanifest").read_text(encoding="utf-8"),
            (dark / "site.webmanifest").read_text(encoding="utf-8"),
        )
        self.assertIn('<square150x150logo src="mstile-150x150.png"/>', (dark / "browserconfig.xml").read_text())

    def test_scratch_documents_removed(self):
        tc = FakeToolchain()
        AssetDriver(template=load_template(), toolchain=tc).run(self.root, [get_flavor("teal")])
        self.assertTrue(tc.sources)
        for source in tc.sources:
            self.assertFalse(source.exists())
            self.assertNotIn(str(self.root), str(source))

    def test_failure_does_not_stop_siblings(self):
        tc = FakeToolchain(fail_on={"og-image.jpg"})
        driver = AssetDriver(template=load_template(), toolchain=tc)
        report = driver.run(self.root, [get_flavor("black"), get_flavor("white")])

        self.assertFalse(report.success)
        self.assertEqual(len(report.failures), 4)
        self.assertEqual(report.flavors_completed, 0)
        first = report.failures[0]
        self.assertEqual((first.flavor, first.theme, first.asset, first.code), ("black", "light", "og-image.jpg", "E_EXTERNAL_TOOL"))
        self.assertTrue((self.root / "white" / "dark" / "logo-1024.png").exists())
        self.assertTrue((self.root / "white" / "favicon.svg").exists())

    def test_fail_fast_stops_at_first_failure(self):
        tc = FakeToolchain(fail_on={"favicon-16x16.png"})
        driver = AssetDriver(template=load_template(), toolchain=tc, fail_fast=True)
        report = driver.run(self.root, [get_flavor("black"), get_flavor("white")])

        self.assertTrue(report.aborted)
        self.assertEqual(len(report.failures), 1)
        self.assertFalse((self.root / "white").exists())
        self.assertFalse((self.root / "black" / "light" / "favicon-32x32.png").exists())

    def test_unclosed_template_recorded_per_theme(self):
        tc = FakeToolchain()
        lines: list[str] = []
        template = '<svg xmlns="http://www.w3.org/2000/svg"><path class="heart"/>\n'
        driver = AssetDriver(template=template, toolchain=tc, progress=lines.append)
        report = driver.run(self.root, [get_flavor("red"), get_flavor("gold")])

        self.assertFalse(report.success)
        self.assertEqual(report.files_written, 0)
        self.assertEqual(tc.sources, [])
        self.assertEqual(
            [(f.flavor, f.theme, f.asset, f.code) for f in report.failures],
            [
                ("red", "light", "*", "E_TEMPLATE_INJECTION"),
                ("red", "dark", "*", "E_TEMPLATE_INJECTION"),
                ("red", "auto", "favicon.svg", "E_TEMPLATE_INJECTION"),
                ("gold", "light", "*", "E_TEMPLATE_INJECTION"),
                ("gold", "dark", "*", "E_TEMPLATE_INJECTION"),
                ("gold", "auto", "favicon.svg", "E_TEMPLATE_INJECTION"),
            ],
        )
        self.assertEqual(lines[:4], ["red/", "  ✗ light (1 failed)", "  ✗ dark (1 failed)", "  ✗ favicon.svg"])
        self.assertFalse((self.root / "red" / "favicon.svg").exists())


if __name__ == "__main__":
    unittest.main()
