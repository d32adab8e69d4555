"""Flavor x theme x asset fan-out over the external toolchain."""

from __future__ import annotations

import tempfile
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Iterable

from helmet_style import (
    Direction,
    ExternalToolFailure,
    TemplateInjectionFailure,
    inject,
    inject_conditional,
    resolve,
)

from .catalog import ASSET_CATALOG, AUTO_DOCUMENT_NAME, AssetKind, AssetSpec, OutputTarget
from .flavors import Flavor, Theme
from .logging_setup import get_logger
from .manifests import write_manifests
from .toolchain import Toolchain


ProgressCallback = Callable[[str], None]

THEMES = (Theme.LIGHT, Theme.DARK)
AUTO_THEME = "auto"

_log = get_logger("driver")


@dataclass(frozen=True)
class DerivedDocuments:
    light: str
    dark: str
    auto: str

    def for_theme(self, theme: Theme) -> str:
        return self.light if theme is Theme.LIGHT else self.dark


@dataclass(frozen=True)
class TargetFailure:
    flavor: str
    theme: str
    asset: str
    code: str
    message: str


@dataclass
class RunReport:
    output_root: str
    flavors_completed: int = 0
    files_written: int = 0
    failures: list[TargetFailure] = field(default_factory=list)
    aborted: bool = False

    @property
    def success(self) -> bool:
        return not self.failures


class AssetDriver:
    """Derives themed documents per flavor and fans them out to the catalog."""

    def __init__(
        self,
        template: str,
        toolchain: Toolchain,
        catalog: Iterable[AssetSpec] = ASSET_CATALOG,
        direction: Direction = Direction.DIAGONAL,
        fail_fast: bool = False,
        jpeg_quality: int | None = None,
        progress: ProgressCallback | None = None,
    ) -> None:
        self.template = template
        self.toolchain = toolchain
        self.catalog = tuple(catalog)
        self.direction = direction
        self.fail_fast = fail_fast
        self.jpeg_quality = jpeg_quality
        self.progress = progress or (lambda _msg: None)

    def derive_theme(self, flavor: Flavor, theme: Theme) -> str:
        return inject(self.template, resolve(flavor.assignment(theme), self.direction))

    def derive_auto(self, flavor: Flavor) -> str:
        light = resolve(flavor.light, self.direction, Theme.LIGHT.value)
        dark = resolve(flavor.dark, self.direction, Theme.DARK.value)
        return inject_conditional(self.template, light, dark)

    def derive(self, flavor: Flavor) -> DerivedDocuments:
        return DerivedDocuments(
            light=self.derive_theme(flavor, Theme.LIGHT),
            dark=self.derive_theme(flavor, Theme.DARK),
            auto=self.derive_auto(flavor),
        )

    def produce(self, target: OutputTarget, source: Path, root: Path, scratch: Path) -> Path:
        asset = target.asset
        out = target.path(root)
        background = target.theme.background
        tc = self.toolchain

        if asset.kind is AssetKind.RASTER:
            return tc.rasterize(source, out, (asset.width, asset.height))

        if asset.kind is AssetKind.ICON_BUNDLE:
            layers = [
                tc.rasterize(source, scratch / f"{out.stem}-{s}.png", (s, s))
                for s in asset.bundle_sizes
            ]
            return tc.bundle_icon(layers, out)

        fg_size = asset.foreground or min(asset.width, asset.height)
        foreground = tc.rasterize(source, scratch / f"{out.stem}-fg.png", (fg_size, fg_size))
        quality = None
        if asset.kind is AssetKind.SOCIAL:
            quality = self.jpeg_quality or asset.quality
        return tc.composite(foreground, out, (asset.width, asset.height), background, quality)

    def _record(self, report: RunReport, flavor: str, theme: str, asset: str, exc: Exception) -> None:
        code = getattr(exc, "code", type(exc).__name__)
        report.failures.append(TargetFailure(flavor=flavor, theme=theme, asset=asset, code=code, message=str(exc)))
        _log.error(
            f"{flavor}/{theme}/{asset} failed: {exc}",
            extra={"event": "target_failed", "flavor": flavor, "theme": theme, "asset": asset, "code": code},
        )
        if self.fail_fast:
            report.aborted = True

    def _run_theme(self, flavor: Flavor, theme: Theme, root: Path, scratch: Path, report: RunReport) -> int:
        failures = 0
        try:
            document = self.derive_theme(flavor, theme)
        except TemplateInjectionFailure as exc:
            self._record(report, flavor.name, theme.value, "*", exc)
            return 1

        work = scratch / f"{flavor.name}-{theme.value}"
        work.mkdir(parents=True, exist_ok=True)
        source = work / "derived.svg"
        source.write_text(document, encoding="utf-8")

        directory = root / flavor.name / theme.value
        directory.mkdir(parents=True, exist_ok=True)

        for asset in self.catalog:
            target = OutputTarget(flavor=flavor, theme=theme, asset=asset)
            try:
                self.produce(target, source, root, work)
            except ExternalToolFailure as exc:
                failures += 1
                self._record(report, flavor.name, theme.value, asset.name, exc)
                if report.aborted:
                    return failures
                continue
            report.files_written += 1

        report.files_written += len(write_manifests(directory))
        return failures

    def _run_auto(self, flavor: Flavor, root: Path, report: RunReport) -> int:
        try:
            document = self.derive_auto(flavor)
        except TemplateInjectionFailure as exc:
            self._record(report, flavor.name, AUTO_THEME, AUTO_DOCUMENT_NAME, exc)
            return 1
        path = root / flavor.name / AUTO_DOCUMENT_NAME
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(document, encoding="utf-8")
        report.files_written += 1
        return 0

    def run_flavor(self, flavor: Flavor, root: Path, scratch: Path, report: RunReport) -> bool:
        self.progress(f"{flavor.name}/")
        failed = 0
        for theme in THEMES:
            theme_failures = self._run_theme(flavor, theme, root, scratch, report)
            failed += theme_failures
            if theme_failures:
                self.progress(f"  ✗ {theme.value} ({theme_failures} failed)")
            else:
                self.progress(f"  ✓ {theme.value}")
            if report.aborted:
                return False

        auto_failures = self._run_auto(flavor, root, report)
        failed += auto_failures
        self.progress(f"  {'✓' if not auto_failures else '✗'} {AUTO_DOCUMENT_NAME}")
        if failed == 0:
            report.flavors_completed += 1
            return True
        return False

    def run(self, output_root: Path, flavors: Iterable[Flavor]) -> RunReport:
        """Generate every flavor under ``output_root``.

        The toolchain is checked before anything is written. Scratch files live
        in a private temporary directory that is removed on every exit path.
        """
        self.toolchain.check()
        root = Path(output_root)
        root.mkdir(parents=True, exist_ok=True)
        report = RunReport(output_root=str(root))

        _log.info(f"generating assets in {root}", extra={"event": "run_started"})
        with tempfile.TemporaryDirectory(prefix="helmet-assets-") as tmp:
            scratch = Path(tmp)
            for flavor in flavors:
                self.run_flavor(flavor, root, scratch, report)
                if report.aborted:
                    break

        _log.info(
            f"done: {report.flavors_completed} flavors, {len(report.failures)} failures",
            extra={"event": "run_finished"},
        )
        return report

