"""Declarative asset catalog and output target expansion."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Iterable, Iterator

from helmet_style import InvalidArgument

from .flavors import Flavor, Theme


class AssetKind(str, Enum):
    RASTER = "raster"
    ICON_BUNDLE = "icon-bundle"
    PADDED = "padded"
    SOCIAL = "social"


@dataclass(frozen=True)
class AssetSpec:
    name: str
    width: int
    height: int
    kind: AssetKind = AssetKind.RASTER
    foreground: int | None = None
    bundle_sizes: tuple[int, ...] = field(default_factory=tuple)
    quality: int | None = None

    @property
    def needs_background(self) -> bool:
        return self.kind in (AssetKind.PADDED, AssetKind.SOCIAL)


def _square(name: str, size: int) -> AssetSpec:
    return AssetSpec(name=name, width=size, height=size)


ASSET_CATALOG: tuple[AssetSpec, ...] = (
    *(_square(f"logo-{s}.png", s) for s in (64, 128, 256, 512, 1024)),
    _square("favicon-16x16.png", 16),
    _square("favicon-32x32.png", 32),
    AssetSpec("favicon.ico", 48, 48, AssetKind.ICON_BUNDLE, bundle_sizes=(16, 32, 48)),
    _square("apple-touch-icon.png", 180),
    _square("android-chrome-192x192.png", 192),
    _square("android-chrome-512x512.png", 512),
    # Icon at ~70% of the canvas keeps it inside the maskable safe zone.
    AssetSpec("maskable-512x512.png", 512, 512, AssetKind.PADDED, foreground=360),
    _square("mstile-150x150.png", 150),
    AssetSpec("og-image.jpg", 1200, 630, AssetKind.SOCIAL, foreground=400, quality=90),
)

AUTO_DOCUMENT_NAME = "favicon.svg"


@dataclass(frozen=True)
class OutputTarget:
    flavor: Flavor
    theme: Theme
    asset: AssetSpec

    def directory(self, root: Path) -> Path:
        return root / self.flavor.name / self.theme.value

    def path(self, root: Path) -> Path:
        return self.directory(root) / self.asset.name

    @property
    def label(self) -> str:
        return f"{self.flavor.name}/{self.theme.value}/{self.asset.name}"


def expand_targets(
    flavors: Iterable[Flavor],
    catalog: Iterable[AssetSpec] = ASSET_CATALOG,
    themes: Iterable[Theme] = (Theme.LIGHT, Theme.DARK),
) -> Iterator[OutputTarget]:
    catalog = tuple(catalog)
    themes = tuple(themes)
    for flavor in flavors:
        for theme in themes:
            for asset in catalog:
                yield OutputTarget(flavor=flavor, theme=theme, asset=asset)


def parse_size(text: str) -> tuple[int, int]:
    """Parse ``"1024x1024"`` into ``(width, height)``."""
    width, sep, height = text.lower().partition("x")
    if not sep or not width.isdigit() or not height.isdigit():
        raise InvalidArgument(f"Invalid size: {text!r} (expected WxH)")
    w, h = int(width), int(height)
    if w <= 0 or h <= 0:
        raise InvalidArgument(f"Invalid size: {text!r} (dimensions must be positive)")
    return w, h
