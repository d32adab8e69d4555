"""Single-asset rendering: one paint assignment to a PNG and flattened JPG."""

from __future__ import annotations

import tempfile
from dataclasses import dataclass
from pathlib import Path

from helmet_style import Direction, MissingDependency, PaintAssignment, inject, resolve

from .logging_setup import get_logger
from .toolchain import Toolchain

_log = get_logger("colorize")


@dataclass(frozen=True)
class ColorizeResult:
    png: Path
    jpg: Path | None


def colorize(
    template: str,
    assignment: PaintAssignment,
    toolchain: Toolchain,
    output: Path,
    direction: Direction = Direction.LEFT_TO_RIGHT,
    size: tuple[int, int] | None = None,
    background: str = "white",
) -> ColorizeResult:
    """Render ``<output>.png`` and, when a compositor exists, ``<output>.jpg``."""
    toolchain.check(require_compositor=False)
    document = inject(template, resolve(assignment, direction))

    png = Path(f"{output}.png")
    jpg = Path(f"{output}.jpg")
    png.parent.mkdir(parents=True, exist_ok=True)

    with tempfile.TemporaryDirectory(prefix="helmet-assets-") as tmp:
        source = Path(tmp) / "derived.svg"
        source.write_text(document, encoding="utf-8")
        toolchain.rasterize(source, png, size)

    try:
        toolchain.flatten(png, jpg, background)
    except MissingDependency as exc:
        _log.warning(f"skipping JPG: {exc}", extra={"event": "jpg_skipped"})
        return ColorizeResult(png=png, jpg=None)
    return ColorizeResult(png=png, jpg=jpg)
