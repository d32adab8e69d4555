"""External rasterizer and compositor wrappers used by the asset driver."""

from __future__ import annotations

import shutil
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

from PIL import Image

from helmet_style import ExternalToolFailure, MissingDependency

from .logging_setup import get_logger


RASTERIZER_HINT = "install librsvg, e.g. brew install librsvg"
COMPOSITOR_HINT = "install ImageMagick 7, e.g. brew install imagemagick"

_log = get_logger("toolchain")


def _run(command: Sequence[str], timeout: float) -> None:
    cmd = [str(part) for part in command]
    _log.debug("exec %s", " ".join(cmd), extra={"event": "tool_exec"})
    try:
        proc = subprocess.run(cmd, capture_output=True, text=True, timeout=timeout)
    except subprocess.TimeoutExpired as exc:
        raise ExternalToolFailure(cmd, None, str(exc)) from exc
    except FileNotFoundError as exc:
        raise ExternalToolFailure(cmd, 127, str(exc)) from exc
    if proc.returncode != 0:
        raise ExternalToolFailure(cmd, proc.returncode, proc.stderr or "")


def _quality_args(quality: int | None) -> list[str]:
    return ["-quality", str(quality)] if quality else []


@dataclass(frozen=True)
class RsvgRasterizer:
    binary: str
    name: str = "rsvg-convert"

    def command(self, source: Path, output: Path, size: tuple[int, int] | None) -> list[str]:
        args = [self.binary]
        if size is not None:
            args += ["-w", str(size[0]), "-h", str(size[1])]
        return args + ["-o", str(output), str(source)]


@dataclass(frozen=True)
class InkscapeRasterizer:
    binary: str
    name: str = "inkscape"

    def command(self, source: Path, output: Path, size: tuple[int, int] | None) -> list[str]:
        args = [self.binary, "--export-type=png", f"--export-filename={output}"]
        if size is not None:
            args += [f"--export-width={size[0]}", f"--export-height={size[1]}"]
        return args + [str(source)]


@dataclass(frozen=True)
class MagickCompositor:
    binary: str
    name: str = "magick"

    def bundle_icon(self, sources: Sequence[Path], output: Path, timeout: float) -> None:
        _run([self.binary, *map(str, sources), str(output)], timeout)

    def composite(
        self,
        foreground: Path,
        output: Path,
        canvas: tuple[int, int],
        background: str,
        quality: int | None,
        timeout: float,
    ) -> None:
        _run(
            [
                self.binary,
                "-size",
                f"{canvas[0]}x{canvas[1]}",
                f"xc:{background}",
                str(foreground),
                "-gravity",
                "center",
                "-composite",
                *_quality_args(quality),
                str(output),
            ],
            timeout,
        )

    def flatten(self, source: Path, output: Path, background: str, quality: int | None, timeout: float) -> None:
        _run([self.binary, str(source), "-background", background, "-flatten", *_quality_args(quality), str(output)], timeout)


class PillowCompositor:
    """In-process compositor for hosts without ImageMagick."""

    name = "pillow"
    binary = "PIL"

    @staticmethod
    def _save(image: Image.Image, output: Path, quality: int | None) -> None:
        if output.suffix.lower() in (".jpg", ".jpeg"):
            kwargs = {"quality": quality} if quality else {}
            image.convert("RGB").save(output, format="JPEG", **kwargs)
        else:
            image.save(output, format="PNG")

    @staticmethod
    def _failure(op: str, output: Path, exc: Exception) -> ExternalToolFailure:
        return ExternalToolFailure(["pillow", op, str(output)], 1, str(exc))

    def bundle_icon(self, sources: Sequence[Path], output: Path, timeout: float) -> None:
        try:
            images = [Image.open(p) for p in sources]
            try:
                largest = max(images, key=lambda im: im.width)
                others = [im for im in images if im is not largest]
                largest.save(output, format="ICO", sizes=[im.size for im in images], append_images=others)
            finally:
                for im in images:
                    im.close()
        except (OSError, ValueError) as exc:
            raise self._failure("bundle_icon", output, exc) from exc

    def composite(
        self,
        foreground: Path,
        output: Path,
        canvas: tuple[int, int],
        background: str,
        quality: int | None,
        timeout: float,
    ) -> None:
        try:
            base = Image.new("RGBA", canvas, background)
            with Image.open(foreground) as fg:
                layer = fg.convert("RGBA")
            offset = ((canvas[0] - layer.width) // 2, (canvas[1] - layer.height) // 2)
            base.alpha_composite(layer, dest=offset)
            self._save(base, output, quality)
        except (OSError, ValueError) as exc:
            raise self._failure("composite", output, exc) from exc

    def flatten(self, source: Path, output: Path, background: str, quality: int | None, timeout: float) -> None:
        try:
            with Image.open(source) as src:
                layer = src.convert("RGBA")
            base = Image.new("RGBA", layer.size, background)
            base.alpha_composite(layer)
            self._save(base, output, quality)
        except (OSError, ValueError) as exc:
            raise self._failure("flatten", output, exc) from exc


class Toolchain:
    """Resolved rasterizer + compositor pair with a uniform call surface."""

    def __init__(self, rasterizer, compositor, timeout_s: float = 120.0) -> None:
        self.rasterizer = rasterizer
        self.compositor = compositor
        self.timeout_s = timeout_s

    def check(self, require_compositor: bool = True) -> None:
        self._require_rasterizer()
        if require_compositor:
            self._require_compositor()

    def _require_rasterizer(self) -> None:
        if self.rasterizer is None:
            raise MissingDependency("rsvg-convert or inkscape", RASTERIZER_HINT)

    def _require_compositor(self) -> None:
        if self.compositor is None:
            raise MissingDependency("magick", COMPOSITOR_HINT)

    def describe(self) -> dict[str, dict[str, str] | None]:
        def _entry(tool) -> dict[str, str] | None:
            if tool is None:
                return None
            return {"name": tool.name, "binary": tool.binary}

        return {"rasterizer": _entry(self.rasterizer), "compositor": _entry(self.compositor)}

    def rasterize(self, source: Path, output: Path, size: tuple[int, int] | None = None) -> Path:
        self._require_rasterizer()
        _run(self.rasterizer.command(source, output, size), self.timeout_s)
        return output

    def bundle_icon(self, sources: Sequence[Path], output: Path) -> Path:
        self._require_compositor()
        self.compositor.bundle_icon(sources, output, self.timeout_s)
        return output

    def composite(
        self,
        foreground: Path,
        output: Path,
        canvas: tuple[int, int],
        background: str,
        quality: int | None = None,
    ) -> Path:
        self._require_compositor()
        self.compositor.composite(foreground, output, canvas, background, quality, self.timeout_s)
        return output

    def flatten(self, source: Path, output: Path, background: str, quality: int | None = None) -> Path:
        self._require_compositor()
        self.compositor.flatten(source, output, background, quality, self.timeout_s)
        return output


def _which_first(names: Sequence[str]) -> tuple[str, str] | None:
    for name in names:
        path = shutil.which(name)
        if path:
            return name, path
    return None


def find_rasterizer(choice: str = "auto"):
    candidates = ("rsvg-convert", "inkscape") if choice == "auto" else (choice,)
    found = _which_first(candidates)
    if found is None:
        return None
    name, path = found
    if name == "inkscape":
        return InkscapeRasterizer(binary=path)
    return RsvgRasterizer(binary=path)


def find_compositor(choice: str = "auto"):
    if choice == "pillow":
        return PillowCompositor()
    # ImageMagick 6 only ships the legacy `convert` entry point.
    found = _which_first(("magick", "convert"))
    if found is not None:
        return MagickCompositor(binary=found[1])
    if choice == "auto":
        return PillowCompositor()
    return None


def build_toolchain(rasterizer: str = "auto", compositor: str = "auto", timeout_s: float = 120.0) -> Toolchain:
    return Toolchain(find_rasterizer(rasterizer), find_compositor(compositor), timeout_s=timeout_s)
