"""Typed style models: color specs, gradient directions and style fragments."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, Union

from .errors import InvalidArgument

STOP_DELIMITER = ":"
DEFAULT_FILL = "#000000"

# Path coordinate space of the master template: 0..20480 on both axes.
COORD_MAX = 20480
COORD_MID = COORD_MAX // 2

PAINT_CLASSES = ("heart", "thick-band", "thin-band", "bubble")


@dataclass(frozen=True)
class Solid:
    color: str


@dataclass(frozen=True)
class Gradient:
    stops: tuple[str, ...]


ColorSpec = Union[Solid, Gradient]


def parse_color(text: str) -> ColorSpec:
    """Parse ``"#0099FF"`` or ``"#00E5A0:#0099FF:#304FFE"``.

    Stops are kept verbatim. A single trailing empty stop is dropped, so
    ``"#0099FF:"`` is a one-stop gradient.
    """
    if STOP_DELIMITER not in text:
        return Solid(text)
    stops = text.split(STOP_DELIMITER)
    if len(stops) > 1 and stops[-1] == "":
        stops.pop()
    return Gradient(tuple(stops))


def format_color(spec: ColorSpec) -> str:
    if isinstance(spec, Solid):
        return spec.color
    return STOP_DELIMITER.join(spec.stops)


class Direction(str, Enum):
    LEFT_TO_RIGHT = "lr"
    RIGHT_TO_LEFT = "rl"
    TOP_TO_BOTTOM = "tb"
    BOTTOM_TO_TOP = "bt"
    DIAGONAL = "diag"
    DIAGONAL_REVERSE = "diag-rev"

    @classmethod
    def parse(cls, token: str) -> "Direction":
        try:
            return cls(token)
        except ValueError:
            tokens = " ".join(d.value for d in cls)
            raise InvalidArgument(f"Unknown direction: {token} (use {tokens})") from None

    @property
    def coordinates(self) -> tuple[int, int, int, int]:
        """Return ``(x1, y1, x2, y2)``; y is flipped by the template transform."""
        return _COORDINATES[self]


_COORDINATES: dict[Direction, tuple[int, int, int, int]] = {
    Direction.LEFT_TO_RIGHT: (0, COORD_MID, COORD_MAX, COORD_MID),
    Direction.RIGHT_TO_LEFT: (COORD_MAX, COORD_MID, 0, COORD_MID),
    Direction.TOP_TO_BOTTOM: (COORD_MID, COORD_MAX, COORD_MID, 0),
    Direction.BOTTOM_TO_TOP: (COORD_MID, 0, COORD_MID, COORD_MAX),
    Direction.DIAGONAL: (0, COORD_MAX, COORD_MAX, 0),
    Direction.DIAGONAL_REVERSE: (COORD_MAX, 0, 0, COORD_MAX),
}


@dataclass(frozen=True)
class PaintAssignment:
    heart: ColorSpec = Solid(DEFAULT_FILL)
    thick_band: ColorSpec = Solid(DEFAULT_FILL)
    thin_band: ColorSpec = Solid(DEFAULT_FILL)
    bubble: ColorSpec = Solid(DEFAULT_FILL)

    @classmethod
    def from_strings(
        cls,
        heart: str = DEFAULT_FILL,
        thick_band: str = DEFAULT_FILL,
        thin_band: str = DEFAULT_FILL,
        bubble: str = DEFAULT_FILL,
    ) -> "PaintAssignment":
        return cls(
            heart=parse_color(heart),
            thick_band=parse_color(thick_band),
            thin_band=parse_color(thin_band),
            bubble=parse_color(bubble),
        )

    def items(self) -> Iterator[tuple[str, ColorSpec]]:
        yield "heart", self.heart
        yield "thick-band", self.thick_band
        yield "thin-band", self.thin_band
        yield "bubble", self.bubble


@dataclass(frozen=True)
class GradientStop:
    offset: int
    color: str

    def to_svg(self) -> str:
        return f'<stop offset="{self.offset}%" stop-color="{self.color}"/>'


@dataclass(frozen=True)
class GradientDefinition:
    id: str
    x1: int
    y1: int
    x2: int
    y2: int
    stops: tuple[GradientStop, ...]

    def to_svg(self) -> str:
        head = (
            f'<linearGradient id="{self.id}" gradientUnits="userSpaceOnUse"'
            f' x1="{self.x1}" y1="{self.y1}" x2="{self.x2}" y2="{self.y2}">'
        )
        return head + "".join(stop.to_svg() for stop in self.stops) + "</linearGradient>"


@dataclass(frozen=True)
class FillRule:
    css_class: str
    paint: str

    def to_css(self) -> str:
        return f".{self.css_class}{{fill:{self.paint}}}"


@dataclass(frozen=True)
class StyleFragment:
    definitions: tuple[GradientDefinition, ...] = field(default_factory=tuple)
    rules: tuple[FillRule, ...] = field(default_factory=tuple)

    def render_definitions(self) -> str:
        return "".join(d.to_svg() for d in self.definitions)

    def render_rules(self) -> str:
        return "".join(r.to_css() for r in self.rules)
