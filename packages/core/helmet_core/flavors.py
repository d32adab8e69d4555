"""Built-in flavor palettes: light and dark paint assignments per preset."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from helmet_style import InvalidArgument, PaintAssignment


class Theme(str, Enum):
    LIGHT = "light"
    DARK = "dark"

    @property
    def background(self) -> str:
        return "white" if self is Theme.LIGHT else "black"


@dataclass(frozen=True)
class Flavor:
    name: str
    light: PaintAssignment
    dark: PaintAssignment

    def assignment(self, theme: Theme) -> PaintAssignment:
        return self.light if theme is Theme.LIGHT else self.dark


def _flavor(name: str, light: tuple[str, str, str, str], dark: tuple[str, str, str, str]) -> Flavor:
    return Flavor(name=name, light=PaintAssignment.from_strings(*light), dark=PaintAssignment.from_strings(*dark))


def _single(name: str, light: tuple[str, str, str], dark: tuple[str, str, str]) -> Flavor:
    """Heart and bubble take the deep/pale end; both bands share the 3-stop ramp."""
    light_ramp = ":".join(light)
    dark_ramp = ":".join(dark)
    return _flavor(
        name,
        (light[0], light_ramp, light_ramp, light[0]),
        (dark[2], dark_ramp, dark_ramp, dark[2]),
    )


def _mix(name: str, light: tuple[str, str, str], dark: tuple[str, str, str]) -> Flavor:
    """Multi-color mix where both bands share one gradient."""
    return _flavor(name, (light[0], light[1], light[1], light[2]), (dark[0], dark[1], dark[1], dark[2]))


FLAVORS: tuple[Flavor, ...] = (
    # Monochrome
    _flavor("black", ("#000000",) * 4, ("#000000",) * 4),
    _flavor("white", ("#FFFFFF",) * 4, ("#FFFFFF",) * 4),
    # Single colors
    _single("blue", ("#004080", "#0066CC", "#0099FF"), ("#0099FF", "#33BBFF", "#66CCFF")),
    _single("green", ("#007A54", "#00B377", "#00E5A0"), ("#00E5A0", "#40EFBF", "#80FFD4")),
    _single("purple", ("#4A0072", "#6C128E", "#8E24AA"), ("#8E24AA", "#AE5CBC", "#CE93D8")),
    _single("red", ("#8B0000", "#CC0000", "#FF1A1A"), ("#FF1A1A", "#FF5252", "#FF8A80")),
    _single("orange", ("#BF5700", "#E67300", "#FF9933"), ("#FF9933", "#FFB347", "#FFCC80")),
    _single("gold", ("#B8860B", "#DAA520", "#FFD700"), ("#FFD700", "#FFDF4A", "#FFE082")),
    _single("pink", ("#AD1457", "#D81B60", "#F06292"), ("#F06292", "#F48FB1", "#F8BBD0")),
    _single("teal", ("#00695C", "#00897B", "#26A69A"), ("#26A69A", "#4DB6AC", "#80CBC4")),
    _single("cyan", ("#006064", "#00838F", "#00BCD4"), ("#00BCD4", "#4DD0E1", "#80DEEA")),
    _single("indigo", ("#1A237E", "#283593", "#3949AB"), ("#3949AB", "#5C6BC0", "#9FA8DA")),
    _single("coral", ("#BF360C", "#E64A19", "#FF7043"), ("#FF7043", "#FF8A65", "#FFAB91")),
    _single("lime", ("#558B2F", "#7CB342", "#9CCC65"), ("#9CCC65", "#AED581", "#C5E1A5")),
    _flavor(
        "amber",
        ("#FF6F00", "#FF6F00:#FF8F00:#FFA000", "#FF6F00:#FF8F00:#FFA000", "#FF6F00"),
        ("#FFE082", "#FFA000:#FFB300:#FFCA28", "#FFA000:#FFB300:#FFCA28", "#FFE082"),
    ),
    _single("rose", ("#880E4F", "#C2185B", "#E91E63"), ("#E91E63", "#EC407A", "#F48FB1")),
    _single("slate", ("#37474F", "#546E7A", "#78909C"), ("#78909C", "#90A4AE", "#B0BEC5")),
    _single("brown", ("#4E342E", "#6D4C41", "#8D6E63"), ("#8D6E63", "#A1887F", "#BCAAA4")),
    _single("magenta", ("#6A1B9A", "#9C27B0", "#BA68C8"), ("#BA68C8", "#CE93D8", "#E1BEE7")),
    _single("violet", ("#4527A0", "#5E35B1", "#7E57C2"), ("#7E57C2", "#9575CD", "#B39DDB")),
    _single("sky", ("#01579B", "#0288D1", "#03A9F4"), ("#03A9F4", "#29B6F6", "#81D4FA")),
    _single("emerald", ("#1B5E20", "#2E7D32", "#43A047"), ("#43A047", "#66BB6A", "#A5D6A7")),
    # Two-color combos: heart, thick band, thin band, bubble
    _flavor(
        "blue_green",
        ("#4A0072", "#004080:#0066CC:#0099FF", "#007A54:#00B377:#00E5A0", "#1A237E"),
        ("#CE93D8", "#0099FF:#33BBFF:#66CCFF", "#00E5A0:#40EFBF:#80FFD4", "#7B8AFF"),
    ),
    _flavor(
        "3_colors",
        ("#0066CC", "#00B377", "#1A237E", "#6A1B9A"),
        ("#0099FF", "#80FFD4", "#7B8AFF", "#CE93D8"),
    ),
    _flavor(
        "fire",
        ("#8B0000", "#8B0000:#CC0000:#FF1A1A", "#BF5700:#E67300:#FF9933", "#FF6F00"),
        ("#FF8A80", "#FF1A1A:#FF5252:#FF8A80", "#FF9933:#FFB347:#FFCC80", "#FFCA28"),
    ),
    _flavor(
        "pink_purple",
        ("#880E4F", "#AD1457:#D81B60:#F06292", "#4A0072:#6C128E:#8E24AA", "#4527A0"),
        ("#F8BBD0", "#F06292:#F48FB1:#F8BBD0", "#8E24AA:#AE5CBC:#CE93D8", "#B39DDB"),
    ),
    _flavor(
        "ocean",
        ("#006064", "#00695C:#00897B:#26A69A", "#004080:#0066CC:#0099FF", "#01579B"),
        ("#80DEEA", "#26A69A:#4DB6AC:#80CBC4", "#0099FF:#33BBFF:#66CCFF", "#81D4FA"),
    ),
    _flavor(
        "sunset",
        ("#BF360C", "#BF5700:#E67300:#FF9933", "#B8860B:#DAA520:#FFD700", "#FF6F00"),
        ("#FFAB91", "#FF9933:#FFB347:#FFCC80", "#FFD700:#FFDF4A:#FFE082", "#FFCA28"),
    ),
    _flavor(
        "forest",
        ("#1B5E20", "#1B5E20:#2E7D32:#43A047", "#B8860B:#DAA520:#FFD700", "#558B2F"),
        ("#A5D6A7", "#43A047:#66BB6A:#A5D6A7", "#FFD700:#FFDF4A:#FFE082", "#C5E1A5"),
    ),
    _flavor(
        "arctic",
        ("#1A237E", "#1A237E:#283593:#3949AB", "#006064:#00838F:#00BCD4", "#00695C"),
        ("#9FA8DA", "#3949AB:#5C6BC0:#9FA8DA", "#00BCD4:#4DD0E1:#80DEEA", "#80CBC4"),
    ),
    _flavor(
        "berry",
        ("#8B0000", "#8B0000:#CC0000:#FF1A1A", "#4A0072:#6C128E:#8E24AA", "#4527A0"),
        ("#FF8A80", "#FF1A1A:#FF5252:#FF8A80", "#8E24AA:#AE5CBC:#CE93D8", "#B39DDB"),
    ),
    _flavor(
        "tropical",
        ("#BF360C", "#BF360C:#E64A19:#FF7043", "#00695C:#00897B:#26A69A", "#006064"),
        ("#FFAB91", "#FF7043:#FF8A65:#FFAB91", "#26A69A:#4DB6AC:#80CBC4", "#80DEEA"),
    ),
    _flavor(
        "lavender",
        ("#4527A0", "#4527A0:#5E35B1:#7E57C2", "#AD1457:#D81B60:#F06292", "#880E4F"),
        ("#B39DDB", "#7E57C2:#9575CD:#B39DDB", "#F06292:#F48FB1:#F8BBD0", "#F48FB1"),
    ),
    _flavor(
        "mint",
        ("#558B2F", "#558B2F:#7CB342:#9CCC65", "#006064:#00838F:#00BCD4", "#00695C"),
        ("#C5E1A5", "#9CCC65:#AED581:#C5E1A5", "#00BCD4:#4DD0E1:#80DEEA", "#80CBC4"),
    ),
    # Multi-color gradient mixes: heart, both bands, bubble
    _mix("aurora", ("#1A237E", "#007A54:#004080:#1A237E", "#1A237E"), ("#7B8AFF", "#00E5A0:#0099FF:#304FFE", "#304FFE")),
    _mix("nebula", ("#4A0072", "#1A237E:#4A0072:#004080", "#1A237E"), ("#CE93D8", "#304FFE:#8E24AA:#0099FF", "#304FFE")),
    _mix("cosmic", ("#4A0072", "#007A54:#4A0072:#004080", "#4A0072"), ("#CE93D8", "#00E5A0:#8E24AA:#0099FF", "#8E24AA")),
    _mix("flame", ("#8B0000", "#8B0000:#BF5700:#B8860B", "#BF5700"), ("#FF8A80", "#FF5252:#FFB347:#FFD700", "#FFB347")),
    _mix("dusk", ("#880E4F", "#BF5700:#880E4F:#4A0072", "#880E4F"), ("#FFCC80", "#FFB347:#EC407A:#CE93D8", "#EC407A")),
    _mix("deep", ("#1A237E", "#00695C:#004080:#1A237E", "#004080"), ("#9FA8DA", "#4DB6AC:#33BBFF:#5C6BC0", "#33BBFF")),
    _mix("reef", ("#006064", "#006064:#00695C:#1B5E20", "#00695C"), ("#80DEEA", "#4DD0E1:#4DB6AC:#66BB6A", "#4DB6AC")),
    _mix("electric", ("#006064", "#00BCD4:#9C27B0:#FFD700", "#9C27B0"), ("#80DEEA", "#4DD0E1:#CE93D8:#FFE082", "#CE93D8")),
    _mix("plasma", ("#AD1457", "#D81B60:#0066CC:#7CB342", "#0066CC"), ("#F8BBD0", "#F06292:#33BBFF:#AED581", "#33BBFF")),
    _mix("terra", ("#4E342E", "#4E342E:#FF6F00:#558B2F", "#FF6F00"), ("#BCAAA4", "#A1887F:#FFCA28:#AED581", "#FFCA28")),
    _mix("stone", ("#37474F", "#37474F:#4E342E:#00695C", "#4E342E"), ("#B0BEC5", "#90A4AE:#A1887F:#4DB6AC", "#A1887F")),
    _mix("prism", ("#8B0000", "#CC0000:#00B377:#0066CC", "#00B377"), ("#FF8A80", "#FF5252:#80FFD4:#33BBFF", "#80FFD4")),
    _mix("spectrum", ("#BF5700", "#E67300:#5E35B1:#00838F", "#5E35B1"), ("#FFCC80", "#FFB347:#9575CD:#4DD0E1", "#9575CD")),
)

_BY_NAME: dict[str, Flavor] = {f.name: f for f in FLAVORS}


def list_flavors() -> list[str]:
    return [f.name for f in FLAVORS]


def get_flavor(name: str) -> Flavor:
    try:
        return _BY_NAME[name]
    except KeyError:
        raise InvalidArgument(f"Unknown flavor: {name}") from None


def select_flavors(names: list[str] | None) -> list[Flavor]:
    if not names:
        return list(FLAVORS)
    return [get_flavor(n) for n in names]
