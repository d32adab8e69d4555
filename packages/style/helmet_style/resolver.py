"""Paint assignment -> gradient definitions and class fill rules."""

from __future__ import annotations

from .models import (
    FillRule,
    Gradient,
    GradientDefinition,
    GradientStop,
    Direction,
    PaintAssignment,
    Solid,
    StyleFragment,
)


def gradient_id(css_class: str, theme_tag: str | None = None) -> str:
    if theme_tag:
        return f"grad-{css_class}-{theme_tag}"
    return f"grad-{css_class}"


def stop_offsets(count: int) -> list[int]:
    """Evenly spaced integer percentages, floor-rounded, from 0 to 100."""
    if count == 1:
        return [0]
    return [i * 100 // (count - 1) for i in range(count)]


def build_gradient(def_id: str, gradient: Gradient, direction: Direction) -> GradientDefinition:
    x1, y1, x2, y2 = direction.coordinates
    stops = tuple(
        GradientStop(offset=offset, color=color)
        for offset, color in zip(stop_offsets(len(gradient.stops)), gradient.stops)
    )
    return GradientDefinition(id=def_id, x1=x1, y1=y1, x2=x2, y2=y2, stops=stops)


def resolve(
    assignment: PaintAssignment,
    direction: Direction,
    theme_tag: str | None = None,
) -> StyleFragment:
    """Build the style fragment for one paint assignment.

    ``theme_tag`` namespaces gradient ids, needed when two fragments share one
    document (the auto light/dark favicon).
    """
    definitions: list[GradientDefinition] = []
    rules: list[FillRule] = []

    for css_class, spec in assignment.items():
        if isinstance(spec, Solid):
            rules.append(FillRule(css_class=css_class, paint=spec.color))
            continue

        definition = build_gradient(gradient_id(css_class, theme_tag), spec, direction)
        definitions.append(definition)
        rules.append(FillRule(css_class=css_class, paint=f"url(#{definition.id})"))

    return StyleFragment(definitions=tuple(definitions), rules=tuple(rules))
