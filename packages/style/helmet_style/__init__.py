"""Style resolution and template injection for the helmet master SVG."""

from .errors import (
    AssetError,
    ExternalToolFailure,
    InvalidArgument,
    MissingDependency,
    TemplateInjectionFailure,
)
from .inject import conditional_block, inject, inject_conditional, injected_block
from .models import (
    PAINT_CLASSES,
    ColorSpec,
    Direction,
    FillRule,
    Gradient,
    GradientDefinition,
    GradientStop,
    PaintAssignment,
    Solid,
    StyleFragment,
    format_color,
    parse_color,
)
from .resolver import resolve, stop_offsets

__all__ = [
    "AssetError",
    "ColorSpec",
    "Direction",
    "ExternalToolFailure",
    "FillRule",
    "Gradient",
    "GradientDefinition",
    "GradientStop",
    "InvalidArgument",
    "MissingDependency",
    "PAINT_CLASSES",
    "PaintAssignment",
    "Solid",
    "StyleFragment",
    "TemplateInjectionFailure",
    "conditional_block",
    "format_color",
    "inject",
    "inject_conditional",
    "injected_block",
    "parse_color",
    "resolve",
    "stop_offsets",
]
