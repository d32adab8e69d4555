"""Insert style fragments in front of the master SVG's closing tag."""

from __future__ import annotations

from .errors import TemplateInjectionFailure
from .models import StyleFragment

CLOSING_MARKER = "</svg>"

LIGHT_QUERY = "@media(prefers-color-scheme:light)"
DARK_QUERY = "@media(prefers-color-scheme:dark)"


def _defs(body: str) -> str:
    return f"<defs>{body}</defs>" if body else ""


def injected_block(fragment: StyleFragment) -> str:
    return _defs(fragment.render_definitions()) + f"<style>{fragment.render_rules()}</style>"


def conditional_block(light: StyleFragment, dark: StyleFragment) -> str:
    """Both fragments behind prefers-color-scheme queries, one shared defs block."""
    defs = _defs(light.render_definitions() + dark.render_definitions())
    style = (
        "<style>"
        f"{LIGHT_QUERY}{{{light.render_rules()}}}"
        f"{DARK_QUERY}{{{dark.render_rules()}}}"
        "</style>"
    )
    return defs + style


def insert_before_close(template: str, block: str) -> str:
    idx = template.rfind(CLOSING_MARKER)
    if idx < 0:
        raise TemplateInjectionFailure(f"template has no {CLOSING_MARKER} closing tag")

    line_start = template.rfind("\n", 0, idx) + 1
    if not template[line_start:idx].strip():
        # Closing tag opens its line: emit the block as its own line above it.
        return template[:line_start] + block + "\n" + template[line_start:]
    return template[:idx] + block + template[idx:]


def inject(template: str, fragment: StyleFragment) -> str:
    return insert_before_close(template, injected_block(fragment))


def inject_conditional(template: str, light: StyleFragment, dark: StyleFragment) -> str:
    return insert_before_close(template, conditional_block(light, dark))
