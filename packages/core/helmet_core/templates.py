"""Master vector template lookup."""

from __future__ import annotations

from importlib import resources
from pathlib import Path

from helmet_style import InvalidArgument

TEMPLATE_NAME = "helmet.svg"


def default_template_path() -> Path:
    return Path(str(resources.files("helmet_core") / "assets" / TEMPLATE_NAME))


def load_template(path: Path | None = None) -> str:
    path = path or default_template_path()
    if not path.is_file():
        raise InvalidArgument(f"{path} not found")
    return path.read_text(encoding="utf-8")
