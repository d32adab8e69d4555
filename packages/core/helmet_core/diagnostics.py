"""Doctor payload: host, settings and resolved toolchain."""

from __future__ import annotations

import platform
from dataclasses import asdict
from datetime import datetime, timezone
from typing import Any

from helmet_style import MissingDependency

from .config import AppConfig, config_path
from .flavors import FLAVORS
from .templates import default_template_path
from .toolchain import Toolchain


def build_doctor_payload(cfg: AppConfig, toolchain: Toolchain) -> dict[str, Any]:
    tools = toolchain.describe()
    try:
        toolchain.check()
        problem = None
    except MissingDependency as exc:
        problem = str(exc)
    template = default_template_path()
    return {
        "ts_utc": datetime.now(timezone.utc).isoformat(),
        "platform": platform.platform(),
        "python": platform.python_version(),
        "config_path": str(config_path()),
        "config": asdict(cfg),
        "template": {"path": str(template), "exists": template.is_file()},
        "flavors": len(FLAVORS),
        "toolchain": tools,
        "ready": problem is None,
        "problem": problem,
    }
