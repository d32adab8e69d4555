"""Persistent generator settings schema and load/save helpers."""

from __future__ import annotations

import json
import os
import platform
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any


CONFIG_VERSION = 2
CONFIG_ENV = "HELMET_ASSETS_CONFIG"

RASTERIZERS = ("auto", "rsvg-convert", "inkscape")
COMPOSITORS = ("auto", "magick", "pillow")
DIRECTIONS = ("lr", "rl", "tb", "bt", "diag", "diag-rev")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


@dataclass
class ToolchainConfig:
    rasterizer: str = "auto"
    compositor: str = "auto"
    timeout_s: float = 120.0


@dataclass
class OutputConfig:
    direction: str = "diag"
    jpeg_quality: int = 90
    fail_fast: bool = False


@dataclass
class LoggingConfig:
    level: str = "INFO"
    keep_log_files: int = 7
    console: bool = True


@dataclass
class AppConfig:
    config_version: int = CONFIG_VERSION
    toolchain: ToolchainConfig = field(default_factory=ToolchainConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def config_root() -> Path:
    system = platform.system()
    if system == "Windows":
        base = Path(os.environ.get("APPDATA", Path.home() / "AppData" / "Roaming"))
        return base / "HelmetAssets"
    if system == "Darwin":
        return Path.home() / "Library" / "Application Support" / "HelmetAssets"
    return Path.home() / ".config" / "helmet-assets"


def config_path() -> Path:
    override = os.environ.get(CONFIG_ENV, "").strip()
    if override:
        return Path(override).expanduser()
    return config_root() / "config.json"


def _merge(dataclass_type, raw: dict[str, Any]):
    defaults = dataclass_type()  # type: ignore[misc]
    for k, v in raw.items():
        if hasattr(defaults, k):
            setattr(defaults, k, v)
    return defaults


def _normalize_toolchain(cfg: AppConfig) -> None:
    if cfg.toolchain.rasterizer not in RASTERIZERS:
        cfg.toolchain.rasterizer = "auto"
    if cfg.toolchain.compositor not in COMPOSITORS:
        cfg.toolchain.compositor = "auto"
    cfg.toolchain.timeout_s = float(max(5.0, float(cfg.toolchain.timeout_s)))


def _normalize_output(cfg: AppConfig) -> None:
    if cfg.output.direction not in DIRECTIONS:
        cfg.output.direction = "diag"
    cfg.output.jpeg_quality = max(1, min(100, int(cfg.output.jpeg_quality)))
    cfg.output.fail_fast = bool(cfg.output.fail_fast)


def _normalize_logging(cfg: AppConfig) -> None:
    level = str(cfg.logging.level).upper()
    cfg.logging.level = level if level in LOG_LEVELS else "INFO"
    cfg.logging.keep_log_files = max(2, int(cfg.logging.keep_log_files))


def _migrate(raw: dict[str, Any]) -> dict[str, Any]:
    version = int(raw.get("config_version", 1))
    data = dict(raw)

    if version < 2:
        # v1 kept tool names and quality at top level.
        toolchain = dict(data.get("toolchain", {}) or {})
        output = dict(data.get("output", {}) or {})
        if "rasterizer" in data:
            toolchain.setdefault("rasterizer", data.pop("rasterizer"))
        if "compositor" in data:
            toolchain.setdefault("compositor", data.pop("compositor"))
        if "jpeg_quality" in data:
            output.setdefault("jpeg_quality", data.pop("jpeg_quality"))
        data["toolchain"] = toolchain
        data["output"] = output
        data["config_version"] = 2

    return data


def load_config(path: Path | None = None) -> AppConfig:
    path = path or config_path()
    if not path.exists():
        return AppConfig()

    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return AppConfig()

    data = _migrate(raw)
    cfg = AppConfig(
        config_version=int(data.get("config_version", CONFIG_VERSION)),
        toolchain=_merge(ToolchainConfig, data.get("toolchain", {})),
        output=_merge(OutputConfig, data.get("output", {})),
        logging=_merge(LoggingConfig, data.get("logging", {})),
    )

    _normalize_toolchain(cfg)
    _normalize_output(cfg)
    _normalize_logging(cfg)
    return cfg


def save_config(cfg: AppConfig, path: Path | None = None) -> Path:
    cfg.config_version = CONFIG_VERSION
    path = path or config_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(asdict(cfg), indent=2, sort_keys=True), encoding="utf-8")
    return path
