"""Asset generation services: flavors, catalog, toolchain, driver and settings."""

from .catalog import ASSET_CATALOG, AssetKind, AssetSpec, OutputTarget, expand_targets, parse_size
from .colorize import ColorizeResult, colorize
from .config import AppConfig, load_config, save_config
from .diagnostics import build_doctor_payload
from .driver import AssetDriver, DerivedDocuments, RunReport, TargetFailure
from .flavors import FLAVORS, Flavor, Theme, get_flavor, list_flavors, select_flavors
from .manifests import write_manifests
from .templates import default_template_path, load_template
from .toolchain import Toolchain, build_toolchain

__all__ = [
    "ASSET_CATALOG",
    "AppConfig",
    "AssetDriver",
    "AssetKind",
    "AssetSpec",
    "ColorizeResult",
    "DerivedDocuments",
    "FLAVORS",
    "Flavor",
    "OutputTarget",
    "RunReport",
    "TargetFailure",
    "Theme",
    "Toolchain",
    "build_doctor_payload",
    "build_toolchain",
    "colorize",
    "default_template_path",
    "expand_targets",
    "get_flavor",
    "list_flavors",
    "load_config",
    "load_template",
    "parse_size",
    "save_config",
    "select_flavors",
    "write_manifests",
]
