"""CLI entrypoints for batch generation, single-asset colorize and diagnostics."""

from __future__ import annotations

import argparse
import json
import sys
from dataclasses import asdict
from pathlib import Path

from helmet_core import (
    AssetDriver,
    build_doctor_payload,
    build_toolchain,
    colorize,
    list_flavors,
    load_config,
    load_template,
    parse_size,
    select_flavors,
)
from helmet_core.config import COMPOSITORS, RASTERIZERS, AppConfig
from helmet_core.logging_setup import configure_logging, install_crash_hooks
from helmet_style import (
    AssetError,
    Direction,
    ExternalToolFailure,
    PaintAssignment,
    TemplateInjectionFailure,
)


EXIT_OK = 0
EXIT_FAILURES = 1
EXIT_PRECONDITION = 2

RULE = "━" * 40


def _print_json(data: object) -> None:
    print(json.dumps(data, indent=2, sort_keys=True, default=str))


def _toolchain(args: argparse.Namespace, cfg: AppConfig):
    return build_toolchain(
        rasterizer=args.rasterizer or cfg.toolchain.rasterizer,
        compositor=args.compositor or cfg.toolchain.compositor,
        timeout_s=cfg.toolchain.timeout_s,
    )


def _template(args: argparse.Namespace) -> str:
    return load_template(Path(args.template).expanduser() if args.template else None)


def cmd_generate(args: argparse.Namespace, cfg: AppConfig) -> int:
    out_dir = Path(args.out_dir).expanduser().resolve()
    flavors = select_flavors(args.flavor)
    driver = AssetDriver(
        template=_template(args),
        toolchain=_toolchain(args, cfg),
        direction=Direction.parse(args.direction or cfg.output.direction),
        fail_fast=args.fail_fast or cfg.output.fail_fast,
        jpeg_quality=cfg.output.jpeg_quality,
        progress=(lambda _msg: None) if args.json else print,
    )

    if not args.json:
        print(f"Generating helmet assets in {out_dir}")
        print(RULE)

    report = driver.run(out_dir, flavors)

    if args.json:
        payload = asdict(report)
        payload["success"] = report.success
        _print_json(payload)
    else:
        print(RULE)
        print(f"Done: {report.flavors_completed} flavors (light + dark + favicon.svg each)")
        for failure in report.failures:
            print(
                f"FAILED {failure.flavor}/{failure.theme}/{failure.asset}: [{failure.code}] {failure.message}",
                file=sys.stderr,
            )
        if report.aborted:
            print("Aborted after first failure (--fail-fast)", file=sys.stderr)

    return EXIT_OK if report.success else EXIT_FAILURES


def cmd_colorize(args: argparse.Namespace, cfg: AppConfig) -> int:
    assignment = PaintAssignment.from_strings(
        heart=args.heart,
        thick_band=args.thick_band,
        thin_band=args.thin_band,
        bubble=args.bubble,
    )

    print("Fills:")
    for css_class, value in (
        ("heart", args.heart),
        ("thick-band", args.thick_band),
        ("thin-band", args.thin_band),
        ("bubble", args.bubble),
    ):
        print(f"  {css_class + ':':<11} {value}")
    if args.direction is not Direction.LEFT_TO_RIGHT:
        print(f"  {'direction:':<11} {args.direction.value}")
    print()

    result = colorize(
        template=_template(args),
        assignment=assignment,
        toolchain=_toolchain(args, cfg),
        output=Path(args.output),
        direction=args.direction,
        size=args.size,
        background=args.bg,
    )
    print(f"PNG: {result.png}")
    if result.jpg is not None:
        print(f"JPG: {result.jpg}")
    return EXIT_OK


def cmd_list_flavors(_args: argparse.Namespace, _cfg: AppConfig) -> int:
    for name in list_flavors():
        print(name)
    return EXIT_OK


def cmd_doctor(args: argparse.Namespace, cfg: AppConfig) -> int:
    payload = build_doctor_payload(cfg, _toolchain(args, cfg))
    _print_json(payload)
    return EXIT_OK if payload["ready"] else EXIT_PRECONDITION


def _add_tool_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--rasterizer", choices=RASTERIZERS, default=None, help="SVG rasterizer (default: config)")
    parser.add_argument("--compositor", choices=COMPOSITORS, default=None, help="Image compositor (default: config)")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="helmet-assets", description="Generate themed helmet icon assets")
    parser.add_argument("--config", default=None, help="Path to settings JSON")
    sub = parser.add_subparsers(dest="command", required=True)

    gen_cmd = sub.add_parser("generate", help="Generate every flavor (light + dark + favicon.svg)")
    gen_cmd.add_argument("out_dir", nargs="?", default=".", help="Output root (default: current directory)")
    gen_cmd.add_argument("--flavor", action="append", default=None, help="Only this flavor (repeatable)")
    gen_cmd.add_argument("--template", default=None, help="Master SVG (default: bundled helmet.svg)")
    gen_cmd.add_argument("--direction", choices=[d.value for d in Direction], default=None)
    gen_cmd.add_argument("--fail-fast", action="store_true", help="Stop at the first failed asset")
    gen_cmd.add_argument("--json", action="store_true", help="Print the run report as JSON")
    _add_tool_options(gen_cmd)
    gen_cmd.set_defaults(func=cmd_generate)

    col_cmd = sub.add_parser(
        "colorize",
        help="Render one PNG/JPG with custom fills",
        description='Colors are solid ("#0099FF") or colon-separated gradient stops ("#00E5A0:#0099FF:#304FFE").',
    )
    col_cmd.add_argument("--heart", default="#000000", metavar="COLOR", help="Fill for the heart shape")
    col_cmd.add_argument("--thick-band", default="#000000", metavar="COLOR", help="Fill for thick-band shapes")
    col_cmd.add_argument("--thin-band", default="#000000", metavar="COLOR", help="Fill for thin-band shapes")
    col_cmd.add_argument("--bubble", default="#000000", metavar="COLOR", help="Fill for bubble shapes")
    col_cmd.add_argument(
        "--direction",
        type=Direction.parse,
        default=Direction.LEFT_TO_RIGHT,
        metavar="DIR",
        help="Gradient direction: lr rl tb bt diag diag-rev (default: lr)",
    )
    col_cmd.add_argument("--output", default="helmet_out", metavar="PATH", help="Output basename without extension")
    col_cmd.add_argument("--size", type=parse_size, default=None, metavar="WxH", help="Output size (default: SVG native)")
    col_cmd.add_argument("--bg", default="white", metavar="COLOR", help="JPG background color")
    col_cmd.add_argument("--template", default=None, help="Master SVG (default: bundled helmet.svg)")
    _add_tool_options(col_cmd)
    col_cmd.set_defaults(func=cmd_colorize)

    list_cmd = sub.add_parser("list-flavors", help="List built-in flavors")
    list_cmd.set_defaults(func=cmd_list_flavors)

    doctor_cmd = sub.add_parser("doctor", help="Print settings and resolved toolchain")
    _add_tool_options(doctor_cmd)
    doctor_cmd.set_defaults(func=cmd_doctor)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    cfg = load_config(Path(args.config).expanduser() if args.config else None)
    configure_logging(
        level=cfg.logging.level,
        keep_files=cfg.logging.keep_log_files,
        console=cfg.logging.console,
    )
    install_crash_hooks()

    try:
        return int(args.func(args, cfg))
    except (ExternalToolFailure, TemplateInjectionFailure) as exc:
        print(f"FAILED {exc}", file=sys.stderr)
        return EXIT_FAILURES
    except AssetError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return EXIT_PRECONDITION


if __name__ == "__main__":
    raise SystemExit(main())
