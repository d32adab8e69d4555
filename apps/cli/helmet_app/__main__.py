"""``python -m helmet_app``: bare invocation regenerates every flavor here."""

from __future__ import annotations

import sys

from helmet_app.cli import main as _cli_main


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    return int(_cli_main(args or ["generate"]))


if __name__ == "__main__":
    raise SystemExit(main())
