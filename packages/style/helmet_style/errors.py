"""Error kinds shared by the style, toolchain and driver layers."""

from __future__ import annotations

from typing import Sequence


class AssetError(Exception):
    code = "E_ASSET"

    def __init__(self, message: str = "") -> None:
        super().__init__(message)


class MissingDependency(AssetError):
    code = "E_MISSING_DEPENDENCY"

    def __init__(self, tool: str, hint: str = "") -> None:
        message = f"{tool} required"
        if hint:
            message = f"{message} ({hint})"
        super().__init__(message)
        self.tool = tool
        self.hint = hint


class InvalidArgument(AssetError, ValueError):
    code = "E_INVALID_ARGUMENT"


class TemplateInjectionFailure(AssetError):
    code = "E_TEMPLATE_INJECTION"


class ExternalToolFailure(AssetError):
    code = "E_EXTERNAL_TOOL"

    def __init__(self, command: Sequence[str], returncode: int | None, stderr: str = "") -> None:
        tool = command[0] if command else "?"
        detail = stderr.strip().splitlines()[-1] if stderr.strip() else "no output"
        status = "timed out" if returncode is None else f"exited {returncode}"
        super().__init__(f"{tool} {status}: {detail}")
        self.command = list(command)
        self.returncode = returncode
        self.stderr = stderr
