"""Lookup failure contracts.

Lookups return a decoded value (or ``None`` for an absent variable) on
success and raise a ``VimVarError`` subclass on expected failures. Programmer
bugs raise normal exceptions.
"""

from __future__ import annotations

from typing import Literal

VimVarErrorCode = Literal[
    "not_found",
    "invalid_input",
    "process_failure",
    "empty_result",
    "malformed_output",
    "conversion_failed",
]


class VimVarError(Exception):
    """Expected lookup failure.

    Every failure is returned to the immediate caller as a single attempt;
    nothing is retried. Use ``raise ... from exc`` to chain a causing
    exception; it is available as ``__cause__``.
    """

    def __init__(
        self,
        code: VimVarErrorCode,
        message: str,
        *,
        recovery_hint: str | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.recovery_hint = recovery_hint


class NotFoundError(VimVarError):
    """No usable editor binary, or no startup configuration where one is needed."""

    def __init__(self, message: str, *, recovery_hint: str | None = None) -> None:
        super().__init__("not_found", message, recovery_hint=recovery_hint)


class InvalidInputError(VimVarError):
    """Caller supplied arguments that cannot form a valid invocation."""

    def __init__(self, message: str, *, recovery_hint: str | None = None) -> None:
        super().__init__("invalid_input", message, recovery_hint=recovery_hint)


class ProcessFailureError(VimVarError):
    """The editor process exited with an unexpected status."""

    def __init__(self, exit_code: int | None, stderr: str) -> None:
        self.exit_code = exit_code
        self.stderr = stderr.strip()
        shown = "?" if exit_code is None else str(exit_code)
        message = f"editor exited with code {shown}"
        if self.stderr:
            message = f"{message}: {self.stderr}"
        super().__init__("process_failure", message)


class EmptyResultError(VimVarError):
    """The editor succeeded but produced no usable output."""

    def __init__(self, editor: str) -> None:
        self.editor = editor
        super().__init__("empty_result", f"result from {editor} was empty")


class MalformedOutputError(VimVarError):
    """Captured output is not a JSON value."""

    def __init__(self, text: str, detail: str) -> None:
        self.text = text
        super().__init__(
            "malformed_output", f"failed to parse editor output {text!r}: {detail}"
        )


class ConversionError(VimVarError):
    """Decoded value does not match the requested shape."""

    def __init__(self, message: str) -> None:
        super().__init__("conversion_failed", message)
