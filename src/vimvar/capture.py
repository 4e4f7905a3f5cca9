"""Run editor invocations and classify their output."""

from __future__ import annotations

from . import log
from .errors import EmptyResultError, NotFoundError, ProcessFailureError
from .exec import CommandRequest, CommandResult, CommandRunner, run_with_runner
from .invocation import Invocation
from .models import EditorKind


def is_success(editor: EditorKind, returncode: int) -> bool:
    """Return whether ``returncode`` means success for ``editor``.

    Vim's batch mode commonly exits 1 even when every command succeeded.

    Example:
        >>> is_success(EditorKind.VIM, 1), is_success(EditorKind.NEOVIM, 1)
        (True, False)
    """
    return returncode == 0 or returncode in editor.benign_exit_codes


def select_output(editor: EditorKind, result: CommandResult) -> str:
    """Return the captured stream that carries ``editor``'s result."""
    if editor.result_stream == "stderr":
        return result.stderr
    return result.stdout


def classify(editor: EditorKind, result: CommandResult) -> str:
    """Turn a finished command into result text or a failure.

    Args:
        editor: Editor variant the command ran.
        result: Captured process result.

    Returns:
        The untrimmed text of the selected stream.

    Raises:
        ProcessFailureError: Exit status is not a success for ``editor``.
        EmptyResultError: The selected stream holds only whitespace.
    """
    if not is_success(editor, result.returncode):
        exit_code = result.returncode if result.returncode >= 0 else None
        raise ProcessFailureError(exit_code, result.stderr)
    text = select_output(editor, result)
    if not text.strip():
        raise EmptyResultError(editor.display_name)
    return text


def invoke(invocation: Invocation, *, runner: CommandRunner | None = None) -> str:
    """Run ``invocation`` through the command interpreter and return its output.

    The call blocks until the editor exits; there is no timeout.

    Args:
        invocation: Command to run.
        runner: Optional command runner, for tests.

    Returns:
        Text of the stream that carries the encoded value.
    """
    request = CommandRequest(argv=invocation.shell_argv)
    log.debug(f"running {invocation.command_line}")
    result = run_with_runner(request, runner=runner)
    if result is None:
        raise NotFoundError(f"missing command interpreter: {request.argv[0]}")
    log.debug(f"{invocation.editor.binary} exited with code {result.returncode}")
    text = classify(invocation.editor, result)
    log.trace(f"captured {invocation.editor.result_stream}: {text.strip()}")
    return text
