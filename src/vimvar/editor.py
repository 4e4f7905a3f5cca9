"""Editor resolution utilities for vimvar."""

from __future__ import annotations

import subprocess

from . import log
from .errors import NotFoundError
from .models import EditorKind

# Neovim wins when both are installed.
EDITOR_PREFERENCE: tuple[EditorKind, ...] = (EditorKind.NEOVIM, EditorKind.VIM)


def has_on_path(binary: str) -> bool:
    """Return whether ``binary`` can be started from ``PATH``.

    The check runs ``binary --help`` with all I/O bound to the null device. It
    only checks that the operating system can locate and start the program;
    the process is killed and reaped straight away.

    Args:
        binary: Executable name to look up.

    Returns:
        ``True`` when the process started, ``False`` on any spawn failure.

    Example:
        >>> has_on_path("vimvar-definitely-missing-binary")
        False
    """
    try:
        process = subprocess.Popen(
            [binary, "--help"],
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
        )
    except OSError as exc:
        log.trace(f"cannot spawn {binary}: {exc}")
        return False
    with process:
        process.kill()
    return True


def has_nvim_on_path() -> bool:
    """Return whether ``nvim`` can be spawned."""
    return has_on_path(EditorKind.NEOVIM.binary)


def has_vim_on_path() -> bool:
    """Return whether ``vim`` can be spawned."""
    return has_on_path(EditorKind.VIM.binary)


def resolve_default_editor() -> EditorKind:
    """Return the preferred editor available on ``PATH``.

    Returns:
        ``EditorKind.NEOVIM`` when ``nvim`` is spawnable, else
        ``EditorKind.VIM`` when ``vim`` is.

    Raises:
        NotFoundError: Neither editor can be spawned.
    """
    for kind in EDITOR_PREFERENCE:
        if has_on_path(kind.binary):
            log.debug(f"using {kind} ({kind.binary})")
            return kind
    raise NotFoundError(
        "no vim or neovim instance found in path",
        recovery_hint="install neovim or vim, or pass the editor explicitly",
    )
