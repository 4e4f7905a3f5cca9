"""Utilities for constructing non-interactive editor invocations.

Each invocation asks the editor to JSON-encode one variable with its native
``json_encode()`` and print it, then quit. ``get(<scope>, "<name>")`` yields
``0`` for an undefined variable instead of raising, which is the sentinel the
decoder later reads as "absent".

Example:
    >>> from vimvar.models import EditorKind, VariableScope
    >>> inv = build_invocation(EditorKind.NEOVIM, None, VariableScope.GLOBAL, "x")
    >>> inv.argv
    ('nvim', '--headless', '+echon json_encode(get(g:, "x"))', '+qa!')
"""

from __future__ import annotations

import os
import re
import shlex
import subprocess
from dataclasses import dataclass
from pathlib import Path

from .errors import InvalidInputError
from .models import EditorKind, VariableScope

_IDENTIFIER_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_#]*$")
_FORBIDDEN_NAME_CHARS = ('"', "\\", "\n", "\r")


@dataclass(frozen=True)
class Invocation:
    """A fully built editor command for one variable lookup."""

    editor: EditorKind
    argv: tuple[str, ...]

    @property
    def command_line(self) -> str:
        """Render ``argv`` as one command line for the platform shell.

        Example:
            >>> Invocation(EditorKind.NEOVIM, ("nvim", "+qa!")).command_line
            "nvim '+qa!'"
        """
        if os.name == "nt":
            return subprocess.list2cmdline(self.argv)
        return shlex.join(self.argv)

    @property
    def shell_argv(self) -> tuple[str, ...]:
        """Return argv that runs ``command_line`` through the command interpreter."""
        if os.name == "nt":
            return ("cmd", "/C", self.command_line)
        return ("sh", "-c", self.command_line)


def validate_name(scope: VariableScope, name: str) -> str:
    """Return ``name`` if it can be embedded in a lookup expression.

    Raises:
        InvalidInputError: The name is empty, contains characters that would
            break out of the quoted key, or (for the unscoped form) is not a
            plain identifier.
    """
    if not name:
        raise InvalidInputError("variable name is required")
    if any(char in name for char in _FORBIDDEN_NAME_CHARS):
        raise InvalidInputError(f"invalid variable name {name!r}")
    if scope is VariableScope.NONE and not _IDENTIFIER_RE.match(name):
        raise InvalidInputError(
            f"invalid variable name {name!r}",
            recovery_hint="unscoped names must be plain identifiers",
        )
    return name


def encode_expression(scope: VariableScope, name: str) -> str:
    """Return the vim expression that JSON-encodes the variable or ``0``.

    Example:
        >>> encode_expression(VariableScope.BUFFER, "foo")
        'json_encode(get(b:, "foo"))'
        >>> encode_expression(VariableScope.NONE, "foo")
        'json_encode(exists("foo") ? foo : 0)'
    """
    validate_name(scope, name)
    if scope is VariableScope.NONE:
        # No scope dictionary to index; exists() keeps undefined names from raising.
        return f'json_encode(exists("{name}") ? {name} : 0)'
    return f'json_encode(get({scope.as_str()}, "{name}"))'


def editor_argv(
    editor: EditorKind, config: Path | None, expression: str
) -> tuple[str, ...]:
    """Render ``editor``'s argv template around ``expression``.

    Example:
        >>> editor_argv(EditorKind.NEOVIM, Path("init.vim"), "1")
        ('nvim', '--headless', '-u', 'init.vim', '+echon 1', '+qa!')
    """
    argv = [editor.binary, *editor.launch_flags]
    if config is not None:
        argv.extend(["-u", str(config)])
    argv.extend(command.format(expression=expression) for command in editor.commands)
    return tuple(argv)


def build_invocation(
    editor: EditorKind,
    config: Path | str | None,
    scope: VariableScope,
    name: str,
) -> Invocation:
    """Build the command that prints ``scope``/``name`` as JSON.

    Args:
        editor: Editor variant to invoke.
        config: Startup configuration to load; mandatory for vim.
        scope: Variable scope.
        name: Bare variable name (no scope prefix).

    Returns:
        The invocation for ``editor``.

    Raises:
        InvalidInputError: Vim was requested without a configuration path, or
            the name cannot be embedded safely.
    """
    config_path = Path(config) if config is not None else None
    if config_path is None and editor.requires_config:
        raise InvalidInputError(
            "path to startup configuration is required",
            recovery_hint=f"pass a vimrc path when using {editor}",
        )
    expression = encode_expression(scope, name)
    return Invocation(editor, editor_argv(editor, config_path, expression))
