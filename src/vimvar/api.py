"""Variable lookup entry points.

``lookup`` and ``lookup_typed`` are the single parameterized operation over
editor and scope. The ``load_*_var`` helpers pick the default editor and a
fixed scope and call straight through.
"""

from __future__ import annotations

from pathlib import Path
from typing import TypeVar

from . import capture, decoding, log
from .editor import resolve_default_editor
from .errors import NotFoundError
from .exec import CommandRunner
from .invocation import build_invocation
from .models import EditorKind, JsonValue, VariableReference, VariableScope
from .paths import EnvironmentSource, locate_startup_config

T = TypeVar("T")


def resolve_config(
    editor: EditorKind,
    config: Path | str | None,
    *,
    env: EnvironmentSource | None = None,
) -> Path | None:
    """Return the startup configuration to pass to ``editor``.

    An explicit ``config`` always wins. Otherwise neovim runs with its own
    startup rules (``None``) and vim gets the first located configuration.

    Raises:
        NotFoundError: Vim needs a configuration and none was found.
    """
    if config is not None:
        return Path(config)
    if not editor.requires_config:
        return None
    located = locate_startup_config(env)
    if located is None:
        raise NotFoundError(
            f"no startup configuration found for {editor}",
            recovery_hint="create a vimrc or pass its path explicitly",
        )
    return located


def capture_text(
    ref: VariableReference,
    *,
    config: Path | str | None = None,
    runner: CommandRunner | None = None,
    env: EnvironmentSource | None = None,
) -> str:
    """Run the editor for ``ref`` and return the raw captured output."""
    config_path = resolve_config(ref.editor, config, env=env)
    invocation = build_invocation(ref.editor, config_path, ref.scope, ref.name)
    log.debug(f"looking up {ref}")
    return capture.invoke(invocation, runner=runner)


def lookup_outcome(
    ref: VariableReference,
    allow_zero: bool = False,
    *,
    config: Path | str | None = None,
    runner: CommandRunner | None = None,
    env: EnvironmentSource | None = None,
) -> decoding.Lookup:
    """Same as ``lookup`` but keeps a stored ``null`` apart from absence."""
    text = capture_text(ref, config=config, runner=runner, env=env)
    return decoding.decode_outcome(text, allow_zero)


def lookup(
    ref: VariableReference,
    allow_zero: bool = False,
    *,
    config: Path | str | None = None,
    runner: CommandRunner | None = None,
    env: EnvironmentSource | None = None,
) -> JsonValue:
    """Return the JSON value of ``ref``, or ``None`` when it is not set.

    Args:
        ref: Variable to look up.
        allow_zero: Treat a stored ``0`` as a value rather than absence.
        config: Startup configuration to load; located automatically for vim.
        runner: Optional command runner, for tests.
        env: Optional environment source used to locate the configuration.

    Returns:
        The decoded value, or ``None``.

    Raises:
        VimVarError: Any failure from building, running, or decoding.
    """
    text = capture_text(ref, config=config, runner=runner, env=env)
    return decoding.decode(text, allow_zero)


def lookup_typed(
    ref: VariableReference,
    target: type[T],
    allow_zero: bool = False,
    *,
    config: Path | str | None = None,
    runner: CommandRunner | None = None,
    env: EnvironmentSource | None = None,
) -> T | None:
    """Same as ``lookup`` but validates the value as ``target``.

    Raises:
        ConversionError: The value does not match ``target``.
    """
    text = capture_text(ref, config=config, runner=runner, env=env)
    return decoding.decode_typed(text, target, allow_zero)


def load_var(
    scope: VariableScope,
    name: str,
    allow_zero: bool = False,
    *,
    config: Path | str | None = None,
) -> JsonValue:
    """Look up ``scope``/``name`` with whichever editor is on ``PATH``."""
    ref = VariableReference(resolve_default_editor(), scope, name)
    return lookup(ref, allow_zero, config=config)


def load_typed_var(
    scope: VariableScope,
    name: str,
    target: type[T],
    allow_zero: bool = False,
    *,
    config: Path | str | None = None,
) -> T | None:
    """Typed variant of ``load_var``."""
    ref = VariableReference(resolve_default_editor(), scope, name)
    return lookup_typed(ref, target, allow_zero, config=config)


def load_buffer_var(name: str, allow_zero: bool = False) -> JsonValue:
    return load_var(VariableScope.BUFFER, name, allow_zero)


def load_typed_buffer_var(name: str, target: type[T], allow_zero: bool = False) -> T | None:
    return load_typed_var(VariableScope.BUFFER, name, target, allow_zero)


def load_window_var(name: str, allow_zero: bool = False) -> JsonValue:
    return load_var(VariableScope.WINDOW, name, allow_zero)


def load_typed_window_var(name: str, target: type[T], allow_zero: bool = False) -> T | None:
    return load_typed_var(VariableScope.WINDOW, name, target, allow_zero)


def load_tabpage_var(name: str, allow_zero: bool = False) -> JsonValue:
    return load_var(VariableScope.TABPAGE, name, allow_zero)


def load_typed_tabpage_var(name: str, target: type[T], allow_zero: bool = False) -> T | None:
    return load_typed_var(VariableScope.TABPAGE, name, target, allow_zero)


def load_global_var(name: str, allow_zero: bool = False) -> JsonValue:
    return load_var(VariableScope.GLOBAL, name, allow_zero)


def load_typed_global_var(name: str, target: type[T], allow_zero: bool = False) -> T | None:
    return load_typed_var(VariableScope.GLOBAL, name, target, allow_zero)


def load_local_var(name: str, allow_zero: bool = False) -> JsonValue:
    return load_var(VariableScope.LOCAL, name, allow_zero)


def load_typed_local_var(name: str, target: type[T], allow_zero: bool = False) -> T | None:
    return load_typed_var(VariableScope.LOCAL, name, target, allow_zero)


def load_script_var(name: str, allow_zero: bool = False) -> JsonValue:
    return load_var(VariableScope.SCRIPT, name, allow_zero)


def load_typed_script_var(name: str, target: type[T], allow_zero: bool = False) -> T | None:
    return load_typed_var(VariableScope.SCRIPT, name, target, allow_zero)


def load_function_arg_var(name: str, allow_zero: bool = False) -> JsonValue:
    return load_var(VariableScope.FUNCTION_ARG, name, allow_zero)


def load_typed_function_arg_var(
    name: str, target: type[T], allow_zero: bool = False
) -> T | None:
    return load_typed_var(VariableScope.FUNCTION_ARG, name, target, allow_zero)


def load_vim_var(name: str, allow_zero: bool = False) -> JsonValue:
    return load_var(VariableScope.VIM, name, allow_zero)


def load_typed_vim_var(name: str, target: type[T], allow_zero: bool = False) -> T | None:
    return load_typed_var(VariableScope.VIM, name, target, allow_zero)
