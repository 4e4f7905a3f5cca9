"""Command-line front end for vimvar."""

import json
from enum import Enum
from pathlib import Path
from typing import Annotated, NoReturn, Optional

import typer

from . import __version__, api
from . import log as vimvar_log
from .editor import resolve_default_editor
from .errors import VimVarError
from .models import EditorKind, VariableReference, VariableScope, split_qualified_name
from .paths import locate_startup_config

EXIT_ABSENT = 1
EXIT_FAILURE = 2


class LogLevelName(str, Enum):
    TRACE = "trace"
    DEBUG = "debug"
    INFO = "info"
    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"


app = typer.Typer(
    name="vimvar",
    help="Read variables from a vim or neovim configuration.",
    add_completion=False,
    no_args_is_help=True,
)


def _fail(exc: VimVarError) -> NoReturn:
    typer.echo(f"error: {exc}", err=True)
    if exc.recovery_hint:
        typer.echo(f"hint: {exc.recovery_hint}", err=True)
    raise typer.Exit(EXIT_FAILURE)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(__version__)
        raise typer.Exit()


@app.callback()
def main_callback(
    log_level: Annotated[
        Optional[LogLevelName],
        typer.Option("--log-level", help="Diagnostic verbosity.", case_sensitive=False),
    ] = None,
    no_color: Annotated[
        bool, typer.Option("--no-color", help="Disable colorized diagnostics.")
    ] = False,
    version: Annotated[
        bool,
        typer.Option(
            "--version", callback=_version_callback, is_eager=True, help="Show version."
        ),
    ] = False,
) -> None:
    del version
    if log_level is not None:
        vimvar_log.set_level(log_level.value)
    if no_color:
        vimvar_log.set_no_color(True)


@app.command("get")
def get_cmd(
    name: Annotated[str, typer.Argument(help="Variable name, optionally prefixed (b:foo).")],
    scope: Annotated[
        Optional[str], typer.Option("--scope", "-s", help="Scope prefix or name.")
    ] = None,
    editor: Annotated[
        Optional[str], typer.Option("--editor", "-e", help="nvim or vim.")
    ] = None,
    config: Annotated[
        Optional[Path], typer.Option("--config", "-u", help="Startup configuration file.")
    ] = None,
    allow_zero: Annotated[
        bool, typer.Option("--allow-zero", help="Report a stored 0 instead of absence.")
    ] = False,
) -> None:
    """Print a variable's value as JSON; exit 1 when it is not set."""
    try:
        if scope is not None:
            variable_scope, bare_name = VariableScope.parse(scope), name
        else:
            variable_scope, bare_name = split_qualified_name(name)
        kind = EditorKind.from_name(editor) if editor else resolve_default_editor()
        ref = VariableReference(kind, variable_scope, bare_name)
        outcome = api.lookup_outcome(ref, allow_zero, config=config)
    except VimVarError as exc:
        _fail(exc)
    if not outcome.present:
        vimvar_log.info(f"{variable_scope.as_str()}{bare_name} is not set")
        raise typer.Exit(EXIT_ABSENT)
    typer.echo(json.dumps(outcome.value, ensure_ascii=False))


@app.command("locate")
def locate_cmd() -> None:
    """Print the startup configuration that would be used."""
    path = locate_startup_config()
    if path is None:
        vimvar_log.warning("no startup configuration found")
        raise typer.Exit(EXIT_ABSENT)
    typer.echo(str(path))


@app.command("which")
def which_cmd() -> None:
    """Print the editor binary that would be used."""
    try:
        kind = resolve_default_editor()
    except VimVarError as exc:
        _fail(exc)
    typer.echo(kind.binary)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
