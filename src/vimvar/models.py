"""Editor, scope, and variable reference models for vimvar.

Example:
    >>> from vimvar.models import EditorKind, VariableScope, VariableReference
    >>> VariableScope.BUFFER.as_str()
    'b:'
    >>> EditorKind.VIM.binary
    'vim'
    >>> VariableReference(EditorKind.NEOVIM, VariableScope.GLOBAL, "x").name
    'x'
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Literal, Union

from .errors import InvalidInputError

JsonValue = Union[str, int, float, bool, None, list["JsonValue"], dict[str, "JsonValue"]]
ResultStream = Literal["stdout", "stderr"]


@dataclass(frozen=True)
class EditorTraits:
    """Per-variant invocation data.

    - ``display_name``: name used in messages.
    - ``binary``: executable looked up on ``PATH``.
    - ``launch_flags``: flags placed before ``-u <config>``.
    - ``commands``: ``+`` directives; ``{expression}`` is replaced by the
      JSON-encoding expression.
    - ``result_stream``: captured stream that carries the encoded value.
    - ``benign_exit_codes``: non-zero exit codes that still mean success.
    - ``requires_config``: whether a startup configuration path is mandatory.
    """

    display_name: str
    binary: str
    launch_flags: tuple[str, ...]
    commands: tuple[str, ...]
    result_stream: ResultStream
    benign_exit_codes: frozenset[int]
    requires_config: bool


class EditorKind(Enum):
    """Supported editor variants and their invocation quirks.

    Each member carries an ``EditorTraits`` so callers never branch on
    identity; its fields are exposed as attributes of the member.
    """

    # :echon in headless mode writes to stderr.
    NEOVIM = EditorTraits(
        display_name="neovim",
        binary="nvim",
        launch_flags=("--headless",),
        commands=("+echon {expression}", "+qa!"),
        result_stream="stderr",
        benign_exit_codes=frozenset(),
        requires_config=False,
    )
    # Batch mode prints nothing by itself; the value is put into the buffer
    # and printed. It commonly exits 1 on success.
    VIM = EditorTraits(
        display_name="vim",
        binary="vim",
        launch_flags=("-Es", "-i", "NONE"),
        commands=(
            "+set nonumber",
            "+redir => m | echon {expression} | redir END | put=m",
            "+%p",
            "+qa!",
        ),
        result_stream="stdout",
        benign_exit_codes=frozenset({1}),
        requires_config=True,
    )

    def __init__(self, traits: EditorTraits) -> None:
        self.display_name = traits.display_name
        self.binary = traits.binary
        self.launch_flags = traits.launch_flags
        self.commands = traits.commands
        self.result_stream = traits.result_stream
        self.benign_exit_codes = traits.benign_exit_codes
        self.requires_config = traits.requires_config

    def __str__(self) -> str:
        return self.display_name

    @classmethod
    def from_name(cls, value: str) -> EditorKind:
        """Return the editor matching a display or binary name.

        Example:
            >>> EditorKind.from_name("NVIM") is EditorKind.NEOVIM
            True
        """
        normalized = value.strip().lower()
        for kind in cls:
            if normalized in {kind.display_name, kind.binary, kind.name.lower()}:
                return kind
        raise InvalidInputError(
            f"unsupported editor {value!r}",
            recovery_hint="use 'nvim' or 'vim'",
        )


class VariableScope(Enum):
    """Scope prefixes of the vim scripting language."""

    NONE = ""
    BUFFER = "b:"
    WINDOW = "w:"
    TABPAGE = "t:"
    GLOBAL = "g:"
    LOCAL = "l:"
    SCRIPT = "s:"
    FUNCTION_ARG = "a:"
    VIM = "v:"

    def as_str(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value

    @classmethod
    def default(cls) -> VariableScope:
        return cls.GLOBAL

    @classmethod
    def parse(cls, value: str) -> VariableScope:
        """Parse a scope prefix (``g:`` or ``g``) or member name (``global``).

        Example:
            >>> VariableScope.parse("b") is VariableScope.BUFFER
            True
            >>> VariableScope.parse("function_arg") is VariableScope.FUNCTION_ARG
            True
        """
        normalized = value.strip().lower().replace("-", "_")
        for scope in cls:
            if normalized == scope.name.lower():
                return scope
            if scope.value and normalized in {scope.value, scope.value[:-1]}:
                return scope
        raise InvalidInputError(f"unknown variable scope {value!r}")


def split_qualified_name(value: str) -> tuple[VariableScope, str]:
    """Split ``b:name`` into its scope and bare name.

    Names without a recognized prefix belong to the default scope.

    Example:
        >>> split_qualified_name("w:ale_enabled")
        (<VariableScope.WINDOW: 'w:'>, 'ale_enabled')
        >>> split_qualified_name("mapleader")
        (<VariableScope.GLOBAL: 'g:'>, 'mapleader')
    """
    prefix, sep, rest = value.partition(":")
    if sep and len(prefix) == 1 and rest:
        for scope in VariableScope:
            if scope.value == f"{prefix}:":
                return scope, rest
    return VariableScope.default(), value


@dataclass(frozen=True)
class VariableReference:
    """The variable ``name`` in ``scope`` as seen by ``editor``."""

    editor: EditorKind
    scope: VariableScope
    name: str

    def __str__(self) -> str:
        return f"{self.scope.as_str()}{self.name} ({self.editor})"
