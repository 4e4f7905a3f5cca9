"""Read variables from a vim or neovim configuration.

The editor is launched non-interactively, asked to ``json_encode()`` the
variable, and its output is decoded back into Python values.

Example:
    >>> from vimvar import __version__, VariableScope
    >>> isinstance(__version__, str)
    True
    >>> VariableScope.default().as_str()
    'g:'
"""

from __future__ import annotations

try:
    from importlib.metadata import PackageNotFoundError, version
except ImportError:  # pragma: no cover - import edge cases
    __version__ = "0.0.0"
else:
    try:
        __version__ = version("vimvar")
    except PackageNotFoundError:
        __version__ = "0.0.0"

from .api import (
    load_buffer_var,
    load_function_arg_var,
    load_global_var,
    load_local_var,
    load_script_var,
    load_tabpage_var,
    load_typed_buffer_var,
    load_typed_function_arg_var,
    load_typed_global_var,
    load_typed_local_var,
    load_typed_script_var,
    load_typed_tabpage_var,
    load_typed_var,
    load_typed_vim_var,
    load_typed_window_var,
    load_var,
    load_vim_var,
    load_window_var,
    lookup,
    lookup_outcome,
    lookup_typed,
)
from .decoding import Lookup, decode, decode_outcome, decode_typed
from .editor import has_nvim_on_path, has_on_path, has_vim_on_path, resolve_default_editor
from .errors import (
    ConversionError,
    EmptyResultError,
    InvalidInputError,
    MalformedOutputError,
    NotFoundError,
    ProcessFailureError,
    VimVarError,
)
from .invocation import Invocation, build_invocation
from .models import EditorKind, JsonValue, VariableReference, VariableScope
from .paths import locate_startup_config

__all__ = [
    "__version__",
    "ConversionError",
    "EditorKind",
    "EmptyResultError",
    "InvalidInputError",
    "Invocation",
    "JsonValue",
    "Lookup",
    "MalformedOutputError",
    "NotFoundError",
    "ProcessFailureError",
    "VariableReference",
    "VariableScope",
    "VimVarError",
    "build_invocation",
    "decode",
    "decode_outcome",
    "decode_typed",
    "has_nvim_on_path",
    "has_on_path",
    "has_vim_on_path",
    "load_buffer_var",
    "load_function_arg_var",
    "load_global_var",
    "load_local_var",
    "load_script_var",
    "load_tabpage_var",
    "load_typed_buffer_var",
    "load_typed_function_arg_var",
    "load_typed_global_var",
    "load_typed_local_var",
    "load_typed_script_var",
    "load_typed_tabpage_var",
    "load_typed_var",
    "load_typed_vim_var",
    "load_typed_window_var",
    "load_var",
    "load_vim_var",
    "load_window_var",
    "locate_startup_config",
    "lookup",
    "lookup_outcome",
    "lookup_typed",
    "resolve_default_editor",
]
