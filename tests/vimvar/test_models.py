import pytest

from vimvar.errors import InvalidInputError
from vimvar.models import (
    EditorKind,
    EditorTraits,
    VariableReference,
    VariableScope,
    split_qualified_name,
)

SCOPED = [scope for scope in VariableScope if scope is not VariableScope.NONE]


def test_scope_prefixes_are_unique_and_stable() -> None:
    prefixes = [scope.as_str() for scope in SCOPED]

    assert len(set(prefixes)) == len(prefixes)
    assert all(len(prefix) == 2 and prefix.endswith(":") for prefix in prefixes)
    assert VariableScope.NONE.as_str() == ""
    assert VariableScope.FUNCTION_ARG.as_str() == "a:"
    assert VariableScope.VIM.as_str() == "v:"


def test_default_scope_is_global() -> None:
    assert VariableScope.default() is VariableScope.GLOBAL


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("g:", VariableScope.GLOBAL),
        ("b", VariableScope.BUFFER),
        ("Tabpage", VariableScope.TABPAGE),
        ("function-arg", VariableScope.FUNCTION_ARG),
        ("none", VariableScope.NONE),
        (" v: ", VariableScope.VIM),
    ],
)
def test_scope_parse(value: str, expected: VariableScope) -> None:
    assert VariableScope.parse(value) is expected


def test_scope_parse_rejects_unknown_values() -> None:
    with pytest.raises(InvalidInputError):
        VariableScope.parse("x:")


def test_split_qualified_name() -> None:
    assert split_qualified_name("b:foo") == (VariableScope.BUFFER, "foo")
    assert split_qualified_name("foo") == (VariableScope.GLOBAL, "foo")
    assert split_qualified_name("x:foo") == (VariableScope.GLOBAL, "x:foo")
    assert split_qualified_name("g:") == (VariableScope.GLOBAL, "g:")


def test_editor_kinds_carry_their_quirks() -> None:
    assert EditorKind.NEOVIM.binary == "nvim"
    assert EditorKind.NEOVIM.result_stream == "stderr"
    assert EditorKind.NEOVIM.benign_exit_codes == frozenset()
    assert EditorKind.NEOVIM.requires_config is False
    assert EditorKind.VIM.binary == "vim"
    assert EditorKind.VIM.result_stream == "stdout"
    assert EditorKind.VIM.benign_exit_codes == frozenset({1})
    assert EditorKind.VIM.requires_config is True


def test_editor_from_name() -> None:
    assert EditorKind.from_name("neovim") is EditorKind.NEOVIM
    assert EditorKind.from_name("Vim") is EditorKind.VIM
    with pytest.raises(InvalidInputError):
        EditorKind.from_name("emacs")


def test_variable_reference_is_immutable_value() -> None:
    ref = VariableReference(EditorKind.VIM, VariableScope.BUFFER, "foo")

    assert ref == VariableReference(EditorKind.VIM, VariableScope.BUFFER, "foo")
    assert hash(ref) == hash(VariableReference(EditorKind.VIM, VariableScope.BUFFER, "foo"))
    assert ref != VariableReference(EditorKind.NEOVIM, VariableScope.BUFFER, "foo")
    with pytest.raises(AttributeError):
        ref.name = "bar"  # type: ignore[misc]
    assert str(ref) == "b:foo (vim)"


def test_editor_kinds_carry_argv_templates() -> None:
    assert EditorKind.NEOVIM.launch_flags == ("--headless",)
    assert EditorKind.NEOVIM.commands == ("+echon {expression}", "+qa!")
    assert EditorKind.VIM.launch_flags == ("-Es", "-i", "NONE")
    assert EditorKind.VIM.commands[-1] == "+qa!"
    assert isinstance(EditorKind.VIM.value, EditorTraits)
