"""Tests for editor resolution."""

from __future__ import annotations

import subprocess

import pytest

import vimvar.editor as editor
from vimvar.errors import NotFoundError
from vimvar.models import EditorKind


class FakeProcess:
    def __init__(self, argv: list[str], **kwargs: object) -> None:
        self.argv = argv
        self.kwargs = kwargs
        self.killed = False
        self.reaped = False

    def kill(self) -> None:
        self.killed = True

    def __enter__(self) -> FakeProcess:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.reaped = True


def test_has_on_path_spawns_with_null_io(monkeypatch: pytest.MonkeyPatch) -> None:
    spawned: list[FakeProcess] = []

    def fake_popen(argv: list[str], **kwargs: object) -> FakeProcess:
        process = FakeProcess(argv, **kwargs)
        spawned.append(process)
        return process

    monkeypatch.setattr(subprocess, "Popen", fake_popen)

    assert editor.has_on_path("nvim") is True
    (process,) = spawned
    assert process.argv == ["nvim", "--help"]
    assert process.kwargs == {
        "stdin": subprocess.DEVNULL,
        "stdout": subprocess.DEVNULL,
        "stderr": subprocess.DEVNULL,
    }
    assert process.killed is True
    assert process.reaped is True


@pytest.mark.parametrize(
    "error", [FileNotFoundError(2, "missing"), PermissionError(13, "denied"), OSError(8, "exec")]
)
def test_has_on_path_false_on_spawn_failure(
    monkeypatch: pytest.MonkeyPatch, error: OSError
) -> None:
    def fake_popen(argv: list[str], **kwargs: object) -> FakeProcess:
        del argv, kwargs
        raise error

    monkeypatch.setattr(subprocess, "Popen", fake_popen)

    assert editor.has_on_path("vim") is False


def test_has_on_path_with_real_missing_binary() -> None:
    assert editor.has_on_path("vimvar-no-such-editor-binary") is False


@pytest.mark.parametrize(
    ("available", "expected"),
    [
        ({"nvim", "vim"}, EditorKind.NEOVIM),
        ({"nvim"}, EditorKind.NEOVIM),
        ({"vim"}, EditorKind.VIM),
    ],
)
def test_resolve_default_editor_prefers_neovim(
    monkeypatch: pytest.MonkeyPatch, available: set[str], expected: EditorKind
) -> None:
    monkeypatch.setattr(editor, "has_on_path", lambda binary: binary in available)

    assert editor.resolve_default_editor() is expected


def test_resolve_default_editor_fails_without_editors(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.setattr(editor, "has_on_path", lambda binary: False)

    with pytest.raises(NotFoundError) as excinfo:
        editor.resolve_default_editor()

    assert excinfo.value.code == "not_found"
    assert "no vim or neovim" in str(excinfo.value)


def test_wrappers_check_their_binaries(monkeypatch: pytest.MonkeyPatch) -> None:
    checked: list[str] = []

    def fake_has_on_path(binary: str) -> bool:
        checked.append(binary)
        return True

    monkeypatch.setattr(editor, "has_on_path", fake_has_on_path)

    assert editor.has_nvim_on_path() is True
    assert editor.has_vim_on_path() is True
    assert checked == ["nvim", "vim"]
