# ruff: noqa: E402

import sys
from pathlib import Path

import pytest
from _pytest.doctest import DoctestModule

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

import vimvar.log as vimvar_log

DOCTEST_MODULES = {
    ROOT / "src" / "vimvar" / "__init__.py",
    ROOT / "src" / "vimvar" / "capture.py",
    ROOT / "src" / "vimvar" / "decoding.py",
    ROOT / "src" / "vimvar" / "editor.py",
    ROOT / "src" / "vimvar" / "invocation.py",
    ROOT / "src" / "vimvar" / "models.py",
    ROOT / "src" / "vimvar" / "paths.py",
}

TEST_VIMRC = """\
let b:my_buffer_var = 'some buffer value'
let w:my_window_var = 'some window value'
let t:my_tabpage_var = 'some tabpage value'
let g:my_global_var = 'some global value'
let g:my_zero_var = 0
"""


@pytest.fixture(autouse=True)
def _quiet_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(vimvar_log, "_configured_level", vimvar_log.LogLevel.WARNING)
    monkeypatch.setattr(vimvar_log, "_no_color_override", True)


@pytest.fixture
def test_vimrc(tmp_path: Path) -> Path:
    path = tmp_path / "vimrc"
    path.write_text(TEST_VIMRC, encoding="utf-8")
    return path


def pytest_collect_file(
    parent: pytest.Collector, file_path: Path
) -> DoctestModule | None:
    path = file_path if isinstance(file_path, Path) else Path(str(file_path))
    if path in DOCTEST_MODULES:
        return DoctestModule.from_parent(parent, path=path)
    return None
