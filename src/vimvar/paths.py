"""Path helpers for locating the editor's startup configuration.

The search order is a data table keyed on platform family. Each entry is a
``PathTemplate`` anchored at an environment-derived root; the table is
evaluated against an ``EnvironmentSource`` so tests can inject their own
values instead of reading the real user environment.

Example:
    >>> env = StaticEnvironment(home="/home/u", xdg_config_home=None)
    >>> [str(p) for p in candidate_paths(env, PlatformFamily.OTHER)]
    []
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Literal, Protocol

from . import log

PathRoot = Literal["xdg_config_home", "home", "vim"]


class PlatformFamily(Enum):
    UNIX = "unix"
    WINDOWS = "windows"
    OTHER = "other"


@dataclass(frozen=True)
class PathTemplate:
    """A candidate path: an environment-derived root plus fixed components."""

    root: PathRoot
    parts: tuple[str, ...]

    def render(self, env: EnvironmentSource) -> Path | None:
        """Return the concrete path, or ``None`` when the root is unset.

        Example:
            >>> env = StaticEnvironment(home="/home/u")
            >>> str(PathTemplate("home", (".vimrc",)).render(env))
            '/home/u/.vimrc'
            >>> PathTemplate("vim", ("_vimrc",)).render(env) is None
            True
        """
        if self.root == "xdg_config_home":
            base = env.xdg_config_home()
        elif self.root == "vim":
            base = env.vim_env()
        else:
            base = env.home()
        if not base:
            return None
        return Path(base, *self.parts)


_XDG_CANDIDATES = (
    PathTemplate("xdg_config_home", ("nvim", "init.lua")),
    PathTemplate("xdg_config_home", ("nvim", "init.vim")),
)

CANDIDATE_TABLE: dict[PlatformFamily, tuple[PathTemplate, ...]] = {
    PlatformFamily.UNIX: (
        *_XDG_CANDIDATES,
        PathTemplate("home", (".config", "nvim", "init.lua")),
        PathTemplate("home", (".config", "nvim", "init.vim")),
        PathTemplate("home", (".vimrc",)),
        PathTemplate("home", (".vim", "vimrc")),
    ),
    PlatformFamily.WINDOWS: (
        *_XDG_CANDIDATES,
        PathTemplate("home", ("AppData", "Local", "nvim", "init.lua")),
        PathTemplate("home", ("AppData", "Local", "nvim", "init.vim")),
        PathTemplate("home", ("_vimrc",)),
        PathTemplate("home", ("vimfiles", "vimrc")),
        PathTemplate("vim", ("_vimrc",)),
    ),
    PlatformFamily.OTHER: _XDG_CANDIDATES,
}


class EnvironmentSource(Protocol):
    """Source of the environment values the candidate table refers to."""

    def xdg_config_home(self) -> str | None: ...

    def home(self) -> str: ...

    def vim_env(self) -> str | None: ...


class StandardEnvironment:
    """Environment source backed by the running process."""

    def xdg_config_home(self) -> str | None:
        return os.environ.get("XDG_CONFIG_HOME") or None

    def home(self) -> str:
        return os.path.expanduser("~")

    def vim_env(self) -> str | None:
        return os.environ.get("VIM") or None


class StaticEnvironment:
    """Environment source with fixed values; ``None`` means unset."""

    def __init__(
        self,
        home: str,
        xdg_config_home: str | None = None,
        vim: str | None = None,
    ) -> None:
        self._home = home
        self._xdg_config_home = xdg_config_home
        self._vim = vim

    def xdg_config_home(self) -> str | None:
        return self._xdg_config_home

    def home(self) -> str:
        return self._home

    def vim_env(self) -> str | None:
        return self._vim


def current_platform_family() -> PlatformFamily:
    """Return the platform family of the running interpreter."""
    if os.name == "nt":
        return PlatformFamily.WINDOWS
    if os.name == "posix":
        return PlatformFamily.UNIX
    return PlatformFamily.OTHER


def candidate_paths(
    env: EnvironmentSource | None = None,
    platform: PlatformFamily | None = None,
) -> list[Path]:
    """Return candidate startup configuration paths in search order.

    Templates whose environment root is unset are dropped individually; the
    rest of the list is unaffected.

    Args:
        env: Environment source; defaults to the running process.
        platform: Platform family; defaults to the running platform.

    Returns:
        Ordered list of candidate paths.

    Example:
        >>> env = StaticEnvironment(home="/h", xdg_config_home="/x")
        >>> [p.as_posix() for p in candidate_paths(env, PlatformFamily.OTHER)]
        ['/x/nvim/init.lua', '/x/nvim/init.vim']
    """
    source = env or StandardEnvironment()
    family = platform or current_platform_family()
    candidates: list[Path] = []
    for template in CANDIDATE_TABLE[family]:
        path = template.render(source)
        if path is None:
            log.trace(f"skipping ${template.root} candidate: variable is unset")
            continue
        candidates.append(path)
    return candidates


def locate_startup_config(
    env: EnvironmentSource | None = None,
    platform: PlatformFamily | None = None,
) -> Path | None:
    """Return the first existing startup configuration file.

    Args:
        env: Environment source; defaults to the running process.
        platform: Platform family; defaults to the running platform.

    Returns:
        Path to the configuration file, or ``None`` when no candidate exists.
    """
    for path in candidate_paths(env, platform):
        if path.exists():
            log.debug(f"found startup configuration at {path}")
            return path
    return None
