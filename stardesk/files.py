"""Locating data files and reading them line by line."""

from __future__ import annotations

import os
import sys
from collections.abc import Iterator
from pathlib import Path


def _default_data_dir() -> Path:
    return Path(sys.prefix) / "share" / "background"


def _default_user_data_dir() -> Path:
    xdg = os.environ.get("XDG_DATA_HOME")
    return Path(xdg) if xdg else Path.home() / ".local" / "share"


class FileLoader:
    """Finds data files next to a build tree or in the installed data directory."""

    def __init__(
        self,
        start_path: str | os.PathLike[str],
        data_dir: str | os.PathLike[str] | None = None,
        user_data_dir: str | os.PathLike[str] | None = None,
    ) -> None:
        self.start_path = Path(start_path)
        self.data_dir = Path(data_dir) if data_dir is not None else _default_data_dir()
        self.user_data_dir = (
            Path(user_data_dir) if user_data_dir is not None else _default_user_data_dir()
        )

    def find_file(self, name: str) -> Path | None:
        """The first existing file of that name: the local res directory, then the data dir."""
        dist_dir = self.start_path.absolute().parent.parent
        for candidate in (dist_dir / "res" / name, self.data_dir / name):
            if candidate.exists():
                return candidate
        return None

    def find(self, name: str) -> str | None:
        """Path of the named file as a string, or None if it is nowhere."""
        found = self.find_file(name)
        return str(found) if found is not None else None

    def local_dir(self) -> Path:
        """The per-user data directory, created if missing."""
        path = self.user_data_dir / "background"
        path.mkdir(parents=True, exist_ok=True)
        return path


def read_lines(path: str | os.PathLike[str], encoding: str = "UTF-8") -> list[str]:
    """All lines of a file without line endings; an empty file gives one empty line."""
    with open(path, encoding=encoding, newline="") as stream:
        content = stream.read()
    return content.splitlines() or [""]


def iter_lines(path: str | os.PathLike[str], encoding: str = "UTF-8") -> Iterator[str]:
    """Yield the lines of a file with trailing whitespace removed."""
    with open(path, encoding=encoding) as stream:
        for line in stream:
            yield line.rstrip()


def read_file(path: str | os.PathLike[str]) -> bytes:
    """The whole content of a file; an empty file is an error."""
    file_path = Path(path)
    if file_path.stat().st_size <= 0:
        raise ValueError(f"File {file_path} is empty")
    return file_path.read_bytes()