"""Per-application asset storage.

An ``AppData`` store holds one folder per application and each folder holds
plain files. Lookups return ``None`` when a folder or file does not exist;
only malformed names raise.
"""
from __future__ import annotations

import io
from dataclasses import dataclass, field
from pathlib import Path
from typing import BinaryIO, Protocol


class InvalidNameError(ValueError):
    """Raised for folder or file names that cannot name a single entry."""


def validate_name(name: str) -> str:
    if not name or name in {".", ".."} or any(c in name for c in "/\\\0"):
        raise InvalidNameError(f"Invalid name: {name!r}")
    return name


class File(Protocol):
    name: str

    @property
    def size(self) -> int: ...

    def open(self) -> BinaryIO: ...


class Folder(Protocol):
    name: str

    def get_file(self, name: str) -> File | None: ...


class AppData(Protocol):
    def get_folder(self, name: str) -> Folder | None: ...


class LocalFile:
    def __init__(self, path: Path):
        self.path = path
        self.name = path.name

    @property
    def size(self) -> int:
        return self.path.stat().st_size

    def open(self) -> BinaryIO:
        return self.path.open("rb")

    def __eq__(self, other):
        return isinstance(other, LocalFile) and other.path == self.path

    def __hash__(self):
        return hash(self.path)

    def __repr__(self):
        return f"LocalFile({str(self.path)!r})"


class LocalFolder:
    def __init__(self, path: Path):
        self.path = path
        self.name = path.name

    def get_file(self, name: str) -> LocalFile | None:
        path = self.path / validate_name(name)
        if not path.is_file():
            return None
        return LocalFile(path)


class LocalAppData:
    """App data kept on disk as ``<root>/<app_id>/<file>``."""

    def __init__(self, root: Path | str):
        self.root = Path(root)

    def get_folder(self, name: str) -> LocalFolder | None:
        path = self.root / validate_name(name)
        if not path.is_dir():
            return None
        return LocalFolder(path)


@dataclass(frozen=True)
class MemoryFile:
    name: str
    content: bytes

    @property
    def size(self) -> int:
        return len(self.content)

    def open(self) -> BinaryIO:
        return io.BytesIO(self.content)


@dataclass
class MemoryFolder:
    name: str
    files: dict[str, MemoryFile] = field(default_factory=dict)

    def get_file(self, name: str) -> MemoryFile | None:
        return self.files.get(validate_name(name))


class MemoryAppData:
    """In-process app data, mostly useful for tests."""

    def __init__(self):
        self.folders: dict[str, MemoryFolder] = {}

    def add_folder(self, name: str) -> MemoryFolder:
        return self.folders.setdefault(validate_name(name), MemoryFolder(name))

    def add_file(self, folder: str, name: str, content: bytes = b"") -> MemoryFile:
        file = MemoryFile(validate_name(name), content)
        self.add_folder(folder).files[name] = file
        return file

    def get_folder(self, name: str) -> MemoryFolder | None:
        return self.folders.get(validate_name(name))
