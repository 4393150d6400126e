"""Local filesystem backend for the Folder and File interfaces."""
import logging
import mimetypes
import shutil
from pathlib import Path
from typing import List, Union

from ..config.settings import SUPPORTED_MIME_TYPES

logger = logging.getLogger(__name__)


def guess_mime_type(path: Path) -> str:
    """MIME type from the file suffix, preferring the spreadsheet table."""
    suffix = path.suffix.lower()
    if suffix in SUPPORTED_MIME_TYPES:
        return SUPPORTED_MIME_TYPES[suffix]
    mime_type, _ = mimetypes.guess_type(path.name)
    return mime_type or "application/octet-stream"


class LocalFile:
    """A file on the local filesystem."""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def __repr__(self) -> str:
        return f"LocalFile({str(self.path)!r})"

    def get_id(self) -> str:
        return str(self.path.resolve())

    def get_name(self) -> str:
        return self.path.name

    def get_mime_type(self) -> str:
        return guess_mime_type(self.path)

    def make_copy(self, name: str, folder: "LocalFolder") -> "LocalFile":
        """Copy the file into folder under a new name."""
        destination = folder.path / name
        shutil.copy2(self.path, destination)
        logger.debug(f"Copied {self.path} -> {destination}")
        return LocalFile(destination)

    def move_to(self, folder: "LocalFolder") -> None:
        """Move the file into folder, keeping its name."""
        destination = folder.path / self.path.name
        shutil.move(str(self.path), str(destination))
        logger.debug(f"Moved {self.path} -> {destination}")
        self.path = destination


class LocalFolder:
    """A directory on the local filesystem."""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        if not self.path.is_dir():
            raise NotADirectoryError(f"Not a directory: {self.path}")

    def __repr__(self) -> str:
        return f"LocalFolder({str(self.path)!r})"

    def get_id(self) -> str:
        return str(self.path.resolve())

    def get_name(self) -> str:
        return self.path.name

    def get_files_by_type(self, mime_type: str) -> List[LocalFile]:
        return [
            LocalFile(entry) for entry in self.path.iterdir()
            if entry.is_file() and guess_mime_type(entry) == mime_type
        ]

    def get_folders_by_name(self, name: str) -> List["LocalFolder"]:
        candidate = self.path / name
        return [LocalFolder(candidate)] if candidate.is_dir() else []

    def create_folder(self, name: str) -> "LocalFolder":
        candidate = self.path / name
        candidate.mkdir()
        return LocalFolder(candidate)
