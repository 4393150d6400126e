"""Capability interfaces for file storage collaborators."""
from typing import List, Protocol, runtime_checkable


@runtime_checkable
class File(Protocol):
    """A stored file."""

    def get_id(self) -> str: ...

    def get_name(self) -> str: ...

    def get_mime_type(self) -> str: ...

    def make_copy(self, name: str, folder: "Folder") -> "File": ...

    def move_to(self, folder: "Folder") -> None: ...


@runtime_checkable
class Folder(Protocol):
    """A folder holding files and subfolders."""

    def get_id(self) -> str: ...

    def get_name(self) -> str: ...

    def get_files_by_type(self, mime_type: str) -> List[File]: ...

    def get_folders_by_name(self, name: str) -> List["Folder"]: ...

    def create_folder(self, name: str) -> "Folder": ...
