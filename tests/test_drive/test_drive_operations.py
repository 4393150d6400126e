"""Tests for file management helpers."""
import re
import pytest

from sheetutils.config.settings import SUPPORTED_MIME_TYPES
from sheetutils.drive import (
    LocalFile,
    LocalFolder,
    backup_file_to,
    get_files_from_folder,
    get_or_create_subfolder,
    move_file_to_folder,
)
from sheetutils.models import InvalidArgumentError

XLSX = SUPPORTED_MIME_TYPES[".xlsx"]
CSV = SUPPORTED_MIME_TYPES[".csv"]


@pytest.fixture
def folder(tmp_path):
    """Folder with a few spreadsheets and unrelated files."""
    for name in ["b.xlsx", "A.xlsx", "c.XLSX", "data.csv", "notes.txt"]:
        (tmp_path / name).write_bytes(b"content")
    (tmp_path / "Respaldos").mkdir()
    return LocalFolder(tmp_path)


class LockedFile(LocalFile):
    """File whose move is refused by the filesystem."""

    def move_to(self, folder):
        raise PermissionError("read-only")


class RemoteFile:
    """File handle of a storage service that refuses the move."""

    def get_id(self):
        return "remote-1"

    def get_name(self):
        return "ventas.xlsx"

    def get_mime_type(self):
        return XLSX

    def make_copy(self, name, folder):
        raise RuntimeError("copy not allowed")

    def move_to(self, folder):
        raise RuntimeError("permission denied by API")


class TestGetFilesFromFolder:
    """Test listing files by MIME type."""

    def test_filters_and_sorts_by_name(self, folder):
        """Test matching files are sorted case-insensitively."""
        files = get_files_from_folder(folder, XLSX)
        assert [f.get_name() for f in files] == ["A.xlsx", "b.xlsx", "c.XLSX"]

    def test_custom_sort_key(self, folder):
        """Test a caller-supplied sort key."""
        files = get_files_from_folder(folder, XLSX, key=lambda f: f.get_name()[::-1])
        assert [f.get_name() for f in files] == ["c.XLSX", "A.xlsx", "b.xlsx"]

    def test_other_type(self, folder):
        """Test another supported type."""
        assert [f.get_name() for f in get_files_from_folder(folder, CSV)] == ["data.csv"]

    def test_invalid_arguments(self, folder):
        """Test invalid folder or unsupported type."""
        with pytest.raises(InvalidArgumentError):
            get_files_from_folder("not a folder", XLSX)
        with pytest.raises(InvalidArgumentError):
            get_files_from_folder(folder, "text/plain")


class TestSubfolders:
    """Test subfolder lookup and creation."""

    def test_existing(self, folder):
        """Test an existing subfolder is returned."""
        assert get_or_create_subfolder(folder, "Respaldos").get_name() == "Respaldos"

    def test_created(self, folder):
        """Test a missing subfolder is created."""
        created = get_or_create_subfolder(folder, "Procesados")

        assert created.path.is_dir()
        assert created.path.parent == folder.path

    def test_invalid(self, folder):
        """Test blank names are rejected."""
        with pytest.raises(InvalidArgumentError):
            get_or_create_subfolder(folder, " ")

    def test_local_folder_requires_directory(self, tmp_path):
        """Test LocalFolder refuses missing paths."""
        with pytest.raises(NotADirectoryError):
            LocalFolder(tmp_path / "missing")


class TestBackupAndMove:
    """Test backup copies and moves."""

    def test_backup_name(self, folder):
        """Test the copy is timestamped without ':' or '.'."""
        backups = get_or_create_subfolder(folder, "Respaldos")
        original = LocalFile(folder.path / "A.xlsx")

        name = backup_file_to(original, backups)

        assert re.fullmatch(r"Respaldo A\.xlsx \d{4}-\d{2}-\d{2}T\d{2}-\d{2}-\d{2}-\d{3}Z", name)
        assert (backups.path / name).read_bytes() == b"content"
        assert original.path.exists()

    def test_backup_custom_prefix(self, folder):
        """Test a custom prefix."""
        backups = get_or_create_subfolder(folder, "Respaldos")
        name = backup_file_to(LocalFile(folder.path / "b.xlsx"), backups, prefix="Copia")
        assert name.startswith("Copia b.xlsx ")

    def test_backup_invalid(self, folder):
        """Test invalid handles are rejected."""
        with pytest.raises(InvalidArgumentError):
            backup_file_to("A.xlsx", folder)
        with pytest.raises(InvalidArgumentError):
            backup_file_to(LocalFile(folder.path / "A.xlsx"), "Respaldos")

    def test_move(self, folder):
        """Test a file is moved into the target folder."""
        target = get_or_create_subfolder(folder, "Procesados")
        moved = LocalFile(folder.path / "data.csv")

        assert move_file_to_folder(moved, target) is True
        assert (target.path / "data.csv").exists()
        assert not (folder.path / "data.csv").exists()
        assert moved.path == target.path / "data.csv"

    def test_move_failure_returns_false(self, folder):
        """Test filesystem errors are reported as False."""
        target = get_or_create_subfolder(folder, "Procesados")
        assert move_file_to_folder(LockedFile(folder.path / "A.xlsx"), target) is False

    def test_move_backend_error_returns_false(self, folder):
        """Test errors from non-filesystem backends are reported as False."""
        target = get_or_create_subfolder(folder, "Procesados")
        assert move_file_to_folder(RemoteFile(), target) is False

    def test_move_invalid(self, folder):
        """Test invalid handles are rejected."""
        with pytest.raises(InvalidArgumentError):
            move_file_to_folder(LocalFile(folder.path / "A.xlsx"), None)
