"""File management helpers over Folder and File handles."""
import logging
from datetime import datetime, timezone
from typing import Any, Callable, List, Optional

from ..config.settings import BACKUP_PREFIX, SUPPORTED_MIME_TYPES
from ..models.errors import InvalidArgumentError
from ..utils.serialization import stringify_date
from .interfaces import File, Folder

logger = logging.getLogger(__name__)


def get_files_from_folder(
    folder: Folder,
    mime_type: str,
    key: Optional[Callable[[File], Any]] = None
) -> List[File]:
    """
    Get the files of a folder with the given MIME type, sorted.

    Args:
        folder: Folder to search
        mime_type: One of the supported spreadsheet MIME types
        key: Sort key (default: file name, case-insensitive)

    Returns:
        List of files (empty if none match)

    Raises:
        InvalidArgumentError: If folder or mime_type is invalid
    """
    if not isinstance(folder, Folder):
        raise InvalidArgumentError("Parameter 'folder' is not a valid Folder")

    if mime_type not in SUPPORTED_MIME_TYPES.values():
        raise InvalidArgumentError(f"Parameter 'mime_type' is not supported: {mime_type!r}")

    try:
        files = list(folder.get_files_by_type(mime_type))
        return sorted(files, key=key or (lambda f: f.get_name().casefold()))

    except Exception as e:
        logger.error(f"Error in get_files_from_folder: {e}")
        raise


def get_or_create_subfolder(parent_folder: Folder, subfolder_name: str) -> Folder:
    """
    Get the subfolder with the given name, creating it if missing.

    Raises:
        InvalidArgumentError: If parent_folder is invalid or subfolder_name is blank
    """
    if not isinstance(parent_folder, Folder):
        raise InvalidArgumentError("Parameter 'parent_folder' is not a valid Folder")

    if not isinstance(subfolder_name, str) or not subfolder_name.strip():
        raise InvalidArgumentError("Parameter 'subfolder_name' must be a non-empty string")

    try:
        existing = parent_folder.get_folders_by_name(subfolder_name)
        if existing:
            return existing[0]

        logger.info(f"Creating folder '{subfolder_name}' in '{parent_folder.get_name()}'")
        return parent_folder.create_folder(subfolder_name)

    except Exception as e:
        logger.error(f"Error in get_or_create_subfolder: {e}")
        raise


def backup_file_to(file: File, backup_folder: Folder, prefix: Optional[str] = None) -> str:
    """
    Copy a file into a backup folder under a timestamped name.

    The copy is named '<prefix> <file name> <UTC ISO timestamp>' with ':'
    and '.' in the timestamp replaced by '-'.

    Args:
        file: File to back up
        backup_folder: Destination folder
        prefix: Name prefix (default from settings, 'Respaldo')

    Returns:
        Name of the backup copy

    Raises:
        InvalidArgumentError: If file or backup_folder is invalid
    """
    if not isinstance(file, File):
        raise InvalidArgumentError("Parameter 'file' is not a valid File")

    if not isinstance(backup_folder, Folder):
        raise InvalidArgumentError("Parameter 'backup_folder' is not a valid Folder")

    try:
        stamp = stringify_date(datetime.now(timezone.utc)).replace(':', '-').replace('.', '-')
        backup_name = f"{prefix if prefix is not None else BACKUP_PREFIX} {file.get_name()} {stamp}"
        file.make_copy(backup_name, backup_folder)
        logger.info(f"Backed up '{file.get_name()}' as '{backup_name}'")
        return backup_name

    except Exception as e:
        logger.error(f"Error in backup_file_to: {e}")
        raise


def move_file_to_folder(file: File, target_folder: Folder) -> bool:
    """
    Move a file into another folder.

    Failures (e.g. missing permissions) are logged, not raised.

    Returns:
        True if the file was moved

    Raises:
        InvalidArgumentError: If file or target_folder is invalid
    """
    if not isinstance(file, File):
        raise InvalidArgumentError("Parameter 'file' is not a valid File")

    if not isinstance(target_folder, Folder):
        raise InvalidArgumentError("Parameter 'target_folder' is not a valid Folder")

    try:
        file.move_to(target_folder)
        return True
    except Exception as e:
        logger.error(
            f"File '{file.get_name()}' could not be moved to folder "
            f"'{target_folder.get_name()}': {e}"
        )
        return False
