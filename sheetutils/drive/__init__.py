"""File storage interfaces, helpers and the local filesystem backend."""
from .interfaces import File, Folder
from .operations import get_files_from_folder, get_or_create_subfolder, backup_file_to, move_file_to_folder
from .local import LocalFile, LocalFolder

__all__ = [
    'File',
    'Folder',
    'get_files_from_folder',
    'get_or_create_subfolder',
    'backup_file_to',
    'move_file_to_folder',
    'LocalFile',
    'LocalFolder'
]
